from pathlib import Path

import pytest
import toml
from click.testing import CliRunner

from avatarurl.cli import url_cli
from avatarurl.version import get_version

from .utils import FOO_BAR_HASH, GRAVATAR_DOCS_HASH


@pytest.fixture()
def config_file(tmpdir):
    config_file = Path(tmpdir / "config.toml")
    config_file.touch()
    return config_file


def invoke(*args):
    runner = CliRunner()
    return runner.invoke(url_cli, [str(arg) for arg in args])


def test_cli__defaults(config_file):
    result = invoke("-f", config_file, "foo@bar.com")
    assert result.exit_code == 0, result.output
    assert (
        result.output == f"http://www.gravatar.com/avatar/{FOO_BAR_HASH}?s=80&amp;r=g\n"
    )


def test_cli__options(config_file):
    result = invoke(
        "-f",
        config_file,
        "--size",
        "48",
        "--rating",
        "R",
        "--default-image",
        "monsterid",
        "--secure",
        "--unescape",
        "foo@bar.com",
    )
    assert result.exit_code == 0, result.output
    assert result.output == (
        f"https://secure.gravatar.com/avatar/{FOO_BAR_HASH}?s=48&r=r&d=monsterid\n"
    )


def test_cli__options_override_config_file(tmpdir):
    config_file = Path(tmpdir / "config.toml")
    with open(config_file, "w") as config_f:
        toml.dump({"size": 300, "max_rating": "x", "secure": True}, config_f)

    result = invoke("-f", config_file, "--size", "10", "--insecure", "foo@bar.com")
    assert result.exit_code == 0, result.output
    assert (
        result.output == f"http://www.gravatar.com/avatar/{FOO_BAR_HASH}?s=10&amp;r=x\n"
    )


def test_cli__no_hash(config_file):
    result = invoke("-f", config_file, "--no-hash", GRAVATAR_DOCS_HASH)
    assert result.exit_code == 0, result.output
    assert result.output.startswith(
        f"http://www.gravatar.com/avatar/{GRAVATAR_DOCS_HASH}?"
    )


def test_cli__empty_email(config_file):
    result = invoke("-f", config_file, "")
    assert result.exit_code == 0, result.output
    assert result.output == "\n"


@pytest.mark.parametrize(
    "option, value",
    [("--size", "1000"), ("--size", "big"), ("--rating", "nc-17"), ("-d", "blank")],
)
def test_cli__invalid_options(config_file, option, value):
    result = invoke("-f", config_file, option, value, "foo@bar.com")
    assert result.exit_code == 2
    assert "Error" in result.output


def test_cli__invalid_config_file(tmpdir):
    config_file = Path(tmpdir / "config.toml")
    with open(config_file, "w") as config_f:
        toml.dump({"size": 9000}, config_f)

    result = invoke("-f", config_file, "foo@bar.com")
    assert result.exit_code == 2
    assert "512 pixels" in result.output


def test_cli__unescape_only_touches_separators(config_file):
    result = invoke("-f", config_file, "--no-hash", "--unescape", "abc&lt;d")
    assert result.exit_code == 0, result.output
    assert result.output == "http://www.gravatar.com/avatar/abc&lt;d?s=80&r=g\n"


def test_cli__debug_logging(config_file, caplog):
    result = invoke("-f", config_file, "--log-level", "DEBUG", "foo@bar.com")
    assert result.exit_code == 0, result.output
    assert any(
        record.name == "avatarurl.builder"
        and record.getMessage().startswith("rebuilt query string: ?s=80&amp;r=g")
        for record in caplog.records
    )


def test_cli__default_log_level_hides_debug(config_file, caplog):
    result = invoke("-f", config_file, "foo@bar.com")
    assert result.exit_code == 0, result.output
    assert not any(record.name == "avatarurl.builder" for record in caplog.records)


def test_cli__version():
    result = invoke("--version")
    assert result.exit_code == 0, result.output
    assert result.output == f"avatarurl, version {get_version()}\n"
