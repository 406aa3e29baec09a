from pathlib import Path
from typing import Optional
from logging import getLogger

import click

from . import exc
from .logging import configure_logging, LOG_LEVELS
from .builder import PARAM_SEPARATOR
from .config import load_config, default_config_file, builder_from_config
from .version import get_version

logger = getLogger(__name__)


@click.command("avatarurl", help="Print the gravatar url for EMAIL")
@click.argument("email")
@click.option(
    "-f",
    "--config-file",
    default=None,
    help="Path to config file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("-s", "--size", default=None, help="Size in pixels (0-512)")
@click.option(
    "-d",
    "--default-image",
    default=None,
    help="Built in default (404, mm, identicon, monsterid, wavatar, retro) or a url",
)
@click.option("-r", "--rating", default=None, help="Maximum rating: g, pg, r or x")
@click.option(
    "--secure/--insecure", default=None, help="Use https://secure.gravatar.com"
)
@click.option(
    "--no-hash",
    is_flag=True,
    default=False,
    help="EMAIL is already a hash, use it as-is",
)
@click.option(
    "--unescape",
    is_flag=True,
    default=False,
    help="Separate parameters with '&' rather than '&amp;'",
)
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
)
@click.version_option(version=get_version(), prog_name="avatarurl")
def url_cli(
    email: str,
    config_file: Optional[Path],
    size: Optional[str],
    default_image: Optional[str],
    rating: Optional[str],
    secure: Optional[bool],
    no_hash: bool,
    unescape: bool,
    log_level: str,
) -> None:
    configure_logging(log_level.upper())

    if config_file is None:
        config_file = default_config_file()

    try:
        builder = builder_from_config(load_config(config_file))
        if size is not None:
            builder.set_size(size)
        if default_image is not None:
            builder.set_default_image(default_image)
        if rating is not None:
            builder.set_max_rating(rating)
    except exc.AvatarUrlException as e:
        raise click.UsageError(str(e))

    if secure is True:
        builder.enable_secure_protocol()
    elif secure is False:
        builder.disable_secure_protocol()

    logger.info("building url with %s", builder)
    url = builder.build_url(email, hash_email=not no_hash)
    if unescape:
        url = url.replace(PARAM_SEPARATOR, "&")
    click.echo(url)
