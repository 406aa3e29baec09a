from logging import getLogger
from pathlib import Path
from typing import Optional
from dataclasses import dataclass

import toml

from .builder import AvatarUrlBuilder
from .exc import ConfigException

logger = getLogger(__name__)


@dataclass
class Config:
    """A typecheckable config object.

    Values here are not validated until they're passed to a builder (see
    builder_from_config).

    """

    size: int = 80
    default_image: Optional[str] = None
    max_rating: str = "g"
    secure: bool = False


__config__: Optional[Config] = None


def load_config(config_file: Path) -> Config:
    """Loads the configuration at the given path."""
    logger.info("loading config from %s", config_file)
    if config_file.exists():
        with open(config_file, encoding="utf-8") as config_f:
            try:
                as_dict = toml.load(config_f)
            except toml.TomlDecodeError as e:
                raise ConfigException(f"unable to parse {config_file}: {e}") from e
    else:
        logger.warning("config file ('%s') not found, using defaults", config_file)
        as_dict = {}
    return Config(
        size=as_dict.get("size", 80),
        default_image=as_dict.get("default_image"),
        max_rating=as_dict.get("max_rating", "g"),
        secure=as_dict.get("secure", False),
    )


def default_config_file() -> Path:
    """Returns the location of the default config file"""
    return Path.home() / ".avatarurl.toml"


def get_config() -> Config:
    """Returns the config.

    The config does not change while the program is running, but in order
    to make it easy to test, don't call this function from the top-level (that
    makes it hard to mock).

    """
    global __config__
    if __config__ is None:
        __config__ = load_config(default_config_file())

    return __config__


def builder_from_config(config: Config) -> AvatarUrlBuilder:
    """Returns a builder with the config applied.

    Raises the usual ValidationErrors if the config contains bad values.

    """
    builder = (
        AvatarUrlBuilder()
        .set_size(config.size)
        .set_max_rating(config.max_rating)
        .set_default_image(config.default_image)
    )
    if config.secure:
        builder.enable_secure_protocol()
    return builder
