from dataclasses import dataclass
from typing import Union
from typing_extensions import Literal
import enum


@enum.unique
class Rating(enum.Enum):
    """Gravatar's content ratings, from least to most explicit."""

    G = "g"
    PG = "pg"
    R = "r"
    X = "x"

    @classmethod
    def from_string(cls, rating_str: str) -> "Rating":
        return cls(rating_str.lower())


@enum.unique
class DefaultImage(enum.Enum):
    """The fallback images built in to gravatar.

    NOT_FOUND means "return a 404 instead of an image".

    """

    NOT_FOUND = "404"
    MYSTERY_MAN = "mm"
    IDENTICON = "identicon"
    MONSTERID = "monsterid"
    WAVATAR = "wavatar"
    RETRO = "retro"

    @classmethod
    def is_builtin(cls, image_str: str) -> bool:
        return image_str in _BUILTIN_DEFAULT_IMAGES


_BUILTIN_DEFAULT_IMAGES = frozenset(di.value for di in DefaultImage)


@dataclass(frozen=True)
class AvatarSettings:
    """An immutable snapshot of a builder's settings.

    default_image is either False (no default image), the value of a
    DefaultImage or an already percent-encoded url.

    """

    size: int = 80
    default_image: Union[Literal[False], str] = False
    max_rating: str = Rating.G.value
    secure: bool = False
