from logging import getLogger
from typing import Optional, Union
from typing_extensions import Literal
from urllib.parse import quote, unquote, urlsplit
import copy
import hashlib
import re

from . import exc
from .value_objs import AvatarSettings, DefaultImage, Rating

logger = getLogger(__name__)

HTTP_URL = "http://www.gravatar.com/avatar/"
HTTPS_URL = "https://secure.gravatar.com/avatar/"

MIN_SIZE = 0
MAX_SIZE = 512

# the urls go straight into the src attribute of an <img> tag
PARAM_SEPARATOR = "&amp;"

# hash used when there is no email at all
NULL_HASH = "0" * 32

_DIGITS_REGEX = re.compile(r"[0-9]+")
_URL_REGEX = re.compile(r"[a-z][a-z0-9+.-]*://\S+")


def hash_email(email: str) -> str:
    """Returns the hash gravatar uses to identify an email address."""
    return hashlib.md5(
        email.strip().lower().encode("utf-8"), usedforsecurity=False
    ).hexdigest()


def _is_absolute_url(text_string: str) -> bool:
    if _URL_REGEX.fullmatch(text_string) is None:
        return False
    try:
        return bool(urlsplit(text_string).hostname)
    except ValueError:
        return False


def _parse_size(size: Union[int, str]) -> int:
    # bool is a subclass of int but True is not a size
    if isinstance(size, bool) or not isinstance(size, (int, str)):
        raise exc.InvalidSizeException(size, "Avatar size specified must be an integer")
    if isinstance(size, str):
        if _DIGITS_REGEX.fullmatch(size) is None:
            raise exc.InvalidSizeException(
                size, "Avatar size specified must be an integer"
            )
        size = int(size)
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise exc.InvalidSizeException(
            size,
            f"Avatar size must be within {MIN_SIZE} pixels and {MAX_SIZE} pixels",
        )
    return size


class AvatarUrlBuilder:
    """Builds gravatar urls for email addresses.

    Settings are changed with the set_* methods, which validate their input
    and return the builder so that calls can be chained:

    >>> builder = AvatarUrlBuilder().set_size(40).set_default_image("retro")
    >>> builder.build_url("someone@example.com")  # doctest: +ELLIPSIS
    'http://www.gravatar.com/avatar/...?s=40&amp;r=g&amp;d=retro'

    The query string is cached between calls.  There is no locking, so a
    builder shared between threads should be copy()'d before being changed.

    """

    def __init__(self) -> None:
        self._size: int = 80
        self._default_image: Union[Literal[False], str] = False
        self._max_rating: str = Rating.G.value
        self._use_secure_protocol: bool = False
        self._query_string_cache: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: AvatarSettings) -> "AvatarUrlBuilder":
        builder = cls()
        builder.set_size(settings.size)
        builder.set_max_rating(settings.max_rating)
        if settings.default_image is False:
            builder.set_default_image(False)
        else:
            # custom urls are kept encoded - decode so that they can be
            # validated again
            builder.set_default_image(unquote(settings.default_image))
        if settings.secure:
            builder.enable_secure_protocol()
        return builder

    def settings(self) -> AvatarSettings:
        return AvatarSettings(
            size=self._size,
            default_image=self._default_image,
            max_rating=self._max_rating,
            secure=self._use_secure_protocol,
        )

    def copy(self) -> "AvatarUrlBuilder":
        # every attribute is immutable so a shallow copy is independent
        return copy.copy(self)

    def get_size(self) -> int:
        return self._size

    def set_size(self, size: Union[int, str]) -> "AvatarUrlBuilder":
        """Set the size (in pixels) of the (square) avatar.

        Accepts ints or strings of digits, between 0 and 512.  On failure the
        current size is left as it was.

        """
        self._size = _parse_size(size)
        self._query_string_cache = None
        return self

    def get_default_image(self) -> Union[Literal[False], str]:
        return self._default_image

    def set_default_image(
        self, image: Union[None, Literal[False], str, DefaultImage]
    ) -> "AvatarUrlBuilder":
        """Set the image gravatar serves when there is no avatar for an email.

        That is either one of gravatar's built in defaults (see DefaultImage)
        or the url of an image, which is stored percent-encoded.  False (or
        None) turns the default image off.

        """
        if image is None or image is False:
            self._default_image = False
        else:
            if isinstance(image, DefaultImage):
                image = image.value
            if not isinstance(image, str):
                raise exc.InvalidDefaultImageException(image)
            image = image.lower()
            if DefaultImage.is_builtin(image):
                self._default_image = image
            elif _is_absolute_url(image):
                self._default_image = quote(image, safe="")
            else:
                raise exc.InvalidDefaultImageException(image)
        self._query_string_cache = None
        return self

    def get_max_rating(self) -> str:
        return self._max_rating

    def set_max_rating(self, rating: Union[str, Rating]) -> "AvatarUrlBuilder":
        if isinstance(rating, Rating):
            rating = rating.value
        if not isinstance(rating, str):
            raise exc.InvalidRatingException(rating)
        try:
            self._max_rating = Rating.from_string(rating).value
        except ValueError:
            raise exc.InvalidRatingException(rating.lower())
        self._query_string_cache = None
        return self

    def using_secure_protocol(self) -> bool:
        return self._use_secure_protocol

    def enable_secure_protocol(self) -> "AvatarUrlBuilder":
        self._use_secure_protocol = True
        return self

    def disable_secure_protocol(self) -> "AvatarUrlBuilder":
        self._use_secure_protocol = False
        return self

    def hash_email(self, email: str) -> str:
        return hash_email(email)

    def build_url(self, email: str = "", hash_email: bool = True) -> str:
        """Returns the avatar url for the given email.

        If hash_email is False the email is put into the url as-is, for callers
        who already have the hash.  An empty email means no avatar is wanted
        and gives an empty string.

        """
        if not email:
            return ""
        return self._assemble(email, hash_email)

    def get_url(self, email: str = "", hash_email: bool = True) -> str:
        if not email:
            return ""
        return self.build_url(email, hash_email)

    def build_default_url(self) -> str:
        """Returns the url of the default image, forced by f=y.

        This is what gravatar calls a "null" request, useful for anonymous
        users.

        """
        return self._assemble("", True)

    def _query_string(self) -> str:
        if self._query_string_cache is None:
            params = [f"s={self._size}", f"r={self._max_rating}"]
            if self._default_image:
                params.append(f"d={self._default_image}")
            self._query_string_cache = "?" + PARAM_SEPARATOR.join(params)
            logger.debug("rebuilt query string: %s", self._query_string_cache)
        return self._query_string_cache

    def _assemble(self, email: str, hash_email: bool) -> str:
        url = HTTPS_URL if self._use_secure_protocol else HTTP_URL

        if hash_email and email:
            url += self.hash_email(email)
        elif email:
            url += email
        else:
            url += NULL_HASH

        query_string = self._query_string()

        tail = ""
        if not email:
            tail = PARAM_SEPARATOR + "f=y" if query_string else "?f=y"

        return url + query_string + tail

    def __repr__(self) -> str:
        return f"<AvatarUrlBuilder {self.settings()}>"
