"""Flask integration: makes gravatar urls available in jinja templates.

    <img src="{{ gravatar_url(user.email, size=40) }}">

or, as a filter:

    <img src="{{ user.email|gravatar_url }}">

"""
from logging import getLogger
from typing import Optional, Union

from flask import Blueprint, Flask, current_app
from markupsafe import Markup

from .builder import AvatarUrlBuilder
from .config import get_config, builder_from_config

logger = getLogger(__name__)

bp = Blueprint("avatarurl", __name__)

EXTENSION_KEY = "avatarurl"


def init_app(app: Flask, builder: Optional[AvatarUrlBuilder] = None) -> None:
    """Register the template helpers on the app.

    If no builder is given, one is made from the config file.  The builder is
    only ever read from while handling requests.

    """
    if builder is None:
        builder = builder_from_config(get_config())
    app.extensions[EXTENSION_KEY] = builder
    app.register_blueprint(bp)
    logger.info("registered gravatar helpers with %s", builder)


def get_builder() -> AvatarUrlBuilder:
    return current_app.extensions[EXTENSION_KEY]


@bp.app_template_global("gravatar_url")
@bp.app_template_filter("gravatar_url")
def gravatar_url(
    email: Optional[str], size: Optional[Union[int, str]] = None
) -> Markup:
    """Returns the url as Markup - it is already escaped for use in html."""
    builder = get_builder()
    if size is not None:
        builder = builder.copy().set_size(size)
    return Markup(builder.build_url(email or ""))
