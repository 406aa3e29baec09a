import pytest
from flask import Flask

from avatarurl.builder import AvatarUrlBuilder
from avatarurl import web


@pytest.fixture(scope="function")
def builder():
    return AvatarUrlBuilder()


@pytest.fixture(scope="function")
def app():
    a = Flask(__name__)
    a.config["TESTING"] = True
    web.init_app(a, AvatarUrlBuilder().set_default_image("identicon"))
    return a
