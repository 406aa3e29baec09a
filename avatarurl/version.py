from contextlib import closing

import importlib_resources


def get_version() -> str:
    """Returns the version from the VERSION file shipped inside the package."""
    version_file = importlib_resources.files("avatarurl") / "VERSION"
    with closing(version_file.open("r")) as text_f:
        return text_f.read().strip()
