class AvatarUrlException(Exception):
    """ABC for avatarurl exceptions to make it possible to catch them collectively"""


class ValidationError(AvatarUrlException):
    """A setting was given a value it can't take"""


class InvalidSizeException(ValidationError):
    def __init__(self, size: object, message: str) -> None:
        self.size = size
        super().__init__(message)


class InvalidRatingException(ValidationError):
    def __init__(self, rating: object) -> None:
        self.rating = rating
        super().__init__(
            f'Invalid rating "{rating}" specified, only "g", "pg", "r", or "x" are allowed to be used.'
        )


class InvalidDefaultImageException(ValidationError):
    def __init__(self, image: object) -> None:
        self.image = image
        super().__init__(
            'The default image specified is not a recognized gravatar "default" and is not a valid URL'
        )


class ConfigException(AvatarUrlException):
    pass
