import enum


@enum.unique
class ErrorKind(str, enum.Enum):
    """Enumeration of the reasons a conversion can fail."""

    UNSPECIFIED = "unspecified"
    NO_URL = "no_url"
    INVALID_URL = "invalid_url"

    def __repr__(self):
        return self.name

    def __str__(self):
        return self.name


ErrorKind.UNSPECIFIED.__doc__ = "Failure reason not specified (default)"
ErrorKind.NO_URL.__doc__ = "No http:// or https:// URL was found in the command"
ErrorKind.INVALID_URL.__doc__ = "A URL was found but it is not a well-formed absolute URL"


class ConversionError(Exception):
    """Base class for curl2vro exceptions."""

    _kind = ErrorKind.UNSPECIFIED

    @property
    def kind(self) -> ErrorKind:
        return self._kind


class ParseError(ConversionError, ValueError):
    """The curl command could not be parsed into a request."""


class NoURLError(ParseError):
    """The curl command does not contain a URL."""

    _kind = ErrorKind.NO_URL

    def __init__(self, message: str = "URL not found"):
        super().__init__(message)


class InvalidURLError(ParseError):
    """The curl command contains a URL that is not well-formed."""

    _kind = ErrorKind.INVALID_URL

    def __init__(self, url: str, reason: str = ""):
        message = f"invalid URL in curl command: {url!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.url = url


class RenderError(ConversionError, ValueError):
    """The request descriptor cannot be rendered into a vRO script."""

    _kind = ErrorKind.INVALID_URL


def error_kind(error: BaseException) -> ErrorKind:
    """Returns the ErrorKind that corresponds to the specified error."""
    if isinstance(error, ConversionError):
        return error.kind
    return ErrorKind.UNSPECIFIED
