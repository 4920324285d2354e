import pytest

from curl2vro.error import (
    ConversionError,
    ErrorKind,
    InvalidURLError,
    NoURLError,
    ParseError,
    RenderError,
    error_kind,
)


def test_error_kind_no_url():
    assert error_kind(NoURLError()) is ErrorKind.NO_URL


def test_error_kind_invalid_url():
    assert error_kind(InvalidURLError("https://")) is ErrorKind.INVALID_URL


def test_error_kind_render():
    assert error_kind(RenderError("bad")) is ErrorKind.INVALID_URL


def test_error_kind_parse_error():
    assert error_kind(ParseError("bad")) is ErrorKind.UNSPECIFIED


def test_error_kind_other_exception():
    assert error_kind(ValueError()) is ErrorKind.UNSPECIFIED
    assert error_kind(BaseException()) is ErrorKind.UNSPECIFIED


@pytest.mark.parametrize(
    "error", [NoURLError(), InvalidURLError("http://"), RenderError("bad")]
)
def test_errors_are_value_errors(error):
    assert isinstance(error, ConversionError)
    assert isinstance(error, ValueError)


def test_parse_and_render_errors_are_distinct():
    assert not issubclass(RenderError, ParseError)
    assert not issubclass(ParseError, RenderError)


def test_invalid_url_message():
    error = InvalidURLError("http://:80", "missing host")
    assert error.url == "http://:80"
    assert str(error) == "invalid URL in curl command: 'http://:80' (missing host)"


def test_error_kind_str():
    assert str(ErrorKind.NO_URL) == "NO_URL"
    assert repr(ErrorKind.INVALID_URL) == "INVALID_URL"
