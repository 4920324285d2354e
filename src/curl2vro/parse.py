"""Extraction of HTTP request components from curl commands.

A curl command is not parsed with a shell grammar. Instead, each option
family (URL, method, headers, body, basic auth, form fields) has its own
extractor. The options that take a value are scanned once from left to
right, so the content of a quoted value is never mistaken for an option.
The extractors are independent of each other; parse combines their results
and applies the defaulting rules (e.g. POST when a body is present).

Options are only recognized at the start of a token, and quoted values must
be closed with the same quote character that opened them.
"""

import base64
import json
import logging
import re
from typing import Dict, List, Optional, Pattern, Tuple

from curl2vro.error import InvalidURLError, NoURLError
from curl2vro.request import RequestDescriptor, split_url

logger = logging.getLogger(__name__)

HEADER_OPTIONS = ("-H", "--header")
DATA_OPTIONS = ("-d", "--data", "--data-raw", "--data-binary", "--data-ascii")
URLENCODE_OPTIONS = ("--data-urlencode",)
USER_OPTIONS = ("-u", "--user")
FORM_OPTIONS = ("-F", "--form")

# Options whose values may contain URLs that are not the request target.
OTHER_VALUE_OPTIONS = (
    "-e",
    "--referer",
    "-A",
    "--user-agent",
    "-b",
    "--cookie",
    "-x",
    "--proxy",
)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _option(*names: str) -> str:
    """Pattern matching one of the named options at the start of a token,
    followed by the separator that precedes its value. Long options accept
    both "--name value" and "--name=value". The option is captured in the
    "option" group."""
    short = "|".join(re.escape(n) for n in names if not n.startswith("--"))
    long = "|".join(re.escape(n) for n in names if n.startswith("--"))
    alternatives = []
    if short:
        alternatives.append(rf"(?:{short})(?=\s)")
    if long:
        alternatives.append(rf"(?:{long})(?=[\s=])")
    return r"(?<!\S)(?P<option>" + "|".join(alternatives) + r")(?:\s+|=)"


def _quoted(inner: str = "ANY") -> str:
    """Pattern matching a single- or double-quoted string whose content
    matches inner, where ANY stands for any run of characters other than the
    closing quote. The content is captured in the "sq" or "dq" group."""
    single = inner.replace("ANY", "[^']*")
    double = inner.replace("ANY", '[^"]*')
    return rf"""(?:'(?P<sq>{single})'|"(?P<dq>{double})")"""


_VALUE = r"(?:" + _quoted() + r"""|(?P<bare>[^\s'"]\S*))"""

_COMMAND = re.compile(r"(?<!\S)curl(?!\S)")

_URL = re.compile(
    r"(?<![^\s=])"
    r"""(?:'(?P<sq>https?://[^']*)'|"(?P<dq>https?://[^"]*)"|(?P<bare>https?://[^\s'"]*))"""
)

_METHOD = re.compile(
    r"(?<!\S)(?:-X\s*|--request(?:\s+|=))"
    r"""(?P<q>['"]?)(?P<method>[A-Za-z]+)(?P=q)(?!\S)"""
)

# Every option that takes a value, with its value.
_OPTION_VALUE = re.compile(
    _option(
        *HEADER_OPTIONS,
        *DATA_OPTIONS,
        *URLENCODE_OPTIONS,
        *USER_OPTIONS,
        *FORM_OPTIONS,
        *OTHER_VALUE_OPTIONS,
    )
    + _VALUE
)

# Candidate body extractors, tried in order against each data option until
# one matches. The quoted JSON form must come before the generic quoted form,
# and unquoted values are only considered when no quoted payload was found.
BODY_EXTRACTORS: List[Tuple[str, Pattern[str]]] = [
    ("json", re.compile(_option(*DATA_OPTIONS) + _quoted(r"\{ANY\}"))),
    ("quoted", re.compile(_option(*DATA_OPTIONS) + _quoted())),
    (
        "urlencode",
        re.compile(_option(*URLENCODE_OPTIONS) + _quoted(r"""[^=\s'"]+=ANY""")),
    ),
    ("any", re.compile(_option(*DATA_OPTIONS, *URLENCODE_OPTIONS) + _VALUE)),
]


def _value(match: re.Match) -> str:
    groups = match.groupdict()
    for name in ("sq", "dq", "bare"):
        if groups.get(name) is not None:
            return groups[name]
    return ""


def _mask(text: str, pattern: Pattern[str]) -> str:
    """Blank out every match of pattern, preserving offsets."""
    return pattern.sub(lambda m: " " * len(m.group(0)), text)


def _options(text: str, names: Tuple[str, ...]) -> List[re.Match]:
    """Return the named options of the command with their values.

    Options are scanned from left to right and each match consumes the whole
    value, so option-looking text inside a quoted value is never returned.
    """
    return [m for m in _OPTION_VALUE.finditer(text) if m.group("option") in names]


def command_text(raw: str) -> str:
    """Return the part of the raw input that follows the curl keyword, or
    the whole input if the keyword is missing."""
    match = _COMMAND.search(raw)
    if match is None:
        return raw
    return raw[match.end() :]


def extract_url(text: str) -> str:
    """Return the first http or https URL of the command.

    Values of options such as -H or -d are skipped, so that a URL embedded
    in a header or a payload is never taken for the target of the request.

    Raises:
        NoURLError: if the command contains no URL.
        InvalidURLError: if the first URL is not well-formed.
    """
    match = _URL.search(_mask(text, _OPTION_VALUE))
    if match is None:
        raise NoURLError()
    url = _value(match)
    try:
        split_url(url)
    except ValueError as e:
        raise InvalidURLError(url, str(e)) from e
    return url


def extract_method(text: str) -> Optional[str]:
    """Return the uppercased method set with -X or --request, or None if
    the command does not set one explicitly."""
    match = _METHOD.search(_mask(text, _OPTION_VALUE))
    if match is None:
        return None
    return match.group("method").upper()


def extract_headers(text: str) -> Dict[str, str]:
    """Return the headers set with -H or --header.

    Header lines without a colon, or with an empty name, are discarded. When
    the same name appears more than once, the last value wins.
    """
    headers: Dict[str, str] = {}
    for match in _options(text, HEADER_OPTIONS):
        line = _value(match)
        key, sep, value = line.partition(":")
        key = key.strip()
        if not sep or not key:
            logger.debug("ignoring malformed header: %r", line)
            continue
        headers[key] = value.strip()
    return headers


def extract_body(text: str) -> Optional[str]:
    """Return the request body set with one of the data options, or None.

    The candidates of BODY_EXTRACTORS are tried in order and the first match
    wins; the returned body is the content of the quoted value.
    """
    tokens = [m.group(0) for m in _options(text, DATA_OPTIONS + URLENCODE_OPTIONS)]
    for name, pattern in BODY_EXTRACTORS:
        for token in tokens:
            match = pattern.fullmatch(token)
            if match is not None:
                logger.debug("extracted request body with the %s extractor", name)
                return _value(match)
    return None


def extract_basic_auth(text: str) -> Optional[str]:
    """Return the value of a Basic Authorization header built from the
    credentials given with -u or --user, or None.

    Credentials without a password (no colon) are ignored. If the option is
    repeated, the last one wins.
    """
    credentials = None
    for match in _options(text, USER_OPTIONS):
        credentials = _value(match)
    if credentials is None:
        return None
    if ":" not in credentials:
        logger.debug("ignoring credentials without a password")
        return None
    token = base64.b64encode(credentials.encode()).decode()
    return f"Basic {token}"


def extract_form(text: str) -> Dict[str, str]:
    """Return the key=value fields set with -F or --form, in order of
    appearance. Fields without an equal sign are discarded."""
    form: Dict[str, str] = {}
    for match in _options(text, FORM_OPTIONS):
        key, sep, value = _value(match).partition("=")
        if not sep or not key:
            continue
        form[key] = value
    return form


def parse(raw: str) -> RequestDescriptor:
    """Parse a curl command into a RequestDescriptor.

    Args:
        raw: The curl command, e.g. "curl -X POST https://example.com -d '{}'".

    Returns:
        RequestDescriptor: The request described by the command.

    Raises:
        NoURLError: if the command contains no http or https URL.
        InvalidURLError: if the URL of the command is not well-formed.
    """
    text = command_text(raw)

    url = extract_url(text)
    method = extract_method(text)
    headers = extract_headers(text)
    body = extract_body(text)

    authorization = extract_basic_auth(text)
    if authorization is not None:
        for key in [k for k in headers if k.lower() == "authorization"]:
            logger.debug("basic auth credentials override the %s header", key)
            del headers[key]
        headers["Authorization"] = authorization

    if body is None:
        form = extract_form(text)
        if form:
            logger.debug("using %d form field(s) as request body", len(form))
            body = json.dumps(form, separators=(",", ":"), ensure_ascii=False)
            if not any(key.lower() == "content-type" for key in headers):
                headers["Content-Type"] = FORM_CONTENT_TYPE

    if method is None:
        method = "GET" if body is None else "POST"
        logger.debug("no explicit method, defaulting to %s", method)

    logger.debug(
        "parsed %s %s with %d header(s) and %s body",
        method,
        url,
        len(headers),
        "no" if body is None else f"a {len(body)} byte",
    )
    return RequestDescriptor(url=url, method=method, headers=headers, body=body)
