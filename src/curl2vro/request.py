import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional
from urllib.parse import SplitResult, urlsplit

from typing_extensions import TypeAlias

Headers: TypeAlias = Mapping[str, str]
"""HTTP header names mapped to their values."""

SCHEMES = ("http", "https")

DEFAULT_PORTS = {"http": 80, "https": 443}

_METHOD = re.compile(r"[A-Z]+")


def split_url(url: str) -> SplitResult:
    """Split an absolute http(s) URL into its components.

    Raises:
        ValueError: if the URL is empty, does not use the http or https
            scheme, has no host, or has an invalid port.
    """
    if not url:
        raise ValueError("URL is empty")
    if any(c.isspace() for c in url):
        raise ValueError("URL contains whitespace")
    result = urlsplit(url)
    if result.scheme not in SCHEMES:
        raise ValueError(f"unsupported scheme: '{result.scheme}'")
    if not result.hostname:
        raise ValueError("missing host")
    # Accessing the port validates it.
    result.port
    return result


@dataclass(frozen=True)
class RequestDescriptor:
    """A normalized representation of the HTTP request described by a curl
    command.

    Instances are immutable: the headers are exposed as a read-only mapping.
    The URL is not validated on construction, see split_url.
    """

    url: str
    method: str = "GET"
    headers: Headers = field(default_factory=dict)
    body: Optional[str] = None

    def __post_init__(self):
        if not _METHOD.fullmatch(self.method):
            raise ValueError(f"invalid HTTP method: {self.method!r}")
        headers = dict(self.headers)
        if "" in headers:
            raise ValueError("header names must not be empty")
        object.__setattr__(self, "headers", MappingProxyType(headers))

    def __hash__(self):
        return hash((self.url, self.method, frozenset(self.headers.items()), self.body))

    @property
    def hostname(self) -> str:
        return split_url(self.url).hostname or ""

    @property
    def origin(self) -> str:
        """Scheme, host and non-default port of the URL, e.g.
        https://api.example.com:8443."""
        result = split_url(self.url)
        host = result.hostname or ""
        if ":" in host:
            host = f"[{host}]"
        port = result.port
        if port is not None and port != DEFAULT_PORTS[result.scheme]:
            host = f"{host}:{port}"
        return f"{result.scheme}://{host}"

    @property
    def path(self) -> str:
        """Path and query string of the URL."""
        result = split_url(self.url)
        path = result.path or "/"
        if result.query:
            path += "?" + result.query
        return path

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "method": self.method,
            "headers": dict(self.headers),
            "body": self.body,
        }
