"""Rendering of request descriptors into vRealize Orchestrator scripts."""

import json
import logging
import textwrap
from datetime import date, datetime, timezone
from string import Template
from typing import Optional

from curl2vro.error import RenderError
from curl2vro.request import RequestDescriptor, split_url

logger = logging.getLogger(__name__)

AUTHOR = "curl2vRO"

VERSION = "1.0.0"

OPERATION_TIMEOUT = 600

HEADER = """\
    /**
     * @description Curl to vRO JavaScript converted code
     * @author $author
     * @version $version
     * @date $date
     * @method $method
     * @url $url
     */
    """

CERTIFICATE = """
    // Accept SSL certificate
    var ld = Config.getKeystores().getImportCAFromUrlAction();
    var model = ld.getModel();
    model.value = $url;
    var error = ld.execute();
    if (error) {
        throw new Error("Failed to accept certificate for URL: " + $url + ". Error: " + error);
    }
    """

HOST = """
    // Create transient REST host
    var restHost = RESTHostManager.createHost("dynamicRequest");
    var httpRestHost = RESTHostManager.createTransientHostFrom(restHost);
    httpRestHost.operationTimeout = $timeout;
    httpRestHost.url = $origin;
    """

REQUEST = """
    // Create REST request
    var request = httpRestHost.createRequest($method, $path, $body);
    """

HEADERS = """
    // Add headers
    """

SET_HEADER = """\
    request.setHeader($key, $value);
    """

EXECUTE = """
    // Execute REST request
    var response = request.execute();

    // Handle response
    if (response.statusCode == 200) {
        System.log("Request successful");
        var responseContent = JSON.parse(response.contentAsString);
        System.log(JSON.stringify(responseContent));
    } else {
        throw "Request failed with status: " + response.statusCode;
    }
    """

ORIGINAL = """
    /*
    Original curl command:
    $original
    */"""


def rewrite_template(template: str, **replacements: object) -> str:
    """Dedent a template string and substitute its $-placeholders.

    Args:
        template: Indented template text.
        **replacements: Dictionary mapping placeholder names to values.

    Returns:
        str: The rendered text.
    """
    return Template(textwrap.dedent(template)).substitute(**replacements)


def js_string(value: str) -> str:
    """Return a JavaScript string literal for value."""
    return json.dumps(value, ensure_ascii=False)


def js_body(body: Optional[str]) -> str:
    """Return the expression passed as request content: the raw body wrapped
    in JSON.stringify, or null when there is no body."""
    if not body:
        return "null"
    return f"JSON.stringify({body})"


def render(
    descriptor: RequestDescriptor,
    raw_original: str,
    *,
    today: Optional[date] = None,
) -> str:
    """Generate the vRO JavaScript code that performs the request.

    Args:
        descriptor: The request to perform.
        raw_original: The curl command the request was parsed from. It is
            embedded verbatim in a comment at the end of the script.
        today: The generation date written in the script header. Defaults
            to the current UTC date.

    Returns:
        str: The vRO JavaScript code.

    Raises:
        RenderError: if the URL of the descriptor is missing or is not an
            absolute http(s) URL.
    """
    if not descriptor.url:
        raise RenderError("URL is required in the curl command")
    try:
        split_url(descriptor.url)
    except ValueError as e:
        raise RenderError(
            f"invalid URL format in curl command: {descriptor.url!r} ({e})"
        ) from e

    if today is None:
        today = datetime.now(timezone.utc).date()

    logger.debug("rendering %s %s", descriptor.method, descriptor.url)

    parts = [
        rewrite_template(
            HEADER,
            author=AUTHOR,
            version=VERSION,
            date=today.isoformat(),
            method=descriptor.method,
            url=descriptor.url,
        ),
        rewrite_template(CERTIFICATE, url=js_string(descriptor.url)),
        rewrite_template(
            HOST,
            timeout=OPERATION_TIMEOUT,
            origin=js_string(descriptor.origin),
        ),
        rewrite_template(
            REQUEST,
            method=js_string(descriptor.method),
            path=js_string(descriptor.path),
            body=js_body(descriptor.body),
        ),
    ]

    if descriptor.headers:
        parts.append(textwrap.dedent(HEADERS))
        for key, value in descriptor.headers.items():
            parts.append(
                rewrite_template(SET_HEADER, key=js_string(key), value=js_string(value))
            )

    parts.append(textwrap.dedent(EXECUTE))
    parts.append(rewrite_template(ORIGINAL, original=raw_original))
    return "".join(parts)
