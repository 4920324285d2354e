import logging
import os
import re
from typing import Optional

from curl2vro.config import ConvertOptions
from curl2vro.parse import parse
from curl2vro.request import RequestDescriptor, split_url
from curl2vro.template import render

logger = logging.getLogger(__name__)

_RESERVED = re.compile(r'[/:*?"<>|]')


def output_filename(descriptor: RequestDescriptor) -> str:
    """Return the name of the file a script is saved to, made of the host,
    the path and the method of the request, e.g.
    api.example.com_v1_users_POST.js.

    Raises:
        ValueError: if the URL of the descriptor is not an absolute http(s)
            URL.
    """
    result = split_url(descriptor.url)
    path = _RESERVED.sub("_", result.path or "/")
    return f"{result.hostname}{path}_{descriptor.method}.js"


def convert(raw: str, options: Optional[ConvertOptions] = None) -> str:
    """Convert a curl command to vRO JavaScript code.

    Args:
        raw: The curl command to convert.

        options: Conversion options. When options.write_to_file is set, the
            code is also saved to a file in the output directory.

    Returns:
        str: The generated vRO JavaScript code.

    Raises:
        ParseError: if the curl command cannot be parsed.
        RenderError: if the parsed request cannot be rendered.
        OSError: if the code cannot be saved.
    """
    if options is None:
        options = ConvertOptions()

    descriptor = parse(raw)
    script = render(descriptor, raw)

    if options.write_to_file:
        output_dir = options.resolve_output_dir()
        logger.debug(
            "using output directory %s from %s", output_dir, options.output_dir_from
        )
        path = os.path.join(output_dir, output_filename(descriptor))
        with open(path, "w", encoding="utf-8") as f:
            f.write(script)
        logger.info("vRO code has been saved to %s", path)

    return script
