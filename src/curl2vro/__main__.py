"""Convert a curl command to vRealize Orchestrator JavaScript code.

Usage:
  curl2vro [<command>] [--write] [--output-dir=<dir>] [-v | --verbose]
  curl2vro -h | --help

The curl command is read from stdin when it is not passed as an argument.

Options:
     --write              Save the generated code to a file named after the request.
     --output-dir=<dir>   Directory the generated code is saved to. Defaults to
                          $CURL2VRO_OUTPUT_DIR, or the current directory.

  -v --verbose            Show verbose details in the log.
  -h --help               Show this help information.
"""

import logging
import os
import sys

from docopt import docopt

from curl2vro.config import ConvertOptions
from curl2vro.convert import convert
from curl2vro.error import ConversionError


def main(argv=None):
    args = docopt(__doc__, argv=argv)

    if args["--help"]:
        print(__doc__)
        sys.exit(0)

    if not os.getenv("NO_COLOR"):
        logging.addLevelName(logging.WARNING, "\033[1;33mWARN\033[1;0m")
        logging.addLevelName(logging.ERROR, "\033[1;31mERROR\033[1;0m")

    logger = logging.getLogger()
    if args["--verbose"]:
        logger.setLevel(logging.DEBUG)
        fmt = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
    else:
        logger.setLevel(logging.INFO)
        fmt = "%(asctime)s [%(levelname)s] %(message)s"

    log_formatter = logging.Formatter(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")
    log_handler = logging.StreamHandler(sys.stderr)
    log_handler.setFormatter(log_formatter)
    logger.addHandler(log_handler)

    command = args["<command>"]
    if command is None:
        command = sys.stdin.read()

    options = ConvertOptions(
        write_to_file=args["--write"],
        output_dir=args["--output-dir"],
    )

    try:
        script = convert(command.strip(), options)
    except ConversionError as e:
        print(f"error: unsupported curl command: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"error: cannot save the generated code: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        logger.removeHandler(log_handler)

    print(script)


if __name__ == "__main__":
    main()
