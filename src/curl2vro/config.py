import os
from dataclasses import dataclass
from typing import Optional

OUTPUT_DIR_ENVVAR = "CURL2VRO_OUTPUT_DIR"


@dataclass
class ConvertOptions:
    """Options of the convert function.

    Attributes:
        write_to_file: Save the generated script to a file named after the
            request, see output_filename.

        output_dir: Directory the script is saved to. Uses the value of the
            CURL2VRO_OUTPUT_DIR environment variable if unset, otherwise
            defaults to the current directory.
    """

    write_to_file: bool = False
    output_dir: Optional[str] = None

    @property
    def output_dir_from(self) -> str:
        """Name of the setting the output directory comes from."""
        if self.output_dir:
            return "output_dir"
        if os.environ.get(OUTPUT_DIR_ENVVAR):
            return OUTPUT_DIR_ENVVAR
        return "default"

    def resolve_output_dir(self) -> str:
        return self.output_dir or os.environ.get(OUTPUT_DIR_ENVVAR) or os.curdir
