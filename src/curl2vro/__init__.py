"""Conversion of curl commands to vRealize Orchestrator JavaScript code."""

from curl2vro.config import ConvertOptions
from curl2vro.convert import convert, output_filename
from curl2vro.error import (
    ConversionError,
    ErrorKind,
    InvalidURLError,
    NoURLError,
    ParseError,
    RenderError,
    error_kind,
)
from curl2vro.parse import parse
from curl2vro.request import RequestDescriptor
from curl2vro.template import render

__all__ = [
    "ConversionError",
    "ConvertOptions",
    "ErrorKind",
    "InvalidURLError",
    "NoURLError",
    "ParseError",
    "RenderError",
    "RequestDescriptor",
    "convert",
    "error_kind",
    "output_filename",
    "parse",
    "render",
]
