"""File I/O related utilities.

This package groups the modules that read raw text from stdin, URLs and local
files, and the parsing of HTTP header configuration used for remote reads.
"""

from .http_headers import parse_headers
from .source_reader import (
    STDIN_ADDRESS,
    UNKNOWN_ERROR_MESSAGE,
    HTTPBodyStream,
    StdinStream,
    is_url,
    open_stream,
    read_text,
)

__all__ = [
    "parse_headers",
    "STDIN_ADDRESS",
    "UNKNOWN_ERROR_MESSAGE",
    "HTTPBodyStream",
    "StdinStream",
    "is_url",
    "open_stream",
    "read_text",
]
