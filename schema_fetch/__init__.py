"""Uniform reading of stdin, URLs and local files for JSON Schema resolution."""

__version__ = "0.1.0"

from .exceptions import (
    ConfigurationError,
    DriverInputFileDoesNotExist,
    HeaderParseError,
    MiscJSONParseError,
    MiscReadError,
    SchemaFetchError,
)
from .file_io import open_stream, parse_headers, read_text
from .models.schema_registry import build_registry
from .models.schema_store import FetchingSchemaStore, SchemaStore

__all__ = [
    "ConfigurationError",
    "DriverInputFileDoesNotExist",
    "HeaderParseError",
    "MiscJSONParseError",
    "MiscReadError",
    "SchemaFetchError",
    "open_stream",
    "parse_headers",
    "read_text",
    "build_registry",
    "FetchingSchemaStore",
    "SchemaStore",
]
