"""Command-line interface for schema_fetch."""

from .run_fetch import build_parser, main

__all__ = ['build_parser', 'main']
