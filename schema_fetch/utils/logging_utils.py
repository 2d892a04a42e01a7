import logging
import sys
from typing import Optional, Union

LevelName = Union[str, int]

DEFAULT_FORMAT = "%(name)s - %(levelname)s - %(message)s"


def parse_level(name: LevelName, default: int) -> int:
    """Map a level name such as ``"debug"`` (or a number) to its logging constant."""
    if isinstance(name, int):
        return name
    level = getattr(logging, str(name).upper(), None)
    return level if isinstance(level, int) else default


class _BelowLevelFilter(logging.Filter):
    """Pass records strictly below ``ceiling``."""

    def __init__(self, ceiling: int) -> None:
        super().__init__()
        self.ceiling = ceiling

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.ceiling


def _handler(stream, formatter: logging.Formatter, floor: int) -> logging.StreamHandler:
    handler = logging.StreamHandler(stream=stream)
    handler.setLevel(floor)
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    *,
    level: LevelName = "WARNING",
    stderr_level: LevelName = "WARNING",
    stdout_reserved: bool = False,
    formatter: Optional[logging.Formatter] = None,
) -> int:
    """Configure root logging for the schema-fetch CLI.

    Records at ``stderr_level`` and above go to stderr; quieter records go to
    stdout unless ``stdout_reserved`` is set, in which case stdout carries only
    command output (fetched documents, JSON reports) and every record goes to
    stderr.

    Returns:
        The resolved root level
    """
    root_level = parse_level(level, logging.WARNING)
    split_level = max(parse_level(stderr_level, logging.WARNING), logging.DEBUG)
    if stdout_reserved:
        split_level = logging.DEBUG

    if formatter is None:
        formatter = logging.Formatter(DEFAULT_FORMAT)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(root_level)
    root.addHandler(_handler(sys.stderr, formatter, split_level))

    if split_level > logging.DEBUG:
        stdout_handler = _handler(sys.stdout, formatter, logging.DEBUG)
        stdout_handler.addFilter(_BelowLevelFilter(split_level))
        root.addHandler(stdout_handler)

    return root_level
