"""Global command options: output format, log level and working directory."""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path

ASSEMBLY_DIRECTORY_NAME = "regex-assembly"
DEFAULT_CONFIGURATION_FILE_NAME = "toolchain.yaml"
LOGGER_NAME = "crstoolchain"

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_PYTHON_LEVELS = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "panic": logging.CRITICAL + 5,
    "disabled": logging.CRITICAL + 10,
}

_handler: logging.Handler | None = None


class OutputType(Enum):
    """How results are reported."""

    TEXT = "text"
    GITHUB = "github"

    @classmethod
    def parse(cls, value: str) -> "OutputType":
        """Return the output type named by ``value``."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"invalid option for output: '{value}'") from None


class LogLevel(Enum):
    """Log levels accepted on the command line."""

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"
    PANIC = "panic"
    DISABLED = "disabled"

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """Return the log level named by ``value``, ignoring case."""
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"Unknown Level String: '{value}', defaulting to NoLevel") from None

    @property
    def python_level(self) -> int:
        """The matching level of the standard logging module."""
        return _PYTHON_LEVELS[self.value]


DEFAULT_LOG_LEVEL = LogLevel.INFO


def configure_logging(level: LogLevel | str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Send the package's log records to stderr at the given level."""
    global _handler
    if isinstance(level, str):
        level = LogLevel.parse(level)

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(message)s", datefmt="%I:%M:%S")
        )
    if _handler not in logger.handlers:
        logger.addHandler(_handler)
    logger.setLevel(level.python_level)
    return logger


def find_root_directory(start_path: str | os.PathLike[str]) -> str:
    """Walk up from ``start_path`` to the directory holding the assembly directory."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.log(TRACE, "Searching for root directory starting at %s", start_path)
    current = Path(os.path.normpath(start_path))
    for candidate in (current, *current.parents):
        if candidate.parent == candidate:
            break
        if (candidate / ASSEMBLY_DIRECTORY_NAME).exists():
            return str(candidate)
        logger.log(TRACE, "Root directory not found yet. Trying %s", candidate.parent)
    raise FileNotFoundError("failed to find root directory")


def resolve_working_directory(value: str | os.PathLike[str]) -> str:
    """Make ``value`` absolute and return the root directory above it."""
    absolute = os.path.abspath(value)
    root = find_root_directory(absolute)
    logging.getLogger(LOGGER_NAME).debug("Resolved root directory %s", root)
    return root