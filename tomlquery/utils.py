import argparse
import logging
import os
import sys
from pathlib import Path
from typing import BinaryIO, TypeVar

import tomli

from tomlquery.errors import DocumentError
from tomlquery.values import TomlDict

T = TypeVar("T")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV_VAR = "TOMLQ_LOG_LEVEL"

STDIN_PATH = "-"

# Logs here may happen before the root logger is configured.
logger = logging.getLogger(__name__)


def check_isinstance(value: object, cls: type[T]) -> T:
    if not isinstance(value, cls):
        raise TypeError(f"Expected {cls.__name__}, got {type(value).__name__}")
    return value


def input_file(value: str) -> Path | None:
    """
    Argument type for `--file`: `-` stands for standard input.
    Pipes and devices such as `/dev/fd/N` are accepted; open failures are
    reported when the document is loaded.
    """
    if value == STDIN_PATH:
        return None
    path = Path(value)
    if path.is_dir():
        raise argparse.ArgumentTypeError(f"{value!r} is a directory")
    return path


def log_level_from_env() -> str:
    """Retrieve the default log level from the environment."""
    level = os.getenv(LOG_LEVEL_ENV_VAR)
    if not level:
        return DEFAULT_LOG_LEVEL
    if level.upper() not in LOG_LEVELS:
        logger.warning(
            f"Ignoring {LOG_LEVEL_ENV_VAR}={level!r}; "
            f"expected one of {', '.join(LOG_LEVELS)}"
        )
        return DEFAULT_LOG_LEVEL
    return level.upper()


def _parse_document(f: BinaryIO, source: str) -> TomlDict:
    try:
        document = tomli.load(f)
    except tomli.TOMLDecodeError as exc:
        raise DocumentError(source, str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise DocumentError(source, f"not valid UTF-8: {exc}") from exc
    return check_isinstance(document, dict)


def load_document(path: Path | None) -> TomlDict:
    """Parse the TOML document at `path`, or on standard input if `path` is `None`."""
    if path is None:
        logging.info("Reading TOML from standard input")
        return _parse_document(sys.stdin.buffer, "<stdin>")

    logging.info(f"Reading TOML from {path}")
    try:
        with open(path, "rb") as f:
            return _parse_document(f, str(path))
    except OSError as exc:
        raise DocumentError(str(path), exc.strerror or str(exc)) from exc
