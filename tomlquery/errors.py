"""Errors reported by the query engine and the input loader."""

from tomlquery.values import ValueKind

__all__ = [
    "QueryError",
    "MalformedPatternError",
    "KeyNotFoundError",
    "CannotDescendError",
    "DocumentError",
]


def describe_path(path_prefix: str) -> str:
    return repr(path_prefix) if path_prefix else "the document root"


class QueryError(Exception):
    """Base class for every failure a query can end with."""


class MalformedPatternError(QueryError):
    def __init__(self, pattern: str):
        super().__init__(f"Malformed pattern {pattern!r}: empty path segment")
        self.pattern = pattern


class KeyNotFoundError(QueryError):
    def __init__(self, key: str, path_prefix: str):
        super().__init__(f"No such key: {key!r} in {describe_path(path_prefix)}")
        self.key = key
        self.path_prefix = path_prefix


class CannotDescendError(QueryError):
    def __init__(self, path_prefix: str, actual_kind: ValueKind):
        super().__init__(
            f"Cannot descend into {describe_path(path_prefix)}: "
            f"found {actual_kind}, expected table"
        )
        self.path_prefix = path_prefix
        self.actual_kind = actual_kind


class DocumentError(QueryError):
    """The input could not be read or is not a valid TOML document."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Failed to load TOML from {source}: {reason}")
        self.source = source
        self.reason = reason
