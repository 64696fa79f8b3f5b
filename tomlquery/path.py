"""
Dot-separated path patterns and their evaluation against a parsed document.
"""

import logging
from typing import cast

from tomlquery.errors import CannotDescendError, KeyNotFoundError, MalformedPatternError
from tomlquery.values import TomlDict, TomlValue, ValueKind, kind_of

SEPARATOR = "."


def parse_pattern(pattern: str) -> list[str]:
    """
    Split `pattern` into table keys.
    The empty pattern selects the whole document and yields no segments.
    """
    if not pattern:
        return []
    segments = pattern.split(SEPARATOR)
    if not all(segments):
        raise MalformedPatternError(pattern)
    return segments


def resolve(document: TomlDict, pattern: str) -> TomlValue:
    """Return the value `pattern` points at inside `document`.

    Every segment is looked up as a table key, exactly and case-sensitively;
    arrays are never indexed into.

    Raises:
        MalformedPatternError: the pattern has an empty segment.
        KeyNotFoundError: a table has no entry for a segment.
        CannotDescendError: a segment follows a value that is not a table.
    """
    segments = parse_pattern(pattern)

    current: TomlValue = document
    for depth, segment in enumerate(segments):
        path_prefix = SEPARATOR.join(segments[:depth])
        kind = kind_of(current)
        if kind is not ValueKind.TABLE:
            raise CannotDescendError(path_prefix, kind)
        table = cast(TomlDict, current)
        if segment not in table:
            raise KeyNotFoundError(segment, path_prefix)
        current = table[segment]
        logging.debug(f"Resolved {segment!r} under {path_prefix!r}: {kind_of(current)}")

    return current
