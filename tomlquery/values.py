from datetime import date, datetime, time
from enum import Enum
from typing import Union

TomlDateTime = Union[datetime, date, time]
TomlValue = Union[str, int, float, bool, TomlDateTime, "TomlList", "TomlDict"]
TomlList = list[TomlValue]
TomlDict = dict[str, TomlValue]


class ValueKind(Enum):
    """The closed set of value kinds a parsed TOML document is made of."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    ARRAY = "array"
    TABLE = "table"

    def __str__(self) -> str:
        return self.value

    @property
    def is_composite(self) -> bool:
        return self in (ValueKind.ARRAY, ValueKind.TABLE)


def kind_of(value: object) -> ValueKind:
    """
    Classify a value produced by the TOML parser.
    Raises `TypeError` for anything a TOML document cannot contain.
    """
    # `bool` is a subclass of `int`, so it must be checked first.
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    # `datetime` is a subclass of `date`.
    if isinstance(value, (datetime, date, time)):
        return ValueKind.DATETIME
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.TABLE
    raise TypeError(f"Not a TOML value: {value!r} ({type(value).__name__})")
