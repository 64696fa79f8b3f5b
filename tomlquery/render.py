"""
Rendering of TOML values as a single line of text a POSIX shell reads back
unchanged.

Scalars become one shell word. Arrays become one word per element, and
tables become `[key]=value` words, the body of a bash associative array:

    eval "declare -A deps=($(tomlq -f Cargo.toml dependencies))"

Nested arrays and tables are rendered recursively and then quoted as a
single word, so word splitting never crosses element boundaries.
"""

import re
from datetime import date, datetime, time, timedelta

from tomlquery.values import TomlDateTime, TomlValue, ValueKind, kind_of

# C0 controls and DEL cannot appear literally on a single output line.
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BARE_KEY = re.compile(r"[A-Za-z0-9_-]+")

_DOLLAR_QUOTE_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def _dollar_quote_char(c: str) -> str:
    if c in _DOLLAR_QUOTE_ESCAPES:
        return _DOLLAR_QUOTE_ESCAPES[c]
    if _CONTROL_CHARS.fullmatch(c):
        # Octal escapes stop after three digits, so a following digit is never
        # absorbed into the escape.
        return f"\\{ord(c):03o}"
    return c


def shell_quote(s: str) -> str:
    """
    Quote `s` as one shell word.

    Strings without control characters use plain single quotes, where the
    only special character is the quote itself: `'` becomes `'\\''`.
    Anything else uses dollar-single-quotes (`$'...'`) so that newlines and
    other control characters are written as escapes.
    """
    if not s:
        return "''"
    if _CONTROL_CHARS.search(s):
        return "$'" + "".join(_dollar_quote_char(c) for c in s) + "'"
    return "'" + s.replace("'", "'\\''") + "'"


def render_float(value: float) -> str:
    # `repr` is the shortest text that round-trips, keeps `.0` on integral
    # values and spells the specials `inf`, `-inf` and `nan` like TOML does.
    return repr(float(value))


def _render_time(value: time) -> str:
    text = f"{value.hour:02}:{value.minute:02}:{value.second:02}"
    if value.microsecond:
        text += "." + f"{value.microsecond:06}".rstrip("0")
    return text


def _render_offset(offset: timedelta | None) -> str:
    if offset is None:
        return ""
    if not offset:
        return "Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(offset) // timedelta(minutes=1)
    return f"{sign}{minutes // 60:02}:{minutes % 60:02}"


def render_datetime(value: TomlDateTime) -> str:
    """
    Format a date, time or date-time the way TOML writes it: `T` separator,
    fractional seconds without trailing zeros and a zero offset as `Z`.
    """
    # `datetime` is a subclass of `date`.
    if isinstance(value, datetime):
        return (
            value.date().isoformat()
            + "T"
            + _render_time(value.time())
            + _render_offset(value.utcoffset())
        )
    if isinstance(value, date):
        return value.isoformat()
    return _render_time(value)


def _render_key(key: str) -> str:
    if _BARE_KEY.fullmatch(key):
        return key
    return shell_quote(key)


def _render_word(value: TomlValue) -> str:
    """Render an element of a composite value as exactly one shell word."""
    if kind_of(value).is_composite:
        return shell_quote(render(value))
    return render(value)


def render(value: TomlValue) -> str:
    kind = kind_of(value)
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    elif kind is ValueKind.INTEGER:
        return str(int(value))
    elif kind is ValueKind.FLOAT:
        return render_float(value)
    elif kind is ValueKind.DATETIME:
        return render_datetime(value)
    elif kind is ValueKind.STRING:
        return shell_quote(value)
    elif kind is ValueKind.ARRAY:
        return " ".join(_render_word(elem) for elem in value)
    elif kind is ValueKind.TABLE:
        return " ".join(
            f"[{_render_key(key)}]={_render_word(elem)}" for key, elem in value.items()
        )
    raise AssertionError(f"unhandled value kind: {kind}")


def render_raw(value: TomlValue) -> str:
    """Like `render`, but a string result is returned without quoting."""
    if kind_of(value) is ValueKind.STRING:
        return value
    return render(value)
