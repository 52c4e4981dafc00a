"""Argument value coercion.

Each argument segment is converted to the most specific scalar it spells:

- missing or empty -> ``None``
- ``t`` / ``true`` / ``f`` / ``false`` (any case) -> ``bool``
- base-10 signed 32-bit integer -> ``int``
- anything else -> ``str``, verbatim
"""

import re

type ArgumentValue = str | int | bool | None

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

TRUE_LITERALS = frozenset({"t", "true"})
FALSE_LITERALS = frozenset({"f", "false"})

# int() also accepts "+1", " 1", "1_000" and non-ASCII digits
_INTEGER_RE = re.compile(r"-?[0-9]+", re.ASCII)


def parse_int32(raw: str) -> int | None:
    """Parse *raw* as a base-10 signed 32-bit integer, or return ``None``."""
    if not _INTEGER_RE.fullmatch(raw):
        return None
    value = int(raw)
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value


def coerce_value(raw: str | None) -> ArgumentValue:
    """Convert a raw argument segment to its typed value.

    Total: every input maps to exactly one value and nothing raises.

    Examples::

        >>> coerce_value(None) is None
        True
        >>> coerce_value("TRUE")
        True
        >>> coerce_value("9000")
        9000
        >>> coerce_value("9000000000")
        '9000000000'
    """
    if not raw:
        return None

    lowered = raw.lower()
    if lowered in TRUE_LITERALS:
        return True
    if lowered in FALSE_LITERALS:
        return False

    number = parse_int32(raw)
    if number is not None:
        return number
    return raw


def value_kind(value: ArgumentValue) -> str:
    """Name the variant of *value*: ``null``, ``boolean``, ``integer`` or ``string``."""
    if value is None:
        return "null"
    # bool is a subclass of int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    return "string"
