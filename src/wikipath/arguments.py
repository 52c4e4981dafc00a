"""Page argument resolution.

Wikidot passes page arguments as extra "directories" after the page name,
alternating key and value: ``/scp-xxxx/norender/true/edit/true``.

Two resolvers live here:

- ``resolve_arguments`` is schema-driven. It understands solo keys, flags
  like ``norender`` or ``edit`` that may appear with no value segment, so
  ``/norender/edit`` reads as two flags instead of ``norender=edit``.
- ``resolve_options`` has no schema. Every key takes the next segment as
  its value, and bare ``true``/``false`` segments in key position are
  skipped as orphaned values.

For duplicate keys the last occurrence wins. Keys compare
case-insensitively.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass

from wikipath.schema import ArgumentSchema, fold_key
from wikipath.tokens import split_segments
from wikipath.values import ArgumentValue, coerce_value

logger = logging.getLogger("wikipath.parse")

# Never the start of a key/value pair when parsing without a schema
ORPHAN_VALUE_LITERALS = frozenset({"true", "false"})

_TRUTHY_STRINGS = frozenset({"true", "t", "yes", "on", "1"})


@dataclass(frozen=True, slots=True)
class Argument:
    """One resolved argument.

    ``raw`` is the segment that followed the key: the explicit value, the
    next key for a solo flag, or ``""`` when the path ended.
    """

    key: str
    value: ArgumentValue
    raw: str


class PageArguments(Mapping[str, ArgumentValue]):
    """Immutable, case-insensitive mapping of argument keys to values.

    ``__getitem__`` returns the typed value.
    ``get_raw`` returns the segment string the value was read from.
    Iteration yields keys as first spelled in the path.
    """

    _data: dict[str, Argument]

    __slots__ = ("_data",)

    def __init__(self, arguments: Mapping[str, Argument] | None = None) -> None:
        # Re-key by the folded form of each record's own key
        data: dict[str, Argument] = {}
        for argument in (arguments or {}).values():
            _insert(data, argument.key, argument.value, argument.raw)
        object.__setattr__(self, "_data", data)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, ArgumentValue, str]]) -> "PageArguments":
        """Build from ``(key, value, raw)`` triples. Later keys override earlier ones."""
        builder = _ArgumentsBuilder()
        for key, value, raw in pairs:
            builder.insert(key, value, raw)
        return builder.build()

    def __getitem__(self, key: str) -> ArgumentValue:
        return self._data[fold_key(key)].value

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return fold_key(key) in self._data

    def __iter__(self) -> Iterator[str]:
        for argument in self._data.values():
            yield argument.key

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PageArguments):
            return {k: (a.value, a.raw) for k, a in self._data.items()} == {
                k: (a.value, a.raw) for k, a in other._data.items()
            }
        return Mapping.__eq__(self, other)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"PageArguments({{{items}}})"

    def get_argument(self, key: str) -> Argument | None:
        """Return the full ``Argument`` record for *key*, or ``None``."""
        return self._data.get(fold_key(key))

    def get_raw(self, key: str, default: str | None = None) -> str | None:
        """Return the raw segment read for *key*, or *default* if missing."""
        argument = self.get_argument(key)
        if argument is None:
            return default
        return argument.raw

    def is_set(self, key: str) -> bool:
        """True if *key* appeared in the path, with or without a value."""
        return key in self

    def get_int(self, key: str, default: int | None = None) -> int | None:
        """Return the value as int, or *default* if missing or not an integer."""
        value = self.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return default

    def get_bool(self, key: str, default: bool | None = None) -> bool | None:
        """Return the value read as a flag.

        A key present with no value counts as set, so ``None`` is ``True``.
        Integers are true when nonzero; strings when one of
        ``true``/``t``/``yes``/``on``/``1``.
        """
        argument = self.get_argument(key)
        if argument is None:
            return default
        value = argument.value
        if value is None:
            return True
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return value != 0
        return value.lower() in _TRUTHY_STRINGS

    def to_dict(self) -> dict[str, ArgumentValue]:
        """Plain ``dict`` of key -> value, for serialization."""
        return {argument.key: argument.value for argument in self._data.values()}


def _insert(data: dict[str, Argument], key: str, value: ArgumentValue, raw: str) -> None:
    folded = fold_key(key)
    previous = data.get(folded)
    # Keep the first spelling of the key, take the newest value
    spelling = previous.key if previous is not None else key
    data[folded] = Argument(key=spelling, value=value, raw=raw)


class _ArgumentsBuilder:
    """Accumulates arguments during a single resolve pass."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[str, Argument] = {}

    def insert(self, key: str, value: ArgumentValue, raw: str) -> None:
        _insert(self._data, key, value, raw)

    def build(self) -> PageArguments:
        return PageArguments(self._data)


def resolve_arguments(segments: Sequence[str], schema: ArgumentSchema) -> PageArguments:
    """Resolve argument segments against *schema*.

    Walks the segments left to right. For each key, the following segment
    is peeked:

    - if the key is a solo key and the peeked segment is itself a valid
      key, the key is a bare flag: it is recorded as ``None`` (raw holds
      the peeked segment) and the peeked segment is reconsidered as the
      next key;
    - otherwise the peeked segment (possibly absent) is the key's value
      and both are consumed.

    Empty key segments are skipped. Iterative, so very long runs of solo
    flags cannot exhaust the stack.
    """
    builder = _ArgumentsBuilder()
    count = len(segments)
    index = 0

    while index < count:
        key = segments[index]
        if not key:
            index += 1
            continue

        while True:
            lookahead = segments[index + 1] if index + 1 < count else None

            if lookahead is not None and schema.is_solo(key) and schema.is_valid(lookahead):
                logger.debug("Solo key %r followed by key %r", key, lookahead)
                builder.insert(key, None, lookahead)
                index += 1
                key = lookahead
                continue

            builder.insert(key, coerce_value(lookahead), lookahead or "")
            index += 2
            break

    return builder.build()


def resolve_options(segments: Sequence[str]) -> PageArguments:
    """Resolve argument segments without a schema.

    Every key takes the next segment as its value. Empty segments and the
    literals ``true``/``false`` in key position are skipped, since they
    can only be values left over from a previous key.
    """
    builder = _ArgumentsBuilder()
    parts = iter(segments)

    for key in parts:
        if not key:
            continue
        if key in ORPHAN_VALUE_LITERALS:
            logger.debug("Skipping orphaned value %r in key position", key)
            continue

        value = next(parts, None)
        builder.insert(key, coerce_value(value), value or "")

    return builder.build()


def parse_arguments(path: str, schema: ArgumentSchema) -> PageArguments:
    """Parse an argument tail such as ``/norender/edit/true`` with *schema*.

    The leading ``/`` is optional.
    """
    return resolve_arguments(split_segments(path), schema)


def parse_options(path: str) -> PageArguments:
    """Parse an argument tail such as ``/noredirect/true`` without a schema.

    The leading ``/`` is optional.
    """
    return resolve_options(split_segments(path))
