"""Argument schema — which keys a caller recognizes.

Supplied per parse call. Lookups are case-insensitive, matching how
argument keys compare.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field


def fold_key(key: str) -> str:
    """Case-fold *key* for case-insensitive comparison."""
    return key.casefold()


@dataclass(frozen=True, slots=True)
class ArgumentSchema:
    """Recognized argument keys.

    ``valid_keys`` lists every key the caller understands.
    ``solo_keys`` lists keys that may appear without a value segment,
    such as ``norender`` or ``edit``. Keeping ``solo_keys`` a subset of
    ``valid_keys`` is up to the caller.

    Usage::

        schema = ArgumentSchema(
            valid_keys={"edit", "norender", "offset"},
            solo_keys={"edit", "norender"},
        )
    """

    valid_keys: frozenset[str] = frozenset()
    solo_keys: frozenset[str] = frozenset()

    # Case-folded copies for lookups
    _valid: frozenset[str] = field(init=False, repr=False, compare=False)
    _solo: frozenset[str] = field(init=False, repr=False, compare=False)

    def __init__(self, valid_keys: Iterable[str] = (), solo_keys: Iterable[str] = ()) -> None:
        object.__setattr__(self, "valid_keys", frozenset(valid_keys))
        object.__setattr__(self, "solo_keys", frozenset(solo_keys))
        object.__setattr__(self, "_valid", frozenset(fold_key(k) for k in self.valid_keys))
        object.__setattr__(self, "_solo", frozenset(fold_key(k) for k in self.solo_keys))

    def is_valid(self, key: str) -> bool:
        """True if *key* is a recognized argument key."""
        return fold_key(key) in self._valid

    def is_solo(self, key: str) -> bool:
        """True if *key* may stand alone without a value segment."""
        return fold_key(key) in self._solo
