"""Truthiness and presence predicates used by the ``*_not_falsy`` and ``from_mapping`` combinators.

Python's own truthiness is close to what the combinators need but not
identical: the string ``"0"`` is treated as absent, and arbitrary objects
that define ``__bool__`` are not consulted. The exact falsy set is:

- ``None`` and ``False``
- numeric zero (``0``, ``0.0``, ``0j``, ``Decimal(0)``, ``Fraction(0)``)
- ``""`` and ``"0"``
- empty ``bytes`` / ``bytearray``
- any empty sized container (list, tuple, dict, set, frozenset, ...)

Everything else is truthy.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Sized
from numbers import Number
from typing import Any

# Strings that count as absent
_FALSY_STRINGS: frozenset[str] = frozenset({"", "0"})


def is_falsy(value: object) -> bool:
    """Check whether a payload counts as absent for ``not_falsy`` filtering."""
    match value:
        case None | False:
            return True
        case True:
            return False
        case str():
            return value in _FALSY_STRINGS
        case bytes() | bytearray():
            return len(value) == 0
        case Number():
            return value == 0
        case Sized():
            return len(value) == 0
        case _:
            return False


def is_truthy(value: object) -> bool:
    """Inverse of :func:`is_falsy`."""
    return not is_falsy(value)


def lookup(source: Mapping[Any, Any] | Sequence[Any], key: Any) -> tuple[bool, Any]:
    """Look up ``key`` in a mapping or sequence. Returns ``(found, value)``.

    A key that is present but holds ``None`` counts as not found. Strings
    are not indexed.
    """
    match source:
        case Mapping():
            value = source.get(key)
        case str() | bytes():
            return False, None
        case Sequence() if isinstance(key, int) and not isinstance(key, bool):
            value = source[key] if -len(source) <= key < len(source) else None
        case _:
            return False, None
    return value is not None, value
