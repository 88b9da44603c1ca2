"""Option monad: a value that may or may not be present.

Presence is tracked by a flag, not by the payload, so ``Option.some(None)``
is a present box holding ``None`` and differs from ``Option.none()``.
Use :meth:`Option.not_null` to collapse the former into the latter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, cast

from ..foundation.errors import describe
from ..foundation.predicates import is_falsy, lookup
from .capture import attempt

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    """Single-sided box: Some(value) or None.

    Examples:
        >>> Option.some(5).map(lambda x: x * 2).value_or(0)
        10
        >>> Option.none().map(lambda x: x * 2).value_or(0)
        0
        >>> Option.some_when(-1, lambda x: x > 0).has_value()
        False
    """

    __slots__ = ("_value", "_has_value")
    __match_args__ = ("_value",)

    def __init__(self, value: T | None, has_value: bool) -> None:
        """Private constructor. Use Option.some() or Option.none() instead."""
        self._value = value
        self._has_value = has_value

    # ─── Construction ────────────────────────────────────────────────

    @staticmethod
    def some(value: T) -> Option[T]:
        return Option(value, True)

    @staticmethod
    def none() -> Option[Any]:
        return _NONE

    @staticmethod
    def some_when(value: T, predicate: Callable[[T], bool]) -> Option[T]:
        """Some(value) if predicate(value), else None. Evaluated immediately."""
        return Option(value, True) if predicate(value) else _NONE

    @staticmethod
    def none_when(value: T, predicate: Callable[[T], bool]) -> Option[T]:
        """None if predicate(value), else Some(value). Evaluated immediately."""
        return _NONE if predicate(value) else Option(value, True)

    @staticmethod
    def from_mapping(source: Mapping[Any, T] | Sequence[T], key: Any) -> Option[T]:
        """Some(source[key]) if the key is present with a non-None value."""
        found, value = lookup(source, key)
        return Option(value, True) if found else _NONE

    from_array = from_mapping

    # ─── Inspection ──────────────────────────────────────────────────

    def has_value(self) -> bool:
        return self._has_value

    def contains(self, value: object) -> bool:
        """True if present and the payload equals ``value``."""
        return self._has_value and self._value == value

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        """True if present and predicate(payload) holds."""
        return self._has_value and predicate(cast(T, self._value))

    # ─── Value Extraction ────────────────────────────────────────────

    def value_or(self, alternative: T) -> T:
        return cast(T, self._value) if self._has_value else alternative

    def value_or_create(self, factory: Callable[[], T]) -> T:
        """Payload if present, else factory(). The factory runs only when absent."""
        return cast(T, self._value) if self._has_value else factory()

    # ─── Alternatives ────────────────────────────────────────────────

    def or_(self, alternative: T) -> Option[T]:
        """Self if present, else Some(alternative)."""
        return self if self._has_value else Option(alternative, True)

    def or_create(self, factory: Callable[[], T]) -> Option[T]:
        return self if self._has_value else Option(factory(), True)

    def else_(self, alternative: Option[T]) -> Option[T]:
        """Self if present, else the alternative box as-is."""
        return self if self._has_value else alternative

    def else_create(self, factory: Callable[[], Option[T]]) -> Option[T]:
        return self if self._has_value else factory()

    # ─── Pattern Matching ────────────────────────────────────────────

    def match(self, some: Callable[[T], U], none: Callable[[], U]) -> U:
        """Invoke exactly one branch and return its result.

        Example:
            >>> Option.some(2).match(lambda x: f"got {x}", lambda: "nothing")
            'got 2'
        """
        return some(cast(T, self._value)) if self._has_value else none()

    def match_some(self, some: Callable[[T], object]) -> None:
        if self._has_value:
            some(cast(T, self._value))

    def match_none(self, none: Callable[[], object]) -> None:
        if not self._has_value:
            none()

    # ─── Functor / Monad ─────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Option[U]:
        """Some(f(value)) if present, else None. Exceptions from f propagate."""
        return Option(f(cast(T, self._value)), True) if self._has_value else _NONE

    def map_safely(self, f: Callable[[T], U]) -> Option[U]:
        """Like map, but an exception raised by f yields None.

        The fault itself is dropped; an absent Option carries no payload.
        """
        if not self._has_value:
            return _NONE
        outcome = attempt(f, self._value, combinator="Option.map_safely")
        return Option(outcome.value, True) if outcome.succeeded else _NONE

    def flat_map(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Monadic bind: f returns an Option, None short-circuits."""
        return f(cast(T, self._value)) if self._has_value else _NONE

    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Alias for flat_map."""
        return self.flat_map(f)

    # ─── Filtering ───────────────────────────────────────────────────

    def filter(self, condition: bool) -> Option[T]:
        return _NONE if self._has_value and not condition else self

    def filter_if(self, predicate: Callable[[T], bool]) -> Option[T]:
        return _NONE if self._has_value and not predicate(cast(T, self._value)) else self

    def not_null(self) -> Option[T]:
        """None if present with a None payload, else self."""
        return _NONE if self._has_value and self._value is None else self

    def not_falsy(self) -> Option[T]:
        """None if present with a falsy payload (see ``is_falsy``), else self."""
        return _NONE if self._has_value and is_falsy(self._value) else self

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._has_value

    def __iter__(self) -> Iterator[T]:
        """Yield the payload if present."""
        if self._has_value:
            yield cast(T, self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if not self._has_value or not other._has_value:
            return self._has_value == other._has_value
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((self._has_value, self._value if self._has_value else None))

    def __repr__(self) -> str:
        return f"Some({describe(self._value)})" if self._has_value else "None"

    __str__ = __repr__


_NONE: Option[Any] = Option(None, False)
