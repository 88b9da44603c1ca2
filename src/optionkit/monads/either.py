"""Either monad: a value of one of two possible types (a disjoint union).

By convention the left side is primary (data) and the right side is
secondary (error). Most combinators come in left/right pairs; ``Option``,
``Result`` and ``StrictResult`` specialize this vocabulary.

Error policy:
- Every combinator lets an exception raised by a callback propagate.
- ``map_left_safely`` is the exception: it turns the raised fault into a
  right-sided payload.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, cast

from ..foundation.errors import MissingKeyError, MissingValueError, describe
from ..foundation.predicates import is_falsy, lookup
from .capture import attempt
from .option import Option

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

L = TypeVar("L")  # Left (primary) type
R = TypeVar("R")  # Right (secondary) type
M = TypeVar("M")  # Mapped left type
S = TypeVar("S")  # Mapped right type
U = TypeVar("U")  # Fold result type


class Either(Generic[L, R]):
    """Holds exactly one of a left value or a right value.

    Both ``None`` and any other value are valid payloads on either side;
    which side is held is tracked by a flag.

    Examples:
        >>> Either.left(5).map_left(lambda x: x + 1).left_or(0)
        6
        >>> Either.right("nope").map_left(lambda x: x + 1).right_or("")
        'nope'
        >>> Either.left_when(-5, "negative", lambda x: x > 0)
        Right(negative)

    Notes:
        - Uses __slots__; instances are never mutated after construction
        - or_*/else_*/filter_* return ``self`` when nothing changes
    """

    __slots__ = ("_value", "_is_left")
    __match_args__ = ("_value",)

    def __init__(self, value: L | R, is_left: bool) -> None:
        """Private constructor. Use Either.left() or Either.right() instead."""
        self._value = value
        self._is_left = is_left

    # ─────────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def left(value: L) -> Either[L, Any]:
        return Either(value, True)

    @staticmethod
    def right(value: R) -> Either[Any, R]:
        return Either(value, False)

    @staticmethod
    def left_when(value: L, right_value: R, predicate: Callable[[L], bool]) -> Either[L, R]:
        """Left(value) if predicate(value), else Right(right_value).

        The predicate runs immediately, at construction time.
        """
        return Either(value, True) if predicate(value) else Either(right_value, False)

    @staticmethod
    def right_when(value: L, right_value: R, predicate: Callable[[L], bool]) -> Either[L, R]:
        """Right(right_value) if predicate(value), else Left(value)."""
        return Either(right_value, False) if predicate(value) else Either(value, True)

    @staticmethod
    def not_null_left(value: L, right_value: R) -> Either[L, R]:
        """Left(value) unless value is None, in which case Right(right_value)."""
        return Either(value, True).left_not_null(right_value)

    @staticmethod
    def from_mapping(
        source: Mapping[Any, L] | Sequence[L],
        key: Any,
        right_value: R | None = None,
    ) -> Either[L, R | MissingKeyError]:
        """Left(source[key]) if the key is present with a non-None value.

        Otherwise Right(right_value), or Right(MissingKeyError) when no
        right_value is given.

        Example:
            >>> Either.from_mapping({"name": "value"}, "name", "oh no")
            Left(value)
            >>> Either.from_mapping({"name": "value"}, "missing", "oh no")
            Right(oh no)
        """
        found, value = lookup(source, key)
        if found:
            return Either(value, True)
        if right_value is None:
            return Either(MissingKeyError(key), False)
        return Either(right_value, False)

    from_array = from_mapping

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_left(self) -> bool:
        return self._is_left

    def is_right(self) -> bool:
        return not self._is_left

    def left_contains(self, value: object) -> bool:
        """True if left and the payload equals ``value`` (==, not identity)."""
        return self._is_left and self._value == value

    def right_contains(self, value: object) -> bool:
        return not self._is_left and self._value == value

    def exists_left(self, predicate: Callable[[L], bool]) -> bool:
        return self._is_left and predicate(cast(L, self._value))

    def exists_right(self, predicate: Callable[[R], bool]) -> bool:
        return not self._is_left and predicate(cast(R, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def left_or(self, alternative: L) -> L:
        return cast(L, self._value) if self._is_left else alternative

    def right_or(self, alternative: R) -> R:
        return cast(R, self._value) if not self._is_left else alternative

    def get_left(self) -> L:
        """Extract the left value.

        Raises:
            MissingValueError: If Either is right
        """
        if self._is_left:
            return cast(L, self._value)
        raise MissingValueError("Left value is missing.")

    def get_right(self) -> R:
        """Extract the right value.

        Raises:
            MissingValueError: If Either is left
        """
        if not self._is_left:
            return cast(R, self._value)
        raise MissingValueError("Right value is missing.")

    def left_or_create(self, factory: Callable[[R], L]) -> L:
        """Left value, or factory(right value). The factory runs only when right."""
        return cast(L, self._value) if self._is_left else factory(cast(R, self._value))

    def right_or_create(self, factory: Callable[[L], R]) -> R:
        return cast(R, self._value) if not self._is_left else factory(cast(L, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Alternatives
    # ─────────────────────────────────────────────────────────────────

    def or_left(self, alternative: L) -> Either[L, R]:
        """Self if left, otherwise Left(alternative)."""
        return self if self._is_left else Either(alternative, True)

    def or_right(self, alternative: R) -> Either[L, R]:
        return self if not self._is_left else Either(alternative, False)

    def or_create_left(self, factory: Callable[[R], L]) -> Either[L, R]:
        """Self if left, otherwise Left(factory(right value))."""
        return self if self._is_left else Either(factory(cast(R, self._value)), True)

    def or_create_right(self, factory: Callable[[L], R]) -> Either[L, R]:
        return self if not self._is_left else Either(factory(cast(L, self._value)), False)

    def else_left(self, alternative: Either[L, R]) -> Either[L, R]:
        """Self if left, otherwise the alternative union as-is."""
        return self if self._is_left else alternative

    def else_right(self, alternative: Either[L, R]) -> Either[L, R]:
        return self if not self._is_left else alternative

    def else_create_left(self, factory: Callable[[R], Either[L, R]]) -> Either[L, R]:
        return self if self._is_left else factory(cast(R, self._value))

    def else_create_right(self, factory: Callable[[L], Either[L, R]]) -> Either[L, R]:
        return self if not self._is_left else factory(cast(L, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Pattern Matching
    # ─────────────────────────────────────────────────────────────────

    def match(self, left: Callable[[L], U], right: Callable[[R], U]) -> U:
        """Invoke exactly one function based on the side held, return its result.

        Example:
            >>> Either.right(404).match(lambda v: f"ok {v}", lambda code: f"failed {code}")
            'failed 404'
        """
        if self._is_left:
            return left(cast(L, self._value))
        return right(cast(R, self._value))

    def match_left(self, left: Callable[[L], object]) -> None:
        """Call ``left`` with the left value for side effects. No-op when right."""
        if self._is_left:
            left(cast(L, self._value))

    def match_right(self, right: Callable[[R], object]) -> None:
        if not self._is_left:
            right(cast(R, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Functor / Monad
    # ─────────────────────────────────────────────────────────────────

    def map_left(self, f: Callable[[L], M]) -> Either[M, R]:
        """Left(f(value)) if left, otherwise the right side re-wrapped as-is."""
        if self._is_left:
            return Either(f(cast(L, self._value)), True)
        return Either(cast(R, self._value), False)

    def map_right(self, f: Callable[[R], S]) -> Either[L, S]:
        if not self._is_left:
            return Either(f(cast(R, self._value)), False)
        return Either(cast(L, self._value), True)

    def map_left_safely(self, f: Callable[[L], M]) -> Either[M, R | Exception]:
        """Like map_left, but an exception raised by f becomes Right(exception).

        Example:
            >>> Either.left(0).map_left_safely(lambda x: 1 / x).is_right()
            True
        """
        if not self._is_left:
            return Either(cast(R, self._value), False)
        outcome = attempt(f, self._value, combinator="Either.map_left_safely")
        if outcome.succeeded:
            return Either(cast(M, outcome.value), True)
        return Either(cast(Exception, outcome.fault), False)

    def flat_map_left(self, f: Callable[[L], Either[M, R]]) -> Either[M, R]:
        """Monadic bind over the left side. f's union is returned directly."""
        if self._is_left:
            return f(cast(L, self._value))
        return Either(cast(R, self._value), False)

    def and_then(self, f: Callable[[L], Either[M, R]]) -> Either[M, R]:
        """Alias for flat_map_left."""
        return self.flat_map_left(f)

    # ─────────────────────────────────────────────────────────────────
    # Filtering
    # ─────────────────────────────────────────────────────────────────

    def filter_left(self, condition: bool, right_value: R) -> Either[L, R]:
        """Right(right_value) if left and condition is False, else self."""
        return Either(right_value, False) if self._is_left and not condition else self

    def filter_right(self, condition: bool, left_value: L) -> Either[L, R]:
        return Either(left_value, True) if not self._is_left and not condition else self

    def filter_left_if(self, predicate: Callable[[L], bool], right_value: R) -> Either[L, R]:
        """Right(right_value) if left and predicate(left value) is False, else self."""
        if self._is_left and not predicate(cast(L, self._value)):
            return Either(right_value, False)
        return self

    def filter_right_if(self, predicate: Callable[[R], bool], left_value: L) -> Either[L, R]:
        if not self._is_left and not predicate(cast(R, self._value)):
            return Either(left_value, True)
        return self

    def left_not_null(self, right_value: R) -> Either[L, R]:
        """Right(right_value) if left holding None, else self."""
        return Either(right_value, False) if self._is_left and self._value is None else self

    def right_not_null(self, left_value: L) -> Either[L, R]:
        return Either(left_value, True) if not self._is_left and self._value is None else self

    def left_not_falsy(self, right_value: R) -> Either[L, R]:
        """Right(right_value) if left holding a falsy value (see ``is_falsy``)."""
        return Either(right_value, False) if self._is_left and is_falsy(self._value) else self

    def right_not_falsy(self, left_value: L) -> Either[L, R]:
        return Either(left_value, True) if not self._is_left and is_falsy(self._value) else self

    # ─────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────

    def to_option_from_left(self) -> Option[L]:
        """Some(left value) if left, else None. The right payload is discarded."""
        return Option.some(cast(L, self._value)) if self._is_left else Option.none()

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        """Structural equality."""
        if not isinstance(other, Either):
            return NotImplemented
        return self._is_left == other._is_left and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_left, self._value))

    def __repr__(self) -> str:
        variant = "Left" if self._is_left else "Right"
        return f"{variant}({describe(self._value)})"

    __str__ = __repr__
