"""Result monad for success/failure without exception-driven control flow.

A Result wraps an :class:`Either` with success data on the left and the
error on the right, and renames the left-side vocabulary:

- is_okay/is_error, data_or/error_or
- map/map_safely/map_error, and_then/flat_map
- run/run_on_okay/run_on_error (fold and side effects)
- to_error/to_okay, to_error_if/to_okay_if, not_null/not_falsy

The error payload may be anything; exceptions and descriptive strings
are the usual choices.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, cast

from ..foundation.errors import describe
from .either import Either

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping, Sequence

    from .option import Option

T = TypeVar("T")  # Data type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped data type
F = TypeVar("F")  # Mapped error type
V = TypeVar("V")  # Fold result type


class Result(Generic[T, E]):
    """Okay(data) or Error(error).

    Examples:
        >>> Result.okay(5).map(lambda x: x * 2).data_or(0)
        10
        >>> Result.error("fail").map(lambda x: x * 2).error_or("")
        'fail'

        Railway-oriented programming:
        >>> def positive(x: int) -> Result[int, str]:
        ...     return Result.okay_when(x, "must be positive", lambda v: v > 0)
        >>>
        >>> Result.okay(5).and_then(positive).map(lambda x: x * 2)
        Okay(10)
    """

    __slots__ = ("_either",)

    def __init__(self, either: Either[T, E]) -> None:
        """Private constructor. Use Result.okay() or Result.error() instead."""
        self._either = either

    # ─────────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def okay(data: T) -> Result[T, Any]:
        return Result(Either.left(data))

    @staticmethod
    def error(error: E) -> Result[Any, E]:
        return Result(Either.right(error))

    @staticmethod
    def okay_when(data: T, error: E, predicate: Callable[[T], bool]) -> Result[T, E]:
        """Okay(data) if predicate(data), else Error(error). Evaluated immediately."""
        return Result(Either.left_when(data, error, predicate))

    @staticmethod
    def error_when(data: T, error: E, predicate: Callable[[T], bool]) -> Result[T, E]:
        """Error(error) if predicate(data), else Okay(data)."""
        return Result(Either.right_when(data, error, predicate))

    @staticmethod
    def okay_not_null(data: T, error: E) -> Result[T, E]:
        """Okay(data) unless data is None."""
        return Result(Either.not_null_left(data, error))

    @staticmethod
    def from_mapping(source: Mapping[Any, T] | Sequence[T], key: Any, error: E | None = None) -> Result[T, Any]:
        """Okay(source[key]) if present, else Error(error) or Error(MissingKeyError)."""
        return Result(Either.from_mapping(source, key, error))

    from_array = from_mapping

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_okay(self) -> bool:
        return self._either.is_left()

    def is_error(self) -> bool:
        return self._either.is_right()

    def contains(self, value: object) -> bool:
        """True if okay and the data equals ``value``."""
        return self._either.left_contains(value)

    def error_contains(self, value: object) -> bool:
        return self._either.right_contains(value)

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        return self._either.exists_left(predicate)

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def data_or(self, alternative: T) -> T:
        return self._either.left_or(alternative)

    def error_or(self, alternative: E) -> E:
        return self._either.right_or(alternative)

    def data_or_return(self, factory: Callable[[E], T]) -> T:
        """Data if okay, else factory(error)."""
        return self._either.left_or_create(factory)

    # ─────────────────────────────────────────────────────────────────
    # Alternatives
    # ─────────────────────────────────────────────────────────────────

    def or_set_data_to(self, data: T) -> Result[T, E]:
        """Self if okay, else Okay(data)."""
        return self._rewrap(self._either.or_left(data))

    def or_create_result_with_data(self, factory: Callable[[E], T]) -> Result[T, E]:
        """Self if okay, else Okay(factory(error))."""
        return self._rewrap(self._either.or_create_left(factory))

    def okay_or(self, alternative: Result[T, E]) -> Result[T, E]:
        """Self if okay, else the alternative result."""
        return self._rewrap(self._either.else_left(alternative._either))

    def create_if_error(self, factory: Callable[[E], Result[T, E]]) -> Result[T, E]:
        """Self if okay, else the Result built by factory(error)."""
        return self._rewrap(self._either.else_create_left(lambda e: factory(e)._either))

    # ─────────────────────────────────────────────────────────────────
    # Pattern Matching
    # ─────────────────────────────────────────────────────────────────

    def run(self, on_okay: Callable[[T], V], on_error: Callable[[E], V]) -> V:
        """Fold: invoke exactly one branch and return its result.

        Example:
            >>> Result.error("boom").run(lambda d: f"got {d}", lambda e: f"failed: {e}")
            'failed: boom'
        """
        return self._either.match(on_okay, on_error)

    def run_on_okay(self, on_okay: Callable[[T], object]) -> None:
        self._either.match_left(on_okay)

    def run_on_error(self, on_error: Callable[[E], object]) -> None:
        self._either.match_right(on_error)

    # ─────────────────────────────────────────────────────────────────
    # Functor / Monad
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Okay(f(data)) if okay; errors pass through. Exceptions from f propagate."""
        return Result(self._either.map_left(f))

    def map_safely(self, f: Callable[[T], U]) -> Result[U, E | Exception]:
        """Like map, but an exception raised by f becomes Error(exception)."""
        return Result(self._either.map_left_safely(f))

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        return Result(self._either.map_right(f))

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind: chain operations that can fail."""
        return Result(self._either.flat_map_left(lambda data: f(data)._either))

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Alias for flat_map."""
        return self.flat_map(f)

    # ─────────────────────────────────────────────────────────────────
    # Filtering
    # ─────────────────────────────────────────────────────────────────

    def to_error(self, error: E) -> Result[T, E]:
        """Turn Okay into Error(error). An Error is returned unchanged.

        The condition passed down is a constant False, so this always
        forces the error side rather than filtering.
        """
        return self._rewrap(self._either.filter_left(False, error))

    def to_okay(self, data: T) -> Result[T, E]:
        """Turn Error into Okay(data). An Okay is returned unchanged."""
        return self._rewrap(self._either.filter_right(False, data))

    def to_error_if(self, predicate: Callable[[T], bool], error: E) -> Result[T, E]:
        """Error(error) if okay and predicate(data) is False."""
        return self._rewrap(self._either.filter_left_if(predicate, error))

    def to_okay_if(self, predicate: Callable[[E], bool], data: T) -> Result[T, E]:
        """Okay(data) if error and predicate(error) is False."""
        return self._rewrap(self._either.filter_right_if(predicate, data))

    def not_null(self, error: E) -> Result[T, E]:
        return self._rewrap(self._either.left_not_null(error))

    def not_falsy(self, error: E) -> Result[T, E]:
        """Error(error) if the data is falsy (see ``is_falsy``)."""
        return self._rewrap(self._either.left_not_falsy(error))

    # ─────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────

    def to_either(self) -> Either[T, E]:
        return self._either

    def to_option(self) -> Option[T]:
        """Some(data) if okay, else None."""
        return self._either.to_option_from_left()

    def _rewrap(self, either: Either[T, E]) -> Result[T, E]:
        return self if either is self._either else Result(either)

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """True if Okay."""
        return self._either.is_left()

    def __iter__(self) -> Iterator[T]:
        """Yield the data if okay."""
        yield from self._either.to_option_from_left()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._either == other._either

    def __hash__(self) -> int:
        return hash((Result, self._either))

    def __repr__(self) -> str:
        payload = self._either.match(describe, describe)
        return f"Okay({payload})" if self._either.is_left() else f"Error({payload})"

    __str__ = __repr__


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Convert Results to a Result of list, failing fast on the first Error.

    Example:
        >>> sequence([Result.okay(1), Result.okay(2)])
        Okay([1, 2])
        >>> sequence([Result.okay(1), Result.error("fail"), Result.okay(3)])
        Error(fail)
    """
    values: list[T] = []
    for result in results:
        if result.is_error():
            return cast(Result[list[T], E], result)
        values.append(result._either.get_left())
    return Result.okay(values)


def traverse(items: Iterable[T], f: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map f over items and sequence the results. Stops calling f at the first Error."""
    return sequence(f(item) for item in items)


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect all Results, accumulating every error if any fail.

    Unlike sequence, this doesn't fail fast.
    """
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        result.run(values.append, errors.append)
    return Result.okay(values) if not errors else Result.error(errors)
