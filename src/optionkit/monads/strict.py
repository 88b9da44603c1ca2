"""StrictResult: a Result whose error side is always an exception.

Differences from :class:`Result`:
- Error payloads are normalized through ``error_value``: a descriptive
  string is wrapped into a ``ReasonError``.
- Combinators that run a callback capture an ``Exception`` it raises and
  return it as the error instead of propagating it.
- ``data_or_throw`` unwraps the data or raises the stored fault wrapped
  in ``UnwrapError``. There is no ``data_or``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, cast

from ..foundation.errors import (
    FaultInfo,
    MissingKeyError,
    UnwrapError,
    describe,
    error_value,
)
from ..observability import get_logger
from .capture import attempt
from .either import Either
from .option import Option
from .result import Result

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from ..foundation.errors import ErrorValue

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


def _as_exception(payload: str | BaseException | ErrorValue) -> BaseException:
    return error_value(payload).to_exception()


def _unbox(box: object) -> Either[Any, BaseException]:
    """Union held by a StrictResult. A Result has its error normalized to an exception.

    Raises:
        TypeError: If box is neither a StrictResult nor a Result
    """
    match box:
        case StrictResult():
            return box._either
        case Result():
            return box.to_either().map_right(_as_exception)
        case _:
            raise TypeError(f"Expected StrictResult, got {type(box).__name__}")


class StrictResult(Generic[T]):
    """Okay(data) or Error(exception).

    Examples:
        >>> StrictResult.error("Error!")
        Error(Error!)
        >>> StrictResult.okay(0).map(lambda x: 1 / x).is_error()
        True
        >>> StrictResult.okay(4).data_or_throw()
        4
    """

    __slots__ = ("_either",)

    def __init__(self, either: Either[T, BaseException]) -> None:
        """Private constructor. Use StrictResult.okay() or StrictResult.error() instead."""
        self._either = either

    # ─────────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def okay(data: T) -> StrictResult[T]:
        return StrictResult(Either.left(data))

    @staticmethod
    def error(error: str | BaseException | ErrorValue) -> StrictResult[Any]:
        """Error holding ``error``; a string is wrapped into a ReasonError."""
        return StrictResult(Either.right(_as_exception(error)))

    @staticmethod
    def okay_when(data: T, reason: str, predicate: Callable[[T], bool]) -> StrictResult[T]:
        """Okay(data) if predicate(data), else Error(ReasonError(reason)).

        An exception raised by the predicate becomes the error.
        """
        outcome = attempt(predicate, data, combinator="StrictResult.okay_when")
        if not outcome.succeeded:
            return StrictResult(Either.right(cast(Exception, outcome.fault)))
        return StrictResult(Either.left(data) if outcome.value else Either.right(_as_exception(reason)))

    @staticmethod
    def error_when(data: T, reason: str, predicate: Callable[[T], bool]) -> StrictResult[T]:
        """Error(ReasonError(reason)) if predicate(data), else Okay(data)."""
        outcome = attempt(predicate, data, combinator="StrictResult.error_when")
        if not outcome.succeeded:
            return StrictResult(Either.right(cast(Exception, outcome.fault)))
        return StrictResult(Either.right(_as_exception(reason)) if outcome.value else Either.left(data))

    @staticmethod
    def okay_not_null(data: T, reason: str) -> StrictResult[T]:
        return StrictResult(Either.not_null_left(data, _as_exception(reason)))

    @staticmethod
    def from_mapping(
        source: Mapping[Any, T] | Sequence[T],
        key: Any,
        reason: str | None = None,
    ) -> StrictResult[T]:
        """Okay(source[key]) if present, else Error(ReasonError(reason)).

        Without a reason the error is a MissingKeyError naming the key.
        """
        fault = (
            _as_exception(reason)
            if reason
            else MissingKeyError(key, f"Could not grab {key!r} from source. No reason given.")
        )
        return StrictResult(Either.from_mapping(source, key, fault))

    from_array = from_mapping

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_okay(self) -> bool:
        return self._either.is_left()

    def is_error(self) -> bool:
        return self._either.is_right()

    def contains(self, value: object) -> bool:
        return self._either.left_contains(value)

    def error_contains(self, value: object) -> bool:
        """True if error and the stored exception equals ``value``."""
        return self._either.right_contains(value)

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        return self._either.exists_left(predicate)

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def data_or_throw(self) -> T:
        """Extract data, or raise the stored fault.

        Raises:
            UnwrapError: If Error; ``__cause__`` and ``fault`` hold the stored exception
        """
        if self._either.is_left():
            return self._either.get_left()
        fault = self._either.get_right()
        get_logger("optionkit.strict").debug("raising stored fault", kind=type(fault).__name__)
        raise UnwrapError(fault) from fault

    def error_or(self, alternative: BaseException) -> BaseException:
        return self._either.right_or(alternative)

    def fault_info(self, *, include_trace: bool = False) -> Option[FaultInfo]:
        """Describe the stored fault, if any."""
        return self._either.map_right(
            lambda fault: FaultInfo.from_exception(fault, include_trace=include_trace)
        ).match(lambda _: Option.none(), Option.some)

    # ─────────────────────────────────────────────────────────────────
    # Alternatives
    # ─────────────────────────────────────────────────────────────────

    def or_set_data_to(self, data: T) -> StrictResult[T]:
        return self._rewrap(self._either.or_left(data))

    def or_create_result_with_data(self, factory: Callable[[BaseException], T]) -> StrictResult[T]:
        """Self if okay, else Okay(factory(error)). A raising factory yields Error(fault)."""
        if self._either.is_left():
            return self
        return self._captured(factory, Either.left, "StrictResult.or_create_result_with_data")

    def okay_or(self, alternative: StrictResult[T] | Result[T, Any]) -> StrictResult[T]:
        """Self if okay, else the alternative. A Result alternative has its error normalized."""
        if self._either.is_left():
            return self
        return self._rewrap(_unbox(alternative))

    def create_if_error(self, factory: Callable[[BaseException], StrictResult[T]]) -> StrictResult[T]:
        """Self if okay, else factory(error). A raising factory yields Error(fault)."""
        if self._either.is_left():
            return self
        return self._captured(factory, _unbox, "StrictResult.create_if_error")

    # ─────────────────────────────────────────────────────────────────
    # Pattern Matching
    # ─────────────────────────────────────────────────────────────────

    def run(self, on_okay: Callable[[T], V], on_error: Callable[[BaseException], V]) -> V:
        return self._either.match(on_okay, on_error)

    def run_on_okay(self, on_okay: Callable[[T], object]) -> None:
        self._either.match_left(on_okay)

    def run_on_error(self, on_error: Callable[[BaseException], object]) -> None:
        self._either.match_right(on_error)

    # ─────────────────────────────────────────────────────────────────
    # Functor / Monad
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> StrictResult[U]:
        """Okay(f(data)) if okay. An exception raised by f becomes the error."""
        return StrictResult(self._either.map_left_safely(f))

    def map_error(self, f: Callable[[BaseException], str | BaseException]) -> StrictResult[T]:
        """Error(f(error)) if error; the mapped value is normalized to an exception."""
        if self._either.is_left():
            return self
        return self._captured(lambda e: _as_exception(f(e)), Either.right, "StrictResult.map_error")

    def flat_map(self, f: Callable[[T], StrictResult[U]]) -> StrictResult[U]:
        """Monadic bind. A raising f yields Error(fault)."""
        if self._either.is_right():
            return cast(StrictResult[U], self)
        return self._captured(f, _unbox, "StrictResult.flat_map")

    def and_then(self, f: Callable[[T], StrictResult[U]]) -> StrictResult[U]:
        """Alias for flat_map."""
        return self.flat_map(f)

    # ─────────────────────────────────────────────────────────────────
    # Filtering
    # ─────────────────────────────────────────────────────────────────

    def to_error(self, error: str | BaseException | ErrorValue) -> StrictResult[T]:
        """Turn Okay into Error(error). An Error is returned unchanged."""
        return self._rewrap(self._either.filter_left(False, _as_exception(error)))

    def to_okay(self, data: T) -> StrictResult[T]:
        """Turn Error into Okay(data). An Okay is returned unchanged."""
        return self._rewrap(self._either.filter_right(False, data))

    def to_error_if(
        self,
        predicate: Callable[[T], bool],
        error: str | BaseException | ErrorValue,
    ) -> StrictResult[T]:
        """Error(error) if okay and predicate(data) is False. A raising predicate yields Error(fault)."""
        if self._either.is_right():
            return self
        fault = _as_exception(error)
        return self._captured(
            predicate,
            lambda keep: self._either if keep else Either.right(fault),
            "StrictResult.to_error_if",
        )

    def to_okay_if(self, predicate: Callable[[BaseException], bool], data: T) -> StrictResult[T]:
        """Okay(data) if error and predicate(error) is False. A raising predicate yields Error(fault)."""
        if self._either.is_left():
            return self
        return self._captured(
            predicate,
            lambda keep: self._either if keep else Either.left(data),
            "StrictResult.to_okay_if",
        )

    def not_null(self, reason: str) -> StrictResult[T]:
        return self._rewrap(self._either.left_not_null(_as_exception(reason)))

    def not_falsy(self, reason: str) -> StrictResult[T]:
        """Error(ReasonError(reason)) if the data is falsy (see ``is_falsy``)."""
        return self._rewrap(self._either.left_not_falsy(_as_exception(reason)))

    # ─────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────

    def to_either(self) -> Either[T, BaseException]:
        return self._either

    def to_option(self) -> Option[T]:
        return self._either.to_option_from_left()

    def _rewrap(self, either: Either[Any, BaseException]) -> StrictResult[Any]:
        return self if either is self._either else StrictResult(either)

    def _captured(
        self,
        fn: Callable[[Any], Any],
        build: Callable[[Any], Either[Any, BaseException]],
        combinator: str,
    ) -> StrictResult[Any]:
        """Run fn on the current payload and build the next union from its value.

        A fault raised by fn or by build becomes the error of the returned result.
        """
        payload = self._either.match(lambda d: d, lambda e: e)
        outcome = attempt(lambda p: build(fn(p)), payload, combinator=combinator)
        if not outcome.succeeded:
            return StrictResult(Either.right(cast(Exception, outcome.fault)))
        return self._rewrap(cast(Either[Any, BaseException], outcome.value))

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._either.is_left()

    def __iter__(self) -> Iterator[T]:
        yield from self._either.to_option_from_left()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StrictResult):
            return NotImplemented
        return self._either == other._either

    def __hash__(self) -> int:
        return hash((StrictResult, self._either))

    def __repr__(self) -> str:
        payload = self._either.match(describe, describe)
        return f"Okay({payload})" if self._either.is_left() else f"Error({payload})"

    __str__ = __repr__
