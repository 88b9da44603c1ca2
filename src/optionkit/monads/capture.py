"""Tagged outcome of invoking a user callback.

The safely combinators are the only place where a raised fault is turned
into data. They do it through :func:`attempt`, which runs the callback
once and returns an :class:`Attempt` holding either the value or the
captured exception.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from pydantic import ValidationError

from ..foundation.config import FaultSettings, get_settings
from ..foundation.errors import ErrorCode, FaultInfo
from ..observability import get_logger

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Attempt(Generic[T]):
    """Success-with-value or failure-with-fault."""

    value: T | None = None
    fault: Exception | None = None

    @property
    def succeeded(self) -> bool:
        return self.fault is None

    @classmethod
    def success(cls, value: T) -> Attempt[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, fault: Exception) -> Attempt[T]:
        return cls(fault=fault)


def attempt(fn: Callable[..., T], *args: Any, combinator: str = "callback") -> Attempt[T]:
    """Invoke ``fn(*args)``, capturing any ``Exception`` it raises.

    BaseException subclasses outside ``Exception`` (KeyboardInterrupt,
    SystemExit) are not captured.
    """
    try:
        return Attempt.success(fn(*args))
    except Exception as e:
        _report(e, combinator)
        return Attempt.failure(e)


def _report(fault: Exception, combinator: str) -> None:
    """Emit a debug event for a captured fault."""
    log = get_logger("optionkit.capture")
    if not log.is_enabled_for(logging.DEBUG):
        return
    faults = _fault_settings()
    if not faults.log_captured:
        return
    info = FaultInfo.from_exception(fault, ErrorCode.CAPTURED, include_trace=faults.include_trace)
    log.debug("fault captured", combinator=combinator, **info.model_dump(mode="json", exclude_none=True, exclude={"has_trace"}))


def _fault_settings() -> FaultSettings:
    """Configured fault settings, or the defaults when the environment is invalid."""
    try:
        return get_settings().faults
    except ValidationError:
        return FaultSettings.model_construct()
