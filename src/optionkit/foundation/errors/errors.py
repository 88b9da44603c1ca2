"""Structured faults raised and captured by optionkit.

Provides error codes, a serializable description of a fault and the
exception hierarchy the boxes raise when a caller asks for a value that
is not there. Uses Pydantic for validation and serialization.
"""

from __future__ import annotations

import traceback
from enum import StrEnum
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class ErrorCode(StrEnum):
    """Machine-readable classification of a fault."""
    MISSING_VALUE = "MISSING_VALUE"
    MISSING_KEY = "MISSING_KEY"
    REASON = "REASON"
    CAPTURED = "CAPTURED"
    UNWRAPPED = "UNWRAPPED"
    UNKNOWN = "UNKNOWN"


class FaultInfo(BaseModel):
    """Serializable description of a fault.

    Attributes:
        message: Human-readable error message
        kind: Name of the exception type
        code: Machine-readable error code
        details: Optional formatted traceback
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "title": "Fault Info",
            "examples": [{"message": "division by zero", "kind": "ZeroDivisionError", "code": "CAPTURED"}],
        },
    )

    message: str = Field(default="", description="Human-readable error message")
    kind: Annotated[str, Field(min_length=1, description="Exception type name")] = "Exception"
    code: ErrorCode = Field(default=ErrorCode.UNKNOWN, description="Machine-readable error classification")
    details: str | None = Field(default=None, repr=False, description="Formatted traceback")

    @field_validator("message", mode="before")
    @classmethod
    def _ensure_message(cls, v: str | BaseException) -> str:
        """Accept exception objects and extract message."""
        return str(v) if isinstance(v, BaseException) else v

    @computed_field
    @property
    def has_trace(self) -> bool:
        """Whether a traceback was attached."""
        return self.details is not None

    @classmethod
    def from_exception(
        cls,
        exc: BaseException,
        code: ErrorCode | None = None,
        *,
        include_trace: bool = False,
    ) -> Self:
        """Describe an exception. Codes of optionkit's own errors are kept."""
        if code is None:
            code = exc.info.code if isinstance(exc, OptionKitError) else ErrorCode.UNKNOWN
        details = "".join(traceback.format_exception(exc)) if include_trace else None
        return cls(message=str(exc), kind=type(exc).__name__, code=code, details=details)

    def __str__(self) -> str:
        return f"{self.kind}[{self.code}]: {self.message}" if self.message else f"{self.kind}[{self.code}]"


class OptionKitError(Exception):
    """Base exception carrying a FaultInfo."""

    code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.info = FaultInfo(message=message, kind=type(self).__name__, code=self.code)

    def __str__(self) -> str:
        return self.info.message


class MissingValueError(OptionKitError):
    """Raised when a box is asked for a side it does not hold."""

    code = ErrorCode.MISSING_VALUE


class MissingKeyError(OptionKitError, KeyError):
    """Generated fault for a key absent from a mapping or sequence."""

    code = ErrorCode.MISSING_KEY

    def __init__(self, key: object, message: str | None = None) -> None:
        self.key = key
        super().__init__(message or f"Missing key: {key!r}")


class ReasonError(OptionKitError):
    """Exception generated from a descriptive reason string."""

    code = ErrorCode.REASON


class UnwrapError(OptionKitError):
    """Raised when data is demanded from an error result. Wraps the stored fault."""

    code = ErrorCode.UNWRAPPED

    def __init__(self, fault: BaseException) -> None:
        self.fault = fault
        super().__init__(str(fault))
