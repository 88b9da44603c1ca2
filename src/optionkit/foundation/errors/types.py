"""Closed two-variant error value and payload rendering.

An error payload is either a descriptive string (``Reason``) or a raised
exception object (``Fault``). Both are frozen Pydantic models so they can
be dumped alongside log events.
"""

from __future__ import annotations

from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .errors import ErrorCode, FaultInfo, ReasonError


class Reason(BaseModel):
    """Descriptive error string."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["reason"] = "reason"
    message: Annotated[str, Field(description="Why the operation failed")]

    def to_exception(self) -> BaseException:
        """Wrap the reason into a ReasonError."""
        return ReasonError(self.message)

    def __str__(self) -> str:
        return self.message


class Fault(BaseModel):
    """Structured fault wrapping an exception object."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["fault"] = "fault"
    exception: BaseException = Field(exclude=True)

    @computed_field
    @property
    def message(self) -> str:
        return str(self.exception)

    def to_exception(self) -> BaseException:
        return self.exception

    def info(self, code: ErrorCode | None = None, *, include_trace: bool = False) -> FaultInfo:
        """Describe the wrapped exception."""
        return FaultInfo.from_exception(self.exception, code, include_trace=include_trace)

    def __str__(self) -> str:
        return self.message


ErrorValue: TypeAlias = Reason | Fault


def error_value(payload: str | BaseException | ErrorValue) -> ErrorValue:
    """Classify an error payload into one of the two variants.

    Raises:
        TypeError: If payload is neither a string nor an exception
    """
    match payload:
        case Reason() | Fault():
            return payload
        case str():
            return Reason(message=payload)
        case BaseException():
            return Fault(exception=payload)
        case _:
            raise TypeError(f"Error payload must be str or BaseException, got {type(payload).__name__}")


def describe(payload: object) -> str:
    """Render a payload for a box's string form. None renders as ``null``."""
    match payload:
        case None:
            return "null"
        case bool():
            return "true" if payload else "false"
        case _:
            return str(payload)
