"""Tests for predicates, error types and payload rendering."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from optionkit import (
    ErrorCode,
    Fault,
    FaultInfo,
    MissingKeyError,
    MissingValueError,
    OptionKitError,
    Reason,
    ReasonError,
    describe,
    error_value,
    is_falsy,
    is_truthy,
)
from optionkit.foundation import lookup


# ═════════════════════════════════════════════════════════════════════════════
# Predicates
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    "value",
    [None, False, 0, 0.0, 0j, Decimal(0), "", "0", b"", bytearray(), [], (), {}, set(), frozenset()],
)
def test_is_falsy(value: object) -> None:
    """Every member of the documented falsy set."""
    assert is_falsy(value)
    assert not is_truthy(value)


@pytest.mark.parametrize("value", [True, 1, -1, 0.1, "a", "00", " ", b"0", [None], {"k": 0}, object()])
def test_is_truthy(value: object) -> None:
    """Anything outside the falsy set."""
    assert is_truthy(value)


def test_lookup() -> None:
    """Mappings by key, sequences by index; None counts as missing."""
    assert lookup({"a": 1}, "a") == (True, 1)
    assert lookup({"a": None}, "a") == (False, None)
    assert lookup({"a": 1}, "b") == (False, None)
    assert lookup([1, 2], 0) == (True, 1)
    assert lookup([1, 2], 2) == (False, None)
    assert lookup([1, 2], "0") == (False, None)
    assert lookup("abc", 0) == (False, None)


# ═════════════════════════════════════════════════════════════════════════════
# Errors
# ═════════════════════════════════════════════════════════════════════════════


def test_error_hierarchy() -> None:
    """Each error carries a FaultInfo with its own code."""
    for exc, code in [
        (MissingValueError("gone"), ErrorCode.MISSING_VALUE),
        (MissingKeyError("k"), ErrorCode.MISSING_KEY),
        (ReasonError("why"), ErrorCode.REASON),
    ]:
        assert isinstance(exc, OptionKitError)
        assert exc.info.code == code
        assert exc.info.kind == type(exc).__name__


def test_missing_key_error_message() -> None:
    """Default message names the key; str() is not KeyError's repr."""
    exc = MissingKeyError("name")
    assert str(exc) == "Missing key: 'name'"
    assert exc.key == "name"
    with pytest.raises(KeyError):
        raise exc


def test_fault_info_from_exception() -> None:
    """FaultInfo describes arbitrary exceptions and keeps optionkit codes."""
    info = FaultInfo.from_exception(ValueError("bad value"))
    assert info.kind == "ValueError"
    assert info.message == "bad value"
    assert info.code == ErrorCode.UNKNOWN
    assert info.details is None
    assert not info.has_trace

    assert FaultInfo.from_exception(ReasonError("why")).code == ErrorCode.REASON
    assert FaultInfo.from_exception(ValueError("x"), ErrorCode.CAPTURED).code == ErrorCode.CAPTURED


def test_fault_info_with_trace() -> None:
    """include_trace attaches a formatted traceback."""
    try:
        raise RuntimeError("traced")
    except RuntimeError as e:
        info = FaultInfo.from_exception(e, include_trace=True)
    assert info.has_trace
    assert "RuntimeError: traced" in (info.details or "")


def test_fault_info_is_frozen_and_serializable() -> None:
    """FaultInfo is an immutable pydantic model."""
    info = FaultInfo(message=ValueError("from exception"), kind="ValueError")  # type: ignore[arg-type]
    assert info.message == "from exception"
    assert info.model_dump(mode="json")["code"] == "UNKNOWN"
    with pytest.raises(ValidationError):
        info.message = "changed"  # type: ignore[misc]


# ═════════════════════════════════════════════════════════════════════════════
# Error Values
# ═════════════════════════════════════════════════════════════════════════════


def test_error_value_classification() -> None:
    """Strings become Reason, exceptions become Fault."""
    reason = error_value("why")
    assert isinstance(reason, Reason)
    assert reason.message == "why"

    exc = ValueError("bad")
    fault = error_value(exc)
    assert isinstance(fault, Fault)
    assert fault.exception is exc
    assert fault.message == "bad"
    assert error_value(fault) is fault


def test_error_value_to_exception() -> None:
    """Reason wraps into ReasonError; Fault returns its exception."""
    assert isinstance(Reason(message="why").to_exception(), ReasonError)
    exc = ValueError("bad")
    assert Fault(exception=exc).to_exception() is exc


def test_fault_dump_excludes_exception() -> None:
    """Fault serializes its message, not the exception object."""
    dumped = Fault(exception=ValueError("bad")).model_dump()
    assert dumped == {"kind": "fault", "message": "bad"}


@pytest.mark.parametrize(
    ("payload", "text"),
    [(None, "null"), (True, "true"), (False, "false"), (10, "10"), ("abc", "abc"), (ValueError("Error!"), "Error!")],
)
def test_describe(payload: object, text: str) -> None:
    """Payload rendering for string forms."""
    assert describe(payload) == text
