"""Tests for StrictResult.

Validates:
- Error payloads are always exceptions
- Capturing combinators turn raised faults into errors
- data_or_throw unwraps or raises
"""

from __future__ import annotations

import pytest

from optionkit import (
    ErrorCode,
    MissingKeyError,
    Reason,
    ReasonError,
    Result,
    StrictResult,
    UnwrapError,
)


def boom(*_: object) -> object:
    raise ValueError("boom")


# ═════════════════════════════════════════════════════════════════════════════
# Construction
# ═════════════════════════════════════════════════════════════════════════════


def test_error_wraps_strings() -> None:
    """String errors become ReasonError instances."""
    result = StrictResult.error("went wrong")
    fault = result.error_or(RuntimeError())
    assert isinstance(fault, ReasonError)
    assert str(fault) == "went wrong"
    assert fault.info.code == ErrorCode.REASON


def test_error_keeps_exceptions_and_reasons() -> None:
    """Exception payloads are stored as-is; Reason models are converted."""
    error = KeyError("k")
    assert StrictResult.error(error).error_or(RuntimeError()) is error
    assert isinstance(StrictResult.error(Reason(message="r")).error_or(RuntimeError()), ReasonError)


def test_error_rejects_other_payloads() -> None:
    """Only str and exceptions are valid error payloads."""
    with pytest.raises(TypeError):
        StrictResult.error(42)  # type: ignore[arg-type]


def test_okay_when_and_error_when() -> None:
    """Reasons are wrapped; raising predicates become errors."""
    assert StrictResult.okay_when(5, "negative", lambda x: x > 0) == StrictResult.okay(5)
    rejected = StrictResult.okay_when(-5, "negative", lambda x: x > 0)
    assert str(rejected) == "Error(negative)"
    assert StrictResult.error_when(-5, "positive", lambda x: x > 0) == StrictResult.okay(-5)
    assert StrictResult.error_when(5, "positive", lambda x: x > 0).is_error()

    failed = StrictResult.okay_when(5, "negative", boom)
    assert isinstance(failed.error_or(RuntimeError()), ValueError)


def test_okay_not_null() -> None:
    """None data becomes a ReasonError."""
    assert StrictResult.okay_not_null(None, "was null").is_error()
    assert StrictResult.okay_not_null(0, "was null") == StrictResult.okay(0)


def test_from_array() -> None:
    """Missing keys produce a ReasonError or a generated MissingKeyError."""
    assert StrictResult.from_array({"name": "value"}, "name", "oh no") == StrictResult.okay("value")
    assert str(StrictResult.from_array({"name": "value"}, "missing", "oh no")) == "Error(oh no)"

    generated = StrictResult.from_mapping({"name": "value"}, "missing").error_or(RuntimeError())
    assert isinstance(generated, MissingKeyError)
    assert "missing" in str(generated)


# ═════════════════════════════════════════════════════════════════════════════
# Unwrapping
# ═════════════════════════════════════════════════════════════════════════════


def test_data_or_throw_returns_data() -> None:
    """Okay unwraps to its data, None included."""
    assert StrictResult.okay(4).data_or_throw() == 4
    assert StrictResult.okay(None).data_or_throw() is None


def test_data_or_throw_raises_wrapped_fault() -> None:
    """Error raises UnwrapError chained to the stored fault."""
    stored = ValueError("Error!")
    with pytest.raises(UnwrapError, match="Error!") as info:
        StrictResult.error(stored).data_or_throw()
    assert info.value.fault is stored
    assert info.value.__cause__ is stored
    assert info.value.info.code == ErrorCode.UNWRAPPED


def test_fault_info() -> None:
    """fault_info describes the stored exception."""
    assert not StrictResult.okay(1).fault_info().has_value()
    described = StrictResult.error(ValueError("bad")).fault_info().value_or(None)
    assert described is not None
    assert described.kind == "ValueError"
    assert described.message == "bad"


# ═════════════════════════════════════════════════════════════════════════════
# Capturing Combinators
# ═════════════════════════════════════════════════════════════════════════════


def test_map_captures() -> None:
    """map behaves like a safely map."""
    assert StrictResult.okay(2).map(lambda x: x * 2) == StrictResult.okay(4)
    failed = StrictResult.okay(0).map(lambda x: 1 / x)
    assert isinstance(failed.error_or(RuntimeError()), ZeroDivisionError)


def test_map_error_normalizes_and_captures() -> None:
    """Mapped errors are normalized; a raising mapper becomes the error."""
    mapped = StrictResult.error("first").map_error(lambda e: f"wrapped: {e}")
    assert str(mapped) == "Error(wrapped: first)"
    assert isinstance(StrictResult.error("first").map_error(boom).error_or(RuntimeError()), ValueError)
    okay = StrictResult.okay(1)
    assert okay.map_error(boom) is okay


def test_flat_map_captures() -> None:
    """Raising binders become errors; errors short-circuit."""
    assert StrictResult.okay(2).and_then(lambda x: StrictResult.okay(x + 1)) == StrictResult.okay(3)
    assert isinstance(StrictResult.okay(2).flat_map(boom).error_or(RuntimeError()), ValueError)
    error = StrictResult.error("e")
    assert error.flat_map(boom) is error


def test_or_create_result_with_data_captures() -> None:
    """The factory receives the fault; a raising factory yields its fault."""
    assert StrictResult.error("e").or_create_result_with_data(str) == StrictResult.okay("e")
    assert isinstance(
        StrictResult.error("e").or_create_result_with_data(boom).error_or(RuntimeError()), ValueError
    )


def test_create_if_error_captures() -> None:
    """The factory returns a StrictResult; raising factories are captured."""
    recovered = StrictResult.error("e").create_if_error(lambda e: StrictResult.okay("recovered"))
    assert recovered == StrictResult.okay("recovered")
    assert isinstance(StrictResult.error("e").create_if_error(boom).error_or(RuntimeError()), ValueError)
    okay = StrictResult.okay(1)
    assert okay.create_if_error(boom) is okay


def test_to_error_if_and_to_okay_if_capture() -> None:
    """Predicates that raise produce errors instead of propagating."""
    assert str(StrictResult.okay(-1).to_error_if(lambda x: x > 0, "negative")) == "Error(negative)"
    assert StrictResult.okay(1).to_error_if(lambda x: x > 0, "negative") == StrictResult.okay(1)
    assert isinstance(StrictResult.okay(1).to_error_if(boom, "x").error_or(RuntimeError()), ValueError)

    assert StrictResult.error("e").to_okay_if(lambda e: False, 0) == StrictResult.okay(0)
    assert StrictResult.error("e").to_okay_if(lambda e: True, 0).is_error()


def test_to_error_and_to_okay() -> None:
    """Forced side switching with string wrapping."""
    assert str(StrictResult.okay(1).to_error("forced")) == "Error(forced)"
    assert StrictResult.error("e").to_okay(5) == StrictResult.okay(5)


def test_not_null_and_not_falsy() -> None:
    """Reason strings become ReasonError payloads."""
    assert str(StrictResult.okay(None).not_null("null")) == "Error(null)"
    assert str(StrictResult.okay("").not_falsy("empty")) == "Error(empty)"
    assert StrictResult.okay("x").not_falsy("empty") == StrictResult.okay("x")


def test_run_and_queries() -> None:
    """Fold, side effects and queries."""
    seen: list[object] = []
    StrictResult.okay(1).run_on_okay(seen.append)
    StrictResult.okay(1).run_on_error(seen.append)
    assert seen == [1]
    assert StrictResult.okay(1).run(lambda d: d + 1, lambda e: 0) == 2
    assert StrictResult.okay(1).contains(1)
    assert StrictResult.okay(1).exists(lambda x: x == 1)
    error = ValueError("x")
    assert StrictResult.error(error).error_contains(error)


def test_base_exceptions_propagate() -> None:
    """Capturing combinators only capture Exception subclasses."""
    def interrupt(_: object) -> object:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        StrictResult.okay(1).map(interrupt)


def test_string_form() -> None:
    """Errors render by message."""
    assert str(StrictResult.okay(None)) == "Okay(null)"
    assert str(StrictResult.okay(10)) == "Okay(10)"
    assert str(StrictResult.error(Exception("Error!"))) == "Error(Error!)"


def test_string_form_keeps_whitespace() -> None:
    """Reason messages render verbatim."""
    assert str(StrictResult.error("  padded  ")) == "Error(  padded  )"


# ═════════════════════════════════════════════════════════════════════════════
# Foreign Boxes
# ═════════════════════════════════════════════════════════════════════════════


def test_okay_or_normalizes_result_errors() -> None:
    """A Result alternative cannot smuggle a non-exception error in."""
    recovered = StrictResult.error("a").okay_or(Result.error("plain"))
    fault = recovered.error_or(RuntimeError())
    assert isinstance(fault, ReasonError)
    assert str(fault) == "plain"
    with pytest.raises(UnwrapError, match="plain"):
        recovered.data_or_throw()

    assert StrictResult.error("a").okay_or(Result.okay(1)) == StrictResult.okay(1)
    okay = StrictResult.okay(1)
    assert okay.okay_or(Result.error("plain")) is okay


def test_okay_or_rejects_other_values() -> None:
    """Only boxes are valid alternatives."""
    with pytest.raises(TypeError):
        StrictResult.error("a").okay_or(42)  # type: ignore[arg-type]


def test_flat_map_normalizes_result_errors() -> None:
    """A binder returning a Result has its error wrapped into an exception."""
    chained = StrictResult.okay(1).flat_map(lambda x: Result.error("plain"))  # type: ignore[arg-type,return-value]
    assert isinstance(chained.error_or(RuntimeError()), ReasonError)
    assert str(chained) == "Error(plain)"


def test_create_if_error_captures_bad_factory_output() -> None:
    """A factory returning something other than a box becomes Error(TypeError)."""
    recovered = StrictResult.error("e").create_if_error(lambda e: 42)  # type: ignore[arg-type,return-value]
    assert isinstance(recovered.error_or(RuntimeError()), TypeError)
    assert StrictResult.error("e").create_if_error(lambda e: Result.okay(2)) == StrictResult.okay(2)  # type: ignore[arg-type,return-value]
