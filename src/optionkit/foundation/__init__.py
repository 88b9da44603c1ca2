"""Foundation - building blocks shared by the boxes.

Contains: error types, truthiness predicates, config.
"""

from .errors import (
    ErrorCode,
    ErrorValue,
    Fault,
    FaultInfo,
    MissingKeyError,
    MissingValueError,
    OptionKitError,
    Reason,
    ReasonError,
    UnwrapError,
    describe,
    error_value,
)
from .predicates import is_falsy, is_truthy, lookup

__all__ = [
    # Errors
    "ErrorCode", "FaultInfo", "OptionKitError",
    "MissingValueError", "MissingKeyError", "ReasonError", "UnwrapError",
    "ErrorValue", "Reason", "Fault", "error_value", "describe",
    # Predicates
    "is_falsy", "is_truthy", "lookup",
]
