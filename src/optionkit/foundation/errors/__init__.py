"""Error handling for optionkit.

- ErrorCode: Fault classification codes
- FaultInfo: Serializable fault description
- OptionKitError and subclasses: Exceptions raised or generated by the boxes
- Reason/Fault/ErrorValue: Closed two-variant error payload
"""

from .errors import (
    ErrorCode,
    FaultInfo,
    MissingKeyError,
    MissingValueError,
    OptionKitError,
    ReasonError,
    UnwrapError,
)
from .types import ErrorValue, Fault, Reason, describe, error_value

__all__ = [
    # Core errors
    "ErrorCode", "FaultInfo", "OptionKitError",
    "MissingValueError", "MissingKeyError", "ReasonError", "UnwrapError",
    # Error payloads
    "ErrorValue", "Reason", "Fault", "error_value", "describe",
]
