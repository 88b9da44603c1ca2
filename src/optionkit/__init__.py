"""optionkit - Option, Either and Result boxes with a rich combinator surface.

Model presence, two-sided values and success/failure without None checks
or exception-driven control flow.

Quick Start:
    >>> from optionkit import Option, Either, Result
    >>>
    >>> Option.from_mapping({"name": "value"}, "name").map(str.upper).value_or("")
    'VALUE'
    >>> Either.left_when(-5, "negative", lambda x: x > 0)
    Right(negative)
    >>> Result.okay(10)
    Okay(10)

Strict results carry exceptions only and unwrap by raising:
    >>> from optionkit import StrictResult
    >>> StrictResult.okay(0).map(lambda x: 1 / x)
    Error(division by zero)

Configuration (environment variables, applied by configure_from_settings()):
    OPTIONKIT_LOG_LEVEL=DEBUG       show captured faults
    OPTIONKIT_LOG_FORMAT=json       JSON Lines output

    >>> from optionkit import configure_from_settings
    >>> configure_from_settings()  # doctest: +SKIP
"""

from __future__ import annotations

from .foundation import (
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
    is_falsy,
    is_truthy,
)
from .foundation.config import OptionKitSettings, clear_settings_cache, get_settings
from .monads import (
    Attempt,
    Either,
    Option,
    Result,
    StrictResult,
    attempt,
    collect_results,
    sequence,
    traverse,
)
from .observability import configure_from_settings, configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Boxes
    "Either", "Option", "Result", "StrictResult",
    "sequence", "traverse", "collect_results",
    "Attempt", "attempt",
    # Errors
    "ErrorCode", "FaultInfo", "OptionKitError",
    "MissingValueError", "MissingKeyError", "ReasonError", "UnwrapError",
    "ErrorValue", "Reason", "Fault", "error_value", "describe",
    # Predicates
    "is_falsy", "is_truthy",
    # Config
    "OptionKitSettings", "get_settings", "clear_settings_cache",
    # Logging
    "configure_logging", "configure_from_settings", "get_logger",
]
