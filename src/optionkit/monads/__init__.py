"""Boxes for None-free and exception-free control flow.

Example:
    >>> from optionkit.monads import Either, Option, Result
    >>>
    >>> def parse(raw: str) -> Result[int, str]:
    ...     return Result.okay(raw).map_safely(int).map_error(lambda e: f"not a number: {raw}")
    >>>
    >>> parse("21").map(lambda x: x * 2).data_or(0)
    42
    >>> Either.left(3).to_option_from_left()
    Some(3)
"""

from .capture import Attempt, attempt
from .either import Either
from .option import Option
from .result import Result, collect_results, sequence, traverse
from .strict import StrictResult

__all__ = [
    # Core types
    "Either",
    "Option",
    "Result",
    "StrictResult",
    # Fault capture
    "Attempt",
    "attempt",
    # Collection operations
    "sequence",
    "traverse",
    "collect_results",
]
