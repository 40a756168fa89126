"""railop.core -- result type, errors, logging and settings.

Architecture::

    errors.py     Structured error hierarchy (RailopError, ConfigError)
    result.py     Result[T] envelope (Success / Failure / as_result)
    logging.py    structlog configuration and context binding
    settings.py   RailopSettings (pydantic-settings, RAILOP_ prefix)
"""

from railop.core.errors import (
    ConfigError,
    ErrorCategory,
    ErrorContext,
    OperationError,
    RailopError,
)
from railop.core.result import (
    Failure,
    Result,
    Success,
    UnwrapError,
    as_result,
    collect_results,
    from_optional,
    is_result,
    partition_results,
    try_result,
)

__all__ = [
    "ConfigError",
    "ErrorCategory",
    "ErrorContext",
    "OperationError",
    "RailopError",
    "Failure",
    "Result",
    "Success",
    "UnwrapError",
    "as_result",
    "collect_results",
    "from_optional",
    "is_result",
    "partition_results",
    "try_result",
]
