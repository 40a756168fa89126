"""
Result envelope for consistent success/failure handling.

Provides a two-variant ``Result[T]``: ``Success[T]`` wraps a value and
``Failure[T]`` wraps an error payload. Every step an operation consumes and
every operation call returns one of the two.

Unlike an exception, a ``Failure`` may carry *any* payload: an exception, an
error code string such as ``"DEBIT_DECLINED"``, or a structured dict. The
operation engine only replaces a payload when an override is configured; it
never invents an error representation of its own.

Manifesto:
    - **Explicit over Implicit:** No hidden exceptions that callers might miss
    - **Any payload:** Error codes, dicts and exceptions are all valid errors
    - **Functional composition:** Chain with map/flat_map without try/except
    - **Immutability:** Frozen dataclasses, safe to share between calls

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                     Result[T]                                │
        │                    (Type Alias)                              │
        ├─────────────────┬─────────────────┬─────────────────────────┤
        │   Success[T]    │   Failure[T]    │     Utilities           │
        ├─────────────────┼─────────────────┼─────────────────────────┤
        │ • value: T      │ • error: Any    │ • is_result()           │
        │ • map()         │ • map_err()     │ • as_result()           │
        │ • flat_map()    │ • or_else()     │ • try_result()          │
        │ • unwrap()      │ • unwrap_or()   │ • collect_results()     │
        │                 │                 │ • partition_results()   │
        └─────────────────┴─────────────────┴─────────────────────────┘

Examples:
    >>> from railop.core.result import Success, Failure
    >>> def divide(a: int, b: int) -> Result[float]:
    ...     if b == 0:
    ...         return Failure("DIVISION_BY_ZERO")
    ...     return Success(a / b)
    >>> match divide(10, 2):
    ...     case Success(value):
    ...         print(f"Result: {value}")
    ...     case Failure(error):
    ...         print(f"Error: {error}")
    Result: 5.0

Guardrails:
    ❌ DON'T: Use unwrap() without checking is_success() first
    ✅ DO: Use unwrap_or() or pattern matching for safe extraction

    ❌ DON'T: Raise exceptions inside map/flat_map functions
    ✅ DO: Return Failure from flat_map if the operation can fail

Tags:
    result-pattern, railway, error-handling, functional-programming, railop

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from railop.core.errors import OperationError


T = TypeVar("T")
U = TypeVar("U")


class UnwrapError(OperationError):
    """Raised by ``Failure.unwrap()`` when the payload is not an exception."""

    def __init__(self, error: Any):
        self.error = error
        super().__init__(f"Called unwrap() on Failure({error!r})")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """
    Successful result containing a value.

    Examples:
        >>> ok = Success(42)
        >>> ok.is_success()
        True
        >>> ok.map(lambda x: x * 2).unwrap()
        84
    """

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the value. Safe for Success."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Get value or default (always returns value for Success)."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:
        """Get value or call f with error (always returns value for Success)."""
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """Transform the value if Success."""
        return Success(f(self.value))

    def flat_map(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """Chain to another Result-returning function."""
        return f(self.value)

    def map_err(self, f: Callable[[Any], Any]) -> Result[T]:
        """Transform error if Failure (no-op for Success)."""
        return self

    def or_else(self, f: Callable[[Any], Result[T]]) -> Result[T]:
        """Return self if Success, otherwise call f with error."""
        return self

    def and_then(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """Alias for flat_map."""
        return f(self.value)

    def inspect(self, f: Callable[[T], None]) -> Result[T]:
        """Call f with value for side effects, return self."""
        f(self.value)
        return self

    def inspect_err(self, f: Callable[[Any], None]) -> Result[T]:
        """Call f with error for side effects (no-op for Success)."""
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"success": True, "value": self.value}

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True, slots=True)
class Failure(Generic[T]):
    """
    Failed result containing an error payload.

    ``map()`` and ``flat_map()`` return the same Failure unchanged, so
    failures flow through chains untouched.

    Examples:
        >>> err = Failure("insufficient funds")
        >>> err.is_failure()
        True
        >>> err.unwrap_or("default")
        'default'
        >>> err.map_err(str.upper).error
        'INSUFFICIENT FUNDS'
    """

    error: Any = None

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Raise the error. Exceptions are re-raised as-is."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapError(self.error)

    def unwrap_or(self, default: T) -> T:
        """Return default for Failure."""
        return default

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:
        """Call f with error to get default."""
        return f(self.error)

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """No-op for Failure, returns self."""
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """No-op for Failure, returns self."""
        return self  # type: ignore[return-value]

    def map_err(self, f: Callable[[Any], Any]) -> Result[T]:
        """Transform the error."""
        return Failure(f(self.error))

    def or_else(self, f: Callable[[Any], Result[T]]) -> Result[T]:
        """Call f with error to attempt recovery."""
        return f(self.error)

    def and_then(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """Alias for flat_map (no-op for Failure)."""
        return self  # type: ignore[return-value]

    def inspect(self, f: Callable[[T], None]) -> Result[T]:
        """No-op for Failure."""
        return self

    def inspect_err(self, f: Callable[[Any], None]) -> Result[T]:
        """Call f with error for side effects, return self."""
        f(self.error)
        return self

    def with_error(self, error: Any) -> Failure[T]:
        """Return a new Failure carrying ``error`` instead."""
        return Failure(error)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        error = self.error
        if hasattr(error, "to_dict"):
            error = error.to_dict()
        elif isinstance(error, BaseException):
            error = {"error_type": type(error).__name__, "message": str(error)}
        return {"success": False, "error": error}

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


Result = Success[T] | Failure[T]


# =============================================================================
# Utilities
# =============================================================================


def is_result(value: Any) -> bool:
    """True when ``value`` is a Success or a Failure."""
    return isinstance(value, (Success, Failure))


def as_result(value: Any) -> Result[Any]:
    """
    Normalize any value into a Result.

    Results pass through untouched; anything else is wrapped as Success.

    >>> as_result(5)
    Success(5)
    >>> as_result(Failure("x"))
    Failure('x')
    """
    if is_result(value):
        return value
    return Success(value)


def try_result(f: Callable[[], T]) -> Result[T]:
    """
    Execute a zero-argument callable, catching exceptions as Failure.

    >>> try_result(lambda: 1 / 0).is_failure()
    True
    """
    try:
        return Success(f())
    except Exception as e:
        return Failure(e)


def collect_results(results: list[Result[T]]) -> Result[list[T]]:
    """
    Collect a list of Results into a Result of list (fail-fast).

    >>> collect_results([Success(1), Success(2)]).unwrap()
    [1, 2]
    >>> collect_results([Success(1), Failure("a"), Failure("b")]).error
    'a'
    """
    values = []
    for result in results:
        match result:
            case Success(value):
                values.append(value)
            case Failure(error):
                return Failure(error)
    return Success(values)


def partition_results(results: list[Result[T]]) -> tuple[list[T], list[Any]]:
    """Partition results into successful values and error payloads."""
    values = []
    errors = []
    for result in results:
        match result:
            case Success(value):
                values.append(value)
            case Failure(error):
                errors.append(error)
    return values, errors


def from_optional(value: T | None, error: Any) -> Result[T]:
    """Success when value is not None, otherwise Failure(error)."""
    if value is None:
        return Failure(error)
    return Success(value)


__all__ = [
    "Result",
    "Success",
    "Failure",
    "UnwrapError",
    "is_result",
    "as_result",
    "try_result",
    "collect_results",
    "partition_results",
    "from_optional",
]
