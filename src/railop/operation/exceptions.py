"""Operation exceptions — programmer errors and the fail-fast signal.

Configuration errors are defects in an operation's *definition* or in how it
is called. They always raise and are never converted into a ``Failure``,
neither by ``step(block=...)`` nor by the ``unexpected_err`` option.

Hierarchy::

    ConfigError  (from railop.core.errors)
      └── OperationConfigurationError     ── base for definition/call defects
            ├── StepConfigurationError    ── implementation has no ``call``
            └── MissingParamsError        ── transform configured, no params

    OperationError  (from railop.core.errors)
      └── FailFastError                   ── internal short-circuit signal
"""

from __future__ import annotations

from typing import Any

from railop.core.errors import ConfigError, OperationError
from railop.core.result import Failure


class OperationConfigurationError(ConfigError):
    """Base exception for operation definition and call-site defects."""

    pass


ConfigurationError = OperationConfigurationError


class StepConfigurationError(OperationConfigurationError):
    """Raised when a step is bound to something without a ``call`` entry point,
    or under a name the Operation base class already uses."""

    def __init__(
        self,
        step_name: str,
        implementation: Any,
        operation: str | None = None,
        reason: str | None = None,
    ):
        self.step_name = step_name
        self.implementation = implementation
        super().__init__(
            reason or f"Step '{step_name}' must expose a callable 'call', got {implementation!r}"
        )
        self.with_context(operation=operation, step=step_name)


class MissingParamsError(OperationConfigurationError):
    """Raised when a params transform is configured but no ``params`` was passed."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"{operation} has a params transform configured; call it with params=..."
        )
        self.with_context(operation=operation)


class FailFastError(OperationError):
    """Short-circuits an operation body on the first failed step.

    Raised by the step unwrapper and caught once by the call dispatcher,
    which returns ``failure`` as the call's result.
    """

    def __init__(self, failure: Failure, step_name: str | None = None):
        self.failure = failure
        self.step_name = step_name
        super().__init__(f"Step '{step_name or '<anonymous>'}' failed: {failure.error!r}")
