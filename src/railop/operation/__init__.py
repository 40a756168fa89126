"""railop.operation — compose fallible steps into one fail-fast call.

Manifesto:
    Railway-style error propagation without giving up readable bodies:
    collaborators return Results, ``step(...)`` unwraps them, and the first
    Failure becomes the operation's result.  Collaborators are declared once
    on the class and can be swapped for a single call.

Architecture::

    Definition time
        declarations.py   Step, Params, on_success, on_failure
        registry.py       OperationRegistry, StepBinding, ParamsTransform,
                          Hooks, OperationOptions

    Call time
        dispatch.py       CallDispatcher (params → execute → hooks)
        overrides.py      OverrideContainer / OverrideSet (configure=...)
        frames.py         FrameStack of entered steps
        unwrap.py         StepUnwrapper (fail-fast short-circuit)

    base.py               Operation base class
    exceptions.py         configuration errors, FailFastError
    testing.py            step doubles and assertions

Examples::

    from railop.core.result import Failure, Success
    from railop.operation import Operation, Step

    class Transfer(Operation):
        lookup = Step(LookupService)
        debit = Step(DebitService, error="DEBIT_DECLINED")

        def execute(self, account_id):
            account = self.step(self.lookup.call(account_id))
            self.step(self.debit.call(account))
            return account

    Transfer.call(account_id=1)   # Failure("DEBIT_DECLINED") if debit fails

Tags:
    railop, operation, railway, fail-fast, dependency-injection

Doc-Types:
    - API Reference
"""

from railop.operation.base import Operation
from railop.operation.declarations import Hook, Params, Step, on_failure, on_success
from railop.operation.dispatch import CallDispatcher, run
from railop.operation.exceptions import (
    ConfigurationError,
    FailFastError,
    MissingParamsError,
    OperationConfigurationError,
    StepConfigurationError,
)
from railop.operation.frames import ExecutionFrame, FrameStack
from railop.operation.overrides import OverrideContainer, OverrideSet
from railop.operation.registry import (
    Hooks,
    OperationOptions,
    OperationRegistry,
    ParamsTransform,
    StepBinding,
    is_invokable,
)
from railop.operation.unwrap import StepUnwrapper

__all__ = [
    # Base
    "Operation",
    "run",
    # Declarations
    "Step",
    "Params",
    "Hook",
    "on_success",
    "on_failure",
    # Registry
    "OperationRegistry",
    "StepBinding",
    "ParamsTransform",
    "Hooks",
    "OperationOptions",
    "is_invokable",
    # Call time
    "CallDispatcher",
    "OverrideContainer",
    "OverrideSet",
    "ExecutionFrame",
    "FrameStack",
    "StepUnwrapper",
    # Errors
    "OperationConfigurationError",
    "ConfigurationError",
    "StepConfigurationError",
    "MissingParamsError",
    "FailFastError",
]
