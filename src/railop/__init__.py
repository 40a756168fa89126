"""railop -- Railway-style operations with per-call dependency overrides.

Example::

    from railop import Operation, Step, Success, Failure

    class Transfer(Operation):
        lookup = Step(LookupService)
        debit = Step(DebitService, error="DEBIT_DECLINED")

        def execute(self, account_id):
            account = self.step(self.lookup.call(account_id))
            self.step(self.debit.call(account))
            return account
"""

from railop.core.result import Failure, Result, Success
from railop.operation import (
    ConfigurationError,
    MissingParamsError,
    Operation,
    OperationOptions,
    Params,
    Step,
    StepConfigurationError,
    on_failure,
    on_success,
)

__version__ = "0.1.0"

__all__ = [
    "Failure",
    "Result",
    "Success",
    "Operation",
    "OperationOptions",
    "Params",
    "Step",
    "on_failure",
    "on_success",
    "ConfigurationError",
    "MissingParamsError",
    "StepConfigurationError",
    "__version__",
]
