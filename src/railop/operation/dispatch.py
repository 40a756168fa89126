"""Call Dispatcher — drives one ``Operation.call`` from arguments to Result.

Manifesto:
Operation bodies should read like straight-line code: unwrap a step,
use its value, unwrap the next one.  Everything around that (overrides,
params validation, turning plain returns into Results, hooks) happens
here, once, at the call boundary.

ARCHITECTURE
────────────
::

    call(*args, configure=None, **kwargs)
      │
      ├─ 1. Init                 configure → OverrideSet, new instance
      ├─ 2. ResolveParams        override transform > registry transform
      ├─ 3. TransformParams      no params → MissingParamsError
      │                          Failure → (params error) return, no hooks
      │                          Success → kwargs["params"] = value
      ├─ 4. Execute              instance.execute(...)
      │                          FailFastError → its Failure
      │                          other exception → raise, or Failure when
      │                          the unexpected_err option is set
      ├─ 5. NormalizeResult      plain value → Success(value)
      ├─ 6. DispatchHooks        on_success / on_failure replaces result
      └─ 7. Done                 return Result

Related modules:
    base.py       — Operation.call delegates here
    unwrap.py     — raises the FailFastError caught in Execute
    registry.py   — params transform, hooks and options

Tags:
    railop, operation, dispatcher, railway, fail-fast

Doc-Types:
    api-reference
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from railop.core.logging import LogContext, get_logger
from railop.core.result import Failure, Result, as_result
from railop.core.settings import get_settings
from railop.operation.exceptions import (
    FailFastError,
    MissingParamsError,
    OperationConfigurationError,
)
from railop.operation.overrides import OverrideContainer

if TYPE_CHECKING:
    from railop.operation.base import Operation

logger = get_logger(__name__)


class CallDispatcher:
    """Runs calls of one operation class."""

    def __init__(self, operation_cls: type[Operation]) -> None:
        self.operation_cls = operation_cls
        self.registry = operation_cls.registry()
        self.name = operation_cls.__qualname__

    def dispatch(
        self,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
        configure: Callable[[OverrideContainer], Any] | None = None,
    ) -> Result[Any]:
        overrides = OverrideContainer.collect(configure) if configure is not None else None
        instance = self.operation_cls(overrides=overrides)

        with LogContext(operation=self.name):
            logger.debug(
                "operation_started",
                overrides=sorted(overrides.steps) if overrides else [],
            )

            transform = self.registry.effective_params(overrides)
            if transform is not None:
                if "params" not in kwargs:
                    raise MissingParamsError(self.name)

                outcome = transform.apply(kwargs["params"])
                if outcome.is_failure():
                    if transform.error is not None:
                        outcome = outcome.with_error(transform.error)
                    logger.debug("params_rejected", error=repr(outcome.error))
                    return outcome

                kwargs = {**kwargs, "params": outcome.value}

            result = self._execute(instance, args, kwargs)
            result = self._dispatch_hooks(result)

            self._log_finished(instance, result)
            return result

    def _execute(self, instance: Operation, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Result[Any]:
        options = self.registry.options
        try:
            returned = instance.execute(*args, **kwargs)
        except FailFastError as signal:
            returned = signal.failure
        except OperationConfigurationError:
            raise
        except Exception as exc:
            if options.unexpected_err is None or options.unexpected_err is False:
                raise
            logger.debug("unexpected_error_captured", error=repr(exc))
            returned = Failure(exc if options.unexpected_err is True else options.unexpected_err)

        result = as_result(returned)
        if result.is_failure() and result.error is None and options.failure is not None:
            result = result.with_error(options.failure)
        return result

    def _dispatch_hooks(self, result: Result[Any]) -> Result[Any]:
        hook = self.registry.hooks.for_result(result)
        if hook is None:
            return result

        logger.debug("hook_dispatched", kind="success" if result.is_success() else "failure")
        return as_result(hook(result))

    def _log_finished(self, instance: Operation, result: Result[Any]) -> None:
        extra: dict[str, Any] = {}
        if get_settings().trace_frames:
            extra["frames"] = instance.frames.to_list()
        logger.debug("operation_finished", success=result.is_success(), **extra)


def run(
    operation_cls: type[Operation],
    *args: Any,
    configure: Callable[[OverrideContainer], Any] | None = None,
    **kwargs: Any,
) -> Result[Any]:
    """Functional entry point, equivalent to ``operation_cls.call(...)``."""
    return CallDispatcher(operation_cls).dispatch(args, kwargs, configure)


__all__ = ["CallDispatcher", "run"]
