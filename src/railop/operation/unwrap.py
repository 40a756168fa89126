"""Step unwrapper — turns collaborator outcomes into plain values or a short-circuit.

Three call shapes share one contract:

=====================  ======================================================
Shape                  Behaviour
=====================  ======================================================
``step(result)``       Success → value. Failure → short-circuit.
``step(value, err=)``  ``None`` with ``err`` → short-circuit, else value.
``step(block=fn)``     Exception → short-circuit, Result → as above, else value.
=====================  ======================================================

A short-circuit raises ``FailFastError``; the dispatcher catches it and
returns the carried Failure. The error payload is chosen as: explicit
``err`` > pending frame's step override > ``fail_fast`` option > the
original error.
"""

from __future__ import annotations

from typing import Any, Callable, NoReturn

from railop.core.logging import get_logger
from railop.core.result import Failure, Result, is_result
from railop.operation.exceptions import (
    FailFastError,
    OperationConfigurationError,
)
from railop.operation.frames import ExecutionFrame, FrameStack
from railop.operation.registry import OperationOptions

logger = get_logger(__name__)

MISSING: Any = object()


class StepUnwrapper:
    """Per-call ``step`` primitive bound to one FrameStack."""

    def __init__(self, frames: FrameStack, options: OperationOptions | None = None) -> None:
        self.frames = frames
        self.options = options or OperationOptions()

    def __call__(
        self,
        value: Any = MISSING,
        *,
        err: Any = None,
        block: Callable[[], Any] | None = None,
    ) -> Any:
        if block is not None:
            if value is not MISSING:
                raise OperationConfigurationError("step() takes a value or a block, not both")
            return self._run_block(block, err)

        if value is MISSING:
            raise OperationConfigurationError("step() requires a value or a block")

        if is_result(value):
            return self._unwrap_result(value, err)
        return self._unwrap_value(value, err)

    def _unwrap_result(self, result: Result[Any], err: Any) -> Any:
        frame = self.frames.pending()
        if result.is_failure():
            self._halt(result, err, frame)

        self.frames.mark_done()
        return result.value

    def _unwrap_value(self, value: Any, err: Any) -> Any:
        frame = self.frames.pending()
        if value is None and err is not None:
            self._halt(Failure(None), err, frame)

        self.frames.mark_done()
        return value

    def _run_block(self, block: Callable[[], Any], err: Any) -> Any:
        try:
            value = block()
        except (FailFastError, OperationConfigurationError):
            raise
        except Exception as exc:
            self._halt(Failure(exc), err, self.frames.pending())

        if is_result(value):
            return self._unwrap_result(value, err)

        self.frames.mark_done()
        return value

    def _halt(self, failure: Failure, err: Any, frame: ExecutionFrame | None) -> NoReturn:
        if err is not None:
            error = err
        elif frame is not None and frame.error is not None:
            error = frame.error
        elif self.options.fail_fast is not None:
            error = self.options.fail_fast
        else:
            error = failure.error

        step_name = frame.step_name if frame else None
        logger.debug(
            "step_short_circuited",
            step=step_name,
            overridden=error is not failure.error,
        )
        raise FailFastError(
            failure if error is failure.error else failure.with_error(error),
            step_name=step_name,
        )
