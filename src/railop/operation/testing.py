"""Test Harness — step doubles and assertions for operations.

Manifesto:
Operations get their collaborators injected per call, so tests rarely need
mocks: hand a double to ``configure`` and assert on the Result.

ARCHITECTURE
────────────
::

    Step doubles (all record ``calls``):
      StubStep(value)          → Success(value)
      FailingStep(error)       → Failure(error)
      RaisingStep(exc)         → raises exc
      ScriptedStep(*outcomes)  → returns outcomes in order

    Assertion helpers:
      assert_success(result, value=...)
      assert_failure(result, error=...)

Example::

    from railop.operation.testing import FailingStep, assert_failure

    def test_debit_declined():
        debit = FailingStep("insufficient funds")
        result = Transfer.call(account_id=1, configure=lambda o: o.step(debit=debit))
        assert_failure(result, error="insufficient funds")
        assert len(debit.calls) == 1

Tags:
    railop, operation, testing, doubles, assertions

Doc-Types:
    api-reference
"""

from __future__ import annotations

from typing import Any

from railop.core.result import Failure, Result, Success, as_result

_UNSET: Any = object()


class _RecordingStep:
    def __init__(self) -> None:
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []

    def call(self, *args: Any, **kwargs: Any) -> Any:
        self.calls.append((args, kwargs))
        return self._respond(*args, **kwargs)

    def _respond(self, *args: Any, **kwargs: Any) -> Any:
        raise NotImplementedError

    @property
    def called(self) -> bool:
        return bool(self.calls)


class StubStep(_RecordingStep):
    """Always succeeds with ``value``."""

    def __init__(self, value: Any = None) -> None:
        super().__init__()
        self.value = value

    def _respond(self, *args: Any, **kwargs: Any) -> Result[Any]:
        return Success(self.value)


class FailingStep(_RecordingStep):
    """Always fails with ``error``."""

    def __init__(self, error: Any = "Simulated failure") -> None:
        super().__init__()
        self.error = error

    def _respond(self, *args: Any, **kwargs: Any) -> Result[Any]:
        return Failure(self.error)


class RaisingStep(_RecordingStep):
    """Always raises ``exc``."""

    def __init__(self, exc: Exception | None = None) -> None:
        super().__init__()
        self.exc = exc or RuntimeError("Simulated crash")

    def _respond(self, *args: Any, **kwargs: Any) -> Any:
        raise self.exc


class ScriptedStep(_RecordingStep):
    """Returns each outcome in turn; plain values become Success."""

    def __init__(self, *outcomes: Any) -> None:
        super().__init__()
        self._outcomes = list(outcomes)

    def _respond(self, *args: Any, **kwargs: Any) -> Result[Any]:
        if not self._outcomes:
            raise AssertionError(f"ScriptedStep exhausted after {len(self.calls) - 1} calls")
        return as_result(self._outcomes.pop(0))


def assert_success(result: Result[Any], value: Any = _UNSET) -> None:
    """Assert ``result`` is a Success, optionally carrying ``value``."""
    assert result.is_success(), f"Expected Success, got {result!r}"
    if value is not _UNSET:
        assert result.value == value, f"Expected Success({value!r}), got {result!r}"


def assert_failure(result: Result[Any], error: Any = _UNSET) -> None:
    """Assert ``result`` is a Failure, optionally carrying ``error``."""
    assert result.is_failure(), f"Expected Failure, got {result!r}"
    if error is not _UNSET:
        assert result.error == error, f"Expected Failure({error!r}), got {result!r}"


__all__ = [
    "StubStep",
    "FailingStep",
    "RaisingStep",
    "ScriptedStep",
    "assert_success",
    "assert_failure",
]
