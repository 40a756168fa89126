"""Tests for railop.operation.testing — step doubles and assertions."""

import pytest

from railop.core.result import Failure, Success
from railop.operation.testing import (
    FailingStep,
    RaisingStep,
    ScriptedStep,
    StubStep,
    assert_failure,
    assert_success,
)


class TestStepDoubles:
    """Doubles honour the collaborator protocol and record calls."""

    def test_stub_step(self):
        stub = StubStep("value")
        assert stub.call(1, key="x") == Success("value")
        assert stub.calls == [((1,), {"key": "x"})]
        assert stub.called

    def test_failing_step(self):
        failing = FailingStep("DECLINED")
        assert failing.call() == Failure("DECLINED")
        assert len(failing.calls) == 1

    def test_raising_step(self):
        raising = RaisingStep(KeyError("id"))
        with pytest.raises(KeyError):
            raising.call()
        assert raising.called

    def test_scripted_step(self):
        scripted = ScriptedStep("plain", Failure("second"))
        assert scripted.call() == Success("plain")
        assert scripted.call() == Failure("second")
        with pytest.raises(AssertionError):
            scripted.call()


class TestAssertions:
    """assert_success / assert_failure."""

    def test_assert_success(self):
        assert_success(Success(1))
        assert_success(Success(1), value=1)
        with pytest.raises(AssertionError):
            assert_success(Failure("x"))
        with pytest.raises(AssertionError):
            assert_success(Success(1), value=2)

    def test_assert_failure(self):
        assert_failure(Failure("x"))
        assert_failure(Failure(None), error=None)
        with pytest.raises(AssertionError):
            assert_failure(Success(1))
        with pytest.raises(AssertionError):
            assert_failure(Failure("x"), error="y")
