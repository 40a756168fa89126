"""Tests for railop.operation.registry."""

import pytest

from railop.core.result import Failure, Success
from railop.operation import (
    Hooks,
    OperationConfigurationError,
    OperationRegistry,
    OverrideSet,
    StepConfigurationError,
    is_invokable,
)
from railop.operation.registry import ParamsTransform, qualified_name
from railop.operation.testing import StubStep


class LookupService:
    @classmethod
    def call(cls, account_id):
        return Success(account_id)


class TestIsInvokable:
    """Collaborator protocol detection."""

    def test_class_with_call(self):
        assert is_invokable(LookupService)

    def test_instance_with_call(self):
        assert is_invokable(StubStep())

    def test_plain_function(self):
        assert not is_invokable(lambda: None)

    def test_non_callable_call_attribute(self):
        class Weird:
            call = "not callable"

        assert not is_invokable(Weird)


class TestOperationRegistry:
    """Registration and resolution."""

    def test_starts_empty(self):
        registry = OperationRegistry("Op")
        assert registry.steps == {}
        assert registry.params is None
        assert registry.hooks == Hooks()

    def test_register_step(self):
        registry = OperationRegistry("Op")
        binding = registry.register_step("lookup", LookupService, error="LOOKUP_FAILED")
        assert binding.name == "lookup"
        assert registry.binding("lookup") is binding

    def test_register_step_rejects_non_invokable(self):
        registry = OperationRegistry("Op")
        with pytest.raises(StepConfigurationError) as exc_info:
            registry.register_step("lookup", object())
        assert exc_info.value.context.operation == "Op"

    def test_register_step_rejects_reserved_name(self):
        registry = OperationRegistry("Op")
        with pytest.raises(StepConfigurationError) as exc_info:
            registry.register_step("call", LookupService)
        assert "reserved" in str(exc_info.value)
        assert registry.steps == {}

    def test_steps_is_a_copy(self):
        registry = OperationRegistry("Op")
        registry.register_step("lookup", LookupService)
        registry.steps.clear()
        assert "lookup" in registry.steps

    def test_resolve_prefers_override(self):
        registry = OperationRegistry("Op")
        registry.register_step("lookup", LookupService)
        mock = StubStep()
        assert registry.resolve("lookup", OverrideSet(steps={"lookup": mock})) is mock
        assert registry.resolve("lookup", OverrideSet()) is LookupService
        assert registry.resolve("lookup") is LookupService

    def test_resolve_unknown(self):
        registry = OperationRegistry("Op")
        assert registry.resolve("missing") is None
        mock = StubStep()
        assert registry.resolve("missing", OverrideSet(steps={"missing": mock})) is mock

    def test_parent_bindings_are_copied(self):
        parent = OperationRegistry("Parent")
        parent.register_step("lookup", LookupService)
        child = OperationRegistry("Child", parent=parent)
        child.register_step("audit", StubStep())

        assert set(child.steps) == {"lookup", "audit"}
        assert set(parent.steps) == {"lookup"}

    def test_register_hook(self):
        registry = OperationRegistry("Op")

        def hook(result):
            return result

        registry.register_hook("failure", hook)
        assert registry.hooks.on_failure is hook
        assert registry.hooks.for_result(Failure("x")) is hook
        assert registry.hooks.for_result(Success(1)) is None

    def test_register_hook_rejects_non_callable(self):
        with pytest.raises(OperationConfigurationError):
            OperationRegistry("Op").register_hook("success", "nope")


class TestEffectiveParams:
    """Params transform resolution for a call."""

    def test_none_configured(self):
        assert OperationRegistry("Op").effective_params() is None

    def test_registry_only(self):
        registry = OperationRegistry("Op")
        registry.register_params(LookupService, error="INVALID")
        assert registry.effective_params() == ParamsTransform(LookupService, "INVALID")

    def test_override_error_only(self):
        registry = OperationRegistry("Op")
        registry.register_params(LookupService, error="INVALID")
        effective = registry.effective_params(OverrideSet(params_error="CALL"))
        assert effective == ParamsTransform(LookupService, "CALL")

    def test_apply_uses_call_entry_point(self):
        assert ParamsTransform(LookupService).apply(5) == Success(5)
        assert ParamsTransform(lambda p: p + 1).apply(5) == Success(6)


class TestDescribe:
    """JSON-ready registry description."""

    def test_describe(self):
        registry = OperationRegistry("Op")
        registry.register_step("lookup", LookupService, error={"code": 1})
        registry.register_params(LookupService, error="INVALID")
        registry.set_options(unexpected_err=True)

        description = registry.describe()

        assert description["steps"] == [
            {
                "name": "lookup",
                "implementation": qualified_name(LookupService),
                "error": "{'code': 1}",
            }
        ]
        assert description["params"]["error"] == "INVALID"
        assert description["options"]["unexpected_err"] is True

    def test_qualified_name(self):
        assert qualified_name(LookupService).endswith("test_registry.LookupService")
        assert qualified_name(StubStep()) == "railop.operation.testing.StubStep"
        assert qualified_name(None) == "None"
