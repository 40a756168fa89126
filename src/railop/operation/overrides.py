"""Call-time overrides — step and params substitutions scoped to one call.

A caller passes ``configure=`` to ``Operation.call``; it receives a fresh
``OverrideContainer`` exposing the same ``step``/``params`` surface as the
class body. The container's ``configurations()`` become the call's
``OverrideSet``, which the registry consults before its own bindings.

Example::

    result = Transfer.call(
        account_id=1,
        configure=lambda o: o.step(lookup=MockLookup),
    )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from railop.operation.exceptions import OperationConfigurationError, StepConfigurationError
from railop.operation.registry import is_invokable


@dataclass
class OverrideSet:
    """Step substitutions plus an optional params transform and error."""

    steps: dict[str, Any] = field(default_factory=dict)
    params: Any = None
    params_error: Any = None

    def step(self, name: str) -> Any:
        return self.steps.get(name)

    def __bool__(self) -> bool:
        return bool(self.steps) or self.params is not None or self.params_error is not None


class OverrideContainer:
    """Collects overrides from a caller's ``configure`` callable."""

    def __init__(self) -> None:
        self._configurations = OverrideSet()

    @classmethod
    def collect(cls, configure: Callable[[OverrideContainer], Any]) -> OverrideSet:
        """Run ``configure`` against a fresh container and return its overrides."""
        if not callable(configure):
            raise OperationConfigurationError(
                f"configure must be callable, got {configure!r}"
            )
        container = cls()
        configure(container)
        return container.configurations()

    def step(self, **bindings: Any) -> OverrideContainer:
        for name, implementation in bindings.items():
            if not is_invokable(implementation):
                raise StepConfigurationError(name, implementation)
            self._configurations.steps[name] = implementation
        return self

    def params(self, transform: Any = None, error: Any = None) -> OverrideContainer:
        if transform is not None and not (is_invokable(transform) or callable(transform)):
            raise OperationConfigurationError(
                f"Params transform must be callable or expose 'call', got {transform!r}"
            )
        self._configurations.params = transform
        self._configurations.params_error = error
        return self

    def configurations(self) -> OverrideSet:
        return self._configurations
