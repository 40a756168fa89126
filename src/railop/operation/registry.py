"""Operation Registry — per-operation store of step bindings and hooks.

Manifesto:
Every operation class owns exactly one registry.  It is filled while the
class body is evaluated (``Step``/``Params``/``on_success`` declarations) and
only read afterwards.  Per-call overrides never touch it: they live in an
``OverrideSet`` that is layered on top at resolution time.

ARCHITECTURE
────────────
::

    OperationRegistry
      ├── register_step(name, impl, error)    → StepBinding (overwrites)
      ├── register_params(transform, error)   → ParamsTransform (last wins)
      ├── register_hook("success"|"failure")  → Hooks
      ├── set_options(fail_fast, failure, unexpected_err)
      ├── resolve(name, overrides)            → override > binding > None
      ├── effective_params(overrides)         → ParamsTransform | None
      └── describe()                          → JSON-ready dict

BEST PRACTICES
──────────────
- Declare everything in the class body; mutating a registry while calls
  are in flight is unsupported.
- Subclass registries start as a copy of the parent's, so a subclass can
  replace a single step without redeclaring the rest.

Related modules:
    base.py       — Operation, owner of the registry
    overrides.py  — OverrideSet consulted by resolve()
    dispatch.py   — reads params transform, hooks and options per call

Tags:
    railop, operation, registry, dependency-injection

Doc-Types:
    api-reference
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Callable

from railop.core.logging import get_logger
from railop.core.result import Result, as_result
from railop.operation.exceptions import (
    OperationConfigurationError,
    StepConfigurationError,
)

if TYPE_CHECKING:
    from railop.operation.overrides import OverrideSet

logger = get_logger(__name__)

HOOK_KINDS = ("success", "failure")

# Members of Operation that a step accessor must not shadow
RESERVED_STEP_NAMES = frozenset(
    {
        "call",
        "describe",
        "execute",
        "frames",
        "overrides",
        "register_hook",
        "register_params",
        "register_step",
        "registry",
        "resolve_step",
        "set_options",
        "step",
    }
)


def is_invokable(implementation: Any) -> bool:
    """True when ``implementation`` honours the collaborator protocol."""
    return callable(getattr(implementation, "call", None))


def qualified_name(obj: Any) -> str:
    """Best-effort dotted name for display."""
    if obj is None:
        return "None"
    target = obj if hasattr(obj, "__qualname__") else type(obj)
    module = getattr(target, "__module__", None)
    name = getattr(target, "__qualname__", repr(target))
    return f"{module}.{name}" if module else name


def _display(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return repr(value)


# =============================================================================
# Records
# =============================================================================


@dataclass(frozen=True)
class StepBinding:
    """A named, substitutable collaborator with an optional error override."""

    name: str
    implementation: Any
    error: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "implementation": qualified_name(self.implementation),
            "error": _display(self.error),
        }


@dataclass(frozen=True)
class ParamsTransform:
    """Pre-execution transform of the caller's ``params`` argument.

    ``transform`` is either a collaborator exposing ``call`` or a plain
    callable. Its return value is normalized to a Result.
    """

    transform: Any
    error: Any = None

    def apply(self, params: Any) -> Result[Any]:
        fn = self.transform.call if is_invokable(self.transform) else self.transform
        return as_result(fn(params))

    def to_dict(self) -> dict[str, Any]:
        return {
            "transform": qualified_name(self.transform),
            "error": _display(self.error),
        }


@dataclass(frozen=True)
class Hooks:
    """Post-execution callables, at most one of which runs per call."""

    on_success: Callable[[Result[Any]], Any] | None = None
    on_failure: Callable[[Result[Any]], Any] | None = None

    def for_result(self, result: Result[Any]) -> Callable[[Result[Any]], Any] | None:
        return self.on_success if result.is_success() else self.on_failure


@dataclass(frozen=True)
class OperationOptions:
    """Operation-wide failure handling.

    Attributes:
        fail_fast: Error used for short-circuits with no step/explicit override
        failure: Error substituted when the body's Failure carries ``None``
        unexpected_err: Convert exceptions escaping the body into a Failure;
            ``True`` keeps the exception as the payload
    """

    fail_fast: Any = None
    failure: Any = None
    unexpected_err: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "fail_fast": _display(self.fail_fast),
            "failure": _display(self.failure),
            "unexpected_err": _display(self.unexpected_err),
        }


# =============================================================================
# Registry
# =============================================================================


class OperationRegistry:
    """Definition-time configuration of one operation class."""

    def __init__(self, owner: str, parent: OperationRegistry | None = None) -> None:
        self.owner = owner
        self._steps: dict[str, StepBinding] = dict(parent._steps) if parent else {}
        self.params: ParamsTransform | None = parent.params if parent else None
        self.hooks: Hooks = parent.hooks if parent else Hooks()
        self.options: OperationOptions = parent.options if parent else OperationOptions()

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register_step(self, name: str, implementation: Any, error: Any = None) -> StepBinding:
        if name in RESERVED_STEP_NAMES or name.startswith("_"):
            raise StepConfigurationError(
                name,
                implementation,
                operation=self.owner,
                reason=f"Step name '{name}' is reserved by Operation",
            )
        if not is_invokable(implementation):
            raise StepConfigurationError(name, implementation, operation=self.owner)

        binding = StepBinding(name=name, implementation=implementation, error=error)
        self._steps[name] = binding

        logger.debug(
            "step_registered",
            operation=self.owner,
            step=name,
            implementation=qualified_name(implementation),
        )
        return binding

    def register_params(self, transform: Any, error: Any = None) -> ParamsTransform:
        if not (is_invokable(transform) or callable(transform)):
            raise OperationConfigurationError(
                f"Params transform must be callable or expose 'call', got {transform!r}"
            ).with_context(operation=self.owner, step="params")

        self.params = ParamsTransform(transform=transform, error=error)
        return self.params

    def register_hook(self, kind: str, hook: Callable[[Result[Any]], Any]) -> Hooks:
        if kind not in HOOK_KINDS:
            raise OperationConfigurationError(
                f"Unknown hook kind {kind!r}; expected one of {', '.join(HOOK_KINDS)}"
            ).with_context(operation=self.owner)
        if not callable(hook):
            raise OperationConfigurationError(
                f"Hook must be callable, got {hook!r}"
            ).with_context(operation=self.owner)

        self.hooks = replace(self.hooks, **{f"on_{kind}": hook})
        return self.hooks

    def set_options(self, **options: Any) -> OperationOptions:
        try:
            self.options = replace(self.options, **options)
        except TypeError as exc:
            raise OperationConfigurationError(
                f"Unknown operation option in {sorted(options)}", cause=exc
            ).with_context(operation=self.owner) from exc
        return self.options

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    @property
    def steps(self) -> dict[str, StepBinding]:
        """Copy of the step bindings, in declaration order."""
        return dict(self._steps)

    def binding(self, name: str) -> StepBinding | None:
        return self._steps.get(name)

    def resolve(self, name: str, overrides: OverrideSet | None = None) -> Any:
        """Implementation for ``name``: call override, else binding, else None."""
        if overrides is not None:
            override = overrides.step(name)
            if override is not None:
                return override

        binding = self._steps.get(name)
        return binding.implementation if binding else None

    def effective_params(self, overrides: OverrideSet | None = None) -> ParamsTransform | None:
        """Params transform for one call, with call overrides taking precedence.

        Works without overrides (registry-only resolution).
        """
        transform = self.params.transform if self.params else None
        error = self.params.error if self.params else None

        if overrides is not None:
            if overrides.params is not None:
                transform = overrides.params
            if overrides.params_error is not None:
                error = overrides.params_error

        if transform is None:
            return None
        return ParamsTransform(transform=transform, error=error)

    def describe(self) -> dict[str, Any]:
        return {
            "operation": self.owner,
            "steps": [binding.to_dict() for binding in self._steps.values()],
            "params": self.params.to_dict() if self.params else None,
            "hooks": {
                "on_success": qualified_name(self.hooks.on_success) if self.hooks.on_success else None,
                "on_failure": qualified_name(self.hooks.on_failure) if self.hooks.on_failure else None,
            },
            "options": self.options.to_dict(),
        }

    def __repr__(self) -> str:
        return f"OperationRegistry({self.owner!r}, steps={list(self._steps)})"
