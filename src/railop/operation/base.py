"""Operation — base class for composing fallible steps into one call.

Manifesto:
A use case usually chains a handful of collaborators: look something up,
validate it, change it, notify someone.  Each can fail, and the first
failure should end the use case.  ``Operation`` lets the body be written
as if every step succeeds, while ``step(...)`` turns the first Failure into
the call's result.

ARCHITECTURE
────────────
::

    class Transfer(Operation):            ── OperationType
        lookup = Step(LookupService)      ── StepBinding in the registry
        debit = Step(DebitService, error="DEBIT_DECLINED")

        def execute(self, account_id):    ── body, runs on a fresh instance
            account = self.step(self.lookup.call(account_id))
            self.step(self.debit.call(account))
            return account                ── wrapped as Success(account)

    Transfer.call(account_id=1)                        → Result
    Transfer.call(account_id=1, configure=lambda o: o.step(lookup=Mock))

BEST PRACTICES
──────────────
- Keep collaborators returning Results; wrap raising code in
  ``self.step(block=...)``.
- ``configure`` is reserved as a keyword of ``call``.
- Operations expose ``call`` themselves, so they can be steps of other
  operations.

Related modules:
    declarations.py — Step, Params, on_success, on_failure
    dispatch.py     — what happens around execute()
    unwrap.py       — what happens inside step()

Tags:
    railop, operation, railway, dependency-injection

Doc-Types:
    api-reference
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Callable, ClassVar

from railop.core.result import Result
from railop.operation.declarations import Declaration, Step
from railop.operation.dispatch import CallDispatcher
from railop.operation.frames import FrameStack
from railop.operation.overrides import OverrideContainer, OverrideSet
from railop.operation.registry import OperationOptions, OperationRegistry
from railop.operation.unwrap import MISSING, StepUnwrapper


class Operation:
    """Base class for operations. Subclasses implement ``execute``."""

    _registry: ClassVar[OperationRegistry] = OperationRegistry("Operation")

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._registry = OperationRegistry(cls.__qualname__, parent=cls._registry)

        for attribute, value in list(cls.__dict__.items()):
            if isinstance(value, Declaration):
                value.register(cls._registry, attribute)
            elif isinstance(value, OperationOptions):
                explicit = {key: val for key, val in asdict(value).items() if val is not None}
                cls._registry.set_options(**explicit)

    def __init__(self, overrides: OverrideSet | None = None) -> None:
        self.overrides = overrides or OverrideSet()
        self.frames = FrameStack()
        self._unwrapper = StepUnwrapper(self.frames, self._registry.options)

    # -------------------------------------------------------------------------
    # Definition-time API
    # -------------------------------------------------------------------------

    @classmethod
    def registry(cls) -> OperationRegistry:
        return cls._registry

    @classmethod
    def register_step(cls, name: str, implementation: Any, error: Any = None) -> None:
        """Bind ``name`` to ``implementation`` and define its accessor."""
        cls._registry.register_step(name, implementation, error)

        accessor = Step(implementation, error=error)
        accessor.__set_name__(cls, name)
        setattr(cls, name, accessor)

    @classmethod
    def register_params(cls, transform: Any, error: Any = None) -> None:
        cls._registry.register_params(transform, error)

    @classmethod
    def register_hook(cls, kind: str, hook: Callable[[Result[Any]], Any]) -> None:
        cls._registry.register_hook(kind, hook)

    @classmethod
    def set_options(cls, **options: Any) -> OperationOptions:
        """Set ``fail_fast``, ``failure`` and/or ``unexpected_err``."""
        return cls._registry.set_options(**options)

    @classmethod
    def describe(cls) -> dict[str, Any]:
        return cls._registry.describe()

    # -------------------------------------------------------------------------
    # Call-time API
    # -------------------------------------------------------------------------

    @classmethod
    def call(
        cls,
        *args: Any,
        configure: Callable[[OverrideContainer], Any] | None = None,
        **kwargs: Any,
    ) -> Result[Any]:
        """Run the operation and return its Result."""
        return CallDispatcher(cls).dispatch(args, kwargs, configure)

    def execute(self, *args: Any, **kwargs: Any) -> Any:
        raise NotImplementedError(f"{type(self).__qualname__} must implement execute()")

    # -------------------------------------------------------------------------
    # Body helpers
    # -------------------------------------------------------------------------

    def resolve_step(self, name: str) -> Any:
        """Implementation of step ``name`` for this call, entering its frame."""
        binding = self._registry.binding(name)
        self.frames.push(name, binding.error if binding else None)
        return self._registry.resolve(name, self.overrides)

    def step(
        self,
        result: Any = MISSING,
        *,
        err: Any = None,
        block: Callable[[], Any] | None = None,
    ) -> Any:
        """Unwrap a step outcome, short-circuiting the call on failure."""
        return self._unwrapper(result, err=err, block=block)

    def __repr__(self) -> str:
        return f"<{type(self).__qualname__} frames={len(self.frames)}>"
