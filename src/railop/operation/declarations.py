"""Class-body declarations for operations.

``Step``, ``Params`` and the ``on_success``/``on_failure`` hooks are inert
records until ``Operation.__init_subclass__`` collects them into the class's
registry. ``Step`` doubles as the instance accessor: reading it inside
``execute`` goes through ``Operation.resolve_step``.

Example::

    class Transfer(Operation):
        lookup = Step(LookupService)
        debit = Step(DebitService, error="DEBIT_DECLINED")
        params = Params(TransferParams.validate, error="INVALID_PARAMS")

        @on_failure
        def report(result):
            return result.map_err(lambda e: {"code": e})
"""

from __future__ import annotations

from typing import Any, Callable

from railop.core.result import Result
from railop.operation.exceptions import OperationConfigurationError
from railop.operation.registry import HOOK_KINDS, OperationRegistry


class Declaration:
    """Something the operation class body registers into its registry."""

    def register(self, registry: OperationRegistry, attribute: str) -> None:
        raise NotImplementedError


class Step(Declaration):
    """A named collaborator, resolved per call."""

    def __init__(self, implementation: Any, *, error: Any = None) -> None:
        self.implementation = implementation
        self.error = error
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        if not callable(getattr(owner, "register_step", None)):
            raise OperationConfigurationError(
                f"Step '{name}' declared on {owner.__qualname__}, which is not an Operation"
            ).with_context(operation=owner.__qualname__, step=name)
        self.name = name

    def register(self, registry: OperationRegistry, attribute: str) -> None:
        registry.register_step(attribute, self.implementation, self.error)

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance.resolve_step(self.name)

    def __repr__(self) -> str:
        return f"Step({self.name!r}, {self.implementation!r}, error={self.error!r})"


class Params(Declaration):
    """The operation's params transform. Last declaration wins."""

    def __init__(self, transform: Any, *, error: Any = None) -> None:
        self.transform = transform
        self.error = error

    def register(self, registry: OperationRegistry, attribute: str) -> None:
        registry.register_params(self.transform, self.error)

    def __repr__(self) -> str:
        return f"Params({self.transform!r}, error={self.error!r})"


class Hook(Declaration):
    """A success or failure hook. Still callable as the wrapped function."""

    def __init__(self, kind: str, fn: Callable[[Result[Any]], Any]) -> None:
        if kind not in HOOK_KINDS:
            raise OperationConfigurationError(f"Unknown hook kind {kind!r}")
        self.kind = kind
        self.fn = fn

    def register(self, registry: OperationRegistry, attribute: str) -> None:
        registry.register_hook(self.kind, self.fn)

    def __call__(self, result: Result[Any]) -> Any:
        return self.fn(result)

    def __repr__(self) -> str:
        return f"Hook({self.kind!r}, {self.fn!r})"


def on_success(fn: Callable[[Result[Any]], Any]) -> Hook:
    """Declare ``fn`` as the success hook."""
    return Hook("success", fn)


def on_failure(fn: Callable[[Result[Any]], Any]) -> Hook:
    """Declare ``fn`` as the failure hook."""
    return Hook("failure", fn)
