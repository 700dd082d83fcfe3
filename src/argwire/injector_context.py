from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any, TypeVar, overload

from argwire.injector import Injector
from argwire.parameters import ClassParameters, OverrideTable

T = TypeVar("T")


class InjectorContext:
    """Proxy the injector API to a process-wide default injector.

    The default injector is created on first use with ``factory`` and lives
    until ``reset`` or ``set_current`` replaces it. The binding is process-global
    (not thread-local or task-local), which is convenient for application code
    and something to keep in mind for tests: use ``override`` or the pytest
    plugin's ``argwire_default_injector`` fixture to isolate them.
    """

    def __init__(self, factory: Callable[[], Injector] = Injector) -> None:
        self._factory = factory
        self._injector: Injector | None = None

    def get_current(self) -> Injector:
        """Return the default injector, creating it on first use."""
        if self._injector is None:
            self._injector = self._factory()
        return self._injector

    def set_current(self, injector: Injector) -> None:
        self._injector = injector

    def reset(self) -> Injector:
        """Replace the default injector with a fresh one and return it."""
        self._injector = self._factory()
        return self._injector

    @contextmanager
    def override(self, injector: Injector) -> Iterator[Injector]:
        """Bind ``injector`` as the default for the duration of a ``with`` block.

        Args:
            injector: Injector to bind; the previous binding is restored on exit.

        """
        previous = self._injector
        self._injector = injector
        try:
            yield injector
        finally:
            self._injector = previous

    def set_parameters(self, cls: Any, parameters: Mapping[str, Mapping[Any, Any]]) -> None:
        self.get_current().set_parameters(cls, parameters)

    def get_parameters(self, cls: Any) -> ClassParameters:
        return self.get_current().get_parameters(cls)

    def set_definition(
        self,
        owner_class: Any,
        owner_method: str,
        bindings: Mapping[Any, Any],
    ) -> None:
        self.get_current().set_definition(owner_class, owner_method, bindings)

    def has_definition(self, owner_class: Any, owner_method: str, dependency: Any) -> bool:
        return self.get_current().has_definition(owner_class, owner_method, dependency)

    def get_definition(self, owner_class: Any, owner_method: str, dependency: Any) -> Any:
        return self.get_current().get_definition(owner_class, owner_method, dependency)

    def remove_definition(self, owner_class: Any, owner_method: str, dependency: Any) -> None:
        self.get_current().remove_definition(owner_class, owner_method, dependency)

    @overload
    def get(self, cls: type[T], overrides: OverrideTable | None = None) -> T: ...

    @overload
    def get(self, cls: Any, overrides: OverrideTable | None = None) -> Any: ...

    def get(self, cls: Any, overrides: OverrideTable | None = None) -> Any:
        return self.get_current().get(cls, overrides)

    def set(self, instance: Any) -> None:
        self.get_current().set(instance)

    def is_known(self, target: Any) -> bool:
        return self.get_current().is_known(target)

    def construct(self, cls: Any, overrides: OverrideTable | None = None) -> Any:
        return self.get_current().construct(cls, overrides)

    def invoke(
        self,
        cls: type[Any],
        method_name: str,
        overrides: OverrideTable | None = None,
    ) -> Any:
        return self.get_current().invoke(cls, method_name, overrides)


injector_context = InjectorContext()

set_parameters = injector_context.set_parameters
get_parameters = injector_context.get_parameters
set_definition = injector_context.set_definition
has_definition = injector_context.has_definition
get_definition = injector_context.get_definition
remove_definition = injector_context.remove_definition
get = injector_context.get
set = injector_context.set  # noqa: A001
is_known = injector_context.is_known
construct = injector_context.construct
invoke = injector_context.invoke
