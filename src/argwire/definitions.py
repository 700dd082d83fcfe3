from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias

from argwire.parameters import WILDCARD

DefinitionKey: TypeAlias = tuple[Any, str]
"""``(owner_class or "*", owner_method or "*")``."""


class DefinitionTable:
    """Values bound to dependency types, scoped by owning class and method.

    A definition answers "which value should a parameter of type ``T`` receive
    when resolving ``owner_method`` of ``owner_class``". Either half of the
    scope may be the wildcard ``"*"``. Bindings merge additively: a value bound
    first is never replaced by a later ``set_definition`` call; remove it first.
    """

    def __init__(self) -> None:
        self._definitions: dict[DefinitionKey, dict[Any, Any]] = {}

    def set_definition(
        self,
        owner_class: Any,
        owner_method: str,
        bindings: Mapping[Any, Any],
    ) -> None:
        """Bind dependency types to values for the given scope.

        Args:
            owner_class: Class whose parameters receive the values, or ``"*"``.
            owner_method: Method whose parameters receive the values, or ``"*"``.
            bindings: Dependency type to the value substituted for it.

        """
        scoped = self._definitions.setdefault((owner_class, owner_method), {})
        for dependency, value in bindings.items():
            scoped.setdefault(dependency, value)

    def has_definition(self, owner_class: Any, owner_method: str, dependency: Any) -> bool:
        return dependency in self._definitions.get((owner_class, owner_method), {})

    def get_definition(self, owner_class: Any, owner_method: str, dependency: Any) -> Any:
        """Return the value bound to ``dependency`` in exactly this scope, or ``None``."""
        return self._definitions.get((owner_class, owner_method), {}).get(dependency)

    def remove_definition(self, owner_class: Any, owner_method: str, dependency: Any) -> None:
        scoped = self._definitions.get((owner_class, owner_method))
        if scoped is not None:
            scoped.pop(dependency, None)

    def lookup(self, owner_class: Any, owner_method: str, dependency: Any) -> tuple[bool, Any]:
        """Find the most specific binding for ``dependency``.

        Scopes are searched in this order, first hit wins:
        ``(owner_class, owner_method)``, ``(owner_class, "*")``,
        ``("*", owner_method)``, ``("*", "*")``.

        Returns:
            ``(found, value)``; a bound ``None`` is reported as found.

        """
        for scope_class in (owner_class, WILDCARD):
            for scope_method in (owner_method, WILDCARD):
                scoped = self._definitions.get((scope_class, scope_method))
                if scoped is not None and dependency in scoped:
                    return True, scoped[dependency]
        return False, None

    def clear(self) -> None:
        self._definitions.clear()
