from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from argwire.instantiator import Instantiator
from argwire.parameters import OverrideTable, ParameterTable, extend_overrides, has_values
from argwire.reflection import SignatureReflector, qualified_name
from argwire.resolver import ResolutionPath

logger = logging.getLogger(__name__)


class CacheRefresh(Enum):
    """Select when ``InstanceCache.get`` rebuilds an instance it already holds.

    ``PARAMETERS`` is the default and keeps the historical contract: the class's
    registered parameters are merged into the override table before the check,
    so once anything is registered every ``get`` returns a new object. Pick
    ``OVERRIDES`` or ``NEVER`` when callers expect one instance per class.
    """

    PARAMETERS = "parameters"
    """Rebuild whenever the merged override table holds any value."""

    OVERRIDES = "overrides"
    """Rebuild only when the override table passed to ``get`` holds any value."""

    NEVER = "never"
    """Never rebuild; the first instance stays until replaced with ``set``."""


class InstanceCache:
    """One cached instance per class, built on first request."""

    def __init__(
        self,
        *,
        instantiator: Instantiator,
        parameters: ParameterTable,
        reflector: SignatureReflector,
        cache_refresh: CacheRefresh = CacheRefresh.PARAMETERS,
    ) -> None:
        self._instantiator = instantiator
        self._parameters = parameters
        self._reflector = reflector
        self._cache_refresh = cache_refresh
        self._instances: dict[type[Any], Any] = {}

    @property
    def cache_refresh(self) -> CacheRefresh:
        return self._cache_refresh

    def get(
        self,
        cls: type[Any],
        overrides: OverrideTable | None = None,
        path: ResolutionPath = (),
    ) -> Any:
        """Return the cached instance of ``cls``, building or rebuilding it as needed.

        An instance built by this call is returned as is; an instance cached by
        an earlier call is rebuilt when the refresh policy says so, and the new
        object replaces it.

        Args:
            cls: Class to look up.
            overrides: Caller-supplied values; not mutated.
            path: Types already under construction further up the graph.

        """
        table = extend_overrides(overrides, cls, self._parameters.get_parameters(cls))

        if cls not in self._instances:
            self._instances[cls] = self._instantiator.construct(cls, table, path)
            return self._instances[cls]

        if self._should_refresh(overrides, table):
            cached = self._instances[cls]
            logger.debug("Refreshing cached instance of %s", qualified_name(cls))
            self._instances[cls] = self._instantiator.construct(type(cached), table, path)

        return self._instances[cls]

    def set(self, instance: Any) -> None:
        """Cache ``instance`` under its runtime type, replacing any previous one."""
        self._instances[type(instance)] = instance

    def has(self, cls: Any) -> bool:
        return cls in self._instances

    def is_known(self, target: Any) -> bool:
        """Return whether ``target`` is cached or names a class.

        Constructibility is not checked.

        Args:
            target: A class, or a dotted path to a class in an imported module.

        """
        if target in self._instances:
            return True
        return self._reflector.is_known_type(target)

    def remove(self, cls: Any) -> None:
        self._instances.pop(cls, None)

    def clear(self) -> None:
        self._instances.clear()

    def _should_refresh(self, overrides: OverrideTable | None, table: OverrideTable) -> bool:
        if self._cache_refresh is CacheRefresh.PARAMETERS:
            return has_values(table)
        if self._cache_refresh is CacheRefresh.OVERRIDES:
            return has_values(overrides)
        return False
