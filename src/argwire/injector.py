from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar, overload

from argwire.definitions import DefinitionTable
from argwire.instances import CacheRefresh, InstanceCache
from argwire.instantiator import Instantiator
from argwire.parameters import (
    ClassParameters,
    OverrideTable,
    ParameterTable,
    extend_overrides,
)
from argwire.reflection import SignatureReflector, qualified_name
from argwire.resolver import ResolutionPath, Resolver, split_arguments

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Injector:
    """Resolve constructor and method arguments and build object graphs.

    An injector owns its registries: registered parameter values, definitions
    (values bound to dependency types per owner class/method) and the instance
    cache. Independent injectors share nothing.

    Parameters without a dependency type are matched by name, dependency
    parameters by type. For each parameter the lookup order is: the override
    table passed to the call, the registered parameters of the owner class,
    the definitions (most specific scope first), then the parameter default
    or, for dependency types, an instance obtained with ``get``.

    Example:
        >>> injector = Injector()
        >>> injector.set_parameters(Mailer, {"__init__": {"host": "smtp.local"}})
        >>> injector.set_definition(Signup, "*", {Clock: FrozenClock()})
        >>> signup = injector.get(Signup)

    """

    def __init__(
        self,
        *,
        cache_refresh: CacheRefresh = CacheRefresh.PARAMETERS,
        reflector: SignatureReflector | None = None,
    ) -> None:
        """Initialize an injector with empty registries.

        Args:
            cache_refresh: When ``get`` rebuilds an instance it already cached.
                The default rebuilds on every call once parameters are
                registered for the class; see ``CacheRefresh``.
            reflector: Signature inspection strategy, mostly useful in tests.

        """
        self._reflector = reflector or SignatureReflector()
        self._parameters = ParameterTable()
        self._definitions = DefinitionTable()
        self._resolver = Resolver(
            parameters=self._parameters,
            definitions=self._definitions,
            dependency_source=self._get_dependency,
        )
        self._instantiator = Instantiator(
            reflector=self._reflector,
            parameters=self._parameters,
            resolver=self._resolver,
        )
        self._instances = InstanceCache(
            instantiator=self._instantiator,
            parameters=self._parameters,
            reflector=self._reflector,
            cache_refresh=cache_refresh,
        )

    @property
    def cache_refresh(self) -> CacheRefresh:
        return self._instances.cache_refresh

    def set_parameters(self, cls: Any, parameters: Mapping[str, Mapping[Any, Any]]) -> None:
        """Register parameter values for the methods of ``cls``.

        Keys of the inner tables are parameter names for plain values and
        types for dependencies. Use ``"__init__"`` for constructor parameters
        and ``"*"`` for values shared by every method without its own table.
        Values registered first win; later calls only add missing keys.

        Args:
            cls: Class owning the methods.
            parameters: Method name to its parameter values.

        """
        self._parameters.set_parameters(cls, parameters)

    def get_parameters(self, cls: Any) -> ClassParameters:
        return self._parameters.get_parameters(cls)

    def set_definition(
        self,
        owner_class: Any,
        owner_method: str,
        bindings: Mapping[Any, Any],
    ) -> None:
        """Bind dependency types to values within an owner class/method scope.

        Args:
            owner_class: Class whose parameters receive the values, or ``"*"``.
            owner_method: Method whose parameters receive the values, or ``"*"``.
            bindings: Dependency type to the value substituted for it.

        """
        self._definitions.set_definition(owner_class, owner_method, bindings)

    def has_definition(self, owner_class: Any, owner_method: str, dependency: Any) -> bool:
        return self._definitions.has_definition(owner_class, owner_method, dependency)

    def get_definition(self, owner_class: Any, owner_method: str, dependency: Any) -> Any:
        return self._definitions.get_definition(owner_class, owner_method, dependency)

    def remove_definition(self, owner_class: Any, owner_method: str, dependency: Any) -> None:
        self._definitions.remove_definition(owner_class, owner_method, dependency)

    @overload
    def get(self, cls: type[T], overrides: OverrideTable | None = None) -> T: ...

    @overload
    def get(self, cls: Any, overrides: OverrideTable | None = None) -> Any: ...

    def get(self, cls: Any, overrides: OverrideTable | None = None) -> Any:
        """Return the cached instance of ``cls``, building it on first use.

        Args:
            cls: Class to resolve.
            overrides: Per-call values, ``{cls: {method: {key: value}}}``. They
                take precedence over registered parameters and definitions for
                the whole graph built by this call.

        Raises:
            ArgwireUnknownParameterError: If a plain parameter has no value.
            ArgwireNotInstantiableError: If a type in the graph is abstract and
                nothing supplies a value for it.
            ArgwireCyclicDependencyError: If the graph refers back to a type
                under construction.

        """
        return self._instances.get(cls, overrides)

    def set(self, instance: Any) -> None:
        """Cache ``instance`` under its runtime type, replacing any previous one."""
        self._instances.set(instance)

    def is_known(self, target: Any) -> bool:
        return self._instances.is_known(target)

    @overload
    def construct(self, cls: type[T], overrides: OverrideTable | None = None) -> T: ...

    @overload
    def construct(self, cls: Any, overrides: OverrideTable | None = None) -> Any: ...

    def construct(self, cls: Any, overrides: OverrideTable | None = None) -> Any:
        """Build a new instance of ``cls`` without reading or writing the cache for it.

        Dependencies of ``cls`` still go through ``get``. An instance passed as
        ``cls`` is replaced by its runtime type.
        """
        return self._instantiator.construct(cls, overrides)

    def invoke(
        self,
        cls: type[Any],
        method_name: str,
        overrides: OverrideTable | None = None,
    ) -> Any:
        """Call ``method_name`` on the cached instance of ``cls`` with resolved arguments.

        Arguments are resolved against ``(cls, method_name)`` before the instance
        is obtained with ``get``.

        Args:
            cls: Class that defines the method.
            method_name: Name of the method to call.
            overrides: Per-call values, as for ``get``.

        Raises:
            ArgwireTargetNotFoundError: If ``cls`` has no such method.

        """
        descriptors = self._reflector.describe_method(cls, method_name)
        table = extend_overrides(overrides, cls, self._parameters.get_parameters(cls))
        values = self._resolver.resolve(descriptors, cls, method_name, table)
        instance = self._instances.get(cls, overrides)

        args, kwargs = split_arguments(descriptors, values)
        logger.debug("Invoking %s.%s", qualified_name(cls), method_name)
        return getattr(instance, method_name)(*args, **kwargs)

    def reset(self) -> None:
        """Forget every registered parameter, definition and cached instance."""
        self._parameters.clear()
        self._definitions.clear()
        self._instances.clear()

    def _get_dependency(
        self,
        dependency: type[Any],
        overrides: OverrideTable,
        path: ResolutionPath,
    ) -> Any:
        return self._instances.get(dependency, overrides, path)
