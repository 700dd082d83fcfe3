from __future__ import annotations

import logging
from typing import Any, Final

from argwire.exceptions import ArgwireCyclicDependencyError
from argwire.integrations.pydantic_settings import is_pydantic_settings_subclass
from argwire.parameters import OverrideTable, ParameterTable, extend_overrides
from argwire.reflection import SignatureReflector, construction_target, qualified_name
from argwire.resolver import ResolutionPath, Resolver, split_arguments

logger = logging.getLogger(__name__)

CONSTRUCTOR: Final = "__init__"
"""Method name under which constructor parameters are registered and looked up."""


class Instantiator:
    """Build objects, resolving constructor arguments through a ``Resolver``."""

    def __init__(
        self,
        *,
        reflector: SignatureReflector,
        parameters: ParameterTable,
        resolver: Resolver,
    ) -> None:
        self._reflector = reflector
        self._parameters = parameters
        self._resolver = resolver

    def construct(
        self,
        cls: Any,
        overrides: OverrideTable | None = None,
        path: ResolutionPath = (),
    ) -> Any:
        """Return a new instance of ``cls``.

        Passing an instance builds a new object of its runtime type. Classes
        without a constructor of their own, constructors without parameters
        and Pydantic settings models are called with no arguments.

        Args:
            cls: Class to instantiate.
            overrides: Caller-supplied values; not mutated.
            path: Types already under construction further up the graph.

        Raises:
            ArgwireNotInstantiableError: If ``cls`` is abstract, a protocol or
                not a class.
            ArgwireCyclicDependencyError: If ``cls`` is already in ``path``.

        """
        cls = construction_target(cls)
        if cls in path:
            raise ArgwireCyclicDependencyError((*path, cls))

        descriptors = self._reflector.describe_constructor(cls)
        if not descriptors or is_pydantic_settings_subclass(cls):
            logger.debug("Constructing %s without arguments", qualified_name(cls))
            return cls()

        table = extend_overrides(overrides, cls, self._parameters.get_parameters(cls))
        values = self._resolver.resolve(descriptors, cls, CONSTRUCTOR, table, (*path, cls))
        args, kwargs = split_arguments(descriptors, values)
        logger.debug("Constructing %s with %d argument(s)", qualified_name(cls), len(values))
        return cls(*args, **kwargs)
