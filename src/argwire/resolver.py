from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from inspect import Parameter
from typing import Any, TypeAlias

from argwire.definitions import DefinitionTable
from argwire.exceptions import ArgwireUnknownParameterError
from argwire.parameters import OverrideTable, ParameterTable, extend_overrides, lookup_value
from argwire.reflection import ParameterDescriptor, qualified_name

logger = logging.getLogger(__name__)

ResolutionPath: TypeAlias = tuple[type[Any], ...]
"""Types currently under construction, outermost first."""

DependencySource: TypeAlias = Callable[[type[Any], OverrideTable, ResolutionPath], Any]
"""Callback producing an instance for a dependency type nobody supplied a value for."""


class Resolver:
    """Resolve parameter descriptors to argument values.

    For every parameter, in declaration order:

    * a parameter without a dependency type is looked up by *name* in the
      override table (``overrides[owner][method_name]``, or ``overrides[owner]["*"]``
      when the method has no table), then falls back to its default;
    * a dependency parameter of type ``T`` is looked up by *type* in the same
      table, then in the definition table, and is otherwise built through the
      dependency source with the same override table.

    The owner's registered parameters are merged into the override table first;
    values the caller supplied win.
    """

    def __init__(
        self,
        *,
        parameters: ParameterTable,
        definitions: DefinitionTable,
        dependency_source: DependencySource,
    ) -> None:
        self._parameters = parameters
        self._definitions = definitions
        self._dependency_source = dependency_source

    def resolve(
        self,
        descriptors: Sequence[ParameterDescriptor],
        owner: Any,
        method_name: str,
        overrides: OverrideTable | None = None,
        path: ResolutionPath = (),
    ) -> list[Any]:
        """Return one value per descriptor.

        Args:
            descriptors: Parameters of the target, in declaration order.
            owner: Class that owns the target.
            method_name: Target method name (``"__init__"`` for constructors).
            overrides: Caller-supplied values; not mutated.
            path: Types under construction, used for cycle detection.

        Raises:
            ArgwireUnknownParameterError: If a non-dependency parameter has no
                value and no default.

        """
        if not descriptors:
            return []

        table = extend_overrides(overrides, owner, self._parameters.get_parameters(owner))
        return [
            self._resolve_parameter(descriptor, owner, method_name, table, path)
            for descriptor in descriptors
        ]

    def _resolve_parameter(
        self,
        descriptor: ParameterDescriptor,
        owner: Any,
        method_name: str,
        table: OverrideTable,
        path: ResolutionPath,
    ) -> Any:
        if not descriptor.is_dependency:
            found, value = lookup_value(table, owner, method_name, descriptor.name)
            if found:
                return value
            if descriptor.has_default:
                return descriptor.default
            raise ArgwireUnknownParameterError(descriptor.name, owner, method_name)

        dependency = descriptor.declared_type
        found, value = lookup_value(table, owner, method_name, dependency)
        if found:
            return value

        found, value = self._definitions.lookup(owner, method_name, dependency)
        if found:
            logger.debug(
                "Using definition for %s in %s.%s",
                qualified_name(dependency),
                qualified_name(owner),
                method_name,
            )
            return value

        logger.debug(
            "Building %s for parameter '%s' of %s.%s",
            qualified_name(dependency),
            descriptor.name,
            qualified_name(owner),
            method_name,
        )
        return self._dependency_source(dependency, table, path)


def split_arguments(
    descriptors: Sequence[ParameterDescriptor],
    values: Sequence[Any],
) -> tuple[list[Any], dict[str, Any]]:
    """Route keyword-only parameters by keyword and the rest positionally."""
    args: list[Any] = []
    kwargs: dict[str, Any] = {}
    for descriptor, value in zip(descriptors, values, strict=True):
        if descriptor.kind is Parameter.KEYWORD_ONLY:
            kwargs[descriptor.name] = value
        else:
            args.append(value)
    return args, kwargs
