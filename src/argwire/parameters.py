from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final, TypeAlias

WILDCARD: Final = "*"
"""Key meaning "any method" in parameter tables and "any class/method" in definitions."""

MethodParameters: TypeAlias = dict[Any, Any]
"""Parameter name (or dependency type) to value."""

ClassParameters: TypeAlias = dict[str, MethodParameters]
"""Method name (or ``"*"``) to its parameter values."""

OverrideTable: TypeAlias = dict[Any, ClassParameters]
"""Class to its parameter values, supplied per call."""


def merge_parameters(
    target: ClassParameters,
    source: Mapping[str, Mapping[Any, Any]],
) -> ClassParameters:
    """Merge ``source`` into ``target`` without overwriting existing keys.

    Method tables missing from ``target`` are copied over; for method tables
    present in both, only the parameter keys missing from ``target`` are added.
    ``target`` is updated in place and returned.

    Args:
        target: Parameters that win on conflicting keys.
        source: Parameters that only fill gaps in ``target``.

    """
    for method_name, values in source.items():
        existing = target.setdefault(method_name, {})
        for key, value in values.items():
            existing.setdefault(key, value)
    return target


def copy_parameters(parameters: Mapping[str, Mapping[Any, Any]]) -> ClassParameters:
    return {method_name: dict(values) for method_name, values in parameters.items()}


def layer_parameters(
    upper: Mapping[str, Mapping[Any, Any]],
    lower: Mapping[str, Mapping[Any, Any]],
) -> ClassParameters:
    """Stack ``upper`` over ``lower`` so that ``upper`` always wins.

    Each layer answers a method with its own table, or with its ``"*"`` table
    when it has none. The result holds, for every method named in either
    layer, the answer of ``upper`` filled with the answer of ``lower``, so a
    lookup in it sees ``upper`` first even when only ``lower`` names the method.

    Args:
        upper: Parameters that win on conflicting keys.
        lower: Parameters that only fill gaps in ``upper``.

    """
    layered: ClassParameters = {}
    for method_name in (*upper, *lower):
        if method_name in layered:
            continue
        values = dict(_method_values(upper, method_name))
        for key, value in _method_values(lower, method_name).items():
            values.setdefault(key, value)
        layered[method_name] = values
    return layered


def _method_values(
    parameters: Mapping[str, Mapping[Any, Any]],
    method_name: str,
) -> Mapping[Any, Any]:
    values = parameters.get(method_name)
    if values is None:
        values = parameters.get(WILDCARD)
    return values or {}


def extend_overrides(
    overrides: Mapping[Any, Mapping[str, Mapping[Any, Any]]] | None,
    owner: Any,
    registered: Mapping[str, Mapping[Any, Any]],
) -> OverrideTable:
    """Return a copy of ``overrides`` with ``owner``'s registered parameters filled in.

    Registered values never hide a caller value, including one the caller
    placed under ``"*"`` while the registration names the method. The caller's
    table is never mutated.

    Args:
        overrides: Caller-supplied override table, or ``None``.
        owner: Class whose entry is extended.
        registered: Parameters registered for ``owner``.

    """
    extended: OverrideTable = {
        key: copy_parameters(value) for key, value in (overrides or {}).items()
    }
    extended[owner] = layer_parameters(extended.get(owner, {}), registered)
    return extended


def has_values(overrides: Mapping[Any, Mapping[str, Mapping[Any, Any]]] | None) -> bool:
    """Return whether any method table in ``overrides`` holds at least one value."""
    if not overrides:
        return False
    return any(values for methods in overrides.values() for values in methods.values())


def lookup_value(
    overrides: Mapping[Any, Mapping[str, Mapping[Any, Any]]],
    owner: Any,
    method_name: str,
    key: Any,
) -> tuple[bool, Any]:
    """Find ``key`` in ``overrides[owner][method_name]``.

    The ``"*"`` method table is consulted only when ``method_name`` has no table
    of its own.

    Returns:
        ``(found, value)``; ``value`` is ``None`` when nothing was found.

    """
    methods = overrides.get(owner)
    if not methods:
        return False, None

    values = methods.get(method_name)
    if values is None:
        values = methods.get(WILDCARD)
    if values is None or key not in values:
        return False, None
    return True, values[key]


class ParameterTable:
    """Registered parameter values per class.

    Shape: ``{cls: {method_name or "*": {parameter_name or dependency_type: value}}}``.
    Registrations merge additively: a value registered first is never replaced.
    """

    def __init__(self) -> None:
        self._parameters: dict[Any, ClassParameters] = {}

    def set_parameters(self, cls: Any, parameters: Mapping[str, Mapping[Any, Any]]) -> None:
        """Merge ``parameters`` into the entry for ``cls``.

        Args:
            cls: Class owning the parameters.
            parameters: Method name (or ``"*"``) to parameter values.

        """
        merge_parameters(self._parameters.setdefault(cls, {}), parameters)

    def get_parameters(self, cls: Any) -> ClassParameters:
        """Return a copy of the parameters registered for ``cls`` (empty when none).

        Args:
            cls: Class owning the parameters.

        """
        return copy_parameters(self._parameters.get(cls, {}))

    def clear(self) -> None:
        self._parameters.clear()
