from __future__ import annotations

import datetime
import decimal
import enum
import inspect
import pathlib
import sys
import types
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from inspect import Parameter
from typing import Annotated, Any, get_args, get_origin, get_type_hints

from typing_extensions import TypeIs

from argwire.exceptions import ArgwireNotInstantiableError, ArgwireTargetNotFoundError

_MISSING_ANNOTATION = object()
_VARIADIC_KINDS = (Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD)


def is_runtime_class(candidate: object) -> TypeIs[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


_NON_INSTANCE_MODULES = frozenset({"builtins", "types", "typing", "typing_extensions"})


def construction_target(target: Any) -> Any:
    """Return the class of ``target`` when it is an object instance, else ``target``.

    Builtin values (strings, numbers, functions) and typing constructs are
    returned unchanged so they are still reported as not instantiable.
    """
    if is_runtime_class(target) or type(target).__module__ in _NON_INSTANCE_MODULES:
        return target
    return type(target)


def qualified_name(target: Any) -> str:
    if is_runtime_class(target):
        return f"{target.__module__}.{target.__qualname__}"
    return str(target)


@dataclass(frozen=True, slots=True)
class ParameterDescriptor:
    """Describe one formal parameter of a constructor or method.

    Attributes:
        name: Parameter name.
        declared_type: Resolved annotation, or ``None`` when the parameter is
            not annotated (or its annotation cannot be evaluated).
        is_builtin: Whether the annotation names a value type rather than a
            constructible dependency (``int``, ``list[str]``, ``Path`` ...).
        has_default: Whether the parameter declares a default.
        default: The default value, ``None`` when ``has_default`` is false.
        kind: The ``inspect.Parameter`` kind.

    """

    name: str
    declared_type: Any
    is_builtin: bool
    has_default: bool
    default: Any = None
    kind: inspect._ParameterKind = Parameter.POSITIONAL_OR_KEYWORD

    @property
    def is_dependency(self) -> bool:
        return self.declared_type is not None and not self.is_builtin


@dataclass(frozen=True, slots=True)
class ValueTypePolicy:
    """Decide which annotated classes are plain values rather than dependencies."""

    value_base_types: tuple[type[Any], ...] = (
        pathlib.PurePath,
        datetime.date,
        datetime.time,
        datetime.timedelta,
        uuid.UUID,
        decimal.Decimal,
        enum.Enum,
    )

    def is_value_type(self, candidate: object) -> bool:
        """Return true when an annotation should be looked up by parameter name.

        Args:
            candidate: Annotation with ``Annotated`` metadata already stripped.

        """
        if not is_runtime_class(candidate):
            return True
        if candidate.__module__ == "builtins":
            return True
        if issubclass(candidate, type):
            return True
        return issubclass(candidate, self.value_base_types)


class SignatureReflector:
    """Turn constructors and methods into ordered parameter descriptors."""

    def __init__(self, value_type_policy: ValueTypePolicy | None = None) -> None:
        self._value_type_policy = value_type_policy or ValueTypePolicy()

    def describe_parameters(
        self,
        callable_obj: Callable[..., Any],
        *,
        skip_first_parameter: bool = False,
    ) -> list[ParameterDescriptor]:
        """Describe the parameters of ``callable_obj`` in declaration order.

        ``*args`` and ``**kwargs`` are not described.

        Args:
            callable_obj: Function, bound method or class to inspect.
            skip_first_parameter: Drop the leading ``self``/``cls`` parameter of
                a function looked up on a class.

        """
        try:
            parameters = tuple(inspect.signature(callable_obj).parameters.values())
        except (ValueError, TypeError):
            return []
        if skip_first_parameter and parameters:
            parameters = parameters[1:]

        annotations = self._resolved_type_hints(callable_obj)
        return [
            self._describe(parameter, annotations)
            for parameter in parameters
            if parameter.kind not in _VARIADIC_KINDS
        ]

    def describe_constructor(self, cls: Any) -> list[ParameterDescriptor] | None:
        """Describe the constructor parameters of ``cls``.

        Returns:
            The descriptors, or ``None`` when ``cls`` defines no constructor of
            its own anywhere in its hierarchy.

        Raises:
            ArgwireNotInstantiableError: If ``cls`` is not a class, is abstract,
                or is a protocol.

        """
        if not self.is_instantiable(cls):
            raise ArgwireNotInstantiableError(cls)
        if cls.__init__ is object.__init__ and cls.__new__ is object.__new__:
            return None
        return self.describe_parameters(cls)

    def describe_method(
        self,
        cls: type[Any],
        method_name: str,
    ) -> list[ParameterDescriptor]:
        """Describe a method looked up on ``cls``, without its ``self``/``cls`` parameter.

        Raises:
            ArgwireTargetNotFoundError: If ``cls`` has no attribute ``method_name``.

        """
        try:
            raw_member = inspect.getattr_static(cls, method_name)
            member = getattr(cls, method_name)
        except AttributeError as error:
            raise ArgwireTargetNotFoundError(cls, method_name) from error

        # staticmethods and classmethods come back without an implicit first parameter
        skip_first = inspect.isfunction(raw_member)
        return self.describe_parameters(member, skip_first_parameter=skip_first)

    def is_instantiable(self, cls: Any) -> bool:
        if not is_runtime_class(cls):
            return False
        if inspect.isabstract(cls):
            return False
        return not getattr(cls, "_is_protocol", False)

    def is_known_type(self, target: Any) -> bool:
        """Return whether ``target`` names a class, without importing anything.

        Args:
            target: A class, or a dotted path such as ``"package.module.Class"``
                whose module is already imported.

        """
        if is_runtime_class(target):
            return True
        if not isinstance(target, str):
            return False
        return is_runtime_class(_locate_imported(target))

    def _describe(
        self,
        parameter: Parameter,
        annotations: dict[str, Any],
    ) -> ParameterDescriptor:
        has_default = parameter.default is not Parameter.empty
        declared_type = self._parameter_annotation(parameter, annotations)
        return ParameterDescriptor(
            name=parameter.name,
            declared_type=declared_type,
            is_builtin=(
                declared_type is not None
                and self._value_type_policy.is_value_type(declared_type)
            ),
            has_default=has_default,
            default=parameter.default if has_default else None,
            kind=parameter.kind,
        )

    def _parameter_annotation(self, parameter: Parameter, annotations: dict[str, Any]) -> Any:
        annotation = annotations.get(parameter.name, _MISSING_ANNOTATION)
        if annotation is _MISSING_ANNOTATION:
            annotation = parameter.annotation
            if annotation is Parameter.empty or isinstance(annotation, str):
                return None
        if get_origin(annotation) is Annotated:
            annotation = get_args(annotation)[0]
        return annotation

    def _resolved_type_hints(self, callable_obj: Callable[..., Any]) -> dict[str, Any]:
        annotations: dict[str, Any] = {}
        try:
            annotations = get_type_hints(callable_obj, include_extras=True)
        except (AttributeError, NameError, TypeError):
            annotations = {}

        if inspect.isclass(callable_obj):
            for member_name in ("__init__", "__new__"):
                member = getattr(callable_obj, member_name)
                try:
                    member_annotations = get_type_hints(member, include_extras=True)
                except (AttributeError, NameError, TypeError):
                    continue
                for name, annotation in member_annotations.items():
                    annotations.setdefault(name, annotation)

        annotations.pop("return", None)
        return annotations


def _locate_imported(dotted_path: str) -> Any:
    parts = dotted_path.split(".")
    for split_at in range(len(parts) - 1, 0, -1):
        module = sys.modules.get(".".join(parts[:split_at]))
        if module is None:
            continue
        target: Any = module
        for attribute in parts[split_at:]:
            target = getattr(target, attribute, None)
            if target is None:
                return None
        return target
    return None
