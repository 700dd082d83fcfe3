from __future__ import annotations

from typing import Any


def _display_name(target: Any) -> str:
    return getattr(target, "__qualname__", None) or str(target)


class ArgwireError(Exception):
    """Represent a base class for all argwire-specific failures.

    Catch this type when you want to handle any argwire error path without
    matching each concrete exception class individually.
    """


class ArgwireUnknownParameterError(ArgwireError):
    """Signal a non-dependency parameter that has no value to resolve to.

    Raised by ``Injector.get``, ``Injector.construct`` and ``Injector.invoke``
    when a parameter without a dependency type annotation has neither an
    override value, a registered parameter value, nor a default.

    Typical fixes include registering the value with
    ``injector.set_parameters(Owner, {"method": {"name": value}})``, passing
    it in the override table, or giving the parameter a default.
    """

    def __init__(self, parameter_name: str, owner: Any, method_name: str) -> None:
        self.parameter_name = parameter_name
        self.owner = owner
        self.method_name = method_name
        super().__init__(
            f"Unknown parameter '{parameter_name}' for "
            f"'{_display_name(owner)}.{method_name}'.",
        )


class ArgwireNotInstantiableError(ArgwireError):
    """Signal that a requested type cannot be constructed.

    Raised by ``Injector.construct`` (and therefore by ``get``) for abstract
    classes, protocols and any target that is not a class.

    Typical fixes include binding a concrete value for the type with
    ``injector.set_definition(...)``, placing an instance in the cache with
    ``injector.set(instance)``, or passing one in the override table.
    """

    def __init__(self, target: Any) -> None:
        self.target = target
        super().__init__(f"'{_display_name(target)}' is not instantiable.")


class ArgwireTargetNotFoundError(ArgwireError):
    """Signal that ``Injector.invoke`` was asked for a method that does not exist.

    The original ``AttributeError`` is chained as ``__cause__``.
    """

    def __init__(self, owner: Any, method_name: str) -> None:
        self.owner = owner
        self.method_name = method_name
        super().__init__(
            f"Method '{method_name}' does not exist on '{_display_name(owner)}'.",
        )


class ArgwireCyclicDependencyError(ArgwireError):
    """Signal a dependency graph that refers back to a type under construction.

    ``chain`` lists the types from the outermost request to the repeated one.

    Typical fixes include breaking the cycle with a definition or override
    for one of the types in the chain.
    """

    def __init__(self, chain: tuple[Any, ...]) -> None:
        self.chain = chain
        rendered = " -> ".join(_display_name(item) for item in chain)
        super().__init__(f"Cyclic dependency detected: {rendered}.")
