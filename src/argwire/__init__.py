from argwire.definitions import DefinitionTable
from argwire.exceptions import (
    ArgwireCyclicDependencyError,
    ArgwireError,
    ArgwireNotInstantiableError,
    ArgwireTargetNotFoundError,
    ArgwireUnknownParameterError,
)
from argwire.injector import Injector
from argwire.injector_context import (
    InjectorContext,
    construct,
    get,
    get_definition,
    get_parameters,
    has_definition,
    injector_context,
    invoke,
    is_known,
    remove_definition,
    set,  # noqa: A004
    set_definition,
    set_parameters,
)
from argwire.instances import CacheRefresh, InstanceCache
from argwire.instantiator import CONSTRUCTOR, Instantiator
from argwire.parameters import WILDCARD, ParameterTable
from argwire.reflection import ParameterDescriptor, SignatureReflector, ValueTypePolicy
from argwire.resolver import Resolver

__all__ = [
    "CONSTRUCTOR",
    "WILDCARD",
    "ArgwireCyclicDependencyError",
    "ArgwireError",
    "ArgwireNotInstantiableError",
    "ArgwireTargetNotFoundError",
    "ArgwireUnknownParameterError",
    "CacheRefresh",
    "DefinitionTable",
    "Injector",
    "InjectorContext",
    "InstanceCache",
    "Instantiator",
    "ParameterDescriptor",
    "ParameterTable",
    "Resolver",
    "SignatureReflector",
    "ValueTypePolicy",
    "construct",
    "get",
    "get_definition",
    "get_parameters",
    "has_definition",
    "injector_context",
    "invoke",
    "is_known",
    "remove_definition",
    "set",
    "set_definition",
    "set_parameters",
]
