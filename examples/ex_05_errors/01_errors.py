"""Errors: what argwire raises when a graph cannot be built.

Every error derives from ``ArgwireError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from argwire import (
    ArgwireCyclicDependencyError,
    ArgwireError,
    ArgwireNotInstantiableError,
    ArgwireTargetNotFoundError,
    ArgwireUnknownParameterError,
    Injector,
)


class Mailer:
    def __init__(self, host: str) -> None:
        self.host = host


class Storage(ABC):
    @abstractmethod
    def save(self) -> None: ...


class Chicken:
    def __init__(self, egg: Egg) -> None:
        self.egg = egg


class Egg:
    def __init__(self, chicken: Chicken) -> None:
        self.chicken = chicken


def main() -> None:
    injector = Injector()

    try:
        injector.get(Mailer)
    except ArgwireUnknownParameterError as error:
        print(f"unknown={error.parameter_name}")  # => unknown=host

    try:
        injector.get(Storage)
    except ArgwireNotInstantiableError as error:
        print(f"not_instantiable={error.target.__name__}")  # => not_instantiable=Storage

    try:
        injector.invoke(Mailer, "send", {Mailer: {"__init__": {"host": "smtp"}}})
    except ArgwireTargetNotFoundError as error:
        print(f"missing={error.method_name}")  # => missing=send

    try:
        injector.get(Chicken)
    except ArgwireError as error:
        cyclic = isinstance(error, ArgwireCyclicDependencyError)
        print(f"cyclic={cyclic}")  # => cyclic=True
        print(error)  # => Cyclic dependency detected: Chicken -> Egg -> Chicken.


if __name__ == "__main__":
    main()
