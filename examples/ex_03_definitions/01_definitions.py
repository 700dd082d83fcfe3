"""Definitions: bind a value to a dependency type within a scope.

A definition is keyed by owner class and owner method, either of which may be
``"*"``. The most specific scope wins: ``(class, method)``, ``(class, "*")``,
``("*", method)``, then ``("*", "*")``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from argwire import WILDCARD, Injector


class Clock(ABC):
    @abstractmethod
    def now(self) -> str: ...


class FixedClock(Clock):
    def __init__(self, value: str) -> None:
        self.value = value

    def now(self) -> str:
        return self.value


class Billing:
    def __init__(self, clock: Clock) -> None:
        self.clock = clock


class Reports:
    def __init__(self, clock: Clock) -> None:
        self.clock = clock


def main() -> None:
    injector = Injector()
    injector.set_definition(WILDCARD, WILDCARD, {Clock: FixedClock("system")})
    injector.set_definition(Billing, WILDCARD, {Clock: FixedClock("billing")})

    print(f"billing={injector.get(Billing).clock.now()}")  # => billing=billing
    print(f"reports={injector.get(Reports).clock.now()}")  # => reports=system


if __name__ == "__main__":
    main()
