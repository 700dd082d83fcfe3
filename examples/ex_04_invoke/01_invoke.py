"""Invoke: call a method with resolved arguments.

Method parameters are resolved like constructor parameters, under the method's
own name. The method is called on the cached instance of its class.
"""

from __future__ import annotations

from argwire import WILDCARD, Injector


class Formatter:
    def __init__(self, prefix: str = ">") -> None:
        self.prefix = prefix


class Console:
    def __init__(self, formatter: Formatter) -> None:
        self.formatter = formatter

    def write(self, message: str, *, upper: bool = False) -> str:
        text = message.upper() if upper else message
        return f"{self.formatter.prefix} {text}"

    def warn(self, message: str) -> str:
        return f"{self.formatter.prefix} warning: {message}"


def main() -> None:
    injector = Injector()
    injector.set_parameters(Console, {WILDCARD: {"message": "ready"}})

    print(injector.invoke(Console, "write"))  # => > ready
    print(injector.invoke(Console, "warn"))  # => > warning: ready

    overrides = {Console: {"write": {"message": "done", "upper": True}}}
    print(injector.invoke(Console, "write", overrides))  # => > DONE


if __name__ == "__main__":
    main()
