"""Parameters: supply plain values by parameter name.

Registered parameters are keyed by class, then by method name (``"__init__"``
for constructors, ``"*"`` for every method), then by parameter name. Values
registered first win. Per-call overrides take precedence over registrations.
"""

from __future__ import annotations

from argwire import Injector


class Mailer:
    def __init__(self, host: str, port: int = 25) -> None:
        self.host = host
        self.port = port


def main() -> None:
    injector = Injector()
    injector.set_parameters(Mailer, {"__init__": {"host": "smtp.local"}})
    injector.set_parameters(Mailer, {"__init__": {"host": "ignored", "port": 587}})

    mailer = injector.get(Mailer)
    print(f"{mailer.host}:{mailer.port}")  # => smtp.local:587

    overridden = injector.get(Mailer, {Mailer: {"__init__": {"host": "smtp.test"}}})
    print(f"{overridden.host}:{overridden.port}")  # => smtp.test:587

    print(f"rebuilt={overridden is not mailer}")  # => rebuilt=True


if __name__ == "__main__":
    main()
