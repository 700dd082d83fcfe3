"""Quickstart: build an object graph from constructor type hints.

Ask for the top-level service and argwire constructs every collaborator it
needs, caching one instance per class.
"""

from __future__ import annotations

from argwire import Injector


class Database:
    def __init__(self, host: str = "localhost") -> None:
        self.host = host


class UserRepository:
    def __init__(self, database: Database) -> None:
        self.database = database


class UserService:
    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository


def main() -> None:
    injector = Injector()
    service = injector.get(UserService)

    print(f"db_host={service.repository.database.host}")  # => db_host=localhost

    chain = (
        f"{type(service).__name__}"
        f">{type(service.repository).__name__}"
        f">{type(service.repository.database).__name__}"
    )
    print(f"chain={chain}")  # => chain=UserService>UserRepository>Database
    print(f"cached={injector.get(UserService) is service}")  # => cached=True


if __name__ == "__main__":
    main()
