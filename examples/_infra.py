"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field


# Types
@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    email: str


# Errors
@dataclass(eq=False)
class NotFound(Exception):
    entity: str
    id: int | str

    def __str__(self) -> str:
        return f"{self.entity}:{self.id} not found"


@dataclass(eq=False)
class ServiceError(Exception):
    message: str
    cause: Exception | None = None

    def __str__(self) -> str:
        return self.message


# Fake API (raises instead of returning Result)
@dataclass(slots=True)
class FakeApi:
    users: dict[int, User] = field(default_factory=lambda: {
        1: User(1, "Alice", "alice@example.com"),
        2: User(2, "Bob", "bob@example.com"),
    })

    async def get_user(self, user_id: int) -> User:
        await asyncio.sleep(0.01)
        user = self.users.get(user_id)
        if user is None:
            raise NotFound("User", user_id)
        return user


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    asyncio.run(main())
