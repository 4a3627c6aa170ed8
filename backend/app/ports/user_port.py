from abc import ABC, abstractmethod
from typing import Any


class UserPort(ABC):
    @abstractmethod
    async def get_user_by_username(self, username: str) -> dict[str, Any] | None:
        """Fetch a user record (``username``, ``password`` hash) by username."""
        ...

    @abstractmethod
    async def create_user(self, username: str, password_hash: str) -> dict[str, Any]:
        """Insert a user. Raises UsernameTakenError if the username exists."""
        ...
