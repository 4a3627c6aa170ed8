"""
Beanie/Motor implementation of UserPort.
Username uniqueness is enforced by the unique index on ``users.username``.
"""

from typing import Any

from pymongo.errors import DuplicateKeyError

from app.models.user import User
from app.ports.user_port import UserPort
from app.utils.exceptions import UsernameTakenError


def _to_record(user: User) -> dict[str, Any]:
    return {"_id": str(user.id), "username": user.username, "password": user.password}


class BeanieUserAdapter(UserPort):

    async def get_user_by_username(self, username: str) -> dict[str, Any] | None:
        user = await User.find_one(User.username == username)
        return _to_record(user) if user else None

    async def create_user(self, username: str, password_hash: str) -> dict[str, Any]:
        user = User(username=username, password=password_hash)
        try:
            await user.insert()
        except DuplicateKeyError as e:
            raise UsernameTakenError(username) from e
        return _to_record(user)
