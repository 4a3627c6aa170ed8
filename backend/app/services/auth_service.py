"""
Credential checks for registration and login.
Login only verifies the password; no token or session is issued.
"""

from passlib.context import CryptContext

from app.core.security import get_password_hash, verify_password
from app.ports.user_port import UserPort
from app.utils.exceptions import InvalidCredentialsError
from app.utils.logger import auth_logger


class AuthService:

    def __init__(self, users: UserPort, pwd_context: CryptContext) -> None:
        self._users = users
        self._pwd_context = pwd_context

    async def register(self, username: str, password: str) -> str:
        """Store a new user with a salted bcrypt hash. Raises UsernameTakenError."""
        password_hash = get_password_hash(password, self._pwd_context)
        await self._users.create_user(username, password_hash)
        auth_logger.info(f"User registered: {username}")
        return username

    async def login(self, username: str, password: str) -> str:
        """
        Return the username when the credentials match.

        Unknown users and wrong passwords raise the same InvalidCredentialsError
        so callers cannot tell them apart.
        """
        user = await self._users.get_user_by_username(username)
        if user is None:
            auth_logger.info(f"Login failed, unknown user: {username}")
            raise InvalidCredentialsError()
        if not verify_password(password, user["password"], self._pwd_context):
            auth_logger.info(f"Login failed, wrong password: {username}")
            raise InvalidCredentialsError()
        auth_logger.info(f"Login succeeded: {username}")
        return user["username"]
