from typing import Optional
from passlib.context import CryptContext
from app.config import settings

def build_pwd_context(rounds: int) -> CryptContext:
    """bcrypt context with a fixed cost factor; every hash gets a random salt."""
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

# Shared bcrypt context
pwd_context = build_pwd_context(settings.BCRYPT_ROUNDS)

# Compare a plain password with a stored hash
def verify_password(plain_password: str, hashed_password: str, context: Optional[CryptContext] = None) -> bool:
    return (context or pwd_context).verify(plain_password, hashed_password)

# Hash a password
def get_password_hash(password: str, context: Optional[CryptContext] = None) -> str:
    return (context or pwd_context).hash(password)
