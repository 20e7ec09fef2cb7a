# server/core/security.py

from passlib.context import CryptContext


pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> bytes:
    return pwd_context.hash(password).encode()


def verify_password(plain_password: str, hashed_password: bytes) -> bool:
    """
    Checks plain password against stored bcrypt hash.
    A malformed or empty hash never matches.
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False
