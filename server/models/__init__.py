# server/models/__init__.py

from .user import User
from .claims import SessionClaims, AUDIENCE, SUBJECT


__all__ = ["User", "SessionClaims", "AUDIENCE", "SUBJECT"]
