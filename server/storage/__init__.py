# server/storage/__init__.py

from typing import Protocol

from models.user import User
from storage.errors import StorageError, NicknameTaken, NoSuchID


class Users(Protocol):
    """
    Storage contract for member records.
    Any backend passed to the auth handler has to provide these four operations.
    """

    def new(self, user: User) -> int: ...

    def read(self, user_id: int) -> User: ...

    def all(self) -> list[User]: ...

    def update(self, user: User) -> None: ...


__all__ = ["Users", "StorageError", "NicknameTaken", "NoSuchID"]
