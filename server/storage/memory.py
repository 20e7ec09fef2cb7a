# server/storage/memory.py

import logging
from threading import Lock

from models.user import User
from storage.errors import NicknameTaken, NoSuchID


logger = logging.getLogger(__name__)


# -------------------------------
# Factory
# -------------------------------

class Factory:
    """
    Hands out volatile storages, used by tests and for running
    the server without a database.
    """

    def users(self) -> "UsersStorage":
        return UsersStorage()


# -------------------------------
# Users Storage
# -------------------------------

class UsersStorage:
    """
    In-memory implementation of the storage.Users contract.
    One lock guards both the records mapping and the id counter,
    so every operation observes a consistent state.
    """

    def __init__(self):
        self._data: dict[int, User] = {}
        self._counter = 0
        self._lock = Lock()

    def new(self, user: User) -> int:
        """
        Stores a copy of given user and returns the id assigned to it.
        Raises NicknameTaken if any stored user has the same nickname.
        """
        with self._lock:
            for existing in self._data.values():
                if existing.nickname == user.nickname:
                    raise NicknameTaken(existing.nickname)

            user_id = self._counter
            self._data[user_id] = user.model_copy(update={"id": user_id}, deep=True)
            self._counter += 1

        logger.debug("stored user %d", user_id)
        return user_id

    def read(self, user_id: int) -> User:
        with self._lock:
            user = self._data.get(user_id)
            if user is None:
                raise NoSuchID(user_id)
            return user.model_copy(deep=True)

    def all(self) -> list[User]:
        """
        Returns a snapshot of every stored user. Order is unspecified.
        """
        with self._lock:
            return [u.model_copy(deep=True) for u in self._data.values()]

    def update(self, user: User) -> None:
        """
        Overwrites the whole record stored under user.id.
        Nickname uniqueness is not checked again.
        """
        with self._lock:
            if user.id not in self._data:
                raise NoSuchID(user.id)
            self._data[user.id] = user.model_copy(deep=True)
