# server/storage/errors.py


class StorageError(Exception):
    """
    Base class for every error raised by a users storage backend.
    """


class NicknameTaken(StorageError):
    def __init__(self, nickname: str):
        super().__init__(f"nickname {nickname!r} is already taken")
        self.nickname = nickname


class NoSuchID(StorageError):
    def __init__(self, user_id: int):
        super().__init__(f"there is no user with id {user_id}")
        self.user_id = user_id
