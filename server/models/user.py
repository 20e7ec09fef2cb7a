# server/models/user.py

from pydantic import BaseModel, ConfigDict, Field


# -------------------------------
# User Model
# -------------------------------

class User(BaseModel):
    """
    Member record kept by the users storage.
    Stores nickname and bcrypt hash of the password for authentication.
    Any other profile fields are kept as they are and never interpreted.
    """
    model_config = ConfigDict(extra="allow")

    id: int = 0
    nickname: str
    password: bytes = Field(default=b"", repr=False)
