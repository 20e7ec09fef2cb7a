# server/models/claims.py

from pydantic import BaseModel


AUDIENCE = "ls-apiv1"
SUBJECT = "auth"


class SessionClaims(BaseModel):
    """
    Claim set embedded in the session token.
    Registered claim names are kept so any JWT library can read them.
    """
    iss: str
    aud: list[str] = [AUDIENCE]
    sub: str = SUBJECT
    exp: int
    iat: int
    jti: str

    nickname: str
    user_id: int
