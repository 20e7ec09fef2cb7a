# server/api/auth.py

import json
import logging
from datetime import datetime, timedelta, timezone
from pydantic import BaseModel, model_validator
from fastapi import APIRouter, Cookie, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.errors import BadRequest, InternalServerError, NotFound, Unauthorized
from core.security import verify_password
from core.tokens import InvalidToken, SigningUnavailable, TokenIssuer
from database import get_issuer, get_users
from models.claims import SessionClaims
from storage import Users


logger = logging.getLogger(__name__)

COOKIE_NAME = "jwt-token"
# Cookie lives shorter than the 48h "exp" claim inside the token.
COOKIE_EXPIRE = timedelta(hours=4)


router = APIRouter(prefix="/api/v1")
bearer_scheme = HTTPBearer(auto_error=False)


class AuthPayload(BaseModel):
    nickname: str = ""
    password: str = ""

    @model_validator(mode="before")
    @classmethod
    def fold_keys(cls, data):
        # Keys match case-insensitively and a null body reads as empty.
        if data is None:
            return {}
        if isinstance(data, dict):
            return {str(k).lower(): v for k, v in data.items()}
        return data


class AuthResponse(BaseModel):
    token: str


class Session(BaseModel):
    nickname: str
    user_id: int


# -------------------------------
# Authentication Workflow
# -------------------------------

class AuthHandler:
    """
    Checks nickname/password pair against the users storage
    and issues a session token for the matched member.
    """

    def __init__(self, users: Users, issuer: TokenIssuer):
        self.users = users
        self.issuer = issuer

    def authenticate(self, payload: AuthPayload, now: datetime) -> str:
        try:
            users = self.users.all()
        except Exception:
            logger.exception("could not read users storage")
            raise InternalServerError()

        # Search for user with exactly same nickname.
        match = next((u for u in users if u.nickname == payload.nickname), None)
        if match is None:
            logger.info("login attempt for unknown nickname %r", payload.nickname)
            raise NotFound("there is no user with given nickname")

        if not verify_password(payload.password, match.password):
            logger.warning("wrong password for %r", match.nickname)
            raise Unauthorized("given password does not match")

        try:
            token = self.issuer.issue(match.nickname, match.id, now)
        except SigningUnavailable:
            logger.exception("could not sign session token")
            raise InternalServerError()

        logger.info("issued session token for %r", match.nickname)
        return token


@router.post("/auth", response_model=AuthResponse)
async def api_auth(
    request: Request,
    users: Users = Depends(get_users),
    issuer: TokenIssuer = Depends(get_issuer),
):
    """
    Logs member in. On success returns the token in the body
    and also sets it as an http-only cookie.
    """
    raw = await request.body()
    try:
        payload = AuthPayload.model_validate(json.loads(raw))
    except ValueError:
        raise BadRequest("could not understand payload")

    now = datetime.now(timezone.utc)
    handler = AuthHandler(users, issuer)
    # bcrypt is slow, keep it off the event loop.
    token = await run_in_threadpool(handler.authenticate, payload, now)

    response = JSONResponse(status_code=200, content=AuthResponse(token=token).model_dump())
    response.set_cookie(
        key=COOKIE_NAME,
        value=token,
        expires=now + COOKIE_EXPIRE,
        path="/",
        httponly=True,
    )
    return response


# -------------------------------
# Current Session
# -------------------------------

def get_current_session(
    token: str | None = Cookie(default=None, alias=COOKIE_NAME),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    issuer: TokenIssuer = Depends(get_issuer),
) -> SessionClaims:
    if credentials is not None:
        token = credentials.credentials
    if not token:
        raise Unauthorized("missing session token")
    try:
        return issuer.verify(token)
    except InvalidToken:
        raise Unauthorized("could not validate session token")


@router.get("/auth/me", response_model=Session)
def read_session(claims: SessionClaims = Depends(get_current_session)):
    return {"nickname": claims.nickname, "user_id": claims.user_id}
