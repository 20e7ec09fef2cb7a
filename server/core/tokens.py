# server/core/tokens.py

import logging
import uuid
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from pydantic import SecretStr, ValidationError

from models.claims import SessionClaims, AUDIENCE, SUBJECT


logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
TOKEN_EXPIRE = timedelta(hours=48)


class TokenError(Exception):
    pass


class SigningUnavailable(TokenError):
    pass


class InvalidToken(TokenError):
    pass


class TokenIssuer:
    """
    Builds and HS256-signs session tokens for authenticated members.
    Holds no state apart from the key and the issuer name.
    """

    def __init__(self, secret: SecretStr, app_name: str):
        self._secret = secret
        self.app_name = app_name

    def _key(self) -> str:
        key = self._secret.get_secret_value()
        if not key:
            raise SigningUnavailable("empty signing key")
        return key

    def claims(self, nickname: str, user_id: int, now: datetime) -> SessionClaims:
        return SessionClaims(
            iss=self.app_name,
            aud=[AUDIENCE],
            sub=SUBJECT,
            exp=int((now + TOKEN_EXPIRE).timestamp()),
            iat=int(now.timestamp()),
            jti=str(uuid.uuid4()),
            nickname=nickname,
            user_id=user_id,
        )

    def issue(self, nickname: str, user_id: int, now: datetime | None = None) -> str:
        """
        Returns signed token for given identity.
        Raises SigningUnavailable when the key is unusable or the claims
        cannot be encoded.
        """
        key = self._key()
        now = now or datetime.now(timezone.utc)

        try:
            claims = self.claims(nickname, user_id, now)
            return jwt.encode(claims.model_dump(), key, algorithm=ALGORITHM)
        except (JWTError, ValidationError) as e:
            raise SigningUnavailable(str(e)) from e

    def verify(self, token: str) -> SessionClaims:
        """
        Checks signature, expiration and audience of given token
        and returns its claims. Raises InvalidToken otherwise.
        """
        try:
            key = self._key()
        except SigningUnavailable as e:
            raise InvalidToken(str(e)) from e

        try:
            payload = jwt.decode(token, key, algorithms=[ALGORITHM], audience=AUDIENCE)
            return SessionClaims.model_validate(payload)
        except (JWTError, ValidationError) as e:
            logger.debug("rejected session token: %s", e)
            raise InvalidToken("invalid session token") from e
