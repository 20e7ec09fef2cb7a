from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt
from pydantic import SecretStr

from core.tokens import InvalidToken, SigningUnavailable, TokenIssuer
from models.claims import AUDIENCE


def test_issued_token_carries_identity(issuer):
    now = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)

    token = issuer.issue("alice", 3, now)
    claims = jwt.get_unverified_claims(token)

    assert claims["nickname"] == "alice"
    assert claims["user_id"] == 3
    assert claims["iss"] == "long-season-test"
    assert claims["aud"] == [AUDIENCE]
    assert claims["sub"] == "auth"
    assert claims["iat"] == int(now.timestamp())
    assert claims["exp"] == int((now + timedelta(hours=48)).timestamp())
    assert claims["jti"]
    assert jwt.get_unverified_header(token)["alg"] == "HS256"


def test_every_token_gets_own_id(issuer):
    now = datetime.now(timezone.utc)

    first = jwt.get_unverified_claims(issuer.issue("alice", 0, now))
    second = jwt.get_unverified_claims(issuer.issue("alice", 0, now))

    assert first["jti"] != second["jti"]


def test_verify_round_trip(issuer):
    claims = issuer.verify(issuer.issue("alice", 0))

    assert claims.nickname == "alice"
    assert claims.user_id == 0
    assert claims.exp - claims.iat == 48 * 60 * 60


def test_empty_secret_cannot_sign():
    issuer = TokenIssuer(SecretStr(""), "long-season")

    with pytest.raises(SigningUnavailable):
        issuer.issue("alice", 0)


def test_verify_rejects_other_key(issuer):
    other = TokenIssuer(SecretStr("another-secret"), "long-season-test")

    with pytest.raises(InvalidToken):
        issuer.verify(other.issue("alice", 0))


def test_verify_rejects_expired_token(issuer):
    token = issuer.issue("alice", 0, datetime.now(timezone.utc) - timedelta(hours=49))

    with pytest.raises(InvalidToken):
        issuer.verify(token)


def test_verify_rejects_garbage(issuer):
    with pytest.raises(InvalidToken):
        issuer.verify("definitely.not.a-token")


def test_secret_is_hidden_from_repr(config):
    assert "test-secret" not in repr(config)
