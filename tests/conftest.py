import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from core.config import Config
from core.security import hash_password
from core.tokens import TokenIssuer
from main import create_app
from models.user import User
from storage.memory import Factory


@pytest.fixture()
def config() -> Config:
    return Config(jwt_secret=SecretStr("test-secret"), app_name="long-season-test")


@pytest.fixture()
def users():
    return Factory().users()


@pytest.fixture()
def issuer(config) -> TokenIssuer:
    return TokenIssuer(config.jwt_secret, config.app_name)


@pytest.fixture()
def alice(users) -> User:
    """
    Stores alice with password "secret123" and returns the stored record.
    """
    user_id = users.new(User(nickname="alice", password=hash_password("secret123")))
    return users.read(user_id)


@pytest.fixture()
def client(config, users) -> TestClient:
    return TestClient(create_app(config, users))
