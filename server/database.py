# server/database.py

from fastapi import Request

from core.tokens import TokenIssuer
from storage import Users
from storage.memory import Factory


factory = Factory()


def init_users() -> Users:
    return factory.users()


def get_users(request: Request) -> Users:
    return request.app.state.users


def get_issuer(request: Request) -> TokenIssuer:
    return request.app.state.issuer
