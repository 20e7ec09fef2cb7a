# server/main.py

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import auth
from core.config import Config, load_config
from core.errors import APIError, api_error_handler
from core.tokens import TokenIssuer
from database import init_users
from storage import Users


def create_app(config: Config | None = None, users: Users | None = None) -> FastAPI:
    config = config or load_config()

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not config.jwt_secret.get_secret_value():
        logging.getLogger(__name__).warning("JWT_SECRET_KEY is not set, logins will fail")

    app = FastAPI(title=config.app_name)

    app.state.users = users if users is not None else init_users()
    app.state.issuer = TokenIssuer(config.jwt_secret, config.app_name)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(APIError, api_error_handler)
    app.include_router(auth.router)

    return app


app = create_app()
