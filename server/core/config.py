# server/core/config.py

import os
from dataclasses import dataclass
from dotenv import load_dotenv
from pydantic import SecretStr


load_dotenv()


@dataclass(frozen=True)
class Config:
    jwt_secret: SecretStr
    app_name: str = "long-season"
    log_level: str = "INFO"


def load_config() -> Config:
    """
    Reads process configuration from the environment (and .env file, if any).
    The signing secret is wrapped in SecretStr so it never shows up in logs or reprs.
    """
    return Config(
        jwt_secret=SecretStr(os.getenv("JWT_SECRET_KEY", "")),
        app_name=os.getenv("APP_NAME", "long-season"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
