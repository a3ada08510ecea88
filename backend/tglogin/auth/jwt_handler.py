"""JWT create and verify for sessions established by a Telegram login."""
import time
from typing import Any

import jwt

from tglogin.auth.claims import TelegramIdentity
from tglogin.config import get_settings


def create_token(identity: TelegramIdentity) -> str:
    settings = get_settings()
    return jwt.encode(
        {
            "sub": identity.uid,
            "name": identity.name,
            "username": identity.nickname,
            "image": identity.image,
            "auth_date": int(identity.auth_date.timestamp()),
            "exp": int(time.time()) + settings.jwt_expire_seconds,
        },
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> dict[str, Any] | None:
    try:
        settings = get_settings()
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
        )
    except jwt.PyJWTError:
        return None
