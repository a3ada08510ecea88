"""Shared FastAPI dependencies."""
from datetime import datetime, timezone

from fastapi import Depends, Header, HTTPException

from tglogin.auth.jwt_handler import decode_token
from tglogin.auth.telegram_verify import TelegramLoginNotConfigured, TelegramLoginVerifier
from tglogin.config import Settings, get_settings
from tglogin.schemas.auth import IdentityOut


def build_verifier(settings: Settings) -> TelegramLoginVerifier:
    return TelegramLoginVerifier.from_secret(
        settings.telegram_bot_token,
        expiration_window=settings.telegram_auth_expiration,
    )


def get_verifier(settings: Settings = Depends(get_settings)) -> TelegramLoginVerifier:
    try:
        return build_verifier(settings)
    except TelegramLoginNotConfigured:
        raise HTTPException(
            status_code=503,
            detail="Telegram login not configured (TELEGRAM_BOT_TOKEN)",
        )


def get_current_identity(
    authorization: str | None = Header(None, alias="Authorization"),
) -> IdentityOut:
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing or invalid Authorization")
    token = authorization[7:].strip()
    payload = decode_token(token)
    if not payload or "sub" not in payload:
        raise HTTPException(status_code=401, detail="Invalid token")
    return IdentityOut(
        uid=payload["sub"],
        name=payload.get("name") or "",
        nickname=payload.get("username"),
        image=payload.get("image"),
        authDate=datetime.fromtimestamp(payload.get("auth_date", 0), tz=timezone.utc),
    )
