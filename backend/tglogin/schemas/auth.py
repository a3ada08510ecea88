"""Request/response schemas for Telegram login."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from tglogin.auth.claims import TelegramIdentity


class IdentityOut(BaseModel):
    uid: str
    name: str
    nickname: Optional[str] = None
    image: Optional[str] = None
    authDate: datetime

    @classmethod
    def from_identity(cls, identity: TelegramIdentity) -> "IdentityOut":
        return cls(
            uid=identity.uid,
            name=identity.name,
            nickname=identity.nickname,
            image=identity.image,
            authDate=identity.auth_date,
        )


class AuthOut(IdentityOut):
    token: str
