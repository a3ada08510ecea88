"""Claim set received from the login widget and the identity derived from it."""
from collections.abc import Iterator, Mapping
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

# Both must be present (by key) for a claim set to be checked at all
REQUIRED_FIELDS: tuple[str, ...] = ("id", "hash")

# Only these fields take part in the data-check-string
SIGNABLE_FIELDS: frozenset[str] = frozenset(
    {"auth_date", "first_name", "id", "last_name", "photo_url", "username"}
)


def parse_auth_date(value: Optional[str]) -> int:
    """Unix timestamp from the auth_date field; anything unparseable is 0."""
    if value is None:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


class ClaimSet(Mapping[str, str]):
    """
    Immutable str -> str mapping built per login attempt.
    Presence is by key: an empty value still counts as present.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(data or {})

    @classmethod
    def from_payload(cls, payload: Mapping[Any, Any]) -> "ClaimSet":
        """Build from raw query params or a JSON object (values become their string form)."""
        return cls({str(k): "" if v is None else str(v) for k, v in payload.items()})

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        # hash is a credential for this claim set, keep it out of logs
        shown = {k: ("***" if k == "hash" else v) for k, v in self._data.items()}
        return f"ClaimSet({shown!r})"

    def missing_required(self) -> list[str]:
        return [f for f in REQUIRED_FIELDS if f not in self._data]

    def signable(self) -> dict[str, str]:
        """Whitelisted subset, the only part the signature depends on."""
        return {k: v for k, v in self._data.items() if k in SIGNABLE_FIELDS}

    @property
    def auth_timestamp(self) -> int:
        return parse_auth_date(self._data.get("auth_date"))


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def auth_instant(timestamp: int) -> datetime:
    try:
        return EPOCH + timedelta(seconds=timestamp)
    except OverflowError:
        return EPOCH


def full_name(first_name: Optional[str], last_name: Optional[str] = None) -> str:
    return " ".join(part for part in (first_name, last_name) if part is not None)


class TelegramIdentity(BaseModel):
    """Identity attributes of a verified login."""

    model_config = ConfigDict(frozen=True)

    uid: str
    name: str = ""
    nickname: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    image: Optional[str] = None
    auth_date: datetime = EPOCH

    @classmethod
    def from_claims(cls, claims: ClaimSet) -> "TelegramIdentity":
        first_name = claims.get("first_name")
        last_name = claims.get("last_name")
        return cls(
            uid=claims["id"],
            name=full_name(first_name, last_name),
            nickname=claims.get("username"),
            first_name=first_name,
            last_name=last_name,
            image=claims.get("photo_url"),
            auth_date=auth_instant(claims.auth_timestamp),
        )
