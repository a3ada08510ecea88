"""Verify Telegram Login Widget hash (https://core.telegram.org/widgets/login)."""
import hashlib
import hmac
import logging
import time
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from tglogin.auth.claims import SIGNABLE_FIELDS, ClaimSet, TelegramIdentity
from tglogin.auth.secret import derive_key

logger = logging.getLogger(__name__)


class TelegramLoginNotConfigured(ValueError):
    """Raised when a verifier is requested without a bot token."""


class Verdict(str, Enum):
    VALID = "valid"
    MISSING_REQUIRED_FIELD = "field_missing"
    SIGNATURE_MISMATCH = "signature_mismatch"
    EXPIRED = "session_expired"


class VerificationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    verdict: Verdict
    identity: Optional[TelegramIdentity] = None  # set only for VALID

    @property
    def ok(self) -> bool:
        return self.verdict is Verdict.VALID


def comparison_string(claims: Mapping[str, str]) -> str:
    """
    Data-check-string: whitelisted fields sorted by name, "key=value" joined with "\\n".
    Fields outside SIGNABLE_FIELDS never take part.
    """
    fields = sorted(k for k in claims if k in SIGNABLE_FIELDS)
    return "\n".join(f"{k}={claims[k]}" for k in fields)


def sign_with_key(key: bytes, claims: Mapping[str, str]) -> str:
    return hmac.new(
        key,
        comparison_string(claims).encode("utf-8", "surrogatepass"),
        hashlib.sha256,
    ).hexdigest()


def calculate_signature(secret: bytes | str, claims: Mapping[str, str]) -> str:
    """Lowercase hex HMAC-SHA256 the provider puts into the hash field."""
    return sign_with_key(derive_key(secret), claims)


def signatures_match(expected: str, received: str) -> bool:
    # compare_digest on str only takes ASCII and received is attacker input
    return hmac.compare_digest(expected.encode("utf-8"), received.encode("utf-8", "surrogatepass"))


class TelegramLoginVerifier:
    """
    Checks a claim set: required fields, then signature, then freshness.
    Holds only the derived key, so one instance can be shared across requests.
    expiration_window=None disables the freshness check.
    """

    def __init__(
        self,
        key: bytes,
        expiration_window: Optional[int] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if expiration_window is not None and expiration_window < 0:
            raise ValueError("expiration_window must be non-negative")
        self._key = key
        self.expiration_window = expiration_window
        self._clock = clock

    @classmethod
    def from_secret(
        cls,
        secret: bytes | str | None,
        expiration_window: Optional[int] = None,
        clock: Callable[[], float] = time.time,
    ) -> "TelegramLoginVerifier":
        if not secret:
            raise TelegramLoginNotConfigured("Telegram bot token is empty")
        return cls(derive_key(secret), expiration_window=expiration_window, clock=clock)

    def __repr__(self) -> str:
        return f"TelegramLoginVerifier(expiration_window={self.expiration_window!r})"

    def is_fresh(self, claims: ClaimSet, now: Optional[int] = None) -> bool:
        if self.expiration_window is None:
            return True
        if now is None:
            now = int(self._clock())
        # auth_date in the future gives a negative elapsed time and passes
        return now - claims.auth_timestamp <= self.expiration_window

    def verify(self, claims: Mapping[str, str], now: Optional[int] = None) -> Verdict:
        if not isinstance(claims, ClaimSet):
            claims = ClaimSet.from_payload(claims)
        if claims.missing_required():
            return Verdict.MISSING_REQUIRED_FIELD
        if not signatures_match(sign_with_key(self._key, claims), claims["hash"]):
            return Verdict.SIGNATURE_MISMATCH
        if not self.is_fresh(claims, now):
            return Verdict.EXPIRED
        return Verdict.VALID

    def authenticate(self, claims: Mapping[str, str], now: Optional[int] = None) -> VerificationResult:
        """Verify and, on success, extract the identity attributes."""
        if not isinstance(claims, ClaimSet):
            claims = ClaimSet.from_payload(claims)
        verdict = self.verify(claims, now)
        if verdict is not Verdict.VALID:
            logger.info(
                "Telegram login rejected: %s (id=%s, missing=%s)",
                verdict.value,
                claims.get("id"),
                claims.missing_required(),
            )
            return VerificationResult(verdict=verdict)
        logger.debug("Telegram login verified for id=%s", claims["id"])
        return VerificationResult(verdict=verdict, identity=TelegramIdentity.from_claims(claims))


def verify(
    claims: Mapping[str, str],
    secret: bytes | str,
    expiration_window: Optional[int] = None,
    *,
    now: Optional[int] = None,
) -> Verdict:
    """One-shot verification with a raw secret (derives the key on every call)."""
    return TelegramLoginVerifier(derive_key(secret), expiration_window).verify(claims, now)
