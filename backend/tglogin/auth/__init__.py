"""Telegram login verification: key derivation, claim set checks and session tokens."""
from tglogin.auth.claims import REQUIRED_FIELDS, SIGNABLE_FIELDS, ClaimSet, TelegramIdentity
from tglogin.auth.secret import derive_key
from tglogin.auth.telegram_verify import (
    TelegramLoginNotConfigured,
    TelegramLoginVerifier,
    VerificationResult,
    Verdict,
    calculate_signature,
    comparison_string,
    verify,
)

__all__ = [
    "REQUIRED_FIELDS",
    "SIGNABLE_FIELDS",
    "ClaimSet",
    "TelegramIdentity",
    "TelegramLoginNotConfigured",
    "TelegramLoginVerifier",
    "VerificationResult",
    "Verdict",
    "calculate_signature",
    "comparison_string",
    "derive_key",
    "verify",
]
