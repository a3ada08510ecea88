"""Signing key derivation for Telegram login data (https://core.telegram.org/widgets/login)."""
import hashlib


def derive_key(secret: bytes | str) -> bytes:
    """
    SHA-256 of the bot token, used as the HMAC key.
    Empty secrets must be rejected by the caller before getting here.
    """
    if isinstance(secret, str):
        secret = secret.encode("utf-8")
    return hashlib.sha256(secret).digest()
