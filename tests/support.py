from tglogin.auth.claims import ClaimSet
from tglogin.auth.telegram_verify import calculate_signature

BOT_TOKEN = "123456:ABC-test-bot-token"


def signed(secret, **fields) -> dict[str, str]:
    """Claim set as the widget would send it, with a correct hash."""
    fields["hash"] = calculate_signature(secret, ClaimSet(fields))
    return fields
