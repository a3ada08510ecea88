"""Auth API: Telegram Login Widget -> JWT."""
from collections.abc import Mapping

from fastapi import APIRouter, Depends, HTTPException, Request

from tglogin.auth.claims import ClaimSet
from tglogin.auth.jwt_handler import create_token
from tglogin.auth.telegram_verify import TelegramLoginVerifier, Verdict
from tglogin.deps import get_current_identity, get_verifier
from tglogin.schemas.auth import AuthOut, IdentityOut

router = APIRouter(prefix="/api/auth", tags=["auth"])

_FAILURE_STATUS = {
    Verdict.MISSING_REQUIRED_FIELD: 400,
    Verdict.SIGNATURE_MISMATCH: 401,
    Verdict.EXPIRED: 401,
}


def _login(verifier: TelegramLoginVerifier, payload: Mapping) -> AuthOut:
    result = verifier.authenticate(ClaimSet.from_payload(payload))
    if not result.ok:
        raise HTTPException(status_code=_FAILURE_STATUS[result.verdict], detail=result.verdict.value)
    identity = result.identity
    return AuthOut(
        token=create_token(identity),
        **IdentityOut.from_identity(identity).model_dump(),
    )


@router.post("/telegram", response_model=AuthOut)
async def login_telegram(
    request: Request,
    verifier: TelegramLoginVerifier = Depends(get_verifier),
):
    """
    Verify Telegram Login Widget data and return JWT.
    Body is the raw user object from the widget's onauth callback
    (id, first_name, last_name?, username?, photo_url?, auth_date, hash).
    """
    try:
        payload = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid JSON")
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Body must be a JSON object")
    return _login(verifier, payload)


@router.get("/telegram/callback", response_model=AuthOut)
async def telegram_callback(
    request: Request,
    verifier: TelegramLoginVerifier = Depends(get_verifier),
):
    """Redirect target (data-auth-url): the widget passes the user fields as query parameters."""
    return _login(verifier, request.query_params)


@router.get("/me", response_model=IdentityOut)
async def me(identity: IdentityOut = Depends(get_current_identity)):
    return identity
