"""FastAPI application: Telegram Login Widget verification."""
import logging

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from tglogin import __version__
from tglogin.api import auth
from tglogin.config import get_settings

settings = get_settings()

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=settings.log_level.upper(),
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Telegram Login API",
    description="Verifies Telegram Login Widget callbacks and issues session tokens",
    version=__version__,
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Return 500 as JSON so CORS middleware adds headers; let HTTPException through."""
    if isinstance(exc, HTTPException):
        raise exc
    logger.exception("Unhandled error: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


app.include_router(auth.router)


@app.get("/health")
def health():
    return {
        "status": "ok",
        "telegram_login_configured": get_settings().telegram_login_configured,
    }


def run() -> None:
    settings = get_settings()
    uvicorn.run("tglogin.main:app", host=settings.host, port=settings.port)
