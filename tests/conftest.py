import pytest

from tglogin.config import get_settings

from tests.support import BOT_TOKEN


@pytest.fixture
def settings_env(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", BOT_TOKEN)
    monkeypatch.setenv("TELEGRAM_AUTH_EXPIRATION", "86400")
    monkeypatch.setenv("JWT_SECRET", "jwt-test-secret-0123456789abcdef0123456789")
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
