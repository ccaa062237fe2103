"""Shared fixtures for the provider registry test suite."""
from typing import Optional

import pytest

from core.logger import LoggerService
from core.settings import Settings
from providers.environment import EnvironmentSnapshot
from providers.models import AuthMode, Credential, ProviderInfo, WireApi


class FakeCredential(Credential):
    """Stored credential stand-in with a fixed token."""

    def __init__(
        self,
        token: str = "stored-token",
        mode: AuthMode = AuthMode.MANAGED_LOGIN,
        error: Optional[Exception] = None,
    ) -> None:
        self.mode = mode
        self.token = token
        self.error = error
        self.calls = 0

    async def get_token(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.token


@pytest.fixture
def settings():
    """Settings isolated from .env files."""
    return Settings(_env_file=None, LOG_FORMAT="text", STRICT_ENV_KEY=False)


@pytest.fixture
def logger_service(settings):
    """Logger service instance."""
    return LoggerService(settings)


@pytest.fixture
def empty_env():
    """Environment without any variables."""
    return EnvironmentSnapshot({})


@pytest.fixture
def managed_credential():
    """Stored managed-login credential."""
    return FakeCredential(token="managed-token", mode=AuthMode.MANAGED_LOGIN)


@pytest.fixture
def api_key_credential():
    """Stored API key credential."""
    return FakeCredential(token="stored-api-key", mode=AuthMode.API_KEY)


def make_provider(**overrides) -> ProviderInfo:
    """Build a provider definition with test defaults."""
    fields = {
        "name": "test",
        "base_url": "https://example.com/v1",
        "wire_api": WireApi.CHAT,
    }
    fields.update(overrides)
    return ProviderInfo(**fields)
