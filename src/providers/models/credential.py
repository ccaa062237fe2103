"""Credential models.

Stored credentials (API keys saved by a login flow, refreshable managed-login
tokens) are owned by an external token store. This package only consumes
their authentication mode and their ``get_token`` coroutine.
"""
from abc import ABC, abstractmethod
from enum import Enum


class AuthMode(str, Enum):
    """How a credential was obtained."""

    API_KEY = "api_key"
    MANAGED_LOGIN = "managed_login"


class Credential(ABC):
    """Base class for credentials that can produce a bearer token."""

    mode: AuthMode

    @abstractmethod
    async def get_token(self) -> str:
        """Get bearer token.

        Implementations backed by a managed login may refresh the token over
        the network before returning.

        Returns:
            Bearer token value

        Raises:
            CredentialError: If no token can be obtained
        """
        raise NotImplementedError


class ApiKeyCredential(Credential):
    """Ad-hoc credential wrapping a raw API key."""

    mode = AuthMode.API_KEY

    def __init__(self, api_key: str) -> None:
        self._api_key = api_key

    async def get_token(self) -> str:
        return self._api_key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiKeyCredential):
            return NotImplemented
        return self._api_key == other._api_key

    def __hash__(self) -> int:
        return hash(self._api_key)

    def __repr__(self) -> str:
        return "ApiKeyCredential(api_key='***')"
