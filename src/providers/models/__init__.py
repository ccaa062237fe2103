"""Provider models package.

This package contains the provider definition, wire protocol, credential and
error models shared by the registry and the request factory.
"""

from .credential import ApiKeyCredential, AuthMode, Credential
from .errors import (
    ConfigError,
    CredentialError,
    MissingEnvironmentVariableError,
    ProviderError,
)
from .provider import ProviderInfo
from .wire_api import WireApi

__all__ = [
    "ApiKeyCredential",
    "AuthMode",
    "ConfigError",
    "Credential",
    "CredentialError",
    "MissingEnvironmentVariableError",
    "ProviderError",
    "ProviderInfo",
    "WireApi",
]
