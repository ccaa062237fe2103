"""Authentication resolution for outbound requests.

The credential used for a request is picked by walking ``AUTH_PRIORITY`` in
order; the first rule returning a credential wins:

1. ``bearer_token_override`` declared on the provider
2. API key read from the provider's ``env_key`` variable
3. the stored credential of the caller (API key or managed login)

A declared but unset ``env_key`` does not stop the walk. The error is kept
and raised only if no later rule yields a credential, unless strict mode is
requested.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from .environment import EnvironmentSnapshot
from .models import ApiKeyCredential, Credential, MissingEnvironmentVariableError, ProviderInfo


class AuthSource(str, Enum):
    """Rule that supplied the credential."""

    BEARER_OVERRIDE = "bearer_override"
    ENV_KEY = "env_key"
    STORED = "stored"
    NONE = "none"


@dataclass(frozen=True)
class AuthResolution:
    """Outcome of credential resolution."""

    credential: Optional[Credential]
    source: AuthSource
    # env_key error skipped in favour of a stored credential
    absorbed_error: Optional[MissingEnvironmentVariableError] = None


AuthRule = Callable[
    [ProviderInfo, Optional[Credential], EnvironmentSnapshot],
    Optional[Credential],
]


def bearer_override_rule(
    provider: ProviderInfo,
    stored: Optional[Credential],
    env: EnvironmentSnapshot,
) -> Optional[Credential]:
    """Use the explicit bearer token of the provider."""
    if provider.bearer_token_override is None:
        return None
    return ApiKeyCredential(provider.bearer_token_override)


def env_key_rule(
    provider: ProviderInfo,
    stored: Optional[Credential],
    env: EnvironmentSnapshot,
) -> Optional[Credential]:
    """Use the API key from the provider's env_key variable.

    Raises:
        MissingEnvironmentVariableError: If env_key is declared but unset
    """
    api_key = provider.api_key(env)
    if api_key is None:
        return None
    return ApiKeyCredential(api_key)


def stored_credential_rule(
    provider: ProviderInfo,
    stored: Optional[Credential],
    env: EnvironmentSnapshot,
) -> Optional[Credential]:
    """Use the caller's stored credential."""
    return stored


AUTH_PRIORITY: Tuple[Tuple[AuthSource, AuthRule], ...] = (
    (AuthSource.BEARER_OVERRIDE, bearer_override_rule),
    (AuthSource.ENV_KEY, env_key_rule),
    (AuthSource.STORED, stored_credential_rule),
)


def resolve_auth(
    provider: ProviderInfo,
    stored: Optional[Credential],
    env: EnvironmentSnapshot,
    strict_env_key: bool = False,
) -> AuthResolution:
    """Pick the credential for one request.

    Args:
        provider: Provider definition
        stored: Credential from the external token store, if any
        env: Environment to read env_key from
        strict_env_key: Raise a missing env_key error even when a stored
            credential could be used instead

    Returns:
        Resolution naming the credential and the rule that supplied it.
        The credential is None when the request goes out unauthenticated.

    Raises:
        MissingEnvironmentVariableError: If env_key is declared but unset and
            no stored credential exists (or strict_env_key is set)
    """
    pending: Optional[MissingEnvironmentVariableError] = None

    for source, rule in AUTH_PRIORITY:
        try:
            credential = rule(provider, stored, env)
        except MissingEnvironmentVariableError as e:
            if strict_env_key:
                raise
            pending = e
            continue
        if credential is not None:
            return AuthResolution(
                credential=credential,
                source=source,
                absorbed_error=pending,
            )

    if pending is not None:
        raise pending

    return AuthResolution(credential=None, source=AuthSource.NONE)


def resolve_credential(
    provider: ProviderInfo,
    stored: Optional[Credential],
    env: EnvironmentSnapshot,
    strict_env_key: bool = False,
) -> Optional[Credential]:
    """Pick the credential for one request; see :func:`resolve_auth`."""
    return resolve_auth(provider, stored, env, strict_env_key).credential
