"""Built-in provider registry.

Built-in providers let the application work without any configuration.
Each builder reads its environment overrides once, from the snapshot it is
given; rebuild the registry to pick up later changes.
"""
from typing import Dict, Optional

from .constants import (
    ANTHROPIC_API_VERSION,
    ANTHROPIC_BASE_URL_ENV,
    ANTHROPIC_DEFAULT_BASE_URL,
    DEFAULT_OLLAMA_PORT,
    GOOGLE_GENAI_BASE_URL_ENV,
    GOOGLE_GENAI_DEFAULT_BASE_URL,
    LEGACY_OSS_BASE_URL_ENV,
    LEGACY_OSS_PORT_ENV,
    MAX_PORT,
    OPENAI_BASE_URL_ENV,
    OSS_BASE_URL_ENV,
    OSS_PORT_ENV,
    PROVIDER_ANTHROPIC,
    PROVIDER_GOOGLE_GENAI,
    PROVIDER_NAMES,
    PROVIDER_OPENAI,
    PROVIDER_OSS,
)
from .environment import EnvironmentSnapshot
from .models import ProviderInfo, WireApi


def create_openai_provider(env: EnvironmentSnapshot, version: str) -> ProviderInfo:
    """Create the OpenAI provider.

    ``OPENAI_BASE_URL`` points the provider at a proxy, mock server or
    Azure-style deployment. Without it the URL builder picks the public API
    or the managed-login backend depending on the credential.

    Args:
        env: Environment snapshot
        version: Build version sent in the ``version`` header

    Returns:
        Provider definition
    """
    return ProviderInfo(
        name=PROVIDER_NAMES[PROVIDER_OPENAI],
        base_url=env.get_non_blank(OPENAI_BASE_URL_ENV),
        wire_api=WireApi.RESPONSES,
        static_headers={"version": version},
        env_headers={
            "OpenAI-Organization": "OPENAI_ORGANIZATION",
            "OpenAI-Project": "OPENAI_PROJECT",
        },
        requires_managed_auth=True,
    )


def _first_non_blank(env: EnvironmentSnapshot, *names: str) -> Optional[str]:
    for name in names:
        if (value := env.get_non_blank(name)) is not None:
            return value
    return None


def oss_port(env: EnvironmentSnapshot) -> int:
    """Get local server port.

    The value must be plain ASCII digits within the TCP port range; anything
    else, including surrounding whitespace or a sign, falls back to the
    Ollama default.
    """
    value = _first_non_blank(env, OSS_PORT_ENV, LEGACY_OSS_PORT_ENV)
    if value is None or not (value.isascii() and value.isdigit()):
        return DEFAULT_OLLAMA_PORT
    port = int(value)
    return port if port <= MAX_PORT else DEFAULT_OLLAMA_PORT


def create_oss_provider(env: EnvironmentSnapshot) -> ProviderInfo:
    """Create the local OpenAI-compatible (Ollama) provider."""
    base_url = _first_non_blank(env, OSS_BASE_URL_ENV, LEGACY_OSS_BASE_URL_ENV)
    if base_url is None:
        base_url = f"http://localhost:{oss_port(env)}/v1"
    return create_oss_provider_with_base_url(base_url)


def create_oss_provider_with_base_url(base_url: str) -> ProviderInfo:
    """Create the local provider for an explicit base URL."""
    return ProviderInfo(
        name=PROVIDER_NAMES[PROVIDER_OSS],
        base_url=base_url,
        wire_api=WireApi.CHAT,
    )


def create_google_genai_provider(env: EnvironmentSnapshot) -> ProviderInfo:
    """Create the Google GenAI provider.

    Gemini models are served by the Generative Language API. The key is sent
    in the ``x-goog-api-key`` header.

    Environment variables:
    - ``GOOGLE_GENAI_API_KEY``: API key
    - ``GOOGLE_GENAI_BASE_URL``: optional base URL override
    """
    return ProviderInfo(
        name=PROVIDER_NAMES[PROVIDER_GOOGLE_GENAI],
        base_url=env.get_non_blank(GOOGLE_GENAI_BASE_URL_ENV) or GOOGLE_GENAI_DEFAULT_BASE_URL,
        env_key="GOOGLE_GENAI_API_KEY",
        env_key_instructions="Get your API key from https://aistudio.google.com/app/apikey",
        wire_api=WireApi.GOOGLE_GENAI,
        env_headers={"x-goog-api-key": "GOOGLE_GENAI_API_KEY"},
    )


def create_anthropic_provider(env: EnvironmentSnapshot) -> ProviderInfo:
    """Create the Anthropic provider.

    Claude models are served by the Messages API. The key is sent in the
    ``x-api-key`` header and every request carries ``anthropic-version``.

    Environment variables:
    - ``ANTHROPIC_API_KEY``: API key
    - ``ANTHROPIC_BASE_URL``: optional base URL override
    """
    return ProviderInfo(
        name=PROVIDER_NAMES[PROVIDER_ANTHROPIC],
        base_url=env.get_non_blank(ANTHROPIC_BASE_URL_ENV) or ANTHROPIC_DEFAULT_BASE_URL,
        env_key="ANTHROPIC_API_KEY",
        env_key_instructions="Get your API key from https://console.anthropic.com/settings/keys",
        wire_api=WireApi.ANTHROPIC_MESSAGES,
        static_headers={"anthropic-version": ANTHROPIC_API_VERSION},
        env_headers={"x-api-key": "ANTHROPIC_API_KEY"},
    )


def built_in_model_providers(env: EnvironmentSnapshot, version: str) -> Dict[str, ProviderInfo]:
    """Create the built-in providers.

    Args:
        env: Environment snapshot supplying deployment overrides
        version: Build version stamped on OpenAI requests

    Returns:
        Provider ID to provider definition
    """
    return {
        PROVIDER_OPENAI: create_openai_provider(env, version),
        PROVIDER_OSS: create_oss_provider(env),
        PROVIDER_GOOGLE_GENAI: create_google_genai_provider(env),
        PROVIDER_ANTHROPIC: create_anthropic_provider(env),
    }
