"""Request URL construction."""
from typing import Optional, assert_never

from .models import AuthMode, Credential, ProviderInfo, WireApi

OPENAI_API_BASE_URL = "https://api.openai.com/v1"
MANAGED_LOGIN_BASE_URL = "https://chatgpt.com/backend-api/codex"

# Host fragments of Azure OpenAI style deployments
AZURE_MARKERS = (
    "openai.azure.",
    "cognitiveservices.azure.",
    "aoai.azure.",
    "azure-api.",
    "azurefd.",
)


def get_query_string(provider: ProviderInfo) -> str:
    """Serialize query parameters.

    Values are joined as-is without URL encoding; callers must pre-encode
    values that need it.

    Args:
        provider: Provider definition

    Returns:
        ``?k=v&k2=v2``, or an empty string when no parameters are declared
    """
    if provider.query_params is None:
        return ""
    params = "&".join(f"{k}={v}" for k, v in provider.query_params.items())
    return f"?{params}"


def default_base_url(credential: Optional[Credential]) -> str:
    """Get base URL used when a provider declares none."""
    if credential is not None and credential.mode == AuthMode.MANAGED_LOGIN:
        return MANAGED_LOGIN_BASE_URL
    return OPENAI_API_BASE_URL


def get_full_url(provider: ProviderInfo, credential: Optional[Credential] = None) -> str:
    """Build the absolute request URL for a provider.

    Args:
        provider: Provider definition
        credential: Credential the request will be sent with; selects the
            default host when the provider has no base_url

    Returns:
        Request URL including the protocol path and the query string.
        For Google GenAI the ``{model}`` placeholder is left in place.
    """
    base_url = (
        provider.base_url
        if provider.base_url is not None
        else default_base_url(credential)
    )
    query_string = get_query_string(provider)

    match provider.wire_api:
        case WireApi.RESPONSES:
            path = "/responses"
        case WireApi.CHAT:
            path = "/chat/completions"
        case WireApi.GOOGLE_GENAI:
            path = "/models/{model}:streamGenerateContent"
        case WireApi.ANTHROPIC_MESSAGES:
            path = "/messages"
        case _:
            assert_never(provider.wire_api)

    return f"{base_url}{path}{query_string}"


def matches_azure_base_url(base_url: str) -> bool:
    """Check whether a base URL looks like an Azure OpenAI deployment."""
    base = base_url.lower()
    return any(marker in base for marker in AZURE_MARKERS)


def is_azure_responses_endpoint(provider: ProviderInfo) -> bool:
    """Check whether a Responses provider points at Azure.

    This is a naming heuristic for request shaping only and must not be used
    for security decisions.

    Args:
        provider: Provider definition

    Returns:
        bool: True for Azure Responses endpoints
    """
    if provider.wire_api != WireApi.RESPONSES:
        return False

    if provider.name.lower() == "azure":
        return True

    return provider.base_url is not None and matches_azure_base_url(provider.base_url)
