"""Provider header composition."""
from .environment import EnvironmentSnapshot
from .models import ProviderInfo
from .request_builder import RequestBuilder


def apply_http_headers(
    provider: ProviderInfo,
    builder: RequestBuilder,
    env: EnvironmentSnapshot,
) -> RequestBuilder:
    """Apply provider headers onto a request builder.

    Static headers are applied first. An environment header is applied only
    when its variable is set and not blank; the untrimmed value is sent.

    Each header replaces any earlier value of the same name: an environment
    header replaces a static one, and either replaces the bearer token when
    it is named ``Authorization``.

    Args:
        provider: Provider definition
        builder: Request builder to update
        env: Environment to read header values from

    Returns:
        The updated builder
    """
    if provider.static_headers:
        for name, value in provider.static_headers.items():
            builder.header(name, value)

    if provider.env_headers:
        for name, env_var in provider.env_headers.items():
            if (value := env.get_non_blank(env_var)) is not None:
                builder.header(name, value)

    return builder
