"""Retry and timeout policy of a provider."""
from dataclasses import dataclass
from datetime import timedelta

from .models import ProviderInfo

DEFAULT_REQUEST_MAX_RETRIES = 4
DEFAULT_STREAM_MAX_RETRIES = 5
DEFAULT_STREAM_IDLE_TIMEOUT_MS = 300_000
# Hard caps for user-configured retry counts
MAX_REQUEST_MAX_RETRIES = 100
MAX_STREAM_MAX_RETRIES = 100


def effective_request_max_retries(provider: ProviderInfo) -> int:
    """Effective maximum number of request retries for a provider."""
    retries = provider.request_max_retries
    if retries is None:
        retries = DEFAULT_REQUEST_MAX_RETRIES
    return min(retries, MAX_REQUEST_MAX_RETRIES)


def effective_stream_max_retries(provider: ProviderInfo) -> int:
    """Effective maximum number of stream reconnection attempts for a provider."""
    retries = provider.stream_max_retries
    if retries is None:
        retries = DEFAULT_STREAM_MAX_RETRIES
    return min(retries, MAX_STREAM_MAX_RETRIES)


def effective_stream_idle_timeout(provider: ProviderInfo) -> timedelta:
    """Effective idle timeout for streaming responses."""
    timeout_ms = provider.stream_idle_timeout_ms
    if timeout_ms is None:
        timeout_ms = DEFAULT_STREAM_IDLE_TIMEOUT_MS
    return timedelta(milliseconds=timeout_ms)


@dataclass(frozen=True)
class ProviderPolicy:
    """Resolved retry and timeout values of one provider."""

    request_max_retries: int
    stream_max_retries: int
    stream_idle_timeout: timedelta


def provider_policy(provider: ProviderInfo) -> ProviderPolicy:
    """Resolve all policy values of a provider at once."""
    return ProviderPolicy(
        request_max_retries=effective_request_max_retries(provider),
        stream_max_retries=effective_stream_max_retries(provider),
        stream_idle_timeout=effective_stream_idle_timeout(provider),
    )
