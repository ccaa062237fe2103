"""Provider request factory implementation."""
from typing import Optional

from httpx import Request

from core.logger import LoggerService
from core.settings import Settings
from .auth import AuthSource, resolve_auth
from .environment import EnvironmentSnapshot
from .headers import apply_http_headers
from .models import Credential, CredentialError, ProviderError, ProviderInfo
from .request_builder import RequestBuilder
from .url import get_full_url


class ProviderRequestFactory:
    """Factory for outbound provider requests."""

    def __init__(
        self,
        logger: LoggerService,
        settings: Settings,
        env: Optional[EnvironmentSnapshot] = None,
    ) -> None:
        """Initialize request factory.

        Args:
            logger: Logger service instance
            settings: Application settings
            env: Fixed environment to read keys and headers from. When None,
                the process environment is snapshotted for every request.
        """
        self.logger = logger.get_logger(__name__)
        self.settings = settings
        self._env = env

    def _environment(self) -> EnvironmentSnapshot:
        return self._env if self._env is not None else EnvironmentSnapshot.from_os()

    async def create_request_builder(
        self,
        provider: ProviderInfo,
        auth: Optional[Credential] = None,
    ) -> RequestBuilder:
        """Create a POST request builder for a provider.

        Applies, in order: credential resolution, URL construction, bearer
        auth and provider headers.

        Args:
            provider: Provider definition
            auth: Stored credential of the caller, if any

        Returns:
            Request builder with URL and headers set

        Raises:
            MissingEnvironmentVariableError: If the provider's env_key is
                unset and no stored credential can stand in
            CredentialError: If the credential cannot produce a token
        """
        env = self._environment()
        resolution = resolve_auth(
            provider,
            auth,
            env,
            strict_env_key=self.settings.STRICT_ENV_KEY,
        )
        if resolution.absorbed_error is not None:
            self.logger.warning(
                "Environment key missing, using stored credential",
                extra={
                    "provider": provider.name,
                    "env_key": resolution.absorbed_error.var,
                },
            )

        credential = resolution.credential
        url = get_full_url(provider, credential)
        builder = RequestBuilder(url)

        if credential is not None:
            builder.bearer_auth(await self._get_token(provider, credential))

        apply_http_headers(provider, builder, env)

        self.logger.debug(
            "Prepared provider request",
            extra={
                "provider": provider.name,
                "wire_api": provider.wire_api.value,
                "url": url,
                "auth_source": resolution.source.value,
                "authenticated": resolution.source != AuthSource.NONE,
            },
        )
        return builder

    async def create_request(
        self,
        provider: ProviderInfo,
        auth: Optional[Credential] = None,
    ) -> Request:
        """Create a ready-to-send POST request; see :meth:`create_request_builder`."""
        builder = await self.create_request_builder(provider, auth)
        return builder.build()

    async def _get_token(self, provider: ProviderInfo, credential: Credential) -> str:
        """Get bearer token, converting unexpected failures to CredentialError."""
        try:
            return await credential.get_token()
        except ProviderError:
            raise
        except Exception as e:
            self.logger.error(
                "Failed to obtain bearer token",
                extra={
                    "provider": provider.name,
                    "auth_mode": credential.mode.value,
                    "error": str(e),
                },
            )
            raise CredentialError(
                f"Failed to obtain bearer token: {e}",
                details={"provider": provider.name, "auth_mode": credential.mode.value},
            ) from e
