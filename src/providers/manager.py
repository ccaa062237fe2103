"""Provider manager implementation."""
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from core.logger import LoggerService
from core.settings import Settings
from .config_loader import load_config_file, load_model_providers
from .environment import EnvironmentSnapshot
from .models import ProviderError, ProviderInfo
from .registry import built_in_model_providers


class ProviderManager:
    """Provider manager holds built-in and user-defined providers.

    User-defined providers override built-ins with the same ID and extend the
    set otherwise.
    """

    def __init__(
        self,
        logger: LoggerService,
        settings: Settings,
        env: Optional[EnvironmentSnapshot] = None,
    ) -> None:
        """Initialize provider manager.

        Args:
            logger: Logger service instance for logging operations
            settings: Application settings for configuration
            env: Environment snapshot for built-in overrides; the process
                environment at construction time if omitted
        """
        self.logger = logger.get_logger(__name__)
        self.settings = settings
        self.env = env if env is not None else EnvironmentSnapshot.from_os()
        self._providers: Dict[str, ProviderInfo] = built_in_model_providers(
            self.env, settings.VERSION
        )
        self.logger.info(
            "Registered built-in providers",
            extra={"providers": sorted(self._providers)},
        )

        if settings.PROVIDERS_CONFIG_PATH:
            self.load_from_file(settings.PROVIDERS_CONFIG_PATH)

    def load_user_providers(self, document: Mapping[str, Any]) -> List[str]:
        """Register providers from a config document.

        All entries are validated before any is registered, so a malformed
        document leaves the manager unchanged.

        Args:
            document: Parsed config document with a ``model_providers`` table

        Returns:
            IDs of the registered providers

        Raises:
            ConfigError: If the document is malformed
        """
        user_providers = load_model_providers(document)
        for provider_id in user_providers:
            if provider_id in self._providers:
                self.logger.info(
                    "Overriding provider with user definition",
                    extra={"provider_id": provider_id},
                )
        self._providers.update(user_providers)
        self.logger.info(
            "Registered user providers",
            extra={"providers": sorted(user_providers)},
        )
        return list(user_providers)

    def load_from_file(self, path: Union[str, Path]) -> List[str]:
        """Register providers from a TOML or JSON config file.

        Raises:
            ConfigError: If the file cannot be read or is malformed
        """
        self.logger.info("Loading provider config", extra={"path": str(path)})
        return self.load_user_providers(load_config_file(path))

    def get_provider(self, provider_id: str) -> ProviderInfo:
        """Get provider by ID.

        Args:
            provider_id: Provider ID

        Returns:
            Provider definition

        Raises:
            ProviderError: If the provider is unknown
        """
        provider = self._providers.get(provider_id)
        if provider is None:
            error_msg = f"Unknown provider: {provider_id}"
            self.logger.error(error_msg)
            raise ProviderError(
                code=404,
                message=error_msg,
                details={
                    "provider_id": provider_id,
                    "available": sorted(self._providers),
                },
            )
        return provider

    def list_providers(self) -> List[str]:
        """List provider IDs."""
        return sorted(self._providers)

    def providers(self) -> Dict[str, ProviderInfo]:
        """Get a copy of the provider mapping."""
        return dict(self._providers)
