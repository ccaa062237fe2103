"""Dependency injection container."""
from dependency_injector import containers, providers

from core.logger import LoggerService
from core.settings import Settings
from providers.environment import EnvironmentSnapshot
from providers.manager import ProviderManager
from providers.request_factory import ProviderRequestFactory


class Container(containers.DeclarativeContainer):
    """Main application container."""

    wiring_config = containers.WiringConfiguration()

    # Settings
    settings = providers.Singleton(Settings)

    # Core services
    logger = providers.Singleton(LoggerService, settings_instance=settings)

    # Environment snapshot taken once for built-in provider overrides
    registry_environment = providers.Singleton(EnvironmentSnapshot.from_os)
    # None: the request factory reads the live process environment per request
    request_environment = providers.Object(None)

    # Provider services
    provider_manager = providers.Singleton(
        ProviderManager,
        logger=logger,
        settings=settings,
        env=registry_environment,
    )
    request_factory = providers.Singleton(
        ProviderRequestFactory,
        logger=logger,
        settings=settings,
        env=request_environment,
    )


# Global container instance
container = Container()
