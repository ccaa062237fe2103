"""Dependency injection setup."""
from .dependencies import Container, container


def setup_di() -> Container:
    """Setup dependency injection.

    Returns:
        Configured container

    Raises:
        RuntimeError: If provider configuration fails to load
    """
    logger = container.logger().get_logger(__name__)
    try:
        logger.info("Starting dependency injection configuration")
        container.provider_manager()
        logger.info("Dependency injection configuration completed successfully")
    except Exception as e:
        logger.error("Failed to configure dependency injection: %s" % str(e))
        cleanup_di()
        raise RuntimeError("Dependency injection configuration failed") from e
    return container


def cleanup_di() -> None:
    """Cleanup dependency injection resources.

    Singletons are dropped so that the next setup re-reads settings and the
    environment. Safe to call multiple times.
    """
    logger = container.logger().get_logger(__name__)
    logger.info("Starting dependency injection cleanup")
    container.shutdown_resources()
    container.reset_singletons()
    logger.info("Dependency injection cleanup completed successfully")
