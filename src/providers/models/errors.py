"""Error models for provider definitions and request preparation.

Every error raised by this package derives from :class:`ProviderError`, which
carries an HTTP-like status code, a human readable message and a details
dictionary suitable for structured logging.
"""
from typing import Any, Dict, Optional


class ProviderError(Exception):
    """Provider error with details."""

    def __init__(
        self,
        code: int,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize provider error.

        Args:
            code: Error code
            message: Error message
            details: Optional error details
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigError(ProviderError):
    """Malformed provider definition."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Initialize config error.

        Args:
            message: Error message
            details: Optional error details (failing provider id, fields)
        """
        super().__init__(code=400, message=message, details=details)


class MissingEnvironmentVariableError(ProviderError):
    """An ``env_key`` variable is unset or blank."""

    def __init__(self, var: str, instructions: Optional[str] = None) -> None:
        """Initialize missing environment variable error.

        Args:
            var: Name of the environment variable
            instructions: Optional help text for obtaining a value
        """
        self.var = var
        self.instructions = instructions
        message = f"Missing environment variable: `{var}`."
        if instructions:
            message = f"{message} {instructions}"
        super().__init__(
            code=401,
            message=message,
            details={"var": var, "instructions": instructions},
        )


class CredentialError(ProviderError):
    """Failure obtaining a bearer token from a stored credential."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Initialize credential error.

        Args:
            message: Error message
            details: Optional error details
        """
        super().__init__(code=401, message=message, details=details)
