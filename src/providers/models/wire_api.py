"""Wire protocol models."""
from enum import Enum

from .errors import ConfigError


class WireApi(str, Enum):
    """Wire protocol a provider speaks.

    The request and response shapes of these protocols are incompatible and
    cannot be detected at runtime, so every provider declares one.
    """

    RESPONSES = "responses"  # OpenAI Responses API at /v1/responses
    CHAT = "chat"  # Chat Completions at /v1/chat/completions
    GOOGLE_GENAI = "google_genai"  # Gemini streamGenerateContent
    ANTHROPIC_MESSAGES = "anthropic_messages"  # Anthropic /v1/messages

    @classmethod
    def parse(cls, token: str) -> "WireApi":
        """Parse a configuration token.

        Args:
            token: Lowercase protocol token

        Returns:
            Matching wire protocol

        Raises:
            ConfigError: If the token is not recognized
        """
        try:
            return cls(token)
        except ValueError:
            raise ConfigError(
                f"Unknown wire_api: {token!r}",
                details={
                    "wire_api": token,
                    "expected": [member.value for member in cls],
                },
            ) from None
