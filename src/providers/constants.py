"""Provider constants and configuration."""
from typing import Dict, List

# Built-in provider IDs
PROVIDER_OPENAI = "openai"
PROVIDER_OSS = "oss"
PROVIDER_GOOGLE_GENAI = "google_genai"
PROVIDER_ANTHROPIC = "anthropic"

# Provider names for display
PROVIDER_NAMES: Dict[str, str] = {
    PROVIDER_OPENAI: "OpenAI",
    PROVIDER_OSS: "gpt-oss",
    PROVIDER_GOOGLE_GENAI: "Google GenAI",
    PROVIDER_ANTHROPIC: "Anthropic",
}

BUILT_IN_PROVIDERS: List[str] = [
    PROVIDER_OPENAI,
    PROVIDER_OSS,
    PROVIDER_GOOGLE_GENAI,
    PROVIDER_ANTHROPIC,
]

# Environment overrides read when the built-in registry is created
OPENAI_BASE_URL_ENV = "OPENAI_BASE_URL"
OSS_BASE_URL_ENV = "OSS_BASE_URL"
OSS_PORT_ENV = "OSS_PORT"
# Older deployments export these names; read when the current ones are unset
LEGACY_OSS_BASE_URL_ENV = "CODEX_OSS_BASE_URL"
LEGACY_OSS_PORT_ENV = "CODEX_OSS_PORT"
GOOGLE_GENAI_BASE_URL_ENV = "GOOGLE_GENAI_BASE_URL"
ANTHROPIC_BASE_URL_ENV = "ANTHROPIC_BASE_URL"

DEFAULT_OLLAMA_PORT = 11434
MAX_PORT = 65535
GOOGLE_GENAI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com/v1"
ANTHROPIC_API_VERSION = "2023-06-01"
