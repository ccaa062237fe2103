"""Application settings."""
import json
from typing import Annotated, List, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

LOG_FORMATS = ("json", "text")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )
    """Application settings."""

    # Project
    PROJECT_NAME: str = "llm-provider-registry"
    VERSION: str = "0.1.0"  # Sent to OpenAI in the "version" header

    # Providers
    PROVIDERS_CONFIG_PATH: Optional[str] = None  # TOML or JSON with model_providers
    STRICT_ENV_KEY: bool = False  # Surface a missing env_key even with a stored login

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # Available formats: json, text
    LOG_EXTRA_FIELDS: Annotated[List[str], NoDecode] = []  # Additional fields for logs

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        v = v.lower()
        if v not in LOG_FORMATS:
            raise ValueError(f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}")
        return v

    @field_validator("LOG_EXTRA_FIELDS", mode="before")
    @classmethod
    def assemble_extra_fields(cls, v: Union[str, List[str]]) -> List[str]:
        """Parse extra log fields from a JSON list or a comma-separated string."""
        if isinstance(v, str):
            if v.startswith("["):
                return [str(item) for item in json.loads(v)]
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, list):
            return v
        raise ValueError(v)
