"""Provider models."""
from types import MappingProxyType
from typing import Annotated, Any, Dict, Mapping, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    Strict,
    StrictBool,
    field_serializer,
    field_validator,
)

from ..environment import EnvironmentSnapshot
from .errors import MissingEnvironmentVariableError
from .wire_api import WireApi

Count = Annotated[NonNegativeInt, Strict()]

# Table fields stored as read-only mappings
MAPPING_FIELDS = ("query_params", "static_headers", "env_headers")


class ProviderInfo(BaseModel):
    """Provider definition.

    Built-in providers are created by the registry; user-defined ones come from
    the ``model_providers`` table of a config document. Instances are frozen,
    including their header and query tables, hashable, and may be shared
    between tasks.

    Fields are validated strictly: ``"7"`` is not a retry count and ``"yes"``
    is not a boolean.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(description="Friendly display name")
    base_url: Optional[str] = Field(
        default=None,
        description="Base URL of the provider API; the protocol default is used if unset",
    )
    env_key: Optional[str] = Field(
        default=None,
        description="Environment variable that stores the API key",
    )
    env_key_instructions: Optional[str] = Field(
        default=None,
        description="Instructions for obtaining a value for env_key",
    )
    bearer_token_override: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("bearer_token_override", "experimental_bearer_token"),
        description="Explicit bearer token; takes precedence over env_key and stored logins",
    )
    wire_api: WireApi = Field(
        default=WireApi.CHAT,
        description="Wire protocol the provider expects",
    )
    query_params: Optional[Mapping[str, str]] = Field(
        default=None,
        description="Query parameters appended to every request URL",
    )
    static_headers: Optional[Mapping[str, str]] = Field(
        default=None,
        validation_alias=AliasChoices("static_headers", "http_headers"),
        description="Headers sent with every request",
    )
    env_headers: Optional[Mapping[str, str]] = Field(
        default=None,
        validation_alias=AliasChoices("env_headers", "env_http_headers"),
        description="Header name to environment variable name; skipped when unset or blank",
    )
    request_max_retries: Optional[Count] = Field(
        default=None,
        description="Maximum number of retries of a failed HTTP request",
    )
    stream_max_retries: Optional[Count] = Field(
        default=None,
        description="Maximum number of reconnects of a dropped streaming response",
    )
    stream_idle_timeout_ms: Optional[Count] = Field(
        default=None,
        description="Idle time on a stream before the connection is treated as lost",
    )
    requires_managed_auth: StrictBool = Field(
        default=False,
        validation_alias=AliasChoices("requires_managed_auth", "requires_openai_auth"),
        description="Provider takes part in the interactive login flow",
    )

    @field_validator("wire_api", mode="before")
    @classmethod
    def parse_wire_api(cls, v: Any) -> Any:
        """Parse wire protocol token, raising ConfigError when unknown."""
        if isinstance(v, str) and not isinstance(v, WireApi):
            return WireApi.parse(v)
        return v

    @field_validator(*MAPPING_FIELDS)
    @classmethod
    def freeze_mapping(cls, v: Optional[Mapping[str, str]]) -> Optional[Mapping[str, str]]:
        """Store tables as read-only mappings."""
        if v is None:
            return None
        return MappingProxyType(dict(v))

    @field_serializer(*MAPPING_FIELDS)
    def serialize_mapping(self, v: Optional[Mapping[str, str]]) -> Optional[Dict[str, str]]:
        """Serialize read-only tables as plain dictionaries."""
        if v is None:
            return None
        return dict(v)

    def __hash__(self) -> int:
        return hash(
            tuple(
                tuple(sorted(value.items())) if isinstance(value, Mapping) else value
                for value in self.__dict__.values()
            )
        )

    def api_key(self, env: Optional[EnvironmentSnapshot] = None) -> Optional[str]:
        """Get API key from the environment.

        Args:
            env: Environment to read; the process environment if omitted

        Returns:
            The key, or None when the provider declares no env_key

        Raises:
            MissingEnvironmentVariableError: If env_key is declared but its
                variable is unset or blank
        """
        if self.env_key is None:
            return None

        env = env if env is not None else EnvironmentSnapshot.from_os()
        value = env.get_non_blank(self.env_key)
        if value is None:
            raise MissingEnvironmentVariableError(
                var=self.env_key,
                instructions=self.env_key_instructions,
            )
        return value
