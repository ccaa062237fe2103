"""Provider configuration loader.

User-defined providers live in the ``model_providers`` table of a TOML or
JSON document::

    [model_providers.azure]
    name = "Azure"
    base_url = "https://xxxxx.openai.azure.com/openai"
    env_key = "AZURE_OPENAI_API_KEY"
    wire_api = "responses"
    query_params = { api-version = "2025-04-01-preview" }
"""
import json
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from pydantic import ValidationError

from .models import ConfigError, ProviderInfo

MODEL_PROVIDERS_KEY = "model_providers"


def load_provider_info(data: Any, provider_id: str = "") -> ProviderInfo:
    """Load one provider definition.

    Args:
        data: Provider table
        provider_id: Provider ID for error details

    Returns:
        Provider definition

    Raises:
        ConfigError: If the definition is malformed
    """
    if not isinstance(data, Mapping):
        raise ConfigError(
            f"Provider definition must be a table, got {type(data).__name__}",
            details={"provider_id": provider_id},
        )

    try:
        return ProviderInfo.model_validate(dict(data))
    except ConfigError as e:
        e.details.setdefault("provider_id", provider_id)
        raise
    except ValidationError as e:
        errors = [
            {"field": ".".join(str(part) for part in error["loc"]), "error": error["msg"]}
            for error in e.errors()
        ]
        message = "Invalid provider definition"
        if provider_id:
            message = f"{message} {provider_id!r}"
        raise ConfigError(
            message,
            details={"provider_id": provider_id, "errors": errors},
        ) from e


def load_model_providers(document: Mapping[str, Any]) -> Dict[str, ProviderInfo]:
    """Load the ``model_providers`` table of a config document.

    Args:
        document: Parsed config document

    Returns:
        Provider ID to provider definition; empty when the table is absent

    Raises:
        ConfigError: If the table or one of its entries is malformed
    """
    table = document.get(MODEL_PROVIDERS_KEY)
    if table is None:
        return {}
    if not isinstance(table, Mapping):
        raise ConfigError(
            f"`{MODEL_PROVIDERS_KEY}` must be a table, got {type(table).__name__}",
        )
    return {
        str(provider_id): load_provider_info(data, str(provider_id))
        for provider_id, data in table.items()
    }


def load_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a TOML or JSON config document.

    Args:
        path: Path to a ``.toml`` or ``.json`` file

    Returns:
        Parsed document

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    config_path = Path(path)
    suffix = config_path.suffix.lower()
    if suffix not in (".toml", ".json"):
        raise ConfigError(
            f"Unsupported config file type: {config_path.name}",
            details={"path": str(config_path)},
        )

    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            f"Failed to read config file {config_path}: {e}",
            details={"path": str(config_path)},
        ) from e

    try:
        document = tomllib.loads(text) if suffix == ".toml" else json.loads(text)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        raise ConfigError(
            f"Failed to parse config file {config_path}: {e}",
            details={"path": str(config_path)},
        ) from e

    if not isinstance(document, dict):
        raise ConfigError(
            f"Config file {config_path} must contain a table",
            details={"path": str(config_path)},
        )
    return document


def dump_provider_info(provider: ProviderInfo) -> Dict[str, Any]:
    """Serialize a provider definition to a config table.

    Unset optional fields are omitted.
    """
    return provider.model_dump(mode="json", exclude_none=True)
