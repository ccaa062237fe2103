"""Tests for provider definitions."""
import tomllib

import pytest
from pydantic import ValidationError

from providers.config_loader import dump_provider_info, load_provider_info
from providers.environment import EnvironmentSnapshot
from providers.models import ConfigError, MissingEnvironmentVariableError, ProviderInfo, WireApi
from providers.registry import create_google_genai_provider


def test_deserialize_ollama_provider_toml():
    """Minimal definition gets chat protocol and no managed auth."""
    provider = load_provider_info(
        tomllib.loads(
            """
name = "Ollama"
base_url = "http://localhost:11434/v1"
"""
        )
    )

    assert provider == ProviderInfo(
        name="Ollama",
        base_url="http://localhost:11434/v1",
    )
    assert provider.wire_api is WireApi.CHAT
    assert provider.requires_managed_auth is False
    assert provider.env_key is None
    assert provider.query_params is None


def test_deserialize_azure_provider_toml():
    """Query parameters with dashes in the key are kept as-is."""
    provider = load_provider_info(
        tomllib.loads(
            """
name = "Azure"
base_url = "https://xxxxx.openai.azure.com/openai"
env_key = "AZURE_OPENAI_API_KEY"
query_params = { api-version = "2025-04-01-preview" }
"""
        )
    )

    assert provider.name == "Azure"
    assert provider.env_key == "AZURE_OPENAI_API_KEY"
    assert provider.query_params == {"api-version": "2025-04-01-preview"}
    assert provider.wire_api is WireApi.CHAT


def test_deserialize_legacy_key_names():
    """Legacy key names are accepted as aliases."""
    provider = load_provider_info(
        tomllib.loads(
            """
name = "Example"
base_url = "https://example.com"
env_key = "API_KEY"
experimental_bearer_token = "secret"
requires_openai_auth = true
http_headers = { "X-Example-Header" = "example-value" }
env_http_headers = { "X-Example-Env-Header" = "EXAMPLE_ENV_VAR" }
"""
        )
    )

    assert provider.static_headers == {"X-Example-Header": "example-value"}
    assert provider.env_headers == {"X-Example-Env-Header": "EXAMPLE_ENV_VAR"}
    assert provider.bearer_token_override == "secret"
    assert provider.requires_managed_auth is True


def test_unknown_fields_are_ignored():
    """Unknown keys in a provider table do not fail loading."""
    provider = load_provider_info({"name": "x", "model": "gpt-5", "color": "blue"})

    assert provider.name == "x"
    assert not hasattr(provider, "color")


def test_unknown_wire_api_is_config_error():
    """An unrecognized wire_api never defaults silently."""
    with pytest.raises(ConfigError) as exc_info:
        load_provider_info({"name": "x", "wire_api": "grpc"}, "custom")

    assert exc_info.value.details["wire_api"] == "grpc"
    assert exc_info.value.details["provider_id"] == "custom"


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"name": "x", "request_max_retries": -1},
        {"name": "x", "query_params": ["a", "b"]},
        {"name": "x", "stream_idle_timeout_ms": "soon"},
        {"name": "x", "request_max_retries": True},
        {"name": "x", "stream_max_retries": "7"},
        {"name": "x", "stream_idle_timeout_ms": 1.0},
        {"name": "x", "requires_managed_auth": "yes"},
        {"name": "x", "static_headers": {"X-Retries": 3}},
    ],
)
def test_structurally_invalid_definitions(data):
    """Type errors surface as ConfigError with the failing fields."""
    with pytest.raises(ConfigError) as exc_info:
        load_provider_info(data, "bad")

    assert exc_info.value.details["provider_id"] == "bad"
    assert exc_info.value.details["errors"]


def test_non_table_definition():
    """A provider entry that is not a table is rejected."""
    with pytest.raises(ConfigError):
        load_provider_info("https://example.com", "bad")


def test_provider_is_frozen():
    """Definitions cannot be mutated after construction."""
    provider = ProviderInfo(name="x", wire_api=WireApi.RESPONSES)

    with pytest.raises(ValidationError):
        provider.wire_api = WireApi.CHAT


@pytest.mark.parametrize("field", ["query_params", "static_headers", "env_headers"])
def test_provider_tables_are_read_only(field):
    """Header and query tables cannot be changed through the definition."""
    provider = ProviderInfo(name="x", **{field: {"a": "1"}})

    with pytest.raises(TypeError):
        getattr(provider, field)["a"] = "2"

    assert getattr(provider, field) == {"a": "1"}


def test_input_table_is_copied():
    """Changing the source dictionary does not change the definition."""
    headers = {"X-Team": "research"}
    provider = ProviderInfo(name="x", static_headers=headers)

    headers["X-Team"] = "ops"

    assert provider.static_headers == {"X-Team": "research"}


def test_provider_is_hashable():
    """Equal definitions hash equally and can key a set."""
    first = ProviderInfo(name="x", static_headers={"a": "1", "b": "2"})
    second = ProviderInfo(name="x", static_headers={"b": "2", "a": "1"})

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_google_genai_round_trip():
    """Serializing and loading a built-in yields an equal definition."""
    provider = create_google_genai_provider(EnvironmentSnapshot({}))

    document = dump_provider_info(provider)

    assert document["wire_api"] == "google_genai"
    assert type(document["env_headers"]) is dict
    assert "bearer_token_override" not in document
    assert load_provider_info(document) == provider


class TestApiKey:
    """Tests for reading the API key from the environment."""

    def test_no_env_key(self):
        """Providers without env_key have no key and no error."""
        provider = ProviderInfo(name="x")

        assert provider.api_key(EnvironmentSnapshot({})) is None

    def test_missing_variable(self):
        """An unset env_key variable is an error carrying its name."""
        provider = ProviderInfo(name="x", env_key="X")

        with pytest.raises(MissingEnvironmentVariableError) as exc_info:
            provider.api_key(EnvironmentSnapshot({}))

        assert exc_info.value.var == "X"
        assert exc_info.value.instructions is None

    def test_blank_variable(self):
        """Whitespace-only values count as missing."""
        provider = ProviderInfo(
            name="x",
            env_key="X",
            env_key_instructions="Create a key at https://example.com/keys",
        )

        with pytest.raises(MissingEnvironmentVariableError) as exc_info:
            provider.api_key(EnvironmentSnapshot({"X": " \t "}))

        assert exc_info.value.instructions == "Create a key at https://example.com/keys"
        assert "https://example.com/keys" in exc_info.value.message

    def test_present_variable(self):
        """The value is returned untrimmed."""
        provider = ProviderInfo(name="x", env_key="X")

        assert provider.api_key(EnvironmentSnapshot({"X": " sk-123"})) == " sk-123"

    def test_reads_process_environment_by_default(self, monkeypatch):
        """Without a snapshot the process environment is used."""
        monkeypatch.setenv("PROVIDER_TEST_KEY", "sk-env")
        provider = ProviderInfo(name="x", env_key="PROVIDER_TEST_KEY")

        assert provider.api_key() == "sk-env"
