"""Tests for the provider manager."""
import pytest

from providers.environment import EnvironmentSnapshot
from providers.manager import ProviderManager
from providers.models import ConfigError, ProviderError, WireApi


@pytest.fixture
def manager(logger_service, settings, empty_env):
    return ProviderManager(logger=logger_service, settings=settings, env=empty_env)


def test_built_ins_are_registered(manager):
    assert manager.list_providers() == ["anthropic", "google_genai", "openai", "oss"]


def test_openai_version_header_from_settings(logger_service, empty_env, settings):
    settings = settings.model_copy(update={"VERSION": "9.9.9"})
    manager = ProviderManager(logger=logger_service, settings=settings, env=empty_env)

    assert manager.get_provider("openai").static_headers == {"version": "9.9.9"}


def test_environment_overrides_built_ins(logger_service, settings):
    env = EnvironmentSnapshot({"OSS_PORT": "9999"})
    manager = ProviderManager(logger=logger_service, settings=settings, env=env)

    assert manager.get_provider("oss").base_url == "http://localhost:9999/v1"


def test_unknown_provider(manager):
    with pytest.raises(ProviderError) as exc_info:
        manager.get_provider("mistral")

    assert exc_info.value.code == 404
    assert "openai" in exc_info.value.details["available"]


def test_user_providers_extend_and_override(manager):
    registered = manager.load_user_providers(
        {
            "model_providers": {
                "oss": {"name": "My Ollama", "base_url": "http://gpu:11434/v1"},
                "azure": {"name": "Azure", "wire_api": "responses"},
            }
        }
    )

    assert sorted(registered) == ["azure", "oss"]
    assert manager.get_provider("oss").name == "My Ollama"
    assert manager.get_provider("azure").wire_api is WireApi.RESPONSES
    assert "anthropic" in manager.list_providers()


def test_malformed_document_leaves_manager_unchanged(manager):
    before = manager.providers()

    with pytest.raises(ConfigError):
        manager.load_user_providers(
            {
                "model_providers": {
                    "oss": {"name": "Replaced"},
                    "broken": {"name": "Broken", "wire_api": "bogus"},
                }
            }
        )

    assert manager.providers() == before


def test_config_path_from_settings(logger_service, settings, empty_env, tmp_path):
    path = tmp_path / "providers.toml"
    path.write_text(
        '[model_providers.groq]\nname = "Groq"\nbase_url = "https://api.groq.com/openai/v1"\n',
        encoding="utf-8",
    )
    settings = settings.model_copy(update={"PROVIDERS_CONFIG_PATH": str(path)})

    manager = ProviderManager(logger=logger_service, settings=settings, env=empty_env)

    assert manager.get_provider("groq").base_url == "https://api.groq.com/openai/v1"


def test_providers_returns_copy(manager):
    manager.providers().clear()

    assert "openai" in manager.list_providers()
