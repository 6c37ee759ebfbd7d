import pytest

from core.config import (
    DEFAULT_ASSISTANT_ID,
    DEFAULT_PORT,
    ConfigurationError,
    ServerConfig,
)


def test_missing_api_key_is_fatal() -> None:
    with pytest.raises(ConfigurationError, match="VAPI_API_KEY environment variable is required"):
        ServerConfig.from_env({})


def test_blank_api_key_is_fatal() -> None:
    with pytest.raises(ConfigurationError):
        ServerConfig.from_env({"VAPI_API_KEY": "   "})


def test_defaults_apply_when_only_api_key_is_set() -> None:
    config = ServerConfig.from_env({"VAPI_API_KEY": "secret"})

    assert config.vapi_api_key == "secret"
    assert config.assistant_id == DEFAULT_ASSISTANT_ID
    assert config.port == DEFAULT_PORT == 3000
    assert config.host == "0.0.0.0"
    assert config.mcp_api_key is None
    assert config.call_url == "https://api.vapi.ai/call"


def test_overrides_are_read_from_environment() -> None:
    config = ServerConfig.from_env(
        {
            "VAPI_API_KEY": "secret",
            "ANDY": "assistant-xyz",
            "PORT": "8080",
            "HOST": "127.0.0.1",
            "MCP_API_KEY": "abc",
            "VAPI_BASE_URL": "http://localhost:9999/",
        }
    )

    assert config.assistant_id == "assistant-xyz"
    assert config.port == 8080
    assert config.host == "127.0.0.1"
    assert config.mcp_api_key == "abc"
    assert config.call_url == "http://localhost:9999/call"


def test_non_integer_port_is_fatal() -> None:
    with pytest.raises(ConfigurationError, match="PORT must be an integer"):
        ServerConfig.from_env({"VAPI_API_KEY": "secret", "PORT": "eighty"})


def test_secrets_are_kept_out_of_repr() -> None:
    config = ServerConfig(vapi_api_key="do-not-print", mcp_api_key="nor-this")

    assert "do-not-print" not in repr(config)
    assert "nor-this" not in repr(config)


def test_config_is_immutable() -> None:
    config = ServerConfig(vapi_api_key="secret")

    with pytest.raises(AttributeError):
        config.assistant_id = "other"
