"""TDD: Config tests written FIRST"""
import pytest
from hazcat.config import Config


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    """Keep a developer's .env out of the tests."""
    monkeypatch.setattr("hazcat.config.load_dotenv", lambda **_: None)
    for key in ("HAZCAT_API_KEY", "HAZCAT_MODEL", "HAZCAT_BASE_URL", "HAZCAT_PROVIDER", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def test_config_from_env_success(monkeypatch):
    """Happy-path: all required env vars present."""
    monkeypatch.setenv("HAZCAT_API_KEY", "sk-test123")
    monkeypatch.setenv("HAZCAT_MODEL", "gpt-5-nano")
    monkeypatch.setenv("HAZCAT_BASE_URL", "https://gateway.example/v1")

    config = Config.from_env()

    assert config.api_key == "sk-test123"
    assert config.model == "gpt-5-nano"
    assert config.base_url == "https://gateway.example/v1"


def test_config_missing_api_key_fails(monkeypatch):
    """Missing HAZCAT_API_KEY must raise."""
    monkeypatch.setenv("HAZCAT_MODEL", "gpt-5-nano")

    with pytest.raises(ValueError, match="HAZCAT_API_KEY"):
        Config.from_env()


def test_config_missing_model_fails(monkeypatch):
    """Missing HAZCAT_MODEL must raise."""
    monkeypatch.setenv("HAZCAT_API_KEY", "sk-test123")

    with pytest.raises(ValueError, match="HAZCAT_MODEL"):
        Config.from_env()


def test_config_defaults(monkeypatch):
    """Optional fields have sensible defaults."""
    monkeypatch.setenv("HAZCAT_API_KEY", "sk-test123")
    monkeypatch.setenv("HAZCAT_MODEL", "gpt-5-nano")

    config = Config.from_env()

    assert config.base_url is None
    assert config.provider == "openai"
    assert config.log_level == "INFO"


def test_config_blank_base_url_becomes_none(monkeypatch):
    monkeypatch.setenv("HAZCAT_API_KEY", "sk-test123")
    monkeypatch.setenv("HAZCAT_MODEL", "gpt-5-nano")
    monkeypatch.setenv("HAZCAT_BASE_URL", "")

    config = Config.from_env()

    assert config.base_url is None


def test_config_provider_is_normalized(monkeypatch):
    monkeypatch.setenv("HAZCAT_API_KEY", "sk-ant-test")
    monkeypatch.setenv("HAZCAT_MODEL", "claude-sonnet-4-5")
    monkeypatch.setenv("HAZCAT_PROVIDER", " Claude ")

    config = Config.from_env()

    assert config.provider == "claude"


def test_config_unknown_provider_fails(monkeypatch):
    monkeypatch.setenv("HAZCAT_API_KEY", "sk-test123")
    monkeypatch.setenv("HAZCAT_MODEL", "gpt-5-nano")
    monkeypatch.setenv("HAZCAT_PROVIDER", "gemini")

    with pytest.raises(ValueError, match="HAZCAT_PROVIDER"):
        Config.from_env()


def test_config_immutable():
    """Frozen dataclass: attribute assignment must fail."""
    config = Config(
        api_key="sk-test123",
        model="gpt-5-nano",
        base_url=None,
        provider="openai",
        log_level="INFO",
    )

    with pytest.raises(Exception):
        config.api_key = "other"
