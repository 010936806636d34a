"""Config loads from the environment on every call."""
import pytest
from sitelens.config import Config


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    monkeypatch.setattr("sitelens.config.load_dotenv", lambda **_: None)
    for name in ("API_KEY", "GEMINI_API_KEY", "GEMINI_MODEL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_config_from_env_success(monkeypatch):
    """Happy-path: key, model and level all present."""
    monkeypatch.setenv("API_KEY", "key-123")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-test")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Config.from_env()

    assert config.api_key == "key-123"
    assert config.model == "gemini-test"
    assert config.log_level == "DEBUG"


def test_config_defaults():
    """Optional fields have sensible defaults."""
    config = Config.from_env()

    assert config.model == "gemini-3-flash-preview"
    assert config.log_level == "INFO"


def test_config_missing_key_is_none_not_error():
    """A missing key is not validated up front; the call itself fails later."""
    config = Config.from_env()

    assert config.api_key is None


def test_config_blank_key_becomes_none(monkeypatch):
    monkeypatch.setenv("API_KEY", "")

    assert Config.from_env().api_key is None


def test_config_falls_back_to_gemini_api_key(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "gemini-key")

    assert Config.from_env().api_key == "gemini-key"


def test_config_api_key_wins_over_gemini_api_key(monkeypatch):
    monkeypatch.setenv("API_KEY", "primary")
    monkeypatch.setenv("GEMINI_API_KEY", "secondary")

    assert Config.from_env().api_key == "primary"


def test_config_reads_latest_key_each_time(monkeypatch):
    monkeypatch.setenv("API_KEY", "old")
    first = Config.from_env()
    monkeypatch.setenv("API_KEY", "rotated")
    second = Config.from_env()

    assert (first.api_key, second.api_key) == ("old", "rotated")


def test_config_empty_model_fails(monkeypatch):
    monkeypatch.setenv("GEMINI_MODEL", "  ")

    with pytest.raises(ValueError, match="GEMINI_MODEL"):
        Config.from_env()


def test_config_unknown_log_level_is_kept(monkeypatch):
    """LOG_LEVEL only matters to logging setup; it never blocks loading config."""
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    assert Config.from_env().log_level == "CHATTY"


def test_config_immutable():
    """Frozen dataclass: attribute assignment must fail."""
    config = Config(api_key="k", model="m", log_level="INFO")

    with pytest.raises(Exception):
        config.api_key = "other"
