"""Tests for configuration management and logging setup."""

from pathlib import Path

import pytest
from loguru import logger

from signup_client.config import DEFAULT_SIGNUP_URL, ConfigManager, SignupConfig, get_config_manager, setup_logging


def test_defaults():
    config = SignupConfig()
    assert config.signup_url == DEFAULT_SIGNUP_URL
    assert config.timeout_seconds == 30.0
    assert config.token == ""
    assert config.validate() == (True, [])


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SIGNUP_CLIENT_URL", "http://localhost:9000/signup")
    monkeypatch.setenv("SIGNUP_CLIENT_TOKEN", "env-token")
    monkeypatch.setenv("SIGNUP_CLIENT_TOKEN_FILE", str(tmp_path / "token.json"))
    monkeypatch.setenv("SIGNUP_CLIENT_TIMEOUT", "2.5")
    monkeypatch.setenv("SIGNUP_CLIENT_LOG_LEVEL", "debug")

    config = SignupConfig()

    assert config.signup_url == "http://localhost:9000/signup"
    assert config.token == "env-token"
    assert config.token_file == tmp_path / "token.json"
    assert config.timeout_seconds == 2.5
    assert config.log_level == "DEBUG"


def test_invalid_timeout_keeps_default(monkeypatch):
    monkeypatch.setenv("SIGNUP_CLIENT_TIMEOUT", "soon")
    assert SignupConfig().timeout_seconds == 30.0


def test_validation_errors():
    config = SignupConfig(signup_url="ftp://example.com", timeout_seconds=0, log_level="LOUD")

    is_valid, errors = config.validate()

    assert not is_valid
    assert "Signup URL must start with http:// or https://" in errors
    assert "Timeout must be positive" in errors
    assert "Unknown log level: LOUD" in errors


def test_no_timeout_is_valid():
    assert SignupConfig(timeout_seconds=None).validate() == (True, [])


@pytest.mark.parametrize("value", ["0", "none", "None"])
def test_environment_can_disable_timeout(monkeypatch, value):
    monkeypatch.setenv("SIGNUP_CLIENT_TIMEOUT", value)

    config = SignupConfig()

    assert config.timeout_seconds is None
    assert config.validate() == (True, [])


def test_zero_timeout_override_disables_timeout():
    config = ConfigManager().load_config(timeout_seconds=0)
    assert config.timeout_seconds is None


def test_manager_overrides_take_precedence(monkeypatch):
    monkeypatch.setenv("SIGNUP_CLIENT_URL", "http://env.test/signup")
    manager = ConfigManager()

    config = manager.load_config(signup_url="http://cli.test/signup", token="cli-token", timeout_seconds=3, log_level="warning")

    assert config.signup_url == "http://cli.test/signup"
    assert config.token == "cli-token"
    assert config.timeout_seconds == 3
    assert config.log_level == "WARNING"
    assert manager.get_config() is config


def test_manager_without_config_is_invalid():
    assert ConfigManager().validate_config() == (False, ["No configuration loaded"])


def test_global_manager_is_shared():
    manager = get_config_manager()
    assert manager is get_config_manager()

    config = manager.load_config(token="shared")
    assert manager.get_config() is config


def test_file_logging(tmp_path):
    log_file = tmp_path / "logs" / "signup.log"
    config = SignupConfig(log_to_console=False, log_to_file=True, log_file_path=log_file)

    setup_logging(config)
    logger.info("hello from the test")
    logger.complete()
    logger.remove()

    assert log_file.exists()
    assert "hello from the test" in Path(log_file).read_text()
