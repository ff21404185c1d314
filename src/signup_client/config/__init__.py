"""Configuration module for the signup client."""

from .logger_config import setup_logging
from .settings import DEFAULT_SIGNUP_URL, ConfigManager, SignupConfig, get_config_manager

__all__ = ["DEFAULT_SIGNUP_URL", "SignupConfig", "ConfigManager", "get_config_manager", "setup_logging"]
