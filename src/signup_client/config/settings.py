"""Configuration management for the signup client.

This module provides the client settings as a dataclass and applies
environment variable overrides on construction, so the same configuration
can be driven from the command line, the environment, or code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from loguru import logger

DEFAULT_SIGNUP_URL = "https://api.challenge.hennge.com/password-validation-challenge-api/001/challenge-signup"


@dataclass
class SignupConfig:
    """Complete signup client configuration."""

    # Server settings
    signup_url: str = DEFAULT_SIGNUP_URL
    timeout_seconds: Optional[float] = 30.0  # None = wait indefinitely; env and CLI accept 0 or "none"
    user_agent: str = "signup-client/1.0.0"

    # Bearer credential sources
    token: str = ""
    token_file: Optional[Path] = None

    # Logging
    log_level: str = "INFO"
    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: Path = field(default_factory=lambda: Path.home() / ".signup-client" / "signup-client.log")
    log_rotation: str = "10 MB"
    log_retention: str = "7 days"

    def __post_init__(self):
        """Apply environment variable overrides."""
        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply configuration overrides from environment variables."""
        if signup_url := os.getenv("SIGNUP_CLIENT_URL"):
            self.signup_url = signup_url

        if token := os.getenv("SIGNUP_CLIENT_TOKEN"):
            self.token = token

        if token_file := os.getenv("SIGNUP_CLIENT_TOKEN_FILE"):
            self.token_file = Path(token_file)

        if timeout := os.getenv("SIGNUP_CLIENT_TIMEOUT"):
            try:
                self.timeout_seconds = None if timeout.strip().lower() == "none" else float(timeout) or None
            except ValueError:
                logger.warning(f"Invalid timeout: {timeout}")

        if log_level := os.getenv("SIGNUP_CLIENT_LOG_LEVEL"):
            self.log_level = log_level.upper()

        if log_file := os.getenv("SIGNUP_CLIENT_LOG_FILE"):
            self.log_file_path = Path(log_file)
            self.log_to_file = True

    def validate(self) -> tuple[bool, list[str]]:
        """Validate the configuration.

        Returns:
            Tuple of (is_valid, error_messages)
        """
        errors = []

        if not self.signup_url:
            errors.append("Signup URL is required")
        elif not self.signup_url.startswith(("http://", "https://")):
            errors.append("Signup URL must start with http:// or https://")

        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            errors.append("Timeout must be positive")

        if self.log_level not in ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown log level: {self.log_level}")

        return len(errors) == 0, errors


class ConfigManager:
    """Manages signup client configuration."""

    def __init__(self):
        self._config: Optional[SignupConfig] = None

    def load_config(
        self,
        signup_url: Optional[str] = None,
        token: Optional[str] = None,
        token_file: Optional[Path] = None,
        timeout_seconds: Optional[float] = None,
        log_level: Optional[str] = None,
    ) -> SignupConfig:
        """Load configuration with optional overrides.

        Parameter overrides take precedence over environment variables,
        which take precedence over defaults.

        Returns:
            Configured SignupConfig instance
        """
        config = SignupConfig()

        if signup_url:
            config.signup_url = signup_url

        if token:
            config.token = token

        if token_file:
            config.token_file = Path(token_file)

        if timeout_seconds is not None:
            config.timeout_seconds = timeout_seconds or None  # 0 = wait indefinitely

        if log_level:
            config.log_level = log_level.upper()

        self._config = config
        return config

    def get_config(self) -> Optional[SignupConfig]:
        """Get current configuration."""
        return self._config

    def validate_config(self) -> tuple[bool, list[str]]:
        """Validate current configuration.

        Returns:
            Tuple of (is_valid, error_messages)
        """
        if not self._config:
            return False, ["No configuration loaded"]

        return self._config.validate()


# Global configuration manager instance
_config_manager = ConfigManager()


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager."""
    return _config_manager
