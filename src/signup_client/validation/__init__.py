"""Password policy validation."""

from .password_rules import MAX_LENGTH, MIN_LENGTH, PASSWORD_RULES, ValidationRule, validate_password, violated_rules

__all__ = ["MIN_LENGTH", "MAX_LENGTH", "PASSWORD_RULES", "ValidationRule", "validate_password", "violated_rules"]
