"""Signup client - password-validated registration form with remote signup."""

from .config import get_config_manager
from .form import FormState, SubmissionController

__version__ = "1.0.0"

__all__ = ["FormState", "SubmissionController", "get_config_manager"]
