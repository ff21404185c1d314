"""Signup package: request models and the HTTP client for the signup endpoint."""

from .client.signup_client import SignupClient, classify_response
from .models.signup_models import (
    GENERIC_FAILURE_MESSAGE,
    PASSWORD_NOT_ALLOWED_MESSAGE,
    UNAUTHORIZED_MESSAGE,
    ApiErrorBody,
    SignupRequest,
    SubmissionResult,
    SubmissionStatus,
)

__all__ = [
    "SignupClient",
    "classify_response",
    "SignupRequest",
    "ApiErrorBody",
    "SubmissionResult",
    "SubmissionStatus",
    "GENERIC_FAILURE_MESSAGE",
    "PASSWORD_NOT_ALLOWED_MESSAGE",
    "UNAUTHORIZED_MESSAGE",
]
