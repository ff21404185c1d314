"""Signup models package."""

from .signup_models import ApiErrorBody, SignupRequest, SubmissionResult, SubmissionStatus

__all__ = [
    "SignupRequest",
    "ApiErrorBody",
    "SubmissionResult",
    "SubmissionStatus",
]
