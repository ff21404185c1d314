"""Pydantic models for signup requests and their outcomes."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

UNAUTHORIZED_MESSAGE = "Not authenticated to access this resource."
PASSWORD_NOT_ALLOWED_MESSAGE = "Sorry, the entered password is not allowed, please try a different one."
GENERIC_FAILURE_MESSAGE = "Something went wrong, please try again."


class SignupRequest(BaseModel):
    """Signup request body sent to the server."""

    model_config = ConfigDict(extra="forbid")

    username: str = Field(..., description="Username for the new account")
    password: str = Field(..., description="Password for the new account")

    def __repr__(self) -> str:
        return f"SignupRequest(username={self.username!r}, password='***')"

    __str__ = __repr__


class ApiErrorBody(BaseModel):
    """Error body returned by the signup endpoint. Only ``message`` is read."""

    model_config = ConfigDict(extra="ignore")

    message: Optional[str] = None


class SubmissionStatus(Enum):
    """Enum representing signup attempt outcomes."""

    SUCCESS = "success"
    UNAUTHORIZED = "unauthorized"  # 401/403
    SERVER_REJECTED_PASSWORD = "server_rejected_password"  # 500 with the password-not-allowed message
    GENERIC_FAILURE = "generic_failure"  # Any other non-success response
    NETWORK_ERROR = "network_error"  # Cannot reach server


class SubmissionResult(BaseModel):
    """Outcome of a single signup attempt."""

    model_config = ConfigDict(frozen=True)

    status: SubmissionStatus
    message: Optional[str] = None
    field: Optional[str] = None  # form field the message is attributed to
    http_status: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.status == SubmissionStatus.SUCCESS

    @classmethod
    def success(cls, http_status: int) -> SubmissionResult:
        return cls(status=SubmissionStatus.SUCCESS, http_status=http_status)

    @classmethod
    def unauthorized(cls, http_status: int) -> SubmissionResult:
        return cls(status=SubmissionStatus.UNAUTHORIZED, message=UNAUTHORIZED_MESSAGE, http_status=http_status)

    @classmethod
    def password_rejected(cls, http_status: int) -> SubmissionResult:
        return cls(
            status=SubmissionStatus.SERVER_REJECTED_PASSWORD,
            message=PASSWORD_NOT_ALLOWED_MESSAGE,
            field="password",
            http_status=http_status,
        )

    @classmethod
    def generic_failure(cls, http_status: Optional[int] = None) -> SubmissionResult:
        return cls(status=SubmissionStatus.GENERIC_FAILURE, message=GENERIC_FAILURE_MESSAGE, http_status=http_status)

    @classmethod
    def network_error(cls) -> SubmissionResult:
        return cls(status=SubmissionStatus.NETWORK_ERROR, message=GENERIC_FAILURE_MESSAGE)
