"""Form state for the registration form."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional


class FormPhase(str, Enum):
    """Phases of a submit attempt."""

    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class FormState:
    """Field values and user-visible errors of the registration form."""

    username: str = ""
    password: str = ""
    validation_errors: list[str] = field(default_factory=list)
    api_error: Optional[str] = None
    api_error_field: Optional[str] = None  # "password" when the server rejected the password
    username_error: Optional[str] = None
    is_submitting: bool = False
    phase: FormPhase = FormPhase.IDLE

    @property
    def is_username_invalid(self) -> bool:
        return self.username_error is not None

    @property
    def is_password_invalid(self) -> bool:
        return bool(self.validation_errors) or self.api_error_field == "password"

    @property
    def is_editable(self) -> bool:
        return not self.is_submitting and self.phase != FormPhase.SUCCEEDED

    @property
    def general_error(self) -> Optional[str]:
        """API error not attributed to a field, shown in the alert region."""
        if self.api_error_field is None:
            return self.api_error
        return None

    @property
    def submit_label(self) -> str:
        return "Creating..." if self.is_submitting else "Create User"

    def snapshot(self) -> FormState:
        """Return an independent copy for observers."""
        return replace(self, validation_errors=list(self.validation_errors))

    def __repr__(self) -> str:
        return (
            f"FormState(username={self.username!r}, password='***', phase={self.phase.value}, "
            f"validation_errors={self.validation_errors!r}, api_error={self.api_error!r}, "
            f"username_error={self.username_error!r}, is_submitting={self.is_submitting})"
        )
