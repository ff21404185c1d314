"""Submission controller for the registration form.

The controller owns the form state and drives one submit attempt at a time:
local checks first (username, then password policy), then a single signup
request whose classified outcome is written back to the state.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from loguru import logger

from ..signup.models import SubmissionResult, SubmissionStatus
from ..validation import validate_password
from .state import FormPhase, FormState

USERNAME_REQUIRED_MESSAGE = "Username is required"


class SignupSubmitter(Protocol):
    """Sends a signup request and classifies the response."""

    def submit(self, username: str, password: str) -> SubmissionResult: ...


class SubmissionController:
    """Form controller with live password feedback and guarded submission."""

    def __init__(
        self,
        submitter: SignupSubmitter,
        on_success: Callable[[], None],
        on_state_change: Optional[Callable[[FormState], None]] = None,
    ):
        """Initialize the controller.

        Args:
            submitter: Client that performs the signup request
            on_success: Called exactly once when an account is created
            on_state_change: Called with a snapshot after every transition
        """
        self.submitter = submitter
        self.on_success = on_success
        self.on_state_change = on_state_change
        self._state = FormState()

    @property
    def state(self) -> FormState:
        return self._state

    def set_username(self, value: str) -> FormState:
        """Update the username and clear API and username errors."""
        if not self._state.is_editable:
            logger.warning("Ignoring username change while the form is not editable")
            return self._state

        self._state.username = value
        self._state.username_error = None
        self._clear_api_error()
        self._reset_failed_phase()
        self._notify()
        return self._state

    def set_password(self, value: str) -> FormState:
        """Update the password and recompute its rule violations."""
        if not self._state.is_editable:
            logger.warning("Ignoring password change while the form is not editable")
            return self._state

        self._state.password = value
        self._state.validation_errors = validate_password(value)
        self._clear_api_error()
        self._reset_failed_phase()
        self._notify()
        return self._state

    def submit(self) -> FormState:
        """Validate the form and, if it passes, send one signup request.

        Returns:
            The form state after the attempt resolves
        """
        if self._state.is_submitting:
            logger.warning("Submission already in progress, ignoring submit")
            return self._state

        if self._state.phase == FormPhase.SUCCEEDED:
            logger.warning("Account already created, ignoring submit")
            return self._state

        self._state.phase = FormPhase.VALIDATING
        self._state.username_error = None

        if not self._validate_locally():
            self._state.phase = FormPhase.FAILED
            self._notify()
            return self._state

        self._state.validation_errors = []
        self._clear_api_error()
        self._state.is_submitting = True
        self._state.phase = FormPhase.SUBMITTING

        try:
            self._notify()
            result = self.submitter.submit(self._state.username, self._state.password)
        except Exception as e:
            logger.error(f"Signup request failed: {e}")
            result = SubmissionResult.network_error()
        finally:
            self._state.is_submitting = False

        self._apply_result(result)
        self._notify()

        if result.is_success:
            try:
                self.on_success()
            except Exception:
                logger.exception("Success callback failed")

        return self._state

    def _validate_locally(self) -> bool:
        if not self._state.username.strip():
            logger.info("Submit blocked: username is empty")
            self._state.validation_errors = []
            self._clear_api_error()
            self._state.username_error = USERNAME_REQUIRED_MESSAGE
            return False

        password_errors = validate_password(self._state.password)
        if password_errors:
            logger.info(f"Submit blocked: password violates {len(password_errors)} rule(s)")
            self._state.validation_errors = password_errors
            self._clear_api_error()
            return False

        return True

    def _apply_result(self, result: SubmissionResult) -> None:
        if result.status == SubmissionStatus.SUCCESS:
            self._state.phase = FormPhase.SUCCEEDED
            return

        self._state.phase = FormPhase.FAILED
        self._state.api_error = result.message
        self._state.api_error_field = result.field

    def _clear_api_error(self) -> None:
        self._state.api_error = None
        self._state.api_error_field = None

    def _reset_failed_phase(self) -> None:
        if self._state.phase == FormPhase.FAILED:
            self._state.phase = FormPhase.IDLE

    def _notify(self) -> None:
        if self.on_state_change is None:
            return
        try:
            self.on_state_change(self._state.snapshot())
        except Exception:
            logger.exception("State change hook failed")
