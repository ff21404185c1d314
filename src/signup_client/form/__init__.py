"""Registration form: state, submission controller and terminal rendering."""

from .controller import USERNAME_REQUIRED_MESSAGE, SignupSubmitter, SubmissionController
from .state import FormPhase, FormState
from .view import render_confirmation, render_form

__all__ = [
    "FormPhase",
    "FormState",
    "SignupSubmitter",
    "SubmissionController",
    "USERNAME_REQUIRED_MESSAGE",
    "render_confirmation",
    "render_form",
]
