"""Terminal rendering of the registration form."""

from __future__ import annotations

import click

from .state import FormState

CONFIRMATION_MESSAGE = "User was successfully created!"


def _error(text: str) -> str:
    return click.style(text, fg="red")


def render_form(state: FormState) -> str:
    """Render the form as terminal text.

    Field errors sit under their field, API errors not tied to a field go to
    the alert region, and the submit control reflects the busy state.
    """
    lines = [click.style("Username", bold=True), f"  {state.username}"]
    if state.is_username_invalid:
        lines.append(f"  {_error(state.username_error)}")

    lines.append(click.style("Password", bold=True))
    lines.append(f"  {'*' * len(state.password)}")
    for message in state.validation_errors:
        lines.append(f"  - {_error(message)}")
    if state.api_error_field == "password" and state.api_error:
        lines.append(f"  {_error(state.api_error)}")

    if state.general_error:
        lines.append("")
        lines.append(click.style(f"! {state.general_error}", fg="red", bold=True))

    lines.append("")
    button = f"[ {state.submit_label} ]"
    lines.append(click.style(button, dim=True) if state.is_submitting else click.style(button, fg="blue", bold=True))

    return "\n".join(lines)


def render_confirmation() -> str:
    """Render the view that replaces the form after a successful signup."""
    return click.style(CONFIRMATION_MESSAGE, fg="green", bold=True)
