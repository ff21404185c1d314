"""Tests for terminal rendering of the form."""

import click

from signup_client.form import FormState, render_confirmation, render_form
from signup_client.signup import GENERIC_FAILURE_MESSAGE, PASSWORD_NOT_ALLOWED_MESSAGE


def plain(text):
    return click.unstyle(text)


def test_labels_and_masked_password():
    output = plain(render_form(FormState(username="alice", password="Secret1234")))
    assert "Username" in output
    assert "alice" in output
    assert "Password" in output
    assert "**********" in output
    assert "Secret1234" not in output
    assert "[ Create User ]" in output


def test_busy_label():
    output = plain(render_form(FormState(username="alice", password="x", is_submitting=True)))
    assert "[ Creating... ]" in output
    assert "Create User" not in output


def test_field_errors_and_alert_region():
    state = FormState(
        username="",
        username_error="Username is required",
        validation_errors=["Password must contain at least one number"],
    )
    output = plain(render_form(state))
    assert "Username is required" in output
    assert "- Password must contain at least one number" in output
    assert "!" not in output

    output = plain(render_form(FormState(username="alice", api_error=GENERIC_FAILURE_MESSAGE)))
    assert f"! {GENERIC_FAILURE_MESSAGE}" in output


def test_password_rejection_renders_under_password():
    state = FormState(username="alice", password="Abcdefgh12", api_error=PASSWORD_NOT_ALLOWED_MESSAGE, api_error_field="password")
    output = plain(render_form(state))
    assert PASSWORD_NOT_ALLOWED_MESSAGE in output
    assert f"! {PASSWORD_NOT_ALLOWED_MESSAGE}" not in output


def test_confirmation():
    assert plain(render_confirmation()) == "User was successfully created!"
