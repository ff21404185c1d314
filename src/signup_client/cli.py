"""Command-line interface for the signup client.

This module provides the interactive registration form and the commands
for managing the locally stored bearer token.
"""

import sys
from pathlib import Path
from typing import Optional

import click
from loguru import logger

from . import __version__
from .config import SignupConfig, get_config_manager, setup_logging
from .credential import TokenStore, resolve_token_provider
from .form import FormState, SubmissionController, render_confirmation, render_form
from .signup import SignupClient

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _load_config(
    url: Optional[str] = None,
    token: Optional[str] = None,
    token_file: Optional[str] = None,
    timeout: Optional[float] = None,
    log_level: Optional[str] = None,
    require_token: bool = False,
) -> SignupConfig:
    """Load and validate configuration, then set up logging.

    Invalid configuration prints every error and exits with status 2.
    """
    manager = get_config_manager()
    config = manager.load_config(
        signup_url=url,
        token=token,
        token_file=Path(token_file) if token_file else None,
        timeout_seconds=timeout,
        log_level=log_level,
    )

    is_valid, errors = manager.validate_config()
    if require_token and not config.token and not TokenStore(config.token_file).has_token():
        errors.append("No bearer token configured (use --token, --token-file or SIGNUP_CLIENT_TOKEN)")
        is_valid = False

    if not is_valid:
        for error in errors:
            click.echo(f"ERROR: {error}", err=True)
        sys.exit(2)

    setup_logging(config)
    return config


def _echo_busy(state: FormState) -> None:
    if state.is_submitting:
        click.echo(render_form(state))


@click.group()
@click.version_option(version=__version__, prog_name="signup-client")
def cli() -> None:
    """signup-client - create an account on the signup endpoint."""


@cli.command()
@click.option("--url", type=str, default=None, help="Signup endpoint URL (overrides config)")
@click.option("--token", type=str, default=None, help="Bearer token (overrides config)")
@click.option("--token-file", type=click.Path(dir_okay=False), default=None, help="Path of a stored token file")
@click.option("--timeout", type=float, default=None, help="Request timeout in seconds, 0 waits indefinitely")
@click.option("--username", type=str, default=None, help="Pre-fill the username")
@click.option("--once", is_flag=True, default=False, help="Exit after the first failed attempt")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Set log level (overrides config)",
)
def signup(
    url: Optional[str],
    token: Optional[str],
    token_file: Optional[str],
    timeout: Optional[float],
    username: Optional[str],
    once: bool,
    log_level: Optional[str],
) -> None:
    """Fill in the registration form and create the account.

    A failed attempt re-renders the form, with every password rule the entry
    breaks, and asks again.
    """
    config = _load_config(url, token, token_file, timeout, log_level, require_token=True)

    client = SignupClient(
        signup_url=config.signup_url,
        token_provider=resolve_token_provider(config),
        timeout_seconds=config.timeout_seconds,
        user_agent=config.user_agent,
    )

    created: list[bool] = []
    controller = SubmissionController(client, on_success=lambda: created.append(True), on_state_change=_echo_busy)

    if username is not None:
        controller.set_username(username)

    while not created:
        entered = click.prompt("Username", default=controller.state.username, show_default=bool(controller.state.username))
        controller.set_username(entered)

        password = click.prompt("Password", default="", show_default=False, hide_input=True)
        controller.set_password(password)

        state = controller.submit()
        if created:
            break

        click.echo(render_form(state))
        if once:
            sys.exit(1)
        click.echo("")

    click.echo(render_confirmation())


@cli.command("save-token")
@click.option("--token-file", type=click.Path(dir_okay=False), default=None, help="Path of the token file")
@click.option("--token", prompt=True, hide_input=True, help="Bearer token to store")
def save_token(token_file: Optional[str], token: str) -> None:
    """Store a bearer token for later signups."""
    config = _load_config(token_file=token_file)
    store = TokenStore(config.token_file)

    if not store.store_token(token):
        click.echo("ERROR: Failed to store token", err=True)
        sys.exit(1)

    click.echo(f"Token stored in {store.token_file}")


@cli.command("clear-token")
@click.option("--token-file", type=click.Path(dir_okay=False), default=None, help="Path of the token file")
def clear_token(token_file: Optional[str]) -> None:
    """Remove the stored bearer token."""
    config = _load_config(token_file=token_file)
    store = TokenStore(config.token_file)

    if not store.remove_token():
        click.echo("ERROR: Failed to remove token", err=True)
        sys.exit(1)

    logger.debug(f"Token file cleared: {store.token_file}")
    click.echo("Token removed")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
