"""Shared fixtures for signup client tests."""

import io
import sys
from typing import Callable, Optional
from unittest.mock import MagicMock
from urllib.error import HTTPError

import pytest
from loguru import logger

from signup_client.signup.models import SubmissionResult

ENV_VARS = [
    "SIGNUP_CLIENT_URL",
    "SIGNUP_CLIENT_TOKEN",
    "SIGNUP_CLIENT_TOKEN_FILE",
    "SIGNUP_CLIENT_TIMEOUT",
    "SIGNUP_CLIENT_LOG_LEVEL",
    "SIGNUP_CLIENT_LOG_FILE",
]

VALID_PASSWORD = "Abcdefgh12"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Isolate tests from the caller's environment and home directory."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    yield
    # CLI tests point loguru at streams that are closed afterwards
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


class FakeSubmitter:
    """Submitter returning a canned result and recording each call."""

    def __init__(self, result: Optional[SubmissionResult] = None, error: Optional[Exception] = None):
        self.result = result or SubmissionResult.success(200)
        self.error = error
        self.calls: list[tuple[str, str]] = []
        self.on_call: Optional[Callable[[], None]] = None

    def submit(self, username: str, password: str) -> SubmissionResult:
        self.calls.append((username, password))
        if self.on_call is not None:
            self.on_call()
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_submitter():
    return FakeSubmitter()


def make_response(status: int = 200, body: bytes = b"{}") -> MagicMock:
    """Build a context-manager response like the one urlopen returns."""
    response = MagicMock()
    response.status = status
    response.read.return_value = body
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response


def make_http_error(code: int, body: bytes = b"") -> HTTPError:
    return HTTPError("https://signup.test/", code, "error", {}, io.BytesIO(body))
