"""Signup client for account creation on the remote signup endpoint."""

from __future__ import annotations

import json
from http.client import HTTPException
from typing import Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from loguru import logger
from pydantic import ValidationError

from ...credential import TokenProvider
from ..models import ApiErrorBody, SignupRequest, SubmissionResult
from ..models.signup_models import PASSWORD_NOT_ALLOWED_MESSAGE


def classify_response(status: int, body: Optional[bytes]) -> SubmissionResult:
    """Map an HTTP status and raw response body to a submission result.

    Only a 500 whose JSON body carries the exact password-not-allowed message
    is attributed to the password field. Unparsable bodies fall through to the
    generic failure.
    """
    if 200 <= status < 300:
        return SubmissionResult.success(status)

    if status in (401, 403):
        return SubmissionResult.unauthorized(status)

    if status == 500:
        error_body = _parse_error_body(body)
        if error_body is not None and error_body.message == PASSWORD_NOT_ALLOWED_MESSAGE:
            return SubmissionResult.password_rejected(status)

    return SubmissionResult.generic_failure(status)


def _parse_error_body(body: Optional[bytes]) -> Optional[ApiErrorBody]:
    if not body:
        return None
    try:
        return ApiErrorBody.model_validate(json.loads(body.decode("utf-8")))
    except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        logger.debug(f"Unparsable error body: {e}")
        return None


class SignupClient:
    """Client for creating accounts on the signup endpoint."""

    def __init__(
        self,
        signup_url: str,
        token_provider: TokenProvider,
        timeout_seconds: Optional[float] = 30.0,
        user_agent: str = "signup-client/1.0.0",
    ):
        """Initialize signup client.

        Args:
            signup_url: Full URL of the signup endpoint
            token_provider: Source of the bearer credential
            timeout_seconds: Request timeout, None waits indefinitely
            user_agent: User-Agent header value
        """
        self.signup_url = signup_url
        self.token_provider = token_provider
        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent

    def submit(self, username: str, password: str) -> SubmissionResult:
        """Send one signup request and classify the response.

        HTTP and transport errors are returned as results, never raised.
        Errors raised by the token provider propagate to the caller.
        """
        request = SignupRequest(username=username, password=password)
        token = self.token_provider.get_token()

        logger.info(f"Submitting signup for user: {username}")

        result = self._send_signup_request(request, token)

        if result.is_success:
            logger.info(f"Signup succeeded for user: {username}")
        else:
            logger.warning(f"Signup failed for user {username}: {result.status.value} (HTTP {result.http_status})")

        return result

    def _send_signup_request(self, request: SignupRequest, token: str) -> SubmissionResult:
        payload = json.dumps(request.model_dump())

        req = Request(
            self.signup_url,
            data=payload.encode("utf-8"),
            method="POST",
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {token}",
                "User-Agent": self.user_agent,
            },
        )

        try:
            with urlopen(req, timeout=self.timeout_seconds) as response:
                return classify_response(response.status, response.read())

        except HTTPError as e:
            try:
                body = e.read()
            except OSError:
                body = None
            return classify_response(e.code, body)

        except URLError as e:
            logger.error(f"Network error: {e.reason}")
            return SubmissionResult.network_error()

        except (HTTPException, OSError) as e:
            logger.error(f"Transport error: {e}")
            return SubmissionResult.network_error()
