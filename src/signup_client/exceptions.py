"""Exceptions raised by the signup client library."""


class SignupClientError(Exception):
    """Base class for signup client errors."""


class TokenUnavailableError(SignupClientError):
    """No bearer token could be obtained from the configured source."""

