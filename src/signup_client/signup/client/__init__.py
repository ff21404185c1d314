"""Signup HTTP client package."""

from .signup_client import SignupClient, classify_response

__all__ = ["SignupClient", "classify_response"]
