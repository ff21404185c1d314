"""Fixed password policy for new accounts.

Rules are evaluated in order and never short-circuit, so a form can show
every failure at once.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

MIN_LENGTH = 10
MAX_LENGTH = 24

_WHITESPACE = re.compile(r"\s")
_DIGIT = re.compile(r"[0-9]")
_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")


@dataclass(frozen=True)
class ValidationRule:
    """A single password rule. ``is_violated`` returns True when the rule fails."""

    code: str
    message: str
    is_violated: Callable[[str], bool]


PASSWORD_RULES: tuple[ValidationRule, ...] = (
    ValidationRule(
        code="too_short",
        message=f"Password must be at least {MIN_LENGTH} characters long",
        is_violated=lambda pwd: len(pwd) < MIN_LENGTH,
    ),
    ValidationRule(
        code="too_long",
        message=f"Password must be at most {MAX_LENGTH} characters long",
        is_violated=lambda pwd: len(pwd) > MAX_LENGTH,
    ),
    ValidationRule(
        code="no_spaces",
        message="Password cannot contain spaces",
        is_violated=lambda pwd: _WHITESPACE.search(pwd) is not None,
    ),
    ValidationRule(
        code="digit_required",
        message="Password must contain at least one number",
        is_violated=lambda pwd: _DIGIT.search(pwd) is None,
    ),
    ValidationRule(
        code="uppercase_required",
        message="Password must contain at least one uppercase letter",
        is_violated=lambda pwd: _UPPERCASE.search(pwd) is None,
    ),
    ValidationRule(
        code="lowercase_required",
        message="Password must contain at least one lowercase letter",
        is_violated=lambda pwd: _LOWERCASE.search(pwd) is None,
    ),
)


def violated_rules(password: str) -> list[ValidationRule]:
    """Return every rule the password fails, in policy order."""
    return [rule for rule in PASSWORD_RULES if rule.is_violated(password)]


def validate_password(password: str) -> list[str]:
    """Return the messages of every rule the password fails, in policy order.

    An empty list means the password satisfies the policy.
    """
    return [rule.message for rule in violated_rules(password)]
