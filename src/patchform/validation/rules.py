"""Built-in error-list validators.

Each rule has the signature::

    def rule(value) -> Success | Failure[NonEmptyList[str]]

and reports failures as a list of messages, the conventional style that
``lift_validator`` adapts into patches. Parameterized rules are factory
functions that return a rule::

    def max_length(n: int) -> ErrorListValidator:
        def check(value):
            ...
        return check

``all_of`` combines rules, collecting every message in order.
"""

from __future__ import annotations

import re
from typing import Any

from patchform.core.lifting import ErrorListValidator
from patchform.core.result import Failure, NonEmptyList, Success


def _fail(message: str) -> Failure[NonEmptyList[str]]:
    return Failure(NonEmptyList(message))


def _text(value: Any) -> str:
    return "" if value is None else str(value)


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def required(value: Any) -> Any:
    """Value must be present and not blank."""
    if not _text(value).strip():
        return _fail("This field is required")
    return Success(value)


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def max_length(n: int) -> ErrorListValidator[str, Any]:
    """String must be at most *n* characters."""

    def check(value: Any) -> Any:
        if len(_text(value)) > n:
            return _fail(f"Must be at most {n} characters")
        return Success(value)

    return check


def min_length(n: int) -> ErrorListValidator[str, Any]:
    """String must be at least *n* characters."""

    def check(value: Any) -> Any:
        if len(_text(value)) < n:
            return _fail(f"Must be at least {n} characters")
        return Success(value)

    return check


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Structure only, not deliverability
_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")


def email(value: Any) -> Any:
    """Value must look like an email address."""
    if not _EMAIL_RE.match(_text(value)):
        return _fail("Must be a valid email address")
    return Success(value)


def matches(pattern: str, message: str | None = None) -> ErrorListValidator[str, Any]:
    """Value must match the given regex pattern."""
    compiled = re.compile(pattern)

    def check(value: Any) -> Any:
        if not compiled.match(_text(value)):
            return _fail(message or f"Must match pattern: {pattern}")
        return Success(value)

    return check


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def one_of(*choices: str) -> ErrorListValidator[str, Any]:
    """Value must be one of the given choices."""
    allowed = frozenset(choices)

    def check(value: Any) -> Any:
        if value not in allowed:
            options = ", ".join(sorted(allowed))
            return _fail(f"Must be one of: {options}")
        return Success(value)

    return check


# ---------------------------------------------------------------------------
# Combination
# ---------------------------------------------------------------------------


def all_of(*validators: ErrorListValidator[Any, Any]) -> ErrorListValidator[Any, Any]:
    """Run every validator and collect all of their errors, in order.

    Validators after a failing ``required`` are skipped (no point running
    ``max_length`` on an empty string). Succeeds with the original value
    when nothing failed.
    """

    def check(value: Any) -> Any:
        errors: list[Any] = []
        for validator in validators:
            result = validator(value)
            if isinstance(result, Failure):
                errors.extend(result.error)
                if validator is required:
                    break
        if errors:
            return Failure(NonEmptyList.from_iterable(errors))
        return Success(value)

    return check
