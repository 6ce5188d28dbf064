"""Field validators.

Each function here takes the patch to use on failure and returns a field
validator for ``verify``::

    verify(
        lambda f: f.age,
        parse_with(int, set_error("age_error", "Age must be a number")),
        pipeline,
    )
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from patchform.core.patch import Patch
from patchform.core.pipeline import FieldValidator
from patchform.core.result import Failure, Success

T = TypeVar("T")


def non_empty(patch: Patch[Any]) -> FieldValidator:
    """Reject ``None``, the empty string and whitespace-only strings.

    The success value is the original string, not stripped.
    """

    def check_non_empty(value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return Failure(patch)
        return Success(value)

    return check_non_empty


def check(predicate: Callable[[Any], bool], patch: Patch[Any]) -> FieldValidator:
    """Accept the value unchanged when ``predicate`` holds."""

    def check_predicate(value: Any) -> Any:
        if predicate(value):
            return Success(value)
        return Failure(patch)

    return check_predicate


def parse_with(parser: Callable[[Any], T], patch: Patch[Any]) -> FieldValidator:
    """Convert the value with ``parser``.

    ``ValueError`` and ``TypeError`` raised by ``parser`` become the patch;
    any other exception propagates.
    """

    def check_parse(value: Any) -> Any:
        try:
            return Success(parser(value))
        except (ValueError, TypeError):
            return Failure(patch)

    return check_parse


def optional(field_validator: FieldValidator) -> FieldValidator:
    """Let ``None`` through as ``None``; validate anything else."""

    def check_optional(value: Any) -> Any:
        if value is None:
            return Success(None)
        return field_validator(value)

    return check_optional
