"""Error classes with package identification.

Validation failures are never raised: they travel through pipelines as
patches. These classes cover consumer contract violations only (a
constructor applied with the wrong arity, a form type nothing can copy,
an empty error list).
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "patchform"


class PatchformError(PydanticCustomError):
    """Pydantic custom error tagged with the patchform package.

    Args:
        error_type: Type/category of the error.
        message_template: Error message (can include {placeholders}).
        context: Additional context dict merged into error context.
    """

    def __new__(
        cls,
        error_type: str,
        message_template: str,
        context: dict[str, Any] | None = None,
    ) -> PatchformError:
        ctx = {"package": PACKAGE_NAME, **(context or {})}
        return super().__new__(cls, error_type, message_template, ctx)

    @classmethod
    def from_pydantic_error(cls, error: PydanticCustomError) -> PatchformError:
        """Wrap a PydanticCustomError as PatchformError."""
        return cls(
            error.type,
            error.message_template,
            error.context,
        )


class PatchformValidationError(Exception):
    """Wraps a pydantic.ValidationError raised while building a verified value.

    Pipelines that construct pydantic models can still hit model-level
    validation (a constraint the field validators did not cover). The
    original error stays reachable through ``original_error`` and
    ``errors()``.
    """

    def __init__(self, validation_error: Exception, context: dict | None = None):
        from pydantic import ValidationError as PydanticValidationError

        self.original_error = validation_error
        self.context = {"package": PACKAGE_NAME, **(context or {})}

        if isinstance(validation_error, PydanticValidationError):
            self.errors_list = validation_error.errors()
            error_messages = "; ".join(e.get("msg", str(e)) for e in self.errors_list)
        else:
            self.errors_list = []
            error_messages = str(validation_error)

        super().__init__(error_messages)

    def errors(self) -> list:
        """Get the list of validation errors."""
        return self.errors_list

    def __repr__(self) -> str:
        return f"PatchformValidationError({self.original_error!r}, context={self.context})"
