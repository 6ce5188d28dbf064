"""Form models package.

Pydantic base classes and narrowed types for forms and verified shapes.
"""

from __future__ import annotations

from patchform.models.forms import FormModel, NonEmptyStr, error_message

__all__ = [
    "FormModel",
    "NonEmptyStr",
    "error_message",
]
