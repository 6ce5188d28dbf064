"""Pydantic base model for forms that carry their own error fields.

A form declares one optional ``<field>_error`` companion per field it wants
to annotate:

    class NameForm(FormModel):
        first_name: str = ""
        last_name: str = ""
        first_name_error: str | None = None
        last_name_error: str | None = None

Patches built with ``error_patch`` / ``error_store`` fill the companions in
on a copy of the form.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated, Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, StringConstraints

from patchform.core.errors import PatchformError
from patchform.core.lifting import ErrorStore
from patchform.core.patch import Patch, set_field

# Verified shapes narrow raw strings to this type
NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


def error_message(error: Any) -> str:
    """Message text of an error value (``ValidationError``-like objects or plain values)."""
    message = getattr(error, "message", None)
    if message is not None:
        return str(message)
    return str(error)


class FormModel(BaseModel):
    """Immutable form with ``<field>_error`` annotation fields.

    Example:
        >>> form = NameForm(first_name="")
        >>> annotated = form.with_error("first_name", "First name cannot be empty")
        >>> annotated.errors_dict()
        {'first_name': 'First name cannot be empty'}
        >>> form.errors_dict()
        {}
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    error_suffix: ClassVar[str] = "_error"

    @classmethod
    def error_field(cls, field: str) -> str:
        """Name of the companion field holding ``field``'s error.

        Raises:
            PatchformError: If the form declares no such companion.
        """
        name = f"{field}{cls.error_suffix}"
        if name not in cls.model_fields:
            raise PatchformError(
                "missing_error_field",
                "{form_type} has no error field {name}",
                {"form_type": cls.__name__, "name": name},
            )
        return name

    def with_error(self, field: str, message: Any) -> Self:
        """Return a copy with ``field``'s error companion set to ``message``."""
        return set_field(self, self.error_field(field), message)

    def errors_dict(self) -> dict[str, Any]:
        """Map each annotated field to its error, skipping unset companions."""
        suffix = self.error_suffix
        return {
            name[: -len(suffix)]: getattr(self, name)
            for name in type(self).model_fields
            if name.endswith(suffix) and getattr(self, name) is not None
        }

    @property
    def has_errors(self) -> bool:
        return bool(self.errors_dict())

    @classmethod
    def error_patch(cls, field: str, message: Any) -> Patch[Self]:
        """Patch setting ``field``'s error to ``message``."""
        cls.error_field(field)

        def patch(form: Self) -> Self:
            return form.with_error(field, message)

        return patch

    @classmethod
    def error_store(cls, field: str, separator: str = "; ") -> ErrorStore[Any, Self]:
        """Store function for ``lift_validator``: joins every message into ``field``'s error.

        Args:
            field: Field whose error companion receives the messages.
            separator: Text placed between messages.
        """
        cls.error_field(field)

        def store(errors: Sequence[Any], form: Self) -> Self:
            return form.with_error(field, separator.join(error_message(e) for e in errors))

        return store
