from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from patchform.core.errors import PatchformError

logger = logging.getLogger(__name__)


class BaseFormAdapter(ABC):
    """Abstract base class for form adapters.

    A form adapter knows how to derive a new form value from an existing
    one with some fields overwritten. Patches use adapters so they never
    mutate the form they are given.

    Subclasses must implement ``supports`` and ``_replace_impl``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this adapter implementation."""
        ...

    @abstractmethod
    def supports(self, form: Any) -> bool:
        """Check whether this adapter can copy ``form``."""
        ...

    @abstractmethod
    def field_names(self, form: Any) -> set[str] | None:
        """Names of the fields ``form`` accepts, or None if any name is allowed."""
        ...

    @abstractmethod
    def _replace_impl(self, form: Any, changes: dict[str, Any]) -> Any:
        """Internal implementation of copy-with-update.

        Args:
            form: Form to copy.
            changes: Field names mapped to their new values. Names have
                already been checked against ``field_names``.

        Returns:
            A new form value.
        """
        ...

    def replace(self, form: Any, **changes: Any) -> Any:
        """Return a copy of ``form`` with ``changes`` applied.

        Args:
            form: Form to copy. Left untouched.
            **changes: Field names mapped to their new values.

        Returns:
            A new form value of the same kind.

        Raises:
            PatchformError: If a name in ``changes`` is not a field of ``form``.
        """
        allowed = self.field_names(form)
        if allowed is not None:
            unknown = sorted(set(changes) - allowed)
            if unknown:
                logger.warning(
                    "Cannot set unknown field(s) %s on %s",
                    ", ".join(unknown),
                    type(form).__name__,
                )
                raise PatchformError(
                    "unknown_form_field",
                    "{form_type} has no field(s): {fields}",
                    {"form_type": type(form).__name__, "fields": ", ".join(unknown)},
                )
        return self._replace_impl(form, changes)
