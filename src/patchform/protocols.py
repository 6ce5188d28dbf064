from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

E_contra = TypeVar("E_contra", contravariant=True)
F = TypeVar("F")


@runtime_checkable
class FormAdapterProtocol(Protocol):
    """Protocol for copy-with-update strategies.

    Implementations derive a new form value from an existing one with some
    fields overwritten, leaving the original untouched.
    """

    @property
    def name(self) -> str:
        """Name of this adapter for registry lookups and error reporting."""
        ...

    def supports(self, form: Any) -> bool:
        """Check whether this adapter can copy ``form``.

        Args:
            form: Candidate form value.

        Returns:
            True if ``replace`` can be called with this form.
        """
        ...

    def replace(self, form: Any, **changes: Any) -> Any:
        """Return a copy of ``form`` with ``changes`` applied.

        Args:
            form: Form to copy.
            **changes: Field names mapped to their new values.

        Returns:
            A new form value.
        """
        ...


@runtime_checkable
class ErrorStoreProtocol(Protocol[E_contra, F]):
    """Protocol for functions that record a list of errors onto a form.

    Used by ``lift_validator``: the store receives every error an
    error-list validator reported, in emission order, and the form to
    annotate.
    """

    def __call__(self, errors: Sequence[E_contra], form: F, /) -> F:
        """Return ``form`` with ``errors`` recorded.

        Args:
            errors: Non-empty ordered errors, first reported first.
            form: The form to annotate.

        Returns:
            A new, annotated form.
        """
        ...
