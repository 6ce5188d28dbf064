"""Patches: functions from a form to an annotated copy of that form.

A patch is the failure value of a field validator. Instead of reporting
"first_name is empty" in a side list, a patch returns the form with its
``first_name_error`` field set, ready to be rendered again.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from patchform.adapters.factory import FormAdapterFactory

F = TypeVar("F")

Patch = Callable[[F], F]


def set_field(form: F, name: str, value: Any) -> F:
    """Return a copy of ``form`` with field ``name`` set to ``value``.

    Args:
        form: Pydantic model, dataclass instance, or mapping.
        name: Field to overwrite.
        value: New value.

    Returns:
        A new form; ``form`` itself is not modified.

    Raises:
        PatchformError: If the form type is unsupported or has no such field.
    """
    adapter = FormAdapterFactory.for_form(form)
    return adapter.replace(form, **{name: value})  # type: ignore[no-any-return]


def set_fields(form: F, **changes: Any) -> F:
    """Return a copy of ``form`` with several fields overwritten at once."""
    adapter = FormAdapterFactory.for_form(form)
    return adapter.replace(form, **changes)  # type: ignore[no-any-return]


def set_error(name: str, message: Any) -> Patch[Any]:
    """Build a patch that stores ``message`` in field ``name``.

    Example:
        >>> patch = set_error("first_name_error", "First name cannot be empty")
        >>> patch({"first_name": ""})
        {'first_name': '', 'first_name_error': 'First name cannot be empty'}
    """

    def patch(form: Any) -> Any:
        return set_field(form, name, message)

    return patch


def identity(form: F) -> F:
    """The patch that changes nothing."""
    return form


def apply_patches(patches: Iterable[Patch[F]], form: F) -> F:
    """Apply ``patches`` to ``form`` right to left.

    The last patch runs first on the untouched form, and each earlier patch
    runs on the previous output, so ``apply_patches([p1, p2, p3], form)``
    equals ``p1(p2(p3(form)))``. When two patches write the same field the
    first one in the sequence wins.
    """
    result = form
    for patch in reversed(list(patches)):
        result = patch(result)
    return result


def compose(*patches: Patch[F]) -> Patch[F]:
    """Combine patches into one, applied right to left.

    ``compose(f, g)(form) == f(g(form))``; ``compose()`` is ``identity``.
    """
    if not patches:
        return identity
    if len(patches) == 1:
        return patches[0]

    def composed(form: F) -> F:
        return apply_patches(patches, form)

    return composed
