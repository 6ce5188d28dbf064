"""Lift error-list validators into field validators.

Most validators report failure as a list of errors. ``lift_validator``
adapts one of those to patchform: the error list is handed to a
caller-supplied store function, which records it on the form.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import partial
from typing import Any, TypeVar

from patchform.core.errors import PatchformError
from patchform.core.patch import Patch
from patchform.core.result import Failure, NonEmptyList, Result, Success

E = TypeVar("E")
F = TypeVar("F")
T = TypeVar("T")

ErrorListValidator = Callable[[Any], Result[NonEmptyList[E], T]]
ErrorStore = Callable[[list[E], F], F]


def error_list(errors: NonEmptyList[E] | Sequence[E]) -> list[E]:
    """Flatten a failure's errors into one ordered list, first error first.

    Raises:
        PatchformError: If a plain sequence of errors is empty, or is a
            string rather than a sequence of errors.
    """
    if isinstance(errors, NonEmptyList):
        return errors.to_list()
    if isinstance(errors, (str, bytes)):
        raise PatchformError(
            "invalid_error_list",
            "Expected a sequence of errors, got {type_name}",
            {"type_name": type(errors).__name__},
        )
    return NonEmptyList.from_iterable(errors).to_list()


def lift_validator(
    store: ErrorStore[E, F],
    validator: ErrorListValidator[E, T],
) -> Callable[[Any], Result[Patch[F], T]]:
    """Adapt an error-list validator into a field validator.

    Args:
        store: ``store(errors, form)`` returns ``form`` with ``errors``
            recorded; it receives every error in the order the validator
            reported them.
        validator: Returns ``Success(value)`` or ``Failure(errors)`` where
            ``errors`` is a ``NonEmptyList`` (a non-empty sequence is also
            accepted).

    Returns:
        A field validator for ``verify``. Successful values pass through
        unchanged; failures become ``partial(store, errors)``.

    Example:
        >>> def store_first_name_errors(errors, form):
        ...     return set_field(form, "first_name_error", "; ".join(errors))
        >>> field = lift_validator(store_first_name_errors, all_of(required, max_length(20)))
    """

    def field_validator(raw: Any) -> Result[Patch[F], T]:
        result = validator(raw)
        if isinstance(result, Success):
            return result
        return Failure(partial(store, error_list(result.error)))

    return field_validator
