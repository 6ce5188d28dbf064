"""The validator combinators: validate, verify, keep and run.

A pipeline is a function ``form -> Result[NonEmptyList[Patch], Verified]``.
It is assembled from a base value and one step per field:

    >>> pipeline = verify(
    ...     lambda f: f.last_name,
    ...     non_empty(set_error("last_name_error", "Last name cannot be empty")),
    ...     verify(
    ...         lambda f: f.first_name,
    ...         non_empty(set_error("first_name_error", "First name cannot be empty")),
    ...         validate(curry_model(VerifiedName)),
    ...     ),
    ... )
    >>> run(pipeline, NameForm(first_name="John", last_name="Doe"))
    Success(value=VerifiedName(first_name='John', last_name='Doe'))

Steps supply the constructor's arguments in the order they are nested,
innermost first. Every step runs its field validator even after an earlier
field failed, so every failing field contributes its patch.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from patchform.core.errors import PatchformError
from patchform.core.patch import Patch, apply_patches
from patchform.core.result import Failure, NonEmptyList, Result, Success

logger = logging.getLogger(__name__)

F = TypeVar("F")
V = TypeVar("V")
R = TypeVar("R")

FieldValidator = Callable[[Any], Result[Patch[Any], Any]]
Pipeline = Callable[[F], Result[NonEmptyList[Patch[F]], V]]


def validate(value: V) -> Pipeline[Any, V]:
    """Lift ``value`` into a pipeline that always succeeds with it.

    Args:
        value: Usually a curried constructor awaiting one argument per
            field (see ``curry`` and ``curry_model``).

    Returns:
        A pipeline ignoring its form and returning ``Success(value)``.
    """

    def pipeline(form: Any) -> Result[NonEmptyList[Patch[Any]], V]:
        return Success(value)

    return pipeline


def _apply_pending(pending: Any, value: Any) -> Any:
    if not callable(pending):
        raise PatchformError(
            "constructor_exhausted",
            "Verified value {verified_type} takes no more fields; "
            "the pipeline has more steps than its constructor has arguments",
            {"verified_type": type(pending).__name__},
        )
    return pending(value)


def verify(
    accessor: Callable[[F], Any],
    field_validator: FieldValidator,
    pipeline: Pipeline[F, Callable[[Any], R]],
) -> Pipeline[F, R]:
    """Add a checked field to ``pipeline``.

    Args:
        accessor: Reads the field's raw value from the form.
        field_validator: Returns ``Success(value)`` or ``Failure(patch)``
            for the raw value.
        pipeline: Pipeline whose verified value awaits this field.

    Returns:
        A pipeline that succeeds with the pending constructor applied to
        the validated field when both this field and ``pipeline`` succeed.
        Otherwise it fails with ``pipeline``'s patches followed by this
        field's patch.
    """

    def verified(form: F) -> Result[NonEmptyList[Patch[F]], R]:
        field_result = field_validator(accessor(form))
        previous = pipeline(form)

        if isinstance(previous, Success):
            if isinstance(field_result, Success):
                return Success(_apply_pending(previous.value, field_result.value))
            return Failure(NonEmptyList(field_result.error))

        if isinstance(field_result, Failure):
            return Failure(previous.error.concat(NonEmptyList(field_result.error)))
        return previous

    return verified


def keep(
    accessor: Callable[[F], Any],
    pipeline: Pipeline[F, Callable[[Any], R]],
) -> Pipeline[F, R]:
    """Add a field to ``pipeline`` without checking it.

    The raw accessed value is passed to the constructor unchanged; this
    step never fails.
    """
    return verify(accessor, Success, pipeline)


def run(pipeline: Pipeline[F, V], form: F) -> Success[V] | Failure[F]:
    """Run ``pipeline`` against ``form``.

    Args:
        pipeline: A fully assembled pipeline.
        form: The input to validate. Never modified.

    Returns:
        ``Success(verified)`` when every field passed. Otherwise
        ``Failure(patched_form)``: ``form`` with every failing field's patch
        applied, the last declared field's patch first.
    """
    result = pipeline(form)
    if isinstance(result, Success):
        logger.debug("Form %s passed validation", type(form).__name__)
        return result

    patches = result.error
    logger.debug(
        "Form %s failed validation: %d field(s) invalid",
        type(form).__name__,
        len(patches),
    )
    return Failure(apply_patches(patches, form))
