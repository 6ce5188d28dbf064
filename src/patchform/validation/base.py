"""Bridge to ``abstract_validation_base`` validators.

``abstract_validation_base.BaseValidator`` subclasses report failures as a
``ValidationResult`` holding a list of ``ValidationError`` objects. These
helpers turn such a validator into an error-list validator, and from there
into a field validator via ``lift_validator``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from abstract_validation_base import BaseValidator, ValidationError, ValidationResult

from patchform.core.lifting import ErrorListValidator, ErrorStore, lift_validator
from patchform.core.patch import Patch
from patchform.core.result import Failure, NonEmptyList, Result, Success

F = TypeVar("F")
T = TypeVar("T")

__all__ = ["BaseValidator", "as_error_list_validator", "lift_base_validator", "result_errors"]


def result_errors(result: ValidationResult, name: str) -> NonEmptyList[ValidationError]:
    """Errors of an invalid ``ValidationResult`` in the order they were added.

    A result marked invalid without any recorded error gets one synthetic
    error naming the validator, so the failure is never lost.
    """
    if result.errors:
        return NonEmptyList.from_iterable(result.errors)
    return NonEmptyList(ValidationError(field=name, message="Validation failed"))


def as_error_list_validator(validator: BaseValidator[T]) -> ErrorListValidator[ValidationError, T]:
    """Wrap ``validator`` so it returns ``Success`` or ``Failure(NonEmptyList)``."""

    def check(value: T) -> Result[NonEmptyList[ValidationError], T]:
        result = validator.validate(value)
        if result.is_valid:
            return Success(value)
        return Failure(result_errors(result, validator.name))

    return check


def lift_base_validator(
    store: ErrorStore[ValidationError, F],
    validator: BaseValidator[Any],
) -> Callable[[Any], Result[Patch[F], Any]]:
    """Lift an ``abstract_validation_base`` validator into a field validator.

    Args:
        store: ``store(errors, form)`` records the ``ValidationError`` list.
        validator: Validator whose ``validate`` returns a ``ValidationResult``.

    Returns:
        A field validator for ``verify``.

    Example:
        class PostcodeValidator(BaseValidator[str]):
            @property
            def name(self) -> str:
                return "postcode"

            def validate(self, item: str) -> ValidationResult:
                result = ValidationResult(is_valid=True)
                if not item.isdigit():
                    result.add_error("postcode", "Digits only", item)
                return result

        field = lift_base_validator(store_postcode_errors, PostcodeValidator())
    """
    return lift_validator(store, as_error_list_validator(validator))

