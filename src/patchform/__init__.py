"""patchform: form validation where errors are patches on the form itself.

A validator either produces a verified value or a function that annotates
the original form with its errors. A failed form comes back ready to
render again, every invalid field annotated, without a separate
error-to-field mapping step.

This package provides:
- The combinators: validate, verify, keep, run, lift_validator
- Patch helpers that copy pydantic models, dataclasses and mappings
- Field validators and error-list rules
- A bridge for abstract_validation_base validators
- A fluent builder and a batch service
- Pandas integration

Quick Start:
    >>> from pydantic import BaseModel
    >>> from patchform import FormModel, NonEmptyStr, curry_model, non_empty, run, validate, verify
    >>> class NameForm(FormModel):
    ...     first_name: str = ""
    ...     last_name: str = ""
    ...     first_name_error: str | None = None
    ...     last_name_error: str | None = None
    >>> class VerifiedName(BaseModel):
    ...     first_name: NonEmptyStr
    ...     last_name: NonEmptyStr
    >>> pipeline = verify(
    ...     lambda f: f.last_name,
    ...     non_empty(NameForm.error_patch("last_name", "Last name cannot be empty")),
    ...     verify(
    ...         lambda f: f.first_name,
    ...         non_empty(NameForm.error_patch("first_name", "First name cannot be empty")),
    ...         validate(curry_model(VerifiedName)),
    ...     ),
    ... )
    >>> result = run(pipeline, NameForm(first_name="John", last_name=""))
    >>> result.error.errors_dict()
    {'last_name': 'Last name cannot be empty'}

    # Same pipeline, listed top to bottom
    >>> from patchform import FormValidatorBuilder
    >>> pipeline = (
    ...     FormValidatorBuilder(VerifiedName)
    ...     .verify("first_name", non_empty(NameForm.error_patch("first_name", "...")))
    ...     .verify("last_name", non_empty(NameForm.error_patch("last_name", "...")))
    ...     .build()
    ... )
"""

from __future__ import annotations  # noqa: I001

from patchform.core import (
    PACKAGE_NAME,
    Failure,
    FieldValidator,
    NonEmptyList,
    Patch,
    PatchformError,
    PatchformValidationError,
    Pipeline,
    Result,
    Success,
    apply_patches,
    compose,
    curry,
    curry_model,
    error_list,
    keep,
    lift_validator,
    run,
    set_error,
    set_field,
    set_fields,
    validate,
    verify,
)
from patchform.adapters import (
    BaseFormAdapter,
    DataclassFormAdapter,
    FormAdapterFactory,
    MappingFormAdapter,
    PydanticFormAdapter,
)
from patchform.models import FormModel, NonEmptyStr
from patchform.pandas_ext import register_accessor, validate_records
from patchform.protocols import ErrorStoreProtocol, FormAdapterProtocol
from patchform.service import FormValidator
from patchform.validation import (
    FormValidatorBuilder,
    all_of,
    as_error_list_validator,
    check,
    email,
    field_accessor,
    lift_base_validator,
    matches,
    max_length,
    min_length,
    non_empty,
    one_of,
    optional,
    parse_with,
    required,
)

__version__ = "0.1.0"
__package_name__ = PACKAGE_NAME

__all__ = [
    # Version
    "__version__",
    # Combinators
    "validate",
    "verify",
    "keep",
    "run",
    "lift_validator",
    "error_list",
    "FieldValidator",
    "Pipeline",
    # Results
    "Success",
    "Failure",
    "Result",
    "NonEmptyList",
    # Patches
    "Patch",
    "apply_patches",
    "compose",
    "set_error",
    "set_field",
    "set_fields",
    # Constructors
    "curry",
    "curry_model",
    # Errors
    "PatchformError",
    "PatchformValidationError",
    # Adapters
    "BaseFormAdapter",
    "DataclassFormAdapter",
    "FormAdapterFactory",
    "MappingFormAdapter",
    "PydanticFormAdapter",
    # Protocols
    "ErrorStoreProtocol",
    "FormAdapterProtocol",
    # Models
    "FormModel",
    "NonEmptyStr",
    # Field validators
    "check",
    "non_empty",
    "optional",
    "parse_with",
    # Error-list rules
    "all_of",
    "email",
    "matches",
    "max_length",
    "min_length",
    "one_of",
    "required",
    # abstract_validation_base bridge
    "as_error_list_validator",
    "lift_base_validator",
    # Builder and service
    "FormValidatorBuilder",
    "FormValidator",
    "field_accessor",
    # Pandas integration
    "register_accessor",
    "validate_records",
]
