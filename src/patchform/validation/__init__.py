"""Field validators, error-list rules and the pipeline builder."""

from patchform.validation.base import (
    BaseValidator,
    as_error_list_validator,
    lift_base_validator,
    result_errors,
)
from patchform.validation.builder import FormValidatorBuilder, field_accessor
from patchform.validation.fields import check, non_empty, optional, parse_with
from patchform.validation.rules import (
    all_of,
    email,
    matches,
    max_length,
    min_length,
    one_of,
    required,
)

__all__ = [
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
    "BaseValidator",
    "as_error_list_validator",
    "lift_base_validator",
    "result_errors",
    # Builder
    "FormValidatorBuilder",
    "field_accessor",
]
