"""patchform core: the validator combinators and their building blocks.

This module contains the domain-agnostic pieces every form pipeline is
built from.

Usage:
    from patchform.core import (
        # Combinators
        validate,
        verify,
        keep,
        run,
        lift_validator,
        # Results
        Success,
        Failure,
        NonEmptyList,
        # Patches
        set_error,
        set_field,
        compose,
        # Constructors
        curry,
        curry_model,
        # Errors
        PatchformError,
        PatchformValidationError,
    )
"""

from __future__ import annotations

from patchform.core.curry import curry, curry_model, positional_arity
from patchform.core.errors import PACKAGE_NAME, PatchformError, PatchformValidationError
from patchform.core.factory import PluginFactory
from patchform.core.lifting import error_list, lift_validator
from patchform.core.patch import (
    Patch,
    apply_patches,
    compose,
    identity,
    set_error,
    set_field,
    set_fields,
)
from patchform.core.pipeline import FieldValidator, Pipeline, keep, run, validate, verify
from patchform.core.result import Failure, NonEmptyList, Result, Success

__all__ = [
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
    "identity",
    "set_error",
    "set_field",
    "set_fields",
    # Constructors
    "curry",
    "curry_model",
    "positional_arity",
    # Errors
    "PACKAGE_NAME",
    "PatchformError",
    "PatchformValidationError",
    # Factory
    "PluginFactory",
]
