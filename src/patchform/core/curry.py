"""Curried constructors.

A pipeline's verified value is a function still waiting for the fields
that have not been verified yet. ``curry`` turns an ordinary constructor
into that shape: a chain of one-argument callables, one per field.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from patchform.core.errors import PatchformError, PatchformValidationError

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def positional_arity(func: Callable[..., Any]) -> int:
    """Count the required positional parameters of ``func``.

    Raises:
        PatchformError: If the signature cannot be inspected (many builtins).
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError) as e:
        raise PatchformError(
            "uninspectable_constructor",
            "Cannot inspect {name}; pass arity explicitly",
            {"name": getattr(func, "__name__", repr(func))},
        ) from e
    return sum(
        1
        for p in signature.parameters.values()
        if p.kind in _POSITIONAL_KINDS and p.default is inspect.Parameter.empty
    )


def curry(func: Callable[..., Any], arity: int | None = None) -> Callable[[Any], Any]:
    """Turn ``func`` into a chain of ``arity`` one-argument callables.

    ``curry(f)(a)(b)(c) == f(a, b, c)``. Every intermediate callable is a
    fresh closure, so a curried constructor can be shared by any number of
    pipeline runs.

    Args:
        func: Constructor taking its fields positionally.
        arity: Number of arguments to collect. Defaults to the number of
            required positional parameters of ``func``.

    Returns:
        The first callable of the chain.

    Raises:
        PatchformError: If the arity is less than 1.
    """
    if arity is None:
        arity = positional_arity(func)
    if arity < 1:
        raise PatchformError(
            "invalid_arity",
            "curry needs an arity of at least 1, got {arity} for {name}",
            {"arity": arity, "name": getattr(func, "__name__", repr(func))},
        )

    def collect(collected: tuple[Any, ...]) -> Callable[[Any], Any]:
        def step(value: Any) -> Any:
            args = (*collected, value)
            if len(args) == arity:
                return func(*args)
            return collect(args)

        return step

    return collect(())


def curry_model(model: Callable[..., Any], *field_names: str) -> Callable[[Any], Any]:
    """Curry a keyword-constructed model such as a pydantic ``BaseModel``.

    Values are collected positionally and passed as keywords named by
    ``field_names``. For pydantic models ``field_names`` defaults to the
    model's fields in declaration order.

    A ``pydantic.ValidationError`` raised by the model is re-raised as
    ``PatchformValidationError``.

    Example:
        >>> make = curry_model(VerifiedName)
        >>> make("John")("Doe")
        VerifiedName(first_name='John', last_name='Doe')
    """
    names = field_names
    if not names and isinstance(model, type) and issubclass(model, BaseModel):
        names = tuple(model.model_fields)
    if not names:
        raise PatchformError(
            "missing_field_names",
            "curry_model needs field names for {name}",
            {"name": getattr(model, "__name__", repr(model))},
        )

    def build(*values: Any) -> Any:
        try:
            return model(**dict(zip(names, values, strict=True)))
        except PydanticValidationError as e:
            raise PatchformValidationError(e, {"model": getattr(model, "__name__", "")}) from e

    return curry(build, arity=len(names))
