"""Fluent builder for form pipelines.

Nesting ``verify`` calls by hand reads inside out. The builder lists the
steps top to bottom, in the constructor's argument order, and does the
currying at build time.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Self

from pydantic import BaseModel

from patchform.core.curry import curry, curry_model
from patchform.core.errors import PatchformError
from patchform.core.lifting import ErrorListValidator, ErrorStore, lift_validator
from patchform.core.pipeline import FieldValidator, Pipeline, keep, validate, verify

Accessor = Callable[[Any], Any]


def field_accessor(name: str) -> Accessor:
    """Accessor reading ``name`` as a key from mappings, an attribute otherwise.

    A missing field raises (``KeyError`` or ``AttributeError``) in both cases.
    """

    def access(form: Any) -> Any:
        if isinstance(form, Mapping):
            return form[name]
        return getattr(form, name)

    access.__name__ = f"field_accessor_{name}"
    return access


def _as_accessor(accessor: str | Accessor) -> Accessor:
    if isinstance(accessor, str):
        return field_accessor(accessor)
    return accessor


class FormValidatorBuilder:
    """Builder for form pipelines.

    Steps are added in the order the constructor expects its arguments.

    Example:
        >>> pipeline = (
        ...     FormValidatorBuilder(VerifiedName)
        ...     .verify("first_name", non_empty(set_error("first_name_error", "First name cannot be empty")))
        ...     .verify("last_name", non_empty(set_error("last_name_error", "Last name cannot be empty")))
        ...     .build()
        ... )
        >>> run(pipeline, NameForm(first_name="", last_name=""))
    """

    def __init__(
        self,
        constructor: Callable[..., Any],
        *,
        arity: int | None = None,
        field_names: Sequence[str] | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            constructor: Builds the verified value. Plain callables receive
                the field values positionally; pydantic models receive them
                as keywords (see ``field_names``).
            arity: Expected number of steps. Checked at build time.
            field_names: Keyword names for pydantic models, in step order.
                Defaults to the model's fields in declaration order.
        """
        self._constructor = constructor
        self._arity = arity
        self._field_names = tuple(field_names) if field_names is not None else None
        self._steps: list[tuple[Accessor, FieldValidator | None]] = []

    def verify(self, accessor: str | Accessor, field_validator: FieldValidator) -> Self:
        """Add a checked field."""
        self._steps.append((_as_accessor(accessor), field_validator))
        return self

    def keep(self, accessor: str | Accessor) -> Self:
        """Add an unchecked field."""
        self._steps.append((_as_accessor(accessor), None))
        return self

    def lift(
        self,
        accessor: str | Accessor,
        store: ErrorStore[Any, Any],
        validator: ErrorListValidator[Any, Any],
    ) -> Self:
        """Add a field checked by an error-list validator."""
        return self.verify(accessor, lift_validator(store, validator))

    @property
    def step_count(self) -> int:
        return len(self._steps)

    def _is_model(self) -> bool:
        constructor = self._constructor
        return isinstance(constructor, type) and issubclass(constructor, BaseModel)

    def _model_field_names(self) -> tuple[str, ...]:
        if self._field_names is not None:
            return self._field_names
        return tuple(self._constructor.model_fields)  # type: ignore[attr-defined]

    def _check_step_count(self) -> None:
        count = len(self._steps)
        if self._arity is not None and self._arity != count:
            raise PatchformError(
                "arity_mismatch",
                "Builder expected {arity} step(s) but has {count}",
                {"arity": self._arity, "count": count},
            )

        if self._field_names is not None or self._is_model():
            names = self._model_field_names()
            if len(names) != count:
                raise PatchformError(
                    "arity_mismatch",
                    "{name} takes {expected} field(s) but the builder has {count} step(s)",
                    {
                        "name": getattr(self._constructor, "__name__", repr(self._constructor)),
                        "expected": len(names),
                        "count": count,
                    },
                )

    def _curried_constructor(self) -> Callable[[Any], Any]:
        if self._field_names is not None or self._is_model():
            return curry_model(self._constructor, *self._model_field_names())
        return curry(self._constructor, arity=len(self._steps))

    def build(self) -> Pipeline[Any, Any]:
        """Build the pipeline.

        Raises:
            PatchformError: If the number of steps does not match the
                constructor's arity.
        """
        self._check_step_count()
        if not self._steps:
            return validate(self._constructor())

        pipeline: Pipeline[Any, Any] = validate(self._curried_constructor())
        for accessor, field_validator in self._steps:
            if field_validator is None:
                pipeline = keep(accessor, pipeline)
            else:
                pipeline = verify(accessor, field_validator, pipeline)
        return pipeline

    def reset(self) -> Self:
        """Remove every step."""
        self._steps = []
        return self
