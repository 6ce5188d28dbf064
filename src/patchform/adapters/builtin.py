"""Form adapters for the record types patchform supports out of the box."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from patchform.adapters.base import BaseFormAdapter


class PydanticFormAdapter(BaseFormAdapter):
    """Copies pydantic models with ``model_copy(update=...)``.

    ``model_copy`` does not re-run validation, so a patch may store an error
    message on a frozen model or set a field to a value its validators would
    reject. Models configured with ``extra="allow"`` accept any field name.
    """

    @property
    def name(self) -> str:
        return "pydantic"

    def supports(self, form: Any) -> bool:
        return isinstance(form, BaseModel)

    def field_names(self, form: Any) -> set[str] | None:
        if type(form).model_config.get("extra") == "allow":
            return None
        return set(type(form).model_fields)

    def _replace_impl(self, form: Any, changes: dict[str, Any]) -> Any:
        return form.model_copy(update=changes)


class DataclassFormAdapter(BaseFormAdapter):
    """Copies dataclass instances with ``dataclasses.replace``."""

    @property
    def name(self) -> str:
        return "dataclass"

    def supports(self, form: Any) -> bool:
        return dataclasses.is_dataclass(form) and not isinstance(form, type)

    def field_names(self, form: Any) -> set[str] | None:
        # init=False fields cannot be passed to replace()
        return {f.name for f in dataclasses.fields(form) if f.init}

    def _replace_impl(self, form: Any, changes: dict[str, Any]) -> Any:
        return dataclasses.replace(form, **changes)


class MappingFormAdapter(BaseFormAdapter):
    """Copies mappings into a new ``dict``.

    Plain dicts keep their type; other mappings (``MappingProxyType``,
    pandas rows converted with ``to_dict``) come back as a ``dict``.
    Any key may be added.
    """

    @property
    def name(self) -> str:
        return "mapping"

    def supports(self, form: Any) -> bool:
        return isinstance(form, Mapping)

    def field_names(self, form: Any) -> set[str] | None:
        return None

    def _replace_impl(self, form: Any, changes: dict[str, Any]) -> Any:
        return {**form, **changes}
