from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType

import pytest
from pydantic import BaseModel, ConfigDict

from patchform import (
    DataclassFormAdapter,
    FormAdapterFactory,
    FormAdapterProtocol,
    MappingFormAdapter,
    PatchformError,
    PydanticFormAdapter,
    apply_patches,
    compose,
    set_error,
    set_field,
    set_fields,
)
from patchform.adapters import BaseFormAdapter
from tests.forms import NameForm, SignupForm


class LooseModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str = ""


@dataclass
class Counter:
    count: int = 0
    derived: int = field(default=0, init=False)


class Opaque:
    """A form type with no adapter."""


def append(tag: str):
    def patch(form: dict) -> dict:
        return {**form, "trail": [*form.get("trail", []), tag]}

    return patch


class TestSetField:
    """Test copy-with-update through adapters."""

    def test_pydantic_copy(self) -> None:
        form = NameForm(first_name="")
        patched = set_field(form, "first_name_error", "required")

        assert patched.first_name_error == "required"
        assert form.first_name_error is None

    def test_pydantic_unknown_field(self) -> None:
        with pytest.raises(PatchformError):
            set_field(NameForm(), "nickname", "x")

    def test_pydantic_extra_allow(self) -> None:
        patched = set_field(LooseModel(name="a"), "name_error", "bad")
        assert patched.name_error == "bad"

    def test_dataclass_copy(self) -> None:
        form = SignupForm(email="x")
        patched = set_field(form, "email_error", "bad")

        assert patched == SignupForm(email="x", email_error="bad")
        assert form.email_error is None

    def test_dataclass_non_init_field_rejected(self) -> None:
        with pytest.raises(PatchformError):
            set_field(Counter(), "derived", 3)

    def test_dict_copy(self) -> None:
        form = {"a": 1}
        patched = set_field(form, "b", 2)

        assert patched == {"a": 1, "b": 2}
        assert form == {"a": 1}

    def test_mapping_proxy_becomes_dict(self) -> None:
        patched = set_field(MappingProxyType({"a": 1}), "a", 2)
        assert patched == {"a": 2}
        assert isinstance(patched, dict)

    def test_unsupported_form(self) -> None:
        with pytest.raises(PatchformError) as exc_info:
            set_field(Opaque(), "x", 1)
        assert exc_info.value.context["form_type"] == "Opaque"

    def test_set_fields(self) -> None:
        patched = set_fields(NameForm(), first_name_error="a", last_name_error="b")
        assert patched.errors_dict() == {"first_name": "a", "last_name": "b"}

    def test_set_error_patch(self) -> None:
        patch = set_error("first_name_error", "required")
        assert patch({"first_name": ""}) == {"first_name": "", "first_name_error": "required"}


class TestComposition:
    """Test patch composition order."""

    def test_apply_patches_right_to_left(self) -> None:
        result = apply_patches([append("p1"), append("p2"), append("p3")], {})
        assert result["trail"] == ["p3", "p2", "p1"]

    def test_compose_matches_nested_calls(self) -> None:
        f, g = append("f"), append("g")
        assert compose(f, g)({}) == f(g({}))

    def test_compose_empty_is_identity(self) -> None:
        form = {"a": 1}
        assert compose()(form) is form

    def test_compose_single(self) -> None:
        patch = append("only")
        assert compose(patch) is patch


class TestFormAdapterFactory:
    """Test the adapter registry."""

    def test_default_types(self) -> None:
        assert FormAdapterFactory.available_types() == ["pydantic", "dataclass", "mapping"]

    def test_create_default(self) -> None:
        assert isinstance(FormAdapterFactory.create(), MappingFormAdapter)

    def test_create_unknown(self) -> None:
        with pytest.raises(ValueError):
            FormAdapterFactory.create("unknown-type")

    def test_for_form(self) -> None:
        assert isinstance(FormAdapterFactory.for_form(NameForm()), PydanticFormAdapter)
        assert isinstance(FormAdapterFactory.for_form(SignupForm()), DataclassFormAdapter)
        assert isinstance(FormAdapterFactory.for_form({}), MappingFormAdapter)

    def test_dataclass_type_not_supported(self) -> None:
        """A dataclass class object is not a form."""
        assert not DataclassFormAdapter().supports(SignupForm)

    def test_register_custom_adapter(self) -> None:
        class OpaqueAdapter(BaseFormAdapter):
            @property
            def name(self) -> str:
                return "opaque"

            def supports(self, form) -> bool:
                return isinstance(form, Opaque)

            def field_names(self, form):
                return None

            def _replace_impl(self, form, changes):
                copy = Opaque()
                copy.__dict__.update({**form.__dict__, **changes})
                return copy

        FormAdapterFactory.register("opaque", OpaqueAdapter)
        original = Opaque()
        patched = set_field(original, "error", "bad")

        assert patched.error == "bad"
        assert not hasattr(original, "error")
        assert FormAdapterFactory.available_types()[-1] == "opaque"

    def test_unregister(self) -> None:
        FormAdapterFactory.unregister("dataclass")
        assert "dataclass" not in FormAdapterFactory.available_types()

    def test_unregister_after_clear(self) -> None:
        FormAdapterFactory.clear_registry()
        FormAdapterFactory.unregister("dataclass")
        assert FormAdapterFactory.available_types() == ["pydantic", "mapping"]

    def test_unregistered_defaults_stay_removed(self) -> None:
        for name in ("pydantic", "dataclass", "mapping"):
            FormAdapterFactory.unregister(name)

        assert FormAdapterFactory.available_types() == []
        with pytest.raises(PatchformError):
            FormAdapterFactory.for_form({})

    def test_clear_registry_restores_defaults(self) -> None:
        FormAdapterFactory.unregister("mapping")
        FormAdapterFactory.clear_registry()
        assert FormAdapterFactory.available_types() == ["pydantic", "dataclass", "mapping"]

    def test_adapters_satisfy_protocol(self) -> None:
        for name in FormAdapterFactory.available_types():
            assert isinstance(FormAdapterFactory.create(name), FormAdapterProtocol)
