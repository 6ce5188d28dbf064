from __future__ import annotations

import pytest
from abstract_validation_base import ValidationError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from patchform import ErrorStoreProtocol, NonEmptyStr, PatchformError
from patchform.models import error_message
from tests.forms import NameForm


class Narrowed(BaseModel):
    value: NonEmptyStr


class TestFormModel:
    """Test FormModel error companions."""

    def test_with_error_returns_copy(self) -> None:
        form = NameForm(first_name="")
        annotated = form.with_error("first_name", "required")

        assert annotated.first_name_error == "required"
        assert form.first_name_error is None

    def test_errors_dict(self) -> None:
        form = NameForm(first_name_error="a", last_name_error=None)
        assert form.errors_dict() == {"first_name": "a"}
        assert form.has_errors
        assert not NameForm().has_errors

    def test_frozen(self) -> None:
        with pytest.raises(PydanticValidationError):
            NameForm().first_name = "x"

    def test_missing_error_field(self) -> None:
        with pytest.raises(PatchformError):
            NameForm.error_patch("nickname", "x")
        with pytest.raises(PatchformError):
            NameForm.error_store("nickname")

    def test_error_patch(self) -> None:
        patch = NameForm.error_patch("last_name", "required")
        assert patch(NameForm()).last_name_error == "required"

    def test_error_store_joins_messages(self) -> None:
        store = NameForm.error_store("first_name", separator=" | ")
        errors = [ValidationError(field="first_name", message="a"), "b"]

        assert store(errors, NameForm()).first_name_error == "a | b"

    def test_error_store_satisfies_protocol(self) -> None:
        assert isinstance(NameForm.error_store("first_name"), ErrorStoreProtocol)


class TestNonEmptyStr:
    def test_rejects_empty(self) -> None:
        with pytest.raises(PydanticValidationError):
            Narrowed(value="")

    def test_accepts_text(self) -> None:
        assert Narrowed(value="x").value == "x"


def test_error_message() -> None:
    assert error_message("plain") == "plain"
    assert error_message(ValidationError(field="f", message="from object")) == "from object"
