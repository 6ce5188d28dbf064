from __future__ import annotations

import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from patchform import PatchformError, PatchformValidationError


class Strict(BaseModel):
    count: int


class TestPatchformError:
    """Test PatchformError package identification."""

    def test_package_in_context(self) -> None:
        error = PatchformError("some_type", "Something {what}", {"what": "broke"})

        assert error.context["package"] == "patchform"
        assert error.type == "some_type"
        assert error.message() == "Something broke"

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise PatchformError("x", "y")

    def test_from_pydantic_error(self) -> None:
        wrapped = PatchformError.from_pydantic_error(PydanticCustomError("t", "msg", {"k": 1}))

        assert wrapped.type == "t"
        assert wrapped.context == {"package": "patchform", "k": 1}


class TestPatchformValidationError:
    def test_wraps_pydantic_error(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            Strict(count="many")

        wrapped = PatchformValidationError(exc_info.value, {"model": "Strict"})

        assert wrapped.original_error is exc_info.value
        assert wrapped.errors()[0]["loc"] == ("count",)
        assert wrapped.context == {"package": "patchform", "model": "Strict"}
        assert "PatchformValidationError" in repr(wrapped)

    def test_wraps_plain_exception(self) -> None:
        wrapped = PatchformValidationError(RuntimeError("boom"))
        assert str(wrapped) == "boom"
        assert wrapped.errors() == []
