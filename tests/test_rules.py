from __future__ import annotations

import pytest

from patchform import (
    Failure,
    NonEmptyList,
    Success,
    all_of,
    check,
    email,
    matches,
    max_length,
    min_length,
    non_empty,
    one_of,
    optional,
    parse_with,
    required,
    set_error,
)

PATCH = set_error("error", "bad")


class TestFieldValidators:
    """Test field validators that fail with a patch."""

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_non_empty_rejects_blank(self, value) -> None:
        assert non_empty(PATCH)(value) == Failure(PATCH)

    def test_non_empty_keeps_original(self) -> None:
        assert non_empty(PATCH)(" John ") == Success(" John ")

    def test_non_empty_accepts_non_strings(self) -> None:
        assert non_empty(PATCH)(0) == Success(0)

    def test_check(self) -> None:
        positive = check(lambda v: v > 0, PATCH)
        assert positive(3) == Success(3)
        assert positive(-1) == Failure(PATCH)

    def test_parse_with(self) -> None:
        as_int = parse_with(int, PATCH)
        assert as_int("42") == Success(42)
        assert as_int("forty-two") == Failure(PATCH)
        assert as_int(None) == Failure(PATCH)

    def test_parse_with_propagates_other_errors(self) -> None:
        def explode(value):
            raise KeyError(value)

        with pytest.raises(KeyError):
            parse_with(explode, PATCH)("x")

    def test_optional(self) -> None:
        maybe_int = optional(parse_with(int, PATCH))
        assert maybe_int(None) == Success(None)
        assert maybe_int("7") == Success(7)
        assert maybe_int("seven") == Failure(PATCH)


class TestErrorListRules:
    """Test rules that fail with a NonEmptyList of messages."""

    def test_required(self) -> None:
        assert required("x") == Success("x")
        assert required("  ") == Failure(NonEmptyList("This field is required"))
        assert required(None) == Failure(NonEmptyList("This field is required"))

    def test_lengths(self) -> None:
        assert max_length(3)("abcd").error.to_list() == ["Must be at most 3 characters"]
        assert max_length(3)("abc") == Success("abc")
        assert min_length(2)("a").error.to_list() == ["Must be at least 2 characters"]
        assert min_length(2)("ab") == Success("ab")

    def test_email(self) -> None:
        assert email("ada@example.com") == Success("ada@example.com")
        assert email("not-an-email").error.head == "Must be a valid email address"

    def test_matches(self) -> None:
        digits = matches(r"^\d+$", "Digits only")
        assert digits("123") == Success("123")
        assert digits("12a").error.to_list() == ["Digits only"]
        assert matches(r"^x")("y").error.head == "Must match pattern: ^x"

    def test_one_of(self) -> None:
        color = one_of("red", "green")
        assert color("red") == Success("red")
        assert color("blue").error.head == "Must be one of: green, red"

    def test_all_of_collects_every_error(self) -> None:
        rule = all_of(min_length(10), matches(r"^\d+$", "Digits only"))
        result = rule("abc")

        assert result.error.to_list() == ["Must be at least 10 characters", "Digits only"]

    def test_all_of_stops_after_required(self) -> None:
        rule = all_of(required, min_length(3), email)
        assert rule("").error.to_list() == ["This field is required"]

    def test_all_of_success(self) -> None:
        rule = all_of(required, max_length(10))
        assert rule("short") == Success("short")
