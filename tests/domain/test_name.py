"""Tests for the Name value object."""

from __future__ import annotations

import pytest

from logicalcluster.domain import Name, Path


@pytest.mark.parametrize(
    ("value", "valid"),
    [
        ("root", True),
        ("ab", True),
        ("0a", True),
        ("f5865fce", True),
        ("us-west-invoices", True),
        ("a" * 63, True),
        ("a", False),
        ("", False),
        ("a" * 64, False),
        ("-root", False),
        ("root-", False),
        ("Root", False),
        ("root_1", False),
        ("root:org", False),
        ("föö", False),
        ("root\n", False),
    ],
)
def test_is_valid(value: str, valid: bool) -> None:
    """Names must be 2 to 63 lower-case alphanumerics or inner hyphens."""

    assert Name(value).is_valid() is valid


def test_name_grammar_differs_from_path_grammar() -> None:
    """Single character segments are valid paths but not valid names."""

    assert Path("a").is_valid()
    assert not Name("a").is_valid()


def test_is_empty() -> None:
    assert Name().is_empty()
    assert Name("").is_empty()
    assert not Name("root").is_empty()


def test_str_returns_value() -> None:
    assert str(Name("root")) == "root"


@pytest.mark.parametrize("value", ["root", "f5865fce", "us-west"])
def test_valid_name_round_trips_through_path(value: str) -> None:
    name = Name(value)

    assert name.path() == Path(value)
    assert name.path().name() == (name, True)


def test_path_never_validates() -> None:
    assert Name("Not_Valid:x").path() == Path("Not_Valid:x")


@pytest.mark.parametrize("value", ["", "::", "föö", "A_B", "root"])
def test_string_round_trip(value: str) -> None:
    """Construction keeps any raw string unchanged."""

    name = Name(value)

    assert str(name) == value
    assert name.value == value
    assert str(name.path()) == value
