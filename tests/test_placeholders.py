from __future__ import annotations

from sqlcat.core.placeholders import number_placeholders, positional


def test_positional_is_one_based() -> None:
    assert positional(1) == "$1"
    assert positional(12) == "$12"


def test_number_placeholders_continues_from_existing_arguments() -> None:
    arguments: list[object] = ["a", "b"]

    condition = number_placeholders("x BETWEEN $n AND $n", arguments, [1, 2])

    assert condition == "x BETWEEN $3 AND $4"
    assert arguments == ["a", "b", 1, 2]


def test_number_placeholders_without_values_leaves_condition_alone() -> None:
    arguments: list[object] = []

    condition = number_placeholders("id = $1 OR name = $n", arguments, [])

    assert condition == "id = $1 OR name = $n"
    assert arguments == []


def test_number_placeholders_records_values_without_markers() -> None:
    arguments: list[object] = []

    condition = number_placeholders("breed = ?", arguments, ["spaniel"])

    assert condition == "breed = ?"
    assert arguments == ["spaniel"]


def test_number_placeholders_leaves_surplus_markers() -> None:
    arguments: list[object] = []

    condition = number_placeholders("a = $n AND b = $n", arguments, ["x"])

    assert condition == "a = $1 AND b = $n"
