"""Tests for CSVRow and field value reinterpretation."""

from __future__ import annotations

import math

import pytest

from csvtable import CSVRow
from csvtable.core.functions.utils import to_bool, to_field, to_float, to_int


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), (" -7 ", -7), ("12abc", 12), ("3.7", 3), ("+5", 5), ("abc", 0), ("", 0)],
)
def test_to_int(text: str, expected: int) -> None:
    assert to_int(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("1.25", 1.25), ("-.5", -0.5), ("1e3", 1000.0), ("2.5kg", 2.5), ("1,5", 1.0), ("x", 0.0)],
)
def test_to_float(text: str, expected: float) -> None:
    assert to_float(text) == pytest.approx(expected)


def test_to_float_special_values() -> None:
    assert math.isinf(to_float("inf"))
    assert math.isnan(to_float("NaN"))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("true", True), ("TRUE", True), ("false", False), ("1", True),
        ("0", False), ("2.5", True), ("0.0", False), ("yes", False), ("", False),
    ],
)
def test_to_bool(text: str, expected: bool) -> None:
    assert to_bool(text) is expected


def test_to_field() -> None:
    assert to_field(True) == "true"
    assert to_field(False) == "false"
    assert to_field(3) == "3"
    assert to_field(0.5) == "0.5"
    assert to_field(None) == ""


def test_row_from_and_to_string() -> None:
    row = CSVRow.from_string('a,"b,c",3', ",")
    assert row == ["a", "b,c", "3"]
    assert row.to_string(",") == "a,b,c,3"
    assert row.to_string(",", quote=True) == '"a","b,c","3"'


def test_row_typed_access() -> None:
    row = CSVRow(["1", "2.5", "true", "text"])
    assert row.get_int(0) == 1
    assert row.get_float(1) == pytest.approx(2.5)
    assert row.get_bool(2) is True
    assert row.get_string(3) == "text"
    assert row.get_string(10) == ""
    assert row.get_int(-1) == 0


def test_row_setters_expand() -> None:
    row = CSVRow()
    row.set_int(2, 9)
    assert row == ["", "", "9"]

    row.set_bool(0, True)
    row.set_float(1, 0.25)
    assert row == ["true", "0.25", "9"]

    row.set_string(-1, "ignored")
    assert len(row) == 3


def test_row_add_insert_remove() -> None:
    row = CSVRow(["a"])
    row.add_string("b")
    row.add_int(3)
    row.insert(0, "start")
    row.insert(6, "end")
    assert row == ["start", "a", "b", "3", "", "", "end"]

    row.remove(1)
    row.remove(50)
    assert row == ["start", "b", "3", "", "", "end"]


def test_row_expand_and_trim() -> None:
    row = CSVRow([" x ", "y "])
    row.expand(1)
    assert len(row) == 2
    row.expand(3)
    row.trim()
    assert row == ["x", "y", ""]


def test_row_equality() -> None:
    assert CSVRow(["a"]) == CSVRow(["a"])
    assert CSVRow(["a"]) == ("a",)
    assert CSVRow(["a"]) != ["b"]
    assert CSVRow(["a"]) != "a"


def test_row_copy_is_independent() -> None:
    row = CSVRow(["a"])
    other = row.copy()
    other.set_string(0, "b")
    assert row.get_string(0) == "a"
