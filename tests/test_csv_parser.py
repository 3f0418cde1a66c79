"""Tests for row splitting/joining and comment filtering."""

from __future__ import annotations

import pytest

from csvtable.core.processor.csv_helper.csv_parser import (
    is_comment_line,
    join_row,
    parse_csv_content,
    split_lines,
    split_row,
)


def test_empty_row_yields_one_empty_field() -> None:
    assert split_row("", ",") == [""]


def test_none_row_yields_no_fields() -> None:
    assert split_row(None, ",") == []


def test_simple_split() -> None:
    assert split_row("a,b,c", ",") == ["a", "b", "c"]


def test_quoted_field_keeps_separator() -> None:
    assert split_row('a,"b,c",d', ",") == ["a", "b,c", "d"]


def test_doubled_quotes_unescape() -> None:
    assert split_row('a,"""hi""",b', ",") == ["a", '"hi"', "b"]


def test_whitespace_is_preserved() -> None:
    assert split_row(' a ," b ",c ', ",") == [" a ", " b ", "c "]


def test_empty_fields_between_separators() -> None:
    assert split_row(",,", ",") == ["", "", ""]
    assert split_row("a,", ",") == ["a", ""]


def test_empty_quoted_field() -> None:
    assert split_row('"",x', ",") == ["", "x"]


def test_quote_mid_field_is_literal() -> None:
    assert split_row('ab"c,d', ",") == ['ab"c', "d"]


def test_text_after_closing_quote_is_appended() -> None:
    assert split_row('"ab"cd,e', ",") == ["abcd", "e"]


def test_unterminated_quote_closes_at_end_of_row() -> None:
    assert split_row('a,"b,c', ",") == ["a", "b,c"]


def test_multi_character_separator() -> None:
    assert split_row('a::"b::c"::d', "::") == ["a", "b::c", "d"]


def test_tab_separator() -> None:
    assert split_row("1\t2\t\t3", "\t") == ["1", "2", "", "3"]


def test_empty_separator_never_splits() -> None:
    assert split_row("a,b", "") == ["a,b"]


def test_join_unquoted_is_verbatim() -> None:
    assert join_row(["a", "b,c", '"d'], ",") == 'a,b,c,"d'


def test_join_quoted_doubles_inner_quotes() -> None:
    # Quote mode wraps every field, not only the one holding a quote.
    # The shorter a,"""hi""",b would re-parse to the same fields.
    assert join_row(["a", '"hi"', "b"], ",", True) == '"a","""hi""","b"'


def test_join_converts_non_strings() -> None:
    assert join_row([1, 2.5, "x"], ";") == "1;2.5;x"


def test_join_no_trailing_separator() -> None:
    assert join_row(["a"], ",") == "a"
    assert join_row([], ",") == ""


@pytest.mark.parametrize(
    "fields",
    [
        ["a", "b", "c"],
        ["", "", ""],
        ["one two", " padded "],
    ],
)
def test_unquoted_round_trip_for_plain_fields(fields: list[str]) -> None:
    assert split_row(join_row(fields, ",", False), ",") == fields


@pytest.mark.parametrize("separator", [",", ";", "\t", "::"])
@pytest.mark.parametrize(
    "fields",
    [
        ["a", "b,c", "d"],
        ['"quoted"', 'in"side', '""'],
        ["", "x", ""],
        ["semi;colon", "tab\there", "colons::"],
        ["line\nbreak"],
    ],
)
def test_quoted_round_trip(separator: str, fields: list[str]) -> None:
    assert split_row(join_row(fields, separator, True), separator) == fields


def test_unquoted_join_does_not_round_trip_embedded_separator() -> None:
    fields = ["a", "b,c"]
    assert split_row(join_row(fields, ",", False), ",") == ["a", "b", "c"]


def test_comment_prefix_is_literal() -> None:
    assert is_comment_line("# note", "#")
    assert is_comment_line("//x", "//")
    assert not is_comment_line("a,#b", "#")
    assert not is_comment_line(" #indented", "#")
    assert not is_comment_line("#x", "")
    assert not is_comment_line(".*", "^.")


def test_split_lines_handles_line_endings() -> None:
    assert split_lines("a\r\nb\rc\n") == ["a", "b", "c"]
    assert split_lines("") == []
    assert split_lines("\n") == [""]


def test_split_lines_keeps_other_line_boundaries_in_fields() -> None:
    assert split_lines("a\x0bb\n\u2028c\n") == ["a\x0bb", "\u2028c"]


def test_parse_content_filters_comments_and_keeps_blank_lines() -> None:
    content = "# header comment\na,b\n\nc,#d\n#x,y\n"
    assert parse_csv_content(content, ",", "#") == [["a", "b"], [""], ["c", "#d"]]


def test_parse_content_without_comment_prefix_keeps_everything() -> None:
    assert parse_csv_content("#a,b\n", ",", "") == [["#a", "b"]]
