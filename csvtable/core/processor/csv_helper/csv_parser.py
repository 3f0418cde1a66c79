# csvtable/core/processor/csv_helper/csv_parser.py
"""
CSV Parser - Row Splitting and Joining

Converts a single line of delimited text into fields and back.

================================================================================
PARSER ARCHITECTURE
================================================================================

Read path:
    parse_csv_content(content, separator, comment_prefix)
    ├─ split_lines()           - one row per line
    ├─ is_comment_line()       - literal comment prefix match
    └─ split_row()             - two-state automaton per line

Write path:
    join_row(fields, separator, quote)
    ├─ quote=False  - verbatim join
    └─ quote=True   - wrap every field, double inner quotes

================================================================================
SPLIT STATE MACHINE
================================================================================

            first char of field is '"'
  UNQUOTED ─────────────────────────────► QUOTED
     ▲                                      │ '""' → emit '"' (stay)
     │        lone '"' closes the quote     │
     └──────────────────────────────────────┘

  UNQUOTED: separator ends the field, anything else is copied verbatim.
  QUOTED:   everything is copied verbatim, separators included.
  End of row ends the current field in either state (an unterminated
  quote closes implicitly).

Notes:
    * Field whitespace is preserved, quoted or not.
    * Enclosing quotes are dropped: "hello" -> hello
    * Doubled quotes from spreadsheet exports unescape: ""hello"" -> "hello"
    * Unquoted joins do NOT escape anything, so a field that contains the
      separator will not survive an unquoted save/load cycle.
================================================================================
"""
import logging
from enum import Enum
from typing import Iterable, List, Optional

from csvtable.core.processor.csv_helper.csv_constants import (
    ESCAPED_QUOTE,
    QUOTE_CHAR,
)

logger = logging.getLogger("csvtable")


class SplitState(Enum):
    """States of the row splitting automaton."""
    UNQUOTED = "unquoted"
    QUOTED = "quoted"


def split_row(text: Optional[str], separator: str) -> List[str]:
    """
    Split a row string into fields.

    Args:
        text: Row text without its line terminator
        separator: Field separator string (may be longer than one character)

    Returns:
        List of field strings. Always at least one field for a non-None row.
    """
    if text is None:
        return []

    fields: List[str] = []
    field: List[str] = []
    state = SplitState.UNQUOTED
    field_start = True
    sep_len = len(separator)
    text_len = len(text)
    i = 0

    while i < text_len:
        char = text[i]

        if state is SplitState.QUOTED:
            if char == QUOTE_CHAR:
                if i + 1 < text_len and text[i + 1] == QUOTE_CHAR:
                    field.append(QUOTE_CHAR)
                    i += 2
                    continue
                state = SplitState.UNQUOTED
            else:
                field.append(char)
            i += 1
            continue

        if sep_len and text.startswith(separator, i):
            fields.append(''.join(field))
            field = []
            field_start = True
            i += sep_len
            continue

        if field_start and char == QUOTE_CHAR:
            state = SplitState.QUOTED
        else:
            field.append(char)
        field_start = False
        i += 1

    if state is SplitState.QUOTED:
        logger.debug(f"Unterminated quote closed at end of row: {text!r}")

    fields.append(''.join(field))
    return fields


def quote_field(field: str) -> str:
    """Wrap a field in quotes, doubling any quotes it contains."""
    return QUOTE_CHAR + field.replace(QUOTE_CHAR, ESCAPED_QUOTE) + QUOTE_CHAR


def join_row(fields: Iterable, separator: str, quote: bool = False) -> str:
    """
    Join fields into a single row string.

    Args:
        fields: Field values, converted with str() when not already strings
        separator: Field separator string
        quote: Wrap every field in double quotes

    Returns:
        Row text without a line terminator
    """
    values = [field if isinstance(field, str) else str(field) for field in fields]
    if quote:
        values = [quote_field(value) for value in values]
    return separator.join(values)


def is_comment_line(line: str, comment_prefix: Optional[str]) -> bool:
    """
    Check whether a line starts with the comment prefix.

    Matching is literal. An empty or None prefix never matches.
    """
    if not comment_prefix:
        return False
    return line.startswith(comment_prefix)


def split_lines(content: str) -> List[str]:
    """Split text into lines on \\n, \\r\\n or \\r, ignoring one trailing terminator."""
    lines = content.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_csv_lines(
    lines: Iterable[str],
    separator: str,
    comment_prefix: Optional[str] = None
) -> List[List[str]]:
    """
    Split already separated lines into rows, dropping comment lines.

    Args:
        lines: Line strings without terminators
        separator: Field separator string
        comment_prefix: Comment line prefix (None/empty keeps every line)

    Returns:
        List of rows (each a list of fields)
    """
    rows: List[List[str]] = []
    skipped = 0

    for line in lines:
        if is_comment_line(line, comment_prefix):
            skipped += 1
            continue
        rows.append(split_row(line, separator))

    if skipped:
        logger.debug(f"Skipped {skipped} comment line(s) with prefix {comment_prefix!r}")

    return rows


def parse_csv_content(
    content: str,
    separator: str,
    comment_prefix: Optional[str] = None
) -> List[List[str]]:
    """
    Parse delimited text into rows.

    Lines end at \\n, \\r\\n or \\r. A trailing line terminator does not add
    an empty row; blank lines inside the text are kept as one-field rows.

    Args:
        content: Decoded file content
        separator: Field separator string
        comment_prefix: Comment line prefix

    Returns:
        List of rows (each a list of fields)
    """
    return parse_csv_lines(split_lines(content), separator, comment_prefix)
