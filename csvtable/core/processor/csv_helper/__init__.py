# csvtable/core/processor/csv_helper/__init__.py
"""
CSV Helper module

Functional building blocks used by csv_handler.py and the table classes.

Modules:
- csv_constants: defaults, quoting characters, lookup tables
- csv_parser: row splitting/joining and comment filtering
- csv_encoding: BOM/chardet based decoding
- csv_metadata: metadata extraction and formatting
"""

# Constants
from csvtable.core.processor.csv_helper.csv_constants import (
    DEFAULT_SEPARATOR,
    DEFAULT_COMMENT_PREFIX,
    DEFAULT_QUOTE_FIELDS,
    QUOTE_CHAR,
    DELIMITER_NAMES,
)

# Parser
from csvtable.core.processor.csv_helper.csv_parser import (
    SplitState,
    split_row,
    join_row,
    quote_field,
    is_comment_line,
    split_lines,
    parse_csv_lines,
    parse_csv_content,
)

# Encoding
from csvtable.core.processor.csv_helper.csv_encoding import (
    CSVEncoder,
    detect_bom,
)

# Metadata
from csvtable.core.processor.csv_helper.csv_metadata import (
    format_file_size,
    get_delimiter_name,
    extract_csv_metadata,
    format_metadata,
)

__all__ = [
    # Constants
    "DEFAULT_SEPARATOR",
    "DEFAULT_COMMENT_PREFIX",
    "DEFAULT_QUOTE_FIELDS",
    "QUOTE_CHAR",
    "DELIMITER_NAMES",
    # Parser
    "SplitState",
    "split_row",
    "join_row",
    "quote_field",
    "is_comment_line",
    "split_lines",
    "parse_csv_lines",
    "parse_csv_content",
    # Encoding
    "CSVEncoder",
    "detect_bom",
    # Metadata
    "format_file_size",
    "get_delimiter_name",
    "extract_csv_metadata",
    "format_metadata",
]
