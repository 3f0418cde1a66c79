# csvtable/core/csv_table.py
"""CSVTable - Table data loaded from & saved to Character Separated Value files.

Main entry point of the csvtable library. Holds an ordered list of rows
(each a CSVRow, lengths may differ) plus the settings used to read and
write them.

Parsing notes:
    * Field whitespace & quoted field whitespace is preserved.
    * Leading/trailing whitespace can be trimmed after loading (trim()).
    * Quoted string quotes are dropped upon loading: "hello" -> hello
    * Doubled quotes from spreadsheet exports unescape: ""hello"" -> "hello"
    * Lines starting with the comment prefix are skipped; blank lines are kept.

Saving notes:
    * Fields are saved without quotes (or escaping) by default.
    * ALL fields can be quoted if desired: 1.23 -> "1.23"

Usage Example:
    from csvtable import CSVTable

    table = CSVTable()
    if table.load("data/scores.csv"):
        for row in table:
            print(row.get_string(0), row.get_int(1))

    table.set_float(3, 2, 0.5)
    table.save("out/scores.csv", quote=True)
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Union

from csvtable.core.csv_row import CSVRow
from csvtable.core.functions.encoding import EncodingConfig
from csvtable.core.functions.table_processor import (
    TableOutputFormat,
    TableProcessor,
    TableProcessorConfig,
)
from csvtable.core.processor.csv_handler import CSVHandler
from csvtable.core.processor.csv_helper import (
    DEFAULT_COMMENT_PREFIX,
    DEFAULT_QUOTE_FIELDS,
    DEFAULT_SEPARATOR,
    extract_csv_metadata,
    format_metadata,
    join_row,
    split_row,
)

logger = logging.getLogger("csvtable")

RowLike = Union[CSVRow, Sequence[Any]]


@dataclass(frozen=True)
class TableConfig:
    """
    Settings of a CSVTable.

    Frozen so that a load/save call can work from a snapshot taken at call
    start; a new instance replaces it once the call succeeds.

    Attributes:
        separator: Field separator string
        comment_prefix: Comment line prefix ("" disables comment filtering)
        path: Current file path
        quote_fields: Double quote every field when saving
        encoding: Text encoding (None: auto-detect on load, UTF-8 on save)
    """
    separator: str = DEFAULT_SEPARATOR
    comment_prefix: str = DEFAULT_COMMENT_PREFIX
    path: Optional[str] = None
    quote_fields: bool = DEFAULT_QUOTE_FIELDS
    encoding: Optional[str] = None


class CSVTable:
    """
    In-memory CSV table.

    Out-of-range reads return fallbacks (empty row, 0, 0.0, "", False) and
    file operations report failure as False; nothing here raises for bad
    indexes, missing files or malformed quoting.
    """

    def __init__(
        self,
        separator: str = DEFAULT_SEPARATOR,
        comment_prefix: str = DEFAULT_COMMENT_PREFIX,
        quote_fields: bool = DEFAULT_QUOTE_FIELDS,
        encoding: Optional[str] = None,
        encoding_config: Optional[EncodingConfig] = None
    ):
        """
        Initialize CSVTable.

        Args:
            separator: Field separator string, default comma ","
            comment_prefix: Comment line prefix, default "#"
            quote_fields: Quote fields when saving, default False
            encoding: Fixed text encoding (None for auto-detect)
            encoding_config: Encoding detection settings
        """
        self._data: List[CSVRow] = []
        self._config = TableConfig(
            separator=separator,
            comment_prefix=comment_prefix,
            quote_fields=quote_fields,
            encoding=encoding,
        )
        self._handler = CSVHandler(encoding_config)
        self._detected_encoding: Optional[str] = None

    # ==========================================================================
    # File IO
    # ==========================================================================

    def load(
        self,
        path: Optional[Union[str, Path]] = None,
        separator: Optional[str] = None,
        comment_prefix: Optional[str] = None
    ) -> bool:
        """
        Load a CSV file.

        Replaces the current rows and sets the current path, separator and
        comment prefix. On failure the rows and settings are left untouched.

        Args:
            path: File path to load. None reloads the current file.
            separator: Field separator string (default: current separator)
            comment_prefix: Comment line prefix (default: current prefix)

        Returns:
            True if the file loaded successfully
        """
        config = self._config
        target = str(path) if path else config.path
        if not target:
            logger.warning("CSV load: no path given and no current file")
            return False

        separator = config.separator if separator is None else separator
        comment_prefix = config.comment_prefix if comment_prefix is None else comment_prefix

        loaded = self._handler.read(target, separator, comment_prefix, config.encoding)
        if loaded is None:
            return False

        self._data = [CSVRow(row) for row in loaded.rows]
        self._detected_encoding = loaded.encoding
        self._config = replace(
            config,
            path=target,
            separator=separator,
            comment_prefix=comment_prefix,
        )
        return True

    def load_text(
        self,
        content: str,
        separator: Optional[str] = None,
        comment_prefix: Optional[str] = None
    ) -> None:
        """
        Load rows from delimited text.

        Same read path as load() without the file: replaces the current rows
        and updates the separator/comment prefix. The current path is kept.
        """
        config = self._config
        separator = config.separator if separator is None else separator
        comment_prefix = config.comment_prefix if comment_prefix is None else comment_prefix

        rows = self._handler.parse(content, separator, comment_prefix)
        self._data = [CSVRow(row) for row in rows]
        self._config = replace(config, separator=separator, comment_prefix=comment_prefix)

    def save(
        self,
        path: Optional[Union[str, Path]] = None,
        quote: Optional[bool] = None,
        separator: Optional[str] = None
    ) -> bool:
        """
        Save a CSV file.

        Creates any required folders in the path. On success the path, quote
        flag and separator become the current settings.

        Args:
            path: File path to save. None saves to the current file.
            quote: Double quote the fields (default: current quote setting)
            separator: Field separator string (default: current separator)

        Returns:
            True if the file saved successfully
        """
        config = self._config
        target = str(path) if path else config.path
        if not target:
            logger.warning("CSV save: no path given and no current file")
            return False

        quote = config.quote_fields if quote is None else quote
        separator = config.separator if separator is None else separator

        if not self._handler.write(target, self._data, separator, quote, config.encoding):
            return False

        self._config = replace(config, path=target, quote_fields=quote, separator=separator)
        return True

    def create_file(self, path: Union[str, Path]) -> bool:
        """
        Create an empty CSV file.

        Creates any required folders in the path, clears the rows and sets
        the current file path.

        Returns:
            True if the file was created
        """
        target = str(path)
        if not self._handler.create(target):
            return False
        self._data = []
        self._config = replace(self._config, path=target)
        return True

    # ==========================================================================
    # Data IO
    # ==========================================================================

    def load_rows(self, rows: Iterable[RowLike]) -> None:
        """
        Load from a sequence of rows.

        Clears any current data. Rows are copied.

        Args:
            rows: CSVRow instances or sequences of values
        """
        self._data = [_to_row(row) for row in rows]

    def add_row(self, row: Optional[RowLike] = None) -> None:
        """Append a row (an empty one when row is None)."""
        self._data.append(_to_row(row))

    def set_row(self, index: int, row: RowLike) -> None:
        """
        Replace the row at index.

        Expands to fit the required number of rows.
        """
        if index < 0:
            return
        self._expand_rows(index + 1)
        self._data[index] = _to_row(row)

    def get_row(self, index: int) -> CSVRow:
        """
        Get the row at index.

        Returns:
            The row, or an empty row if the index is out of bounds
        """
        if 0 <= index < len(self._data):
            return self._data[index]
        return CSVRow()

    def insert_row(self, index: int, row: RowLike) -> None:
        """
        Insert a row before index.

        Expands to fit the required number of rows.
        """
        if index < 0:
            return
        self._expand_rows(index)
        self._data.insert(index, _to_row(row))

    def remove_row(self, index: int) -> None:
        """Remove the row at index; out-of-range indexes are ignored."""
        if 0 <= index < len(self._data):
            del self._data[index]

    def expand(self, rows: int, cols: int) -> None:
        """
        Expand to at least rows x cols.

        Never shrinks. Only newly created fields are filled with "".
        """
        self._expand_rows(rows)
        for row in self._data:
            row.expand(cols)

    def clear(self) -> None:
        """Clear the current row and column data."""
        self._data = []

    def _expand_rows(self, rows: int) -> None:
        while len(self._data) < rows:
            self._data.append(CSVRow())

    def _expand_row(self, row: int, cols: int) -> CSVRow:
        self._expand_rows(row + 1)
        target = self._data[row]
        target.expand(cols)
        return target

    # ==========================================================================
    # Data Access
    # ==========================================================================

    @property
    def num_rows(self) -> int:
        """Current number of rows."""
        return len(self._data)

    def get_num_cols(self, row: int = 0) -> int:
        """Number of fields in a row, or 0 if the row does not exist."""
        return len(self.get_row(row))

    def get_int(self, row: int, col: int) -> int:
        """Field as int, or 0 if not found."""
        return self.get_row(row).get_int(col)

    def get_float(self, row: int, col: int) -> float:
        """Field as float, or 0.0 if not found."""
        return self.get_row(row).get_float(col)

    def get_string(self, row: int, col: int) -> str:
        """Field text, or "" if not found."""
        return self.get_row(row).get_string(col)

    def get_bool(self, row: int, col: int) -> bool:
        """Field as bool, or False if not found."""
        return self.get_row(row).get_bool(col)

    def add_int(self, value: int) -> None:
        """Add an integer field to the end of the last row."""
        self._last_row().add_int(value)

    def add_float(self, value: float) -> None:
        """Add a float field to the end of the last row."""
        self._last_row().add_float(value)

    def add_string(self, value: str) -> None:
        """Add a string field to the end of the last row."""
        self._last_row().add_string(value)

    def add_bool(self, value: bool) -> None:
        """Add a boolean field to the end of the last row."""
        self._last_row().add_bool(value)

    def set_int(self, row: int, col: int, value: int) -> None:
        """Set a field to an integer, expanding rows/cols to fit."""
        if row >= 0 and col >= 0:
            self._expand_row(row, col + 1).set_int(col, value)

    def set_float(self, row: int, col: int, value: float) -> None:
        """Set a field to a float, expanding rows/cols to fit."""
        if row >= 0 and col >= 0:
            self._expand_row(row, col + 1).set_float(col, value)

    def set_string(self, row: int, col: int, value: str) -> None:
        """Set a field to a string, expanding rows/cols to fit."""
        if row >= 0 and col >= 0:
            self._expand_row(row, col + 1).set_string(col, value)

    def set_bool(self, row: int, col: int, value: bool) -> None:
        """Set a field to a boolean, expanding rows/cols to fit."""
        if row >= 0 and col >= 0:
            self._expand_row(row, col + 1).set_bool(col, value)

    def _last_row(self) -> CSVRow:
        if not self._data:
            self._data.append(CSVRow())
        return self._data[-1]

    def to_text(self, output_format: TableOutputFormat = TableOutputFormat.TEXT) -> str:
        """
        Render the table.

        TEXT joins each row with the current separator, unquoted.
        """
        processor = TableProcessor(TableProcessorConfig(
            output_format=output_format,
            text_separator=self._config.separator,
        ))
        return processor.format_table([row.fields for row in self._data])

    def print_table(self, output_format: TableOutputFormat = TableOutputFormat.TEXT) -> None:
        """Print the current data to the console."""
        text = self.to_text(output_format)
        if text:
            print(text)

    # ==========================================================================
    # Raw Data Access
    # ==========================================================================

    @property
    def data(self) -> List[CSVRow]:
        """Underlying row list."""
        return self._data

    def __iter__(self) -> Iterator[CSVRow]:
        return iter(self._data)

    def __reversed__(self) -> Iterator[CSVRow]:
        return reversed(self._data)

    def __getitem__(self, index: int) -> CSVRow:
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def front(self) -> CSVRow:
        """First row, or an empty row."""
        return self.get_row(0)

    def back(self) -> CSVRow:
        """Last row, or an empty row."""
        return self.get_row(len(self._data) - 1)

    def is_empty(self) -> bool:
        """True if there is no row data."""
        return not self._data

    # ==========================================================================
    # Util
    # ==========================================================================

    def trim(self) -> None:
        """Trim leading & trailing whitespace from all fields."""
        for row in self._data:
            row.trim()

    def from_row_string(self, text: str, separator: Optional[str] = None) -> List[str]:
        """Split a row string into fields (default: current separator)."""
        return split_row(text, self._config.separator if separator is None else separator)

    def to_row_string(
        self,
        fields: Iterable[Any],
        separator: Optional[str] = None,
        quote: bool = False
    ) -> str:
        """Join fields into a single row string (default: current separator)."""
        return join_row(fields, self._config.separator if separator is None else separator, quote)

    def metadata(self) -> Dict[str, Any]:
        """Describe the table: file info, encoding, separator and shape."""
        return extract_csv_metadata(
            self._config.path,
            self._config.encoding or self._detected_encoding,
            self._config.separator,
            [row.fields for row in self._data],
            self._config.comment_prefix,
        )

    def describe(self) -> str:
        """Readable metadata block."""
        return format_metadata(self.metadata())

    @property
    def config(self) -> TableConfig:
        """Current settings snapshot."""
        return self._config

    @property
    def path(self) -> Optional[str]:
        """Current file path."""
        return self._config.path

    @property
    def separator(self) -> str:
        """Field separator, default comma ","."""
        return self._config.separator

    @property
    def comment_prefix(self) -> str:
        """Comment line prefix, default "#"."""
        return self._config.comment_prefix

    @property
    def quote_fields(self) -> bool:
        """Whether fields are quoted when saving, default False."""
        return self._config.quote_fields

    @property
    def encoding(self) -> Optional[str]:
        """Configured text encoding (None for auto-detect)."""
        return self._config.encoding

    @property
    def detected_encoding(self) -> Optional[str]:
        """Encoding the last loaded file was decoded with."""
        return self._detected_encoding

    def __repr__(self) -> str:
        return (
            f"CSVTable(rows={len(self._data)}, separator={self._config.separator!r}, "
            f"path={self._config.path!r})"
        )


def _to_row(row: Optional[RowLike]) -> CSVRow:
    if row is None:
        return CSVRow()
    if isinstance(row, CSVRow):
        return row.copy()
    return CSVRow(row)
