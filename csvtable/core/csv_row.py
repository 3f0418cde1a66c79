# csvtable/core/csv_row.py
"""CSVRow - a single table row.

A row is an ordered, variable-length list of field strings. Typed getters
reinterpret fields on demand and fall back to 0 / 0.0 / "" / False when a
column is missing or the text does not parse. Setters expand the row to fit.

Usage Example:
    row = CSVRow.from_string('a,"b,c",3', ",")
    row.get_string(1)   # 'b,c'
    row.get_int(2)      # 3
    row.set_bool(5, True)
    row.to_string(",")  # 'a,b,c,3,,true'
"""

from typing import Any, Iterable, Iterator, List, Optional, Union

from csvtable.core.functions.utils import to_bool, to_field, to_float, to_int
from csvtable.core.processor.csv_helper.csv_constants import DEFAULT_SEPARATOR
from csvtable.core.processor.csv_helper.csv_parser import join_row, split_row


class CSVRow:
    """Ordered list of field strings with typed access."""

    def __init__(self, fields: Optional[Iterable[Any]] = None):
        """
        Initialize CSVRow.

        Args:
            fields: Initial values, converted to field text
        """
        self._fields: List[str] = [to_field(value) for value in fields] if fields else []

    @classmethod
    def from_string(cls, text: str, separator: str = DEFAULT_SEPARATOR) -> "CSVRow":
        """Create a row by splitting row text."""
        return cls(split_row(text, separator))

    def to_string(self, separator: str = DEFAULT_SEPARATOR, quote: bool = False) -> str:
        """Join the fields into row text."""
        return join_row(self._fields, separator, quote)

    @property
    def fields(self) -> List[str]:
        """Underlying field list."""
        return self._fields

    # ------------------------------------------------------------------
    # Typed getters
    # ------------------------------------------------------------------

    def get_string(self, col: int) -> str:
        """Field text, or "" when the column does not exist."""
        if 0 <= col < len(self._fields):
            return self._fields[col]
        return ""

    def get_int(self, col: int) -> int:
        """Field as int, or 0."""
        return to_int(self.get_string(col))

    def get_float(self, col: int) -> float:
        """Field as float, or 0.0."""
        return to_float(self.get_string(col))

    def get_bool(self, col: int) -> bool:
        """Field as bool, or False."""
        return to_bool(self.get_string(col))

    # ------------------------------------------------------------------
    # Setters (expand to fit)
    # ------------------------------------------------------------------

    def set_string(self, col: int, value: Any) -> None:
        """Set a field, expanding the row to include the column."""
        if col < 0:
            return
        self.expand(col + 1)
        self._fields[col] = to_field(value)

    def set_int(self, col: int, value: int) -> None:
        self.set_string(col, int(value))

    def set_float(self, col: int, value: float) -> None:
        self.set_string(col, float(value))

    def set_bool(self, col: int, value: bool) -> None:
        self.set_string(col, bool(value))

    # ------------------------------------------------------------------
    # Appenders
    # ------------------------------------------------------------------

    def add_string(self, value: Any) -> None:
        """Append a field."""
        self._fields.append(to_field(value))

    def add_int(self, value: int) -> None:
        self.add_string(int(value))

    def add_float(self, value: float) -> None:
        self.add_string(float(value))

    def add_bool(self, value: bool) -> None:
        self.add_string(bool(value))

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def insert(self, index: int, value: Any) -> None:
        """
        Insert a field before index.

        An index past the end pads the row with empty fields first.
        """
        if index < 0:
            return
        self.expand(index)
        self._fields.insert(index, to_field(value))

    def remove(self, index: int) -> None:
        """Remove the field at index; out-of-range indexes are ignored."""
        if 0 <= index < len(self._fields):
            del self._fields[index]

    def expand(self, cols: int) -> None:
        """Grow to at least cols fields, filling new ones with ""."""
        missing = cols - len(self._fields)
        if missing > 0:
            self._fields.extend([""] * missing)

    def clear(self) -> None:
        self._fields.clear()

    def trim(self) -> None:
        """Strip leading and trailing whitespace from every field."""
        self._fields = [value.strip() for value in self._fields]

    def copy(self) -> "CSVRow":
        return CSVRow(self._fields)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __getitem__(self, index: Union[int, slice]):
        return self._fields[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CSVRow):
            return self._fields == other._fields
        if isinstance(other, (list, tuple)):
            return self._fields == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"CSVRow({self._fields!r})"
