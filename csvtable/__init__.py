# csvtable/__init__.py
"""
csvtable Library

An in-memory table backed by Character Separated Value text.

Package Structure:
- core: Table classes
    - CSVTable: rows + settings, file load/save, typed cell access
    - CSVRow: a single row with typed field access
    - processor: CSV file handler and parsing helpers (split_row / join_row)
    - functions: encoding config, value conversion, table rendering

Usage:
    from csvtable import CSVTable, split_row, join_row

    table = CSVTable(separator=";")
    table.load("data.csv")
    table.set_int(0, 2, 42)
    table.save("out/data.csv", quote=True)

    split_row('a,"b,c",d', ",")        # ['a', 'b,c', 'd']
    join_row(['a', 'b c'], ",", True)  # '"a","b c"'
"""

__version__ = "0.2.0"

from csvtable.core import CSVRow, CSVTable, TableConfig
from csvtable.core.functions import EncodingConfig, TableOutputFormat
from csvtable.core.processor.csv_helper import join_row, split_row

from csvtable import core

__all__ = [
    "__version__",
    # Core classes
    "CSVTable",
    "CSVRow",
    "TableConfig",
    "EncodingConfig",
    "TableOutputFormat",
    # Row codec
    "split_row",
    "join_row",
    # Subpackages
    "core",
]
