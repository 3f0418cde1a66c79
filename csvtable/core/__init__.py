# csvtable/core/__init__.py
"""
Core module - table classes, file handlers and shared functions.
"""

from csvtable.core.csv_row import CSVRow
from csvtable.core.csv_table import CSVTable, TableConfig

from csvtable.core import functions
from csvtable.core import processor

__all__ = [
    "CSVRow",
    "CSVTable",
    "TableConfig",
    "functions",
    "processor",
]
