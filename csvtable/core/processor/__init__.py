# csvtable/core/processor/__init__.py
"""
Processor - File Handler Module

Handler List:
- csv_handler: CSV/TSV file reading and writing

Helper Modules (subdirectories):
- csv_helper/: parsing, encoding and metadata helpers

Usage Example:
    from csvtable.core.processor import CSVHandler
    from csvtable.core.processor.csv_helper import split_row, join_row
"""

from csvtable.core.processor.csv_handler import CSVHandler, LoadedCSV

from csvtable.core.processor import csv_helper

__all__ = [
    "CSVHandler",
    "LoadedCSV",
    "csv_helper",
]
