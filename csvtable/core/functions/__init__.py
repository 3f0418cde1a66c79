# csvtable/core/functions/__init__.py
"""
Functions - shared utilities

- encoding: EncodingConfig and the BaseEncoder interface
- utils: field value reinterpretation (int/float/bool) and formatting
- table_processor: text/markdown/html rendering of rows
"""

from csvtable.core.functions.encoding import (
    ENCODING_CANDIDATES,
    BaseEncoder,
    EncodingConfig,
)
from csvtable.core.functions.utils import (
    to_bool,
    to_field,
    to_float,
    to_int,
)
from csvtable.core.functions.table_processor import (
    TableOutputFormat,
    TableProcessor,
    TableProcessorConfig,
    create_table_processor,
)

__all__ = [
    # Encoding
    "ENCODING_CANDIDATES",
    "BaseEncoder",
    "EncodingConfig",
    # Values
    "to_bool",
    "to_field",
    "to_float",
    "to_int",
    # Rendering
    "TableOutputFormat",
    "TableProcessor",
    "TableProcessorConfig",
    "create_table_processor",
]
