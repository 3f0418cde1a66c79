# csvtable/core/processor/csv_helper/csv_metadata.py
"""
CSV metadata extraction and formatting.

Summarizes a table (file info, separator, shape) in a readable form.
"""
import logging
import os
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from csvtable.core.processor.csv_helper.csv_constants import DELIMITER_NAMES

logger = logging.getLogger("csvtable")


def format_file_size(size_bytes: int) -> str:
    """
    Convert a byte count to a readable size.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted size string (e.g. "1.5 MB")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.1f} MB"
    else:
        return f"{size_bytes / (1024 * 1024 * 1024):.1f} GB"


def get_delimiter_name(delimiter: str) -> str:
    """Readable name for a separator (e.g. "Comma (,)")."""
    return DELIMITER_NAMES.get(delimiter, repr(delimiter))


def extract_csv_metadata(
    file_path: Optional[str],
    encoding: Optional[str],
    delimiter: str,
    rows: Sequence[Sequence[str]],
    comment_prefix: Optional[str] = None
) -> Dict[str, Any]:
    """
    Collect metadata for a table.

    File information is included only when file_path points to an existing
    file.

    Args:
        file_path: Current table path
        encoding: Detected or configured encoding
        delimiter: Field separator
        rows: Table rows
        comment_prefix: Comment line prefix

    Returns:
        Metadata dictionary
    """
    metadata: Dict[str, Any] = {}

    if file_path:
        metadata['file_name'] = os.path.basename(file_path)
        try:
            file_stat = os.stat(file_path)
            metadata['file_size'] = format_file_size(file_stat.st_size)
            metadata['modified_time'] = datetime.fromtimestamp(file_stat.st_mtime)
        except OSError as e:
            logger.debug(f"No file info for {file_path}: {e}")

    col_counts = [len(row) for row in rows]

    metadata['encoding'] = encoding
    metadata['delimiter'] = get_delimiter_name(delimiter)
    metadata['comment_prefix'] = comment_prefix or None
    metadata['row_count'] = len(rows)
    metadata['col_count'] = max(col_counts) if col_counts else 0
    metadata['ragged'] = len(set(col_counts)) > 1

    logger.debug(f"Extracted CSV metadata: {list(metadata.keys())}")
    return metadata


def format_metadata(metadata: Dict[str, Any]) -> str:
    """
    Convert a metadata dictionary to a readable string.

    Args:
        metadata: Metadata dictionary

    Returns:
        Formatted metadata string (<Table-Metadata> block)
    """
    if not metadata:
        return ""

    lines = ["<Table-Metadata>"]

    field_names = {
        'file_name': 'File name',
        'file_size': 'File size',
        'modified_time': 'Modified',
        'encoding': 'Encoding',
        'delimiter': 'Separator',
        'comment_prefix': 'Comment prefix',
        'row_count': 'Rows',
        'col_count': 'Columns',
        'ragged': 'Ragged rows',
    }

    for key, label in field_names.items():
        if key in metadata and metadata[key] is not None:
            value = metadata[key]

            if isinstance(value, datetime):
                value = value.strftime('%Y-%m-%d %H:%M:%S')
            elif isinstance(value, bool):
                value = 'yes' if value else 'no'

            lines.append(f"  {label}: {value}")

    lines.append("</Table-Metadata>")

    return "\n".join(lines)
