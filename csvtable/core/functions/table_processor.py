# csvtable/core/functions/table_processor.py
"""
Table Processor - Table Rendering Module

Renders table rows (lists of field strings) for display.

================================================================================
TABLE PROCESSOR ARCHITECTURE
================================================================================

Main Entry Point:
    format_table(rows) → str

Internal Processing Functions (called from format_table):
    ├─ format_table_as_html()     - HTML table
    ├─ format_table_as_markdown() - Markdown table (ragged rows padded)
    └─ format_table_as_text()     - one line per row, fields joined

Common Utility:
    └─ _clean_cell_content()      - optional whitespace normalization

================================================================================
OUTPUT FORMAT COMPARISON
================================================================================

| Format   | Use Case                    | Ragged Rows   | Escaping  |
|----------|-----------------------------|---------------|-----------|
| HTML     | Web rendering, reports      | ✅ padded      | ✅ html   |
| Markdown | Docs, issue trackers        | ✅ padded      | ⚠️ pipes  |
| Text     | Console output, logging     | ❌ as stored   | ❌ none   |

================================================================================
"""
import html
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

logger = logging.getLogger("csvtable")


class TableOutputFormat(Enum):
    """Table output format options."""
    HTML = "html"
    MARKDOWN = "markdown"
    TEXT = "text"


@dataclass
class TableProcessorConfig:
    """Configuration for table rendering.

    Attributes:
        output_format: Target format
        clean_whitespace: Collapse runs of whitespace inside cells
        has_header: Treat the first row as a header (Markdown/HTML)
        text_separator: Field separator for TEXT output
    """
    output_format: TableOutputFormat = TableOutputFormat.TEXT
    clean_whitespace: bool = False
    has_header: bool = True
    text_separator: str = "\t"


class TableProcessor:
    """
    Main table rendering class.

    Public Methods:
        format_table()             ← Main Entry Point (branches on config.output_format)
        format_table_as_html()
        format_table_as_markdown()
        format_table_as_text()
    """

    def __init__(self, config: Optional[TableProcessorConfig] = None):
        self.config = config or TableProcessorConfig()
        self.logger = logging.getLogger("csvtable")

    def format_table(self, rows: Sequence[Sequence[str]]) -> str:
        """
        Main entry point for table formatting.

        Args:
            rows: Table rows

        Returns:
            Formatted string (HTML/Markdown/Text)
        """
        if self.config.output_format == TableOutputFormat.HTML:
            return self.format_table_as_html(rows)
        elif self.config.output_format == TableOutputFormat.MARKDOWN:
            return self.format_table_as_markdown(rows)
        else:
            return self.format_table_as_text(rows)

    def format_table_as_html(self, rows: Sequence[Sequence[str]]) -> str:
        """Convert rows to an HTML table, padding short rows with empty cells."""
        if not rows:
            return ""

        width = _max_width(rows)
        html_parts = ["<table>"]

        for row_idx, row in enumerate(rows):
            tag = "th" if row_idx == 0 and self.config.has_header else "td"
            html_parts.append("  <tr>")
            for cell in _pad(row, width):
                content = html.escape(self._clean_cell_content(cell))
                html_parts.append(f"    <{tag}>{content}</{tag}>")
            html_parts.append("  </tr>")

        html_parts.append("</table>")
        return "\n".join(html_parts)

    def format_table_as_markdown(self, rows: Sequence[Sequence[str]]) -> str:
        """
        Convert rows to a Markdown table.

        Short rows are padded so every line has the same number of cells.
        Pipes inside cells are escaped.
        """
        if not rows:
            return ""

        width = max(_max_width(rows), 1)
        lines = []
        for row_idx, row in enumerate(rows):
            cells = [
                self._clean_cell_content(cell).replace("|", "\\|")
                for cell in _pad(row, width)
            ]
            lines.append("| " + " | ".join(cells) + " |")

            if row_idx == 0 and self.config.has_header:
                lines.append("| " + " | ".join(["---"] * width) + " |")

        return "\n".join(lines)

    def format_table_as_text(self, rows: Sequence[Sequence[str]]) -> str:
        """Convert rows to plain text, one line per row."""
        if not rows:
            return ""

        lines = []
        for row in rows:
            cells = [self._clean_cell_content(cell) for cell in row]
            lines.append(self.config.text_separator.join(cells))

        return "\n".join(lines)

    def _clean_cell_content(self, content: str) -> str:
        if not content:
            return ""

        if self.config.clean_whitespace:
            content = re.sub(r'\s+', ' ', content)
            content = content.strip()

        return content


def _max_width(rows: Sequence[Sequence[str]]) -> int:
    return max((len(row) for row in rows), default=0)


def _pad(row: Sequence[str], width: int) -> List[str]:
    return list(row) + [""] * (width - len(row))


def create_table_processor(config: Optional[TableProcessorConfig] = None) -> TableProcessor:
    """
    Factory function to create a TableProcessor.

    Args:
        config: Table rendering configuration

    Returns:
        Configured TableProcessor instance
    """
    return TableProcessor(config)
