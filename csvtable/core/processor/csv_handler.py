# csvtable/core/processor/csv_handler.py
"""
CSV Handler - CSV/TSV File Reader and Writer

Moves table rows between delimited text files and memory. Decoding,
comment filtering and row splitting/joining are delegated to csv_helper.

Failures never raise: reads return None and writes return False, with the
cause logged.
"""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from csvtable.core.functions.encoding import EncodingConfig
from csvtable.core.processor.csv_helper import (
    CSVEncoder,
    join_row,
    parse_csv_content,
)

PathLike = Union[str, Path]


@dataclass
class LoadedCSV:
    """Result of reading a delimited file.

    Attributes:
        rows: Parsed rows (comment lines removed)
        encoding: Encoding the file was decoded with
        file_path: Path that was read
    """
    rows: List[List[str]] = field(default_factory=list)
    encoding: Optional[str] = None
    file_path: Optional[str] = None


class CSVHandler:
    """CSV/TSV File Processing Handler Class"""

    def __init__(self, encoding_config: Optional[EncodingConfig] = None):
        """
        Initialize CSVHandler.

        Args:
            encoding_config: Encoding detection settings
        """
        self._encoder = CSVEncoder(encoding_config)
        self._logger = logging.getLogger(f"csvtable.{self.__class__.__name__}")

    @property
    def encoding_config(self) -> EncodingConfig:
        """Encoding configuration."""
        return self._encoder.config

    @property
    def logger(self) -> logging.Logger:
        """Logger instance."""
        return self._logger

    def read(
        self,
        file_path: PathLike,
        separator: str,
        comment_prefix: Optional[str] = None,
        encoding: Optional[str] = None
    ) -> Optional[LoadedCSV]:
        """
        Read and parse a delimited file.

        Args:
            file_path: File to read
            separator: Field separator string
            comment_prefix: Comment line prefix
            encoding: Encoding to use instead of auto-detection

        Returns:
            LoadedCSV, or None when the file could not be read or decoded
        """
        path = Path(file_path)
        self.logger.info(f"CSV load: {path}")

        try:
            data = path.read_bytes()
            if encoding:
                content, detected_encoding = data.decode(encoding), encoding
            else:
                content, detected_encoding = self._encoder.decode(data)
        except (OSError, UnicodeError, LookupError) as e:
            self.logger.error(f"Could not load CSV file {path}: {e}")
            self.logger.debug("Load failure details", exc_info=True)
            return None

        self.logger.debug(f"CSV: encoding={detected_encoding}, separator={separator!r}")

        rows = parse_csv_content(content, separator, comment_prefix)
        self.logger.info(f"CSV load completed: {len(rows)} rows from {path}")

        return LoadedCSV(rows=rows, encoding=detected_encoding, file_path=str(path))

    def parse(
        self,
        content: str,
        separator: str,
        comment_prefix: Optional[str] = None
    ) -> List[List[str]]:
        """Parse already decoded text into rows."""
        return parse_csv_content(content, separator, comment_prefix)

    def render(
        self,
        rows: Iterable[Sequence[str]],
        separator: str,
        quote: bool = False
    ) -> str:
        """
        Serialize rows to delimited text.

        Every row, the last one included, is terminated by a newline.
        """
        return "".join(join_row(row, separator, quote) + "\n" for row in rows)

    def write(
        self,
        file_path: PathLike,
        rows: Iterable[Sequence[str]],
        separator: str,
        quote: bool = False,
        encoding: Optional[str] = None
    ) -> bool:
        """
        Write rows to a delimited file.

        Missing parent directories are created.

        Args:
            file_path: Destination path
            rows: Rows to write
            separator: Field separator string
            quote: Double quote every field
            encoding: Output encoding (defaults to the configured save encoding)

        Returns:
            True if the file was written
        """
        path = Path(file_path)
        rows = list(rows)
        content = self.render(rows, separator, quote)

        try:
            data = self._encoder.encode(content, encoding)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except (OSError, UnicodeError, LookupError) as e:
            self.logger.error(f"Could not save CSV file {path}: {e}")
            self.logger.debug("Save failure details", exc_info=True)
            return False

        self.logger.info(f"Saved {len(rows)} rows to {path}")
        return True

    def create(self, file_path: PathLike) -> bool:
        """Create an empty file, including missing parent directories."""
        return self.write(file_path, [], "")
