# csvtable/core/functions/encoding.py
"""
Encoding - Abstract Encoding Interface Module

Provides the configuration and base class for turning file bytes into text
and back. The CSV implementation lives in csv_helper/csv_encoding.py.

Module Components:
- EncodingConfig: Configuration dataclass for encoding operations
- BaseEncoder: Abstract base class for format-specific encoders

Usage Example:
    from csvtable.core.functions.encoding import EncodingConfig
    from csvtable.core.processor.csv_helper.csv_encoding import CSVEncoder

    encoder = CSVEncoder(EncodingConfig(preferred_encoding="cp1252"))
    text, encoding = encoder.decode(raw_bytes)
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

logger = logging.getLogger("csvtable")


# Encodings tried in order after BOM and chardet detection
ENCODING_CANDIDATES = [
    'utf-8',
    'utf-8-sig',
    'cp1252',     # Western Windows
    'iso-8859-1', # Latin-1
]

# Encoding used when writing files without an explicit encoding
DEFAULT_SAVE_ENCODING = 'utf-8'


@dataclass
class EncodingConfig:
    """Configuration for encoding operations.

    Attributes:
        preferred_encoding: Encoding to try first (after BOM detection)
        use_chardet: Whether to use the chardet library for detection
        chardet_confidence_threshold: Minimum confidence for chardet detection
        encoding_candidates: List of encodings to try in order
        fallback_encoding: Final fallback encoding (never fails)
        save_encoding: Encoding used for writing when none is given
    """
    preferred_encoding: Optional[str] = None
    use_chardet: bool = True
    chardet_confidence_threshold: float = 0.7
    encoding_candidates: List[str] = field(default_factory=lambda: ENCODING_CANDIDATES.copy())
    fallback_encoding: str = 'latin-1'
    save_encoding: str = DEFAULT_SAVE_ENCODING


class BaseEncoder(ABC):
    """Abstract base class for format-specific encoders.

    Implementations:
        - CSVEncoder: csv_helper/csv_encoding.py (text format, various encodings)
    """

    def __init__(self, config: Optional[EncodingConfig] = None):
        """Initialize the encoder.

        Args:
            config: Encoding configuration
        """
        self.config = config or EncodingConfig()
        self.logger = logging.getLogger(f"csvtable.{self.__class__.__name__}")

    @abstractmethod
    def decode(self, data: bytes) -> Tuple[str, str]:
        """Decode binary data to string.

        Args:
            data: Binary data to decode

        Returns:
            Tuple of (decoded_text, detected_encoding)
        """
        pass

    def encode(self, text: str, encoding: Optional[str] = None) -> bytes:
        """Encode text for writing.

        Args:
            text: Text to encode
            encoding: Target encoding (defaults to config.save_encoding)

        Returns:
            Encoded bytes
        """
        return text.encode(encoding or self.config.save_encoding)
