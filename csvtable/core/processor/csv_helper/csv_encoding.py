# csvtable/core/processor/csv_helper/csv_encoding.py
"""
CSV Encoding Detection

Decodes raw CSV bytes, trying in order:
BOM -> preferred encoding -> chardet -> encoding candidates -> fallback.
"""
import logging
from typing import Optional, Tuple

import chardet

from csvtable.core.functions.encoding import BaseEncoder
from csvtable.core.processor.csv_helper.csv_constants import BOM_ENCODINGS

logger = logging.getLogger("csvtable")


def detect_bom(file_data: bytes) -> Optional[str]:
    """
    Detect an encoding from a byte order mark.

    Args:
        file_data: Raw bytes

    Returns:
        Codec name or None when no BOM is present
    """
    for bom, encoding in BOM_ENCODINGS:
        if file_data.startswith(bom):
            return encoding
    return None


class CSVEncoder(BaseEncoder):
    """Encoder for delimited text files."""

    def decode(self, data: bytes) -> Tuple[str, str]:
        """
        Decode bytes with encoding detection.

        Args:
            data: Raw bytes data

        Returns:
            Tuple of (decoded content, detected encoding)
        """
        bom_encoding = detect_bom(data)
        if bom_encoding:
            try:
                return data.decode(bom_encoding), bom_encoding
            except UnicodeDecodeError:
                self.logger.debug(f"BOM encoding {bom_encoding} failed")

        preferred = self.config.preferred_encoding
        if preferred:
            try:
                return data.decode(preferred), preferred
            except (UnicodeDecodeError, LookupError):
                self.logger.debug(f"Preferred encoding {preferred} failed")

        if self.config.use_chardet and data:
            detected = chardet.detect(data)
            enc = detected.get('encoding')
            confidence = detected.get('confidence') or 0.0
            if enc and confidence >= self.config.chardet_confidence_threshold:
                try:
                    return data.decode(enc), enc
                except (UnicodeDecodeError, LookupError):
                    self.logger.debug(f"chardet encoding {enc} ({confidence:.2f}) failed")

        for enc in self.config.encoding_candidates:
            try:
                return data.decode(enc), enc
            except (UnicodeDecodeError, LookupError):
                self.logger.debug(f"Failed to decode with {enc}, trying next...")
                continue

        fallback = self.config.fallback_encoding
        return data.decode(fallback, errors='replace'), fallback
