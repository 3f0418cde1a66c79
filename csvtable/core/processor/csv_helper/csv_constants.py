# csvtable/core/processor/csv_helper/csv_constants.py
"""
CSV Constants

Default settings and lookup tables shared by the CSV parser, encoder and
table classes.
"""

# Table defaults
DEFAULT_SEPARATOR = ","
DEFAULT_COMMENT_PREFIX = "#"
DEFAULT_QUOTE_FIELDS = False

# Quoting
QUOTE_CHAR = '"'
ESCAPED_QUOTE = QUOTE_CHAR * 2

# Byte order marks -> codec
BOM_ENCODINGS = [
    (b'\xef\xbb\xbf', 'utf-8-sig'),
    (b'\xff\xfe', 'utf-16-le'),
    (b'\xfe\xff', 'utf-16-be'),
]

# Readable names for common separators
DELIMITER_NAMES = {
    ',': 'Comma (,)',
    ';': 'Semicolon (;)',
    '\t': 'Tab (\\t)',
    '|': 'Pipe (|)',
    ':': 'Colon (:)',
    ' ': 'Space ( )',
}
