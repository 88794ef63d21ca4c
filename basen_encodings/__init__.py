"""basen-encodings Python implementation.

This package provides a configurable Base64 codec: standard RFC 4648 Base64
by default, or any alphabet of 64 distinct characters with its own padding
character.

Main Components:
    - Base64Encoding: Argument-checked public encoding
    - Base64Codec: Bit-packing engine, sizes and validity checks
    - AlphabetTable: Forward and inverse alphabet lookups
    - Interfaces: Protocol definitions for codecs

Example:
    >>> from basen_encodings import Base64Encoding
    >>> Base64Encoding().encode(b"foo")
    'Zm9v'
"""

import logging

from basen_encodings.alphabet import INVALID, PADDING, AlphabetTable
from basen_encodings.base64 import Base64Codec, DecodedSize
from basen_encodings.config import (
    CUSTOM_NAME,
    DEFAULT_NAME,
    STANDARD_ALPHABET,
    STANDARD_PADDING,
    URLSAFE_ALPHABET,
    EncodingConfig,
)
from basen_encodings.encoding import Base64Encoding, standard
from basen_encodings.exceptions import (
    BaseEncodingError,
    InvalidAlphabetError,
    MalformedInputError,
)
from basen_encodings.interfaces import ICodec

__version__ = "0.1.0"


def setup_logging(level=logging.INFO):
    """Set the level of the basen-encodings loggers.

    Args:
        level: Logging level (default: logging.INFO)
    """
    for logger_name in ("basen_encodings", "basen_encodings.encoding"):
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    # Encodings
    "Base64Encoding",
    "Base64Codec",
    "AlphabetTable",
    "DecodedSize",
    "ICodec",
    "standard",
    # Alphabet markers
    "INVALID",
    "PADDING",
    # Configuration
    "EncodingConfig",
    "STANDARD_ALPHABET",
    "STANDARD_PADDING",
    "URLSAFE_ALPHABET",
    "DEFAULT_NAME",
    "CUSTOM_NAME",
    # Exceptions
    "BaseEncodingError",
    "MalformedInputError",
    "InvalidAlphabetError",
    # Logging
    "setup_logging",
]
