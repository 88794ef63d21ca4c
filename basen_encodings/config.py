"""Configuration for basen-encodings.

This module holds the standard RFC 4648 constants and the EncodingConfig
dataclass used to build encodings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

STANDARD_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
STANDARD_PADDING = "="

# RFC 4648 section 5 characters, used as a plain alphabet substitution.
URLSAFE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

DEFAULT_NAME = "Standard Base64 Encoding"
CUSTOM_NAME = "Customized Base64 Encoding"


@dataclass
class EncodingConfig:
    """Configuration for a Base64 encoding.

    Attributes:
        alphabet: The 64 characters, indexed by 6-bit value.
        padding: The padding character.
        name: Human-readable name; derived from the alphabet when None.
        strict: Reject encodings whose unused trailing bits are nonzero.
    """

    alphabet: str = STANDARD_ALPHABET
    padding: str = STANDARD_PADDING
    name: Optional[str] = None
    strict: bool = False
