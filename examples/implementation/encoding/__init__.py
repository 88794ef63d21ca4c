"""Encoding reference implementation package.

This package provides reference implementations of the codec interface,
used to cross-check the basen-encodings codecs.
"""

from .base64 import StdlibBase64

__all__ = [
    "StdlibBase64",
]
