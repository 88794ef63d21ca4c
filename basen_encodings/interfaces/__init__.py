"""basen-encodings interfaces package.

This package provides protocol definitions for codecs.
"""

from .codec import ICodec

__all__ = [
    "ICodec",
]
