"""Exception classes for basen-encodings.

This module defines custom exception types used throughout the basen-encodings library.
"""


class BaseEncodingError(Exception):
    """Base exception class for all basen-encodings errors."""

    pass


class MalformedInputError(BaseEncodingError):
    """Exception raised when an encoded sequence is not well formed.

    Covers bad lengths, characters outside the alphabet, misplaced padding
    and, in strict mode, nonzero unused trailing bits.
    """

    pass


class InvalidAlphabetError(BaseEncodingError):
    """Exception raised when an alphabet or padding character is unusable."""

    pass
