"""Argument validation helpers.

These checks guard the public Base64Encoding entry points so the codec core
can assume well-formed alphabets and in-bounds ranges.
"""

from __future__ import annotations

from typing import Hashable, Iterable, Optional, Sequence, Union

from basen_encodings.exceptions import InvalidAlphabetError

ALPHABET_SIZE = 64


def has_duplicates(items: Iterable[Hashable]) -> bool:
    """Return True if any item occurs more than once."""
    seen = set()
    for item in items:
        if item in seen:
            return True
        seen.add(item)
    return False


def check_alphabet(alphabet: Union[str, Sequence[str]], padding: str) -> str:
    """Validate an alphabet and padding character.

    Args:
        alphabet: A string, or a sequence of single-character strings.
        padding: The padding character.

    Returns:
        The alphabet as a string.

    Raises:
        InvalidAlphabetError: If the alphabet is not 64 distinct characters,
            or the padding is not a single character outside the alphabet.
    """
    if alphabet is None:
        raise InvalidAlphabetError("alphabet is None")
    if not isinstance(alphabet, str):
        try:
            items = list(alphabet)
        except TypeError:
            raise InvalidAlphabetError(
                f"alphabet must be a str or sequence, not {type(alphabet).__name__}"
            ) from None
        if not all(isinstance(item, str) and len(item) == 1 for item in items):
            raise InvalidAlphabetError("alphabet items must be single characters")
        alphabet = "".join(items)

    if len(alphabet) != ALPHABET_SIZE:
        raise InvalidAlphabetError(
            f"size of alphabet is {len(alphabet)}, expected {ALPHABET_SIZE}"
        )
    if has_duplicates(alphabet):
        raise InvalidAlphabetError("alphabet contains duplicated items")

    if not isinstance(padding, str) or len(padding) != 1:
        raise InvalidAlphabetError("padding must be a single character")
    if padding in alphabet:
        raise InvalidAlphabetError(f"padding {padding!r} is part of the alphabet")

    return alphabet


def check_range(size: int, offset: int, length: Optional[int]) -> int:
    """Validate an (offset, length) range against a buffer size.

    Args:
        size: Length of the buffer.
        offset: Start of the range.
        length: Size of the range, or None for the rest of the buffer.

    Returns:
        The resolved length.

    Raises:
        TypeError: If offset or length is not an int.
        ValueError: If the range is negative or exceeds the buffer.
    """
    if not _is_int(offset):
        raise TypeError(f"offset must be an int, not {type(offset).__name__}")
    if offset < 0 or offset > size:
        raise ValueError(f"offset {offset} is out of range for size {size}")

    if length is None:
        return size - offset
    if not _is_int(length):
        raise TypeError(f"length must be an int, not {type(length).__name__}")
    if length < 0:
        raise ValueError(f"length {length} is negative")
    if offset + length > size:
        raise ValueError(f"range {offset}+{length} exceeds size {size}")
    return length


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
