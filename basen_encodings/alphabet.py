"""Alphabet lookup tables.

This module builds the forward (value -> character) and inverse
(character -> value) maps a codec uses for its alphabet.
"""

from __future__ import annotations

from typing import Dict

# Inverse-table markers. Both are outside the 6-bit range 0..63.
INVALID = -1
PADDING = -2


class AlphabetTable:
    """Bidirectional mapping between 6-bit values and alphabet characters.

    The inverse map is a dict keyed by character, since alphabets may use any
    Unicode characters and need not be contiguous. The alphabet is assumed to
    hold 64 distinct characters; callers validate that before building a table.

    Attributes:
        alphabet: The 64 characters, indexed by 6-bit value.
        padding: The padding character.
    """

    __slots__ = ("_alphabet", "_padding", "_inverse")

    def __init__(self, alphabet: str, padding: str) -> None:
        """Build the lookup tables.

        Args:
            alphabet: 64 distinct characters.
            padding: The padding character.
        """
        self._alphabet = alphabet
        self._padding = padding

        inverse: Dict[str, int] = {padding: PADDING}
        for value, char in enumerate(alphabet):
            inverse[char] = value
        self._inverse = inverse

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def padding(self) -> str:
        return self._padding

    def value(self, char: object) -> int:
        """Return the 6-bit value of a character.

        Args:
            char: The character to look up.

        Returns:
            The value 0..63, PADDING for the padding character, or INVALID
            for anything else.
        """
        try:
            return self._inverse.get(char, INVALID)  # type: ignore[arg-type]
        except TypeError:
            # unhashable
            return INVALID

    def __repr__(self) -> str:
        return f"AlphabetTable({self._alphabet!r}, {self._padding!r})"
