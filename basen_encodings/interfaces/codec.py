"""Codec interface for basen-encodings.

This module defines the protocol shared by every codec in the package.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from basen_encodings.base64 import DecodedSize


class ICodec(Protocol):
    """Interface for binary-to-text codecs."""

    def encoded_size(self, length: int) -> int:
        """Compute the encoded size of a byte count.

        Args:
            length: Number of input bytes.

        Returns:
            The exact number of characters encode produces.
        """
        ...

    def decoded_size(
        self, chars: Sequence[str], offset: int = 0, length: Optional[int] = None
    ) -> DecodedSize:
        """Compute the decoded size of an encoded range.

        Args:
            chars: The encoded characters.
            offset: Start of the range.
            length: Size of the range; defaults to the rest of `chars`.

        Returns:
            The exact byte length and the trailing padding count.

        Raises:
            MalformedInputError: If the range is not well formed.
        """
        ...

    def encode(
        self, data: Sequence[int], offset: int = 0, length: Optional[int] = None
    ) -> str:
        """Encode a byte range into text.

        Args:
            data: The bytes to encode.
            offset: Start of the range.
            length: Size of the range; defaults to the rest of `data`.

        Returns:
            The encoded text.
        """
        ...

    def decode(
        self, chars: Sequence[str], offset: int = 0, length: Optional[int] = None
    ) -> bytes:
        """Decode an encoded range into bytes.

        Args:
            chars: The encoded characters.
            offset: Start of the range.
            length: Size of the range; defaults to the rest of `chars`.

        Returns:
            The decoded bytes.

        Raises:
            MalformedInputError: If the range is not well formed.
        """
        ...

    def is_valid(
        self, chars: Sequence[str], offset: int = 0, length: Optional[int] = None
    ) -> bool:
        """Check whether a range would decode successfully.

        Never raises.

        Args:
            chars: The encoded characters.
            offset: Start of the range.
            length: Size of the range; defaults to the rest of `chars`.

        Returns:
            True if decode would succeed on the same range.
        """
        ...
