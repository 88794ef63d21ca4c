"""Standard library Base64 codec.

This module wraps Python's base64 module behind the ICodec interface so it
can serve as a reference for the standard alphabet.
"""

import base64
import binascii
from typing import Optional

from basen_encodings.base64 import DecodedSize
from basen_encodings.exceptions import MalformedInputError
from basen_encodings.interfaces.codec import ICodec


class StdlibBase64(ICodec):
    """Standard (RFC 4648) Base64 backed by the base64 module.

    Only the standard alphabet and '=' padding are supported. Decoding
    validates the character set, so anything outside the alphabet fails
    instead of being skipped.
    """

    def encoded_size(self, length: int) -> int:
        """Return the encoded length of `length` bytes."""
        return len(base64.b64encode(bytes(length)))

    def decoded_size(self, chars: str, offset: int = 0, length: Optional[int] = None) -> DecodedSize:
        """Compute the decoded size by decoding the range.

        Args:
            chars: The encoded string.
            offset: Start of the range.
            length: Size of the range; defaults to the rest of `chars`.

        Returns:
            The decoded byte length and the trailing padding count.
        """
        text = _slice(chars, offset, length)
        decoded = self.decode(text)
        return DecodedSize(len(decoded), len(text) - len(text.rstrip("=")))

    def encode(self, data: bytes, offset: int = 0, length: Optional[int] = None) -> str:
        """Encode bytes to a standard base64 string.

        Args:
            data: The bytes to encode.
            offset: Start of the range.
            length: Size of the range; defaults to the rest of `data`.

        Returns:
            A standard base64 encoded string.
        """
        end = len(data) if length is None else offset + length
        return base64.b64encode(bytes(data[offset:end])).decode("ascii")

    def decode(self, chars: str, offset: int = 0, length: Optional[int] = None) -> bytes:
        """Decode a standard base64 string to bytes.

        Args:
            chars: The base64 string to decode.
            offset: Start of the range.
            length: Size of the range; defaults to the rest of `chars`.

        Returns:
            The decoded bytes.

        Raises:
            MalformedInputError: If the string is not valid base64.
        """
        try:
            # validate=True rejects characters outside the alphabet
            return base64.b64decode(_slice(chars, offset, length), validate=True)
        except (binascii.Error, ValueError) as e:
            raise MalformedInputError(str(e)) from e

    def is_valid(self, chars: str, offset: int = 0, length: Optional[int] = None) -> bool:
        """Check whether the range decodes."""
        try:
            self.decode(chars, offset, length)
        except MalformedInputError:
            return False
        return True


def _slice(chars: str, offset: int, length: Optional[int]) -> str:
    end = len(chars) if length is None else offset + length
    return "".join(chars[offset:end])
