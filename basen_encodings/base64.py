"""Base64 bit-packing engine.

This module provides the Base64Codec class, which encodes byte ranges into
alphabet characters and decodes character ranges back into bytes, together
with the exact size computations and the well-formedness check used ahead of
a decode.

The codec trusts its arguments: alphabet, padding and (offset, length) ranges
are validated by Base64Encoding before they get here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import MutableSequence, Optional, Sequence

from basen_encodings.alphabet import PADDING, AlphabetTable
from basen_encodings.config import STANDARD_ALPHABET, STANDARD_PADDING
from basen_encodings.exceptions import MalformedInputError
from basen_encodings.interfaces.codec import ICodec

# Low bits of the last data character that carry no payload, by padding count.
_UNUSED_BITS = {1: 0x03, 2: 0x0F}


@dataclass(frozen=True)
class DecodedSize:
    """Result of a decode size computation.

    Attributes:
        byte_length: Exact number of bytes the range decodes to.
        padding_count: Trailing padding characters found (0, 1 or 2).
    """

    byte_length: int
    padding_count: int


class Base64Codec(ICodec):
    """Base64 encoder/decoder over a configurable alphabet.

    Every 3 input bytes become 4 characters, most significant 6 bits first,
    as in RFC 4648. A trailing partial group is completed with padding.

    Instances are read-only after construction and may be shared freely.
    """

    def __init__(
        self,
        alphabet: str = STANDARD_ALPHABET,
        padding: str = STANDARD_PADDING,
        strict: bool = False,
    ) -> None:
        """Initialize a codec.

        Args:
            alphabet: 64 distinct characters, indexed by 6-bit value.
            padding: The padding character.
            strict: Reject encodings whose unused trailing bits are nonzero.
                By default such bits are discarded.
        """
        self._table = AlphabetTable(alphabet, padding)
        self._strict = strict

    @property
    def table(self) -> AlphabetTable:
        return self._table

    @property
    def strict(self) -> bool:
        return self._strict

    # -- sizes --------------------------------------------------------------

    @staticmethod
    def encoded_size(length: int) -> int:
        """Return the exact encoded length of `length` bytes, padding included."""
        return (length + 2) // 3 * 4

    def decoded_size(
        self, chars: Sequence[str], offset: int = 0, length: Optional[int] = None
    ) -> DecodedSize:
        """Compute the exact decoded length of an encoded range.

        Only padding placement is checked here; characters outside the
        alphabet are reported by decode.

        Args:
            chars: The encoded characters.
            offset: Start of the range.
            length: Size of the range; defaults to the rest of `chars`.

        Returns:
            The decoded byte length and the trailing padding count.

        Raises:
            MalformedInputError: If the length is not a positive multiple of 4
                or padding appears outside the final two positions.
        """
        if length is None:
            length = len(chars) - offset
        if length <= 0 or length % 4 != 0:
            raise MalformedInputError(
                f"encoded length {length} is not a positive multiple of 4"
            )

        end = offset + length
        pad = self._table.padding

        padding_count = 0
        if chars[end - 1] == pad:
            padding_count = 2 if chars[end - 2] == pad else 1
        elif chars[end - 2] == pad:
            raise MalformedInputError(f"padding followed by data at index {end - 2}")

        for i in range(offset, end - padding_count):
            if chars[i] == pad:
                raise MalformedInputError(f"unexpected padding at index {i}")

        return DecodedSize((length // 4) * 3 - padding_count, padding_count)

    # -- encode -------------------------------------------------------------

    def encode_into(
        self,
        data: Sequence[int],
        offset: int,
        length: int,
        out: MutableSequence[str],
        out_offset: int,
    ) -> int:
        """Encode a byte range into a character buffer.

        Args:
            data: Source bytes (bytes, bytearray or memoryview).
            offset: Start of the source range.
            length: Number of bytes to encode.
            out: Destination with room for encoded_size(length) characters
                from `out_offset`.
            out_offset: First destination index to write.

        Returns:
            The number of characters written.
        """
        symbols = self._table.alphabet
        pad = self._table.padding

        pos = out_offset
        full_end = offset + length - length % 3
        for i in range(offset, full_end, 3):
            n = (data[i] << 16) | (data[i + 1] << 8) | data[i + 2]
            out[pos] = symbols[n >> 18]
            out[pos + 1] = symbols[(n >> 12) & 0x3F]
            out[pos + 2] = symbols[(n >> 6) & 0x3F]
            out[pos + 3] = symbols[n & 0x3F]
            pos += 4

        remainder = length % 3
        if remainder:
            n = data[full_end] << 16
            if remainder == 2:
                n |= data[full_end + 1] << 8
            out[pos] = symbols[n >> 18]
            out[pos + 1] = symbols[(n >> 12) & 0x3F]
            out[pos + 2] = symbols[(n >> 6) & 0x3F] if remainder == 2 else pad
            out[pos + 3] = pad
            pos += 4

        return pos - out_offset

    def encode(
        self, data: Sequence[int], offset: int = 0, length: Optional[int] = None
    ) -> str:
        """Encode a byte range and return the text."""
        if length is None:
            length = len(data) - offset
        out = [""] * self.encoded_size(length)
        self.encode_into(data, offset, length, out, 0)
        return "".join(out)

    # -- decode -------------------------------------------------------------

    def decode_into(
        self,
        chars: Sequence[str],
        offset: int,
        length: int,
        padding_count: int,
        out: MutableSequence[int],
        out_offset: int,
    ) -> int:
        """Decode a character range into a byte buffer.

        `padding_count` must be the one reported by decoded_size for the same
        range. Quartets are checked before anything is written for them.

        Args:
            chars: The encoded characters.
            offset: Start of the range.
            length: Size of the range, a positive multiple of 4.
            padding_count: Trailing padding characters in the range.
            out: Destination with room for the decoded bytes from `out_offset`.
            out_offset: First destination index to write.

        Returns:
            The number of bytes written.

        Raises:
            MalformedInputError: If a character is outside the alphabet,
                padding is misplaced, or (strict mode) unused bits are set.
        """
        lookup = self._table.value
        end = offset + length
        full_end = end - 4 if padding_count else end

        pos = out_offset
        for i in range(offset, full_end, 4):
            a = lookup(chars[i])
            b = lookup(chars[i + 1])
            c = lookup(chars[i + 2])
            d = lookup(chars[i + 3])
            if a < 0 or b < 0 or c < 0 or d < 0:
                self._reject(chars, i, i + 4)
            n = (a << 18) | (b << 12) | (c << 6) | d
            out[pos] = n >> 16
            out[pos + 1] = (n >> 8) & 0xFF
            out[pos + 2] = n & 0xFF
            pos += 3

        if padding_count:
            i = full_end
            data_end = end - padding_count
            for j in range(data_end, end):
                if lookup(chars[j]) != PADDING:
                    raise MalformedInputError(f"expected padding at index {j}")

            a = lookup(chars[i])
            b = lookup(chars[i + 1])
            c = lookup(chars[i + 2]) if padding_count == 1 else 0
            if a < 0 or b < 0 or c < 0:
                self._reject(chars, i, data_end)
            self._check_unused_bits(c if padding_count == 1 else b, padding_count, data_end - 1)

            n = (a << 18) | (b << 12) | (c << 6)
            out[pos] = n >> 16
            if padding_count == 1:
                out[pos + 1] = (n >> 8) & 0xFF
            pos += 3 - padding_count

        return pos - out_offset

    def decode(
        self, chars: Sequence[str], offset: int = 0, length: Optional[int] = None
    ) -> bytes:
        """Decode a character range and return the bytes.

        Raises:
            MalformedInputError: If the range is not a well-formed encoding.
        """
        if length is None:
            length = len(chars) - offset
        size = self.decoded_size(chars, offset, length)
        out = bytearray(size.byte_length)
        self.decode_into(chars, offset, length, size.padding_count, out, 0)
        return bytes(out)

    # -- validation ---------------------------------------------------------

    def is_valid(
        self, chars: Sequence[str], offset: int = 0, length: Optional[int] = None
    ) -> bool:
        """Check whether a range is a well-formed encoding without decoding it.

        Never raises; anything decode would reject yields False.
        """
        try:
            if length is None:
                length = len(chars) - offset
            size = self.decoded_size(chars, offset, length)

            lookup = self._table.value
            data_end = offset + length - size.padding_count
            for i in range(offset, data_end):
                if lookup(chars[i]) < 0:
                    return False

            if size.padding_count:
                self._check_unused_bits(
                    lookup(chars[data_end - 1]), size.padding_count, data_end - 1
                )
        except (MalformedInputError, IndexError, TypeError):
            return False

        return True

    def _check_unused_bits(self, value: int, padding_count: int, index: int) -> None:
        if self._strict and value & _UNUSED_BITS[padding_count]:
            raise MalformedInputError(f"nonzero unused bits in character at index {index}")

    def _reject(self, chars: Sequence[str], start: int, end: int) -> None:
        lookup = self._table.value
        for i in range(start, end):
            value = lookup(chars[i])
            if value == PADDING:
                raise MalformedInputError(f"unexpected padding at index {i}")
            if value < 0:
                raise MalformedInputError(f"invalid character {chars[i]!r} at index {i}")

    def __repr__(self) -> str:
        return f"Base64Codec(strict={self._strict})"
