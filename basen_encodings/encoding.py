"""Argument-checked Base64 encodings.

This module provides Base64Encoding, the public entry point of the package.
It validates alphabets at construction and every buffer range on each call,
then hands the work to a Base64Codec.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import MutableSequence, Optional, Sequence, Union

from basen_encodings.base64 import Base64Codec, DecodedSize
from basen_encodings.config import (
    CUSTOM_NAME,
    DEFAULT_NAME,
    STANDARD_ALPHABET,
    STANDARD_PADDING,
    EncodingConfig,
)
from basen_encodings.exceptions import MalformedInputError
from basen_encodings.interfaces.codec import ICodec
from basen_encodings.validation import check_alphabet, check_range

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class Base64Encoding(ICodec):
    """A Base64 encoding with its own alphabet and padding character.

    The default instance is standard Base64 (RFC 4648). Any 64 distinct
    characters and a separate padding character may be used instead, giving a
    non-standard but self-consistent encoding.

    Unlike the bare codec, a zero-length range is accepted everywhere and
    stands for the empty encoding, so every byte string round-trips.

    Example:
        >>> encoding = Base64Encoding()
        >>> encoding.encode(b"foobar")
        'Zm9vYmFy'
        >>> encoding.decode("Zg==")
        b'f'
    """

    def __init__(
        self,
        alphabet: Union[str, Sequence[str]] = STANDARD_ALPHABET,
        padding: str = STANDARD_PADDING,
        name: Optional[str] = None,
        *,
        strict: bool = False,
    ) -> None:
        """Initialize an encoding.

        Args:
            alphabet: 64 distinct characters, as a string or a sequence of
                single-character strings.
            padding: The padding character; must not occur in the alphabet.
            name: Human-readable name. Defaults to the standard name for the
                RFC 4648 alphabet and padding, and a generic one otherwise.
            strict: Reject encodings whose unused trailing bits are nonzero.

        Raises:
            InvalidAlphabetError: If the alphabet or padding is unusable.
            TypeError: If name is not a string.
        """
        alphabet = check_alphabet(alphabet, padding)

        if name is None:
            standard = alphabet == STANDARD_ALPHABET and padding == STANDARD_PADDING
            name = DEFAULT_NAME if standard else CUSTOM_NAME
        elif not isinstance(name, str):
            raise TypeError(f"name must be a str, not {type(name).__name__}")
        self._name = name

        self._codec = Base64Codec(alphabet, padding, strict=strict)
        logger.debug("created %s (strict=%s)", name, strict)

    @classmethod
    def from_config(cls, config: EncodingConfig) -> Base64Encoding:
        """Create an encoding from an EncodingConfig.

        Args:
            config: The encoding configuration.

        Returns:
            The configured encoding.
        """
        return cls(config.alphabet, config.padding, config.name, strict=config.strict)

    @property
    def name(self) -> str:
        return self._name

    @property
    def alphabet(self) -> str:
        return self._codec.table.alphabet

    @property
    def padding(self) -> str:
        return self._codec.table.padding

    @property
    def strict(self) -> bool:
        return self._codec.strict

    @property
    def is_padding_required(self) -> bool:
        """Always True for Base64."""
        return True

    def encoded_size(self, length: int) -> int:
        """Return the exact encoded length of `length` bytes.

        Raises:
            TypeError: If length is not an int.
            ValueError: If length is negative.
        """
        if not isinstance(length, int) or isinstance(length, bool):
            raise TypeError(f"length must be an int, not {type(length).__name__}")
        if length < 0:
            raise ValueError(f"length {length} is negative")
        return self._codec.encoded_size(length)

    def encode(
        self, data: BytesLike, offset: int = 0, length: Optional[int] = None
    ) -> str:
        """Encode a byte range to text.

        Args:
            data: The bytes to encode.
            offset: Start of the range.
            length: Size of the range; defaults to the rest of `data`.

        Returns:
            The encoded text.
        """
        data = _as_bytes(data)
        length = check_range(len(data), offset, length)
        if length == 0:
            return ""
        return self._codec.encode(data, offset, length)

    def encode_into(
        self,
        data: BytesLike,
        out: MutableSequence[str],
        offset: int = 0,
        length: Optional[int] = None,
        out_offset: int = 0,
    ) -> int:
        """Encode a byte range into an existing character buffer.

        Args:
            data: The bytes to encode.
            out: Destination buffer, typically a list of characters.
            offset: Start of the source range.
            length: Size of the source range; defaults to the rest of `data`.
            out_offset: First destination index to write.

        Returns:
            The number of characters written.

        Raises:
            ValueError: If `out` lacks room for the encoded characters.
        """
        data = _as_bytes(data)
        length = check_range(len(data), offset, length)
        check_range(len(out), out_offset, self._codec.encoded_size(length))
        if length == 0:
            return 0
        return self._codec.encode_into(data, offset, length, out, out_offset)

    def decoded_size(
        self, chars: Sequence[str], offset: int = 0, length: Optional[int] = None
    ) -> DecodedSize:
        """Compute the exact decoded size of an encoded range.

        Raises:
            MalformedInputError: If the range is not well formed.
        """
        length = check_range(len(chars), offset, length)
        if length == 0:
            return DecodedSize(0, 0)
        return self._checked(self._codec.decoded_size, chars, offset, length)

    def decode(
        self, chars: Sequence[str], offset: int = 0, length: Optional[int] = None
    ) -> bytes:
        """Decode an encoded range to bytes.

        Args:
            chars: The encoded text.
            offset: Start of the range.
            length: Size of the range; defaults to the rest of `chars`.

        Returns:
            The decoded bytes.

        Raises:
            MalformedInputError: If the range is not well formed.
        """
        length = check_range(len(chars), offset, length)
        if length == 0:
            return b""
        return self._checked(self._codec.decode, chars, offset, length)

    def decode_into(
        self,
        chars: Sequence[str],
        out: MutableSequence[int],
        offset: int = 0,
        length: Optional[int] = None,
        out_offset: int = 0,
    ) -> int:
        """Decode an encoded range into an existing byte buffer.

        Nothing is written to `out` unless the whole range decodes: a bad
        length, misplaced padding, an invalid character or a short `out`
        all leave it untouched.

        Args:
            chars: The encoded text.
            out: Destination buffer, typically a bytearray.
            offset: Start of the source range.
            length: Size of the source range; defaults to the rest of `chars`.
            out_offset: First destination index to write.

        Returns:
            The number of bytes written.

        Raises:
            MalformedInputError: If the range is not well formed.
            ValueError: If `out` lacks room for the decoded bytes.
        """
        length = check_range(len(chars), offset, length)
        if length == 0:
            check_range(len(out), out_offset, 0)
            return 0

        size = self._checked(self._codec.decoded_size, chars, offset, length)
        check_range(len(out), out_offset, size.byte_length)

        # decode aside so a failing quartet cannot leave earlier ones in `out`
        decoded = bytearray(size.byte_length)
        self._checked(
            self._codec.decode_into, chars, offset, length, size.padding_count, decoded, 0
        )
        out[out_offset : out_offset + size.byte_length] = decoded
        return size.byte_length

    def is_valid(
        self, chars: Sequence[str], offset: int = 0, length: Optional[int] = None
    ) -> bool:
        """Check whether a range would decode successfully.

        Malformed content yields False; only a bad range raises.

        Raises:
            TypeError: If offset or length is not an int.
            ValueError: If the range exceeds `chars`.
        """
        length = check_range(len(chars), offset, length)
        if length == 0:
            return True
        return self._codec.is_valid(chars, offset, length)

    def _checked(self, operation, *args):
        try:
            return operation(*args)
        except MalformedInputError as e:
            logger.debug("%s rejected malformed input: %s", self._name, e)
            raise

    def __repr__(self) -> str:
        return f"Base64Encoding(name={self._name!r})"


@lru_cache(maxsize=None)
def standard() -> Base64Encoding:
    """Return the shared standard (RFC 4648) encoding."""
    return Base64Encoding()


def _as_bytes(data: BytesLike) -> BytesLike:
    if isinstance(data, (bytes, bytearray)):
        return data
    if isinstance(data, str):
        raise TypeError("data must be bytes-like, not str")
    # anything else must expose the buffer protocol
    view = memoryview(data)
    if not view.contiguous:
        return bytes(view)
    return view.cast("B")
