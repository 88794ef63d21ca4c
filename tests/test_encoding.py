"""Tests for the argument-checked Base64Encoding.

This module tests the public entry points:
- Construction, naming and alphabet validation
- Round trips including the empty encoding
- Range and capacity checks
- Logging of rejected input
"""

from __future__ import annotations

import logging

import pytest

from basen_encodings import (
    CUSTOM_NAME,
    DEFAULT_NAME,
    STANDARD_ALPHABET,
    URLSAFE_ALPHABET,
    Base64Encoding,
    DecodedSize,
    EncodingConfig,
    InvalidAlphabetError,
    MalformedInputError,
    setup_logging,
    standard,
)
from tests.implementation import get_entropy


@pytest.fixture
def encoding() -> Base64Encoding:
    """Create a standard encoding."""
    return Base64Encoding()


def test_standard_encoding_properties(encoding: Base64Encoding) -> None:
    """The default encoding is RFC 4648 Base64."""
    assert encoding.name == DEFAULT_NAME
    assert encoding.alphabet == STANDARD_ALPHABET
    assert encoding.padding == "="
    assert encoding.is_padding_required is True
    assert encoding.strict is False
    assert repr(encoding) == "Base64Encoding(name='Standard Base64 Encoding')"


def test_names_custom_encodings() -> None:
    """Custom alphabets get a generic name unless one is given."""
    assert Base64Encoding(URLSAFE_ALPHABET).name == CUSTOM_NAME
    assert Base64Encoding(STANDARD_ALPHABET, "*").name == CUSTOM_NAME
    assert Base64Encoding(URLSAFE_ALPHABET, name="base64url").name == "base64url"


def test_accepts_alphabet_as_character_sequence() -> None:
    """A list of single characters works like a string."""
    encoding = Base64Encoding(list(STANDARD_ALPHABET))

    assert encoding.alphabet == STANDARD_ALPHABET
    assert encoding.name == DEFAULT_NAME


@pytest.mark.parametrize(
    "alphabet,padding",
    [
        (STANDARD_ALPHABET[:63], "="),
        (STANDARD_ALPHABET + "-", "="),
        ("A" + STANDARD_ALPHABET[1:63] + "A", "="),
        (STANDARD_ALPHABET, "A"),
        (STANDARD_ALPHABET, "=="),
        (STANDARD_ALPHABET, ""),
        (["AB"] + list(STANDARD_ALPHABET[2:]) + ["-"], "="),
        (None, "="),
    ],
)
def test_rejects_invalid_alphabets(alphabet, padding) -> None:
    """Wrong size, duplicates and clashing padding are refused."""
    with pytest.raises(InvalidAlphabetError):
        Base64Encoding(alphabet, padding)


def test_rejects_non_string_name() -> None:
    """Names must be strings."""
    with pytest.raises(TypeError):
        Base64Encoding(name=5)  # type: ignore[arg-type]


def test_builds_from_config() -> None:
    """EncodingConfig carries every constructor option."""
    config = EncodingConfig(alphabet=URLSAFE_ALPHABET, name="base64url", strict=True)

    encoding = Base64Encoding.from_config(config)

    assert encoding.name == "base64url"
    assert encoding.alphabet == URLSAFE_ALPHABET
    assert encoding.strict is True
    assert encoding.encode(b"\xfb\xff") == "-_8="


def test_standard_is_shared() -> None:
    """standard() hands out one read-only instance."""
    assert standard() is standard()
    assert standard().name == DEFAULT_NAME


def test_round_trips_every_length(encoding: Base64Encoding) -> None:
    """All byte strings, including the empty one, survive a round trip."""
    for length in range(0, 100):
        data = get_entropy(length)
        text = encoding.encode(data)

        assert encoding.is_valid(text)
        assert encoding.decoded_size(text).byte_length == length
        assert encoding.decode(text) == data


def test_empty_range_is_the_empty_encoding(encoding: Base64Encoding) -> None:
    """Zero-length ranges are accepted in both directions."""
    assert encoding.encode(b"") == ""
    assert encoding.decode("") == b""
    assert encoding.decoded_size("") == DecodedSize(0, 0)
    assert encoding.is_valid("") is True
    assert encoding.encode(b"foo", 3) == ""
    assert encoding.decode("Zm9v", 2, 0) == b""


def test_encodes_and_decodes_ranges(encoding: Base64Encoding) -> None:
    """Offsets and lengths select a slice of the input."""
    assert encoding.encode(b"__foobar__", 2, 6) == "Zm9vYmFy"
    assert encoding.encode(b"__foobar", 2) == "Zm9vYmFy"
    assert encoding.decode("..Zm9vYmFy..", 2, 8) == b"foobar"
    assert encoding.decode("..Zm8=", 2) == b"fo"
    assert encoding.is_valid("..Zm8=", 2)
    assert not encoding.is_valid("..Zm8=")


def test_encode_into_checks_capacity(encoding: Base64Encoding) -> None:
    """The destination must hold the whole encoding."""
    out = [""] * 6

    assert encoding.encode_into(b"foo", out, out_offset=2) == 4
    assert out[2:] == ["Z", "m", "9", "v"]

    with pytest.raises(ValueError):
        encoding.encode_into(b"foo", [""] * 3)
    with pytest.raises(ValueError):
        encoding.encode_into(b"foo", [""] * 6, out_offset=3)

    assert encoding.encode_into(b"", []) == 0


def test_decode_into_checks_capacity(encoding: Base64Encoding) -> None:
    """A short destination is refused before anything is written."""
    out = bytearray(4)

    assert encoding.decode_into("Zm9v", out, out_offset=1) == 3
    assert out == bytearray(b"\x00foo")

    short = bytearray(2)
    with pytest.raises(ValueError):
        encoding.decode_into("Zm9v", short)
    assert short == bytearray(2)

    assert encoding.decode_into("", bytearray()) == 0


@pytest.mark.parametrize(
    "offset,length,error",
    [
        (4, None, ValueError),
        (0, 5, ValueError),
        (-1, None, ValueError),
        (0, -1, ValueError),
        (2, 2, ValueError),
        ("1", None, TypeError),
        (0, 1.5, TypeError),
    ],
)
def test_rejects_out_of_range_arguments(encoding: Base64Encoding, offset, length, error) -> None:
    """Bad ranges raise builtin argument errors on every entry point."""
    with pytest.raises(error):
        encoding.encode(b"foo", offset, length)
    with pytest.raises(error):
        encoding.decode("Zm9", offset, length)
    with pytest.raises(error):
        encoding.is_valid("Zm9", offset, length)


def test_rejects_text_as_encode_input(encoding: Base64Encoding) -> None:
    """Only bytes-like data can be encoded."""
    with pytest.raises(TypeError):
        encoding.encode("foo")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        encoding.encode(12)  # type: ignore[arg-type]


def test_encodes_buffer_protocol_objects(encoding: Base64Encoding) -> None:
    """Objects exposing the buffer protocol are read as bytes."""
    import array

    data = array.array("B", b"foobar")

    assert encoding.encode(data) == "Zm9vYmFy"  # type: ignore[arg-type]
    assert encoding.encode(memoryview(b"foobar"), 3) == "YmFy"


def test_encoded_size_validates_length(encoding: Base64Encoding) -> None:
    """Sizes are only computed for non-negative ints."""
    assert encoding.encoded_size(0) == 0
    assert encoding.encoded_size(4) == 8

    with pytest.raises(ValueError):
        encoding.encoded_size(-1)
    with pytest.raises(TypeError):
        encoding.encoded_size(True)
    with pytest.raises(TypeError):
        encoding.encoded_size(3.0)  # type: ignore[arg-type]


@pytest.mark.parametrize("text", ["A", "AB=A", "ABC$"])
def test_rejects_malformed_input(encoding: Base64Encoding, text: str) -> None:
    """Malformed text fails decode and the validity check."""
    assert encoding.is_valid(text) is False

    with pytest.raises(MalformedInputError):
        encoding.decode(text)
    with pytest.raises(MalformedInputError):
        encoding.decode_into(text, bytearray(8))


def test_logs_rejected_input(encoding: Base64Encoding, caplog: pytest.LogCaptureFixture) -> None:
    """Rejections are logged at debug level."""
    caplog.set_level(logging.DEBUG, logger="basen_encodings.encoding")

    with pytest.raises(MalformedInputError):
        encoding.decode("ABC$")

    assert "rejected malformed input" in caplog.text
    assert "invalid character" in caplog.text


def test_strict_encoding_rejects_unused_bits() -> None:
    """The strict option reaches the codec."""
    encoding = Base64Encoding(strict=True)

    assert encoding.decode("Zg==") == b"f"
    assert encoding.is_valid("Zh==") is False
    with pytest.raises(MalformedInputError):
        encoding.decode("Zh==")


def test_setup_logging_sets_package_level() -> None:
    """setup_logging configures the package loggers."""
    logger = logging.getLogger("basen_encodings")
    previous = logger.level
    try:
        setup_logging(logging.DEBUG)
        assert logger.level == logging.DEBUG
        assert logging.getLogger("basen_encodings.encoding").level == logging.DEBUG
    finally:
        logger.setLevel(previous)
        logging.getLogger("basen_encodings.encoding").setLevel(logging.NOTSET)


def test_decode_into_leaves_buffer_untouched_on_invalid_character(encoding: Base64Encoding) -> None:
    """A bad character in a later quartet does not leak earlier quartets."""
    out = bytearray(8)

    with pytest.raises(MalformedInputError, match="invalid character"):
        encoding.decode_into("Zm9vZm9$", out, out_offset=1)

    assert out == bytearray(8)


def test_decode_into_fills_integer_lists(encoding: Base64Encoding) -> None:
    """Any mutable sequence of ints can receive decoded bytes."""
    out = [0] * 7

    assert encoding.decode_into("Zm9vYmE=", out, out_offset=2) == 5
    assert out == [0, 0] + list(b"fooba")


def test_encodes_non_contiguous_views(encoding: Base64Encoding) -> None:
    """Strided views are read in element order."""
    view = memoryview(b"ffoooo")[::2]

    assert encoding.encode(view) == "Zm9v"
    assert encoding.encode(view, 1) == "b28="


def test_reports_alphabet_of_custom_encoding() -> None:
    """Alphabet and padding come from the codec's lookup table."""
    encoding = Base64Encoding(tuple(URLSAFE_ALPHABET), "*")

    assert encoding.alphabet == URLSAFE_ALPHABET
    assert encoding.padding == "*"
    assert encoding.encode(b"f") == "Zg**"
