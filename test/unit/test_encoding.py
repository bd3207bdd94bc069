"""Unit tests for random bytes text encodings."""

from random_generator.encoding import encode
from random_generator.models import Encoding


def test_encode_hex_is_lowercase_without_separators() -> None:
    assert encode(bytes([0x00, 0xFF]), Encoding.HEX) == "00ff"
    assert encode(bytes([0xAB, 0xCD, 0xEF]), Encoding.HEX) == "abcdef"


def test_encode_base64_is_padded() -> None:
    assert encode(bytes([0x00, 0xFF]), Encoding.BASE64) == "AP8="
    assert encode(b"\x01", Encoding.BASE64) == "AQ=="


def test_encode_binary_maps_each_byte_to_one_character() -> None:
    """Latin-1 mapping keeps one character per byte, including non-ASCII values."""
    data = bytes(range(256))

    encoded = encode(data, Encoding.BINARY)

    assert len(encoded) == 256
    assert [ord(char) for char in encoded] == list(range(256))


def test_encode_accepts_encoding_names() -> None:
    assert encode(b"\x0f", "hex") == "0f"  # type: ignore[arg-type]
