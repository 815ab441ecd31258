"""Tests for padding-free base32 encoding/decoding."""

import random

import pytest

from semid.base32 import MAX_PAYLOAD_LEN, decode, decoded_size, encode, encoded_size
from semid.errors import EmptyPayloadError, InvalidCharacterError, PayloadTooLargeError


@pytest.mark.parametrize("data, expected", [
    (bytes([0]), "00"),
    (bytes([1]), "10"),
    (bytes([255]), "z7"),
    (bytes([1, 1, 1, 1, 1]), "1802g040"),
    # 16 bits: the final symbol carries only the top bit of the last byte
    (bytes([0x00, 0xFF]), "0rz1"),
])
def test_known_vectors(data, expected):
    assert encode(data) == expected
    assert decode(expected) == data


def test_roundtrip_all_sizes():
    rng = random.Random(1234)
    for n in range(1, MAX_PAYLOAD_LEN + 1):
        data = bytes(rng.randrange(256) for _ in range(n))
        assert decode(encode(data)) == data


def test_roundtrip_extremes():
    for data in [b"\x00" * 20, b"\xff" * 32, b"\xff" * MAX_PAYLOAD_LEN]:
        assert decode(encode(data)) == data


def test_encode_length():
    # output length = ceil(n*8/5)
    for n in range(1, 40):
        data = bytes(range(n))
        assert len(encode(data)) == encoded_size(n) == (n * 8 + 4) // 5


def test_decoded_size_inverts_encoded_size():
    for n in range(1, MAX_PAYLOAD_LEN + 1):
        assert decoded_size(encoded_size(n)) == n


def test_encode_empty():
    with pytest.raises(EmptyPayloadError):
        encode(b"")


def test_encode_size_limit():
    assert len(encode(b"\x01" * MAX_PAYLOAD_LEN)) == encoded_size(MAX_PAYLOAD_LEN)
    with pytest.raises(PayloadTooLargeError) as exc_info:
        encode(b"\x01" * (MAX_PAYLOAD_LEN + 1))
    assert exc_info.value.size == MAX_PAYLOAD_LEN + 1
    assert exc_info.value.limit == MAX_PAYLOAD_LEN


def test_decode_case_insensitive():
    assert decode("Z7") == b"\xff"
    assert decode("1802G040") == bytes([1, 1, 1, 1, 1])


def test_decode_invalid_char():
    with pytest.raises(InvalidCharacterError, match="invalid character '!' at position 2"):
        decode("00!")


@pytest.mark.parametrize("ch", ["i", "l", "o", "u", "I", "L", "O", "U", "-", " ", "é"])
def test_decode_rejects_excluded_chars(ch):
    with pytest.raises(InvalidCharacterError):
        decode("0" + ch)


def test_decode_validates_every_char():
    # the trailing symbol contributes no whole byte but is still checked
    with pytest.raises(InvalidCharacterError) as exc_info:
        decode("000!")
    assert exc_info.value.position == 3


def test_decode_range():
    assert decode("xx-10", 3) == b"\x01"
    assert decode("10zz", 0, 2) == b"\x01"


def test_decode_length_is_not_self_describing():
    # symbol counts the encoder never produces still decode
    assert decode("0") == b""
    assert decode("000") == b"\x00"
    # the unused high bits of a final symbol are dropped
    assert decode("zz") == decode("z7") == b"\xff"
