"""Padding-free base32 used for semantic ID payloads.

Two differences from RFC 4648:

1. Alphabet: "0123456789abcdefghjkmnpqrstvwxyz", see semid.alphabet.

2. Bit order: RFC 4648 extracts 5-bit groups left-to-right from the
   MSB of each byte. Here the input is treated as one little-endian bit
   stream: symbol i holds bits [5*i, 5*i + 5), so a symbol straddling
   two bytes takes its low bits from the high end of the earlier byte
   and its high bits from the low end of the next one.

No padding characters are emitted. The last symbol of an input whose
bit count is not a multiple of 5 holds the 1-4 leftover high bits of
the final byte; its unused high bits are zero.

Output length: ceil(n*8/5) characters for n input bytes.
  1 byte   -> 2 chars
  5 bytes  -> 8 chars
  16 bytes -> 26 chars (a UUID)

The wire format does not record the byte count. Decoding n symbols
always yields floor(n*5/8) bytes, which is exact for every length the
encoder produces. Symbol counts the encoder never produces (3, 6, ...)
still decode without error; callers that care must check the length.
"""

from semid.alphabet import CHARS, INVALID, char_to_symbol
from semid.errors import EmptyPayloadError, InvalidCharacterError, PayloadTooLargeError

MAX_PAYLOAD_LEN = 256  # bytes


def encoded_size(n: int) -> int:
    return (n * 8 + 4) // 5  # ceil(n*8/5)


def decoded_size(n: int) -> int:
    return n * 5 // 8


def encode(data: bytes) -> str:
    """Encode 1..MAX_PAYLOAD_LEN bytes to base32 symbols.

    Walks the bit stream upward from offset 0. At each position i,
    extracts 5 bits starting at bit offset i*5, which may span two
    adjacent input bytes.
    """
    n = len(data)
    if n == 0:
        raise EmptyPayloadError()
    if n > MAX_PAYLOAD_LEN:
        raise PayloadTooLargeError(n, MAX_PAYLOAD_LEN)

    result = []
    for i in range(encoded_size(n)):
        b = i * 5
        j = b // 8    # which input byte
        k = b % 8     # bit offset within that byte
        c = data[j] >> k
        if j + 1 < n:
            c |= data[j + 1] << (8 - k)  # grab remaining bits from next byte
        result.append(CHARS[c & 0x1F])
    return "".join(result)


def decode(s: str, start: int = 0, end: int | None = None) -> bytes:
    """Decode the symbols s[start:end] to bytes.

    Every character is validated before any output is produced; the
    first invalid one raises InvalidCharacterError with its index in s.
    """
    if end is None:
        end = len(s)

    digits = []
    for pos in range(start, end):
        digit = char_to_symbol(s[pos])
        if digit == INVALID:
            raise InvalidCharacterError(s[pos], pos)
        digits.append(digit)

    out_len = decoded_size(len(digits))
    result = bytearray(out_len)
    for i, digit in enumerate(digits):
        b = i * 5
        j = b // 8
        k = b % 8
        if j >= out_len:
            break  # bits past the last whole byte are dropped
        result[j] |= (digit << k) & 0xFF
        carry = digit >> (8 - k)
        if carry and j + 1 < out_len:
            result[j + 1] |= carry
    return bytes(result)
