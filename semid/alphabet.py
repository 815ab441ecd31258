"""Semantic ID alphabet.

32 symbols: digits plus lowercase letters, omitting i, l, o, u
(too easy to confuse with 1, 1, 0 and v when read aloud or handwritten):

    0123456789abcdefghjkmnpqrstvwxyz

Decoding is case-insensitive, so the reverse table maps both cases of
every letter to the same symbol value. Anything else maps to INVALID.
"""

ALPHABET = "0123456789abcdefghjkmnpqrstvwxyz"
INVALID = -1


def build_tables(chars: str) -> tuple[str, list[int]]:
    """Build the forward and reverse lookup tables for an alphabet.

    The reverse table is indexed by character code and sized to the
    largest code present, so lookups are a bounds check plus one index.
    Raises ValueError if the alphabet is not exactly 32 characters or
    two characters collide after case folding.
    """
    if len(chars) != 32:
        raise ValueError(f"alphabet must have 32 characters, got {len(chars)}")

    forward = []
    reverse: dict[int, int] = {}
    for i, ch in enumerate(chars):
        lower, upper = ch.lower(), ch.upper()
        if len(lower) != 1 or len(upper) != 1:
            raise ValueError(f"alphabet character {ch!r} has no single-character case forms")
        if ord(lower) in reverse or ord(upper) in reverse:
            raise ValueError(f"duplicate alphabet character {ch!r}")
        reverse[ord(lower)] = i
        reverse[ord(upper)] = i
        forward.append(lower)

    char_to_index = [INVALID] * (max(reverse) + 1)
    for code, i in reverse.items():
        char_to_index[code] = i
    return "".join(forward), char_to_index


def render_tables(chars: str = ALPHABET) -> dict:
    """Forward and reverse tables as plain data, for `semid tables`."""
    forward, reverse = build_tables(chars)
    return {"chars": list(forward), "char_to_index": reverse}


CHARS, CHAR_TO_INDEX = build_tables(ALPHABET)


def symbol_to_char(value: int) -> str:
    return CHARS[value]


def char_to_symbol(ch: str) -> int:
    """Symbol value of ch (either case), or INVALID."""
    code = ord(ch)
    if code < len(CHAR_TO_INDEX):
        return CHAR_TO_INDEX[code]
    return INVALID
