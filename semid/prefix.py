"""Semantic ID prefix grammar.

A semantic ID is: <name1>-<name2>-...-<payload>

Each name is a literal, lowercased namespace label ("billing", "invoice")
followed by the separator. The payload is base32 (see semid.base32) and
never contains the separator, so the last "-" always ends the prefix:

    "billing-invoice-1802g040"
     ^^^^^^^^^^^^^^^^ prefix
                     ^^^^^^^^ payload

The whole identifier is case-insensitive. Names and candidates are
case-folded one character at a time (fold_case), never as whole words,
so context rules like Greek final sigma cannot make a name and its
uppercased form fold differently. The separator must match exactly.
"""

from semid.alphabet import INVALID, char_to_symbol
from semid.errors import InvalidCharacterError, MalformedIDError

SEPARATOR = "-"


def fold_case(s: str) -> str:
    """Case-fold s character by character: "ΟΔΟΣ" -> "οδοσ", "Straße" -> "strasse"."""
    return "".join(ch.casefold() for ch in s)


def build_prefix(names) -> str:
    """Concatenate names, each followed by the separator.

    No names gives the empty prefix "" (not a lone separator).
    """
    return "".join(name + SEPARATOR for name in names)


def match_prefix(candidate: str, names) -> int:
    """Check that candidate starts with the given names and return where the payload starts.

    `names` must already be folded with fold_case. A candidate character
    may fold to several name characters ("SS" and "ß" both match "ss").
    The payload after the prefix must be non-empty and consist only of
    alphabet characters.

    Raises MalformedIDError if a name or separator is missing, mismatched
    or cut short, or if nothing follows the prefix; InvalidCharacterError
    for the first non-alphabet payload character.
    """
    n = len(candidate)
    pos = 0
    for name in names:
        i = 0
        while i < len(name):
            folded = candidate[pos].casefold() if pos < n else ""
            if not folded or not name.startswith(folded, i):
                raise MalformedIDError(f"semantic ID {candidate!r} does not start with name {name!r}")
            i += len(folded)
            pos += 1
        if pos >= n or candidate[pos] != SEPARATOR:
            raise MalformedIDError(f"semantic ID {candidate!r} is missing {SEPARATOR!r} after name {name!r}")
        pos += 1

    if pos == n:
        raise MalformedIDError(f"semantic ID {candidate!r} has no payload")

    for i in range(pos, n):
        if char_to_symbol(candidate[i]) == INVALID:
            raise InvalidCharacterError(candidate[i], i)
    return pos


def get_prefix(maybe_semantic_id: str) -> str:
    """Best-effort prefix of any string that looks like a semantic ID.

    Returns everything up to and including the last separator, case-folded
    the same way codec names are.
    A string with no separator, or whose only separator is the first
    character, has no prefix. The payload is not validated:
      "a-Bb-cC123-1" -> "a-bb-cc123-"
      "123"          -> ""
      "-abc"         -> ""
    """
    last = maybe_semantic_id.rfind(SEPARATOR)
    if last <= 0:
        return ""
    return fold_case(maybe_semantic_id[:last + 1])
