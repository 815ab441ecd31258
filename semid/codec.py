"""Semantic ID codec.

Turns opaque binary IDs into short, case-insensitive, URL-safe strings
tagged with a namespace, and back:

    >>> invoices = codec_for_names("billing", "Invoice")
    >>> invoices.encode(bytes([1, 1, 1, 1, 1]))
    'billing-invoice-1802g040'
    >>> invoices.decode("BILLING-invoice-1802G040")
    b'\\x01\\x01\\x01\\x01\\x01'

A codec only decodes IDs carrying its own names, so an invoice ID handed
to the customer codec fails loudly instead of resolving to some other
record.
"""

import logging
from dataclasses import dataclass

from semid import base32
from semid.base32 import MAX_PAYLOAD_LEN
from semid.errors import SemanticIDError
from semid.prefix import build_prefix, fold_case, get_prefix, match_prefix

__all__ = ["IDCodec", "codec_for_names", "get_prefix", "MAX_PAYLOAD_LEN"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IDCodec:
    """Encoder/decoder bound to an ordered list of names.

    Names are case-folded on construction (see prefix.fold_case), so codecs
    built from names that differ only in case compare equal and share IDs.
    Instances are immutable and safe to share between threads.

    `names` is a sequence of strings; use codec_for_names(*names) to pass
    them as arguments.
    """

    names: tuple[str, ...] = ()

    def __post_init__(self):
        if isinstance(self.names, str):
            raise TypeError(f"names must be a sequence of strings, not the string {self.names!r}")
        object.__setattr__(self, "names", tuple(fold_case(name) for name in self.names))

    def get_prefix(self) -> str:
        """The literal prefix every ID of this codec starts with."""
        return build_prefix(self.names)

    def encode(self, value: bytes) -> str:
        try:
            payload = base32.encode(value)
        except SemanticIDError as e:
            logger.debug("refusing to encode %d bytes under %r: %s", len(value), self.get_prefix(), e)
            raise
        return self.get_prefix() + payload

    def decode(self, semantic_id: str) -> bytes:
        start = match_prefix(semantic_id, self.names)
        return base32.decode(semantic_id, start)

    def can_decode(self, semantic_id: str) -> bool:
        """True if decode() would succeed; does not build the payload."""
        try:
            match_prefix(semantic_id, self.names)
        except SemanticIDError as e:
            logger.debug("cannot decode %r: %s", semantic_id, e)
            return False
        return True


def codec_for_names(*names: str) -> IDCodec:
    return IDCodec(names)
