"""Semantic IDs for structured messages.

Many internal IDs are small protobuf messages (a shard number plus a row
key, say). These helpers serialize the message and run the bytes through
a codec. Any object with protobuf's SerializeToString()/ParseFromString()
methods works; protobuf itself is not imported.
"""

from semid.codec import IDCodec


def encode_message(codec: IDCodec, message) -> str:
    return codec.encode(message.SerializeToString())


def decode_message(codec: IDCodec, semantic_id: str, message):
    """Decode semantic_id into message (modified in place) and return it.

    Codec errors propagate before the message is touched.
    """
    raw = codec.decode(semantic_id)
    message.ParseFromString(raw)
    return message
