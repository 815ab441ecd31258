"""Errors raised by the semantic ID codec.

All of them derive from ValueError: a bad identifier or payload is a bad
argument, and callers that already catch ValueError keep working.
"""


class SemanticIDError(ValueError):
    pass


class EmptyPayloadError(SemanticIDError):
    def __init__(self):
        super().__init__("can't encode empty value to semantic ID")


class PayloadTooLargeError(SemanticIDError):
    def __init__(self, size: int, limit: int):
        super().__init__(f"value of {size} bytes is too big to be encoded into semantic ID (limit {limit})")
        self.size = size
        self.limit = limit


class InvalidCharacterError(SemanticIDError):
    def __init__(self, char: str, position: int):
        super().__init__(f"semantic ID contains invalid character {char!r} at position {position}")
        self.char = char
        self.position = position


class MalformedIDError(SemanticIDError):
    pass
