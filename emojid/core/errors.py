"""
Error types raised by EmojiID generation and parsing.
"""


class EmojiIDError(Exception):
    """Base class for recoverable EmojiID errors"""
    pass


class InvalidFormat(EmojiIDError):
    """Raised when a string does not have the 8-4-4-4-12 layout"""

    def __init__(self, message: str = "emojid: invalid format"):
        super().__init__(message)


class InvalidToken(EmojiIDError):
    """Raised when a well-shaped string contains a unit outside the alphabet"""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"emojid: invalid token (emoji not in alphabet): {token!r}")


class EntropyFailure(EmojiIDError):
    """Raised when the secure random source cannot supply bytes"""

    def __init__(self, message: str = "emojid: failed to read crypto randomness"):
        super().__init__(message)


class AlphabetTooSmall(EmojiIDError):
    """Raised when an alphabet has fewer than 2 entries"""

    def __init__(self, size: int = 0):
        self.size = size
        super().__init__(f"emojid: emoji alphabet must contain at least 2 entries (got {size})")


class EmojiIDPanic(RuntimeError):
    """Unrecoverable failure raised by the must_* convenience wrappers"""
    pass
