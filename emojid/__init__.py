"""
UUID-shaped identifiers made of emoji.

    >>> import emojid
    >>> s = emojid.new_string()
    >>> emojid.validate(s)
    True
"""

from .core.errors import (
    AlphabetTooSmall,
    EmojiIDError,
    EmojiIDPanic,
    EntropyFailure,
    InvalidFormat,
    InvalidToken,
)
from .models.alphabet import DEFAULT_ALPHABET, DELIMITER
from .models.identifier import GROUP_SIZES, TOKEN_COUNT, EmojiID
from .utils.id_utils import (
    equal,
    format_id,
    is_zero,
    must_new,
    must_new_string,
    must_parse,
    new,
    new_batch,
    new_string,
    new_with_alphabet,
    parse,
    parse_with_alphabet,
    tokens,
    validate,
)

__version__ = "1.0.0"

__all__ = [
    "EmojiID", "DEFAULT_ALPHABET", "DELIMITER", "GROUP_SIZES", "TOKEN_COUNT",
    "EmojiIDError", "InvalidFormat", "InvalidToken", "EntropyFailure",
    "AlphabetTooSmall", "EmojiIDPanic",
    "new", "new_with_alphabet", "new_string", "new_batch",
    "must_new", "must_new_string", "must_parse",
    "parse", "parse_with_alphabet", "validate",
    "format_id", "equal", "is_zero", "tokens",
]
