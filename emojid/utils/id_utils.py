"""
Utilities for generating, parsing and validating EmojiIDs.
"""
from typing import Iterable, List, Optional

from emojid.core.errors import EmojiIDError, EmojiIDPanic
from emojid.models.alphabet import DEFAULT_ALPHABET, check_alphabet
from emojid.models.identifier import TOKEN_COUNT, EmojiID
from emojid.services import codec
from emojid.services.sampler import RandomSource, draw_indices


def new_with_alphabet(alphabet: Iterable[str], randbytes: Optional[RandomSource] = None) -> EmojiID:
    """
    Generate a random EmojiID from the provided emoji alphabet.
    
    Args:
        alphabet: Single-codepoint emoji, at least 2 entries.
        randbytes: Secure byte source. Defaults to ``secrets.token_bytes``.
    
    Returns:
        A new EmojiID whose 32 tokens are drawn uniformly from ``alphabet``.
    
    Raises:
        AlphabetTooSmall: If the alphabet has fewer than 2 entries.
        EntropyFailure: If the secure random source cannot be read.
    """
    entries = check_alphabet(alphabet)
    indices = draw_indices(len(entries), TOKEN_COUNT, randbytes)
    return EmojiID(symbols=tuple(entries[i] for i in indices))


def new() -> EmojiID:
    """Generate a random EmojiID using the default alphabet."""
    return new_with_alphabet(DEFAULT_ALPHABET)


def new_string() -> str:
    """Generate a random EmojiID from the default alphabet, formatted."""
    return codec.format_tokens(new().symbols)


def new_batch(count: int, alphabet: Iterable[str] = DEFAULT_ALPHABET) -> List[EmojiID]:
    """
    Generate ``count`` independent EmojiIDs.
    
    Args:
        count: Number of identifiers to generate.
        alphabet: Emoji alphabet shared by every identifier.
    
    Returns:
        A list of EmojiIDs; nothing is returned if any draw fails.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    entries = check_alphabet(alphabet)
    return [new_with_alphabet(entries) for _ in range(count)]


def parse_with_alphabet(s: str, alphabet: Iterable[str]) -> EmojiID:
    """Parse an 8-4-4-4-12 EmojiID string, checking tokens against ``alphabet``."""
    return codec.parse_tokens(s, alphabet)


def parse(s: str) -> EmojiID:
    """Parse an 8-4-4-4-12 EmojiID string using the default alphabet."""
    return codec.parse_tokens(s, DEFAULT_ALPHABET)


def validate(s: str) -> bool:
    """
    Validate if a string is a well-formed EmojiID over the default alphabet.
    
    Args:
        s: The string to validate.
    
    Returns:
        True if the string parses, False otherwise.
    """
    return codec.validate(s)


def format_id(emoji_id: EmojiID) -> str:
    return codec.format_tokens(emoji_id.symbols)


def equal(a: EmojiID, b: EmojiID) -> bool:
    return a.equal(b)


def is_zero(emoji_id: EmojiID) -> bool:
    return emoji_id.is_zero()


def tokens(emoji_id: EmojiID) -> List[str]:
    return emoji_id.tokens()


# Panicking wrappers. Only for call sites where failure is a programming
# error; never use them on untrusted input.

def must_new() -> EmojiID:
    """Like new() but raises EmojiIDPanic on failure."""
    try:
        return new()
    except EmojiIDError as e:
        raise EmojiIDPanic(str(e)) from e


def must_new_string() -> str:
    """Like new_string() but raises EmojiIDPanic on failure."""
    return format_id(must_new())


def must_parse(s: str) -> EmojiID:
    """Like parse() but raises EmojiIDPanic on failure."""
    try:
        return parse(s)
    except EmojiIDError as e:
        raise EmojiIDPanic(str(e)) from e
