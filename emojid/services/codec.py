"""
Formatting and parsing of the 8-4-4-4-12 EmojiID string layout.
"""

from typing import Iterable, List, Sequence

from emojid.core.errors import EmojiIDError, InvalidFormat, InvalidToken
from emojid.models.alphabet import DEFAULT_ALPHABET, DELIMITER, alphabet_index, check_alphabet
from emojid.models.identifier import GROUP_SIZES, TOKEN_COUNT, EmojiID


def format_tokens(tokens: Sequence[str]) -> str:
    """Join 32 tokens into the delimited 8-4-4-4-12 layout"""
    groups = []
    start = 0
    for size in GROUP_SIZES:
        groups.append("".join(tokens[start:start + size]))
        start += size
    return DELIMITER.join(groups)


def split_groups(s: str) -> List[str]:
    """
    Split an EmojiID string into its 32 raw units, checking only the shape.

    Units are code points, so a 4-byte emoji counts once.

    Raises:
        InvalidFormat: On a wrong group count, group length or total length.
    """
    if not isinstance(s, str):
        raise InvalidFormat(f"emojid: expected a string, got {type(s).__name__}")

    parts = s.split(DELIMITER)
    if len(parts) != len(GROUP_SIZES):
        raise InvalidFormat(
            f"emojid: invalid format (expected {len(GROUP_SIZES)} groups, got {len(parts)})"
        )

    units: List[str] = []
    for position, (part, want) in enumerate(zip(parts, GROUP_SIZES)):
        if len(part) != want:
            raise InvalidFormat(
                f"emojid: invalid format (group {position} has {len(part)} emojis, want {want})"
            )
        units.extend(part)

    if len(units) != TOKEN_COUNT:
        raise InvalidFormat()

    return units


def parse_tokens(s: str, alphabet: Iterable[str] = DEFAULT_ALPHABET) -> EmojiID:
    """
    Parse an EmojiID string and check every token against ``alphabet``.

    Checks run in a fixed order: alphabet size, then shape (group by group),
    then membership token by token; the first failure is raised.

    Args:
        s: Formatted EmojiID string.
        alphabet: Symbols the tokens must belong to.

    Returns:
        The parsed EmojiID.

    Raises:
        AlphabetTooSmall: If the alphabet has fewer than 2 entries.
        InvalidFormat: If the layout is not 8-4-4-4-12.
        InvalidToken: For the first token not in the alphabet.
    """
    allowed = alphabet_index(check_alphabet(alphabet))
    units = split_groups(s)

    for unit in units:
        if unit not in allowed:
            raise InvalidToken(unit)

    return EmojiID(symbols=tuple(units))


def validate(s: str) -> bool:
    """Report whether ``s`` parses against the default alphabet"""
    try:
        parse_tokens(s, DEFAULT_ALPHABET)
    except EmojiIDError:
        return False
    return True
