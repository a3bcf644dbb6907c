"""
Emoji alphabets used to generate and validate EmojiIDs.

Every alphabet entry is one indivisible unit: a single Unicode code point.
Multi-codepoint clusters (ZWJ sequences, flags, skin tones, variation
selectors) cannot be represented and are rejected when an alphabet is accepted.
"""

from typing import FrozenSet, Iterable, Tuple

from emojid.core.errors import AlphabetTooSmall

DELIMITER = "-"
MIN_ALPHABET_SIZE = 2

# Curated single-codepoint emoji. Order is significant: sampled indices map
# directly onto positions in this tuple.
DEFAULT_ALPHABET: Tuple[str, ...] = (
    "😀", "😃", "😄", "😁", "😆", "😅", "😂", "🤣",
    "😊", "😇", "🙂", "🙃", "😉", "😌", "😍", "🥰",
    "😘", "😗", "😙", "😚", "😋", "😛", "😝", "😜",
    "🤪", "🤨", "🧐", "🤓", "😎", "🥳", "😤", "😡",
    "🤯", "😱", "😴", "🤤", "😷", "🤒", "🤕", "🤠",
    "😈", "👻", "🤖", "🎃", "🐶", "🐱", "🐭", "🐹",
    "🐰", "🦊", "🐻", "🐼", "🐨", "🐯", "🦁", "🐸",
    "🐵", "🐔", "🐧", "🐦", "🐤", "🐙", "🦑", "🦀",
    "🐠", "🐳", "🦋", "🐞", "🌸", "🌼", "🌻", "🌺",
    "🍎", "🍊", "🍋", "🍉", "🍇", "🍓", "🍒", "🍍",
    "🥑", "🥦", "🥕", "🌶", "🍔", "🍟", "🍕", "🌮",
    "🍣", "🍩", "🍪", "🍫", "🍿", "☕", "🍺", "🍷",
    "⚽", "🏀", "🏈", "⚾", "🎾", "🏐", "🎱", "🏓",
    "🎸", "🎹", "🥁", "🎻", "🎧", "🎮", "🧩", "🎲",
    "🚗", "🚕", "🚌", "🚑", "🚒", "🚜", "✈", "🚀",
    "🛰", "⛵", "🚲", "🛴", "🏠", "🏢", "🏭", "🏰",
    "🌍", "🌙", "⭐", "⚡", "🔥", "💧", "🌈", "❄",
    "💎", "🔒", "🔑", "🧠", "💡", "📦", "🧲", "🧰",
    "🛡", "⚙", "🧪", "🧬", "🔭", "📡", "💾", "🗄",
)


def check_alphabet(alphabet: Iterable[str]) -> Tuple[str, ...]:
    """
    Accept an alphabet for generation or parsing.

    Args:
        alphabet: Ordered symbols; duplicates are allowed but skew sampling.

    Returns:
        The alphabet as an immutable tuple.

    Raises:
        AlphabetTooSmall: If fewer than 2 entries are supplied.
        ValueError: If an entry is not a single code point or is the delimiter.
    """
    entries = tuple(alphabet)
    if len(entries) < MIN_ALPHABET_SIZE:
        raise AlphabetTooSmall(len(entries))

    for position, entry in enumerate(entries):
        if not isinstance(entry, str) or len(entry) != 1:
            raise ValueError(
                f"alphabet entry {position} must be a single code point, got {entry!r}"
            )
        if entry == DELIMITER:
            raise ValueError(f"alphabet entry {position} is the delimiter {DELIMITER!r}")

    return entries


def alphabet_index(alphabet: Tuple[str, ...]) -> FrozenSet[str]:
    """Build the membership set used to validate parsed tokens"""
    return frozenset(alphabet)
