"""
Immutable EmojiID value type.
"""

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

TOKEN_COUNT = 32
GROUP_SIZES: Tuple[int, ...] = (8, 4, 4, 4, 12)

# Sentinel unit of the default-constructed (zero) identifier
ZERO_TOKEN = "\x00"


class EmojiID(BaseModel):
    """
    UUID-shaped identifier composed of 32 emoji tokens.

    Layout: 8-4-4-4-12 emojis (32 emojis + 4 delimiters). Instances are
    frozen; ``EmojiID()`` is the zero value and is only meaningful as an
    uninitialized sentinel.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    symbols: Tuple[str, ...] = Field(default=(ZERO_TOKEN,) * TOKEN_COUNT)

    @field_validator("symbols")
    @classmethod
    def check_symbols(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if len(v) != TOKEN_COUNT:
            raise ValueError(f"EmojiID requires exactly {TOKEN_COUNT} tokens, got {len(v)}")
        for token in v:
            if len(token) != 1:
                raise ValueError(f"EmojiID tokens must be single code points, got {token!r}")
        return v

    def equal(self, other: "EmojiID") -> bool:
        """Report whether every token position matches ``other``"""
        return self.symbols == other.symbols

    def is_zero(self) -> bool:
        """Report whether this is the zero value (all tokens are the sentinel)"""
        return all(token == ZERO_TOKEN for token in self.symbols)

    def tokens(self) -> List[str]:
        """Return the 32 tokens as a new list; changes to it never touch this id"""
        return list(self.symbols)

    def __str__(self) -> str:
        from emojid.services.codec import format_tokens

        return format_tokens(self.symbols)
