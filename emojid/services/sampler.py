"""
Unbiased index sampling from the OS cryptographically secure random source.
"""

import logging
import secrets
from typing import Callable, List, Optional

from emojid.core.errors import AlphabetTooSmall, EntropyFailure
from emojid.models.alphabet import MIN_ALPHABET_SIZE
from emojid.models.identifier import TOKEN_COUNT

logger = logging.getLogger(__name__)

# Callable returning exactly the requested number of random bytes
RandomSource = Callable[[int], bytes]

DRAW_BYTES = 2


def _draw_width(n: int) -> int:
    """Bytes per draw: 2 up to 65536 symbols, widened in 2-byte steps beyond"""
    width = DRAW_BYTES
    while (1 << (8 * width)) < n:
        width += DRAW_BYTES
    return width


def _read_bytes(randbytes: RandomSource, width: int) -> bytes:
    try:
        buf = randbytes(width)
    except (OSError, NotImplementedError) as e:
        raise EntropyFailure() from e

    if len(buf) != width:
        raise EntropyFailure(
            f"emojid: secure random source returned {len(buf)} of {width} bytes"
        )
    return buf


def draw_index(n: int, randbytes: Optional[RandomSource] = None) -> int:
    """
    Draw one index uniformly from [0, n) using rejection sampling.

    Draws of ``width`` bytes are combined big-endian into ``v``. Values at or
    above ``span - span % n`` are discarded so that ``v % n`` has no modulo
    bias.

    Args:
        n: Alphabet size (at least 2).
        randbytes: Secure byte source, ``secrets.token_bytes`` by default.

    Returns:
        An integer in [0, n).

    Raises:
        AlphabetTooSmall: If n < 2.
        EntropyFailure: If the source fails or returns a short read.
    """
    if n < MIN_ALPHABET_SIZE:
        raise AlphabetTooSmall(n)

    source = randbytes or secrets.token_bytes
    width = _draw_width(n)
    span = 1 << (8 * width)
    limit = span - (span % n)

    while True:
        v = int.from_bytes(_read_bytes(source, width), "big")
        if v < limit:
            return v % n
        logger.debug("Rejected draw %d (limit %d) for alphabet size %d", v, limit, n)


def draw_indices(
    alphabet_size: int,
    count: int = TOKEN_COUNT,
    randbytes: Optional[RandomSource] = None,
) -> List[int]:
    """
    Draw ``count`` independent uniform indices into an alphabet.

    Any failure aborts the whole draw; partial results are never returned.
    """
    if alphabet_size < MIN_ALPHABET_SIZE:
        raise AlphabetTooSmall(alphabet_size)
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    return [draw_index(alphabet_size, randbytes) for _ in range(count)]
