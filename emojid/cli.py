"""
Command line entry point for generating and checking EmojiIDs.

Usage:
    emojid                  print one new identifier
    emojid new [COUNT]      print COUNT new identifiers
    emojid parse ID         print the 32 tokens of ID
    emojid validate ID      print "valid" or "invalid"
"""

import logging
import sys
from typing import List, Optional

from emojid.core.errors import EmojiIDError
from emojid.utils import id_utils

logger = logging.getLogger(__name__)

USAGE = "usage: emojid [new [COUNT] | parse ID | validate ID]"


def _new(args: List[str]) -> int:
    try:
        count = int(args[0]) if args else 1
    except ValueError:
        print(f"Invalid count: {args[0]}", file=sys.stderr)
        return 1
    if count < 1:
        print("Count must be at least 1", file=sys.stderr)
        return 1

    try:
        ids = id_utils.new_batch(count)
    except EmojiIDError as e:
        logger.error("Generation failed: %s", e)
        print(f"❌ {e}", file=sys.stderr)
        return 1

    for emoji_id in ids:
        print(emoji_id)
    return 0


def _parse(args: List[str]) -> int:
    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return 1

    try:
        emoji_id = id_utils.parse(args[0])
    except EmojiIDError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print(" ".join(emoji_id.tokens()))
    return 0


def _validate(args: List[str]) -> int:
    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return 1

    if id_utils.validate(args[0]):
        print("valid")
        return 0
    print("invalid")
    return 1


COMMANDS = {
    "new": _new,
    "parse": _parse,
    "validate": _validate,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main function for command line usage"""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        return _new([])

    command = COMMANDS.get(args[0].lower())
    if command is None:
        print(f"Unknown command: {args[0]}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1
    return command(args[1:])


if __name__ == "__main__":
    sys.exit(main())
