"""Split raw version strings into lowercase tokens."""

import re

DELIMITERS = "-_."

_DELIMITER_PATTERN = re.compile(f"[{re.escape(DELIMITERS)}]")


def split_alpha_and_number(chunk: str) -> list[str]:
    """Split a chunk at its first letter-to-digit boundary.

    Only the first boundary is used, so ``"rc1beta"`` becomes
    ``["rc", "1beta"]``. Chunks that start with a digit or contain no
    digit are returned whole.

    Examples:
        >>> split_alpha_and_number("rc123")
        ['rc', '123']
        >>> split_alpha_and_number("123")
        ['123']
    """
    for index, char in enumerate(chunk):
        if char.isdigit():
            if index > 0:
                return [chunk[:index], chunk[index:]]
            break
    return [chunk]


def tokenize(text: str) -> tuple[str, ...]:
    """Break ``text`` into lowercase tokens.

    The string is split on ``-``, ``_`` and ``.``; each chunk is then split
    once more where a leading alphabetic run meets a digit. Empty input
    gives an empty tuple. Empty chunks between adjacent delimiters are kept
    so the parser can reject them.

    Args:
        text: Raw version-like string (e.g. ``"v2023-Nov-27-v1"``)

    Returns:
        Tuple of lowercase tokens
    """
    if not text:
        return ()
    return tuple(
        piece.lower()
        for chunk in _DELIMITER_PATTERN.split(text)
        for piece in split_alpha_and_number(chunk)
    )
