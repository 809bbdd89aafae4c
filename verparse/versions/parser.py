"""Classify tokens and build a SemVer from a loosely structured string.

Supported shapes include ``1.2.3.beta.5``, ``v2.1.0-beta1``,
``release-2022-02-09``, ``09-28-2023.1`` and ``2023-Nov-27-v1``.

Parsing is a fixed left-to-right pipeline over the token tuple:

1. prefix (``v``) or the ``release`` marker in the first position
2. month name in the second position, replaced by its number
3. at least two tokens required; a missing patch becomes ``0``
4. suffix keyword (or a bare ``v``) right after the triple
5. suffix number after that; without a keyword the default ``p`` is used
6. the first three tokens become the zero-padded triple

Earlier decisions are never revisited.
"""

from __future__ import annotations

import logging

from verparse.versions.markers import VersionPrefix, VersionSuffix, parse_month
from verparse.versions.models import SemVer, SuffixPair
from verparse.versions.padded import ZeroPaddedInt
from verparse.versions.tokenizer import tokenize

logger = logging.getLogger(__name__)

RELEASE_MARKER = "release"
TRAILING_VERSION_MARKER = "v"  # as in 2023-11-29-v1

_TRIPLE_LENGTH = 3


class VersionParseError(ValueError):
    """Raised when a string cannot be parsed as a version.

    Attributes:
        text: The input that failed to parse
        reason: Why it failed
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid version {text!r}: {reason}")


def _parse_suffix_number(text: str, token: str) -> int:
    # "-" is a delimiter and "+5" splits into "+", "5", so no sign can reach here
    if not token.isascii() or not token.isdigit():
        raise VersionParseError(text, f"suffix number is not an integer: {token!r}")
    return int(token)


def parse_version(text: str) -> SemVer:
    """Parse a version-like string.

    Args:
        text: Input such as ``"v2023-Nov-0027-v1"``

    Returns:
        Parsed SemVer

    Raises:
        VersionParseError: If the string is empty, has fewer than two
            components, or contains non-numeric components where numbers
            are expected

    Examples:
        >>> str(parse_version("1.2.3.beta.5"))
        '1.2.3-beta5'
        >>> str(parse_version("release-2022-02-09"))
        '2022.02.09'
    """
    tokens = tokenize(text)
    logger.debug(f"Tokens for {text!r}: {tokens}")
    if not tokens:
        raise VersionParseError(text, "empty version string")

    # 1) Prefix, or the non-semantic "release" marker
    prefix = VersionPrefix.parse(tokens[0])
    cursor = 1 if prefix is not None or tokens[0] == RELEASE_MARKER else 0
    remaining = len(tokens) - cursor

    # 2) Month name as the second component (2023-Nov-27)
    minor_token = tokens[cursor + 1] if remaining >= 2 else None
    if minor_token is not None:
        month = parse_month(minor_token)
        if month is not None:
            logger.debug(f"Month name {minor_token!r} -> {month}")
            minor_token = str(month)

    # 3) Arity; a missing patch defaults to "0"
    if remaining < 2:
        raise VersionParseError(text, "expected at least two numeric components")
    triple = (
        tokens[cursor],
        minor_token,
        tokens[cursor + 2] if remaining >= 3 else "0",
    )
    cursor += _TRIPLE_LENGTH

    # 4) Suffix keyword
    marker = None
    if len(tokens) > cursor:
        marker = VersionSuffix.parse(tokens[cursor])
        if marker is not None or tokens[cursor] == TRAILING_VERSION_MARKER:
            cursor += 1

    # 5) Suffix number
    number = None
    if len(tokens) > cursor:
        number = _parse_suffix_number(text, tokens[cursor])
        if marker is None:
            marker = VersionSuffix.default()
        if len(tokens) > cursor + 1:
            logger.debug(f"Ignoring trailing tokens {tokens[cursor + 1 :]}")

    suffix = SuffixPair(marker, number) if marker is not None else None

    # 6) Numeric triple
    try:
        major, minor, patch = (ZeroPaddedInt.from_str(t) for t in triple)
    except ValueError as e:
        raise VersionParseError(text, str(e)) from e

    version = SemVer(major=major, minor=minor, patch=patch, prefix=prefix, suffix=suffix)
    logger.debug(f"Parsed {text!r} as {version}")
    return version
