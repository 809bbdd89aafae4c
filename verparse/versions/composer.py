"""Check rendered versions against the PHP composer version grammar.

See https://getcomposer.org/doc/04-schema.md#version
"""

import re

# FIXME: composer only allows a bare "dev" suffix, but this accepts "dev123"
COMPOSER_VERSION_PATTERN = re.compile(
    r"v?(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    r"(-(?P<suffix>dev|d|patch|p|alpha|a|beta|b|RC)(?P<suffix_version>\d+)?)?"
)


class ComposerChecker:
    """Validate version strings against the composer grammar.

    Examples:
        >>> checker = ComposerChecker()
        >>> checker.is_valid("2.2.3-beta5")
        True
        >>> checker.is_valid("2.2.3.beta.5")
        False
    """

    def __init__(self, pattern: re.Pattern[str] = COMPOSER_VERSION_PATTERN):
        self.pattern = pattern

    def is_valid(self, version: str) -> bool:
        """Return True if the whole of ``version`` matches the grammar."""
        return self.pattern.fullmatch(version) is not None


def is_valid(version: str) -> bool:
    """Module-level shortcut for :meth:`ComposerChecker.is_valid`."""
    return COMPOSER_VERSION_PATTERN.fullmatch(version) is not None
