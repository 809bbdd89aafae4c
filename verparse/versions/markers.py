"""Closed vocabularies recognised by the version parser.

Prefix and suffix markers are matched case-insensitively and rendered with a
fixed canonical casing. Lookup goes through explicit tables rather than enum
member names so the accepted spellings are visible in one place.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class VersionPrefix(Enum):
    """Marker written in front of the numeric triple (``v1.2.3``)."""

    V = "v"

    @classmethod
    def parse(cls, token: str) -> VersionPrefix | None:
        """Return the prefix for ``token`` or None if it is not one."""
        return _PREFIXES.get(token.lower())

    def __str__(self) -> str:
        return self.value


class VersionSuffix(Enum):
    """Pre-release / patch-level qualifier (``-beta5``, ``-RC1``, ``-p2``)."""

    DEV = "dev"
    PATCH = "patch"
    P = "p"
    ALPHA = "alpha"
    A = "a"
    BETA = "beta"
    B = "b"
    RC = "RC"

    @classmethod
    def default(cls) -> VersionSuffix:
        """Marker used when a suffix number appears without a keyword."""
        return cls.P

    @classmethod
    def parse(cls, token: str) -> VersionSuffix | None:
        """Return the suffix for ``token`` (any casing) or None."""
        return _SUFFIXES.get(token.lower())

    def __str__(self) -> str:
        return self.value


_PREFIXES = MappingProxyType({p.value.lower(): p for p in VersionPrefix})
_SUFFIXES = MappingProxyType({s.value.lower(): s for s in VersionSuffix})

_MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

# Full names and three-letter abbreviations -> 1-based month number
MONTHS = MappingProxyType(
    {
        **{name: number for number, name in enumerate(_MONTH_NAMES, start=1)},
        **{name[:3]: number for number, name in enumerate(_MONTH_NAMES, start=1)},
    }
)


def parse_month(token: str) -> int | None:
    """Map a month name such as ``"Nov"`` or ``"november"`` to its number.

    Returns:
        Month of year (1-12), or None if ``token`` is not a month name
    """
    return MONTHS.get(token.lower())
