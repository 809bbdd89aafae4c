"""Parsed version data model and rendering.

``SemVer`` is an immutable value: the increment operations return new
instances and leave the original untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from verparse.versions.markers import VersionPrefix, VersionSuffix
from verparse.versions.padded import ZeroPaddedInt


@dataclass(frozen=True)
class SuffixPair:
    """Suffix keyword and its optional number (``beta`` + ``5`` -> ``beta5``).

    Attributes:
        suffix: Suffix marker
        version: Signed number written after the marker, or None for a bare marker
    """

    suffix: VersionSuffix
    version: int | None = None

    def __str__(self) -> str:
        if self.version is None:
            return str(self.suffix)
        return f"{self.suffix}{self.version}"


@dataclass(frozen=True)
class SemVer:
    """Version parsed from a loosely structured string.

    Attributes:
        major: First numeric component
        minor: Second numeric component
        patch: Third numeric component (``0`` when the input had only two)
        prefix: Leading marker such as ``v`` (optional)
        suffix: Trailing qualifier such as ``beta5`` (optional)
    """

    major: ZeroPaddedInt
    minor: ZeroPaddedInt
    patch: ZeroPaddedInt
    prefix: VersionPrefix | None = None
    suffix: SuffixPair | None = None

    @classmethod
    def parse(cls, text: str) -> SemVer:
        """Parse ``text``; see :func:`verparse.versions.parser.parse_version`."""
        from verparse.versions.parser import parse_version

        return parse_version(text)

    def increment_major(self) -> SemVer:
        """Return a copy with major raised by one, keeping its width."""
        return replace(self, major=self.major + 1)

    def increment_minor(self) -> SemVer:
        """Return a copy with minor raised by one, keeping its width."""
        return replace(self, minor=self.minor + 1)

    def increment_patch(self) -> SemVer:
        """Return a copy with patch raised by one, keeping its width."""
        return replace(self, patch=self.patch + 1)

    def __str__(self) -> str:
        prefix = str(self.prefix) if self.prefix is not None else ""
        suffix = f"-{self.suffix}" if self.suffix is not None else ""
        return f"{prefix}{self.major}.{self.minor}.{self.patch}{suffix}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serialisable dictionary."""
        result: dict[str, Any] = {
            "prefix": str(self.prefix) if self.prefix is not None else None,
            "major": {"value": self.major.value, "width": self.major.width},
            "minor": {"value": self.minor.value, "width": self.minor.width},
            "patch": {"value": self.patch.value, "width": self.patch.width},
            "suffix": None,
            "rendered": str(self),
        }
        if self.suffix is not None:
            result["suffix"] = {
                "marker": str(self.suffix.suffix),
                "version": self.suffix.version,
            }
        return result


def render(version: SemVer) -> str:
    """Render ``version`` as ``[prefix]major.minor.patch[-suffix]``."""
    return str(version)


def increment_major(version: SemVer) -> SemVer:
    return version.increment_major()


def increment_minor(version: SemVer) -> SemVer:
    return version.increment_minor()


def increment_patch(version: SemVer) -> SemVer:
    return version.increment_patch()
