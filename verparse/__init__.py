"""
verparse - parse loosely structured version strings.

Turns release tags, dates and semver-ish identifiers into a normalized,
zero-padding-preserving version that can be bumped and rendered in PHP
composer format.
"""

from verparse.versions import (
    ComposerChecker,
    SemVer,
    VersionParseError,
    parse_version,
    render,
)

__version__ = "0.1.0"

__all__ = ["ComposerChecker", "SemVer", "VersionParseError", "parse_version", "render"]
