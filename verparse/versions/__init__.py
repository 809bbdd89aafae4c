"""Version string parsing, rendering and composer validation."""

from verparse.versions.composer import ComposerChecker, is_valid
from verparse.versions.fixtures import load_version_list, split_version_list
from verparse.versions.markers import VersionPrefix, VersionSuffix, parse_month
from verparse.versions.models import (
    SemVer,
    SuffixPair,
    increment_major,
    increment_minor,
    increment_patch,
    render,
)
from verparse.versions.padded import ZeroPaddedInt
from verparse.versions.parser import VersionParseError, parse_version
from verparse.versions.tokenizer import split_alpha_and_number, tokenize

__all__ = [
    # Model
    "SemVer",
    "SuffixPair",
    "ZeroPaddedInt",
    "VersionPrefix",
    "VersionSuffix",
    # Parsing
    "parse_version",
    "VersionParseError",
    "tokenize",
    "split_alpha_and_number",
    "parse_month",
    # Rendering and increments
    "render",
    "increment_major",
    "increment_minor",
    "increment_patch",
    # Composer grammar
    "ComposerChecker",
    "is_valid",
    # Fixtures
    "load_version_list",
    "split_version_list",
]
