"""Load comma-separated lists of sample version strings.

Fixture files look like ``list, 1.2.3, v2.0.0-beta1, release-2022-02-09``;
whitespace around entries is ignored and some placeholder words are
skipped.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_IGNORED_ENTRIES = ("list",)


def split_version_list(
    content: str,
    separator: str = ",",
    ignored: Iterable[str] = DEFAULT_IGNORED_ENTRIES,
) -> list[str]:
    """Split fixture content into individual version strings.

    Args:
        content: Raw file content
        separator: Entry separator
        ignored: Entries to drop (compared after trimming)

    Returns:
        Version strings in file order, without blanks or ignored entries
    """
    ignored_set = set(ignored)
    versions = []
    for entry in content.split(separator):
        entry = entry.strip()
        if not entry or entry in ignored_set:
            continue
        versions.append(entry)
    return versions


def load_version_list(
    path: Path,
    separator: str = ",",
    ignored: Iterable[str] = DEFAULT_IGNORED_ENTRIES,
) -> list[str]:
    """Read a fixture file and return its version strings.

    Raises:
        FileNotFoundError: If ``path`` doesn't exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Version list not found: {path}")

    with open(path) as f:
        versions = split_version_list(f.read(), separator=separator, ignored=ignored)

    logger.info(f"Loaded {len(versions)} versions from {path}")
    return versions
