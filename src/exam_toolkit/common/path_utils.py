"""Path and folder-name utilities.

Provides the ordering rule for numbered level folders and small helpers
for iterating directory entries.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple


def level_sort_key(name: str | Path) -> Tuple[int, int, str]:
    """Build the sort key for a level folder name.

    Numeric names sort by value. Anything that does not parse as a
    non-negative integer ranks as +infinity, so it lands after every
    numeric level. Ties are broken by the raw name.

    Args:
        name: Folder name or Path of the level directory.

    Returns:
        Tuple of (rank group, numeric value, name); rank group is 0 for
        numeric names and 1 for everything else.

    Examples:
        >>> level_sort_key("3")
        (0, 3, '3')
        >>> level_sort_key("bonus")
        (1, 0, 'bonus')
        >>> sorted(["10", "bonus", "2"], key=level_sort_key)
        ['2', '10', 'bonus']
    """
    if isinstance(name, Path):
        name = name.name

    if name.isdecimal():
        return (0, int(name), name)
    return (1, 0, name)


def list_subdirectories(path: Path) -> List[Path]:
    """Return the directory entries of ``path`` sorted by name.

    Plain files and other non-directory entries are skipped.

    Raises:
        OSError: If ``path`` cannot be listed.
    """
    return sorted((entry for entry in path.iterdir() if entry.is_dir()), key=lambda p: p.name)
