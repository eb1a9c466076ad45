"""File discovery for component scanning."""

import logging
import os
from pathlib import Path
from typing import List, Optional

from .errors import DirectoryNotFoundError
from .models import FileFilter

logger = logging.getLogger(__name__)


def matches_pattern(file_path: str, pattern: str) -> bool:
    """Check if a path contains an exclusion pattern.

    The pattern matches as a substring of the slash-normalized path or as
    a whole path component.
    """
    normalized = Path(file_path).as_posix()
    if pattern in normalized:
        return True
    return pattern in normalized.split("/")


def should_exclude(file_path: str, file_filter: FileFilter) -> bool:
    """Check a path (relative to the scan root) against exclude patterns."""
    return any(matches_pattern(file_path, p) for p in file_filter.exclude_patterns)


def has_valid_extension(file_path: str, extensions: List[str]) -> bool:
    if not extensions:
        return True
    return os.path.splitext(file_path)[1] in extensions


def is_in_included_directory(
    file_path: str, root_dir: str, include_directories: List[str]
) -> bool:
    """Check if a file lives in (or below) one of the include directories."""
    try:
        rel_path = Path(os.path.relpath(file_path, root_dir)).as_posix()
    except ValueError:
        # Different drive on Windows
        return False

    for include_dir in include_directories:
        normalized = Path(include_dir).as_posix()
        if rel_path == normalized or rel_path.startswith(normalized + "/"):
            return True
    return False


def discover_files(root_dir: str, file_filter: Optional[FileFilter] = None) -> List[str]:
    """Walk a directory tree and return files passing the filter.

    Args:
        root_dir: Directory to walk
        file_filter: Discovery criteria (default: FileFilter())

    Returns:
        Sorted list of file paths (joined onto root_dir)

    Raises:
        DirectoryNotFoundError: If root_dir is missing or not a directory
    """
    if not os.path.isdir(root_dir):
        raise DirectoryNotFoundError(root_dir)

    if file_filter is None:
        file_filter = FileFilter()

    def _on_error(err: OSError) -> None:
        logger.debug("Skipping unreadable directory %s: %s", err.filename, err)

    files = []
    for dirpath, _dirnames, filenames in os.walk(root_dir, onerror=_on_error):
        for name in filenames:
            path = os.path.join(dirpath, name)
            if should_exclude(os.path.relpath(path, root_dir), file_filter):
                continue
            if not has_valid_extension(path, file_filter.file_extensions):
                continue
            if file_filter.include_directories and not is_in_included_directory(
                path, root_dir, file_filter.include_directories
            ):
                continue
            files.append(path)

    logger.debug("Discovered %d files under %s", len(files), root_dir)
    return sorted(files)


__all__ = [
    "discover_files",
    "has_valid_extension",
    "is_in_included_directory",
    "matches_pattern",
    "should_exclude",
]
