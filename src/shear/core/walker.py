"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/walker.py
Lazy directory traversal producing FileDescriptor objects.
Features:
- Explicit stack of pending directories instead of recursion
- Deterministic order: entries sorted by name, a directory's files come before its subdirectories
- Skips symbolic links and non-regular files
- Unreadable directories and entries are logged and counted, never fatal
"""

import os
from pathlib import Path
from typing import Iterator, List, Optional
import logging

# Local imports
from shear.core.models import FileDescriptor
from shear.core.interfaces import TreeWalker

logger = logging.getLogger(__name__)


class TreeWalkerImpl(TreeWalker):
    """
    Walks a directory tree depth-first and yields one FileDescriptor per regular file.

    Attributes:
        root_dir: Root directory to walk, kept exactly as given (relative roots give relative paths)
        recurse: Descend into subdirectories when True
        excluded_dirs: Directories whose subtrees are skipped
        from_primary_root: Value stamped on every yielded descriptor
        errors: Number of directories/entries skipped because of OS errors
        files_found: Number of descriptors yielded so far
    """

    def __init__(
        self,
        root_dir: str,
        recurse: bool = True,
        excluded_dirs: Optional[List[str]] = None,
        from_primary_root: bool = True
    ):
        self.root_dir = root_dir
        self.recurse = recurse
        self.excluded_dirs = [str(Path(d).resolve()) for d in excluded_dirs] if excluded_dirs else []
        self.from_primary_root = from_primary_root
        self.errors = 0
        self.files_found = 0

    def walk(self) -> Iterator[FileDescriptor]:
        """
        Lazily yield descriptors. Each popped directory is listed once, its files
        are yielded immediately and its subdirectories are pushed for later expansion.
        """
        logger.debug(f"Walking directory: {self.root_dir} (recurse={self.recurse})")

        pending = [self.root_dir]
        while pending:
            directory = pending.pop()
            entries = self._list_directory(directory)
            if entries is None:
                continue

            subdirs = []
            for entry in entries:
                try:
                    if entry.is_symlink():
                        logger.debug(f"Skipping symbolic link: {entry.path}")
                        continue

                    if entry.is_dir(follow_symlinks=False):
                        if self.recurse and self._prefilter_dir(entry.path):
                            subdirs.append(entry.path)
                        continue

                    if not entry.is_file(follow_symlinks=False):
                        logger.debug(f"Skipping non-regular file: {entry.path}")
                        continue

                    stat_result = entry.stat(follow_symlinks=False)
                except OSError as e:
                    self._report_error(entry.path, e)
                    continue

                self.files_found += 1
                yield FileDescriptor(
                    path=entry.path,
                    length=stat_result.st_size,
                    modified_time=stat_result.st_mtime,
                    from_primary_root=self.from_primary_root
                )

            # Reversed so the alphabetically first subdirectory is expanded next
            pending.extend(reversed(subdirs))

        logger.debug(f"Walk of {self.root_dir} finished: {self.files_found} files, {self.errors} errors")

    def _list_directory(self, directory: str) -> Optional[List[os.DirEntry]]:
        """Returns the directory entries sorted by name, or None if it cannot be listed."""
        try:
            with os.scandir(directory) as it:
                return sorted(it, key=lambda e: e.name)
        except OSError as e:
            self._report_error(directory, e)
            return None

    def _report_error(self, path: str, error: OSError) -> None:
        self.errors += 1
        logger.warning(f"Skipping unreadable entry {path}: {error}")

    @staticmethod
    def _is_excluded_directory(path: str, excluded_dirs: List[str]) -> bool:
        """Check if path is within an excluded directory."""
        try:
            path_str = str(Path(path).resolve(strict=False))
            for excluded_dir in excluded_dirs:
                normalized_excluded = os.path.normpath(excluded_dir)
                if path_str.startswith(normalized_excluded + os.sep) or \
                        path_str == normalized_excluded:
                    return True
            return False
        except (OSError, ValueError):
            return False

    def _prefilter_dir(self, path: str) -> bool:
        """Returns False for directories that must not be expanded."""
        if self.excluded_dirs and self._is_excluded_directory(path, self.excluded_dirs):
            logger.debug(f"Skipping excluded directory: {path}")
            return False
        return True
