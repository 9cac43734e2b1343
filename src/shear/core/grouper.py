"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Two-phase grouping: by SizeFingerprint, then by ContentFingerprint.
Only multi-member size groups are ever opened and hashed.
"""

import logging
from typing import List, Dict, Iterable, Any, Callable, Optional
from collections import defaultdict

from shear.core.interfaces import DuplicateGrouper, Fingerprinter
from shear.core.models import (
    FileDescriptor, DuplicateGroup, SizeFingerprint, ContentFingerprint, ScanStats
)
from shear.core.fingerprint import ContentFingerprinterImpl, size_fingerprint

logger = logging.getLogger(__name__)


class DuplicateGrouperImpl(DuplicateGrouper):
    """
    A concrete DuplicateGrouper.
    Uses an injected Fingerprinter instance for flexibility and testability.
    """

    def __init__(self, fingerprinter: Fingerprinter = None):
        self.fingerprinter = fingerprinter or ContentFingerprinterImpl()

    def group_by_size(
        self,
        descriptors: Iterable[FileDescriptor],
        stats: Optional[ScanStats] = None
    ) -> Dict[SizeFingerprint, List[FileDescriptor]]:
        """
        Consumes the whole descriptor sequence.
        Returns only sizes shared by 2+ files; unique lengths are provably not duplicates.
        """
        groups = self._group_by(descriptors, size_fingerprint, stats)
        if stats:
            stats.files_scanned += sum(len(files) for files in groups.values())
        return self._only_duplicates(groups)

    def group_by_content(
        self,
        files: List[FileDescriptor],
        stats: Optional[ScanStats] = None
    ) -> Dict[ContentFingerprint, List[FileDescriptor]]:
        """Groups same-length files by content fingerprint, dropping unreadable files."""
        groups = self._group_by(files, lambda f: self.fingerprinter.compute(f.path), stats)
        if stats:
            stats.files_fingerprinted += sum(len(files) for files in groups.values())
        return self._only_duplicates(groups)

    def find_duplicates(
        self,
        descriptors: Iterable[FileDescriptor],
        stats: Optional[ScanStats] = None,
        candidate_filter: Optional[Callable[[List[FileDescriptor]], bool]] = None
    ) -> List[DuplicateGroup]:
        size_groups = self.group_by_size(descriptors, stats)
        logger.debug(f"{len(size_groups)} size groups with 2+ files")

        duplicates = []
        for size_key, files in size_groups.items():
            if candidate_filter and not candidate_filter(files):
                logger.debug(f"Skipping size group {size_key.length} rejected by candidate filter")
                continue
            if stats:
                stats.size_candidates += len(files)

            for fingerprint, group_files in self.group_by_content(files, stats).items():
                group = DuplicateGroup(fingerprint=fingerprint, files=group_files)
                logger.debug(f"Duplicate group {fingerprint!r}: {group.paths}")
                duplicates.append(group)

        if stats:
            stats.duplicate_groups += len(duplicates)
        return duplicates

    @staticmethod
    def _group_by(
        files: Iterable[FileDescriptor],
        key_func: Callable[[FileDescriptor], Any],
        stats: Optional[ScanStats] = None
    ) -> Dict[Any, List[FileDescriptor]]:
        """
        Helper method to group files by any computed key.
        Files whose key cannot be computed because of an OSError are logged,
        counted and left out of every group.
        Args:
            files: Files to group, consumed once
            key_func: Function that computes a hashable key from a FileDescriptor
            stats: Optional statistics collector for the skipped-file counter
        Returns:
            Dict[key, List[FileDescriptor]] in first-encountered order
        """
        groups = defaultdict(list)
        skipped_files = 0
        for file in files:
            try:
                key = key_func(file)
            except OSError as e:
                logger.warning(f"Skipping {file.path}: {e}")
                skipped_files += 1
                continue
            groups[key].append(file)

        if skipped_files > 0:
            logger.warning(f"Skipped {skipped_files} file(s) due to read errors")
            if stats:
                stats.read_errors += skipped_files

        return dict(groups)

    @staticmethod
    def _only_duplicates(groups: Dict[Any, List[FileDescriptor]]) -> Dict[Any, List[FileDescriptor]]:
        return {key: files for key, files in groups.items() if len(files) >= 2}
