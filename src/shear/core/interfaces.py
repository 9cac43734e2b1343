"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate finder.
These protocols use structural typing via `typing.Protocol`, so any object
with matching methods can be plugged into the pipeline.

Key Components:
---------------
- TreeWalker: Lazily yields file descriptors for regular files under a root.
- HashAlgorithm: Factory for incremental digest objects (SHA-256, xxHash3...).
- Fingerprinter: Computes the content fingerprint of a single file.
- DuplicateGrouper: Two-phase reduction (size, then content) into duplicate groups.
- SelectionPolicy: Orders a group so the first eligible file is kept.
- DuplicateFinder: Runs the whole pipeline and yields selections.
"""

from typing import Protocol, List, Dict, Iterable, Iterator, Optional, Callable
from shear.core.models import (
    FileDescriptor,
    ContentFingerprint,
    SizeFingerprint,
    DuplicateGroup,
    Selection,
    ScanStats,
)


class Digest(Protocol):
    """Incremental digest object, as returned by hashlib/xxhash constructors."""
    def update(self, data: bytes) -> None: ...
    def digest(self) -> bytes: ...


class HashAlgorithm(Protocol):
    """
    Interface for digest algorithms.

    Allows plugging in different hashing functions like SHA-256 or xxHash3
    without affecting the rest of the fingerprinting logic.
    """
    name: str

    def new(self) -> Digest:
        """Returns a fresh incremental digest object."""
        ...


class TreeWalker(Protocol):
    """
    Interface for enumerating regular files under a root directory.

    Attributes:
        errors: Number of entries skipped because they could not be read.
    """
    errors: int

    def walk(self) -> Iterator[FileDescriptor]:
        """Lazily yield one FileDescriptor per regular file."""
        ...


class Fingerprinter(Protocol):
    """Interface for computing a file's content fingerprint."""
    def compute(self, path: str) -> ContentFingerprint:
        """
        Open `path` and fingerprint its sampled content.

        Raises:
            OSError: If the file cannot be opened or read.
        """
        ...


class DuplicateGrouper(Protocol):
    """
    Interface for grouping files into duplicate groups.
    """
    def group_by_size(
        self,
        descriptors: Iterable[FileDescriptor],
        stats: Optional[ScanStats] = None
    ) -> Dict[SizeFingerprint, List[FileDescriptor]]:
        """Phase 1: group files by length, keeping lengths shared by 2+ files."""
        ...

    def group_by_content(
        self,
        files: List[FileDescriptor],
        stats: Optional[ScanStats] = None
    ) -> Dict[ContentFingerprint, List[FileDescriptor]]:
        """Phase 2: group same-length files by content fingerprint."""
        ...

    def find_duplicates(
        self,
        descriptors: Iterable[FileDescriptor],
        stats: Optional[ScanStats] = None,
        candidate_filter: Optional[Callable[[List[FileDescriptor]], bool]] = None
    ) -> List[DuplicateGroup]:
        """
        Run both phases.

        Args:
            descriptors: Lazy sequence of files from the walker.
            stats: Optional statistics collector.
            candidate_filter: Optional predicate; size groups it rejects are never hashed.

        Returns:
            Duplicate groups with 2+ files each, in first-encountered order.
        """
        ...


class SelectionPolicy(Protocol):
    """
    Interface for choosing the kept file of a duplicate group.
    """
    def order(self, files: List[FileDescriptor]) -> List[FileDescriptor]:
        """Return a new list; the first eligible file is kept."""
        ...


class DuplicateFinder(Protocol):
    """
    Interface for the main engine: walk -> size -> content -> selection.
    """
    def find(
        self,
        walkers: Iterable[TreeWalker],
        stats: Optional[ScanStats] = None
    ) -> List[Selection]:
        """
        Run the full pipeline over files from all walkers.

        Returns:
            One Selection per reportable duplicate group.
        """
        ...
