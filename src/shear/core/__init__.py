"""
Core duplicate detection engine — walker, fingerprints, grouper, selector and pipeline.

This package contains the performance-critical foundation of shear:
- TreeWalkerImpl: lazy, stack-based directory traversal
- ContentFingerprinterImpl: head/tail sampled SHA-256 (or xxHash3) fingerprints
- DuplicateGrouperImpl: size grouping, then content grouping of multi-member size groups
- Selector: keeps one file per group according to a swappable policy
- DuplicateFinderImpl / find_redundant_paths: the whole pipeline
- Models: FileDescriptor, fingerprints, DuplicateGroup, Selection, FindParams

All components are pure Python and never modify the filesystem.
"""

from .walker import TreeWalkerImpl
from .fingerprint import (
    ContentFingerprinterImpl, Sha256AlgorithmImpl, XXH3AlgorithmImpl,
    FingerprintConfig, get_algorithm, size_fingerprint)
from .grouper import DuplicateGrouperImpl
from .selector import Selector, get_policy
from .finder import DuplicateFinderImpl, build_finder, build_walkers, find_redundant_paths
from .models import (
    FileDescriptor, SizeFingerprint, ContentFingerprint, DuplicateGroup, Selection,
    ScanStats, FindParams, SortOrder, HashAlgorithmKind)

__all__ = [
    "TreeWalkerImpl",
    "ContentFingerprinterImpl",
    "Sha256AlgorithmImpl",
    "XXH3AlgorithmImpl",
    "FingerprintConfig",
    "get_algorithm",
    "size_fingerprint",
    "DuplicateGrouperImpl",
    "Selector",
    "get_policy",
    "DuplicateFinderImpl",
    "build_finder",
    "build_walkers",
    "find_redundant_paths",
    "FileDescriptor",
    "SizeFingerprint",
    "ContentFingerprint",
    "DuplicateGroup",
    "Selection",
    "ScanStats",
    "FindParams",
    "SortOrder",
    "HashAlgorithmKind",
]
