"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models and run configuration for duplicate detection.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional
from enum import Enum

from shear.utils.convert_utils import ConvertUtils


# =============================
# Enums
# =============================

class SortOrder(Enum):
    """
    Selection policy deciding which file of a duplicate group is kept.
    The first file after ordering is kept, the rest are reported.
    """
    LONGEST_PATH = "longest-path"
    SHORTEST_PATH = "shortest-path"
    NEWEST = "newest"
    OLDEST = "oldest"
    FIRST_ENCOUNTERED = "first"

    @property
    def display_name(self) -> str:
        """Human-readable name for console output."""
        mapping = {
            SortOrder.LONGEST_PATH: "Longest Path",
            SortOrder.SHORTEST_PATH: "Shortest Path",
            SortOrder.NEWEST: "Newest",
            SortOrder.OLDEST: "Oldest",
            SortOrder.FIRST_ENCOUNTERED: "First Encountered",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class HashAlgorithmKind(Enum):
    """Digest used for content fingerprints."""
    SHA256 = "sha256"
    XXH3_128 = "xxh3"

    @property
    def description(self) -> str:
        mapping = {
            HashAlgorithmKind.SHA256: "SHA-256 (256-bit, cryptographic)",
            HashAlgorithmKind.XXH3_128: "xxHash3 128-bit (fast, non-cryptographic)",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class Stage(str, Enum):
    GROUP = "group"
    SELECT = "select"


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileDescriptor:
    """
    A regular file found by the walker.
    `length` and `modified_time` come from the directory entry stat.
    """
    path: str
    length: int  # in bytes
    modified_time: Optional[float] = None
    from_primary_root: bool = True

    def __repr__(self):
        return f"<FileDescriptor path={self.path}, length={self.length}>"


@dataclass(frozen=True)
class SizeFingerprint:
    """Cheap first-pass key: files of different length are never duplicates."""
    length: int


@dataclass(frozen=True)
class ContentFingerprint:
    """
    Length plus sampled-content digests.

    `tail_digest` is set only for files longer than the sample size. Files
    longer than twice the sample size that differ only between the head and
    tail windows produce equal fingerprints: equality is a strong hint of
    identical content, not a proof.
    """
    length: int
    head_digest: bytes
    tail_digest: Optional[bytes] = None

    def __post_init__(self):
        if not isinstance(self.head_digest, bytes):
            raise ValueError("head_digest must be bytes")
        if self.tail_digest is not None and not isinstance(self.tail_digest, bytes):
            raise ValueError("tail_digest must be bytes or None")

    def __repr__(self):
        tail = self.tail_digest.hex()[:12] if self.tail_digest else None
        return f"<ContentFingerprint length={self.length}, head={self.head_digest.hex()[:12]}, tail={tail}>"


@dataclass
class DuplicateGroup:
    """
    Files sharing one ContentFingerprint.
    Only groups with at least two files are reported.
    """
    fingerprint: ContentFingerprint
    files: List[FileDescriptor]

    @property
    def size(self) -> int:
        return self.fingerprint.length

    @property
    def paths(self) -> List[str]:
        return [f.path for f in self.files]

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.files)

    def __repr__(self):
        return f"<DuplicateGroup size={self.size}, count={len(self.files)}>"


@dataclass
class Selection:
    """Outcome of a selection policy applied to one duplicate group."""
    group: DuplicateGroup
    kept: FileDescriptor
    redundant: List[FileDescriptor]

    @property
    def redundant_paths(self) -> List[str]:
        return [f.path for f in self.redundant]

    @property
    def reclaimable_bytes(self) -> int:
        return sum(f.length for f in self.redundant)


@dataclass
class ScanStats:
    """
    Counters and timings collected during one run.
    """
    files_scanned: int = 0
    traversal_errors: int = 0
    read_errors: int = 0
    size_candidates: int = 0
    files_fingerprinted: int = 0
    duplicate_groups: int = 0
    redundant_files: int = 0
    reclaimable_bytes: int = 0
    total_time: float = 0.0
    stage_times: Dict[str, float] = field(default_factory=dict)

    def add_stage_time(self, stage: str, duration: float) -> None:
        self.stage_times[stage] = self.stage_times.get(stage, 0.0) + duration

    @property
    def skipped_files(self) -> int:
        return self.traversal_errors + self.read_errors

    def print_summary(self) -> str:
        labels = {
            Stage.GROUP.value: "Walk + grouping",
            Stage.SELECT.value: "Selection",
        }

        lines = [
            "Scan Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s",
            f"Files scanned: {self.files_scanned}",
            f"Size candidates: {self.size_candidates}",
            f"Files fingerprinted: {self.files_fingerprinted}",
            f"Duplicate groups: {self.duplicate_groups}",
            f"Redundant files: {self.redundant_files}",
            f"Reclaimable space: {ConvertUtils.bytes_to_human(self.reclaimable_bytes)}",
        ]
        if self.skipped_files:
            lines.append(
                f"Skipped: {self.traversal_errors} traversal error(s), {self.read_errors} read error(s)"
            )

        for stage, duration in self.stage_times.items():
            lines.append(f"{labels.get(stage, stage.title())}: {duration:.3f}s")

        return "\n".join(lines)


"""
DTO for run parameters with built-in validation.
"""

DEFAULT_SAMPLE_SIZE = 0x800000  # 8 MiB


@dataclass
class FindParams:
    """Parameters for one redundant-path search."""
    root_dir: str
    compare_dirs: List[str] = field(default_factory=list)
    excluded_dirs: List[str] = field(default_factory=list)
    recurse: bool = True
    sort_order: SortOrder = SortOrder.LONGEST_PATH
    algorithm: HashAlgorithmKind = HashAlgorithmKind.SHA256
    sample_size: int = DEFAULT_SAMPLE_SIZE

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if self.sample_size <= 0:
            raise ValueError("Sample size must be positive")

        self.compare_dirs = [d.strip() for d in self.compare_dirs if d and d.strip()]
        self.excluded_dirs = [d.strip() for d in self.excluded_dirs if d and d.strip()]

    @staticmethod
    def from_human_readable(
            root_dir: str,
            sample_size_str: str = "8M",
            compare_dirs: Optional[List[str]] = None,
            excluded_dirs: Optional[List[str]] = None,
            recurse: bool = True,
            sort_order: SortOrder = SortOrder.LONGEST_PATH,
            algorithm: HashAlgorithmKind = HashAlgorithmKind.SHA256,
    ) -> 'FindParams':
        """
        Factory method to create params from human-readable inputs.
        Useful for CLI argument parsing.
        """
        return FindParams(
            root_dir=root_dir,
            compare_dirs=compare_dirs or [],
            excluded_dirs=excluded_dirs or [],
            recurse=recurse,
            sort_order=sort_order,
            algorithm=algorithm,
            sample_size=ConvertUtils.human_to_bytes(sample_size_str),
        )
