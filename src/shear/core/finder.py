"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

finder.py
Pipeline: walk -> size groups -> content groups -> selection.

Files under compare roots only matter when they duplicate a file under the
primary root: size groups without a primary-root file are never hashed,
and the kept file is always a primary-root file.
"""
import os
import time
import logging
from pathlib import Path
from typing import List, Iterable, Iterator, Optional, Sequence

from shear.core.models import (
    FileDescriptor, Selection, ScanStats, SortOrder, HashAlgorithmKind, Stage, DEFAULT_SAMPLE_SIZE
)
from shear.core.interfaces import DuplicateFinder, TreeWalker
from shear.core.walker import TreeWalkerImpl
from shear.core.fingerprint import ContentFingerprinterImpl, get_algorithm
from shear.core.grouper import DuplicateGrouperImpl
from shear.core.selector import Selector

logger = logging.getLogger(__name__)


class DuplicateFinderImpl(DuplicateFinder):
    """
    Runs the whole pipeline over one or more walkers and collects statistics.
    """
    def __init__(self, grouper: DuplicateGrouperImpl = None, selector: Selector = None):
        self.grouper = grouper or DuplicateGrouperImpl()
        self.selector = selector or Selector()

    def find(
        self,
        walkers: Iterable[TreeWalker],
        stats: Optional[ScanStats] = None
    ) -> List[Selection]:
        """
        Args:
            walkers: Primary-root walker first, then any compare-root walkers
            stats: Optional collector; a fresh one is used when omitted
        Returns:
            Selections in deterministic order (size groups, then content groups,
            in first-encountered order)
        """
        if stats is None:
            stats = ScanStats()
        walkers = list(walkers)
        total_start_time = time.time()

        start_time = time.time()
        groups = self.grouper.find_duplicates(
            self._unique_descriptors(walkers),
            stats=stats,
            candidate_filter=_has_primary_file
        )
        stats.traversal_errors += sum(w.errors for w in walkers)
        stats.add_stage_time(Stage.GROUP.value, time.time() - start_time)

        start_time = time.time()
        selections = self.selector.select_all(groups)
        stats.redundant_files += sum(len(s.redundant) for s in selections)
        stats.reclaimable_bytes += sum(s.reclaimable_bytes for s in selections)
        stats.add_stage_time(Stage.SELECT.value, time.time() - start_time)

        stats.total_time = time.time() - total_start_time
        logger.info(
            f"Found {len(selections)} duplicate groups, {stats.redundant_files} redundant files"
        )
        return selections

    @staticmethod
    def _unique_descriptors(walkers: List[TreeWalker]) -> Iterator[FileDescriptor]:
        """Chains all walkers lazily, dropping paths an earlier walker already produced."""
        seen = set()
        for walker in walkers:
            for descriptor in walker.walk():
                key = os.path.normcase(os.path.abspath(descriptor.path))
                if key in seen:
                    logger.debug(f"Skipping already seen file: {descriptor.path}")
                    continue
                seen.add(key)
                yield descriptor


def _has_primary_file(files: List[FileDescriptor]) -> bool:
    return any(f.from_primary_root for f in files)


def _is_inside(path: str, directory: str) -> bool:
    path, directory = Path(path).resolve(), Path(directory).resolve()
    return path == directory or directory in path.parents


def build_walkers(
    root_dir: str,
    compare_dirs: Sequence[str] = (),
    recurse: bool = True,
    excluded_dirs: Sequence[str] = ()
) -> List[TreeWalkerImpl]:
    """
    Primary-root walker followed by one recursive walker per compare root.
    A compare root outside the primary root skips the primary subtree; one
    nested inside it is walked whole and repeats are dropped by path.
    """
    walkers = [TreeWalkerImpl(root_dir, recurse=recurse, excluded_dirs=list(excluded_dirs))]
    for compare_dir in compare_dirs:
        compare_excluded = list(excluded_dirs)
        if not _is_inside(compare_dir, root_dir):
            compare_excluded.insert(0, root_dir)
        walkers.append(TreeWalkerImpl(
            compare_dir,
            recurse=True,
            excluded_dirs=compare_excluded,
            from_primary_root=False
        ))
    return walkers


def build_finder(
    sort_order: SortOrder = SortOrder.LONGEST_PATH,
    algorithm: HashAlgorithmKind = HashAlgorithmKind.SHA256,
    sample_size: int = DEFAULT_SAMPLE_SIZE
) -> DuplicateFinderImpl:
    return DuplicateFinderImpl(
        grouper=DuplicateGrouperImpl(
            ContentFingerprinterImpl(get_algorithm(algorithm), sample_size=sample_size)
        ),
        selector=Selector(sort_order=sort_order)
    )


def find_redundant_paths(
    root: str,
    *,
    compare_dirs: Sequence[str] = (),
    sort_order: SortOrder = SortOrder.LONGEST_PATH,
    recurse: bool = True,
    excluded_dirs: Sequence[str] = (),
    algorithm: HashAlgorithmKind = HashAlgorithmKind.SHA256,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
    stats: Optional[ScanStats] = None
) -> Iterator[str]:
    """
    Yield every path a caller could delete while keeping one copy per duplicate group.

    Paths are spelled as the walker built them from `root`. Content equality is
    judged from sampled fingerprints: files longer than 2 * sample_size that
    differ only between the head and tail windows are reported as duplicates.
    """
    finder = build_finder(sort_order=sort_order, algorithm=algorithm, sample_size=sample_size)
    walkers = build_walkers(root, compare_dirs=compare_dirs, recurse=recurse, excluded_dirs=excluded_dirs)
    for selection in finder.find(walkers, stats=stats):
        yield from selection.redundant_paths
