"""
Command orchestrator for redundant file detection.
This is the single entry point for business logic used by the CLI.
"""
from pathlib import Path
from typing import List, Tuple

from shear.core.models import Selection, ScanStats, FindParams
from shear.core.finder import build_finder, build_walkers


class FindRedundantCommand:
    """
    Orchestrates the whole workflow:
    1. Validate the root directory
    2. Build walkers for the root and any compare directories
    3. Run the finder and return selections with statistics

    Usage:
        params = FindParams(root_dir="~/Downloads")
        selections, stats = FindRedundantCommand().execute(params)
    """

    def execute(self, params: FindParams) -> Tuple[List[Selection], ScanStats]:
        """
        Execute the search with given parameters.

        Args:
            params: Validated run parameters

        Returns:
            Tuple of (selections, statistics)

        Raises:
            RuntimeError: If the root directory is missing or not a directory
        """
        root_path = Path(params.root_dir)
        if not root_path.exists():
            raise RuntimeError(f"Directory does not exist: {params.root_dir}")
        if not root_path.is_dir():
            raise RuntimeError(f"Not a directory: {params.root_dir}")

        finder = build_finder(
            sort_order=params.sort_order,
            algorithm=params.algorithm,
            sample_size=params.sample_size
        )
        walkers = build_walkers(
            params.root_dir,
            compare_dirs=params.compare_dirs,
            recurse=params.recurse,
            excluded_dirs=params.excluded_dirs
        )

        stats = ScanStats()
        selections = finder.find(walkers, stats=stats)
        return selections, stats
