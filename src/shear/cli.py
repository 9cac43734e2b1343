#!/usr/bin/env python3
"""
shear CLI — lists redundant duplicate files beneath a directory tree.
Prints one path per line on stdout; warnings and statistics go to stderr.
Read-only: no file is ever deleted, moved or modified.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import List, NoReturn
import logging

logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import xxhash
except ImportError:
    _MISSING_DEPS.append("xxhash")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from shear.core.models import FindParams, Selection, ScanStats, SortOrder, HashAlgorithmKind
from shear.commands import FindRedundantCommand
from shear.utils.convert_utils import ConvertUtils
from shear.services.duplicate_service import DuplicateService
from shear.aliases import (
    SORT_ALIASES, SORT_CHOICES, SORT_HELP_TEXT,
    ALGORITHM_ALIASES, ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT,
    EPILOG_TEXT
)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="shear",
            description="shear — find redundant duplicate files (read-only report)",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "root",
            nargs="?",
            default=".",
            type=str,
            help="Root directory to examine. Default: current directory"
        )

        parser.add_argument(
            "--compare", "-c",
            action="append",
            default=[],
            type=str,
            metavar='DIR',
            dest="compare_dirs",
            help="Additional directory whose files are reported only when they\n"
                 "duplicate a file under the root (root files are kept).\n"
                 "Repeat the flag for several directories"
        )
        parser.add_argument(
            "--excluded-dirs", "-e",
            action="append",
            default=[],
            type=str,
            metavar='DIR',
            dest="excluded_dirs",
            help="Directory to skip while walking. Repeat the flag for several"
        )
        parser.add_argument(
            "--no-recurse", "-n",
            action="store_true",
            help="Do not descend into subdirectories of the root"
        )

        parser.add_argument(
            "--sort", "-s",
            choices=SORT_CHOICES,
            default="longest-path",
            type=str,
            help=SORT_HELP_TEXT
        )
        parser.add_argument(
            "--algorithm",
            choices=ALGORITHM_CHOICES,
            default="sha256",
            type=str,
            help=ALGORITHM_HELP_TEXT
        )
        parser.add_argument(
            "--sample-size",
            default="8M",
            type=str,
            metavar='SIZE',
            help="Bytes digested from the head and from the tail of each file\n"
                 "(e.g., 512K, 8M). Default: 8M"
        )

        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Only print paths; suppress warnings"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show statistics and progress details on stderr"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.quiet and args.verbose:
            self.error_exit("--quiet and --verbose cannot be used together")

        root_path = Path(args.root)
        if not root_path.exists():
            self.error_exit(f"Directory not found: {args.root}")
        if not root_path.is_dir():
            self.error_exit(f"Path is not a directory: {args.root}")

        if not ConvertUtils.is_valid_size_format(args.sample_size):
            self.error_exit(f"Invalid size format: {args.sample_size} (use e.g. 512K, 8M, 1G)")
        if ConvertUtils.human_to_bytes(args.sample_size) <= 0:
            self.error_exit("Sample size must be positive")

        valid_compare_dirs = []
        for compare_dir in args.compare_dirs:
            compare_path = Path(compare_dir)
            if not compare_path.exists():
                self.warning(f"Compare directory not found: {compare_dir}")
            elif not compare_path.is_dir():
                self.warning(f"Compare path is not a directory: {compare_dir}")
            else:
                valid_compare_dirs.append(compare_dir)
        args.compare_dirs = valid_compare_dirs

        for excl_dir in args.excluded_dirs:
            excl_path = Path(excl_dir)
            if not excl_path.exists():
                self.warning(f"Excluded directory not found: {excl_dir}")
            elif not excl_path.is_dir():
                self.warning(f"Excluded path is not a directory: {excl_dir}")

    def create_params(self, args: argparse.Namespace) -> FindParams:
        """Create FindParams from CLI arguments."""
        try:
            return FindParams.from_human_readable(
                root_dir=args.root,
                sample_size_str=args.sample_size,
                compare_dirs=args.compare_dirs,
                excluded_dirs=args.excluded_dirs,
                recurse=not args.no_recurse,
                sort_order=SORT_ALIASES.get(args.sort, SortOrder.LONGEST_PATH),
                algorithm=ALGORITHM_ALIASES.get(args.algorithm, HashAlgorithmKind.SHA256),
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def configure_logging(self) -> None:
        """Warnings by default, errors only with --quiet, info with --verbose."""
        if self.quiet:
            level = logging.ERROR
        elif self.verbose:
            level = logging.INFO
        else:
            level = logging.WARNING
        logging.getLogger().setLevel(level)

    def run_search(self, params: FindParams) -> tuple[List[Selection], ScanStats]:
        """Execute the search workflow."""
        if self.verbose:
            print(
                f"Scanning {params.root_dir} (keep: {params.sort_order.display_name}, "
                f"digest: {params.algorithm.description}, "
                f"sample: {ConvertUtils.bytes_to_human(params.sample_size)})",
                file=sys.stderr
            )
        try:
            return FindRedundantCommand().execute(params)
        except RuntimeError as e:
            self.error_exit(f"Search failed: {e}")

    @staticmethod
    def output_results(selections: List[Selection]) -> None:
        """Print redundant paths, one per line, in report order."""
        for path in DuplicateService.redundant_paths(selections):
            print(path)

    def output_summary(self, selections: List[Selection], stats: ScanStats) -> None:
        """Statistics on stderr so stdout stays a plain path list."""
        if self.verbose:
            print("", file=sys.stderr)
            print(stats.print_summary(), file=sys.stderr)
            for idx, selection in enumerate(selections, 1):
                size_str = ConvertUtils.bytes_to_human(selection.group.size)
                print(
                    f"Group {idx} | Size: {size_str} | Files: {selection.group.duplicate_count} | "
                    f"Kept: {selection.kept.path}",
                    file=sys.stderr
                )
            if selections:
                redundant = DuplicateService.redundant_paths(selections)
                reclaimable = ConvertUtils.bytes_to_human(DuplicateService.reclaimable_bytes(selections))
                print(f"Redundant: {len(redundant)} file(s), {reclaimable} reclaimable", file=sys.stderr)

        if stats.skipped_files:
            self.warning(f"{stats.skipped_files} file(s) or directories were skipped because of errors")

        if not self.quiet and not selections:
            print("No duplicate files found.", file=sys.stderr)

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, args=None) -> None:
        """Main entry point."""
        args = self.parse_args(args)
        self.verbose = args.verbose
        self.quiet = args.quiet
        self.configure_logging()

        self.validate_args(args)
        params = self.create_params(args)

        selections, stats = self.run_search(params)
        self.output_results(selections)
        self.output_summary(selections, stats)

        if self.verbose:
            elapsed = time.time() - self.start_time
            print(f"\n✅ Completed in {elapsed:.2f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
