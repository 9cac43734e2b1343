"""
Tests for data models and FindParams validation.
"""
import pytest

from shear.core.models import (
    ContentFingerprint,
    DEFAULT_SAMPLE_SIZE,
    FileDescriptor,
    FindParams,
    HashAlgorithmKind,
    ScanStats,
    SortOrder,
)


class TestContentFingerprint:
    """Equality covers length, head digest and tail digest."""

    def test_equal_fingerprints(self):
        assert ContentFingerprint(10, b"h", b"t") == ContentFingerprint(10, b"h", b"t")
        assert hash(ContentFingerprint(10, b"h")) == hash(ContentFingerprint(10, b"h"))

    def test_missing_tail_differs_from_present_tail(self):
        assert ContentFingerprint(10, b"h") != ContentFingerprint(10, b"h", b"t")

    def test_length_is_part_of_identity(self):
        assert ContentFingerprint(10, b"h") != ContentFingerprint(11, b"h")

    def test_digests_must_be_bytes(self):
        with pytest.raises(ValueError, match="head_digest"):
            ContentFingerprint(10, "h")
        with pytest.raises(ValueError, match="tail_digest"):
            ContentFingerprint(10, b"h", "t")


class TestFileDescriptor:

    def test_defaults(self):
        descriptor = FileDescriptor(path="/a", length=3)

        assert descriptor.modified_time is None
        assert descriptor.from_primary_root is True

    def test_is_hashable(self):
        assert len({FileDescriptor("/a", 1), FileDescriptor("/a", 1)}) == 1


class TestFindParams:
    """Test parameter validation in __post_init__."""

    def test_defaults(self):
        params = FindParams(root_dir="/data")

        assert params.sort_order == SortOrder.LONGEST_PATH
        assert params.algorithm == HashAlgorithmKind.SHA256
        assert params.sample_size == DEFAULT_SAMPLE_SIZE
        assert params.recurse is True
        assert params.compare_dirs == []

    def test_empty_root_rejected(self):
        with pytest.raises(ValueError, match="Root directory cannot be empty"):
            FindParams(root_dir="")

    @pytest.mark.parametrize("sample_size", [0, -1])
    def test_non_positive_sample_size_rejected(self, sample_size):
        with pytest.raises(ValueError, match="Sample size must be positive"):
            FindParams(root_dir="/data", sample_size=sample_size)

    def test_blank_dirs_are_dropped(self):
        params = FindParams(root_dir="/data", compare_dirs=["  ", " /b "], excluded_dirs=["", "/x"])

        assert params.compare_dirs == ["/b"]
        assert params.excluded_dirs == ["/x"]

    def test_from_human_readable(self):
        params = FindParams.from_human_readable(
            root_dir="/data",
            sample_size_str="512K",
            compare_dirs=["/backup"],
            sort_order=SortOrder.NEWEST,
            algorithm=HashAlgorithmKind.XXH3_128,
        )

        assert params.sample_size == 512 * 1024
        assert params.compare_dirs == ["/backup"]
        assert params.excluded_dirs == []
        assert params.sort_order == SortOrder.NEWEST
        assert params.algorithm == HashAlgorithmKind.XXH3_128

    def test_from_human_readable_invalid_size(self):
        with pytest.raises(ValueError):
            FindParams.from_human_readable(root_dir="/data", sample_size_str="lots")


class TestScanStats:

    def test_stage_times_accumulate(self):
        stats = ScanStats()
        stats.add_stage_time("group", 1.0)
        stats.add_stage_time("group", 0.5)

        assert stats.stage_times == {"group": 1.5}

    def test_skipped_files(self):
        assert ScanStats(traversal_errors=2, read_errors=3).skipped_files == 5

    def test_summary(self):
        stats = ScanStats(files_scanned=10, duplicate_groups=2, redundant_files=3, reclaimable_bytes=2048)
        stats.add_stage_time("group", 0.25)
        stats.add_stage_time("select", 0.001)

        summary = stats.print_summary()

        assert summary.startswith("Scan Statistics:")
        assert "Files scanned: 10" in summary
        assert "Redundant files: 3" in summary
        assert "Reclaimable space: 2.00KB" in summary
        assert "Walk + grouping: 0.250s" in summary
        assert "Selection: 0.001s" in summary
        assert "Skipped" not in summary

    def test_summary_reports_skipped(self):
        summary = ScanStats(traversal_errors=1, read_errors=2).print_summary()

        assert "Skipped: 1 traversal error(s), 2 read error(s)" in summary


class TestEnums:

    def test_sort_order_display_name(self):
        assert SortOrder.LONGEST_PATH.display_name == "Longest Path"
        assert SortOrder.FIRST_ENCOUNTERED.value == "first"

    def test_algorithm_description(self):
        assert "SHA-256" in HashAlgorithmKind.SHA256.description
