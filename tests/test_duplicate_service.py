"""
Tests for DuplicateService — flattening selections into report data.
"""
from shear.core.models import ContentFingerprint, DuplicateGroup, FileDescriptor, Selection
from shear.services.duplicate_service import DuplicateService


def make_selection(kept, *redundant, size=100):
    files = [FileDescriptor(path=p, length=size) for p in (kept, *redundant)]
    group = DuplicateGroup(fingerprint=ContentFingerprint(length=size, head_digest=b"d"), files=files)
    return Selection(group=group, kept=files[0], redundant=files[1:])


class TestDuplicateService:
    """Kept files never appear among redundant paths."""

    def test_redundant_paths_in_report_order(self):
        selections = [
            make_selection("/g1/keep", "/g1/r1"),
            make_selection("/g2/keep", "/g2/r1", "/g2/r2", size=200),
        ]

        assert DuplicateService.redundant_paths(selections) == ["/g1/r1", "/g2/r1", "/g2/r2"]

    def test_reclaimable_bytes(self):
        selections = [
            make_selection("/g1/keep", "/g1/r1"),
            make_selection("/g2/keep", "/g2/r1", "/g2/r2", size=200),
        ]

        assert DuplicateService.reclaimable_bytes(selections) == 100 + 2 * 200

    def test_empty_input(self):
        assert DuplicateService.redundant_paths([]) == []
        assert DuplicateService.reclaimable_bytes([]) == 0
