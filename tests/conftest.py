"""
Shared fixtures for duplicate finder tests.
Creates isolated temporary directories with controlled test files.
"""
import logging
import pytest
import tempfile
from pathlib import Path
from typing import Dict, Iterator, List

from shear.core.models import FileDescriptor


@pytest.fixture(autouse=True)
def restore_log_level():
    """The CLI changes the root logger level; undo it after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate scenarios:
    - 2 identical 1KB files + 1 more copy in a subdirectory (3 duplicates)
    - 2 identical 2KB files (duplicates)
    - 2 unique files with unique lengths
    - 1 file with the same length as the 1KB group but different content
    - 1 empty file
    """
    files = {}

    # Duplicate set #1 (1KB of 'A')
    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    # Duplicate pair #2 (2KB of 'B')
    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.txt"
    files["dup2_b"] = temp_dir / "dup2_b.txt"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    # Unique files (unique lengths)
    files["unique1"] = temp_dir / "unique1.txt"
    files["unique1"].write_bytes(b"C" * 1500)
    files["unique2"] = temp_dir / "unique2.txt"
    files["unique2"].write_bytes(b"D" * 2500)

    # Same length as set #1, different content
    files["same_size"] = temp_dir / "same_size.txt"
    files["same_size"].write_bytes(b"A" * 1023 + b"Z")

    files["empty"] = temp_dir / "empty.txt"
    files["empty"].write_bytes(b"")

    # Subdirectory with another copy of set #1
    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    return files


class ListWalker:
    """Walker stub yielding a fixed list of descriptors."""

    def __init__(self, descriptors: List[FileDescriptor], errors: int = 0):
        self.descriptors = descriptors
        self.errors = errors

    def walk(self) -> Iterator[FileDescriptor]:
        yield from self.descriptors


@pytest.fixture
def list_walker():
    return ListWalker


def describe(path: Path, **kwargs) -> FileDescriptor:
    """FileDescriptor for an existing file."""
    return FileDescriptor(path=str(path), length=path.stat().st_size, **kwargs)


@pytest.fixture
def descriptor_for():
    return describe
