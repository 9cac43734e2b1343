"""
shear — finds duplicate files beneath a directory tree and reports the redundant copies.

Core features:
- Two-tier fingerprints: file length, then SHA-256 of the first and last 8MB
- Swappable policy for the copy that is kept (longest path by default)
- Compare mode: report files in other trees that duplicate files under the root
- Read-only: nothing is deleted, moved or modified
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("shear")
except Exception:
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        import tomli as tomllib  # Python < 3.11: pip install tomli

    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API — only what users should import directly
from shear.commands import FindRedundantCommand
from shear.core import (
    find_redundant_paths, FindParams, SortOrder, HashAlgorithmKind,
    FileDescriptor, ContentFingerprint, DuplicateGroup, Selection, ScanStats)
from shear.utils.convert_utils import ConvertUtils
from shear.services import DuplicateService

__all__ = [
    "FindRedundantCommand",
    "find_redundant_paths",
    "FindParams",
    "SortOrder",
    "HashAlgorithmKind",
    "FileDescriptor",
    "ContentFingerprint",
    "DuplicateGroup",
    "Selection",
    "ScanStats",
    "ConvertUtils",
    "DuplicateService",
    "__version__",
]
