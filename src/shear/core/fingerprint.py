"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

fingerprint.py
Size and content fingerprints with pluggable digest algorithms.

A content fingerprint digests at most two sampling windows of a file:
- head: the first min(length, S) bytes
- tail: the last min(S, length - S) bytes, only when length > S

For S < length < 2S the windows overlap. For length > 2S the bytes between
the windows are never read, so files differing only there fingerprint equal.
"""

import hashlib
import logging
import os
from typing import BinaryIO

import xxhash

from shear.core.models import (
    FileDescriptor, SizeFingerprint, ContentFingerprint, HashAlgorithmKind, DEFAULT_SAMPLE_SIZE
)
from shear.core.interfaces import Fingerprinter, HashAlgorithm, Digest

logger = logging.getLogger(__name__)


class FingerprintConfig:
    SAMPLE_SIZE = DEFAULT_SAMPLE_SIZE  # 8 MiB per sampling window
    READ_BLOCK_SIZE = 1024 * 1024  # Bytes requested per read call


# Use the same way to implement and use any other hashing algorithm
class Sha256AlgorithmImpl(HashAlgorithm):
    name = "sha256"

    @staticmethod
    def new() -> Digest:
        return hashlib.sha256()


class XXH3AlgorithmImpl(HashAlgorithm):
    name = "xxh3"

    @staticmethod
    def new() -> Digest:
        return xxhash.xxh3_128()


_ALGORITHMS = {
    HashAlgorithmKind.SHA256: Sha256AlgorithmImpl,
    HashAlgorithmKind.XXH3_128: XXH3AlgorithmImpl,
}


def get_algorithm(kind: HashAlgorithmKind) -> HashAlgorithm:
    """Returns the algorithm implementation for the given kind."""
    try:
        return _ALGORITHMS[kind]()
    except KeyError:
        raise ValueError(f"Unsupported hash algorithm: {kind!r}")


def size_fingerprint(descriptor: FileDescriptor) -> SizeFingerprint:
    """O(1): the length is already known from the directory entry."""
    return SizeFingerprint(descriptor.length)


class ContentFingerprinterImpl(Fingerprinter):
    """
    Computes head/tail sampled fingerprints.
    Each call opens and closes its own file handle.
    """

    def __init__(
        self,
        algorithm: HashAlgorithm = None,
        sample_size: int = FingerprintConfig.SAMPLE_SIZE,
        block_size: int = FingerprintConfig.READ_BLOCK_SIZE
    ):
        if sample_size <= 0:
            raise ValueError("Sample size must be positive")
        if block_size <= 0:
            raise ValueError("Block size must be positive")
        self.algorithm = algorithm or Sha256AlgorithmImpl()
        self.sample_size = sample_size
        self.block_size = block_size

    def compute(self, path: str) -> ContentFingerprint:
        """
        Fingerprint the file at `path`.

        Raises:
            OSError: If the file cannot be opened, stat-ed or read.
        """
        with open(path, 'rb') as f:
            length = os.fstat(f.fileno()).st_size

            head_digest = self._digest_window(f, 0, min(length, self.sample_size))

            tail_digest = None
            if length > self.sample_size:
                tail_length = min(self.sample_size, length - self.sample_size)
                tail_digest = self._digest_window(f, length - tail_length, tail_length)

        logger.debug(f"Fingerprinted {path} ({length} bytes, tail={'yes' if tail_digest else 'no'})")
        return ContentFingerprint(length=length, head_digest=head_digest, tail_digest=tail_digest)

    def _digest_window(self, stream: BinaryIO, offset: int, window: int) -> bytes:
        """
        Digest `window` bytes starting at `offset`.
        A read may return fewer bytes than requested, so keep reading until the
        window is consumed or EOF is hit; only bytes actually read are digested.
        """
        digest = self.algorithm.new()
        stream.seek(offset)
        remaining = window
        while remaining > 0:
            chunk = stream.read(min(self.block_size, remaining))
            if not chunk:
                break
            digest.update(chunk)
            remaining -= len(chunk)
        return digest.digest()
