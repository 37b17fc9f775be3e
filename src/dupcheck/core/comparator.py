"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/comparator.py
Byte-for-byte file comparison.

The sizes reported by fstat are compared first; files of different length are
rejected without reading a single byte. Files of equal length are streamed in
fixed-size chunks, so at most 2 × chunk_size bytes of content are held at once.
Both handles are closed on every exit path.
"""

import os
import logging
from dataclasses import dataclass
from typing import BinaryIO

from dupcheck.core.exceptions import FileCompareError
from dupcheck.core.interfaces import FileComparator
from dupcheck.core.models import CompareConfig, FilePath

logger = logging.getLogger(__name__)


@dataclass
class CompareCounters:
    """Work done by one comparator instance."""
    comparisons: int = 0
    size_mismatches: int = 0
    bytes_read: int = 0


class FileComparatorImpl(FileComparator):
    """
    Chunked byte-equality comparator.

    Attributes:
        chunk_size: Bytes read from each file per step
        counters: Running totals, useful for statistics and tests
    """

    def __init__(self, chunk_size: int = CompareConfig.CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.chunk_size = chunk_size
        self.counters = CompareCounters()

    def files_equal(self, a: FilePath, b: FilePath) -> bool:
        self.counters.comparisons += 1

        with self._open(a) as f1, self._open(b) as f2:
            size1 = self._size(f1, a)
            size2 = self._size(f2, b)

            if size1 != size2:
                self.counters.size_mismatches += 1
                logger.debug(f"Size mismatch: {a} ({size1} B) vs {b} ({size2} B)")
                return False

            while True:
                chunk1 = self._read(f1, a)
                chunk2 = self._read(f2, b)

                if not chunk1 and not chunk2:
                    return True

                # One side ended early or the content differs
                if len(chunk1) != len(chunk2) or chunk1 != chunk2:
                    return False

    @staticmethod
    def _open(path: FilePath) -> BinaryIO:
        try:
            return open(path, "rb")
        except OSError as e:
            raise FileCompareError(path, f"failed to open file: {e.strerror or e}") from e

    @staticmethod
    def _size(handle: BinaryIO, path: FilePath) -> int:
        try:
            return os.fstat(handle.fileno()).st_size
        except OSError as e:
            raise FileCompareError(path, f"failed to stat file: {e.strerror or e}") from e

    def _read(self, handle: BinaryIO, path: FilePath) -> bytes:
        try:
            chunk = handle.read(self.chunk_size)
        except OSError as e:
            raise FileCompareError(path, f"failed to read file: {e.strerror or e}") from e
        self.counters.bytes_read += len(chunk)
        return chunk
