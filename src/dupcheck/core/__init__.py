"""
Core duplicate-detection engine — lister, pair generator, comparator and resolver.

This package contains the whole engine with no I/O glue:
- FileListerImpl: deterministic directory listing (optionally recursive)
- generate_pairs / iter_pairs / count_pairs: candidate pair policy (cross or full)
- FileComparatorImpl: size prefilter + chunked byte-for-byte comparison
- DuplicateResolverImpl: single-pass duplicate → original resolution
- Models: DuplicateRecord, SearchParams, SearchStats and type aliases
- Exceptions: fatal and per-file error types

All components are pure Python — suitable for CLI usage and for embedding.
"""

from .scanner import FileListerImpl
from .pairs import generate_pairs, iter_pairs, count_pairs
from .comparator import FileComparatorImpl, CompareCounters
from .resolver import DuplicateResolverImpl
from .models import (
    FilePath, DirectorySet, Pair, DuplicateRecord, SearchParams, SearchStats, CompareConfig)
from .exceptions import (
    DupCheckError, InvalidArgumentsError, DirectoryTraversalError, FileCompareError,
    DeletionError, OperationCancelledError)

__all__ = [
    "FileListerImpl",
    "generate_pairs",
    "iter_pairs",
    "count_pairs",
    "FileComparatorImpl",
    "CompareCounters",
    "DuplicateResolverImpl",
    "FilePath",
    "DirectorySet",
    "Pair",
    "DuplicateRecord",
    "SearchParams",
    "SearchStats",
    "CompareConfig",
    "DupCheckError",
    "InvalidArgumentsError",
    "DirectoryTraversalError",
    "FileCompareError",
    "DeletionError",
    "OperationCancelledError",
]
