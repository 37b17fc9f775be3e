"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate-detection engine.
These protocols enforce structural typing using Python's `typing.Protocol` so that
the CLI, the command layer and the tests can swap implementations freely.

Key Components:
---------------
- FileLister: Interface for listing regular files of a directory.
- FileComparator: Interface for deciding whether two files are byte-identical.
- DuplicateResolver: Interface for turning an ordered pair stream into duplicate records.
"""

from typing import Protocol, List, Tuple, Optional, Callable, Iterable
from dupcheck.core.models import FilePath, Pair, DuplicateRecord, SearchStats


# ===== Interfaces =====

class FileLister(Protocol):
    """
    Interface for listing files of a single input directory.
    """
    def list_files(self, directory: str, recursive: bool) -> List[FilePath]:
        """
        Return the regular files contained in `directory`.

        Args:
            directory: Directory to list.
            recursive: Whether to descend into subdirectories.

        Returns:
            Flat list of file paths, in discovery order.

        Raises:
            DirectoryTraversalError: If any part of the tree cannot be read.
        """
        ...


class FileComparator(Protocol):
    """Interface for byte-equality checks between two files."""
    def files_equal(self, a: FilePath, b: FilePath) -> bool:
        """
        Return True if both files have identical content.

        Raises:
            FileCompareError: If either file cannot be opened, stat'd or read.
        """
        ...


class DuplicateResolver(Protocol):
    """
    Interface for the resolution stage.

    Walks pairs in generation order, compares the ones that are still eligible
    and produces the final duplicate → original mapping.
    """
    def resolve(
        self,
        pairs: Iterable[Pair],
        total: Optional[int] = None,
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> Tuple[List[DuplicateRecord], SearchStats]:
        """
        Resolve pairs into duplicate records.

        Args:
            pairs: Pairs in generation order.
            total: Number of pairs, if known (used for progress only).
            stopped_flag: Optional function to check for cancellation.
            progress_callback: Optional callback for progress updates (stage, current, total).

        Returns:
            A tuple containing:
                - Duplicate records sorted by duplicate path
                - Statistics collected during resolution
        """
        ...
