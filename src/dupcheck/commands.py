"""
Unified command orchestrator for duplicate search.
This is the SINGLE source of truth for the search workflow — the CLI only renders and deletes.
"""
import os
import time
import logging
from typing import Callable, List, Optional, Tuple

from dupcheck.core.comparator import FileComparatorImpl
from dupcheck.core.interfaces import FileComparator, FileLister
from dupcheck.core.models import DirectorySet, DuplicateRecord, SearchParams, SearchStats
from dupcheck.core.pairs import count_pairs, iter_pairs
from dupcheck.core.resolver import DuplicateResolverImpl
from dupcheck.core.scanner import FileListerImpl

logger = logging.getLogger(__name__)


class DuplicateSearchCommand:
    """
    Orchestrates the entire duplicate search:
    1. List every input directory (in the order given)
    2. Generate candidate pairs (cross or full policy)
    3. Resolve pairs into sorted duplicate records

    Usage:
        params = SearchParams(directories=["a", "b"], cross=True)
        command = DuplicateSearchCommand()
        records, stats = command.execute(
            params,
            progress_callback=cli_progress_printer,
            stopped_flag=signal_handler_check
        )
    """

    def __init__(
            self,
            lister: Optional[FileLister] = None,
            comparator_factory: Optional[Callable[[int], FileComparator]] = None
    ):
        self._lister = lister or FileListerImpl()
        self._comparator_factory = comparator_factory or FileComparatorImpl
        self._dirs: DirectorySet = []

    def execute(
            self,
            params: SearchParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None,
            stopped_flag: Optional[Callable[[], bool]] = None
    ) -> Tuple[List[DuplicateRecord], SearchStats]:
        """
        Execute a duplicate search with given parameters.

        Args:
            params: Validated search parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None
            stopped_flag: () -> bool (returns True if operation should stop)

        Returns:
            Tuple of (duplicate_records sorted by duplicate path, statistics)

        Raises:
            DirectoryTraversalError: If any directory cannot be listed
            FileCompareError: If any file cannot be read during comparison
            OperationCancelledError: If stopped_flag requested cancellation
        """
        start_time = time.time()

        # Step 1: List files, one inner list per directory
        self._dirs = []
        seen = set()
        for directory in params.directories:
            files = []
            # Overlapping inputs (repeated or nested directories) must not pair a file with itself
            for path in self._lister.list_files(directory, params.recursive):
                real_path = os.path.realpath(path)
                if real_path in seen:
                    logger.debug(f"Skipping already listed file: {path}")
                    continue
                seen.add(real_path)
                files.append(path)
            self._dirs.append(files)
            if progress_callback:
                progress_callback("Listing files", sum(len(d) for d in self._dirs), None)

        files_listed = sum(len(d) for d in self._dirs)
        total_pairs = count_pairs(self._dirs, params.cross)
        logger.debug(f"Listed {files_listed} files, {total_pairs} pairs to check (cross={params.cross})")

        # Step 2 + 3: Stream pairs into the resolver
        comparator = self._comparator_factory(params.chunk_size)
        resolver = DuplicateResolverImpl(comparator)
        records, stats = resolver.resolve(
            iter_pairs(self._dirs, params.cross),
            total=total_pairs,
            stopped_flag=stopped_flag,
            progress_callback=progress_callback
        )

        stats.files_listed = files_listed
        counters = getattr(comparator, "counters", None)
        if counters is not None:
            stats.size_mismatches = counters.size_mismatches
        stats.total_time = time.time() - start_time

        return records, stats

    def get_directory_set(self) -> DirectorySet:
        """Get the directory listing of the last execution."""
        return [list(files) for files in self._dirs]  # Return copy to prevent external mutation
