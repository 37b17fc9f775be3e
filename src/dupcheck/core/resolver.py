"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/resolver.py
Turns an ordered pair stream into a canonical duplicate → original mapping.

Single pass, no backtracking:
  • a pair is skipped when either file is already marked as a duplicate
  • otherwise the files are compared; on equality the second file is marked
    as a duplicate of the first
  • a marked file is never re-examined, so the "original" is the first file
    in generation order that matched, not the oldest or shortest one
"""

import time
import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from dupcheck.core.comparator import FileComparatorImpl
from dupcheck.core.exceptions import OperationCancelledError
from dupcheck.core.interfaces import DuplicateResolver, FileComparator
from dupcheck.core.models import DuplicateRecord, FilePath, Pair, SearchStats

logger = logging.getLogger(__name__)


class DuplicateResolverImpl(DuplicateResolver):
    """
    Resolves pairs with an injected FileComparator.

    The `marked` mapping lives only for the duration of one resolve() call,
    so the same resolver can be reused and always yields the same result for
    the same input.
    """
    STAGE_NAME = "Comparing files"
    PROGRESS_INTERVAL = 1000  # Report progress every N pairs

    def __init__(self, comparator: Optional[FileComparator] = None):
        self.comparator = comparator or FileComparatorImpl()

    def resolve(
        self,
        pairs: Iterable[Pair],
        total: Optional[int] = None,
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> Tuple[List[DuplicateRecord], SearchStats]:
        stats = SearchStats()
        start_time = time.time()
        marked: Dict[FilePath, FilePath] = {}
        processed = 0

        for file1, file2 in pairs:
            if stopped_flag and stopped_flag():
                logger.debug("Resolution interrupted by user")
                raise OperationCancelledError("Duplicate search cancelled")

            processed += 1

            if file1 == file2 or file1 in marked or file2 in marked:
                stats.pairs_skipped += 1
            else:
                stats.pairs_compared += 1
                # FileCompareError propagates: a partial mapping would misreport duplicates
                if self.comparator.files_equal(file1, file2):
                    logger.debug(f"Duplicate: {file2} matches {file1}")
                    marked[file2] = file1

            if progress_callback and processed % self.PROGRESS_INTERVAL == 0:
                progress_callback(self.STAGE_NAME, processed, total)

        if progress_callback and processed % self.PROGRESS_INTERVAL != 0:
            progress_callback(self.STAGE_NAME, processed, total)

        records = [DuplicateRecord(duplicate=dup, original=orig) for dup, orig in sorted(marked.items())]

        stats.pairs_total = processed
        stats.duplicates_found = len(records)
        stats.total_time = time.time() - start_time
        return records, stats
