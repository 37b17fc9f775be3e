"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for duplicate detection: paths, pairs, duplicate records, parameters and stats.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from dupcheck.core.exceptions import InvalidArgumentsError


# ======================
#  Type aliases
# ======================

FilePath = str
DirectorySet = List[List[FilePath]]
Pair = Tuple[FilePath, FilePath]


# =============================
# Config
# =============================

class CompareConfig:
    CHUNK_SIZE = 1024 * 1024  # Bytes read from each file per comparison step


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True, order=True)
class DuplicateRecord:
    """
    One entry of the final report: `duplicate` is byte-identical to `original`
    and was encountered after it in pair generation order.
    """
    duplicate: FilePath
    original: FilePath

    def __repr__(self):
        return f"<DuplicateRecord duplicate={self.duplicate}, original={self.original}>"


@dataclass
class SearchStats:
    """
    Statistics collected during a duplicate search.
    """
    files_listed: int = 0
    pairs_total: int = 0
    pairs_skipped: int = 0
    pairs_compared: int = 0
    size_mismatches: int = 0
    duplicates_found: int = 0
    total_time: float = 0.0

    def print_summary(self) -> str:
        lines = [
            "Search Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            f"Files listed: {self.files_listed}",
            f"Pairs generated: {self.pairs_total}",
            f"Pairs skipped (already marked): {self.pairs_skipped}",
            f"Pairs compared: {self.pairs_compared}",
            f"  rejected by size: {self.size_mismatches}",
            f"Duplicates found: {self.duplicates_found}",
        ]
        return "\n".join(lines)


"""
DTO for search parameters with built-in validation.
Interface-agnostic — built by the CLI, consumed by DuplicateSearchCommand.
"""

@dataclass
class SearchParams:
    """Parameters for one duplicate search with validation."""
    directories: List[str] = field(default_factory=list)
    cross: bool = False
    recursive: bool = False
    chunk_size: int = CompareConfig.CHUNK_SIZE

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.directories:
            raise InvalidArgumentsError("At least one directory is required.")

        if self.cross and len(self.directories) < 2:
            raise InvalidArgumentsError(
                "At least two directories are required for cross directory check."
            )

        if self.chunk_size <= 0:
            raise InvalidArgumentsError("Chunk size must be positive")
