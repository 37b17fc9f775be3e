"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/pairs.py
Candidate pair generation.

Pairs are produced directory by directory in input order:
  • intra-directory pairs (x < y), only when cross-checking is disabled
  • then the full product of the current directory with every later directory
The resulting order decides which file of an equal pair becomes the "original".
"""

from itertools import combinations, product
from typing import Iterator, List

from dupcheck.core.models import DirectorySet, Pair


def iter_pairs(dirs: DirectorySet, cross: bool) -> Iterator[Pair]:
    """Lazily yield pairs in generation order."""
    for i, files in enumerate(dirs):
        if not cross:
            yield from combinations(files, 2)

        for other in dirs[i + 1:]:
            yield from product(files, other)


def generate_pairs(dirs: DirectorySet, cross: bool) -> List[Pair]:
    """Return all pairs to compare, in generation order."""
    return list(iter_pairs(dirs, cross))


def count_pairs(dirs: DirectorySet, cross: bool) -> int:
    """Number of pairs iter_pairs would yield, without generating them."""
    sizes = [len(files) for files in dirs]
    total = 0
    remaining = sum(sizes)
    for n in sizes:
        remaining -= n
        if not cross:
            total += n * (n - 1) // 2
        total += n * remaining
    return total
