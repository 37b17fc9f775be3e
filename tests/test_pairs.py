"""
Unit tests for candidate pair generation.
Verifies the cross/full pairing policy, ordering and the closed-form pair count.
"""
from itertools import combinations

import pytest

from dupcheck.core import generate_pairs, iter_pairs, count_pairs


DIRS = [
    ["a1", "a2", "a3"],
    ["b1", "b2"],
    ["c1"],
]


class TestGeneratePairs:
    """Test pair generation order and content."""

    def test_full_mode_order(self):
        """Intra-directory pairs come first, then products with every later directory."""
        pairs = generate_pairs(DIRS, cross=False)

        assert pairs == [
            ("a1", "a2"), ("a1", "a3"), ("a2", "a3"),
            ("a1", "b1"), ("a1", "b2"), ("a2", "b1"), ("a2", "b2"), ("a3", "b1"), ("a3", "b2"),
            ("a1", "c1"), ("a2", "c1"), ("a3", "c1"),
            ("b1", "b2"),
            ("b1", "c1"), ("b2", "c1"),
        ]

    def test_cross_mode_order(self):
        """Cross mode keeps only inter-directory products, in (i, j) order."""
        pairs = generate_pairs(DIRS, cross=True)

        assert pairs == [
            ("a1", "b1"), ("a1", "b2"), ("a2", "b1"), ("a2", "b2"), ("a3", "b1"), ("a3", "b2"),
            ("a1", "c1"), ("a2", "c1"), ("a3", "c1"),
            ("b1", "c1"), ("b2", "c1"),
        ]

    def test_cross_mode_never_pairs_same_directory(self):
        dirs = [[f"d{d}/f{f}" for f in range(4)] for d in range(4)]
        for a, b in generate_pairs(dirs, cross=True):
            assert a.split("/")[0] != b.split("/")[0]

    def test_no_pair_generated_twice(self):
        pairs = generate_pairs(DIRS, cross=False)
        unordered = [frozenset(p) for p in pairs]
        assert len(unordered) == len(set(unordered))

    def test_single_directory_cross_yields_nothing(self):
        assert generate_pairs([["a", "b", "c"]], cross=True) == []

    def test_single_directory_full_mode(self):
        assert generate_pairs([["a", "b", "c"]], cross=False) == [("a", "b"), ("a", "c"), ("b", "c")]

    def test_empty_directories(self):
        assert generate_pairs([[], ["x"], []], cross=False) == []
        assert generate_pairs([], cross=False) == []

    def test_iter_pairs_matches_generate_pairs(self):
        assert list(iter_pairs(DIRS, cross=False)) == generate_pairs(DIRS, cross=False)
        assert list(iter_pairs(DIRS, cross=True)) == generate_pairs(DIRS, cross=True)


class TestCountPairs:
    """Test the closed-form pair count against actual generation."""

    @pytest.mark.parametrize("sizes", [[0], [1], [5], [3, 2, 1], [4, 0, 4], [1, 1, 1, 1], [7, 3]])
    @pytest.mark.parametrize("cross", [False, True])
    def test_count_matches_generation(self, sizes, cross):
        dirs = [[f"{d}-{f}" for f in range(n)] for d, n in enumerate(sizes)]
        assert count_pairs(dirs, cross) == len(generate_pairs(dirs, cross))

    def test_full_mode_formula(self):
        """C(n_i, 2) for each directory plus n_i * n_j for every i < j."""
        sizes = [3, 2, 1]
        dirs = [[f"{d}-{f}" for f in range(n)] for d, n in enumerate(sizes)]

        expected = sum(n * (n - 1) // 2 for n in sizes)
        expected += sum(a * b for a, b in combinations(sizes, 2))

        assert count_pairs(dirs, cross=False) == expected == 15
