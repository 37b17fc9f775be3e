"""
Tests for size conversion utilities — used by --chunk-size and the reclaimable space line.
"""
import pytest

from dupcheck.utils.convert_utils import ConvertUtils


class TestHumanToBytes:
    """Test conversion from human-readable sizes (e.g., "64K") to bytes."""

    def test_bytes_without_suffix(self):
        assert ConvertUtils.human_to_bytes("0") == 0
        assert ConvertUtils.human_to_bytes("4096") == 4096

    def test_binary_units(self):
        assert ConvertUtils.human_to_bytes("1K") == 1024
        assert ConvertUtils.human_to_bytes("64KB") == 64 * 1024
        assert ConvertUtils.human_to_bytes("1M") == 1024 * 1024
        assert ConvertUtils.human_to_bytes("2MiB") == 2 * 1024 * 1024
        assert ConvertUtils.human_to_bytes("1.5MB") == int(1.5 * 1024 * 1024)
        assert ConvertUtils.human_to_bytes("1G") == 1024 ** 3

    def test_case_and_whitespace_insensitive(self):
        assert ConvertUtils.human_to_bytes(" 1kb ") == 1024
        assert ConvertUtils.human_to_bytes("1 m") == 1024 * 1024

    def test_rejects_negative_values(self):
        with pytest.raises(ValueError, match="Negative size not allowed"):
            ConvertUtils.human_to_bytes("-1K")

    @pytest.mark.parametrize("value", ["", "abc", "1X", "1.2.3M", "K"])
    def test_rejects_invalid_formats(self, value):
        with pytest.raises(ValueError, match="Invalid size format"):
            ConvertUtils.human_to_bytes(value)


class TestBytesToHuman:

    def test_formats(self):
        assert ConvertUtils.bytes_to_human(0) == "0.00B"
        assert ConvertUtils.bytes_to_human(1536) == "1.50KB"
        assert ConvertUtils.bytes_to_human(1024 * 1024) == "1.00MB"

    def test_negative_is_zero(self):
        assert ConvertUtils.bytes_to_human(-5) == "0B"
