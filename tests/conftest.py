"""
Shared fixtures for duplicate-detection tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'dupcheck' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_dirs(temp_dir) -> Dict[str, Path]:
    """
    Creates two input directories for duplicate scenarios:
    - dir_a: a.txt ("abc"), b.txt ("abc"), c.txt ("xyz"), big.bin (10 bytes)
    - dir_b: copy.txt ("abc"), other.txt ("123")
    - dir_a/sub: nested.txt ("abc")
    """
    dir_a = temp_dir / "dir_a"
    dir_b = temp_dir / "dir_b"
    dir_a.mkdir()
    dir_b.mkdir()

    (dir_a / "a.txt").write_bytes(b"abc")
    (dir_a / "b.txt").write_bytes(b"abc")
    (dir_a / "c.txt").write_bytes(b"xyz")
    (dir_a / "big.bin").write_bytes(b"0123456789")

    (dir_b / "copy.txt").write_bytes(b"abc")
    (dir_b / "other.txt").write_bytes(b"123")

    sub = dir_a / "sub"
    sub.mkdir()
    (sub / "nested.txt").write_bytes(b"abc")

    return {"a": dir_a, "b": dir_b, "sub": sub}
