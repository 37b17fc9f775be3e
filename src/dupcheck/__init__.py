"""
dupcheck — byte-for-byte duplicate file finder for one or more directories.

Core features:
- Full or cross-directory comparison (cross mode skips pairs within one directory)
- Size prefilter, then chunked streaming comparison (no hashing)
- Deterministic report: duplicate → original, sorted by duplicate path
- Confirmed deletion, permanent or to system trash (via send2trash)
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("dupcheck")
except Exception:
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        import tomli as tomllib  # Python < 3.11: pip install tomli

    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API — only what users should import directly
from dupcheck.commands import DuplicateSearchCommand
from dupcheck.core import (
    SearchParams, SearchStats, DuplicateRecord, FileListerImpl, FileComparatorImpl,
    DuplicateResolverImpl, generate_pairs)
from dupcheck.utils.convert_utils import ConvertUtils
from dupcheck.services import FileService, ReportService

__all__ = [
    "DuplicateSearchCommand",
    "SearchParams",
    "SearchStats",
    "DuplicateRecord",
    "FileListerImpl",
    "FileComparatorImpl",
    "DuplicateResolverImpl",
    "generate_pairs",
    "ConvertUtils",
    "FileService",
    "ReportService",
    "__version__",
]
