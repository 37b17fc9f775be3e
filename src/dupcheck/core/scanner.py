"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements directory listing for the duplicate-detection engine.
Features:
- Lists regular files of one directory, optionally descending into subdirectories
- Deterministic order: entries are sorted by name at every level
- Skips symbolic links
- Any traversal failure is fatal and raised as DirectoryTraversalError
"""

import os
import time
import logging
from typing import List

from dupcheck.core.exceptions import DirectoryTraversalError
from dupcheck.core.interfaces import FileLister
from dupcheck.core.models import FilePath

logger = logging.getLogger(__name__)


class FileListerImpl(FileLister):
    """
    Lists the regular files of a directory tree.

    Paths are built with os.path.join from the directory exactly as given,
    so they are not normalized or resolved.
    """

    def list_files(self, directory: str, recursive: bool) -> List[FilePath]:
        logger.debug(f"Listing directory: {directory} (recursive={recursive})")
        start_time = time.time()

        if not os.path.exists(directory):
            raise DirectoryTraversalError(directory, "directory does not exist")
        if not os.path.isdir(directory):
            raise DirectoryTraversalError(directory, "not a directory")

        files: List[FilePath] = []
        self._collect(directory, recursive, files)

        elapsed_time = time.time() - start_time
        logger.debug(f"Listed {len(files)} files in {directory} ({elapsed_time:.2f}s)")
        return files

    def _collect(self, directory: str, recursive: bool, files: List[FilePath]) -> None:
        """Append files of `directory` to `files`, walking subdirectories depth-first when recursive."""
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise DirectoryTraversalError(directory, e.strerror or str(e)) from e

        for entry in entries:
            try:
                if entry.is_symlink():
                    logger.debug(f"Skipping symbolic link: {entry.path}")
                    continue

                if entry.is_dir(follow_symlinks=False):
                    if recursive:
                        self._collect(os.path.join(directory, entry.name), True, files)
                    continue

                if entry.is_file(follow_symlinks=False):
                    files.append(os.path.join(directory, entry.name))
                else:
                    logger.debug(f"Skipping non-regular file: {entry.path}")
            except OSError as e:
                raise DirectoryTraversalError(entry.path, e.strerror or str(e)) from e
