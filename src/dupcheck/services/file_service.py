"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
File removal for confirmed duplicates.
Files are either unlinked permanently or moved to the system trash (via send2trash).
"""
import os
import logging
from pathlib import Path
from typing import List, Sequence, Tuple

from send2trash import send2trash

from dupcheck.core.exceptions import DeletionError
from dupcheck.core.models import DuplicateRecord, FilePath

logger = logging.getLogger(__name__)


class FileService:
    """
    Removal operations used by the action shell.
    Every single-file operation raises DeletionError; batch operations never abort early.
    """

    @staticmethod
    def delete_file(file_path: FilePath) -> None:
        """Permanently removes a file."""
        try:
            os.remove(file_path)
        except OSError as e:
            raise DeletionError(file_path, e.strerror or str(e)) from e

    @staticmethod
    def move_to_trash(file_path: FilePath) -> None:
        """Moves a file to the system trash."""
        path = Path(file_path).resolve()

        if not path.exists():
            raise DeletionError(file_path, "file not found")

        try:
            send2trash(str(path))
        except Exception as e:
            raise DeletionError(file_path, f"failed to move to trash: {e}") from e

    @classmethod
    def delete_duplicates(
            cls,
            records: Sequence[DuplicateRecord],
            use_trash: bool = False
    ) -> Tuple[List[FilePath], List[DeletionError]]:
        """
        Removes the `duplicate` side of every record, continuing past failures.

        Returns:
            - Paths that were removed
            - Errors for paths that could not be removed
        """
        remove = cls.move_to_trash if use_trash else cls.delete_file
        deleted: List[FilePath] = []
        failures: List[DeletionError] = []

        for record in records:
            try:
                remove(record.duplicate)
                deleted.append(record.duplicate)
            except DeletionError as e:
                logger.warning(str(e))
                failures.append(e)

        return deleted, failures

    @staticmethod
    def reclaimable_bytes(records: Sequence[DuplicateRecord]) -> int:
        """Total size of all duplicates; files that vanished since the search count as zero."""
        total = 0
        for record in records:
            try:
                total += os.stat(record.duplicate).st_size
            except OSError:
                logger.debug(f"Could not stat {record.duplicate}")
        return total
