"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
Human-readable size conversions for the CLI (chunk size option, reclaimable space).
"""
import re

_SIZE_PATTERN = re.compile(r"^(\d+(?:\.\d*)?|\.\d+)\s*([KMGTP]?)(?:I?B)?$")
_MULTIPLIERS = {"": 1, "K": 1024, "M": 1024 ** 2, "G": 1024 ** 3, "T": 1024 ** 4, "P": 1024 ** 5}


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string (e.g., 1.50KB, 3.20MB).
        """
        if size_bytes < 0:
            return "0B"

        size = float(size_bytes)
        for unit in ["B", "KB", "MB", "GB", "TB", "PB"]:
            if size < 1024:
                return f"{size:.2f}{unit}"
            size /= 1024
        return f"{size:.2f}EB"

    @staticmethod
    def human_to_bytes(size_str: str) -> int:
        """
        Convert human-readable size string to bytes.
        Supports formats: '1.5MB', '64KB', '4096', '1K', '1M', '2MiB'.
        Raises ValueError for negative sizes or invalid formats.
        """
        text = size_str.strip().upper()

        if text.startswith("-"):
            raise ValueError(f"Negative size not allowed: '{size_str.strip()}'")

        match = _SIZE_PATTERN.match(text)
        if not match:
            raise ValueError(
                f"Invalid size format: '{size_str.strip()}'. "
                f"Supported formats: 1M, 64K, 512KB, 4096, etc."
            )

        value, unit = match.groups()
        return int(float(value) * _MULTIPLIERS[unit])
