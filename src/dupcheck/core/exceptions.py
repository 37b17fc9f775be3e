"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/exceptions.py
Error hierarchy shared by the engine and the CLI.
Fatal errors (arguments, traversal, comparison) abort the run; deletion errors are per-file.
"""


class DupCheckError(Exception):
    """Base class for all dupcheck errors."""


class InvalidArgumentsError(DupCheckError, ValueError):
    """Bad user input, detected before any listing or comparison happens."""


class DirectoryTraversalError(DupCheckError):
    """A directory could not be listed."""

    def __init__(self, directory: str, reason: str):
        self.directory = directory
        self.reason = reason
        super().__init__(f"Failed to read directory {directory}: {reason}")


class FileCompareError(DupCheckError, IOError):
    """A file could not be opened, stat'd or read during comparison."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Error while comparing file {path}: {reason}")


class DeletionError(DupCheckError):
    """A confirmed duplicate could not be removed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to delete {path}: {reason}")


class OperationCancelledError(DupCheckError):
    """The caller asked the engine to stop via stopped_flag."""
