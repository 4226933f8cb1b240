#!/usr/bin/env python3
"""
Error types for Kladeusis

Parse errors are raised per save folder and recovered by the scanner.
Scan, deletion and configuration errors end the run.
"""

import pathlib
from typing import Optional


class KladeusisError(Exception):
    """Base class for every error the pruning pipeline raises"""

    def __init__(self, message: str, path: Optional[pathlib.Path] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.message} ({self.path})"
        return self.message


# Per-folder parse failures


class SaveNameError(KladeusisError):
    """A folder name does not follow the save naming convention"""


class NameNotDetected(SaveNameError):
    pass


class NotEnoughUnderscores(SaveNameError):
    pass


class StringNotNumber(SaveNameError):
    pass


class AsciiErrorInFileName(SaveNameError):
    pass


# Fatal failures


class ScanError(KladeusisError):
    """The save directory could not be listed"""


class CannotReadDirectory(ScanError):
    pass


class DeletionError(KladeusisError):
    """A save folder could not be removed

    ``deleted`` holds the folders removed earlier in the same batch.
    """

    def __init__(self, message: str, path: Optional[pathlib.Path] = None):
        super().__init__(message, path)
        self.deleted: list[pathlib.Path] = []


class FailedToReadDir(DeletionError):
    pass


class FailedToDelete(DeletionError):
    pass


class ConfigError(KladeusisError):
    """The run configuration is unusable"""


class NoPath(ConfigError):
    pass
