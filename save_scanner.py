#!/usr/bin/env python3
"""
Save Directory Scanner

Lists the save directory and parses every save folder in it. A folder whose
name cannot be parsed is dropped on its own; the rest of the listing is
still processed.
"""

import logging
import os
import pathlib
from dataclasses import dataclass, field
from typing import Iterator

from save_errors import CannotReadDirectory, SaveNameError
from save_parser import SaveRecord, parse_save_name

logger = logging.getLogger("kladeusis.scanner")


@dataclass
class ScanResult:
    root_path: pathlib.Path
    records: list[SaveRecord] = field(default_factory=list)
    skipped: list[tuple[str, SaveNameError]] = field(default_factory=list)


def _is_directory(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def iter_save_folder_names(directory: pathlib.Path) -> Iterator[str]:
    """Yield names of subdirectories that are non-empty and pure ASCII

    Raises:
        CannotReadDirectory: if the directory cannot be listed
    """
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        raise CannotReadDirectory(str(e), path=directory) from e

    for entry in entries:
        if not _is_directory(entry):
            continue
        if not entry.name or not entry.name.isascii():
            logger.debug("Ignoring folder with non-ascii name: %r", entry.name)
            continue
        yield entry.name


def iter_save_records(names: Iterator[str], skipped: list) -> Iterator[SaveRecord]:
    """Parse folder names lazily, recording the ones that fail"""
    for name in names:
        try:
            yield parse_save_name(name)
        except SaveNameError as e:
            logger.debug("Dropping folder %s: %s", name, e)
            skipped.append((name, e))


def scan_save_folders(directory: pathlib.Path) -> ScanResult:
    """Parse every save folder directly inside ``directory``"""
    result = ScanResult(root_path=directory)
    result.records = list(iter_save_records(iter_save_folder_names(directory), result.skipped))
    logger.info("Scanned %s: %s saves, %s skipped", directory, len(result.records), len(result.skipped))
    return result
