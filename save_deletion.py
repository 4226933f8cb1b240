#!/usr/bin/env python3
"""
Save Deletion Module

Asks for confirmation and removes the selected save folders. The prompt and
the folder removal are passed in by the caller, so the sequence can run
without a terminal or a real save directory.
"""

import logging
import pathlib
from dataclasses import dataclass, field
from typing import Callable, Optional

from save_errors import DeletionError, FailedToDelete, FailedToReadDir
from save_parser import SaveRecord

logger = logging.getLogger("kladeusis.deletion")


@dataclass
class DeletionResult:
    """Outcome of a deletion pass"""

    confirmed: bool
    deleted: list[pathlib.Path] = field(default_factory=list)


def is_confirmed(answer: str) -> bool:
    """Only a plain 'y' (any case) counts as yes"""
    return answer.strip().lower() == "y"


def remove_save_folder(path: pathlib.Path):
    """Remove the files directly inside a save folder, then the folder itself

    Save folders hold flat files only; a nested directory makes the removal
    fail with FailedToDelete. A symlink is refused before anything is
    removed, so files outside the save directory are never touched.
    """
    if path.is_symlink():
        raise FailedToReadDir("Refusing to delete through a symbolic link", path=path)

    try:
        children = list(path.iterdir())
    except OSError as e:
        raise FailedToReadDir(str(e), path=path) from e

    for child in children:
        try:
            child.unlink()
        except OSError as e:
            raise FailedToDelete(str(e), path=child) from e

    try:
        path.rmdir()
    except OSError as e:
        raise FailedToDelete(str(e), path=path) from e


def execute_deletion(
    candidates: list[SaveRecord],
    directory: pathlib.Path,
    confirm: Callable[[list[SaveRecord]], str],
    delete_folder: Callable[[pathlib.Path], None] = remove_save_folder,
    progress_callback: Optional[Callable[[str], None]] = None,
) -> DeletionResult:
    """Confirm and delete the candidate save folders in order

    Args:
        candidates: Saves selected for deletion
        directory: Save directory the candidates were found in
        confirm: Shows the candidates and returns the user's answer
        delete_folder: Removes one save folder
        progress_callback: Optional callback for progress updates

    An empty candidate list returns an unconfirmed result without calling
    ``confirm``.

    Returns:
        DeletionResult; ``confirmed`` is False when the user declined or
        there was nothing to delete

    Raises:
        DeletionError: on the first folder that cannot be removed. Folders
            removed before it are listed in the error's ``deleted`` attribute.
    """
    if not candidates:
        return DeletionResult(confirmed=False)

    answer = confirm(candidates)
    if not is_confirmed(answer):
        logger.info("User did not confirm delete (answer %r)", answer)
        return DeletionResult(confirmed=False)

    result = DeletionResult(confirmed=True)
    for i, save in enumerate(candidates):
        path = directory / save.file_name
        if progress_callback:
            progress_callback(f"Deleting {save.file_name} ({i + 1}/{len(candidates)})")
        try:
            delete_folder(path)
        except DeletionError as e:
            e.deleted = list(result.deleted)
            logger.error("Stopped after %s of %s folders: %s", len(result.deleted), len(candidates), e)
            raise
        logger.debug("Deleted %s", path)
        result.deleted.append(path)

    return result
