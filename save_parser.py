#!/usr/bin/env python3
"""
Save Folder Name Parser

Turns a save folder name like ``Some Name-1231415123_QuickSave_277`` into a
SaveRecord holding the character name, the save category and the sequence
number. Names that do not follow this convention raise a SaveNameError.
"""

import re
from dataclasses import dataclass
from enum import Enum

from save_errors import AsciiErrorInFileName, NameNotDetected, NotEnoughUnderscores, StringNotNumber

SEQUENCE_NUMBER_MAX = 65535

_DIGITS = re.compile(r"\+?[0-9]+")

# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


class SaveCategory(Enum):
    QUICK = "quick"
    AUTO = "auto"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class SaveRecord:
    """One save folder found in the save directory"""

    file_name: str
    character_name: str
    category: SaveCategory
    sequence_number: int


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def detect_category(folder_name: str) -> SaveCategory:
    """Classify a folder name by case-insensitive substring match"""
    lowered = folder_name.lower()
    if "quicksave" in lowered:
        return SaveCategory.QUICK
    if "autosave" in lowered:
        return SaveCategory.AUTO
    return SaveCategory.UNRECOGNIZED


def extract_character_name(folder_name: str) -> str:
    """Return everything before the first '-' of the folder name

    Raises:
        NameNotDetected: if there is no '-' or the name starts with one
    """
    index = folder_name.find("-")
    if index <= 0:
        raise NameNotDetected("Could not detect character name")
    return folder_name[:index]


def extract_sequence_number(folder_name: str) -> int:
    """Parse the last '_'-separated token as an unsigned 16-bit number

    Raises:
        NotEnoughUnderscores: if the name has no '_' at all
        StringNotNumber: if the last token is empty, not a number or too large
    """
    segments = folder_name.split("_")
    if len(segments) <= 1:
        raise NotEnoughUnderscores(
            "Did not find the correct number of underscores. Cannot continue with this save."
        )

    token = segments[-1]
    if not token:
        raise StringNotNumber("cannot parse integer from empty string")
    # int() alone would also take whitespace, '-' and non-ASCII digits
    if not _DIGITS.fullmatch(token):
        raise StringNotNumber("invalid digit found in string")

    value = int(token)
    if value > SEQUENCE_NUMBER_MAX:
        raise StringNotNumber("number too large to fit in target type")
    return value


def parse_save_name(folder_name: str) -> SaveRecord:
    """Build a SaveRecord from a save folder name

    The sequence number is checked before the character name, so a name
    failing both reports the sequence number error.

    Args:
        folder_name: Name of the folder, without any parent path

    Returns:
        The parsed SaveRecord (category may be UNRECOGNIZED)

    Raises:
        SaveNameError: if the name does not follow the convention
    """
    if not folder_name or not folder_name.isascii():
        raise AsciiErrorInFileName("Unable to get ascii string from folder name")

    sequence_number = extract_sequence_number(folder_name)
    character_name = extract_character_name(folder_name)

    return SaveRecord(
        file_name=folder_name,
        character_name=character_name,
        category=detect_category(folder_name),
        sequence_number=sequence_number,
    )
