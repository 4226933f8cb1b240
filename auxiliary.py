#!/usr/bin/env python3
"""
Auxiliary display helpers for Kladeusis
"""

import pathlib
from typing import Optional, Union


def format_path_for_display(path: Union[str, pathlib.Path], home_path: Optional[str] = None) -> str:
    """Format a path for display by replacing the home directory with ~

    Args:
        path: Path to format
        home_path: Home directory path (defaults to platform home)

    Returns:
        Path with the home directory prefix replaced by ~ if applicable
    """
    if home_path is None:
        home_path = str(pathlib.Path.home())

    path = pathlib.Path(path)
    try:
        return str(pathlib.Path("~") / path.relative_to(home_path))
    except ValueError:
        return str(path)


def truncate_middle(text: str, max_length: int = 32) -> str:
    """Shorten long names for table cells, keeping both ends

    Returns:
        The text with ... in the middle if it is longer than max_length
    """
    if len(text) <= max_length:
        return text

    available = max_length - 3  # Account for "..."
    start_len = available // 2
    end_len = available - start_len

    return f"{text[:start_len]}...{text[-end_len:]}"
