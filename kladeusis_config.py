#!/usr/bin/env python3
"""
Configuration for Kladeusis

A run is configured by the save directory and the number of saves to keep.
Nothing is stored between runs.
"""

import pathlib
from dataclasses import dataclass
from typing import Optional

from save_errors import ConfigError, NoPath

DEFAULT_SAVES_TO_PRESERVE = 10


def resolve_save_folder(given_path: Optional[pathlib.Path]) -> pathlib.Path:
    """Use the given path, or the current working directory if there is none"""
    if given_path is not None:
        return pathlib.Path(given_path)
    try:
        return pathlib.Path.cwd()
    except OSError as e:
        raise NoPath(str(e)) from e


@dataclass
class PruneConfig:
    """Configuration for one pruning run"""

    save_folder: pathlib.Path
    saves_to_preserve: int = DEFAULT_SAVES_TO_PRESERVE
    dry_run: bool = False

    def validate(self):
        """Reject settings the pipeline cannot run with"""
        if self.saves_to_preserve < 0:
            raise ConfigError(f"Saves to preserve must not be negative, got {self.saves_to_preserve}")

    def to_display_dict(self) -> dict:
        """Labels and values for the configuration table"""
        return {
            "Save folder": str(self.save_folder),
            "Saves to preserve": self.saves_to_preserve,
            "Dry run": "Yes" if self.dry_run else "No",
        }

    @classmethod
    def from_args(cls, args) -> "PruneConfig":
        """Create from parsed command line arguments"""
        saves_to_preserve = getattr(args, "saves_to_preserve", None)
        config = cls(
            save_folder=resolve_save_folder(getattr(args, "path_to_save_folder", None)),
            saves_to_preserve=DEFAULT_SAVES_TO_PRESERVE if saves_to_preserve is None else saves_to_preserve,
            dry_run=getattr(args, "dry_run", False),
        )
        config.validate()
        return config
