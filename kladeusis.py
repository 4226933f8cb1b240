#!/usr/bin/env python3
"""
Kladeusis - Ancient Greek κλάδευσις (pruning)

A retention tool for game save folders. Save folders are named
``<character>-<id>_<QuickSave|AutoSave>_<number>``; Kladeusis keeps the
newest N quick saves and N auto saves of every character and offers the rest
for deletion.

Usage:
    kladeusis                          # Prune the current directory, keep 10
    kladeusis -p <path> -s 5           # Prune <path>, keep 5 per category
    kladeusis -p <path> --dry-run      # Only list what would be deleted
"""

import argparse
import logging
import pathlib
from typing import Optional

from rich import box
from rich.table import Table

from auxiliary import format_path_for_display, truncate_middle
from console_ui import ConsoleUI
from kladeusis_config import DEFAULT_SAVES_TO_PRESERVE, PruneConfig
from retention import RetentionPlan, plan_deletion
from save_deletion import DeletionResult, execute_deletion
from save_errors import DeletionError, KladeusisError
from save_parser import SaveRecord
from save_scanner import ScanResult, scan_save_folders

logger = logging.getLogger("kladeusis")

CONFIRM_PROMPT = "Delete the above files? y/n: "


class Kladeusis:
    """Main application class for the Kladeusis save pruning tool."""

    def __init__(self, args: argparse.Namespace, ui: Optional[ConsoleUI] = None):
        self.args = args
        self.ui = ui or ConsoleUI()

    # -- scanning & planning -------------------------------------------------

    def scan(self, config: PruneConfig) -> ScanResult:
        self.ui.print_header("Kladeusis", f"Scanning {format_path_for_display(config.save_folder)}")
        self.ui.show_configuration(config.to_display_dict())

        result = scan_save_folders(config.save_folder)
        if result.skipped:
            if getattr(self.args, "verbose", False):
                self.ui.show_skipped(result.skipped)
            else:
                self.ui.print_warning(f"Skipped {len(result.skipped)} folders that are not saves (-v to list)")
        return result

    def report(self, plan: RetentionPlan):
        if not plan.groups:
            self.ui.print_info("No save folders found.")
            return

        keep = plan.saves_to_preserve
        table = Table(title="Saves by Character", box=box.ROUNDED)
        table.add_column("Character", style="cyan", min_width=16)
        table.add_column("Quick", justify="right")
        table.add_column("Auto", justify="right")
        table.add_column("Delete quick", justify="right", style="yellow")
        table.add_column("Delete auto", justify="right", style="yellow")

        for name in sorted(plan.groups):
            group = plan.groups[name]
            table.add_row(
                truncate_middle(name),
                str(len(group.quick)),
                str(len(group.auto)),
                str(max(0, len(group.quick) - keep)),
                str(max(0, len(group.auto) - keep)),
            )

        self.ui.console.print(table)
        self.ui.print_info(f"Keeping {plan.kept_count} saves, {len(plan.candidates)} selected for deletion")

    # -- confirmation & deletion ---------------------------------------------

    def confirm_delete(self, candidates: list[SaveRecord]) -> str:
        """List the candidates and read the user's answer"""
        self.ui.show_numbered_list([save.file_name for save in candidates])
        answer = self.ui.read_line(CONFIRM_PROMPT)
        logger.debug("User input read: %s", answer)
        return answer

    def execute(self, plan: RetentionPlan, save_folder: pathlib.Path) -> DeletionResult:
        return execute_deletion(
            plan.candidates,
            save_folder,
            confirm=self.confirm_delete,
            progress_callback=self.ui.print_plain,
        )

    def summary(self, result: DeletionResult):
        if not result.confirmed:
            self.ui.print_warning("User did not confirm delete")
            return
        self.ui.show_operation_summary([p.name for p in result.deleted], [])

    def _report_failure(self, error: KladeusisError):
        if isinstance(error, DeletionError):
            failed_name = error.path.name if error.path is not None else "?"
            self.ui.show_operation_summary([p.name for p in error.deleted], [(failed_name, error.message)])
        self.ui.print_error("Encountered error:")
        self.ui.print_plain(str(error))

    # -- main entry point ----------------------------------------------------

    def run(self) -> Optional[DeletionResult]:
        """Run the pipeline; errors are reported, not raised"""
        try:
            config = PruneConfig.from_args(self.args)
            result = self.scan(config)
            plan = plan_deletion(result.records, config.saves_to_preserve)
            self.report(plan)

            if not plan.candidates:
                self.ui.print_success("Nothing to delete.")
                return None

            if config.dry_run:
                self.ui.show_numbered_list([save.file_name for save in plan.candidates])
                self.ui.print_info("Dry run, no folders deleted.")
                return None

            deletion = self.execute(plan, config.save_folder)
            self.summary(deletion)
            return deletion
        except KladeusisError as e:
            self._report_failure(e)
            return None


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a whole number: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kladeusis",
        description="Kladeusis - keep the newest game saves per character and delete the rest",
    )
    parser.add_argument(
        "-p",
        "--path-to-save-folder",
        type=pathlib.Path,
        default=None,
        help="The path the program should run against (default: current directory)",
    )
    parser.add_argument(
        "-s",
        "--saves-to-preserve",
        type=_non_negative_int,
        default=None,
        help=f"The latest n saves to ignore when selecting saves for deletion (default: {DEFAULT_SAVES_TO_PRESERVE})",
    )
    parser.add_argument("--dry-run", action="store_true", help="List deletion candidates without deleting")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show skipped folders and debug logging")
    return parser


def main(argv: Optional[list[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    app = Kladeusis(args)
    app.ui.install_log_handler(verbose=args.verbose)
    try:
        app.run()
    except KeyboardInterrupt:
        app.ui.print_warning("\nAborted, no further folders deleted.")


if __name__ == "__main__":
    main()
