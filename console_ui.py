#!/usr/bin/env python3
"""
Console UI Module using Rich

Styled messages, configuration and summary tables, numbered listings and
line prompts for the Kladeusis command line.
"""

import logging
from typing import IO, Any, Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


class ConsoleUI:
    """Console UI handler using Rich"""

    def __init__(self, force_terminal: Optional[bool] = None, file: Optional[IO[str]] = None):
        """Initialize console with optional terminal forcing and output file"""
        self.console = Console(force_terminal=force_terminal, file=file, highlight=False)

    # Basic styled output methods
    def print_success(self, message: str):
        """Print success message in green"""
        self.console.print(message, style="green")

    def print_error(self, message: str):
        """Print error message in red"""
        self.console.print(message, style="red bold")

    def print_warning(self, message: str):
        """Print warning message in yellow"""
        self.console.print(message, style="yellow")

    def print_info(self, message: str):
        """Print info message in cyan"""
        self.console.print(message, style="cyan")

    def print_plain(self, message: str):
        """Print message in plain white"""
        self.console.print(message, style="white", markup=False)

    def print_header(self, title: str, subtitle: Optional[str] = None):
        """Print a header with optional subtitle"""
        if subtitle:
            header_text = f"[bold]{escape(title)}[/bold]\n[dim]{escape(subtitle)}[/dim]"
        else:
            header_text = f"[bold]{escape(title)}[/bold]"

        self.console.print(Panel(header_text, box=box.ROUNDED, padding=(0, 1)))

    def show_configuration(self, config: dict[str, Any]):
        """Display configuration in a formatted table"""
        table = Table(show_header=False, box=box.SIMPLE)
        table.add_column("Setting", style="cyan dim", min_width=20, justify="right")
        table.add_column("Value", style="cyan", min_width=30)

        for key, value in config.items():
            table.add_row(key, Text(str(value)))

        self.console.print(table)

    def show_numbered_list(self, items: list[str], separator: str = "****"):
        """Print items numbered from 1, framed by separator lines"""
        self.console.print(separator, markup=False)
        for i, item in enumerate(items, 1):
            self.console.print(f"\t{i} | {item}", markup=False)
        self.console.print(separator, markup=False)

    def show_skipped(self, skipped: list[tuple[str, Any]], show_limit: int = 5):
        """List folders that were left out, with the reason"""
        self.print_warning(f"Skipped {len(skipped)} folders that are not saves:")
        for name, reason in skipped[:show_limit]:
            self.console.print(f"    • {name}: {reason}", style="white dim", markup=False)
        if len(skipped) > show_limit:
            self.console.print(f"    • ... and {len(skipped) - show_limit} more", style="white dim")

    def show_operation_summary(self, successful: list[str], failed: list[tuple], operation_name: str = "deleted"):
        """Show summary of completed operations"""
        if successful:
            self.print_success(f"Successfully {operation_name} {len(successful)} folders")

        if failed:
            self.print_error(f"Failed on {len(failed)} folders:")
            for name, error in failed:
                self.console.print(f"  • {name}: {error}", style="red dim", markup=False)

    # Interactive prompts
    def read_line(self, prompt: str) -> str:
        """Prompt for a line of input and return it trimmed"""
        try:
            return self.console.input(prompt).strip()
        except EOFError:
            # Closed stdin reads as an empty answer
            self.console.print()
            return ""

    # Logging
    def install_log_handler(self, verbose: bool = False):
        """Route log records through Rich on this console"""
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(name)s: %(message)s",
            handlers=[RichHandler(console=self.console, show_path=False)],
            force=True,
        )
