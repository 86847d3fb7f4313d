"""Step logging to a rich console and an optional log file."""

from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape


class CatalogLogger:
    """Logs load and lookup steps; console output only when verbose."""

    def __init__(
        self,
        log_file: Optional[str] = None,
        verbose: bool = False,
        console: Optional[Console] = None,
    ):
        self.verbose = verbose
        self.console = console or Console(stderr=True)
        self.log_file = Path(log_file) if log_file else None

        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_file, "a", encoding="utf-8") as f:
                f.write(f"Catalog Log - {datetime.now().isoformat()}\n")
                f.write("=" * 60 + "\n")

    def log(self, step: str, message: str, detail: Optional[str] = None):
        """
        Log to console (summary) and file (full detail).

        Args:
            step: Step identifier (e.g., "LOAD", "LOOKUP:NAME")
            message: Short message for console output
            detail: Optional detailed information for log file only
        """
        if self.verbose:
            self.console.print(f"[bold cyan]\\[{escape(step)}][/bold cyan] {escape(message)}")

        if self.log_file:
            with open(self.log_file, "a", encoding="utf-8") as f:
                f.write(f"[{datetime.now().isoformat()}] {step}: {message}\n")
                if detail:
                    f.write(f"{'-' * 40}\n{detail}\n{'-' * 40}\n")

    def log_section(self, title: str):
        """Log a section header to both console and file."""
        if self.verbose:
            self.console.print(f"\n[bold yellow]{escape(title)}[/bold yellow]")

        if self.log_file:
            with open(self.log_file, "a", encoding="utf-8") as f:
                f.write(f"\n# {title}\n")
