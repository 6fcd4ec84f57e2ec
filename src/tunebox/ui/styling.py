"""
Styling utilities for Tunebox CLI.
Status lines, dimmed technical text, and the start-up banner.
"""

from typing import Optional
from rich.console import Console
from rich.text import Text
from rich.panel import Panel
from rich.align import Align
from rich.markup import escape
from rich import box


class Styling:
    """Styling helpers shared by every screen."""

    def __init__(self, console: Console):
        self.console = console

    @staticmethod
    def dim(text: str) -> str:
        """Apply dimmed styling to text (for ids, hashes, technical notes)."""
        return f"[dim]{text}[/dim]"

    def success(self, message: str):
        """Print a success line. The message is printed literally."""
        self.console.print(f"[bold green]✓[/bold green] {escape(message)}")

    def error(self, message: str):
        """Print an error line. The message is printed literally."""
        self.console.print(f"[bold red]✗[/bold red] {escape(message)}")

    def warning(self, message: str):
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def info(self, message: str):
        self.console.print(f"[blue]ℹ[/blue] {escape(message)}")

    def technical(self, message: str):
        """Print a dimmed technical message."""
        self.console.print(self.dim(escape(message)))

    def print_banner(self, title: str, subtitle: Optional[str] = None, style: str = "cyan"):
        """Print a centered, boxed banner."""
        header_text = Text(title, style=f"bold {style}")
        if subtitle:
            header_text.append(f"\n{subtitle}", style="dim")
        panel = Panel(
            Align.center(header_text),
            border_style=style,
            box=box.DOUBLE,
            padding=(0, 2)
        )
        self.console.print()
        self.console.print(panel)
