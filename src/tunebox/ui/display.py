"""
Display management for Tunebox CLI with Rich components.
"""

from typing import Dict, List, Optional, Tuple, Type
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box

from ..core.config import UI_CONFIG
from ..core.exceptions import InvalidSelectionError
from ..core.logger import get_logger
from ..models.playlist import Playlist
from ..models.song import Song
from ..utils.string_utils import format_duration
from .playlist_display import PlaylistDisplay, SimplePlaylistDisplay, DetailedPlaylistDisplay
from .styling import Styling

logger = get_logger("display")


class DisplayManager:
    """
    Owns the console and the active playlist display.

    Exactly one display is active at a time. Callers render through this
    manager and never learn which concrete display is in use.
    """

    DISPLAY_CLASSES: Dict[str, Type[PlaylistDisplay]] = {
        "simple": SimplePlaylistDisplay,
        "detailed": DetailedPlaylistDisplay,
    }

    def __init__(self, console: Optional[Console] = None, mode: Optional[str] = None):
        self.console = console or Console()
        self.styling = Styling(self.console)
        self.mode: Optional[str] = None
        self.current_display: Optional[PlaylistDisplay] = None
        self.set_mode(mode or UI_CONFIG["DEFAULT_DISPLAY"])

    def set_mode(self, mode: str) -> PlaylistDisplay:
        """
        Switch to one of the built-in displays.

        Raises:
            InvalidSelectionError: If the mode is unknown
        """
        display_class = self.DISPLAY_CLASSES.get(mode.strip().lower())
        if display_class is None:
            raise InvalidSelectionError(
                f"Unknown display mode {mode!r}. Available: {', '.join(self.DISPLAY_CLASSES)}"
            )
        self.mode = mode.strip().lower()
        self.current_display = display_class(self.console)
        logger.debug(f"Display mode set to {self.mode}")
        return self.current_display

    def set_display(self, display: PlaylistDisplay):
        """Use any PlaylistDisplay implementation, built-in or not."""
        self.current_display = display
        self.mode = type(display).__name__

    def display_playlist(self, playlist: Playlist):
        self.current_display.display(playlist)

    def display_songs(self, songs: List[Song], title: str):
        self.current_display.display_songs(songs, title)

    def display_menu(self, title: str, options: List[Tuple[str, str]]):
        """Display a numbered menu."""
        table = Table(
            title=title,
            title_style="bold cyan",
            show_header=False,
            box=box.ROUNDED,
            border_style="cyan",
            padding=(0, 2)
        )
        table.add_column("Option", style="bold white", justify="right")
        table.add_column("Description", style="white")
        for key, label in options:
            table.add_row(key, label)
        self.console.print()
        self.console.print(table)

    def display_playlist_summaries(self, playlists: List[Playlist]):
        """Display one row per playlist with its description and totals."""
        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.ROUNDED,
            border_style="blue",
        )
        table.add_column("#", style="bold white", justify="right")
        table.add_column("Name", style="white")
        table.add_column("Theme", style="magenta")
        table.add_column("Description", style="dim")
        table.add_column("Songs", style="cyan", justify="right")
        table.add_column("Duration", style="cyan", justify="right")

        for i, playlist in enumerate(playlists, 1):
            table.add_row(
                str(i),
                Text(playlist.name),
                Text(playlist.theme or "—"),
                Text(playlist.description or ""),
                str(len(playlist)),
                f"{playlist.total_duration}s ({format_duration(playlist.total_duration)})",
            )

        self.console.print()
        self.console.print(table)
