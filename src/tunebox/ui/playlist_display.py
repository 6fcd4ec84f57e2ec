"""
Playlist display strategies.

A display renders a playlist or a plain list of songs. Code that shows songs
depends only on PlaylistDisplay, so renderers can be swapped at runtime.
"""

from abc import ABC, abstractmethod
from typing import List

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from ..core.config import UI_CONFIG
from ..models.playlist import Playlist
from ..models.song import Song
from ..utils.string_utils import center_text, format_duration, pluralize, truncate_text


class PlaylistDisplay(ABC):
    """Base class for playlist renderers. Renderers never modify what they show."""

    def __init__(self, console: Console):
        self.console = console

    @abstractmethod
    def display(self, playlist: Playlist):
        """Render a playlist with its totals."""
        pass

    @abstractmethod
    def display_songs(self, songs: List[Song], title: str):
        """Render a list of songs under a title."""
        pass


class SimplePlaylistDisplay(PlaylistDisplay):
    """One line per song."""

    def display(self, playlist: Playlist):
        songs = playlist.songs
        self._print_heading(playlist.name)
        if playlist.description:
            self.console.print(f"[dim]{escape(playlist.description)}[/dim]")

        if not songs:
            self.console.print("Empty playlist")
            return

        for i, song in enumerate(songs, 1):
            self.console.print(f"{i}. {escape(song.title)} - {escape(song.artist)} ({song.duration}s)")
        self.console.print()
        self.console.print(
            f"Total: {pluralize(len(songs), 'song')} | Duration: {playlist.total_duration} seconds"
        )

    def display_songs(self, songs: List[Song], title: str):
        self._print_heading(title)

        if not songs:
            self.console.print("No songs found")
            return

        for song in songs:
            self.console.print(escape(str(song)))
        self.console.print()
        self.console.print(f"Total: {pluralize(len(songs), 'song')}")

    def _print_heading(self, title: str):
        self.console.print()
        self.console.print(f"[bold]{escape(title)}[/bold]")
        self.console.print("=" * UI_CONFIG["SEPARATOR_LENGTH"])


class DetailedPlaylistDisplay(PlaylistDisplay):
    """
    Boxed table with one column per field.

    Titles and artists longer than their column are cut and end with an
    ellipsis; the box header is centered and cut to the box width.
    """

    def __init__(self, console: Console, width: int = None):
        super().__init__(console)
        self.width = width or UI_CONFIG["DETAILED_WIDTH"]
        self.title_width = UI_CONFIG["TITLE_COLUMN_WIDTH"]
        self.artist_width = UI_CONFIG["ARTIST_COLUMN_WIDTH"]

    def display(self, playlist: Playlist):
        songs = playlist.songs
        self._print_header(playlist.name, playlist.description)

        if not songs:
            self._print_empty("Empty playlist")
        else:
            table = self._create_table("#")
            for i, song in enumerate(songs, 1):
                self._add_song_row(table, str(i), song)
            self.console.print(table)

        self._print_footer(
            f"Total: {pluralize(len(songs), 'song')} | Duration: {playlist.total_duration} seconds"
            f" ({format_duration(playlist.total_duration)})"
        )

    def display_songs(self, songs: List[Song], title: str):
        self._print_header(title)

        if not songs:
            self._print_empty("No songs found")
        else:
            table = self._create_table("ID")
            for song in songs:
                self._add_song_row(table, str(song.id), song)
            self.console.print(table)

        self._print_footer(f"Total: {pluralize(len(songs), 'song')}")

    def _print_header(self, title: str, subtitle: str = None):
        inner_width = self.width - 6
        header_text = Text(center_text(title, inner_width), style="bold cyan")
        if subtitle:
            header_text.append("\n" + center_text(subtitle, inner_width), style="dim")
        self.console.print()
        self.console.print(Panel(header_text, box=box.DOUBLE, border_style="cyan", width=self.width))

    def _create_table(self, number_label: str) -> Table:
        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.DOUBLE_EDGE,
            border_style="blue",
            width=self.width,
        )
        table.add_column(number_label, style="bold white", width=3, justify="right", no_wrap=True)
        table.add_column("Title", style="white", width=self.title_width, no_wrap=True, overflow="ellipsis")
        table.add_column("Artist", style="green", width=self.artist_width, no_wrap=True, overflow="ellipsis")
        table.add_column("Genre", style="yellow", no_wrap=True, overflow="ellipsis")
        table.add_column("Duration", style="cyan", justify="right", no_wrap=True)
        return table

    def _add_song_row(self, table: Table, number: str, song: Song):
        # Text cells so user-entered brackets are not read as markup
        table.add_row(
            number,
            Text(truncate_text(song.title, self.title_width)),
            Text(truncate_text(song.artist, self.artist_width)),
            Text(song.genre),
            f"{song.duration}s",
        )

    def _print_empty(self, message: str):
        self.console.print(Panel(Text(message, style="dim"), box=box.DOUBLE_EDGE, border_style="blue", width=self.width))

    def _print_footer(self, text: str):
        self.console.print(Panel(Text(text, style="bold"), box=box.DOUBLE, border_style="cyan", width=self.width))
