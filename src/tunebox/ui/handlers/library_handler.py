"""
Handler for library commands: browsing, filtering, and creating songs.
"""

from typing import Dict

from rich.table import Table
from rich import box

from .base_handler import BaseHandler
from ...core.config import GENRES, MENU_OPTIONS, SONG_DEFAULTS, SUCCESS_MESSAGES
from ...core.exceptions import SongNotFoundError
from ...core.logger import get_logger
from ...core.validation import parse_int
from ...models.song_builder import SongBuilder
from ...services.song_filters import ArtistFilter, DurationFilter, GenreFilter, NoFilter, SongFilter

logger = get_logger("library_handler")


class LibraryHandler(BaseHandler):
    """Commands that read from or add to the music library."""

    def view_library(self):
        self.display_manager.display_songs(self.library.get_all(), "Song Library")

    def filter_songs(self):
        """Ask for a filter, apply it to the whole library and show the result."""
        self.display_manager.display_menu("Filter Songs (Open/Closed Principle)", MENU_OPTIONS["FILTER"])
        choice = self.input_handlers.read_choice("Choose filter type:", MENU_OPTIONS["FILTER"])
        song_filter = self._create_filter(choice)

        filtered = song_filter.filter(self.library.get_all())
        logger.debug(f"{song_filter.description} matched {len(filtered)} songs")
        self.display_manager.display_songs(filtered, f"Filtered Results ({song_filter.description})")

    def _create_filter(self, choice: str) -> SongFilter:
        if choice == "1":
            genre = self.input_handlers.read_line(f"Enter genre ({'/'.join(GENRES)}):")
            return GenreFilter(genre)
        if choice == "2":
            artist = self.input_handlers.read_line("Enter artist name:")
            return ArtistFilter(artist)
        if choice == "3":
            max_duration = self.input_handlers.read_int("Enter max duration (seconds):", "duration")
            return DurationFilter(max_duration)
        return NoFilter()

    def add_custom_song(self):
        """
        Build a song from typed fields and add it to the library.

        Blank answers for the optional fields keep the builder defaults.
        """
        self.styling.print_banner("BUILDER PATTERN - Create Custom Song")
        read = self.input_handlers

        next_id = self.library.next_id()
        song_id = read.read_int(f"Enter song ID [{next_id}]:", "ID", default=next_id)
        title = read.read_line("Enter song title:")
        artist = read.read_line("Enter artist name:")
        builder = SongBuilder(song_id, title, artist)

        genre = read.read_line(f"Enter genre ({'/'.join(GENRES)}) [{SONG_DEFAULTS['GENRE']}]:")
        if genre:
            builder.genre(genre)
        duration = read.read_line(f"Enter duration (seconds) [{SONG_DEFAULTS['DURATION']}]:")
        if duration:
            builder.duration(parse_int(duration, "duration"))
        year = read.read_line(f"Enter year [{SONG_DEFAULTS['YEAR']}]:")
        if year:
            builder.year(parse_int(year, "year"))
        album = read.read_line(f"Enter album name [{SONG_DEFAULTS['ALBUM']}]:")
        if album:
            builder.album(album)

        song = builder.build()
        self.library.add(song)
        self.console.print()
        self.styling.success(SUCCESS_MESSAGES["SONG_CREATED"])
        self.console.print(f"  {song}", markup=False)

    def clone_song(self):
        """Clone a library song and show that the copy is equal but separate."""
        self.styling.print_banner("PROTOTYPE PATTERN - Clone Song")
        self.display_manager.display_songs(self.library.get_all(), "Available Songs")

        song_id = self.input_handlers.read_int("Enter song ID to clone:", "ID")
        original = self.library.get_by_id(song_id)
        if original is None:
            raise SongNotFoundError(song_id)

        cloned = original.clone()
        self.console.print()
        self.console.print(f"Original: {original}", markup=False)
        self.console.print(self.styling.dim(f"  identity: {id(original):#x}"))
        self.console.print(f"Cloned:   {cloned}", markup=False)
        self.console.print(self.styling.dim(f"  identity: {id(cloned):#x}"))
        self.console.print()
        self.styling.success(f"Equal values: {cloned == original}")
        self.styling.success(f"Separate objects: {cloned is not original}")

    def check_shared_library(self, holders: Dict[str, object]):
        """
        Show that every component holds the same library instance.

        Args:
            holders: Component name to component; each exposes a `library` attribute
        """
        self.styling.print_banner("SINGLETON PATTERN - Verify Single Instance")

        table = Table(show_header=True, header_style="bold magenta", box=box.ROUNDED, border_style="blue")
        table.add_column("Component", style="white")
        table.add_column("Library instance", style="cyan")
        for name, holder in holders.items():
            table.add_row(name, f"{id(holder.library):#x}")
        self.console.print(table)

        libraries = [holder.library for holder in holders.values()]
        all_same = all(library is self.library for library in libraries)
        self.console.print()
        if all_same:
            self.styling.success(f"All same: {all_same} ({len(self.library)} songs)")
        else:
            self.styling.error(f"All same: {all_same}")
        return all_same
