"""
Tunebox CLI Module
Interactive menu over the music library and session playlists.
"""

import argparse
from typing import Callable, Dict, List, Optional, TextIO

from rich.console import Console

from ..core.config import (
    DISPLAY_MODES,
    ERROR_MESSAGES,
    MENU_OPTIONS,
    PROJECT_DESCRIPTION,
    PROJECT_NAME,
    PROJECT_VERSION,
    SUCCESS_MESSAGES,
)
from ..core.exceptions import TuneboxError
from ..core.logger import get_logger, setup_logging
from ..services.music_library import MusicLibrary
from ..services.playlist_service import PlaylistService
from ..ui.display import DisplayManager
from ..ui.handlers import DisplayHandler, LibraryHandler, PlaylistHandler
from ..ui.input_handlers import InputHandlers

logger = get_logger("cli")


class TuneboxCLI:
    """Main CLI class for Tunebox."""

    def __init__(
        self,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
        library: Optional[MusicLibrary] = None,
        display_mode: Optional[str] = None
    ):
        """
        Initialize the CLI.

        Args:
            console: Console to render to (a new one on stdout by default)
            stream: Text stream to read answers from (stdin by default)
            library: Library to use (a freshly seeded one by default)
            display_mode: Initial display mode
        """
        self.library = library if library is not None else MusicLibrary()
        self.playlist_service = PlaylistService(self.library)
        self.display_manager = DisplayManager(console, display_mode)
        self.input_handlers = InputHandlers(self.display_manager.console, stream)

        handler_args = (self.library, self.playlist_service, self.display_manager, self.input_handlers)
        self.library_handler = LibraryHandler(*handler_args)
        self.playlist_handler = PlaylistHandler(*handler_args)
        self.display_handler = DisplayHandler(*handler_args)

        self.commands: Dict[str, Callable[[], object]] = {
            "1": self.library_handler.view_library,
            "2": self.library_handler.filter_songs,
            "3": self.playlist_handler.add_song,
            "4": self.playlist_handler.remove_song,
            "5": self.playlist_handler.view_playlist,
            "6": self.display_handler.change_display_mode,
            "7": self.library_handler.add_custom_song,
            "8": self.playlist_handler.create_themed_playlist,
            "9": self.library_handler.clone_song,
            "10": self.check_shared_library,
            "11": self.playlist_handler.view_all_playlists,
        }

    @property
    def console(self) -> Console:
        return self.display_manager.console

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog=PROJECT_NAME.lower(),
            description=f"{PROJECT_NAME} v{PROJECT_VERSION} - {PROJECT_DESCRIPTION}",
        )
        parser.add_argument(
            '--version',
            action='version',
            version=f'{PROJECT_NAME} {PROJECT_VERSION}'
        )
        parser.add_argument(
            '--display', '-d',
            choices=DISPLAY_MODES,
            help='Initial display mode (default: simple)'
        )
        parser.add_argument(
            '--log-level',
            choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
            help='Logging level (default: WARNING)'
        )
        return parser

    def run(self, args: List[str] = None):
        """Parse command line arguments, then run the interactive menu."""
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)

        if parsed_args.log_level:
            setup_logging(level=parsed_args.log_level)
        if parsed_args.display:
            self.display_manager.set_mode(parsed_args.display)

        try:
            self.interact()
        except KeyboardInterrupt:
            self.console.print("\n[yellow]⚠[/yellow] Operation cancelled by user.")

    def interact(self):
        """Menu loop. Returns when the user exits or input runs out."""
        self.display_manager.styling.print_banner(
            f"{PROJECT_NAME.upper()} - MUSIC PLAYLIST SYSTEM",
            "Singleton · Builder · Factory Method · Prototype · Open/Closed · Dependency Inversion"
        )

        while True:
            self.display_manager.display_menu("Main Menu", MENU_OPTIONS["MAIN"])
            try:
                choice = self.input_handlers.read_line("Choose an option:")
            except EOFError:
                logger.debug("Input exhausted at main menu")
                self._say_goodbye()
                return

            if choice.lower() in MENU_OPTIONS["EXIT"]:
                self._say_goodbye()
                return

            if not self.dispatch(choice):
                self._say_goodbye()
                return

    def dispatch(self, choice: str) -> bool:
        """
        Run one menu command.

        Returns:
            False when input ran out during the command, True otherwise
        """
        command = self.commands.get(choice)
        if command is None:
            self.display_manager.styling.error(ERROR_MESSAGES["INVALID_OPTION"])
            return True

        try:
            command()
        except EOFError:
            logger.debug(f"Input exhausted during command {choice}")
            return False
        except TuneboxError as e:
            logger.debug(f"Command {choice} failed: {e}")
            self.display_manager.styling.error(str(e))
        return True

    def check_shared_library(self) -> bool:
        """Verify that every component was handed the same library."""
        holders = {
            "CLI": self,
            "Playlist service": self.playlist_service,
            "Library handler": self.library_handler,
            "Playlist handler": self.playlist_handler,
            "Display handler": self.display_handler,
        }
        return self.library_handler.check_shared_library(holders)

    def _say_goodbye(self):
        self.console.print()
        self.display_manager.styling.success(SUCCESS_MESSAGES["GOODBYE"])
