"""
Base handler class for menu command handlers.
"""

from ...services.music_library import MusicLibrary
from ...services.playlist_service import PlaylistService
from ...ui.display import DisplayManager
from ...ui.input_handlers import InputHandlers


class BaseHandler:
    """
    Base class for command handlers.

    Handlers raise TuneboxError subclasses for anything the user got wrong;
    the CLI reports them and returns to the menu.
    """

    def __init__(
        self,
        library: MusicLibrary,
        playlist_service: PlaylistService,
        display_manager: DisplayManager,
        input_handlers: InputHandlers
    ):
        self.library = library
        self.playlist_service = playlist_service
        self.display_manager = display_manager
        self.input_handlers = input_handlers

    @property
    def console(self):
        return self.display_manager.console

    @property
    def styling(self):
        return self.display_manager.styling
