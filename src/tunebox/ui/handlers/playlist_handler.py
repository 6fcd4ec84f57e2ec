"""
Handler for playlist commands.
"""

from .base_handler import BaseHandler
from ...core.config import ERROR_MESSAGES, MENU_OPTIONS, SUCCESS_MESSAGES
from ...core.validation import parse_id_list
from ...models.playlist import Playlist


class PlaylistHandler(BaseHandler):
    """Commands that create, change, or show session playlists."""

    def _select_playlist(self) -> Playlist:
        """Pick the playlist to act on, asking only when there is a choice."""
        playlists = self.playlist_service.playlists
        if len(playlists) == 1:
            return playlists[0]

        options = [(str(i), playlist.name) for i, playlist in enumerate(playlists, 1)]
        self.display_manager.display_menu("Select playlist", options)
        number = self.input_handlers.read_int(f"Playlist (1-{len(playlists)}):", "playlist number")
        return self.playlist_service.get_playlist(number)

    def add_song(self):
        playlist = self._select_playlist()
        self.display_manager.display_songs(self.library.get_all(), "Available Songs")
        song_id = self.input_handlers.read_int("Enter song ID to add:", "ID")
        song = self.playlist_service.add_song(playlist, song_id)
        self.styling.success(SUCCESS_MESSAGES["SONG_ADDED"].format(title=song.title))

    def remove_song(self):
        playlist = self._select_playlist()
        if playlist.is_empty():
            self.styling.warning(ERROR_MESSAGES["EMPTY_PLAYLIST"])
            return

        self.display_manager.display_playlist(playlist)
        position = self.input_handlers.read_int(f"Enter position to remove (1-{len(playlist)}):", "position")
        song = self.playlist_service.remove_song(playlist, position)
        self.styling.success(SUCCESS_MESSAGES["SONG_REMOVED"].format(title=song.title))

    def view_playlist(self):
        self.display_manager.display_playlist(self._select_playlist())

    def view_all_playlists(self):
        playlists = self.playlist_service.playlists
        if not playlists:
            self.styling.info(ERROR_MESSAGES["NO_PLAYLISTS"])
            return
        self.display_manager.display_playlist_summaries(playlists)

    def create_themed_playlist(self):
        """Create a themed playlist from a comma-separated list of song ids."""
        self.styling.print_banner("FACTORY METHOD PATTERN - Create Playlist")
        self.display_manager.display_menu("Select playlist type", MENU_OPTIONS["THEME"])
        theme = self.input_handlers.read_choice("Choice:", MENU_OPTIONS["THEME"])
        name = self.input_handlers.read_line("Enter playlist name:") or "Untitled Playlist"

        self.display_manager.display_songs(self.library.get_all(), "Available Songs")
        song_ids, rejected = parse_id_list(self.input_handlers.read_line("Enter song IDs (comma-separated):"))
        if rejected:
            self.styling.warning(f"Ignored invalid entries: {', '.join(rejected)}")

        playlist, missing = self.playlist_service.create_themed_playlist(theme, name, song_ids)
        if missing:
            self.styling.warning(f"Skipped unknown song IDs: {', '.join(map(str, missing))}")

        self.styling.success(SUCCESS_MESSAGES["PLAYLIST_CREATED"].format(name=playlist.name))
        self.styling.success(playlist.description)
        self.styling.info(f"{len(playlist)} songs | {playlist.total_duration} seconds")
