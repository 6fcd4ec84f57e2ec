"""
Playlist service holding the playlists of the current session.
"""

from typing import List, Optional, Tuple

from ..core.config import UI_CONFIG
from ..core.exceptions import InvalidPositionError, InvalidSelectionError, SongNotFoundError
from ..core.logger import get_logger
from ..models.playlist import Playlist
from ..models.song import Song
from .music_library import MusicLibrary
from .playlist_factories import get_playlist_factory

logger = get_logger("playlist_service")


class PlaylistService:
    """
    Session-level playlist operations.

    The session starts with one plain playlist; themed playlists created
    during the run are appended after it and live until the process exits.
    Positions exposed here are 1-based, as typed by the user.
    """

    def __init__(self, library: MusicLibrary, default_name: Optional[str] = None):
        self.library = library
        self._playlists: List[Playlist] = [
            Playlist(default_name or UI_CONFIG["DEFAULT_PLAYLIST_NAME"])
        ]

    @property
    def playlists(self) -> List[Playlist]:
        return list(self._playlists)

    @property
    def default_playlist(self) -> Playlist:
        return self._playlists[0]

    def get_playlist(self, number: int) -> Playlist:
        """
        Look up a session playlist by its 1-based number.

        Raises:
            InvalidSelectionError: If no playlist has that number
        """
        if not 1 <= number <= len(self._playlists):
            raise InvalidSelectionError(
                f"Invalid playlist number {number} (expected 1-{len(self._playlists)})"
            )
        return self._playlists[number - 1]

    def add_song(self, playlist: Playlist, song_id: int) -> Song:
        """
        Append a library song to a playlist.

        Raises:
            SongNotFoundError: If the id is not in the library
        """
        song = self.library.get_by_id(song_id)
        if song is None:
            raise SongNotFoundError(song_id)
        playlist.add_song(song)
        logger.info(f"Added song {song.id} to '{playlist.name}'")
        return song

    def remove_song(self, playlist: Playlist, position: int) -> Song:
        """
        Remove the song at a 1-based position.

        Raises:
            InvalidPositionError: If the position is out of range; the playlist is left unchanged
        """
        if not 1 <= position <= len(playlist):
            raise InvalidPositionError(position, len(playlist))
        removed = playlist.remove_at(position - 1)
        logger.info(f"Removed song {removed.id} from '{playlist.name}' at position {position}")
        return removed

    def resolve_songs(self, song_ids: List[int]) -> Tuple[List[Song], List[int]]:
        """
        Look up ids in the library.

        Returns:
            Tuple of (found songs in input order, ids that were not found)
        """
        found = []
        missing = []
        for song_id in song_ids:
            song = self.library.get_by_id(song_id)
            if song is None:
                missing.append(song_id)
            else:
                found.append(song)
        return found, missing

    def create_themed_playlist(self, theme: str, name: str, song_ids: List[int]) -> Tuple[Playlist, List[int]]:
        """
        Create a themed playlist from library ids and add it to the session.

        Unknown ids are skipped.

        Raises:
            InvalidSelectionError: If the theme is unknown

        Returns:
            Tuple of (new playlist, ids that were skipped)
        """
        factory = get_playlist_factory(theme)
        songs, missing = self.resolve_songs(song_ids)
        if missing:
            logger.info(f"Skipping unknown song IDs for '{name}': {missing}")
        playlist = factory.create_and_populate(name, songs)
        self._playlists.append(playlist)
        return playlist, missing
