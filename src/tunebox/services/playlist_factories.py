"""
Themed playlist factories.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Type

from ..core.exceptions import InvalidSelectionError
from ..core.logger import get_logger
from ..models.playlist import Playlist
from ..models.song import Song

logger = get_logger("playlist_factories")


class PlaylistFactory(ABC):
    """Base class for playlist factories. Subclasses decide the playlist flavour."""

    theme = ""

    @abstractmethod
    def create_playlist(self, name: str) -> Playlist:
        """Create an empty playlist of this factory's theme."""
        pass

    def create_and_populate(self, name: str, songs: Iterable[Song]) -> Playlist:
        """Create a playlist and append the given songs in order."""
        playlist = self.create_playlist(name)
        for song in songs:
            playlist.add_song(song)
        logger.info(f"Created {self.theme} playlist '{name}' with {len(playlist)} songs")
        return playlist


class WorkoutPlaylistFactory(PlaylistFactory):
    theme = "workout"

    def create_playlist(self, name: str) -> Playlist:
        return Playlist(name, "High-energy playlist for workout sessions", theme=self.theme)


class ChillPlaylistFactory(PlaylistFactory):
    theme = "chill"

    def create_playlist(self, name: str) -> Playlist:
        return Playlist(name, "Relaxing playlist for unwinding", theme=self.theme)


class PartyPlaylistFactory(PlaylistFactory):
    theme = "party"

    def create_playlist(self, name: str) -> Playlist:
        return Playlist(name, "Upbeat playlist for parties and celebrations", theme=self.theme)


class StudyPlaylistFactory(PlaylistFactory):
    theme = "study"

    def create_playlist(self, name: str) -> Playlist:
        return Playlist(name, "Focus-enhancing playlist for studying", theme=self.theme)


# Menu number and theme name both resolve to the same factory
PLAYLIST_FACTORIES: Dict[str, Type[PlaylistFactory]] = {
    "1": WorkoutPlaylistFactory,
    "2": ChillPlaylistFactory,
    "3": PartyPlaylistFactory,
    "4": StudyPlaylistFactory,
    "workout": WorkoutPlaylistFactory,
    "chill": ChillPlaylistFactory,
    "party": PartyPlaylistFactory,
    "study": StudyPlaylistFactory,
}


def get_playlist_factory(theme: str) -> PlaylistFactory:
    """
    Return a factory for a theme name or its menu number.

    Raises:
        InvalidSelectionError: If the theme is unknown
    """
    factory_class = PLAYLIST_FACTORIES.get(theme.strip().lower())
    if factory_class is None:
        raise InvalidSelectionError(f"Unknown playlist theme: {theme!r}")
    return factory_class()
