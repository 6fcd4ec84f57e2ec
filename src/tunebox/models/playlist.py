"""
Playlist model.
"""

import logging
from typing import List, Optional

from .song import Song

logger = logging.getLogger(__name__)


class Playlist:
    """Named, ordered collection of songs. Duplicates are allowed."""

    def __init__(self, name: str, description: Optional[str] = None, theme: Optional[str] = None):
        self.name = name
        self.description = description
        self.theme = theme
        self._songs: List[Song] = []

    @property
    def songs(self) -> List[Song]:
        """Songs in insertion order (a copy)."""
        return list(self._songs)

    @property
    def total_duration(self) -> int:
        """Sum of song durations in seconds."""
        return sum(song.duration for song in self._songs)

    def add_song(self, song: Song):
        """Append a song to the end of the playlist."""
        self._songs.append(song)

    def remove_at(self, index: int) -> Optional[Song]:
        """
        Remove the song at a 0-based index.

        Out-of-range indexes, negative ones included, leave the playlist
        untouched and return None.
        """
        if 0 <= index < len(self._songs):
            return self._songs.pop(index)
        logger.debug(f"Ignoring removal at index {index} from '{self.name}' ({len(self._songs)} songs)")
        return None

    def remove_song(self, song_id: int) -> int:
        """Remove every occurrence of a song id. Returns how many were removed."""
        before = len(self._songs)
        self._songs = [song for song in self._songs if song.id != song_id]
        return before - len(self._songs)

    def is_empty(self) -> bool:
        return not self._songs

    def __len__(self) -> int:
        return len(self._songs)

    def __repr__(self) -> str:
        return f"Playlist(name={self.name!r}, songs={len(self._songs)}, total_duration={self.total_duration})"
