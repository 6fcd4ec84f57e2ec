"""
Core song data model.
"""

import copy
from dataclasses import dataclass

from ..core.config import SONG_DEFAULTS


@dataclass(frozen=True)
class Song:
    """Immutable record describing one track in the library."""
    id: int
    title: str
    artist: str
    genre: str = SONG_DEFAULTS["GENRE"]
    duration: int = SONG_DEFAULTS["DURATION"]  # seconds
    year: int = SONG_DEFAULTS["YEAR"]
    album: str = SONG_DEFAULTS["ALBUM"]

    def __post_init__(self):
        """Reject values no song can have."""
        if self.duration < 0:
            raise ValueError(f"Duration must be >= 0, got {self.duration}")

    def clone(self) -> "Song":
        """
        Return an independent copy of this song.

        The copy is equal field for field but is a distinct object. It is made
        by copying the instance state, so it skips the builder's validation.
        """
        return copy.copy(self)

    def __str__(self) -> str:
        return f"[{self.id}] {self.title} - {self.artist} ({self.genre}, {self.year}, {self.duration}s)"
