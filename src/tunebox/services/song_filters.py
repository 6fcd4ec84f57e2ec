"""
Song filters.

Each filter narrows a list of songs by one criterion. New criteria are added
as new SongFilter subclasses; nothing that consumes filters has to change.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models.song import Song


class SongFilter(ABC):
    """Base class for song filters."""

    @abstractmethod
    def filter(self, songs: List[Song]) -> List[Song]:
        """
        Return the matching songs.

        Args:
            songs: Songs to filter; never modified

        Returns:
            A new list with the matching songs in their original order
        """
        pass

    @property
    def description(self) -> str:
        """Short label for the filter, used as a result title."""
        return "Filtered Results"


class GenreFilter(SongFilter):
    """Keeps songs whose genre equals the given one, ignoring case."""

    def __init__(self, genre: str):
        self.genre = genre

    def filter(self, songs: List[Song]) -> List[Song]:
        wanted = self.genre.casefold()
        return [song for song in songs if song.genre.casefold() == wanted]

    @property
    def description(self) -> str:
        return f"Genre: {self.genre}"


class ArtistFilter(SongFilter):
    """Keeps songs whose artist contains the given text, ignoring case."""

    def __init__(self, artist: str):
        self.artist = artist

    def filter(self, songs: List[Song]) -> List[Song]:
        wanted = self.artist.casefold()
        return [song for song in songs if wanted in song.artist.casefold()]

    @property
    def description(self) -> str:
        return f"Artist contains: {self.artist}"


class DurationFilter(SongFilter):
    """Keeps songs no longer than max_duration seconds (inclusive)."""

    def __init__(self, max_duration: int):
        self.max_duration = max_duration

    def filter(self, songs: List[Song]) -> List[Song]:
        return [song for song in songs if song.duration <= self.max_duration]

    @property
    def description(self) -> str:
        return f"Max duration: {self.max_duration}s"


class NoFilter(SongFilter):
    """Keeps every song."""

    def filter(self, songs: List[Song]) -> List[Song]:
        return list(songs)

    @property
    def description(self) -> str:
        return "All Songs"
