"""
In-memory music library (the song catalog).
"""

from typing import List, Optional

from ..core.exceptions import DuplicateSongError
from ..core.logger import get_logger
from ..models.song import Song
from ..models.song_builder import SongBuilder

logger = get_logger("music_library")


def _seed_songs() -> List[Song]:
    """Songs every library starts with."""
    return [
        SongBuilder(1, "All Yours", "Normani")
        .genre("RnB").duration(218).year(2023).album("Dopamine").build(),
        SongBuilder(2, "Saturn", "SZA")
        .genre("RnB").duration(186).year(2024).album("SOS").build(),
        SongBuilder(3, "On My Mama", "Victoria Monet")
        .genre("RnB").duration(156).year(2023).album("Jaguar II").build(),
        SongBuilder(4, "Risk", "Gracie Abrams")
        .genre("Pop").duration(209).year(2024).album("The Secret of Us").build(),
        SongBuilder(5, "Tonight", "PinkPantheress")
        .genre("Pop").duration(144).year(2023).album("Heaven Knows").build(),
        SongBuilder(6, "365", "Charli XCX")
        .genre("Pop").duration(213).year(2024).album("BRAT").build(),
        SongBuilder(7, "This Song", "Conan Gray")
        .genre("Pop").duration(195).year(2024).album("Found Heaven").build(),
        SongBuilder(8, "Loop", "Yves")
        .genre("Kpop").duration(187).year(2023).album("Loop").build(),
        SongBuilder(9, "What is Love?", "TWICE")
        .genre("Kpop").duration(208).year(2018).album("What is Love?").build(),
        SongBuilder(10, "Accendio", "IVE")
        .genre("Kpop").duration(181).year(2024).album("IVE SWITCH").build(),
    ]


class MusicLibrary:
    """
    Append-only song catalog.

    The application creates one library at start-up and hands that instance to
    every component that needs it. Song ids are unique for the lifetime of
    the library.
    """

    def __init__(self, seed: bool = True):
        self._songs: List[Song] = []
        if seed:
            for song in _seed_songs():
                self.add(song)
        logger.debug(f"Music library initialized with {len(self._songs)} songs")

    def get_all(self) -> List[Song]:
        """All songs in catalog order. Callers get a copy of the list."""
        return list(self._songs)

    def get_by_id(self, song_id: int) -> Optional[Song]:
        """Find a song by id, or None."""
        for song in self._songs:
            if song.id == song_id:
                return song
        return None

    def add(self, song: Song):
        """
        Append a song to the catalog.

        Raises:
            DuplicateSongError: If a song with the same id is already present
        """
        if self.get_by_id(song.id) is not None:
            logger.info(f"Rejected song {song.id} ('{song.title}'): ID already in library")
            raise DuplicateSongError(song.id)
        self._songs.append(song)
        logger.info(f"Added song {song.id} ('{song.title}') to library")

    def next_id(self) -> int:
        """Smallest id greater than every id in the catalog."""
        return max((song.id for song in self._songs), default=0) + 1

    def __len__(self) -> int:
        return len(self._songs)
