"""
Step-by-step construction of Song records.
"""

import logging

from ..core.config import SONG_DEFAULTS
from ..core.exceptions import SongBuildError
from ..core.validation import validate_user_input, validate_year
from .song import Song

logger = logging.getLogger(__name__)


class SongBuilder:
    """
    Accumulates song fields and freezes them into a Song.

    The id, title and artist are required up front. Every other field falls
    back to SONG_DEFAULTS when it is never set. Setters return the builder so
    calls can be chained:

        song = SongBuilder(11, "Espresso", "Sabrina Carpenter").genre("Pop").duration(175).build()

    A builder is consumed by build(); it cannot be reused afterwards.
    """

    def __init__(self, song_id: int, title: str, artist: str):
        self._id = song_id
        self._title = title
        self._artist = artist
        self._genre = SONG_DEFAULTS["GENRE"]
        self._duration = SONG_DEFAULTS["DURATION"]
        self._year = SONG_DEFAULTS["YEAR"]
        self._album = SONG_DEFAULTS["ALBUM"]
        self._built = False

    def genre(self, genre: str) -> "SongBuilder":
        self._check_open()
        self._genre = genre
        return self

    def duration(self, duration: int) -> "SongBuilder":
        self._check_open()
        self._duration = duration
        return self

    def year(self, year: int) -> "SongBuilder":
        self._check_open()
        self._year = year
        return self

    def album(self, album: str) -> "SongBuilder":
        self._check_open()
        self._album = album
        return self

    def build(self) -> Song:
        """
        Validate the accumulated fields and return the finished Song.

        Raises:
            SongBuildError: If a field is invalid or the builder was already used
        """
        self._check_open()

        try:
            title = validate_user_input("title", self._title)
            artist = validate_user_input("artist", self._artist)
            genre = validate_user_input("genre", self._genre)
            album = validate_user_input("album", self._album)
        except ValueError as e:
            raise SongBuildError(str(e)) from e

        if not isinstance(self._id, int) or self._id < 0:
            raise SongBuildError(f"Song ID must be a non-negative integer, got {self._id!r}")
        if self._duration < 0:
            raise SongBuildError(f"Duration must be >= 0, got {self._duration}")
        if validate_year(self._year) is None:
            raise SongBuildError(f"Year {self._year} is out of range")

        song = Song(
            id=self._id,
            title=title,
            artist=artist,
            genre=genre,
            duration=self._duration,
            year=self._year,
            album=album,
        )
        self._built = True
        logger.debug(f"Built song {song}")
        return song

    def _check_open(self):
        if self._built:
            raise SongBuildError("This builder has already produced a song")
