"""
Custom exceptions for Tunebox.
"""


class TuneboxError(Exception):
    """Base exception for Tunebox."""
    pass


class ConfigurationError(TuneboxError):
    """Exception raised when configuration is invalid."""
    pass


class InvalidInputError(TuneboxError, ValueError):
    """Exception raised when user input cannot be parsed."""
    pass


class InvalidSelectionError(TuneboxError):
    """Exception raised when a menu choice, theme or display mode is unknown."""
    pass


class SongNotFoundError(TuneboxError, LookupError):
    """Exception raised when a song id is not in the library."""

    def __init__(self, song_id: int, message: str = None):
        self.song_id = song_id
        super().__init__(message or f"Song {song_id} not found")


class DuplicateSongError(TuneboxError):
    """Exception raised when a song id is already present in the library."""

    def __init__(self, song_id: int):
        self.song_id = song_id
        super().__init__(f"A song with ID {song_id} already exists")


class InvalidPositionError(TuneboxError, IndexError):
    """Exception raised when a playlist position is out of range."""

    def __init__(self, position: int, size: int):
        self.position = position
        self.size = size
        if size:
            message = f"Invalid position {position} (expected 1-{size})"
        else:
            message = f"Invalid position {position} (playlist is empty)"
        super().__init__(message)


class SongBuildError(TuneboxError, ValueError):
    """Exception raised when a song builder holds invalid fields."""
    pass
