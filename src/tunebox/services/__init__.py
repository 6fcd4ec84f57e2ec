"""
Core services for Tunebox.
"""

from .music_library import MusicLibrary
from .song_filters import SongFilter, GenreFilter, ArtistFilter, DurationFilter, NoFilter
from .playlist_factories import (
    PlaylistFactory,
    WorkoutPlaylistFactory,
    ChillPlaylistFactory,
    PartyPlaylistFactory,
    StudyPlaylistFactory,
    get_playlist_factory,
)
from .playlist_service import PlaylistService

__all__ = [
    'MusicLibrary',
    'SongFilter',
    'GenreFilter',
    'ArtistFilter',
    'DurationFilter',
    'NoFilter',
    'PlaylistFactory',
    'WorkoutPlaylistFactory',
    'ChillPlaylistFactory',
    'PartyPlaylistFactory',
    'StudyPlaylistFactory',
    'get_playlist_factory',
    'PlaylistService'
]
