"""
Data models for Tunebox.
"""

from .song import Song
from .song_builder import SongBuilder
from .playlist import Playlist

__all__ = [
    'Song',
    'SongBuilder',
    'Playlist'
]
