"""
Command handlers for the interactive menu.
"""

from .library_handler import LibraryHandler
from .playlist_handler import PlaylistHandler
from .display_handler import DisplayHandler

__all__ = ['LibraryHandler', 'PlaylistHandler', 'DisplayHandler']
