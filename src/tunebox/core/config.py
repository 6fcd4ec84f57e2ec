"""
Configuration for Tunebox.
Contains all constants, settings, and global parameters.
"""

import os

# Project Information
PROJECT_NAME = "Tunebox"
PROJECT_VERSION = "1.0.0"
PROJECT_DESCRIPTION = "Music Playlist System - creational patterns and SOLID principles on an in-memory catalog"

# Logging Configuration
LOGGING_CONFIG = {
    "LEVEL": os.environ.get("TUNEBOX_LOG_LEVEL", "WARNING").strip().upper(),
    "FORMAT": "%(levelname)s - %(name)s - %(message)s",
}

# User Interface Configuration
UI_CONFIG = {
    "SEPARATOR_LENGTH": 50,
    "DETAILED_WIDTH": 80,
    "TITLE_COLUMN_WIDTH": 24,
    "ARTIST_COLUMN_WIDTH": 18,
    "DEFAULT_DISPLAY": os.environ.get("TUNEBOX_DISPLAY_MODE", "simple").strip().lower(),
    "DEFAULT_PLAYLIST_NAME": "My Playlist",
}

# Display modes understood by the display manager
DISPLAY_MODES = ["simple", "detailed"]

# Defaults applied by the song builder when a field is never set
SONG_DEFAULTS = {
    "GENRE": "Unknown",
    "DURATION": 0,
    "YEAR": 2024,
    "ALBUM": "Single",
}

# Validation Rules
VALIDATION_RULES = {
    "MIN_YEAR": 1900,
    "MAX_YEAR": 2100,
    "MIN_TITLE_LENGTH": 1,
    "MAX_TITLE_LENGTH": 200,
    "MIN_ARTIST_LENGTH": 1,
    "MAX_ARTIST_LENGTH": 100,
    "MIN_GENRE_LENGTH": 1,
    "MAX_GENRE_LENGTH": 50,
    "MIN_ALBUM_LENGTH": 1,
    "MAX_ALBUM_LENGTH": 200,
}

# Genres present in the seeded catalog
GENRES = ["RnB", "Pop", "Kpop"]

# Error Messages
ERROR_MESSAGES = {
    "INVALID_OPTION": "Invalid option. Try again.",
    "INVALID_CHOICE": "Invalid choice.",
    "INVALID_INPUT": "Invalid input.",
    "INVALID_ID": "Invalid ID.",
    "SONG_NOT_FOUND": "Song not found.",
    "INVALID_POSITION": "Invalid position.",
    "EMPTY_PLAYLIST": "Playlist is empty.",
    "NO_PLAYLISTS": "No playlists created.",
}

# Success Messages
SUCCESS_MESSAGES = {
    "GOODBYE": "Goodbye!",
    "SONG_ADDED": "Added: {title}",
    "SONG_REMOVED": "Removed: {title}",
    "SONG_CREATED": "Song created using Builder Pattern:",
    "PLAYLIST_CREATED": "Created playlist: {name}",
    "DISPLAY_SWITCHED": "Switched to {mode} Display",
}

# Menu Options
MENU_OPTIONS = {
    "MAIN": [
        ("1", "View All Songs in Library"),
        ("2", "Filter Songs (Open/Closed)"),
        ("3", "Add Song to Playlist"),
        ("4", "Remove Song from Playlist"),
        ("5", "View Playlist"),
        ("6", "Change Display Mode (Dependency Inversion)"),
        ("7", "Add Custom Song (Builder)"),
        ("8", "Create Themed Playlist (Factory Method)"),
        ("9", "Clone Song (Prototype)"),
        ("10", "Check Shared Library (Singleton)"),
        ("11", "View All Playlists"),
        ("0", "Exit"),
    ],
    "FILTER": [
        ("1", "Filter by Genre"),
        ("2", "Filter by Artist"),
        ("3", "Filter by Max Duration"),
        ("4", "No Filter (Show All)"),
    ],
    "DISPLAY": [
        ("1", "Simple Display"),
        ("2", "Detailed Display"),
    ],
    "THEME": [
        ("1", "Workout Playlist"),
        ("2", "Chill Playlist"),
        ("3", "Party Playlist"),
        ("4", "Study Playlist"),
    ],
    "EXIT": ["0", "q", "quit", "exit"],
}
