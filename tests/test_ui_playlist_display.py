"""
Tests for playlist displays and the display manager.
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import Mock

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tunebox.core.exceptions import InvalidSelectionError
from tunebox.models.playlist import Playlist
from tunebox.models.song import Song
from tunebox.ui import display as display_module
from tunebox.ui.display import DisplayManager
from tunebox.ui.playlist_display import (
    DetailedPlaylistDisplay,
    PlaylistDisplay,
    SimplePlaylistDisplay,
)


@pytest.fixture
def playlist(sample_songs):
    playlist = Playlist("Road Trip", "Songs for the drive")
    for song in sample_songs:
        playlist.add_song(song)
    return playlist


class TestSimplePlaylistDisplay:
    """Tests for SimplePlaylistDisplay."""

    def test_display_playlist(self, console, playlist):
        """Test one numbered line per song and the totals line."""
        SimplePlaylistDisplay(console).display(playlist)
        output = console.export_text()

        assert "Road Trip" in output
        assert "=" * 50 in output
        assert "Songs for the drive" in output
        assert "1. Espresso - Sabrina Carpenter (175s)" in output
        assert "2. Magnetic - ILLIT (160s)" in output
        assert "Total: 2 songs | Duration: 335 seconds" in output

    def test_display_empty_playlist(self, console):
        SimplePlaylistDisplay(console).display(Playlist("Nothing"))
        output = console.export_text()

        assert "Nothing" in output
        assert "Empty playlist" in output
        assert "Total" not in output

    def test_display_songs(self, console, sample_songs):
        """Test that song lists use the song's one-line form."""
        SimplePlaylistDisplay(console).display_songs(sample_songs, "Song Library")
        output = console.export_text()

        assert "Song Library" in output
        assert "[101] Espresso - Sabrina Carpenter (Pop, 2024, 175s)" in output
        assert "Total: 2 songs" in output

    def test_display_no_songs(self, console):
        SimplePlaylistDisplay(console).display_songs([], "Filtered Results")
        assert "No songs found" in console.export_text()

    def test_markup_in_titles_is_literal(self, console):
        """Test that square brackets typed by the user are printed as-is."""
        playlist = Playlist("[bold]Mine[/bold]")
        playlist.add_song(Song(id=1, title="[red]Hot[/red]", artist="[b]Band", duration=100))

        SimplePlaylistDisplay(console).display(playlist)
        output = console.export_text()

        assert "[bold]Mine[/bold]" in output
        assert "1. [red]Hot[/red] - [b]Band (100s)" in output

    def test_does_not_modify_playlist(self, console, playlist):
        before = playlist.songs
        SimplePlaylistDisplay(console).display(playlist)
        assert playlist.songs == before


class TestDetailedPlaylistDisplay:
    """Tests for DetailedPlaylistDisplay."""

    def test_display_playlist(self, console, playlist):
        """Test the boxed header, song rows and footer."""
        DetailedPlaylistDisplay(console).display(playlist)
        output = console.export_text()

        assert "Road Trip" in output
        assert "Songs for the drive" in output
        for column in ("Title", "Artist", "Genre", "Duration"):
            assert column in output
        assert "Espresso" in output
        assert "Sabrina Carpenter" in output
        assert "175s" in output
        assert "Total: 2 songs | Duration: 335 seconds (5:35)" in output
        assert "╔" in output

    def test_display_empty_playlist(self, console):
        DetailedPlaylistDisplay(console).display(Playlist("Nothing"))
        output = console.export_text()

        assert "Empty playlist" in output
        assert "Total: 0 songs | Duration: 0 seconds (0:00)" in output

    def test_display_songs_uses_id_column(self, console, library):
        DetailedPlaylistDisplay(console).display_songs(library.get_all(), "Song Library")
        output = console.export_text()

        assert "What is Love?" in output
        assert "Victoria Monet" in output
        assert "Total: 10 songs" in output

    def test_long_title_is_truncated(self, console):
        """Test that long titles are cut to the column and end with an ellipsis."""
        title = "Supercalifragilistic Expialidocious Anthem Extended"
        song = Song(id=1, title=title, artist="Somebody", genre="Pop", duration=200)

        DetailedPlaylistDisplay(console).display_songs([song], "Long")
        output = console.export_text()

        assert "Supercalifragilistic Ex…" in output
        assert title not in output

    def test_long_artist_is_truncated(self, console):
        song = Song(id=1, title="Short", artist="An Extremely Long Band Name", duration=90)

        DetailedPlaylistDisplay(console).display_songs([song], "Long")

        assert "An Extremely Long…" in console.export_text()

    def test_markup_in_cells_is_literal(self, console):
        song = Song(id=1, title="[red]Hot[/red]", artist="Band", duration=100)

        DetailedPlaylistDisplay(console).display_songs([song], "Odd")

        assert "[red]Hot[/red]" in console.export_text()

    def test_rows_fit_the_box_width(self, console, library):
        """Test that no line is wider than the configured width."""
        DetailedPlaylistDisplay(console).display_songs(library.get_all(), "Song Library")
        lines = [line for line in console.export_text().splitlines() if line.strip()]

        assert max(len(line) for line in lines) <= 80


class TestDisplayManager:
    """Tests for DisplayManager."""

    def test_default_mode_is_simple(self, console, monkeypatch):
        """Test the built-in default, whatever TUNEBOX_DISPLAY_MODE held at import."""
        monkeypatch.setitem(display_module.UI_CONFIG, "DEFAULT_DISPLAY", "simple")
        manager = DisplayManager(console)

        assert manager.mode == "simple"
        assert isinstance(manager.current_display, SimplePlaylistDisplay)

    def test_configured_default_mode(self, console, monkeypatch):
        monkeypatch.setitem(display_module.UI_CONFIG, "DEFAULT_DISPLAY", "detailed")
        assert DisplayManager(console).mode == "detailed"

    def test_initial_mode(self, console):
        manager = DisplayManager(console, "detailed")
        assert isinstance(manager.current_display, DetailedPlaylistDisplay)

    def test_set_mode(self, console):
        """Test switching between the built-in displays."""
        manager = DisplayManager(console)

        manager.set_mode("Detailed")
        assert manager.mode == "detailed"
        assert isinstance(manager.current_display, DetailedPlaylistDisplay)

        manager.set_mode("simple")
        assert isinstance(manager.current_display, SimplePlaylistDisplay)

    def test_set_mode_unknown(self, console):
        """Test that an unknown mode keeps the current display."""
        manager = DisplayManager(console)
        current = manager.current_display

        with pytest.raises(InvalidSelectionError):
            manager.set_mode("fancy")

        assert manager.current_display is current
        assert manager.mode == "simple"

    def test_set_display_accepts_any_implementation(self, console, playlist, sample_songs):
        """Test that callers render through whatever display is set."""
        manager = DisplayManager(console)
        custom = Mock(spec=PlaylistDisplay)

        manager.set_display(custom)
        manager.display_playlist(playlist)
        manager.display_songs(sample_songs, "Songs")

        custom.display.assert_called_once_with(playlist)
        custom.display_songs.assert_called_once_with(sample_songs, "Songs")

    def test_display_menu(self, console):
        DisplayManager(console).display_menu("Main Menu", [("1", "View Library"), ("0", "Exit")])
        output = console.export_text()

        assert "Main Menu" in output
        assert "View Library" in output
        assert "Exit" in output

    def test_display_playlist_summaries(self, console, playlist):
        themed = Playlist("Leg Day", "High-energy playlist for workout sessions", theme="workout")

        DisplayManager(console).display_playlist_summaries([playlist, themed])
        output = console.export_text()

        assert "Road Trip" in output
        assert "Leg Day" in output
        assert "workout" in output
        assert "335s (5:35)" in output
