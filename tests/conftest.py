"""
Pytest configuration and shared fixtures.
"""

import io
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rich.console import Console


@pytest.fixture
def console() -> Console:
    """Console that records output instead of writing to the terminal."""
    return Console(file=io.StringIO(), record=True, width=100, color_system=None)


@pytest.fixture
def library():
    """Freshly seeded music library."""
    from tunebox.services.music_library import MusicLibrary
    return MusicLibrary()


@pytest.fixture
def empty_library():
    """Music library without the seed songs."""
    from tunebox.services.music_library import MusicLibrary
    return MusicLibrary(seed=False)


@pytest.fixture
def sample_songs():
    """Two songs that are not part of the seeded library."""
    from tunebox.models.song import Song
    return [
        Song(id=101, title="Espresso", artist="Sabrina Carpenter", genre="Pop", duration=175, year=2024, album="Short n' Sweet"),
        Song(id=102, title="Magnetic", artist="ILLIT", genre="Kpop", duration=160, year=2024, album="Super Real Me"),
    ]


@pytest.fixture
def make_cli(console, library):
    """Build a CLI that reads the given answers, one per line."""
    from tunebox.ui.cli import TuneboxCLI

    def _make_cli(*answers: str, display_mode: str = None):
        stream = io.StringIO("".join(f"{answer}\n" for answer in answers))
        return TuneboxCLI(console=console, stream=stream, library=library, display_mode=display_mode)

    return _make_cli


@pytest.fixture(autouse=True)
def default_display_mode(monkeypatch):
    """Start every test in simple mode, whatever TUNEBOX_DISPLAY_MODE held at import."""
    from tunebox.ui import display
    monkeypatch.setitem(display.UI_CONFIG, "DEFAULT_DISPLAY", "simple")
