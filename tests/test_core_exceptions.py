"""
Tests for custom exceptions.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tunebox.core.exceptions import (
    TuneboxError,
    ConfigurationError,
    InvalidInputError,
    InvalidSelectionError,
    SongNotFoundError,
    DuplicateSongError,
    InvalidPositionError,
    SongBuildError,
)


class TestExceptions:
    """Tests for custom exception classes."""

    @pytest.mark.parametrize("exception_class", [
        ConfigurationError,
        InvalidInputError,
        InvalidSelectionError,
        SongBuildError,
    ])
    def test_inherits_from_tunebox_error(self, exception_class):
        """Test that every error can be caught as TuneboxError."""
        assert issubclass(exception_class, TuneboxError)
        with pytest.raises(TuneboxError):
            raise exception_class("failed")

    def test_tunebox_error_is_exception(self):
        assert issubclass(TuneboxError, Exception)

    def test_input_errors_are_value_errors(self):
        """Test that parse and build errors can be caught as ValueError."""
        assert issubclass(InvalidInputError, ValueError)
        assert issubclass(SongBuildError, ValueError)

    def test_song_not_found(self):
        error = SongNotFoundError(42)

        assert isinstance(error, TuneboxError)
        assert isinstance(error, LookupError)
        assert error.song_id == 42
        assert str(error) == "Song 42 not found"

    def test_song_not_found_custom_message(self):
        assert str(SongNotFoundError(7, "Gone")) == "Gone"

    def test_duplicate_song(self):
        error = DuplicateSongError(4)

        assert isinstance(error, TuneboxError)
        assert error.song_id == 4
        assert str(error) == "A song with ID 4 already exists"

    def test_invalid_position(self):
        error = InvalidPositionError(5, 3)

        assert isinstance(error, IndexError)
        assert (error.position, error.size) == (5, 3)
        assert str(error) == "Invalid position 5 (expected 1-3)"

    def test_invalid_position_empty_playlist(self):
        assert str(InvalidPositionError(1, 0)) == "Invalid position 1 (playlist is empty)"

    def test_exception_chaining(self):
        """Test that exceptions can be chained."""
        try:
            raise ValueError("Original error")
        except ValueError as e:
            with pytest.raises(SongBuildError) as exc_info:
                raise SongBuildError("Wrapped error") from e

            assert exc_info.value.__cause__ == e
