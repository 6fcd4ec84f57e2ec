"""
Input Handlers Module
Reads lines typed by the user and turns them into values.
"""

from typing import List, Optional, TextIO, Tuple
from rich.console import Console
from rich.markup import escape

from ..core.exceptions import InvalidSelectionError
from ..core.validation import parse_int


class InputHandlers:
    """
    Line-oriented prompts.

    Reads from standard input by default, or from `stream` when one is given.
    Running out of input raises EOFError in both cases.
    """

    def __init__(self, console: Console, stream: Optional[TextIO] = None):
        self.console = console
        self.stream = stream

    def read_line(self, prompt: str) -> str:
        """Prompt for one line and return it stripped."""
        response = self.console.input(f"[bold]{escape(prompt)}[/bold] ", stream=self.stream)
        if self.stream is not None and response == "":
            # readline() returns "" only at end of stream
            raise EOFError("No more input")
        return response.strip()

    def read_int(self, prompt: str, field_name: str = "number", default: Optional[int] = None) -> int:
        """
        Prompt for a whole number. An empty answer returns `default` when one is given.

        Raises:
            InvalidInputError: If the answer is not a number
        """
        response = self.read_line(prompt)
        if not response and default is not None:
            return default
        return parse_int(response, field_name)

    def read_choice(self, prompt: str, options: List[Tuple[str, str]]) -> str:
        """
        Prompt for one of the option keys.

        Raises:
            InvalidSelectionError: If the answer is not one of the keys
        """
        response = self.read_line(prompt)
        keys = [key for key, _ in options]
        if response not in keys:
            raise InvalidSelectionError(f"Invalid choice {response!r}. Choose one of: {', '.join(keys)}")
        return response
