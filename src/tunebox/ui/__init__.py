"""
User interface components for Tunebox.
"""

from .cli import TuneboxCLI
from .display import DisplayManager

__all__ = [
    'TuneboxCLI',
    'DisplayManager'
]
