"""
Utility modules for Tunebox.
"""

from .string_utils import truncate_text, center_text, format_duration, pluralize

__all__ = [
    'truncate_text',
    'center_text',
    'format_duration',
    'pluralize'
]
