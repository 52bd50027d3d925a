"""
Text primitives.

Nth-character capitalization over ASCII alphanumerics.
"""

from src.core.text.capitalization import COUNTABLE_CHARS, capitalize_nth, is_countable

__all__ = [
    "COUNTABLE_CHARS",
    "capitalize_nth",
    "is_countable",
]
