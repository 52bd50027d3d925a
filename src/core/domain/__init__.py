"""
Domain models and value objects.

Contains the DoubleSet multiset, its entry model and its error taxonomy.
"""

from src.core.domain.double_set import (
    MAX_MEMBER_COUNT,
    MIN_MEMBER_COUNT,
    DoubleSet,
    DoubleSetEntry,
)
from src.core.domain.double_set_parser import MAX_MEMBER_DIGITS, parse_entries
from src.core.domain.errors import (
    DoubleSetError,
    DoubleSetParseError,
    DoubleSetValidationError,
)

__all__ = [
    # DoubleSet
    "MIN_MEMBER_COUNT",
    "MAX_MEMBER_COUNT",
    "DoubleSet",
    "DoubleSetEntry",
    # Parser
    "MAX_MEMBER_DIGITS",
    "parse_entries",
    # Errors
    "DoubleSetError",
    "DoubleSetParseError",
    "DoubleSetValidationError",
]
