"""Presentation helpers.

Text rendering for chat and terminal output, kept apart from the pure
arithmetic in ``utilbelt.core``.
"""

__all__ = [
    "bars",
    "get_bar",
]

from .bars import get_bar
