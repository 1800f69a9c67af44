"""Text progress bars made of one marker on a ten-slot track."""
from __future__ import annotations

import math

FILLED_MARKER = '🔘'
EMPTY_MARKER = '▬'
SLOTS = 10


def _slot_for(progress) -> int:
    try:
        value = float(progress)
    except (TypeError, ValueError):
        return 0
    except OverflowError:
        # ints beyond float range
        return SLOTS - 1 if progress > 0 else 0
    if math.isnan(value) or value < 10:
        return 0
    if math.isinf(value):
        return SLOTS - 1
    return min(math.floor(value / 10), SLOTS - 1)


def get_bar(progress, filled: str = FILLED_MARKER, empty: str = EMPTY_MARKER) -> str:
    """Return the bar for a ``progress`` percentage.

    The marker sits in slot ``floor(progress / 10)``, clamped to 0..9.
    Anything that is not a number, and anything below 10, lands in slot 0.

    >>> get_bar(60)
    '▬▬▬▬▬▬🔘▬▬▬'
    """
    slot = _slot_for(progress)
    return empty * slot + filled + empty * (SLOTS - slot - 1)
