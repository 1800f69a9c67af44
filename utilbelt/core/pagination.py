"""Split sequences into fixed-size pages."""
from __future__ import annotations

from typing import Iterable, List


def paginate(items: Iterable, size: int) -> List[list]:
    """Split ``items`` into consecutive pages of at most ``size`` elements.

    Order is preserved and only the last page may be shorter. An empty
    input gives an empty list of pages. Raises ``ValueError`` when ``size``
    is not a positive integer.
    """
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise ValueError('Page size must be a positive integer')
    values = list(items)
    return [values[i:i + size] for i in range(0, len(values), size)]
