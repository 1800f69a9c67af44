"""Pure duration helpers: decomposition, formatting and parsing.

Durations are expressed in milliseconds on the way in and broken down into
a :class:`Duration` of days, hours, minutes and seconds on the way out.
"""
from __future__ import annotations

import math
import re
from typing import NamedTuple

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

MORE_THAN_A_DAY = 'MORE_THAN_A_DAY'

UNIT_MS = {
    's': MS_PER_SECOND,
    'm': MS_PER_MINUTE,
    'h': MS_PER_HOUR,
    'd': MS_PER_DAY,
}

_UNIT_ALIASES = {
    'seconds': 's',
    'minutes': 'm',
    'hours': 'h',
    'days': 'd',
}

_TOKEN_RE = re.compile(r'([0-9]+)([smhd])')


class Duration(NamedTuple):
    """Elapsed time split into whole days, hours, minutes and seconds."""

    days: int
    hours: int
    minutes: int
    seconds: int


def _totals(milliseconds) -> tuple:
    total_seconds = math.floor(milliseconds) // MS_PER_SECOND
    total_minutes = total_seconds // 60
    total_hours = total_minutes // 60
    days = total_hours // 24
    return total_seconds, total_minutes, total_hours, days


def ms_to_time(milliseconds) -> Duration:
    """Break ``milliseconds`` down into a :class:`Duration`.

    Sub-second remainders are discarded. Negative values follow floor
    division, so ``ms_to_time(-1)`` is ``Duration(-1, 23, 59, 59)``.

    >>> ms_to_time(183_845_006)
    Duration(days=2, hours=3, minutes=4, seconds=5)
    """
    total_seconds, total_minutes, total_hours, days = _totals(milliseconds)
    return Duration(
        days=days,
        hours=total_hours % 24,
        minutes=total_minutes % 60,
        seconds=total_seconds % 60,
    )


def ms_to_unit(milliseconds, unit: str) -> int:
    """Return the whole number of ``unit`` contained in ``milliseconds``.

    ``unit`` is one of ``s``, ``m``, ``h``, ``d`` (or ``seconds``,
    ``minutes``, ``hours``, ``days``). The result is a total, not a
    remainder: ``ms_to_unit(183_845_006, 'h')`` is ``51``.
    """
    key = _UNIT_ALIASES.get(unit, unit)
    if key not in UNIT_MS:
        raise ValueError(f'Unsupported time unit: {unit!r}')
    total_seconds, total_minutes, total_hours, days = _totals(milliseconds)
    return {
        's': total_seconds,
        'm': total_minutes,
        'h': total_hours,
        'd': days,
    }[key]


def _plural(amount: int, unit: str) -> str:
    return f"{amount} {unit}{'' if amount == 1 else 's'}"


def ms_to_time_string(duration, simple: bool = False) -> str:
    """Render a :class:`Duration` as text.

    Simple mode gives ``H:MM:SS`` or ``M:SS`` and returns
    :data:`MORE_THAN_A_DAY` once the duration reaches a full day.
    Detailed mode lists every non-zero unit, e.g.
    ``"1 day, 5 hrs, 5 mins, 5 secs"``; a zero duration is ``"0 secs"``.
    """
    days, hours, minutes, seconds = duration
    if simple:
        if days > 0:
            return MORE_THAN_A_DAY
        if hours > 0:
            return f"{hours}:{minutes:02d}:{seconds:02d}"
        return f"{minutes}:{seconds:02d}"

    parts = []
    if days > 0:
        parts.append(_plural(days, 'day'))
    if hours > 0:
        parts.append(_plural(hours, 'hr'))
    if minutes > 0:
        parts.append(_plural(minutes, 'min'))
    if seconds > 0:
        parts.append(_plural(seconds, 'sec'))
    if not parts:
        return _plural(0, 'sec')
    return ', '.join(parts)


def parse_time_string(time_string: str) -> int:
    """Convert a string like ``"1h 30m"`` to milliseconds.

    Every run of digits directly followed by ``s``, ``m``, ``h`` or ``d``
    counts; repeated units add up (``"2s2s"`` is ``4000``). Digits with no
    unit right after them and any other characters are ignored, so a
    string without tokens yields ``0``.
    """
    total = 0
    for match in _TOKEN_RE.finditer(time_string):
        total += int(match.group(1)) * UNIT_MS[match.group(2)]
    return total
