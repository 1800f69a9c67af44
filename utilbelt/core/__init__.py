"""
Core helpers for utilbelt.

This package hosts the pure, side-effect-free functions: duration handling,
rounding and pagination. Nothing here performs I/O or logs.
"""

__all__ = [
    "Duration",
    "MORE_THAN_A_DAY",
    "ms_to_time",
    "ms_to_unit",
    "ms_to_time_string",
    "parse_time_string",
    "round_to",
    "paginate",
]

from .timeutils import (
    Duration,
    MORE_THAN_A_DAY,
    ms_to_time,
    ms_to_unit,
    ms_to_time_string,
    parse_time_string,
)
from .numbers import round_to
from .pagination import paginate
