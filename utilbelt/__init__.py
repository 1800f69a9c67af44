"""
utilbelt: small stateless helpers for durations, rounding, progress bars,
pagination and JSON response bodies.
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
    "get_bar",
    "get_json_response",
    "JSONParseError",
]

from .core import (
    Duration,
    MORE_THAN_A_DAY,
    ms_to_time,
    ms_to_unit,
    ms_to_time_string,
    parse_time_string,
    round_to,
    paginate,
)
from .rendering import get_bar
from .services.body import get_json_response
from .services.errors import JSONParseError
