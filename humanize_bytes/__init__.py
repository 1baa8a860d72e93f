"""Format byte counts and quantities as human-readable strings.

1 kB = 1000 B, 1 KiB = 1024 B. See https://en.wikipedia.org/wiki/Binary_prefix
"""

from humanize_bytes.config import FormatterConfig, load_config
from humanize_bytes.errors import HumanizeError, InvalidMagnitudeError, UnknownProfileError
from humanize_bytes.formatting import (
    format_magnitude,
    humanize,
    humanize_bytes_binary,
    humanize_bytes_decimal,
    humanize_quantity,
)
from humanize_bytes.units import BINARY, DECIMAL, PROFILES, QUANTITY, UnitProfile, get_profile

__all__ = [
    "BINARY",
    "DECIMAL",
    "FormatterConfig",
    "PROFILES",
    "QUANTITY",
    "HumanizeError",
    "InvalidMagnitudeError",
    "UnitProfile",
    "UnknownProfileError",
    "format_magnitude",
    "get_profile",
    "humanize",
    "humanize_bytes_binary",
    "humanize_bytes_decimal",
    "humanize_quantity",
    "load_config",
]
