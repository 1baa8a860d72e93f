"""Human-readable magnitude formatting.

One routine, ``format_magnitude``, picks the unit for a value and renders it
with at most one fractional digit. The fractional digit is truncated, never
rounded, so a value just under a unit boundary is never displayed as if it had
crossed it (1024 * 1024 - 1 bytes is "1023.9 KiB", not "1 MiB").
"""

import logging
import math
import numbers
from decimal import Decimal

from humanize_bytes.errors import InvalidMagnitudeError
from humanize_bytes.units import BINARY, DECIMAL, QUANTITY, UnitProfile, get_profile

logger = logging.getLogger(__name__)


def _check_number(value) -> None:
    """Reject input that is not a real number."""
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise TypeError(f"Expected a real number, got {type(value).__name__}")


def _to_magnitude(value) -> float:
    """Return ``abs(value)`` widened to a finite float."""
    try:
        magnitude = abs(float(value))
    except OverflowError:
        raise InvalidMagnitudeError(f"Value {value!r} is too large to humanize") from None
    if not math.isfinite(magnitude):
        raise InvalidMagnitudeError(f"Cannot humanize non-finite value {value!r}")
    return magnitude


def _power(profile: UnitProfile, index: int) -> float:
    """``profile.base ** index``, rounded once from the exact integer power."""
    return float(profile.integer_base**index)


def _scale_index(magnitude: float, profile: UnitProfile) -> int:
    """Return the power of ``profile.base`` that selects the suffix for ``magnitude``.

    The logarithm can land a hair below an exact power (log(1000, 1000) may
    come out as 0.9999...), so the estimate is checked against the powers
    themselves.
    """
    index = min(int(math.log(magnitude, profile.base)), profile.max_index)

    while index > 1 and magnitude < _power(profile, index):
        index -= 1
    while index < profile.max_index and magnitude >= _power(profile, index + 1):
        index += 1

    if index == profile.max_index and magnitude >= _power(profile, index + 1):
        logger.debug(
            f"Magnitude {magnitude} is beyond the largest {profile.name} unit, "
            f"clamping to {profile.suffixes[-1]!r}"
        )
    return index


def _truncated_hundredths(magnitude: float, index: int, profile: UnitProfile) -> int:
    """Scale ``magnitude`` to unit ``index`` and floor it to whole hundredths."""
    units = magnitude / _power(profile, index)
    return math.floor(units * 100)


def _trim(hundredths: int) -> str:
    """Render hundredths as a number with at most one nonzero fractional digit.

    The second decimal is always dropped, then a trailing zero and a bare
    decimal point are removed: 109 -> "1", 110 -> "1.1", 102399 -> "1023.9".
    """
    text = f"{hundredths // 100}.{hundredths % 100:02d}"
    return text[:-1].rstrip("0").rstrip(".")


def format_magnitude(value, profile: UnitProfile) -> str:
    """Format a number using the units of ``profile``.

    Args:
        value: Any real number. It is converted to float before scaling, so
            integers above 2**53 are subject to float rounding.
        profile: Unit profile supplying the base and suffixes.

    Returns:
        A string such as "512 B", "1.1 KiB" or "999.9 k". Negative values get
        a leading "-". Values larger than the biggest unit are expressed in
        that unit.

    Raises:
        TypeError: If ``value`` is not a real number.
        InvalidMagnitudeError: If ``value`` is NaN, infinite, or too large
            for a float.
    """
    _check_number(value)
    magnitude = _to_magnitude(value)
    sign = "-" if value < 0 else ""

    if magnitude < profile.base:
        return f"{sign}{int(magnitude)}{profile.zero_label}"

    index = _scale_index(magnitude, profile)
    hundredths = _truncated_hundredths(magnitude, index, profile)
    return f"{sign}{_trim(hundredths)} {profile.suffixes[index]}"


def humanize_bytes_binary(value) -> str:
    """Format a number of bytes using IEC binary suffixes.

    1024 (B, KiB, MiB, GiB, TiB, PiB, EiB, ZiB, YiB, RiB, QiB)
    """
    return format_magnitude(value, BINARY)


def humanize_bytes_decimal(value) -> str:
    """Format a number of bytes using SI decimal suffixes.

    1000 (B, kB, MB, GB, TB, PB, EB, ZB, YB, RB, QB)
    """
    return format_magnitude(value, DECIMAL)


def humanize_quantity(value) -> str:
    """Format a plain count using SI decimal prefixes.

    1000 (, k, M, G, T, P, E, Z, Y, R, Q)
    """
    return format_magnitude(value, QUANTITY)


def humanize(value, profile: str | UnitProfile = BINARY.name) -> str:
    """Format ``value`` with a profile given by name or instance."""
    if isinstance(profile, str):
        profile = get_profile(profile)
    return format_magnitude(value, profile)
