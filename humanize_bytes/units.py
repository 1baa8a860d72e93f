"""Unit profiles: the base and suffix table each formatter variant uses."""

from dataclasses import dataclass

from humanize_bytes.errors import UnknownProfileError


@dataclass(frozen=True)
class UnitProfile:
    """Immutable description of one unit system.

    Attributes:
        name: Short identifier used in configuration and on the command line.
        base: Step between consecutive suffixes (1024.0 or 1000.0).
        suffixes: Suffix per power of base, index 0 meaning no multiplier.
        zero_label: Text appended to values below ``base`` (" B" or "").
    """

    name: str
    base: float
    suffixes: tuple[str, ...]
    zero_label: str = ""

    @property
    def max_index(self) -> int:
        """Index of the largest defined suffix."""
        return len(self.suffixes) - 1

    @property
    def integer_base(self) -> int:
        """The base as an int, for exact comparisons against integral input."""
        return int(self.base)


# IEC binary prefixes, 1 KiB = 1024 B
BINARY = UnitProfile(
    name="binary",
    base=1024.0,
    suffixes=("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB", "RiB", "QiB"),
    zero_label=" B",
)

# SI decimal prefixes, 1 kB = 1000 B
DECIMAL = UnitProfile(
    name="decimal",
    base=1000.0,
    suffixes=("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB", "RB", "QB"),
    zero_label=" B",
)

# kilo, mega, giga, tera, peta, exa, zetta, yotta, ronna, quetta
QUANTITY = UnitProfile(
    name="quantity",
    base=1000.0,
    suffixes=("", "k", "M", "G", "T", "P", "E", "Z", "Y", "R", "Q"),
)

PROFILES: dict[str, UnitProfile] = {
    profile.name: profile for profile in (BINARY, DECIMAL, QUANTITY)
}


def get_profile(name: str) -> UnitProfile:
    """Look up a unit profile by name.

    Args:
        name: Profile name, case-insensitive ("binary", "decimal", "quantity").

    Returns:
        The matching UnitProfile.

    Raises:
        UnknownProfileError: If no profile has that name.
    """
    profile = PROFILES.get(name.strip().lower())
    if profile is None:
        raise UnknownProfileError(name, list(PROFILES))
    return profile
