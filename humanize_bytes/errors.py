"""Exceptions raised by the humanize_bytes package."""


class HumanizeError(ValueError):
    """Base class for humanize_bytes errors."""


class UnknownProfileError(HumanizeError, KeyError):
    """Raised when a unit profile name is not recognised."""

    def __init__(self, name: str, known: list[str]):
        self.name = name
        self.known = known
        super().__init__(f"Unknown unit profile {name!r}, expected one of: {', '.join(known)}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class InvalidMagnitudeError(HumanizeError):
    """Raised for magnitudes that cannot be placed on any unit scale (NaN, infinity)."""
