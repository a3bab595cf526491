"""Defines the :class:`.Instant` fixed-point time representation and its :class:`.Era` tag.

An :class:`.Instant` is the magnitude of an offset from the reference epoch, 01 Jan 1900 00:00,
split into whole seconds and a nanosecond remainder, plus an :class:`.Era` telling on which side
of the epoch it falls. Every other time representation converts through it, see
:class:`.TimeSystem`.
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass
from enum import Enum

# Local Imports
from ..constants import NANO2SEC, NANOS_PER_SECOND

MAX_SECONDS = 2**64 - 1
"""``int``: largest seconds magnitude an :class:`.Instant` can hold (unsigned 64-bit field)."""


class Era(Enum):
    """Side of the reference epoch an :class:`.Instant` falls on."""

    PAST = -1
    """Enum: strictly before the reference epoch."""

    PRESENT = 1
    """Enum: at or after the reference epoch."""


@dataclass(frozen=True)
class Instant:
    """Fixed-point time point relative to the 01 Jan 1900 00:00 reference epoch.

    The signed offset from the epoch is ``+seconds.nanos`` for :attr:`.Era.PRESENT` and
    ``-seconds.nanos`` for :attr:`.Era.PAST`.
    """

    era: Era
    """:class:`.Era`: which side of the reference epoch this instant is on."""

    seconds: int
    """``int``: whole seconds away from the reference epoch, ``0 <= seconds <= MAX_SECONDS``."""

    nanos: int = 0
    """``int``: sub-second remainder away from the reference epoch, ``0 <= nanos < 1e9``."""

    def __post_init__(self):
        """Validate the three facets."""
        if not isinstance(self.era, Era):
            raise TypeError(f"Instant: era must be an Era, not {type(self.era).__name__}")
        for name in ("seconds", "nanos"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Instant: {name} must be an int, not {type(value).__name__}")

        if not 0 <= self.seconds <= MAX_SECONDS:
            raise ValueError(f"Instant: seconds must be in [0, {MAX_SECONDS}], got {self.seconds}")
        if not 0 <= self.nanos < NANOS_PER_SECOND:
            raise ValueError(f"Instant: nanos must be in [0, {NANOS_PER_SECOND}), got {self.nanos}")

    @classmethod
    def fromOffset(cls, offset_seconds: int, nanos: int = 0) -> Instant:
        """Build an :class:`.Instant` from a signed whole-second offset from the reference epoch.

        Args:
            offset_seconds (``int``): signed seconds from the epoch, negative values are in the past.
            nanos (``int``, optional): sub-second remainder away from the epoch. Defaults to 0.

        Returns:
            :class:`.Instant`: the corresponding instant.
        """
        if offset_seconds < 0:
            return cls(Era.PAST, -offset_seconds, nanos)
        return cls(Era.PRESENT, offset_seconds, nanos)

    def secs(self) -> int:
        """Return the whole seconds magnitude."""
        return self.seconds

    @property
    def offset(self) -> float:
        """``float``: signed offset in seconds from the reference epoch."""
        return self.era.value * (self.seconds + self.nanos * NANO2SEC)

    @property
    def _ordinal(self) -> int:
        """``int``: signed offset in nanoseconds, exact."""
        return self.era.value * (self.seconds * NANOS_PER_SECOND + self.nanos)

    def __lt__(self, other):
        """Order by signed offset from the epoch."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ordinal < other._ordinal

    def __le__(self, other):
        """Order by signed offset from the epoch."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ordinal <= other._ordinal

    def __gt__(self, other):
        """Order by signed offset from the epoch."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ordinal > other._ordinal

    def __ge__(self, other):
        """Order by signed offset from the epoch."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ordinal >= other._ordinal
