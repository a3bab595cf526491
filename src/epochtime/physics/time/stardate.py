"""Defines the :class:`.ModifiedJulian` time representation.

The Modified Julian Date (MJD) counts continuous, fractional days since 17 Nov 1858 00:00. The
:class:`.Instant` reference epoch, 01 Jan 1900 00:00, is MJD 15020, so the conversion is the one
used for NTP time stamps in the `leap seconds list`_:

    The NTP timestamps are in units of seconds since the NTP epoch, which is 1 January 1900,
    00:00:00. The Modified Julian Day number corresponding to the NTP time stamp, X, can be
    computed as ``X/86400 + 15020``.

.. code-block:: python

    instant = Instant(Era.PRESENT, 3_600)
    mjd = ModifiedJulian.from_instant(instant)  # ModifiedJulian(days=15020.041666...)
    mjd.julian_days()  # 2415020.541666...
    mjd.as_instant() == instant  # True

Whole-second round trips are exact to the precision of a double-precision day count:
sub-microsecond near the reference epoch, degrading for dates far from it. Nanoseconds are added
to the day count unscaled, so only remainders worth less than half a second once read as days
(about 5787 ns) come back unchanged.

References:
    :cite:t:`vallado_2013_astro`, Section 3.5.1

.. _leap seconds list: https://www.ietf.org/timezones/data/leap-seconds.list
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass

# Third Party Imports
from numpy import copysign, fabs, isfinite, trunc

# Local Imports
from ...common.exceptions import InstantOverflowError
from ...common.logger import epochtimeLogDebug, epochtimeLogError
from ..constants import J1900_OFFSET, MJD_TO_JD_OFFSET, NANO2SEC, SEC2NANO, SECONDS_PER_DAY
from .instant import MAX_SECONDS, Era, Instant
from .time_system import TimeSystem


def roundHalfAway(value: float) -> float:
    """Round to the nearest integer, with halfway cases rounded away from zero.

    Python's :func:`round` and :func:`numpy.round` both round halfway cases to even, which
    would flip whole seconds for MJDs landing exactly on a half second.

    Args:
        value (``float``): value to round

    Returns:
        ``float``: nearest integral value, keeping the sign of `value`
    """
    if not isfinite(value):
        return float(value)

    whole = trunc(value)
    if fabs(value - whole) >= 0.5:
        whole += copysign(1.0, value)
    return float(whole)


@dataclass(frozen=True, order=True)
class ModifiedJulian(TimeSystem):
    """Modified Julian Date, in days since 17 Nov 1858 00:00."""

    days: float
    """``float``: finite, fractional days since the MJD epoch."""

    def __post_init__(self):
        """Make sure the day count is a finite ``float``."""
        if not isfinite(self.days):
            raise ValueError(f"ModifiedJulian: days must be finite, got {self.days!r}")
        object.__setattr__(self, "days", float(self.days))

    def julian_days(self) -> float:
        """Return the true Julian days since 01 Jan -4713 12:00.

        References:
            :cite:t:`vallado_2013_astro`, Section 3.5.1, page 182

        Returns:
            ``float``: Julian day number
        """
        return self.days + MJD_TO_JD_OFFSET

    @classmethod
    def from_instant(cls, instant: Instant) -> ModifiedJulian:
        """Convert an :class:`.Instant` to a :class:`.ModifiedJulian`.

        The era only signs the seconds term. The nanoseconds are added as-is, scaled by ``1e-9``
        but not converted from seconds to days, which :meth:`.as_instant` undoes.

        Args:
            instant (:class:`.Instant`): time point to convert

        Returns:
            :class:`.ModifiedJulian`: corresponding MJD
        """
        modifier = 1.0 if instant.era is Era.PRESENT else -1.0
        return cls(
            J1900_OFFSET
            + modifier * float(instant.seconds) / SECONDS_PER_DAY
            + float(instant.nanos) * NANO2SEC,
        )

    def as_instant(self) -> Instant:
        """Convert this :class:`.ModifiedJulian` back to an :class:`.Instant`.

        Raises:
            :class:`.InstantOverflowError`: the rounded seconds don't fit the
                :class:`.Instant` seconds field

        Returns:
            :class:`.Instant`: corresponding time point
        """
        if self.days >= J1900_OFFSET:
            era, modifier = Era.PRESENT, 1.0
        else:
            era, modifier = Era.PAST, -1.0

        # Non-negative, the modifier cancels the sign of the epoch offset
        secs_frac = (self.days - J1900_OFFSET) * SECONDS_PER_DAY * modifier
        seconds = roundHalfAway(secs_frac)
        if not isfinite(seconds) or seconds < 0 or seconds > MAX_SECONDS:
            msg = f"ModifiedJulian: {self.days!r} days rounds to {seconds!r} seconds, outside [0, {MAX_SECONDS}]"
            epochtimeLogError(msg)
            raise InstantOverflowError(msg)

        nanos = roundHalfAway((secs_frac - seconds) * SEC2NANO / (SECONDS_PER_DAY * modifier))
        if nanos < 0:
            # Unsigned nanoseconds, a negative residual saturates to zero
            epochtimeLogDebug(f"ModifiedJulian: clamped {nanos!r} nanoseconds to 0 for {self.days!r} days")
            nanos = 0.0

        return Instant(era, int(seconds), int(nanos))
