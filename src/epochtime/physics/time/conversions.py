"""Helper functions that convert between different forms of time."""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Local Imports
from ...common.exceptions import TimeSystemError
from ...common.logger import epochtimeLogError
from ..constants import MJD_TO_JD_OFFSET
from .stardate import ModifiedJulian
from .time_system import TimeSystem

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from .instant import Instant


def instantToTimeSystem(instant: Instant, time_system: type[TimeSystem]) -> TimeSystem:
    """Convert an :class:`.Instant` into any :class:`.TimeSystem` representation.

    Args:
        instant (:class:`.Instant`): time point to convert
        time_system (``type``): :class:`.TimeSystem` subclass to convert into

    Raises:
        :class:`.TimeSystemError`: `time_system` doesn't implement :class:`.TimeSystem`

    Returns:
        :class:`.TimeSystem`: `instant` expressed in `time_system`
    """
    if not isinstance(time_system, type) or not issubclass(time_system, TimeSystem):
        epochtimeLogError(f"Cannot convert an Instant into {time_system!r}")
        raise TimeSystemError(f"{time_system!r} is not a TimeSystem")
    return time_system.from_instant(instant)


def timeSystemToInstant(value: TimeSystem) -> Instant:
    """Convert any :class:`.TimeSystem` representation back into an :class:`.Instant`.

    Raises:
        :class:`.TimeSystemError`: `value` doesn't implement :class:`.TimeSystem`
    """
    if not isinstance(value, TimeSystem):
        epochtimeLogError(f"Cannot convert {type(value).__name__} into an Instant")
        raise TimeSystemError(f"{value!r} is not a TimeSystem")
    return value.as_instant()


def instantToModifiedJulian(instant: Instant) -> float:
    """Return the Modified Julian Date, in days, of `instant`."""
    return ModifiedJulian.from_instant(instant).days


def modifiedJulianToInstant(mjd_days: float) -> Instant:
    """Return the :class:`.Instant` at `mjd_days` Modified Julian days."""
    return ModifiedJulian(mjd_days).as_instant()


def modifiedJulianToJulianDate(mjd_days: float) -> float:
    """Convert a Modified Julian Date to a true Julian date.

    Args:
        mjd_days (``float``): days since 17 Nov 1858 00:00

    Returns:
        ``float``: days since 01 Jan -4713 12:00
    """
    return ModifiedJulian(mjd_days).julian_days()


def julianDateToModifiedJulian(julian_date: float) -> ModifiedJulian:
    """Convert a true Julian date to a :class:`.ModifiedJulian`.

    Args:
        julian_date (``float``): days since 01 Jan -4713 12:00

    Returns:
        :class:`.ModifiedJulian`: days since 17 Nov 1858 00:00
    """
    return ModifiedJulian(float(julian_date) - MJD_TO_JD_OFFSET)
