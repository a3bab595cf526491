"""Global time constants.

This module holds all constants that are used in various places across the
codebase, allowing for a consistent place to store them. Constants specific
to objects and classes remain in those files.

References:
    #. :cite:t:`vallado_2013_astro`, Section 3.5
    #. `Leap seconds list <https://www.ietf.org/timezones/data/leap-seconds.list>`_
"""

from __future__ import annotations

# Epoch constants
J1900_OFFSET = 15020.0
"""``float``: Modified Julian Day of the :class:`.Instant` reference epoch, 01 Jan 1900 00:00.

Julian days "start" at noon, but the Modified Julian Date starts at midnight, so the 1900
epoch falls on a whole MJD.
"""
MJD_TO_JD_OFFSET = 2_400_000.5
"""``float``: Days between the true Julian epoch (01 Jan -4713 12:00) and the MJD epoch (17 Nov 1858 00:00)."""

# Conversion constants
DAYS_PER_YEAR = 365.25
"""``float``: Days per year in the Julian calendar."""
SECONDS_PER_DAY = 86_400.0
"""``float``: Seconds per day."""
NANOS_PER_SECOND = 1_000_000_000
NANO2SEC = 1e-9
SEC2NANO = 1e9
