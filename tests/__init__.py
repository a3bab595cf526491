"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from pathlib import Path

# epochtime Imports
from epochtime.physics.time.instant import Era, Instant

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"
CUSTOM_CONFIG_PATH = Path("custom_behavior.config")

# Common instants, seconds from 01 Jan 1900 00:00
UNIX_EPOCH = Instant(Era.PRESENT, 2_208_988_800)
"""01 Jan 1970 00:00, MJD 40587."""

J2000_MIDNIGHT = Instant(Era.PRESENT, 3_155_673_600)
"""01 Jan 2000 00:00, MJD 51544."""

MJD_EPOCH = Instant(Era.PAST, 1_297_728_000)
"""17 Nov 1858 00:00, MJD 0."""
