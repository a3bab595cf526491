"""Main Module Documentation.

The top-level module exposes the time representations and serves as the command line entry point
for converting between :class:`.Instant` values and Modified Julian Dates.
"""

from __future__ import annotations

# Local Imports
from .physics.constants import DAYS_PER_YEAR, SECONDS_PER_DAY
from .physics.time.instant import Era, Instant
from .physics.time.stardate import ModifiedJulian
from .physics.time.time_system import TimeSystem

__version__ = "1.0.0"

__all__ = [
    "DAYS_PER_YEAR",
    "SECONDS_PER_DAY",
    "Era",
    "Instant",
    "ModifiedJulian",
    "TimeSystem",
    "main",
    "runConversion",
]


def runConversion(cli_args) -> str:
    """Run the conversion selected on the command line.

    Args:
        cli_args (``argparse.Namespace``): parsed command line arguments

    Returns:
        ``str``: space-separated result, ``"MJD JD"`` for ``to-mjd`` and
        ``"ERA SECONDS NANOS"`` for ``from-mjd``
    """
    # Local Imports
    from .common.behavioral_config import BehavioralConfig
    from .common.logger import Logger

    config = BehavioralConfig.getConfig(cli_args.config_path)
    logger = Logger("epochtime")

    if cli_args.command == "to-mjd":
        era = Era.PAST if cli_args.past else Era.PRESENT
        instant = Instant(era, cli_args.seconds, cli_args.nanos)
        mjd = ModifiedJulian.from_instant(instant)
        logger.debug(f"Converted {instant!r} to {mjd!r}")

        if cli_args.check:
            drift = abs(mjd.as_instant().offset - instant.offset)
            if drift > config.conversion.RoundTripTolerance:
                logger.warning(
                    f"Round trip of {instant!r} drifted {drift} s, "
                    f"above tolerance {config.conversion.RoundTripTolerance} s",
                )
            else:
                logger.info(f"Round trip of {instant!r} drifted {drift} s")

        return f"{mjd.days!r} {mjd.julian_days()!r}"

    instant = ModifiedJulian(cli_args.days).as_instant()
    logger.debug(f"Converted {cli_args.days!r} MJD to {instant!r}")
    return f"{instant.era.name} {instant.seconds} {instant.nanos}"


def main() -> None:
    """Epochtime main entry point.

    This is the function that the :command:`epochtime` command points to. See :mod:`.cli` for
    details on what command line options are available.
    """
    # Local Imports
    from .common.cli import getCommandLineParser

    parser = getCommandLineParser()
    cli_args = parser.parse_args()

    print(runConversion(cli_args))
