"""Define the command line interface for the epochtime conversion tool."""

from __future__ import annotations

# Standard Library Imports
import argparse
import os.path

# Local Imports
from .logger import epochtimeLogError


def fileChecker(filepath):
    """Checks for valid filepaths passed to the CLI parser.

    Args:
        filepath (``str``): filepath given to CLI parser.

    Raises:
        ValueError: if the file does not exist

    Returns:
        ``str``: fully validated, absolute path to the file
    """
    filepath = os.path.abspath(os.path.realpath(os.path.normpath(filepath)))
    if not os.path.isfile(filepath):
        epochtimeLogError("Bad filepath given to CLI")
        raise ValueError(filepath)
    return filepath


def nonNegativeInt(value):
    """Parse a non-negative integer CLI value.

    Raises:
        argparse.ArgumentTypeError: if `value` is not a non-negative integer
    """
    try:
        parsed = int(value)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from err
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"{value!r} is negative, use --past for times before 1900")
    return parsed


def getCommandLineParser():
    """Create parser for command line arguments.

    Returns:
        ``argparse.ArgumentParser``: valid parser object
    """
    parser = argparse.ArgumentParser(description="epochtime Command Line Interface")

    parser.add_argument(
        "-c",
        "--config",
        dest="config_path",
        metavar="CONFIG_FILE",
        default=None,
        type=fileChecker,
        help="Path to a behavior config file. DEFAULT: packaged config",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    to_mjd = commands.add_parser(
        "to-mjd",
        help="Convert seconds from 01 Jan 1900 00:00 into a Modified Julian Date",
    )
    to_mjd.add_argument(
        "seconds",
        metavar="SECONDS",
        type=nonNegativeInt,
        help="Whole seconds away from 01 Jan 1900 00:00",
    )
    to_mjd.add_argument(
        "-n",
        "--nanos",
        dest="nanos",
        metavar="NANOS",
        default=0,
        type=nonNegativeInt,
        help="Sub-second remainder in nanoseconds. DEFAULT: 0",
    )
    to_mjd.add_argument(
        "--past",
        dest="past",
        action="store_true",
        default=False,
        help="Count SECONDS backwards, before 01 Jan 1900 00:00",
    )
    to_mjd.add_argument(
        "--check",
        dest="check",
        action="store_true",
        default=False,
        help="Convert back and warn if the round trip drifts past the configured tolerance",
    )

    from_mjd = commands.add_parser(
        "from-mjd",
        help="Convert a Modified Julian Date into era, seconds & nanoseconds",
    )
    from_mjd.add_argument(
        "days",
        metavar="DAYS",
        type=float,
        help="Modified Julian Date, days since 17 Nov 1858 00:00",
    )

    return parser
