"""Contains all the custom-defined exceptions used in epochtime."""

from __future__ import annotations


class InstantOverflowError(ArithmeticError):
    """Exception indicating a converted seconds count doesn't fit the :class:`.Instant` seconds field."""


class TimeSystemError(TypeError):
    """Exception indicating an object doesn't implement the :class:`.TimeSystem` interface."""
