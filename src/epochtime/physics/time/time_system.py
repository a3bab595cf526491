"""Defines the :class:`.TimeSystem` interface shared by every time representation."""

from __future__ import annotations

# Standard Library Imports
from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from .instant import Instant


class TimeSystem(metaclass=ABCMeta):
    """Conversion contract between a time representation and an :class:`.Instant`.

    A representation only has to say how it is built from an :class:`.Instant` and how it is
    turned back into one. New representations plug in without touching :class:`.Instant`.
    """

    @classmethod
    @abstractmethod
    def from_instant(cls, instant: Instant) -> TimeSystem:
        """Build this representation from an :class:`.Instant`.

        Args:
            instant (:class:`.Instant`): time point to convert.

        Returns:
            :class:`.TimeSystem`: the same time point in this representation.
        """
        raise NotImplementedError

    @abstractmethod
    def as_instant(self) -> Instant:
        """Recover the :class:`.Instant` this representation stands for."""
        raise NotImplementedError
