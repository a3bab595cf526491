"""Contains classes and conversion functions for different definitions of time.

Every representation implements :class:`.TimeSystem`, so it can be built from, and turned back
into, an :class:`.Instant`. Notably, the :class:`.Instant` never needs to know about the
representations layered on top of it.
"""
