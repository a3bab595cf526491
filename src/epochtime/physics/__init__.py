"""Common physics definitions used by the time systems.

These are "general" in that they don't require their own, separate package.
"""
