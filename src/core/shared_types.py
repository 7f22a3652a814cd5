"""
Type definitions used across layers
"""

from enum import StrEnum


class Direction(StrEnum):
    """Directions the empty cell can slide in. The values are the strings used on the wire."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
