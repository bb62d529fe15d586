"""Roof pitch helpers."""

from __future__ import annotations
import math


def slope_to_radians(rise_per_foot: float) -> float:
    """Pitch expressed as rise per 12 of run, converted to an angle."""
    return math.atan(rise_per_foot / 12)


def radians_to_degrees(radians: float) -> float:
    return radians / math.pi * 180


def heel_height(slope_radians: float, butt_cut: float, top_chord_width: float) -> float:
    """Vertical height of the truss at the outside face of the bearing."""
    return butt_cut + top_chord_width / math.cos(slope_radians)
