"""Perimeter bearing walls for a rectangular building.

The building runs along +X (length) and +Y (span) from the south-west
corner at the origin. Walls are laid out counterclockwise so each
wall's left -> right direction keeps the interior on its left.
"""

from __future__ import annotations

from trusslayout.rules.base import LayoutRule
from trusslayout.models import (
    LayoutContext, BearingEnvelope, Justification, Point2D,
)


class PerimeterBearingRule(LayoutRule):
    """Four bearing envelopes: South, East, North, West."""

    priority = 10  # Everything else bears on these

    def get_id(self) -> str:
        return "bearing.perimeter"

    def get_name(self) -> str:
        return "Perimeter Bearing Walls"

    def applies(self, context: LayoutContext) -> bool:
        return True

    def generate(self, context: LayoutContext) -> None:
        params = context.params
        length = params.building_length
        span = params.span

        south_west = Point2D(x=0, y=0)
        south_east = Point2D(x=length, y=0)
        north_east = Point2D(x=length, y=span)
        north_west = Point2D(x=0, y=span)

        walls = [
            ("South", south_west, south_east),
            ("East", south_east, north_east),
            ("North", north_east, north_west),
            ("West", north_west, south_west),
        ]

        context.add_bearing_envelopes([
            BearingEnvelope(
                id=f"bearing.{name.lower()}",
                name=name,
                left_point=left,
                right_point=right,
                thickness=params.wall_thickness,
                top=params.wall_height,
                bottom=0,
                justification=Justification.FRONT,
            )
            for name, left, right in walls
        ])
