"""Design-space to layout-space transformation of truss members.

A member comes from the design service as a flat outline in the truss's
design plane plus a thickness. To place it in the building:

1. extrude the outline by the thickness (bottom face, then top face)
2. swap axes from the design convention to the layout convention
3. rotate about Z so local +X follows the placement line
4. translate to the placement's left point and elevation

Every function here is pure. Members can be transformed independently.
"""

from __future__ import annotations
import math
from typing import Sequence

from pydantic import BaseModel, ConfigDict

from trusslayout.models.geometry import Point2D, Point3D
from trusslayout.models.layout import Placement


Row = tuple[float, float, float]


class RotationMatrix(BaseModel):
    """
    Immutable 3x3 rotation, applied as ``result = M @ point``.

    Only rotations about the vertical axis are needed for placing
    members, so the only constructor is ``from_z_axis_angle``.
    """
    model_config = ConfigDict(frozen=True)

    rows: tuple[Row, Row, Row]

    @classmethod
    def from_z_axis_angle(cls, theta: float) -> RotationMatrix:
        """Counterclockwise rotation by ``theta`` radians about +Z."""
        c = math.cos(theta)
        s = math.sin(theta)
        return cls(rows=(
            (c, -s, 0.0),
            (s, c, 0.0),
            (0.0, 0.0, 1.0),
        ))

    def apply(self, point: Point3D) -> Point3D:
        (a, b, c), (d, e, f), (g, h, i) = self.rows
        x, y, z = point.x, point.y, point.z
        return Point3D(
            x=a * x + b * y + c * z,
            y=d * x + e * y + f * z,
            z=g * x + h * y + i * z,
        )


def extrude(vertices: Sequence[Point2D], extrusion: float) -> list[Point3D]:
    """
    Extrude a planar outline along +Z.

    Returns 2N points: the outline at z=0 followed by the outline at
    z=extrusion, both in input order, so index i and i + N are the same
    outline vertex on opposite faces.
    """
    bottom = [Point3D(x=v.x, y=v.y, z=0.0) for v in vertices]
    top = [Point3D(x=v.x, y=v.y, z=extrusion) for v in vertices]
    return bottom + top


def design_to_layout(point: Point3D) -> Point3D:
    """Remap design axes to layout axes: (x, y, z) -> (x, -z, y)."""
    return Point3D(x=point.x, y=-point.z, z=point.y)


def translate(point: Point3D, offset: Point3D) -> Point3D:
    return point + offset


def member_vertices_in_layout_space(
    outline: Sequence[Point2D],
    thickness: float,
    placement: Placement,
) -> list[Point3D]:
    """
    Position an extruded member outline in the layout's global frame.

    The placement must not be degenerate; callers check
    ``placement.is_degenerate`` first since the bearing of a zero-length
    line is undefined.
    """
    extruded = extrude(outline, thickness)
    converted = [design_to_layout(v) for v in extruded]

    rotation = RotationMatrix.from_z_axis_angle(placement.bearing)
    offset = Point3D(
        x=placement.left_point.x,
        y=placement.left_point.y,
        z=placement.elevation,
    )

    return [translate(rotation.apply(v), offset) for v in converted]
