"""Geometric primitives used throughout the layout planner."""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict


class Point2D(BaseModel):
    """Point on a plane: the layout floor plan or a member's design plane."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)


class Point3D(BaseModel):
    """Point in 3D space (design frame or layout frame)."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def distance_to(self, other: Point3D) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def __add__(self, other: Point3D) -> Point3D:
        return Point3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)


class Vector2D(BaseModel):
    """2D direction on the floor plan."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def bearing(self) -> float:
        """Angle from the +X axis in radians, counterclockwise positive."""
        return math.atan2(self.y, self.x)


def direction_from_points(start: Point2D, end: Point2D) -> Vector2D:
    """Get direction vector from start to end."""
    return Vector2D(x=end.x - start.x, y=end.y - start.y)
