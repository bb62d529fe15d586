"""Truss design models and their layout-space geometry."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .geometry import Point2D, Point3D


class Member(BaseModel):
    """A single truss member as drawn in the truss's design plane."""
    model_config = ConfigDict(frozen=True)

    name: str
    geometry: list[Point2D]   # Outline, order significant (polygon winding)
    thickness: float          # Extrusion depth out of the design plane (inches)


class Truss(BaseModel):
    """A component design: a named set of members."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    members: list[Member] = []


class LayoutMember(BaseModel):
    """A member's extruded outline positioned in the building layout."""
    name: str
    vertices: list[Point3D]   # Bottom face then top face, outline order


class DesignMember(BaseModel):
    """A member's outline in design coordinates, for reporting."""
    name: str
    vertices: list[Point2D]


class TrussGeometry(BaseModel):
    """All members of one truss in design space."""
    truss_id: str
    truss_name: str
    members: list[DesignMember]


class EnvelopeGeometry(BaseModel):
    """All members of the truss placed in one truss envelope."""
    envelope_name: str
    truss_id: str
    truss_name: str
    members: list[LayoutMember]
