"""Plain-text coordinate formatting for logging member geometry."""

from __future__ import annotations

from trusslayout.models import (
    Point2D, Point3D, DesignMember, LayoutMember, TrussGeometry, EnvelopeGeometry,
)


def format_point(point: Point2D | Point3D) -> str:
    if isinstance(point, Point3D):
        return f"({point.x}, {point.y}, {point.z})"
    return f"({point.x}, {point.y})"


def format_member(member: DesignMember | LayoutMember) -> str:
    """One line: ``<name>: (x, y), (x, y), ...``."""
    coords = ", ".join(format_point(v) for v in member.vertices)
    return f"{member.name}: {coords}"


def format_truss(geometry: TrussGeometry) -> list[str]:
    lines = [f"Member geometries for Truss {geometry.truss_name} in Design space:"]
    lines.extend(format_member(m) for m in geometry.members)
    return lines


def format_envelope(geometry: EnvelopeGeometry) -> list[str]:
    lines = [
        f"Member geometries for Truss Envelope {geometry.envelope_name} in Layout space:"
    ]
    lines.extend(format_member(m) for m in geometry.members)
    return lines
