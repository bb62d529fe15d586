from .geometry import Point2D, Point3D, Vector2D, direction_from_points
from .layout import (
    Justification, BevelCutType, BevelCut, PlaneCutType, PlaneCut,
    RoofPlaneGeometryType, EnvelopeKind, Placement,
    BearingEnvelope, RoofPlane, TrussEnvelope, LayoutPlan, LayoutStats,
)
from .truss import (
    Member, Truss, LayoutMember, DesignMember, TrussGeometry, EnvelopeGeometry,
)
from .parameters import FEET, LayoutParams, GenerationConfig
from .context import LayoutContext

__all__ = [
    "Point2D", "Point3D", "Vector2D", "direction_from_points",
    "Justification", "BevelCutType", "BevelCut", "PlaneCutType", "PlaneCut",
    "RoofPlaneGeometryType", "EnvelopeKind", "Placement",
    "BearingEnvelope", "RoofPlane", "TrussEnvelope", "LayoutPlan", "LayoutStats",
    "Member", "Truss", "LayoutMember", "DesignMember", "TrussGeometry", "EnvelopeGeometry",
    "FEET", "LayoutParams", "GenerationConfig",
    "LayoutContext",
]
