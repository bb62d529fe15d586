"""Layout element models — bearing envelopes, roof planes, truss envelopes."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict

from .geometry import Point2D, direction_from_points


DEGENERATE_TOLERANCE = 1e-9  # Inches, absolute


class Justification(str, Enum):
    FRONT = "front"
    BACK = "back"
    CENTER = "center"


class BevelCutType(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"


class PlaneCutType(str, Enum):
    AGAINST_PLANE = "against_plane"


class RoofPlaneGeometryType(str, Enum):
    BEARING_ENVELOPE = "bearing_envelope"


class EnvelopeKind(str, Enum):
    GIRDER = "girder"
    COMMON = "common"
    END_JACK = "end_jack"
    KING_JACK = "king_jack"
    CORNER_JACK = "corner_jack"


class BevelCut(BaseModel):
    """End cut of a truss envelope, angle in degrees."""
    model_config = ConfigDict(frozen=True)

    type: BevelCutType
    angle: float


class PlaneCut(BaseModel):
    """Trims a roof plane against another roof plane (hips)."""
    model_config = ConfigDict(frozen=True)

    type: PlaneCutType = PlaneCutType.AGAINST_PLANE
    cutting_plane_id: str


class Placement(BaseModel):
    """
    Directed line on the floor plan plus a height.

    Defines where a member's local frame is anchored (left point,
    elevation) and which way its +X axis points (toward the right point).
    """
    model_config = ConfigDict(frozen=True)

    left_point: Point2D
    right_point: Point2D
    elevation: float = 0.0

    @property
    def is_degenerate(self) -> bool:
        """
        True when the line has no direction (left == right).

        Endpoints closer than DEGENERATE_TOLERANCE (an absolute 1e-9
        inches) count as coincident, so a line that short is rejected
        even though its bearing is technically defined.
        """
        return self.left_point.distance_to(self.right_point) < DEGENERATE_TOLERANCE

    @property
    def bearing(self) -> float:
        """Bearing of the line in radians. Undefined for degenerate lines."""
        return direction_from_points(self.left_point, self.right_point).bearing()


class BearingEnvelope(BaseModel):
    """A bearing wall segment defined by two floor-plan endpoints."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    left_point: Point2D
    right_point: Point2D
    thickness: float
    top: float
    bottom: float = 0.0
    justification: Justification = Justification.FRONT


class RoofPlane(BaseModel):
    """A roof plane springing from a bearing envelope."""
    model_config = ConfigDict(frozen=True)

    id: str
    bearing_envelope_id: str
    geometry_type: RoofPlaneGeometryType = RoofPlaneGeometryType.BEARING_ENVELOPE
    slope: float        # Degrees
    heel_height: float
    overhang: float
    cuts: list[PlaneCut] = []


class TrussEnvelope(BaseModel):
    """Zone on the floor plan reserved for a single truss."""
    model_config = ConfigDict(frozen=True)

    name: str = ""
    left_point: Point2D
    right_point: Point2D
    justification: Justification
    thickness: float
    elevation: float = 0.0
    left_bevel_cut: BevelCut | None = None
    right_bevel_cut: BevelCut | None = None
    component_design_id: str | None = None
    tags: dict[str, str] = {}  # Extensible metadata (kind, rule that created it)

    def placement(self) -> Placement:
        return Placement(
            left_point=self.left_point,
            right_point=self.right_point,
            elevation=self.elevation,
        )


class LayoutStats(BaseModel):
    """Summary statistics for a generated layout."""
    bearing_envelopes: int = 0
    roof_planes: int = 0
    truss_envelopes: int = 0
    girders: int = 0
    commons: int = 0
    end_jacks: int = 0
    king_jacks: int = 0
    corner_jacks: int = 0

    @classmethod
    def from_plan(
        cls,
        bearing_envelopes: list[BearingEnvelope],
        roof_planes: list[RoofPlane],
        truss_envelopes: list[TrussEnvelope],
    ) -> LayoutStats:
        def count(kind: EnvelopeKind) -> int:
            return sum(1 for t in truss_envelopes if t.tags.get("kind") == kind.value)

        return cls(
            bearing_envelopes=len(bearing_envelopes),
            roof_planes=len(roof_planes),
            truss_envelopes=len(truss_envelopes),
            girders=count(EnvelopeKind.GIRDER),
            commons=count(EnvelopeKind.COMMON),
            end_jacks=count(EnvelopeKind.END_JACK),
            king_jacks=count(EnvelopeKind.KING_JACK),
            corner_jacks=count(EnvelopeKind.CORNER_JACK),
        )


class LayoutPlan(BaseModel):
    """The complete generated layout."""
    bearing_envelopes: list[BearingEnvelope]
    roof_planes: list[RoofPlane]
    truss_envelopes: list[TrussEnvelope]
    stats: LayoutStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = LayoutStats.from_plan(
                self.bearing_envelopes, self.roof_planes, self.truss_envelopes,
            )
