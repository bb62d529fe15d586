"""Hip roof — one roof plane per bearing wall, trimmed at the hips."""

from __future__ import annotations

from trusslayout.rules.base import LayoutRule
from trusslayout.models import LayoutContext, RoofPlane, PlaneCut, PlaneCutType
from trusslayout.core.roof import slope_to_radians, radians_to_degrees, heel_height


# Each plane is cut against the planes it meets at a hip or ridge.
HIP_CUTS: dict[str, list[str]] = {
    "south": ["west", "north", "east"],
    "west": ["north", "south"],
    "north": ["east", "south", "west"],
    "east": ["south", "north"],
}


class HipRoofPlanesRule(LayoutRule):
    """Roof planes springing from every perimeter bearing wall."""

    priority = 20
    dependencies = ["bearing.perimeter"]

    def get_id(self) -> str:
        return "roof.hip"

    def get_name(self) -> str:
        return "Hip Roof Planes"

    def applies(self, context: LayoutContext) -> bool:
        # Checked before any rule runs, so bearing envelopes are not there yet
        return context.config.roof_style == "hip"

    def generate(self, context: LayoutContext) -> None:
        params = context.params
        slope = slope_to_radians(params.roof_slope)
        heel = heel_height(slope, params.butt_cut, params.top_chord_width)

        planes: list[RoofPlane] = []
        for bearing in context.bearing_envelopes:
            side = bearing.name.lower()
            cuts = [
                PlaneCut(type=PlaneCutType.AGAINST_PLANE, cutting_plane_id=f"roof.{other}")
                for other in HIP_CUTS.get(side, [])
            ]
            planes.append(RoofPlane(
                id=f"roof.{side}",
                bearing_envelope_id=bearing.id,
                slope=radians_to_degrees(slope),
                heel_height=heel,
                overhang=params.overhang,
                cuts=cuts,
            ))

        context.add_roof_planes(planes)
