"""Hip girders and the common trusses between them.

Both run south to north across the full span plus overhangs, at fixed
X positions along the building length.
"""

from __future__ import annotations

from trusslayout.rules.base import LayoutRule
from trusslayout.rules.truss.envelopes import truss_envelope, stepped_offsets
from trusslayout.models import (
    LayoutContext, Justification, EnvelopeKind, Point2D,
)


class GirderTrussRule(LayoutRule):
    """Hip girders at the girder offset from each end wall."""

    priority = 30

    def get_id(self) -> str:
        return "truss.girders"

    def get_name(self) -> str:
        return "Hip Girders"

    def applies(self, context: LayoutContext) -> bool:
        return context.config.roof_style == "hip"

    def generate(self, context: LayoutContext) -> None:
        params = context.params
        south = -params.overhang
        north = params.span + params.overhang
        west_x = params.girder_offset
        east_x = params.building_length - params.girder_offset

        context.add_truss_envelopes([
            truss_envelope(
                context,
                Point2D(x=west_x, y=south), Point2D(x=west_x, y=north),
                Justification.BACK, EnvelopeKind.GIRDER, self.get_id(),
            ),
            truss_envelope(
                context,
                Point2D(x=east_x, y=south), Point2D(x=east_x, y=north),
                Justification.FRONT, EnvelopeKind.GIRDER, self.get_id(),
            ),
        ])


class CommonTrussRule(LayoutRule):
    """Common trusses at regular spacing between the girders."""

    priority = 40
    dependencies = ["truss.girders"]

    def get_id(self) -> str:
        return "truss.commons"

    def get_name(self) -> str:
        return "Common Trusses"

    def applies(self, context: LayoutContext) -> bool:
        return context.config.roof_style == "hip"

    def generate(self, context: LayoutContext) -> None:
        params = context.params
        south = -params.overhang
        north = params.span + params.overhang

        offsets = stepped_offsets(
            params.girder_offset + params.truss_spacing,
            params.truss_spacing,
            params.building_length - params.girder_offset,
        )

        context.add_truss_envelopes([
            truss_envelope(
                context,
                Point2D(x=x, y=south), Point2D(x=x, y=north),
                Justification.BACK, EnvelopeKind.COMMON, self.get_id(),
            )
            for x in offsets
        ])
