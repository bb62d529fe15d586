"""Jack trusses filling the hip ends of the roof.

End jacks run east-west from the eaves to the girders, king jacks run
along the hip lines from each outside corner to the girder ends, and
corner jacks fill the triangles either side of the king jacks, ending
in a double bevel against the hip.
"""

from __future__ import annotations
import math

from trusslayout.rules.base import LayoutRule
from trusslayout.rules.truss.envelopes import truss_envelope, stepped_offsets
from trusslayout.models import (
    LayoutContext, TrussEnvelope, Justification, EnvelopeKind,
    BevelCut, BevelCutType, Point2D,
)


class EndJackRule(LayoutRule):
    """End jacks on both hip ends."""

    priority = 50
    dependencies = ["truss.girders"]

    def get_id(self) -> str:
        return "truss.end_jacks"

    def get_name(self) -> str:
        return "End Jacks"

    def applies(self, context: LayoutContext) -> bool:
        return context.config.roof_style == "hip"

    def generate(self, context: LayoutContext) -> None:
        p = context.params
        g = p.girder_offset
        west_eave = -p.overhang
        east_eave = p.building_length + p.overhang
        east_girder = p.building_length - g

        offsets = stepped_offsets(g + p.truss_spacing, p.truss_spacing,
                                  p.span - g - p.truss_spacing, inclusive=True)

        def jack(left_x: float, right_x: float, y: float, justification: Justification) -> TrussEnvelope:
            return truss_envelope(
                context,
                Point2D(x=left_x, y=y), Point2D(x=right_x, y=y),
                justification, EnvelopeKind.END_JACK, self.get_id(),
            )

        envelopes = [
            jack(west_eave, g, g, Justification.FRONT),
            jack(west_eave, g, p.span - g, Justification.BACK),
        ]
        envelopes.extend(jack(west_eave, g, y, Justification.BACK) for y in offsets)
        envelopes.append(jack(east_girder, east_eave, g, Justification.FRONT))
        envelopes.append(jack(east_girder, east_eave, p.span - g, Justification.BACK))
        envelopes.extend(jack(east_girder, east_eave, y, Justification.BACK) for y in offsets)

        context.add_truss_envelopes(envelopes)


class KingJackRule(LayoutRule):
    """Diagonal jacks under each hip, from the eave corner to the girder end."""

    priority = 60
    dependencies = ["truss.girders"]

    def get_id(self) -> str:
        return "truss.king_jacks"

    def get_name(self) -> str:
        return "King Jacks"

    def applies(self, context: LayoutContext) -> bool:
        return context.config.roof_style == "hip"

    def generate(self, context: LayoutContext) -> None:
        p = context.params
        g = p.girder_offset
        o = p.overhang
        length = p.building_length
        span = p.span
        # Half the truss thickness, measured along each axis of a 45 degree line
        inset = p.truss_thickness / math.sqrt(2) / 2

        corners = [
            (Point2D(x=-o + inset, y=-o + inset), Point2D(x=g, y=g)),
            (Point2D(x=-o + inset, y=span + o - inset), Point2D(x=g, y=span - g)),
            (Point2D(x=length + o - inset, y=-o + inset), Point2D(x=length - g, y=g)),
            (Point2D(x=length + o - inset, y=span + o - inset), Point2D(x=length - g, y=span - g)),
        ]

        context.add_truss_envelopes([
            truss_envelope(
                context, left, right,
                Justification.CENTER, EnvelopeKind.KING_JACK, self.get_id(),
            )
            for left, right in corners
        ])


class CornerJackRule(LayoutRule):
    """Short jacks either side of each king jack, bevelled against the hip."""

    priority = 70
    dependencies = ["truss.king_jacks"]

    def get_id(self) -> str:
        return "truss.corner_jacks"

    def get_name(self) -> str:
        return "Corner Jacks"

    def applies(self, context: LayoutContext) -> bool:
        return context.config.roof_style == "hip"

    def generate(self, context: LayoutContext) -> None:
        p = context.params
        g = p.girder_offset
        o = p.overhang
        length = p.building_length
        span = p.span
        half = p.truss_thickness / 2
        # Stop short of the king jack's side face
        shorten = half * math.sqrt(2) - half
        bevel = BevelCut(type=BevelCutType.DOUBLE, angle=p.corner_jack_bevel_angle)

        steps = stepped_offsets(p.truss_spacing, p.truss_spacing, g - p.truss_spacing)

        front, back = Justification.FRONT, Justification.BACK
        corners = [
            # South-west: horizontal, then vertical
            (lambda d: (Point2D(x=-o, y=g - d), Point2D(x=g - d - shorten, y=g - d)), front),
            (lambda d: (Point2D(x=g - d, y=-o), Point2D(x=g - d, y=g - d - shorten)), back),
            # North-west
            (lambda d: (Point2D(x=-o, y=span - g + d), Point2D(x=g - d - shorten, y=span - g + d)), back),
            (lambda d: (Point2D(x=g - d, y=span + o), Point2D(x=g - d, y=span - g + d + shorten)), front),
            # South-east
            (lambda d: (Point2D(x=length + o, y=g - d),
                        Point2D(x=length - g + d + shorten, y=g - d)), back),
            (lambda d: (Point2D(x=length - g + d, y=-o),
                        Point2D(x=length - g + d, y=g - d - shorten)), front),
            # North-east
            (lambda d: (Point2D(x=length + o, y=span - g + d),
                        Point2D(x=length - g + d + shorten, y=span - g + d)), front),
            (lambda d: (Point2D(x=length - g + d, y=span + o),
                        Point2D(x=length - g + d, y=span - g + d + shorten)), back),
        ]

        envelopes: list[TrussEnvelope] = []
        for endpoints, justification in corners:
            for d in steps:
                left, right = endpoints(d)
                envelopes.append(truss_envelope(
                    context, left, right,
                    justification, EnvelopeKind.CORNER_JACK, self.get_id(),
                    right_bevel_cut=bevel,
                ))

        context.add_truss_envelopes(envelopes)
