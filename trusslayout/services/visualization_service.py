"""Truss member geometry in design space and in layout space."""

from __future__ import annotations
import logging

from trusslayout.models import (
    Member, Truss, TrussEnvelope, Placement,
    LayoutMember, DesignMember, TrussGeometry, EnvelopeGeometry,
)
from trusslayout.core.errors import DegeneratePlacementError, UnknownTrussError
from trusslayout.core.report import format_truss, format_envelope
from trusslayout.core.transform import member_vertices_in_layout_space

logger = logging.getLogger(__name__)


def place_member(member: Member, placement: Placement, name: str = "") -> LayoutMember:
    """Position one member, rejecting placements with no direction."""
    if placement.is_degenerate:
        raise DegeneratePlacementError(name or member.name)
    vertices = member_vertices_in_layout_space(member.geometry, member.thickness, placement)
    return LayoutMember(name=member.name, vertices=vertices)


class VisualizationService:
    """Resolves truss envelopes to their designs and places every member."""

    def design_space(self, trusses: list[Truss]) -> list[TrussGeometry]:
        results: list[TrussGeometry] = []
        for truss in trusses:
            geometry = TrussGeometry(
                truss_id=truss.id,
                truss_name=truss.name,
                members=[DesignMember(name=m.name, vertices=list(m.geometry)) for m in truss.members],
            )
            for line in format_truss(geometry):
                logger.debug("%s", line)
            results.append(geometry)
        return results

    def layout_space(
        self,
        trusses: list[Truss],
        truss_envelopes: list[TrussEnvelope],
    ) -> list[EnvelopeGeometry]:
        by_id = {t.id: t for t in trusses}
        results: list[EnvelopeGeometry] = []

        for envelope in truss_envelopes:
            design_id = envelope.component_design_id
            if design_id is None:
                logger.debug("Truss envelope %s has no design, skipping", envelope.name)
                continue

            truss = by_id.get(design_id)
            if truss is None:
                raise UnknownTrussError(envelope.name, design_id)

            placement = envelope.placement()
            if placement.is_degenerate:
                raise DegeneratePlacementError(envelope.name)

            geometry = EnvelopeGeometry(
                envelope_name=envelope.name,
                truss_id=truss.id,
                truss_name=truss.name,
                members=[place_member(m, placement, envelope.name) for m in truss.members],
            )
            for line in format_envelope(geometry):
                logger.debug("%s", line)
            results.append(geometry)

        logger.info(
            "Placed %d of %d truss envelopes in layout space",
            len(results), len(truss_envelopes),
        )
        return results
