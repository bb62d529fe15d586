"""Layout context — accumulates state during layout generation."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .layout import BearingEnvelope, RoofPlane, TrussEnvelope
from .parameters import LayoutParams, GenerationConfig


class LayoutContext(BaseModel):
    """
    Holds all state during a single layout generation pass.

    Rules add bearing envelopes, roof planes and truss envelopes.
    Later rules read what earlier rules produced (roof planes need
    bearing envelopes). The generator orchestrates the flow.
    """
    # Input
    params: LayoutParams
    config: GenerationConfig = Field(default_factory=GenerationConfig)

    # Output (populated by rules)
    bearing_envelopes: list[BearingEnvelope] = []
    roof_planes: list[RoofPlane] = []
    truss_envelopes: list[TrussEnvelope] = []

    def add_bearing_envelopes(self, envelopes: list[BearingEnvelope]) -> None:
        self.bearing_envelopes.extend(envelopes)

    def add_roof_planes(self, planes: list[RoofPlane]) -> None:
        self.roof_planes.extend(planes)

    def add_truss_envelopes(self, envelopes: list[TrussEnvelope]) -> None:
        """Append envelopes, numbering them "1", "2", ... in order of arrival."""
        for envelope in envelopes:
            number = len(self.truss_envelopes) + 1
            self.truss_envelopes.append(envelope.model_copy(update={"name": str(number)}))
