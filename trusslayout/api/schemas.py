"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from trusslayout.models import (
    LayoutParams, GenerationConfig, LayoutPlan,
    Member, Truss, TrussEnvelope, Placement,
    LayoutMember, TrussGeometry, EnvelopeGeometry,
)


class LayoutRequest(BaseModel):
    """Request body for the /layout endpoint."""
    params: LayoutParams = LayoutParams()
    config: GenerationConfig = GenerationConfig()


class LayoutResponse(BaseModel):
    """Response from the /layout endpoint."""
    plan: LayoutPlan
    rule_count: int


class TransformRequest(BaseModel):
    """A single member and where to put it."""
    member: Member
    placement: Placement


class VisualizeRequest(BaseModel):
    """Truss designs plus the envelopes they were placed into."""
    trusses: list[Truss]
    truss_envelopes: list[TrussEnvelope] = []


class VisualizeResponse(BaseModel):
    design: list[TrussGeometry]
    layout: list[EnvelopeGeometry]


class RuleInfo(BaseModel):
    id: str
    name: str


TransformResponse = LayoutMember
