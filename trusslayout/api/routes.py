"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from trusslayout.core.errors import LayoutError
from trusslayout.services.layout_service import LayoutService
from trusslayout.services.visualization_service import VisualizationService, place_member
from trusslayout.api.schemas import (
    LayoutRequest, LayoutResponse, TransformRequest, TransformResponse,
    VisualizeRequest, VisualizeResponse, RuleInfo,
)

router = APIRouter()

# Shared service instances
_layout_service = LayoutService()
_visualization_service = VisualizationService()


@router.post("/layout", response_model=LayoutResponse)
async def generate_layout(request: LayoutRequest) -> LayoutResponse:
    """Generate bearing walls, roof planes and truss envelopes."""
    plan = _layout_service.generate(request.params, request.config)

    return LayoutResponse(
        plan=plan,
        rule_count=len(_layout_service.list_rules()),
    )


@router.post("/members/transform", response_model=TransformResponse)
async def transform_member(request: TransformRequest) -> TransformResponse:
    """Place one member's extruded outline in layout space."""
    try:
        return place_member(request.member, request.placement)
    except LayoutError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.post("/visualize", response_model=VisualizeResponse)
async def visualize(request: VisualizeRequest) -> VisualizeResponse:
    """Member geometry of every truss, in design and layout coordinates."""
    try:
        layout = _visualization_service.layout_space(request.trusses, request.truss_envelopes)
    except LayoutError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return VisualizeResponse(
        design=_visualization_service.design_space(request.trusses),
        layout=layout,
    )


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all available layout rules."""
    return [RuleInfo(**r) for r in _layout_service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
