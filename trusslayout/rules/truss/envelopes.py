"""Shared helpers for rules that place truss envelopes."""

from __future__ import annotations

from trusslayout.models import (
    LayoutContext, TrussEnvelope, Justification, EnvelopeKind, BevelCut, Point2D,
)


def truss_envelope(
    context: LayoutContext,
    left: Point2D,
    right: Point2D,
    justification: Justification,
    kind: EnvelopeKind,
    rule_id: str,
    left_bevel_cut: BevelCut | None = None,
    right_bevel_cut: BevelCut | None = None,
) -> TrussEnvelope:
    """Build an unnamed envelope bearing on top of the walls."""
    params = context.params
    return TrussEnvelope(
        left_point=left,
        right_point=right,
        justification=justification,
        thickness=params.truss_thickness,
        elevation=params.wall_height,
        left_bevel_cut=left_bevel_cut,
        right_bevel_cut=right_bevel_cut,
        tags={"kind": kind.value, "rule": rule_id},
    )


def stepped_offsets(start: float, step: float, stop: float, inclusive: bool = False) -> list[float]:
    """Offsets start, start + step, ... up to stop."""
    offsets: list[float] = []
    i = 0
    while True:
        value = start + step * i
        if value > stop or (value == stop and not inclusive):
            break
        offsets.append(value)
        i += 1
    return offsets
