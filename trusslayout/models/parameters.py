"""Layout generation parameters and configuration."""

from __future__ import annotations
from pydantic import BaseModel, Field, model_validator


FEET = 12.0  # All lengths are inches


class LayoutParams(BaseModel):
    """User-adjustable parameters for layout generation."""
    building_length: float = Field(60 * FEET, gt=0)  # West to east (X)
    span: float = Field(24 * FEET, gt=0)             # South to north (Y)
    overhang: float = Field(2 * FEET, ge=0)
    wall_thickness: float = Field(3.5, gt=0)         # 2x4 bearing walls
    wall_height: float = Field(8 * FEET, gt=0)       # Top of bearing = truss elevation
    truss_thickness: float = Field(1.5, gt=0)
    truss_spacing: float = Field(2 * FEET, gt=0)     # Center-to-center
    girder_offset: float = Field(7 * FEET, gt=0)     # Hip girder distance from end walls
    roof_slope: float = Field(4.0, gt=0)             # Rise per 12 of run
    butt_cut: float = Field(0.25, ge=0)
    top_chord_width: float = Field(3.5, gt=0)
    corner_jack_bevel_angle: float = Field(45.0, gt=0, lt=90)

    @model_validator(mode="after")
    def _check_girder_offset(self) -> LayoutParams:
        if self.girder_offset <= self.truss_spacing:
            raise ValueError("girder_offset must exceed truss_spacing")
        if self.girder_offset >= min(self.building_length, self.span) / 2:
            raise ValueError("girder_offset must be less than half the span and building length")
        return self


class GenerationConfig(BaseModel):
    """Controls which rules are applied."""
    roof_style: str = "hip"              # hip (only style with framing rules so far)
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
