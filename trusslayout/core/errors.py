"""Exceptions raised by the layout planner."""

from __future__ import annotations


class LayoutError(Exception):
    """Base exception for layout errors."""
    pass


class DegeneratePlacementError(LayoutError):
    """Placement line has zero length, so its bearing is undefined."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Placement '{name}' has coincident left and right points")
        self.name = name


class UnknownTrussError(LayoutError):
    """A truss envelope references a component design that was not supplied."""

    def __init__(self, envelope_name: str, design_id: str) -> None:
        super().__init__(
            f"Truss envelope '{envelope_name}' references unknown design '{design_id}'"
        )
        self.envelope_name = envelope_name
        self.design_id = design_id
