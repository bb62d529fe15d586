"""Abstract base class for all layout rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each places a specific kind of layout element
- Composable: multiple rules run in sequence via the registry
- Conditional: each rule decides if it applies to the current context
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from trusslayout.models.context import LayoutContext


class LayoutRule(ABC):
    """
    Base class for all layout rules.

    Subclasses implement `applies()` and `generate()`.
    The generator queries the registry, filters by `applies()`,
    sorts by `priority`, and calls `generate()` in order. `generate()`
    adds its elements to the context directly, since rules produce
    different kinds of elements.
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    # IDs of rules that must run before this one.
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'bearing.perimeter')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Perimeter Bearing Walls')."""
        ...

    @abstractmethod
    def applies(self, context: LayoutContext) -> bool:
        """Return True if this rule should run for the given context."""
        ...

    @abstractmethod
    def generate(self, context: LayoutContext) -> None:
        """
        Add layout elements to the context.

        The context provides params and everything earlier rules
        have placed (roof planes need bearing envelopes).
        """
        ...
