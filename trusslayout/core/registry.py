"""Rule registry — discovers, stores, and resolves layout rules."""

from __future__ import annotations
import logging

from trusslayout.models.context import LayoutContext
from trusslayout.rules.base import LayoutRule


logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Central registry for all layout rules.

    Rules are registered at startup. During generation, the registry
    returns the applicable rules sorted by priority with dependencies
    resolved.
    """

    def __init__(self) -> None:
        self._rules: dict[str, LayoutRule] = {}

    def register(self, rule: LayoutRule) -> None:
        """Register a layout rule."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        """Remove a rule from the registry."""
        self._rules.pop(rule_id, None)

    def list_rules(self) -> list[LayoutRule]:
        """Return all registered rules."""
        return list(self._rules.values())

    def get_applicable_rules(self, context: LayoutContext) -> list[LayoutRule]:
        """
        Return rules that apply to the given context, sorted by priority.

        Respects GenerationConfig.enabled_rules and disabled_rules.
        """
        config = context.config
        candidates = list(self._rules.values())

        if config.enabled_rules:
            candidates = [r for r in candidates if r.get_id() in config.enabled_rules]

        if config.disabled_rules:
            candidates = [r for r in candidates if r.get_id() not in config.disabled_rules]

        applicable = [r for r in candidates if r.applies(context)]

        # Sort by priority (lower first), then resolve dependencies
        applicable.sort(key=lambda r: r.priority)
        return self._resolve_order(applicable)

    def _resolve_order(self, rules: list[LayoutRule]) -> list[LayoutRule]:
        """
        Topological sort respecting dependencies.

        A rule whose dependency is not among ``rules`` (disabled, not
        enabled or not applicable) is dropped, and so is anything that
        depends on it.
        """
        rule_map = {r.get_id(): r for r in rules}
        resolved: dict[str, bool] = {}
        ordered: list[LayoutRule] = []

        def visit(rule_id: str) -> bool:
            if rule_id in resolved:
                return resolved[rule_id]
            rule = rule_map.get(rule_id)
            if rule is None:
                return False
            resolved[rule_id] = True  # Cycles resolve as satisfied
            missing = [dep_id for dep_id in rule.dependencies if not visit(dep_id)]
            if missing:
                resolved[rule_id] = False
                logger.warning(
                    "Skipping rule %s: dependencies not active: %s",
                    rule_id, ", ".join(missing),
                )
                return False
            ordered.append(rule)
            return True

        for r in rules:
            visit(r.get_id())

        return ordered


def create_default_registry() -> RuleRegistry:
    """Create a registry with all standard hip-roof layout rules."""
    from trusslayout.rules.bearing.perimeter import PerimeterBearingRule
    from trusslayout.rules.roof.hip_roof import HipRoofPlanesRule
    from trusslayout.rules.truss.hip_set import GirderTrussRule, CommonTrussRule
    from trusslayout.rules.truss.jacks import (
        EndJackRule, KingJackRule, CornerJackRule,
    )

    registry = RuleRegistry()
    registry.register(PerimeterBearingRule())
    registry.register(HipRoofPlanesRule())
    registry.register(GirderTrussRule())
    registry.register(CommonTrussRule())
    registry.register(EndJackRule())
    registry.register(KingJackRule())
    registry.register(CornerJackRule())
    return registry
