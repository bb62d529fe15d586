"""Main layout generator — orchestrates rule execution."""

from __future__ import annotations
import logging

from trusslayout.models import (
    LayoutPlan, LayoutParams, GenerationConfig, LayoutContext,
)
from trusslayout.core.registry import RuleRegistry

logger = logging.getLogger(__name__)


class LayoutGenerator:
    """
    Stateless layout generator.

    Takes params, executes applicable rules, and returns a complete
    LayoutPlan.
    """

    def __init__(self, registry: RuleRegistry) -> None:
        self.registry = registry

    def generate(
        self,
        params: LayoutParams,
        config: GenerationConfig | None = None,
    ) -> LayoutPlan:
        if config is None:
            config = GenerationConfig()

        context = LayoutContext(params=params, config=config)

        rules = self.registry.get_applicable_rules(context)
        for rule in rules:
            before = len(context.truss_envelopes)
            rule.generate(context)
            logger.debug(
                "Rule %s added %d truss envelopes",
                rule.get_id(), len(context.truss_envelopes) - before,
            )

        plan = LayoutPlan(
            bearing_envelopes=context.bearing_envelopes,
            roof_planes=context.roof_planes,
            truss_envelopes=context.truss_envelopes,
        )
        logger.info(
            "Generated layout: %d bearing envelopes, %d roof planes, %d truss envelopes",
            plan.stats.bearing_envelopes, plan.stats.roof_planes, plan.stats.truss_envelopes,
        )
        return plan
