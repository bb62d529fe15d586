"""High-level layout planning service — facade for the API layer."""

from __future__ import annotations

from trusslayout.models import LayoutPlan, LayoutParams, GenerationConfig
from trusslayout.core.generator import LayoutGenerator
from trusslayout.core.registry import RuleRegistry, create_default_registry


class LayoutService:
    """Fills in defaults and delegates to the generator."""

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.generator = LayoutGenerator(self.registry)

    def generate(
        self,
        params: LayoutParams | None = None,
        config: GenerationConfig | None = None,
    ) -> LayoutPlan:
        if params is None:
            params = LayoutParams()
        if config is None:
            config = GenerationConfig()

        return self.generator.generate(params, config)

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]
