"""Tests for layout rules, registry ordering and the generator."""
import math

import pytest
from pydantic import ValidationError

from trusslayout.core.generator import LayoutGenerator
from trusslayout.core.registry import RuleRegistry, create_default_registry
from trusslayout.core.roof import heel_height, radians_to_degrees, slope_to_radians
from trusslayout.models import (
    BevelCutType,
    GenerationConfig,
    Justification,
    LayoutContext,
    LayoutParams,
    Point2D,
)
from trusslayout.rules.base import LayoutRule
from trusslayout.rules.truss.envelopes import stepped_offsets
from trusslayout.services.layout_service import LayoutService


def kinds(plan, kind):
    return [t for t in plan.truss_envelopes if t.tags["kind"] == kind]


class TestRoofHelpers:

    def test_four_in_twelve(self):
        slope = slope_to_radians(4)
        assert radians_to_degrees(slope) == pytest.approx(18.4349488)

    def test_heel_height(self):
        slope = slope_to_radians(4)
        assert heel_height(slope, 0.25, 3.5) == pytest.approx(0.25 + 3.5 / math.cos(slope))


class TestSteppedOffsets:

    def test_exclusive_stop(self):
        assert stepped_offsets(108, 24, 636)[-1] == 624

    def test_inclusive_stop(self):
        assert stepped_offsets(108, 24, 180, inclusive=True) == [108, 132, 156, 180]

    def test_empty_when_start_past_stop(self):
        assert stepped_offsets(10, 5, 9) == []


class TestLayoutParams:

    def test_defaults_in_inches(self):
        params = LayoutParams()
        assert params.building_length == 720
        assert params.span == 288
        assert params.wall_height == 96

    def test_girder_offset_must_exceed_spacing(self):
        with pytest.raises(ValidationError):
            LayoutParams(girder_offset=24, truss_spacing=24)

    def test_girder_offset_must_fit_span(self):
        with pytest.raises(ValidationError):
            LayoutParams(span=120, girder_offset=84)

    def test_girder_offset_must_fit_building_length(self):
        with pytest.raises(ValidationError):
            LayoutParams(building_length=160, girder_offset=84)

    def test_positive_dimensions(self):
        with pytest.raises(ValidationError):
            LayoutParams(truss_thickness=0)


class TestBearingAndRoof:

    def test_perimeter_walls(self, default_plan):
        names = [b.name for b in default_plan.bearing_envelopes]
        assert names == ["South", "East", "North", "West"]
        south = default_plan.bearing_envelopes[0]
        assert south.left_point == Point2D(x=0, y=0)
        assert south.right_point == Point2D(x=720, y=0)
        assert south.top == 96
        assert south.thickness == 3.5
        assert south.justification == Justification.FRONT

    def test_walls_close_the_loop(self, default_plan):
        walls = default_plan.bearing_envelopes
        for a, b in zip(walls, walls[1:] + walls[:1]):
            assert a.right_point == b.left_point

    def test_roof_planes(self, default_plan):
        planes = default_plan.roof_planes
        assert [len(p.cuts) for p in planes] == [3, 2, 3, 2]
        assert [c.cutting_plane_id for c in planes[0].cuts] == ["roof.west", "roof.north", "roof.east"]
        assert planes[0].bearing_envelope_id == "bearing.south"
        assert planes[0].slope == pytest.approx(18.4349488)
        assert planes[0].overhang == 24


class TestTrussEnvelopes:

    def test_counts(self, default_plan):
        stats = default_plan.stats
        assert stats.girders == 2
        assert stats.commons == 22
        assert stats.end_jacks == 12
        assert stats.king_jacks == 4
        assert stats.corner_jacks == 16
        assert stats.truss_envelopes == 56

    def test_sequential_names(self, default_plan):
        names = [t.name for t in default_plan.truss_envelopes]
        assert names == [str(i) for i in range(1, 57)]

    def test_all_on_top_of_walls(self, default_plan):
        assert all(t.elevation == 96 for t in default_plan.truss_envelopes)
        assert all(t.thickness == 1.5 for t in default_plan.truss_envelopes)

    def test_girders(self, default_plan):
        west, east = kinds(default_plan, "girder")
        assert west.left_point == Point2D(x=84, y=-24)
        assert west.right_point == Point2D(x=84, y=312)
        assert west.justification == Justification.BACK
        assert east.left_point == Point2D(x=636, y=-24)
        assert east.justification == Justification.FRONT

    def test_commons_between_girders(self, default_plan):
        xs = [t.left_point.x for t in kinds(default_plan, "common")]
        assert xs[0] == 108
        assert xs[-1] == 624
        assert default_plan.truss_envelopes[2].name == "3"
        assert default_plan.truss_envelopes[2].left_point.x == 108

    def test_end_jacks(self, default_plan):
        jacks = kinds(default_plan, "end_jack")
        first = jacks[0]
        assert first.name == "25"
        assert first.left_point == Point2D(x=-24, y=84)
        assert first.right_point == Point2D(x=84, y=84)
        assert first.justification == Justification.FRONT
        assert [j.left_point.y for j in jacks[2:6]] == [108, 132, 156, 180]
        east = jacks[6]
        assert east.left_point == Point2D(x=636, y=84)
        assert east.right_point == Point2D(x=744, y=84)

    def test_king_jacks(self, default_plan):
        inset = 1.5 / math.sqrt(2) / 2
        sw = kinds(default_plan, "king_jack")[0]
        assert sw.left_point.x == pytest.approx(-24 + inset)
        assert sw.left_point.y == pytest.approx(-24 + inset)
        assert sw.right_point == Point2D(x=84, y=84)
        assert sw.justification == Justification.CENTER

    def test_corner_jacks(self, default_plan):
        shorten = 0.75 * math.sqrt(2) - 0.75
        jacks = kinds(default_plan, "corner_jack")
        first = jacks[0]
        assert first.left_point == Point2D(x=-24, y=60)
        assert first.right_point.x == pytest.approx(60 - shorten)
        assert first.right_point.y == 60
        assert first.justification == Justification.FRONT
        assert jacks[1].left_point == Point2D(x=-24, y=36)
        for jack in jacks:
            assert jack.right_bevel_cut.type == BevelCutType.DOUBLE
            assert jack.right_bevel_cut.angle == 45
            assert jack.left_bevel_cut is None

    def test_corner_jack_rows_stop_short_of_girder(self):
        plan = LayoutService().generate(LayoutParams(girder_offset=120))
        assert plan.stats.corner_jacks == 8 * 3

    def test_no_placement_is_degenerate(self, default_plan):
        assert not any(t.placement().is_degenerate for t in default_plan.truss_envelopes)


class TestRegistry:

    def test_default_order(self):
        registry = create_default_registry()
        context = LayoutContext(params=LayoutParams())
        ids = [r.get_id() for r in registry.get_applicable_rules(context)]
        assert ids == [
            "bearing.perimeter",
            "roof.hip",
            "truss.girders",
            "truss.commons",
            "truss.end_jacks",
            "truss.king_jacks",
            "truss.corner_jacks",
        ]

    def test_dependencies_run_first(self):
        calls = []

        class First(LayoutRule):
            priority = 90

            def get_id(self):
                return "first"

            def get_name(self):
                return "First"

            def applies(self, context):
                return True

            def generate(self, context):
                calls.append("first")

        class Second(First):
            priority = 1
            dependencies = ["first"]

            def get_id(self):
                return "second"

            def generate(self, context):
                calls.append("second")

        registry = RuleRegistry()
        registry.register(Second())
        registry.register(First())
        LayoutGenerator(registry).generate(LayoutParams())
        assert calls == ["first", "second"]

    def test_disabled_rules(self):
        config = GenerationConfig(disabled_rules=["truss.corner_jacks"])
        plan = LayoutService().generate(LayoutParams(), config)
        assert plan.stats.truss_envelopes == 40
        assert plan.truss_envelopes[-1].name == "40"

    def test_enabled_rules(self):
        config = GenerationConfig(enabled_rules=["bearing.perimeter"])
        plan = LayoutService().generate(LayoutParams(), config)
        assert len(plan.bearing_envelopes) == 4
        assert plan.roof_planes == []
        assert plan.truss_envelopes == []

    def test_unknown_roof_style_places_walls_only(self):
        plan = LayoutService().generate(config=GenerationConfig(roof_style="gable"))
        assert len(plan.bearing_envelopes) == 4
        assert plan.stats.roof_planes == 0
        assert plan.stats.truss_envelopes == 0

    def test_unregister(self):
        service = LayoutService()
        service.registry.unregister("roof.hip")
        assert "roof.hip" not in [r["id"] for r in service.list_rules()]

    def test_rules_depending_on_disabled_rule_are_dropped(self):
        config = GenerationConfig(disabled_rules=["truss.girders"])
        context = LayoutContext(params=LayoutParams(), config=config)
        ids = [r.get_id() for r in create_default_registry().get_applicable_rules(context)]
        assert ids == ["bearing.perimeter", "roof.hip"]

        plan = LayoutService().generate(LayoutParams(), config)
        assert len(plan.bearing_envelopes) == 4
        assert len(plan.roof_planes) == 4
        assert plan.truss_envelopes == []

    def test_dropped_rule_is_logged(self, caplog):
        config = GenerationConfig(disabled_rules=["truss.girders"])
        context = LayoutContext(params=LayoutParams(), config=config)
        with caplog.at_level("WARNING", logger="trusslayout.core.registry"):
            create_default_registry().get_applicable_rules(context)
        messages = [r.getMessage() for r in caplog.records]
        assert "Skipping rule truss.commons: dependencies not active: truss.girders" in messages
        assert "Skipping rule truss.corner_jacks: dependencies not active: truss.king_jacks" in messages
