"""
Tests for the selection rule table.

Validates:
- RuleSet construction rejects malformed tables
- Priority ordering and table-order tie breaking
- Predicate evaluation (intents, surfaces, data kinds, widget tags, guards)
- Consistency of the default table
"""
import pytest

from widgetpilot.engine.rules import (
    PANELS,
    SELECTION_RULES,
    Rendering,
    RuleSet,
    SelectionRule,
    default_rules,
)
from widgetpilot.exceptions import DuplicateRuleError, RuleDefinitionError
from widgetpilot.models import DataKind, Intent, Surface, WidgetType, build_data_context

from tests.helpers import make_supplier


def render_nothing(context, surface):
    return Rendering(props={})


def make_rule(id="rule", priority=100, component="StatCard", surfaces=frozenset({Surface.INLINE}), **kwargs):
    return SelectionRule(
        id=id,
        priority=priority,
        component=component,
        surfaces=surfaces,
        build=render_nothing,
        **kwargs,
    )


# =============================================================================
# RuleSet Construction
# =============================================================================

class TestRuleSetConstruction:
    """Tests for rule table validation."""

    def test_duplicate_ids_rejected(self):
        with pytest.raises(DuplicateRuleError) as exc_info:
            RuleSet([make_rule(id="a"), make_rule(id="a")])

        assert exc_info.value.details["rule_id"] == "a"
        assert exc_info.value.code == "WP_DUPLICATE_RULE"

    def test_rule_without_surfaces_rejected(self):
        with pytest.raises(RuleDefinitionError):
            RuleSet([make_rule(surfaces=frozenset())])

    def test_lookup_by_id(self):
        rules = RuleSet([make_rule(id="a"), make_rule(id="b")])

        assert len(rules) == 2
        assert rules.get("b").id == "b"
        assert rules.get("missing") is None


# =============================================================================
# Ordering
# =============================================================================

class TestRuleOrdering:
    """Tests for winner-take-all ordering."""

    def test_higher_priority_first(self):
        rules = RuleSet([
            make_rule(id="low", priority=50),
            make_rule(id="high", priority=100),
        ])
        context = build_data_context(Intent.GENERAL)

        matching = rules.matching(context, Surface.INLINE)

        assert [r.id for r in matching] == ["high", "low"]

    def test_ties_keep_table_order(self):
        rules = RuleSet([
            make_rule(id="first"),
            make_rule(id="second"),
            make_rule(id="third"),
        ])
        context = build_data_context(Intent.GENERAL)

        matching = rules.matching(context, Surface.INLINE)

        assert [r.id for r in matching] == ["first", "second", "third"]


# =============================================================================
# Predicates
# =============================================================================

class TestRulePredicates:
    """Tests for rule eligibility."""

    def test_intent_filter(self):
        rule = make_rule(intents=frozenset({Intent.COMPARISON.value}))

        assert rule.matches(build_data_context(Intent.COMPARISON), Surface.INLINE)
        assert not rule.matches(build_data_context(Intent.GENERAL), Surface.INLINE)

    def test_empty_intents_match_any_label(self):
        rule = make_rule()

        assert rule.matches(build_data_context("weather_forecast"), Surface.INLINE)

    def test_surface_filter(self):
        rule = make_rule(surfaces=PANELS)
        context = build_data_context(Intent.GENERAL)

        assert rule.matches(context, Surface.PANEL_EXPANDED)
        assert not rule.matches(context, Surface.INLINE)

    def test_required_data(self):
        rule = make_rule(requires=frozenset({DataKind.SUPPLIERS}))

        assert not rule.matches(build_data_context(Intent.GENERAL), Surface.INLINE)
        assert rule.matches(build_data_context(Intent.GENERAL, suppliers=[make_supplier()]), Surface.INLINE)

    def test_widget_type_filter(self):
        rule = make_rule(widget_types=frozenset({WidgetType.PRICE_GAUGE}))
        gauge = build_data_context(Intent.GENERAL, widget={"type": "price_gauge", "data": {}})
        other = build_data_context(Intent.GENERAL, widget={"type": "stat_card", "data": {}})
        unknown = build_data_context(Intent.GENERAL, widget={"type": "hologram", "data": {}})

        assert rule.matches(gauge, Surface.INLINE)
        assert not rule.matches(other, Surface.INLINE)
        assert not rule.matches(unknown, Surface.INLINE)

    def test_guard(self):
        rule = make_rule(guard=lambda context, surface: context.supplier_count >= 2)
        one = build_data_context(Intent.GENERAL, suppliers=[make_supplier()])
        two = build_data_context(Intent.GENERAL, suppliers=[make_supplier(), make_supplier(id="SUP-2")])

        assert not rule.matches(one, Surface.INLINE)
        assert rule.matches(two, Surface.INLINE)

    def test_configure_carries_identity(self):
        rule = make_rule(id="stat", expands_to="StatArtifact")

        config = rule.configure(build_data_context(Intent.GENERAL), Surface.INLINE)

        assert config.component == "StatCard"
        assert config.rule_id == "stat"
        assert config.expands_to == "StatArtifact"


# =============================================================================
# Default Table
# =============================================================================

class TestDefaultRules:
    """Consistency checks on the default selection table."""

    def test_ids_unique(self):
        ids = [r.id for r in default_rules()]

        assert len(ids) == len(set(ids))

    def test_every_expansion_target_has_a_panel_rule(self):
        """Each expands_to target is selectable on a panel surface."""
        panel_components = SELECTION_RULES.components_for(Surface.PANEL) | SELECTION_RULES.components_for(
            Surface.PANEL_EXPANDED
        )

        for rule in SELECTION_RULES:
            if rule.expands_to:
                assert rule.expands_to in panel_components, rule.id

    def test_panel_rules_do_not_expand_further(self):
        for rule in SELECTION_RULES:
            if rule.surfaces <= PANELS and rule.component.endswith("Artifact"):
                assert rule.expands_to is None, rule.id

    def test_to_dict(self):
        summary = SELECTION_RULES.get("portfolio_distribution_chat").to_dict()

        assert summary["component"] == "RiskDistributionWidget"
        assert summary["surfaces"] == ["inline"]
        assert summary["requires"] == ["portfolio"]
        assert summary["expands_to"] == "PortfolioDashboardArtifact"
