"""
Tests for component selection and resolution.

Validates:
- Rule selection per intent and surface
- Widget type overrides
- Registry and placeholder fallbacks
- Determinism and debugging output
"""
import pytest

from widgetpilot.engine import ComponentSelector, resolve_component, select_component
from widgetpilot.engine.rules import Rendering, RuleSet, SelectionRule
from widgetpilot.exceptions import InvalidSurfaceError
from widgetpilot.models import Intent, SizeClass, Surface, build_data_context
from widgetpilot.models.registry import WidgetRegistry


# =============================================================================
# Rule Selection
# =============================================================================

class TestPortfolioSelection:
    """Tests for portfolio overview selection."""

    def test_inline_distribution(self, selector, portfolio):
        context = build_data_context(Intent.PORTFOLIO_OVERVIEW, portfolio=portfolio)

        config = selector.select(context, Surface.INLINE)

        assert config.component == "RiskDistributionWidget"
        assert config.size == SizeClass.MD
        assert config.rule_id == "portfolio_distribution_chat"
        assert config.expands_to == "PortfolioDashboardArtifact"
        assert config.props["data"]["distribution"]["unrated"]["percent"] == 50

    def test_compact(self, selector, portfolio):
        context = build_data_context(Intent.PORTFOLIO_OVERVIEW, portfolio=portfolio)

        config = selector.select(context, "chat_compact")

        assert config.component == "RiskDistributionChart"
        assert config.variant == "inline"
        assert config.props["compact"] is True

    def test_panel_sizes(self, selector, portfolio, risk_changes):
        context = build_data_context(Intent.PORTFOLIO_OVERVIEW, portfolio=portfolio, risk_changes=risk_changes)

        panel = selector.select(context, Surface.PANEL)
        expanded = selector.select(context, Surface.PANEL_EXPANDED)

        assert panel.component == "PortfolioDashboardArtifact"
        assert panel.size == SizeClass.LG
        assert expanded.size == SizeClass.FULL
        assert panel.props["topMovers"][0]["supplierId"] == "SUP-002"
        assert panel.props["alerts"][0]["severity"] == "critical"

    def test_no_portfolio_no_match(self, selector):
        context = build_data_context(Intent.PORTFOLIO_OVERVIEW)

        assert selector.select(context, Surface.INLINE) is None


class TestSupplierSelection:
    """Tests for supplier-focused intents."""

    def test_filtered_discovery_inline(self, selector, suppliers):
        context = build_data_context(Intent.FILTERED_DISCOVERY, suppliers=suppliers)

        config = selector.select(context, Surface.INLINE)

        assert config.component == "SupplierTableWidget"
        assert config.props["data"]["totalCount"] == 3
        assert config.expands_to == "SupplierTableArtifact"

    def test_filtered_discovery_compact(self, selector, suppliers):
        context = build_data_context(Intent.FILTERED_DISCOVERY, suppliers=suppliers)

        config = selector.select(context, Surface.INLINE_COMPACT)

        assert config.component == "SupplierMiniTable"
        assert config.variant == "compact"

    def test_filtered_discovery_panel_lists_categories(self, selector, suppliers):
        context = build_data_context(Intent.FILTERED_DISCOVERY, suppliers=suppliers)

        config = selector.select(context, Surface.PANEL)

        assert config.component == "SupplierTableArtifact"
        assert config.props["categories"] == ["Steel", "Aluminum"]

    def test_deep_dive_uses_focus_supplier(self, selector, suppliers):
        context = build_data_context(Intent.SUPPLIER_DEEP_DIVE, suppliers=suppliers, supplier=suppliers[1])

        config = selector.select(context, Surface.INLINE)

        assert config.component == "SupplierRiskCardWidget"
        assert config.props["data"]["supplierName"] == "Borealis Metals"

    def test_comparison_needs_two_suppliers(self, selector, suppliers):
        one = build_data_context(Intent.COMPARISON, suppliers=suppliers[:1])
        two = build_data_context(Intent.COMPARISON, suppliers=suppliers[:2])

        assert selector.select(one, Surface.INLINE) is None
        assert selector.select(two, Surface.INLINE).component == "ComparisonTableWidget"

    def test_trend_detection(self, selector, risk_changes):
        context = build_data_context(Intent.TREND_DETECTION, risk_changes=risk_changes)

        inline = selector.select(context, Surface.INLINE)
        compact = selector.select(context, Surface.INLINE_COMPACT)

        assert inline.component == "AlertCardWidget"
        assert inline.props["data"]["severity"] == "critical"
        assert compact.component == "TrendChangeIndicator"


class TestOtherIntents:
    """Tests for market, restricted, action and inflation intents."""

    def test_market_context_default_card(self, selector):
        context = build_data_context(Intent.MARKET_CONTEXT)

        config = selector.select(context, Surface.INLINE)

        assert config.component == "MarketContextCard"
        assert config.props["totalSpend"] == "$0"

    def test_price_gauge_outranks_market_card(self, selector):
        context = build_data_context(Intent.MARKET_CONTEXT, widget={"type": "price_gauge", "data": {"price": 812}})

        config = selector.select(context, Surface.INLINE)

        assert config.component == "PriceGaugeWidget"
        assert config.props == {"data": {"price": 812}}

    def test_restricted_query_variant(self, selector):
        plain = build_data_context(Intent.RESTRICTED_QUERY)
        handoff = build_data_context(Intent.RESTRICTED_QUERY, has_handoff=True)

        assert selector.select(plain, Surface.INLINE).variant == "standard"
        assert selector.select(handoff, Surface.INLINE).variant == "warning"

    def test_alternatives_preview(self, selector):
        widget = {
            "type": "alternatives_preview",
            "data": {"currentSupplier": "Acme Steel", "currentScore": 71, "alternatives": [{"name": "Cobalt Forge"}]},
        }
        context = build_data_context(Intent.ACTION_TRIGGER, widget=widget)

        config = selector.select(context, Surface.INLINE)

        assert config.component == "AlternativesPreviewCard"
        assert config.props["currentScore"] == 71
        assert config.expands_to == "AlternativesArtifact"

    def test_inflation_summary_card(self, selector):
        context = build_data_context(
            Intent.INFLATION_SUMMARY,
            widget={"type": "inflation_summary_card", "data": {"headline": "Steel up 4%"}},
        )

        inline = selector.select(context, Surface.INLINE)
        panel = selector.select(context, Surface.PANEL)

        assert inline.component == "InflationSummaryCard"
        assert inline.props == {"headline": "Steel up 4%"}
        assert panel.component == "InflationDashboardArtifact"

    def test_commodity_gauge(self, selector):
        context = build_data_context(
            Intent.INFLATION_DRIVERS,
            widget={"type": "commodity_gauge", "data": {"commodity": "Copper"}},
        )

        config = selector.select(context, Surface.INLINE)

        assert config.component == "CommodityGaugeCard"
        assert config.props == {"commodity": "Copper"}

    def test_inflation_intent_without_payload(self, selector):
        context = build_data_context(Intent.INFLATION_SCENARIOS)

        assert selector.select(context, Surface.INLINE) is None


class TestWidgetTypeOverride:
    """Tests for the spend exposure override."""

    @pytest.mark.parametrize("intent", [Intent.PORTFOLIO_OVERVIEW, Intent.GENERAL, "weather_forecast"])
    def test_any_intent(self, selector, portfolio, intent):
        context = build_data_context(
            intent, portfolio=portfolio, widget={"type": "spend_exposure", "data": {"total": 10}},
        )

        config = selector.select(context, Surface.INLINE)

        assert config.component == "SpendExposureWidget"
        assert config.rule_id == "spend_exposure_by_widget_type"
        assert config.size == SizeClass.MD

    def test_panel_size(self, selector):
        context = build_data_context(Intent.GENERAL, widget={"type": "spend_exposure", "data": {"total": 10}})

        assert selector.select(context, Surface.PANEL).size == SizeClass.LG


class TestNoWidget:
    """Tests for text-only intents."""

    def test_select_returns_none_component(self, selector):
        context = build_data_context(Intent.GENERAL)

        assert selector.select(context, Surface.INLINE).component == "none"

    def test_resolve_renders_nothing(self, selector):
        context = build_data_context(Intent.SETUP_CONFIG)

        assert selector.resolve(context, Surface.INLINE) is None

    def test_unknown_intent_matches_nothing(self, selector):
        context = build_data_context("weather_forecast")

        assert selector.select(context, Surface.INLINE) is None
        assert selector.resolve(context, Surface.INLINE) is None


# =============================================================================
# Resolution Fallbacks
# =============================================================================

class TestResolveFallbacks:
    """Tests for the registry and placeholder fallbacks."""

    def test_rule_selection_wins(self, selector, portfolio):
        context = build_data_context(Intent.PORTFOLIO_OVERVIEW, portfolio=portfolio)

        assert selector.resolve(context, Surface.INLINE) == selector.select(context, Surface.INLINE)

    def test_registry_passthrough(self, selector):
        """A payload no rule handles is rendered with the registry's component."""
        context = build_data_context(Intent.GENERAL, widget={"type": "stat_card", "data": {"label": "Suppliers", "value": 20}})

        config = selector.resolve(context, Surface.INLINE)

        assert config.component == "StatCard"
        assert config.rule_id == "widget:stat_card"
        assert config.props == {"label": "Suppliers", "value": 20}

    def test_registry_wraps_payload(self, selector):
        context = build_data_context(Intent.GENERAL, widget={"type": "price_gauge", "data": {"price": 812}})

        config = selector.resolve(context, Surface.INLINE)

        assert config.component == "PriceGaugeWidget"
        assert config.props == {"data": {"price": 812}}

    def test_registry_extracts_events(self, selector):
        events = [{"id": "e1"}]
        context = build_data_context(
            Intent.GENERAL, widget={"type": "events_feed", "data": {"events": {"events": events}}},
        )

        config = selector.resolve(context, Surface.INLINE)

        assert config.component == "EventsFeedWidget"
        assert config.props == {"events": events}

    def test_disabled_type_renders_nothing(self, selector):
        context = build_data_context(Intent.GENERAL, widget={"type": "region_map", "data": {"regions": []}})

        assert selector.resolve(context, Surface.INLINE) is None

    def test_unknown_tag_placeholder(self, selector):
        context = build_data_context(Intent.GENERAL, widget={"type": "hologram", "data": {"x": 1}})

        config = selector.resolve(context, Surface.INLINE)

        assert config.component == "PlaceholderWidget"
        assert config.props == {"type": "hologram"}
        assert config.rule_id == "widget:hologram"

    def test_non_string_tag_placeholder(self, selector):
        context = build_data_context(Intent.GENERAL, widget={"type": 7, "data": {"x": 1}})

        config = selector.resolve(context, Surface.INLINE)

        assert config.component == "PlaceholderWidget"
        assert config.props == {"type": "7"}

    def test_unknown_component_placeholder(self):
        rules = RuleSet([
            SelectionRule(
                id="mystery",
                priority=100,
                component="HologramWidget",
                surfaces=frozenset({Surface.INLINE}),
                build=lambda context, surface: Rendering(props={"x": 1}),
            ),
        ])
        selector = ComponentSelector(rules=rules, registry=WidgetRegistry([]))

        config = selector.resolve(build_data_context(Intent.GENERAL), Surface.INLINE)

        assert config.component == "PlaceholderWidget"
        assert config.props == {"type": "HologramWidget"}
        assert config.rule_id == "mystery"


# =============================================================================
# Behavior
# =============================================================================

class TestSelectorBehavior:
    """Tests for determinism, surface parsing and debugging."""

    def test_deterministic(self, selector, suppliers, risk_changes):
        context = build_data_context(Intent.TREND_DETECTION, suppliers=suppliers, risk_changes=risk_changes)

        first = selector.select(context, Surface.INLINE)
        second = selector.select(context, Surface.INLINE)

        assert first == second
        assert first is not second

    def test_results_do_not_share_props(self, selector):
        context = build_data_context(Intent.MARKET_CONTEXT, widget={"type": "price_gauge", "data": {"price": 812}})

        config = selector.select(context, Surface.INLINE)
        config.props["data"]["price"] = 0

        assert context.widget.data["price"] == 812

    def test_invalid_surface(self, selector):
        with pytest.raises(InvalidSurfaceError):
            selector.select(build_data_context(Intent.GENERAL), "billboard")

    def test_explain(self, selector, portfolio):
        context = build_data_context(Intent.PORTFOLIO_OVERVIEW, portfolio=portfolio)

        rows = selector.explain(context, Surface.INLINE)

        matching = [row["rule_id"] for row in rows if row["matches"]]
        assert matching == ["portfolio_distribution_chat"]
        assert len(rows) == len(selector.rules)

    def test_known_components(self, selector):
        known = selector.known_components()

        assert "RiskDistributionWidget" in known
        assert "StatCard" in known
        assert "PlaceholderWidget" in known
        assert "RegionMapWidget" not in known
        assert selector.is_known_component("none")

    def test_module_entry_points(self, portfolio):
        context = build_data_context(Intent.PORTFOLIO_OVERVIEW, portfolio=portfolio)

        assert select_component(context, "inline").component == "RiskDistributionWidget"
        assert resolve_component(context, "side-panel").component == "PortfolioDashboardArtifact"
