"""
WidgetPilot Selection Rules

The ordered, declarative table the selection engine evaluates.

Each rule declares when it is eligible (intents, surfaces, required data
kinds, widget tags, and an optional extra guard) and how it renders
(a pure builder returning component parameters). Eligibility is checked
in that order, so a builder only ever sees a context carrying the data
its rule requires.

Rules are grouped by intent below. Higher priority wins; equal
priorities are resolved by position in the table.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Optional

from ..exceptions import DuplicateRuleError, RuleDefinitionError
from ..models import (
    ComponentConfig,
    DataContext,
    DataKind,
    Intent,
    KnownWidget,
    SizeClass,
    Surface,
    WidgetType,
)
from ..models.component import NO_COMPONENT
from .transformers import (
    MAX_COMPARISON_SUPPLIERS,
    copy_payload,
    format_spend,
    map_risk_level_to_market_context,
    portfolio_to_distribution_data,
    risk_changes_to_alert_data,
    risk_changes_to_table_data,
    supplier_to_risk_card_data,
    suppliers_to_comparison_data,
    suppliers_to_table_data,
)


# =============================================================================
# Rule Model
# =============================================================================

@dataclass(frozen=True)
class Rendering:
    """What a rule builder produces; the rule adds identity and expansion."""
    props: dict[str, Any]
    variant: Optional[str] = None
    size: Optional[SizeClass] = None


Builder = Callable[[DataContext, Surface], Rendering]
Guard = Callable[[DataContext, Surface], bool]


@dataclass(frozen=True)
class SelectionRule:
    """
    One entry of the selection table.

    Attributes:
        id: Unique rule identifier
        priority: Higher wins
        component: Component identifier this rule selects
        surfaces: Surfaces the rule is eligible for
        build: Pure builder producing the component parameters
        intents: Intents the rule applies to (empty = any intent)
        requires: Data kinds that must be present on the context
        widget_types: Widget tags the context must carry (empty = any)
        guard: Extra eligibility check for conditions the fields above
            cannot express
        expands_to: Richer component to escalate to
        description: Human-readable summary
    """
    id: str
    priority: int
    component: str
    surfaces: frozenset[Surface]
    build: Builder
    intents: frozenset[str] = frozenset()
    requires: frozenset[DataKind] = frozenset()
    widget_types: frozenset[WidgetType] = frozenset()
    guard: Optional[Guard] = None
    expands_to: Optional[str] = None
    description: str = ""

    def matches(self, context: DataContext, surface: Surface) -> bool:
        """Check eligibility without building anything."""
        if self.intents and context.intent_label not in self.intents:
            return False
        if surface not in self.surfaces:
            return False
        if self.requires and not self.requires <= context.available_data():
            return False
        if self.widget_types:
            widget = context.widget
            if not isinstance(widget, KnownWidget) or widget.type not in self.widget_types:
                return False
        if self.guard is not None and not self.guard(context, surface):
            return False
        return True

    def configure(self, context: DataContext, surface: Surface) -> ComponentConfig:
        """Build the component configuration for a matching context."""
        rendering = self.build(context, surface)
        return ComponentConfig(
            component=self.component,
            props=rendering.props,
            variant=rendering.variant,
            size=rendering.size,
            expands_to=self.expands_to,
            rule_id=self.id,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "priority": self.priority,
            "component": self.component,
            "surfaces": sorted(s.value for s in self.surfaces),
            "intents": sorted(self.intents),
            "requires": sorted(k.value for k in self.requires),
            "widget_types": sorted(w.value for w in self.widget_types),
            "expands_to": self.expands_to,
            "description": self.description,
        }


class RuleSet:
    """
    Immutable, validated collection of selection rules.

    Usage:
        rules = RuleSet([rule_a, rule_b])
        for rule in rules.matching(context, Surface.INLINE):
            ...
    """

    def __init__(self, rules: Iterable[SelectionRule]):
        rules = tuple(rules)
        seen: set[str] = set()
        for rule in rules:
            if rule.id in seen:
                raise DuplicateRuleError(
                    message=f"Duplicate selection rule id: '{rule.id}'",
                    details={"rule_id": rule.id},
                )
            if not rule.surfaces:
                raise RuleDefinitionError(
                    message=f"Rule '{rule.id}' is not eligible for any surface",
                    details={"rule_id": rule.id},
                )
            seen.add(rule.id)
        self._rules = rules
        self._by_id = {r.id: r for r in rules}

    def __iter__(self) -> Iterator[SelectionRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def get(self, rule_id: str) -> Optional[SelectionRule]:
        return self._by_id.get(rule_id)

    def matching(self, context: DataContext, surface: Surface) -> list[SelectionRule]:
        """Matching rules, highest priority first, table order within a priority."""
        candidates = [r for r in self._rules if r.matches(context, surface)]
        return sorted(candidates, key=lambda r: -r.priority)

    def components(self) -> frozenset[str]:
        """Every component a rule can select or expand into."""
        names = {r.component for r in self._rules if r.component != NO_COMPONENT}
        names.update(r.expands_to for r in self._rules if r.expands_to)
        return frozenset(names)

    def components_for(self, surface: Surface) -> frozenset[str]:
        """Components selectable on a surface."""
        return frozenset(r.component for r in self._rules if surface in r.surfaces)


# =============================================================================
# Shared Helpers
# =============================================================================

INLINE = frozenset({Surface.INLINE})
INLINE_COMPACT = frozenset({Surface.INLINE_COMPACT})
PANELS = frozenset({Surface.PANEL, Surface.PANEL_EXPANDED})
ALL_SURFACES = frozenset(Surface)

PORTFOLIO_ARTIFACT = "PortfolioDashboardArtifact"
SUPPLIER_TABLE_ARTIFACT = "SupplierTableArtifact"
SUPPLIER_DETAIL_ARTIFACT = "SupplierDetailArtifact"
COMPARISON_ARTIFACT = "ComparisonArtifact"
COMMODITY_ARTIFACT = "CommodityDashboardArtifact"
ALTERNATIVES_ARTIFACT = "AlternativesArtifact"

# Rows shown inline before the table is expanded
INLINE_TABLE_ROWS = 5
COMPACT_TABLE_ROWS = 3


def _intents(*intents: Intent) -> frozenset[str]:
    return frozenset(i.value for i in intents)


def _panel_size(surface: Surface) -> SizeClass:
    return SizeClass.FULL if surface == Surface.PANEL_EXPANDED else SizeClass.LG


def _as_props(payload: Any) -> dict[str, Any]:
    data = copy_payload(payload)
    return data if isinstance(data, dict) else {"data": data}


def _widget_data(context: DataContext) -> Any:
    return context.widget.data if context.widget is not None else None


def _widget_field(context: DataContext, key: str) -> Any:
    data = _widget_data(context)
    return copy_payload(data.get(key)) if isinstance(data, Mapping) and key in data else None


def _at_least_two_suppliers(context: DataContext, surface: Surface) -> bool:
    return context.supplier_count >= 2


def _unique(values: Iterable[Any]) -> list[Any]:
    result: list[Any] = []
    for value in values:
        if value not in result:
            result.append(value)
    return result


# =============================================================================
# Widget Type Overrides
# =============================================================================

def _build_spend_exposure(context: DataContext, surface: Surface) -> Rendering:
    return Rendering(
        props={"data": copy_payload(_widget_data(context))},
        size=SizeClass.LG if surface == Surface.PANEL else SizeClass.MD,
    )


# =============================================================================
# Portfolio Overview
# =============================================================================

def _build_portfolio_distribution(context: DataContext, surface: Surface) -> Rendering:
    return Rendering(
        props={"data": portfolio_to_distribution_data(context.portfolio)},
        size=SizeClass.MD,
    )


def _build_portfolio_compact(context: DataContext, surface: Surface) -> Rendering:
    portfolio = context.portfolio
    return Rendering(
        props={
            "distribution": portfolio.distribution.to_dict(),
            "totalSuppliers": portfolio.total_suppliers,
            "compact": True,
        },
        variant="inline",
        size=SizeClass.SM,
    )


def _build_portfolio_artifact(context: DataContext, surface: Surface) -> Rendering:
    portfolio = context.portfolio
    movers = sorted(context.risk_changes or (), key=lambda c: -abs(c.delta))
    props: dict[str, Any] = {
        "totalSuppliers": portfolio.total_suppliers,
        "distribution": portfolio.distribution.to_dict(),
        "trends": [],
        "alerts": [risk_changes_to_alert_data(context.risk_changes)] if context.risk_changes else [],
        "topMovers": [c.to_dict() for c in movers[:INLINE_TABLE_ROWS]],
    }
    if portfolio.last_updated:
        props["lastUpdated"] = portfolio.last_updated
    return Rendering(props=props, size=_panel_size(surface))


# =============================================================================
# Supplier Tables
# =============================================================================

def _build_supplier_table(context: DataContext, surface: Surface) -> Rendering:
    return Rendering(
        props={"data": suppliers_to_table_data(context.suppliers, limit=INLINE_TABLE_ROWS)},
        size=SizeClass.MD,
    )


def _build_supplier_mini_table(context: DataContext, surface: Surface) -> Rendering:
    suppliers = context.suppliers
    return Rendering(
        props={
            "suppliers": [s.to_dict() for s in suppliers[:COMPACT_TABLE_ROWS]],
            "totalCount": len(suppliers),
            "showTrend": True,
            "showSpend": False,
            "maxRows": COMPACT_TABLE_ROWS,
        },
        variant="compact",
        size=SizeClass.SM,
    )


def _build_supplier_table_artifact(context: DataContext, surface: Surface) -> Rendering:
    suppliers = context.suppliers
    return Rendering(
        props={
            "suppliers": [s.to_dict() for s in suppliers],
            "totalCount": len(suppliers),
            "categories": _unique(s.category for s in suppliers if s.category),
            "locations": _unique(s.location.to_dict() for s in suppliers if s.location),
        },
        size=_panel_size(surface),
    )


# =============================================================================
# Supplier Deep Dive
# =============================================================================

def _build_supplier_card(context: DataContext, surface: Surface) -> Rendering:
    return Rendering(
        props={"data": supplier_to_risk_card_data(context.supplier)},
        size=SizeClass.MD,
    )


def _build_supplier_card_compact(context: DataContext, surface: Surface) -> Rendering:
    return Rendering(
        props={"supplier": context.supplier.to_dict()},
        variant="compact",
        size=SizeClass.SM,
    )


def _build_supplier_detail(context: DataContext, surface: Surface) -> Rendering:
    return Rendering(
        props={"supplier": context.supplier.to_dict()},
        size=_panel_size(surface),
    )


# =============================================================================
# Trend Detection
# =============================================================================

def _build_alert_card(context: DataContext, surface: Surface) -> Rendering:
    return Rendering(
        props={"data": risk_changes_to_alert_data(context.risk_changes)},
        size=SizeClass.MD,
    )


def _build_trend_indicator(context: DataContext, surface: Surface) -> Rendering:
    change = context.risk_changes[0]
    props: dict[str, Any] = {
        "previousScore": change.previous_score,
        "currentScore": change.current_score,
    }
    if change.change_date:
        props["changeDate"] = change.change_date
    return Rendering(props=props, variant="card", size=SizeClass.SM)


def _build_risk_change_table(context: DataContext, surface: Surface) -> Rendering:
    props = risk_changes_to_table_data(context.risk_changes)
    props["title"] = "Suppliers with risk changes"
    return Rendering(props=props, size=_panel_size(surface))


# =============================================================================
# Comparison
# =============================================================================

def _build_comparison_table(context: DataContext, surface: Surface) -> Rendering:
    return Rendering(
        props={"data": suppliers_to_comparison_data(context.suppliers)},
        size=SizeClass.MD,
    )


def _build_comparison_artifact(context: DataContext, surface: Surface) -> Rendering:
    return Rendering(
        props={
            "suppliers": [s.to_dict() for s in context.suppliers],
            "maxSuppliers": MAX_COMPARISON_SUPPLIERS,
        },
        size=_panel_size(surface),
    )


# =============================================================================
# Market Context
# =============================================================================

def _build_market_context(context: DataContext, surface: Surface) -> Rendering:
    portfolio = context.portfolio
    if portfolio is None:
        total_spend = "$0"
    else:
        total_spend = portfolio.spend_formatted or format_spend(portfolio.total_spend)
    return Rendering(
        props={
            "sector": "Market",
            "riskLevel": map_risk_level_to_market_context("medium"),
            "keyFactors": [],
            "exposedSuppliers": context.supplier_count,
            "totalSpend": total_spend,
        },
        size=SizeClass.MD,
    )


def _build_price_gauge(context: DataContext, surface: Surface) -> Rendering:
    return Rendering(props={"data": copy_payload(_widget_data(context))}, size=SizeClass.MD)


def _build_commodity_dashboard(context: DataContext, surface: Surface) -> Rendering:
    return Rendering(
        props={"commodity": copy_payload(context.commodity_data)},
        size=_panel_size(surface),
    )


# =============================================================================
# Restricted Query
# =============================================================================

def _build_handoff(context: DataContext, surface: Surface) -> Rendering:
    return Rendering(
        props={
            "title": "Additional Details Available",
            "description": "For detailed analysis and proprietary data, please visit the full dashboard.",
            "linkText": "Open in Dashboard",
            "linkUrl": "/dashboard",
        },
        variant="warning" if context.has_handoff else "standard",
        size=SizeClass.MD,
    )


# =============================================================================
# Action Trigger
# =============================================================================

def _alternatives_props(context: DataContext) -> dict[str, Any]:
    return {
        "currentSupplier": _widget_field(context, "currentSupplier"),
        "currentScore": _widget_field(context, "currentScore"),
        "alternatives": _widget_field(context, "alternatives") or [],
    }


def _build_alternatives_preview(context: DataContext, surface: Surface) -> Rendering:
    return Rendering(props=_alternatives_props(context), size=SizeClass.MD)


def _build_alternatives_artifact(context: DataContext, surface: Surface) -> Rendering:
    return Rendering(props=_alternatives_props(context), size=_panel_size(surface))


def _build_action_confirmation(context: DataContext, surface: Surface) -> Rendering:
    return Rendering(
        props={
            "status": "success",
            "title": "Action Completed",
            "message": "Your request has been processed.",
        },
        variant="success",
        size=SizeClass.SM,
    )


# =============================================================================
# Inflation Watch
# =============================================================================

def _inflation_rules(
    intent: Intent,
    kind: DataKind,
    widget_type: WidgetType,
    card: str,
    artifact: str,
) -> list[SelectionRule]:
    """Inline card and panel artifact for one inflation intent.

    Eligible when the context carries the payload kind or a widget of the
    card's type; the widget's data takes precedence over the payload slot.
    """
    slot = kind.value

    def has_payload(context: DataContext, surface: Surface) -> bool:
        return kind in context.available_data() or context.widget_tag == widget_type.value

    def payload(context: DataContext) -> dict[str, Any]:
        if context.widget_tag == widget_type.value and context.widget.has_data:
            return _as_props(context.widget.data)
        return _as_props(getattr(context, slot))

    def build_card(context: DataContext, surface: Surface) -> Rendering:
        return Rendering(props=payload(context), size=SizeClass.MD)

    def build_artifact(context: DataContext, surface: Surface) -> Rendering:
        return Rendering(props=payload(context), size=_panel_size(surface))

    name = intent.value
    return [
        SelectionRule(
            id=f"{name}_chat",
            priority=100,
            component=card,
            intents=_intents(intent),
            surfaces=INLINE,
            guard=has_payload,
            build=build_card,
            expands_to=artifact,
            description=f"{card} for {name}",
        ),
        SelectionRule(
            id=f"{name}_artifact",
            priority=100,
            component=artifact,
            intents=_intents(intent),
            surfaces=PANELS,
            guard=has_payload,
            build=build_artifact,
            description=f"{artifact} for {name}",
        ),
    ]


def _build_commodity_gauge(context: DataContext, surface: Surface) -> Rendering:
    return Rendering(props=_as_props(_widget_data(context)), size=SizeClass.MD)


# =============================================================================
# No Widget Needed
# =============================================================================

def _no_widget_or_suppliers(context: DataContext, surface: Surface) -> bool:
    return context.widget is None and not context.suppliers


def _build_nothing(context: DataContext, surface: Surface) -> Rendering:
    return Rendering(props={})


# =============================================================================
# Default Rule Table
# =============================================================================

def default_rules() -> list[SelectionRule]:
    """The default selection table, in evaluation order."""
    rules = [
        # Widget type overrides honor the upstream router's choice
        SelectionRule(
            id="spend_exposure_by_widget_type",
            priority=200,
            component="SpendExposureWidget",
            surfaces=frozenset({Surface.INLINE, Surface.PANEL}),
            widget_types=frozenset({WidgetType.SPEND_EXPOSURE}),
            build=_build_spend_exposure,
            expands_to=PORTFOLIO_ARTIFACT,
            description="Spend exposure widget chosen upstream, any intent",
        ),

        # Portfolio overview
        SelectionRule(
            id="portfolio_distribution_chat",
            priority=100,
            component="RiskDistributionWidget",
            intents=_intents(Intent.PORTFOLIO_OVERVIEW),
            surfaces=INLINE,
            requires=frozenset({DataKind.PORTFOLIO}),
            build=_build_portfolio_distribution,
            expands_to=PORTFOLIO_ARTIFACT,
            description="Risk distribution with per-tier percentages",
        ),
        SelectionRule(
            id="portfolio_distribution_compact",
            priority=100,
            component="RiskDistributionChart",
            intents=_intents(Intent.PORTFOLIO_OVERVIEW),
            surfaces=INLINE_COMPACT,
            requires=frozenset({DataKind.PORTFOLIO}),
            build=_build_portfolio_compact,
            expands_to=PORTFOLIO_ARTIFACT,
        ),
        SelectionRule(
            id="portfolio_artifact",
            priority=100,
            component=PORTFOLIO_ARTIFACT,
            intents=_intents(Intent.PORTFOLIO_OVERVIEW),
            surfaces=PANELS,
            requires=frozenset({DataKind.PORTFOLIO}),
            build=_build_portfolio_artifact,
        ),

        # Filtered discovery
        SelectionRule(
            id="supplier_table_chat",
            priority=100,
            component="SupplierTableWidget",
            intents=_intents(Intent.FILTERED_DISCOVERY),
            surfaces=INLINE,
            requires=frozenset({DataKind.SUPPLIERS}),
            build=_build_supplier_table,
            expands_to=SUPPLIER_TABLE_ARTIFACT,
        ),
        SelectionRule(
            id="supplier_table_compact",
            priority=100,
            component="SupplierMiniTable",
            intents=_intents(Intent.FILTERED_DISCOVERY),
            surfaces=INLINE_COMPACT,
            requires=frozenset({DataKind.SUPPLIERS}),
            build=_build_supplier_mini_table,
            expands_to=SUPPLIER_TABLE_ARTIFACT,
        ),
        SelectionRule(
            id="supplier_table_artifact",
            priority=100,
            component=SUPPLIER_TABLE_ARTIFACT,
            intents=_intents(Intent.FILTERED_DISCOVERY, Intent.ACTION_TRIGGER, Intent.EXPLANATION_WHY),
            surfaces=PANELS,
            requires=frozenset({DataKind.SUPPLIERS}),
            build=_build_supplier_table_artifact,
        ),

        # Supplier deep dive
        SelectionRule(
            id="supplier_card_chat",
            priority=100,
            component="SupplierRiskCardWidget",
            intents=_intents(Intent.SUPPLIER_DEEP_DIVE),
            surfaces=INLINE,
            requires=frozenset({DataKind.SUPPLIER}),
            build=_build_supplier_card,
            expands_to=SUPPLIER_DETAIL_ARTIFACT,
        ),
        SelectionRule(
            id="supplier_card_compact",
            priority=100,
            component="SupplierRiskCard",
            intents=_intents(Intent.SUPPLIER_DEEP_DIVE),
            surfaces=INLINE_COMPACT,
            requires=frozenset({DataKind.SUPPLIER}),
            build=_build_supplier_card_compact,
            expands_to=SUPPLIER_DETAIL_ARTIFACT,
        ),
        SelectionRule(
            id="supplier_detail_artifact",
            priority=100,
            component=SUPPLIER_DETAIL_ARTIFACT,
            intents=_intents(Intent.SUPPLIER_DEEP_DIVE),
            surfaces=PANELS,
            requires=frozenset({DataKind.SUPPLIER}),
            build=_build_supplier_detail,
        ),

        # Trend detection
        SelectionRule(
            id="alert_card_chat",
            priority=100,
            component="AlertCardWidget",
            intents=_intents(Intent.TREND_DETECTION),
            surfaces=INLINE,
            requires=frozenset({DataKind.RISK_CHANGES}),
            build=_build_alert_card,
            expands_to=SUPPLIER_TABLE_ARTIFACT,
        ),
        SelectionRule(
            id="trend_changes_compact",
            priority=100,
            component="TrendChangeIndicator",
            intents=_intents(Intent.TREND_DETECTION),
            surfaces=INLINE_COMPACT,
            requires=frozenset({DataKind.RISK_CHANGES}),
            build=_build_trend_indicator,
            expands_to=SUPPLIER_TABLE_ARTIFACT,
        ),
        SelectionRule(
            id="risk_change_table_artifact",
            priority=100,
            component=SUPPLIER_TABLE_ARTIFACT,
            intents=_intents(Intent.TREND_DETECTION),
            surfaces=PANELS,
            requires=frozenset({DataKind.RISK_CHANGES}),
            build=_build_risk_change_table,
        ),

        # Comparison
        SelectionRule(
            id="comparison_table_chat",
            priority=100,
            component="ComparisonTableWidget",
            intents=_intents(Intent.COMPARISON),
            surfaces=INLINE,
            requires=frozenset({DataKind.SUPPLIERS}),
            guard=_at_least_two_suppliers,
            build=_build_comparison_table,
            expands_to=COMPARISON_ARTIFACT,
        ),
        SelectionRule(
            id="comparison_artifact",
            priority=100,
            component=COMPARISON_ARTIFACT,
            intents=_intents(Intent.COMPARISON),
            surfaces=PANELS,
            requires=frozenset({DataKind.SUPPLIERS}),
            guard=_at_least_two_suppliers,
            build=_build_comparison_artifact,
        ),

        # Market context
        SelectionRule(
            id="market_context_chat",
            priority=100,
            component="MarketContextCard",
            intents=_intents(Intent.MARKET_CONTEXT),
            surfaces=INLINE,
            build=_build_market_context,
        ),
        SelectionRule(
            id="price_gauge_chat",
            priority=110,
            component="PriceGaugeWidget",
            intents=_intents(Intent.MARKET_CONTEXT),
            surfaces=INLINE,
            widget_types=frozenset({WidgetType.PRICE_GAUGE}),
            build=_build_price_gauge,
            expands_to=COMMODITY_ARTIFACT,
        ),
        SelectionRule(
            id="commodity_dashboard_artifact",
            priority=100,
            component=COMMODITY_ARTIFACT,
            intents=_intents(Intent.MARKET_CONTEXT, Intent.INFLATION_SUMMARY, Intent.INFLATION_DRIVERS),
            surfaces=PANELS,
            requires=frozenset({DataKind.COMMODITY_DATA}),
            build=_build_commodity_dashboard,
        ),

        # Restricted query
        SelectionRule(
            id="handoff_card_chat",
            priority=100,
            component="HandoffCard",
            intents=_intents(Intent.RESTRICTED_QUERY),
            surfaces=INLINE,
            build=_build_handoff,
        ),

        # Action trigger
        SelectionRule(
            id="action_alternatives_preview_chat",
            priority=115,
            component="AlternativesPreviewCard",
            intents=_intents(Intent.ACTION_TRIGGER),
            surfaces=INLINE,
            requires=frozenset({DataKind.WIDGET}),
            widget_types=frozenset({WidgetType.ALTERNATIVES_PREVIEW}),
            build=_build_alternatives_preview,
            expands_to=ALTERNATIVES_ARTIFACT,
        ),
        SelectionRule(
            id="action_alternatives_artifact",
            priority=115,
            component=ALTERNATIVES_ARTIFACT,
            intents=_intents(Intent.ACTION_TRIGGER),
            surfaces=PANELS,
            requires=frozenset({DataKind.WIDGET}),
            widget_types=frozenset({WidgetType.ALTERNATIVES_PREVIEW}),
            build=_build_alternatives_artifact,
        ),
        SelectionRule(
            id="action_alternatives_table_chat",
            priority=110,
            component="SupplierTableWidget",
            intents=_intents(Intent.ACTION_TRIGGER),
            surfaces=INLINE,
            requires=frozenset({DataKind.SUPPLIERS}),
            build=_build_supplier_table,
            expands_to=SUPPLIER_TABLE_ARTIFACT,
        ),
        SelectionRule(
            id="action_confirmation_chat",
            priority=100,
            component="ActionConfirmationCard",
            intents=_intents(Intent.ACTION_TRIGGER),
            surfaces=INLINE,
            widget_types=frozenset({WidgetType.ACTION_CARD}),
            build=_build_action_confirmation,
        ),

        # Explanation
        SelectionRule(
            id="explanation_supplier_table_chat",
            priority=100,
            component="SupplierTableWidget",
            intents=_intents(Intent.EXPLANATION_WHY),
            surfaces=INLINE,
            requires=frozenset({DataKind.SUPPLIERS}),
            build=_build_supplier_table,
            expands_to=SUPPLIER_TABLE_ARTIFACT,
        ),
    ]

    # Inflation watch
    rules += _inflation_rules(
        Intent.INFLATION_SUMMARY, DataKind.INFLATION_SUMMARY,
        WidgetType.INFLATION_SUMMARY_CARD, "InflationSummaryCard", "InflationDashboardArtifact",
    )
    rules += _inflation_rules(
        Intent.INFLATION_DRIVERS, DataKind.COMMODITY_DRIVERS,
        WidgetType.DRIVER_BREAKDOWN_CARD, "DriverBreakdownCard", "DriverAnalysisArtifact",
    )
    rules += _inflation_rules(
        Intent.INFLATION_IMPACT, DataKind.PORTFOLIO_EXPOSURE,
        WidgetType.SPEND_IMPACT_CARD, "SpendImpactCard", "ImpactAnalysisArtifact",
    )
    rules += _inflation_rules(
        Intent.INFLATION_JUSTIFICATION, DataKind.JUSTIFICATION_DATA,
        WidgetType.JUSTIFICATION_CARD, "JustificationCard", "JustificationReportArtifact",
    )
    rules += _inflation_rules(
        Intent.INFLATION_SCENARIOS, DataKind.SCENARIO_DATA,
        WidgetType.SCENARIO_CARD, "ScenarioCard", "ScenarioPlannerArtifact",
    )
    rules += _inflation_rules(
        Intent.INFLATION_COMMUNICATION, DataKind.INFLATION_SUMMARY,
        WidgetType.EXECUTIVE_BRIEF_CARD, "ExecutiveBriefCard", "ExecutivePresentationArtifact",
    )

    rules += [
        SelectionRule(
            id="commodity_gauge_chat",
            priority=110,
            component="CommodityGaugeCard",
            intents=_intents(Intent.INFLATION_SUMMARY, Intent.INFLATION_DRIVERS),
            surfaces=INLINE,
            widget_types=frozenset({WidgetType.COMMODITY_GAUGE}),
            build=_build_commodity_gauge,
            expands_to=COMMODITY_ARTIFACT,
        ),

        # Intents that need no visual, unless upstream supplied something to show
        SelectionRule(
            id="no_widget",
            priority=10,
            component=NO_COMPONENT,
            intents=_intents(
                Intent.EXPLANATION_WHY,
                Intent.SETUP_CONFIG,
                Intent.REPORTING_EXPORT,
                Intent.GENERAL,
            ),
            surfaces=ALL_SURFACES,
            guard=_no_widget_or_suppliers,
            build=_build_nothing,
            description="Text-only answer",
        ),
    ]
    return rules


SELECTION_RULES = RuleSet(default_rules())
