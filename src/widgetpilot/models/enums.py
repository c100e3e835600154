"""
WidgetPilot Enumerations

All enumeration types used throughout the WidgetPilot system.
Organized by domain area for clarity.

All enums inherit from (str, Enum) for JSON serialization compatibility,
so a member compares equal to its raw label.
"""
from __future__ import annotations

from enum import Enum
from typing import Union

from ..exceptions import InvalidSurfaceError


# =============================================================================
# Intents
# =============================================================================

class Intent(str, Enum):
    """Intent categories produced by the upstream classifier."""
    PORTFOLIO_OVERVIEW = "portfolio_overview"
    FILTERED_DISCOVERY = "filtered_discovery"
    SUPPLIER_DEEP_DIVE = "supplier_deep_dive"
    TREND_DETECTION = "trend_detection"
    EXPLANATION_WHY = "explanation_why"
    ACTION_TRIGGER = "action_trigger"
    COMPARISON = "comparison"
    SETUP_CONFIG = "setup_config"
    REPORTING_EXPORT = "reporting_export"
    MARKET_CONTEXT = "market_context"
    RESTRICTED_QUERY = "restricted_query"
    GENERAL = "general"

    # Inflation watch
    INFLATION_SUMMARY = "inflation_summary"
    INFLATION_DRIVERS = "inflation_drivers"
    INFLATION_IMPACT = "inflation_impact"
    INFLATION_JUSTIFICATION = "inflation_justification"
    INFLATION_SCENARIOS = "inflation_scenarios"
    INFLATION_COMMUNICATION = "inflation_communication"

    @classmethod
    def coerce(cls, value: Union["Intent", str]) -> Union["Intent", str]:
        """Return the matching member, or the raw label if it is not in the set."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return value


class SubIntent(str, Enum):
    """Refinements of an intent. Carried on the context, not used for routing."""
    # portfolio_overview
    OVERALL_SUMMARY = "overall_summary"
    SPEND_FOCUS = "spend_focus"
    RISK_DISTRIBUTION = "risk_distribution"
    HEALTH_CHECK = "health_check"
    # supplier_deep_dive
    SUPPLIER_OVERVIEW = "supplier_overview"
    RISK_FACTORS = "risk_factors"
    HISTORICAL = "historical"
    NEWS_EVENTS = "news_events"
    # trend_detection
    RECENT_CHANGES = "recent_changes"
    EVENTS = "events"
    WORSENING = "worsening"
    IMPROVING = "improving"
    # action_trigger
    FIND_ALTERNATIVES = "find_alternatives"
    FOLLOW_SUPPLIER = "follow_supplier"
    EXPORT = "export"
    # filtered_discovery
    BY_RISK_LEVEL = "by_risk_level"
    BY_CATEGORY = "by_category"
    BY_REGION = "by_region"
    BY_SPEND = "by_spend"
    # general
    NONE = "none"


# =============================================================================
# Rendering Surfaces
# =============================================================================

class Surface(str, Enum):
    """
    Where the selected component will be rendered.

    Ordered from the most constrained inline surface to the full-screen
    panel; standalone is used outside the conversation.
    """
    INLINE = "inline"
    INLINE_COMPACT = "inline_compact"
    PANEL = "panel"
    PANEL_EXPANDED = "panel_expanded"
    STANDALONE = "standalone"

    @classmethod
    def parse(cls, value: Union["Surface", str]) -> "Surface":
        """
        Parse a surface label, accepting the legacy chat labels.

        Raises:
            InvalidSurfaceError: If the label is not a known surface
        """
        if isinstance(value, cls):
            return value
        label = str(value).strip().lower()
        label = _SURFACE_ALIASES.get(label, label)
        try:
            return cls(label)
        except ValueError:
            raise InvalidSurfaceError(
                message=f"Unknown surface: {value!r}",
                details={"surface": str(value), "valid": [s.value for s in cls]},
            )


_SURFACE_ALIASES = {
    "chat": "inline",
    "chat_compact": "inline_compact",
    "inline-compact": "inline_compact",
    "side_panel": "panel",
    "side-panel": "panel",
    "full_screen": "panel_expanded",
    "full-screen": "panel_expanded",
}


class SizeClass(str, Enum):
    """Size hint attached to a component configuration."""
    SM = "sm"
    MD = "md"
    LG = "lg"
    FULL = "full"


# =============================================================================
# Data Availability
# =============================================================================

class DataKind(str, Enum):
    """Kinds of data a rule can require from the context."""
    PORTFOLIO = "portfolio"
    SUPPLIERS = "suppliers"
    SUPPLIER = "supplier"
    RISK_CHANGES = "risk_changes"
    WIDGET = "widget"
    INFLATION_SUMMARY = "inflation_summary"
    COMMODITY_DATA = "commodity_data"
    COMMODITY_DRIVERS = "commodity_drivers"
    PORTFOLIO_EXPOSURE = "portfolio_exposure"
    JUSTIFICATION_DATA = "justification_data"
    SCENARIO_DATA = "scenario_data"


# =============================================================================
# Supplier Risk
# =============================================================================

class RiskLevel(str, Enum):
    """Supplier risk score bands."""
    HIGH = "high"
    MEDIUM_HIGH = "medium-high"
    MEDIUM = "medium"
    LOW = "low"
    UNRATED = "unrated"


class TrendDirection(str, Enum):
    """Direction of a supplier's risk score over time."""
    IMPROVING = "improving"
    STABLE = "stable"
    WORSENING = "worsening"


class ChangeDirection(str, Enum):
    """Direction of a recorded risk change."""
    IMPROVED = "improved"
    WORSENED = "worsened"


# =============================================================================
# Sources & Confidence
# =============================================================================

class ConfidenceLevel(str, Enum):
    """Trust tier shown on the response badge."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    WEB_ONLY = "web_only"


class ProviderType(str, Enum):
    """Provider tags carried by internal sources."""
    BEROE = "beroe"                    # Proprietary intelligence
    DUN_BRADSTREET = "dun_bradstreet"
    ECOVADIS = "ecovadis"
    INTERNAL_DATA = "internal_data"
    SUPPLIER_DATA = "supplier_data"


# =============================================================================
# Widget Types
# =============================================================================

class WidgetType(str, Enum):
    """Closed set of widget payload tags emitted upstream."""
    # Portfolio & overview
    RISK_DISTRIBUTION = "risk_distribution"
    PORTFOLIO_SUMMARY = "portfolio_summary"
    METRIC_ROW = "metric_row"
    SPEND_EXPOSURE = "spend_exposure"
    HEALTH_SCORECARD = "health_scorecard"

    # Supplier focused
    SUPPLIER_RISK_CARD = "supplier_risk_card"
    SUPPLIER_TABLE = "supplier_table"
    SUPPLIER_MINI = "supplier_mini"
    COMPARISON_TABLE = "comparison_table"

    # Trends & alerts
    TREND_CHART = "trend_chart"
    TREND_INDICATOR = "trend_indicator"
    ALERT_CARD = "alert_card"
    EVENT_TIMELINE = "event_timeline"
    EVENTS_FEED = "events_feed"

    # Market & context
    PRICE_GAUGE = "price_gauge"
    MARKET_CARD = "market_card"
    BENCHMARK_CARD = "benchmark_card"
    NEWS_ITEM = "news_item"

    # Categories & regions
    CATEGORY_BREAKDOWN = "category_breakdown"
    CATEGORY_BADGE = "category_badge"
    REGION_MAP = "region_map"
    REGION_LIST = "region_list"

    # Actions & status
    ACTION_CARD = "action_card"
    HANDOFF_CARD = "handoff_card"
    STATUS_BADGE = "status_badge"
    SCORE_BREAKDOWN = "score_breakdown"

    # General purpose
    STAT_CARD = "stat_card"
    INFO_CARD = "info_card"
    QUOTE_CARD = "quote_card"
    RECOMMENDATION_CARD = "recommendation_card"
    CHECKLIST_CARD = "checklist_card"
    PROGRESS_CARD = "progress_card"
    EXECUTIVE_SUMMARY = "executive_summary"
    DATA_LIST = "data_list"

    # Risk analysis
    FACTOR_BREAKDOWN = "factor_breakdown"
    NEWS_EVENTS = "news_events"
    ALTERNATIVES_PREVIEW = "alternatives_preview"
    CONCENTRATION_WARNING = "concentration_warning"

    # Inflation watch
    INFLATION_SUMMARY_CARD = "inflation_summary_card"
    PRICE_MOVEMENT_TABLE = "price_movement_table"
    COMMODITY_GAUGE = "commodity_gauge"
    TOP_MOVERS_LIST = "top_movers_list"
    DRIVER_BREAKDOWN_CARD = "driver_breakdown_card"
    FACTOR_CONTRIBUTION_CHART = "factor_contribution_chart"
    MARKET_CONTEXT_CARD = "market_context_card"
    SPEND_IMPACT_CARD = "spend_impact_card"
    EXPOSURE_HEATMAP = "exposure_heatmap"
    BUDGET_VARIANCE_CARD = "budget_variance_card"
    JUSTIFICATION_CARD = "justification_card"
    MARKET_FAIRNESS_GAUGE = "market_fairness_gauge"
    NEGOTIATION_AMMO_CARD = "negotiation_ammo_card"
    SCENARIO_CARD = "scenario_card"
    FORECAST_CHART = "forecast_chart"
    SENSITIVITY_TABLE = "sensitivity_table"
    EXECUTIVE_BRIEF_CARD = "executive_brief_card"
    TALKING_POINTS_CARD = "talking_points_card"

    # Text only
    NONE = "none"
