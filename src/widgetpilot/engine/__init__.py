"""
WidgetPilot Engine

Decision services for the procurement assistant's presentation layer.

Services:
- ComponentSelector: Pick the component for a data context on a surface
- expand: Escalate a compact component to its richer panel view
- calculate_source_confidence: Classify the evidence behind a response
- build_response_sources: Normalize raw response sources
- matches_any_category: Managed-category matching

Usage:
    from widgetpilot.engine import (
        ComponentSelector,
        select_component,
        resolve_component,
        expand,
        calculate_source_confidence,
    )
"""
from __future__ import annotations

# Category matching and confidence
from .category_matcher import (
    matches_any_category,
    matches_category,
    normalize_category,
)
from .confidence import (
    CONFIDENCE_LABELS,
    calculate_source_confidence,
    count_proprietary_sources,
    get_confidence_label,
    should_show_decision_grade_badge,
    should_suggest_web_expansion,
)
from .source_builder import (
    build_response_sources,
    extract_domain,
    map_internal_type,
    normalize_url,
)

# Component selection
from .rules import (
    SELECTION_RULES,
    Rendering,
    RuleSet,
    SelectionRule,
    default_rules,
)
from .selector import (
    ComponentSelector,
    debug_selection,
    get_default_selector,
    resolve_component,
    select_component,
)
from .widget_lookup import config_from_widget, widget_props
from .escalation import (
    ESCALATION_PATH,
    Escalation,
    expand,
    get_artifact_component,
    next_surface,
)

__all__ = [
    # Category matching
    "matches_any_category",
    "matches_category",
    "normalize_category",
    # Confidence
    "CONFIDENCE_LABELS",
    "calculate_source_confidence",
    "count_proprietary_sources",
    "get_confidence_label",
    "should_show_decision_grade_badge",
    "should_suggest_web_expansion",
    # Sources
    "build_response_sources",
    "extract_domain",
    "map_internal_type",
    "normalize_url",
    # Rules
    "SELECTION_RULES",
    "Rendering",
    "RuleSet",
    "SelectionRule",
    "default_rules",
    # Selection
    "ComponentSelector",
    "debug_selection",
    "get_default_selector",
    "resolve_component",
    "select_component",
    "config_from_widget",
    "widget_props",
    # Escalation
    "ESCALATION_PATH",
    "Escalation",
    "expand",
    "get_artifact_component",
    "next_surface",
]
