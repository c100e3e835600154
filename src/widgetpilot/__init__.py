"""
WidgetPilot - Presentation Decisions for a Procurement Assistant

WidgetPilot decides how an AI procurement assistant shows its answers.
Given the classified intent of a conversational turn and the data the
retrieval layer produced, it picks the visual component to render on the
current surface, and it grades the evidence behind the answer for the
"Decision Grade" trust badge.

Key Features:
- Declarative, prioritized selection rules per intent and surface
- Widget registry fallback for payloads no rule claims
- Escalation from inline cards to richer panel artifacts
- Source-confidence tiers driven by proprietary coverage
- Managed-category matching tolerant of qualifiers and word order

Quick Start:
    from widgetpilot import (
        Intent, Surface, build_data_context,
        select_component, resolve_component, expand,
        build_response_sources, calculate_source_confidence,
    )

    context = build_data_context(Intent.PORTFOLIO_OVERVIEW, portfolio=portfolio)
    config = select_component(context, Surface.INLINE)

    sources = build_response_sources(raw_sources, detected_category="Steel",
                                     managed_categories=["Steel (Hot Rolled Coil)"])
    badge = sources.confidence.level

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "WidgetPilot Team"

# =============================================================================
# Core Models (Re-exported for convenience)
# =============================================================================
from .models import (
    # Enums
    ConfidenceLevel,
    DataKind,
    Intent,
    ProviderType,
    RiskLevel,
    SizeClass,
    Surface,
    WidgetType,
    # Domain data
    Portfolio,
    RiskChange,
    RiskDistribution,
    Supplier,
    SupplierRiskScore,
    # Context and output
    ComponentConfig,
    DataContext,
    build_data_context,
    # Sources
    ConfidenceDescriptor,
    InternalSource,
    ResponseSources,
    WebSource,
)

# =============================================================================
# Engine
# =============================================================================
from .engine import (
    ComponentSelector,
    Escalation,
    build_response_sources,
    calculate_source_confidence,
    expand,
    matches_any_category,
    resolve_component,
    select_component,
)

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    DuplicateRuleError,
    InvalidContextError,
    InvalidSurfaceError,
    PackLoadError,
    PackValidationError,
    PackVersionMismatch,
    RuleDefinitionError,
    WidgetPilotError,
)

__all__ = [
    "__version__",
    # Enums
    "ConfidenceLevel",
    "DataKind",
    "Intent",
    "ProviderType",
    "RiskLevel",
    "SizeClass",
    "Surface",
    "WidgetType",
    # Domain data
    "Portfolio",
    "RiskChange",
    "RiskDistribution",
    "Supplier",
    "SupplierRiskScore",
    # Context and output
    "ComponentConfig",
    "DataContext",
    "build_data_context",
    # Sources
    "ConfidenceDescriptor",
    "InternalSource",
    "ResponseSources",
    "WebSource",
    # Engine
    "ComponentSelector",
    "Escalation",
    "build_response_sources",
    "calculate_source_confidence",
    "expand",
    "matches_any_category",
    "resolve_component",
    "select_component",
    # Exceptions
    "DuplicateRuleError",
    "InvalidContextError",
    "InvalidSurfaceError",
    "PackLoadError",
    "PackValidationError",
    "PackVersionMismatch",
    "RuleDefinitionError",
    "WidgetPilotError",
]
