"""
WidgetPilot Models

Domain models for the WidgetPilot component selection layer.

Exports all models organized by category for convenient imports:

    from widgetpilot.models import (
        # Enums
        Intent, Surface, SizeClass, DataKind, WidgetType,
        # Domain data
        Supplier, Portfolio, RiskChange,
        # Context
        DataContext, build_data_context,
        # Output
        ComponentConfig,
        # Sources
        ResponseSources, InternalSource, WebSource, ConfidenceDescriptor,
    )
"""
from __future__ import annotations

# =============================================================================
# Enums
# =============================================================================
from .enums import (
    ChangeDirection,
    ConfidenceLevel,
    DataKind,
    Intent,
    ProviderType,
    RiskLevel,
    SizeClass,
    SubIntent,
    Surface,
    TrendDirection,
    WidgetType,
)

# =============================================================================
# Domain Data
# =============================================================================
from .domain import (
    Location,
    Portfolio,
    RiskChange,
    RiskDistribution,
    RiskFactor,
    Supplier,
    SupplierRiskScore,
)

# =============================================================================
# Widget Payloads & Context
# =============================================================================
from .widget import KnownWidget, UnknownWidget, Widget, parse_widget
from .context import DataContext, build_data_context

# =============================================================================
# Component Configuration
# =============================================================================
from .component import NO_COMPONENT, PLACEHOLDER_COMPONENT, ComponentConfig

# =============================================================================
# Sources
# =============================================================================
from .sources import ConfidenceDescriptor, InternalSource, ResponseSources, WebSource


__all__ = [
    # Enums
    "ChangeDirection",
    "ConfidenceLevel",
    "DataKind",
    "Intent",
    "ProviderType",
    "RiskLevel",
    "SizeClass",
    "SubIntent",
    "Surface",
    "TrendDirection",
    "WidgetType",
    # Domain data
    "Location",
    "Portfolio",
    "RiskChange",
    "RiskDistribution",
    "RiskFactor",
    "Supplier",
    "SupplierRiskScore",
    # Widget payloads & context
    "KnownWidget",
    "UnknownWidget",
    "Widget",
    "parse_widget",
    "DataContext",
    "build_data_context",
    # Component configuration
    "NO_COMPONENT",
    "PLACEHOLDER_COMPONENT",
    "ComponentConfig",
    # Sources
    "ConfidenceDescriptor",
    "InternalSource",
    "ResponseSources",
    "WebSource",
]
