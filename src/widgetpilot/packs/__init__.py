"""
WidgetPilot Configuration Packs

Schema validation and loading for the static tables the engine consumes.

Packs are YAML or JSON files:
- widget_registry.yaml: component and expansion metadata per widget type
- confidence_policy.yaml: provider types counted as proprietary sources

Usage:
    from widgetpilot.packs import PackLoader, default_widget_registry

    registry = default_widget_registry()
    policy = PackLoader().load_confidence_policy("path/to/policy.yaml")
"""
from __future__ import annotations

from .loader import (
    DEFAULT_CONFIDENCE_POLICY_PATH,
    DEFAULT_WIDGET_REGISTRY_PATH,
    PackLoader,
    default_confidence_policy,
    default_widget_registry,
    load_confidence_policy,
    load_widget_registry,
)
from .schema import (
    SCHEMA_VERSION,
    ConfidencePolicySchema,
    WidgetRegistrySchema,
    WidgetTypeSchema,
    check_schema_version,
    validate_confidence_policy,
    validate_widget_registry,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Loader
    "PackLoader",
    "load_widget_registry",
    "load_confidence_policy",
    "default_widget_registry",
    "default_confidence_policy",
    "DEFAULT_WIDGET_REGISTRY_PATH",
    "DEFAULT_CONFIDENCE_POLICY_PATH",
    # Validation
    "validate_widget_registry",
    "validate_confidence_policy",
    "check_schema_version",
    # Schemas
    "WidgetTypeSchema",
    "WidgetRegistrySchema",
    "ConfidencePolicySchema",
]
