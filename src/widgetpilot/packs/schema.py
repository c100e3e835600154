"""
WidgetPilot Pack Schemas

Pydantic models for validating configuration pack YAML/JSON files.

Two pack kinds exist:
- Widget registry: metadata for every widget type tag
- Confidence policy: which provider types count as proprietary sources

Schema versioning:
- schema_version field tracks breaking changes
- Loaders reject packs whose major version differs
"""
from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..models import ProviderType, WidgetType


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Enums as Literals (for YAML validation)
# =============================================================================

PropsStyleValue = Literal["wrap", "spread", "events"]

_WIDGET_TYPES = {t.value for t in WidgetType}
_PROVIDER_TYPES = {p.value for p in ProviderType}


# =============================================================================
# Widget Registry
# =============================================================================

class WidgetTypeSchema(BaseModel):
    """Registry entry for one widget type tag."""
    type: str = Field(..., description="Widget type tag")
    component: str = Field(..., min_length=1, description="Component rendering the payload")
    name: str = Field("", description="Display name")
    category: str = Field("general", description="Grouping for listings")
    props_style: PropsStyleValue = Field(
        "wrap", description="wrap: {data: payload}; spread: payload keys; events: feed list"
    )
    expands_to: Optional[str] = Field(None, description="Richer component for expansion")
    enabled: bool = Field(True, description="Disabled types have no renderer")

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        """Widget type must be a known tag."""
        if v not in _WIDGET_TYPES:
            raise ValueError(f"Unknown widget type '{v}'")
        if v == WidgetType.NONE.value:
            raise ValueError("The 'none' widget type renders nothing and cannot be registered")
        return v

    model_config = {
        "extra": "forbid",
    }


class WidgetRegistrySchema(BaseModel):
    """Top-level schema for a widget registry pack."""
    schema_version: str = Field(SCHEMA_VERSION, description="Schema version for compatibility")
    version: str = Field(..., description="Pack version string")
    description: Optional[str] = None
    widgets: list[WidgetTypeSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_types(self) -> WidgetRegistrySchema:
        """Each widget type appears once."""
        seen: set[str] = set()
        duplicates = []
        for widget in self.widgets:
            if widget.type in seen:
                duplicates.append(widget.type)
            seen.add(widget.type)
        if duplicates:
            raise ValueError(f"Duplicate widget types: {', '.join(sorted(set(duplicates)))}")
        return self

    model_config = {
        "extra": "forbid",
    }


# =============================================================================
# Confidence Policy
# =============================================================================

class ConfidencePolicySchema(BaseModel):
    """Top-level schema for a confidence policy pack."""
    schema_version: str = Field(SCHEMA_VERSION, description="Schema version for compatibility")
    version: str = Field(..., description="Pack version string")
    description: Optional[str] = None
    counted_provider_types: list[str] = Field(
        ..., min_length=1, description="Provider tags counted as proprietary sources"
    )

    @field_validator("counted_provider_types")
    @classmethod
    def validate_provider_types(cls, v: list[str]) -> list[str]:
        """Provider tags must be known."""
        unknown = [p for p in v if p not in _PROVIDER_TYPES]
        if unknown:
            raise ValueError(f"Unknown provider types: {', '.join(unknown)}")
        return v

    model_config = {
        "extra": "forbid",
    }


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_widget_registry(data: dict[str, Any]) -> WidgetRegistrySchema:
    """
    Validate a widget registry dictionary.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return WidgetRegistrySchema.model_validate(data)


def validate_confidence_policy(data: dict[str, Any]) -> ConfidencePolicySchema:
    """
    Validate a confidence policy dictionary.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return ConfidencePolicySchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """
    Check if a pack's schema version is compatible.

    Only the major version has to match.
    """
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    return pack_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]
