"""Response schemas for the API."""

from typing import Any, Optional

from pydantic import BaseModel


class ComponentOut(BaseModel):
    """A selected component configuration."""
    component: str
    props: dict[str, Any]
    variant: Optional[str] = None
    size: Optional[str] = None  # sm|md|lg|full
    expands_to: Optional[str] = None
    rule_id: Optional[str] = None


class SelectResponse(BaseModel):
    """Response from component selection."""
    intent: str
    surface: str
    # Resolved configuration; None when nothing should render
    component: Optional[ComponentOut] = None
    # What the rules alone selected, before fallbacks
    selected: Optional[ComponentOut] = None


class ExpandResponse(BaseModel):
    """Response from expanding a component."""
    intent: str
    from_surface: str
    expanded: bool
    surface: Optional[str] = None
    source: Optional[ComponentOut] = None
    component: Optional[ComponentOut] = None
    advertised: Optional[str] = None
    matches_advertised: Optional[bool] = None


class ConfidenceOut(BaseModel):
    level: str  # high|medium|low|web_only
    label: str
    reason: str
    is_managed_category: bool
    category_name: Optional[str] = None
    beroe_source_count: int
    web_source_count: int
    show_expand_to_web: bool
    decision_grade: bool


class ConfidenceResponse(BaseModel):
    """Response from source-confidence classification."""
    confidence: ConfidenceOut
    sources: dict[str, Any]
    policy_version: str


class RuleSummary(BaseModel):
    id: str
    priority: int
    component: str
    surfaces: list[str]
    intents: list[str]
    requires: list[str]
    widget_types: list[str]
    expands_to: Optional[str] = None
    description: str = ""


class WidgetSummary(BaseModel):
    type: str
    component: str
    name: str
    category: str
    props_style: str
    expands_to: Optional[str] = None
    enabled: bool


class HealthResponse(BaseModel):
    healthy: bool
    version: str
    rules_loaded: int
    widget_types_loaded: int
    registry_version: str
    policy_version: str
