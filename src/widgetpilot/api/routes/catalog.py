"""Rule table and widget registry listings."""

from typing import Optional

from fastapi import APIRouter

from widgetpilot.api.routes import selection
from widgetpilot.api.schemas.responses import RuleSummary, WidgetSummary
from widgetpilot.models import Surface

router = APIRouter(tags=["Catalog"])


@router.get("/rules", response_model=list[RuleSummary])
async def list_rules(surface: Optional[str] = None, intent: Optional[str] = None):
    """
    List the selection rules in evaluation order.

    Optionally filter by surface or intent. Rules without an intent list
    apply to every intent and are always included by the intent filter.
    """
    rules = [r.to_dict() for r in selection.current_selector().rules]
    if surface:
        wanted = Surface.parse(surface).value
        rules = [r for r in rules if wanted in r["surfaces"]]
    if intent:
        rules = [r for r in rules if not r["intents"] or intent in r["intents"]]
    return [RuleSummary(**r) for r in rules]


@router.get("/widgets", response_model=list[WidgetSummary])
async def list_widgets(category: Optional[str] = None):
    """List the widget registry. Optionally filter by category."""
    registry = selection.current_selector().registry
    entries = registry.by_category(category) if category else list(registry)
    return [WidgetSummary(**e.to_dict()) for e in entries]
