"""Component selection endpoints."""

from typing import Optional

from fastapi import APIRouter

from widgetpilot.api.schemas.requests import ExpandRequest, SelectRequest
from widgetpilot.api.schemas.responses import ComponentOut, ExpandResponse, SelectResponse
from widgetpilot.config import get_settings
from widgetpilot.engine import ComponentSelector, expand, get_default_selector
from widgetpilot.models import ComponentConfig, Surface

router = APIRouter(tags=["Selection"])

# Shared selector instance (set by main.py)
selector: Optional[ComponentSelector] = None


def set_selector(s: ComponentSelector):
    global selector
    selector = s


def current_selector() -> ComponentSelector:
    return selector or get_default_selector()


def _surface(value: Optional[str]) -> Surface:
    if value is None:
        return get_settings().default_surface
    return Surface.parse(value)


def _out(config: Optional[ComponentConfig]) -> Optional[ComponentOut]:
    return ComponentOut(**config.to_dict()) if config is not None else None


@router.post("/select", response_model=SelectResponse)
async def select(request: SelectRequest):
    """
    Select the component for one conversational turn.

    `component` is what the client should render (null = render nothing);
    `selected` is what the rule table chose before the widget registry and
    placeholder fallbacks.
    """
    context = request.to_context()
    surface = _surface(request.surface)
    s = current_selector()

    return SelectResponse(
        intent=context.intent_label,
        surface=surface.value,
        component=_out(s.resolve(context, surface)),
        selected=_out(s.select(context, surface)),
    )


@router.post("/expand", response_model=ExpandResponse)
async def expand_component(request: ExpandRequest):
    """Expand the component selected on `surface` to a richer surface."""
    context = request.to_context()
    from_surface = _surface(request.surface)
    to_surface = Surface.parse(request.to_surface) if request.to_surface else None

    escalation = expand(context, from_surface, to_surface, selector=current_selector())
    if escalation is None:
        return ExpandResponse(
            intent=context.intent_label,
            from_surface=from_surface.value,
            expanded=False,
        )

    return ExpandResponse(
        intent=context.intent_label,
        from_surface=from_surface.value,
        expanded=True,
        surface=escalation.surface.value,
        source=_out(escalation.source),
        component=_out(escalation.config),
        advertised=escalation.advertised,
        matches_advertised=escalation.matches_advertised,
    )
