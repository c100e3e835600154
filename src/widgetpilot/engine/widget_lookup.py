"""
WidgetPilot Widget Lookup

Type-keyed fallback: when no selection rule matches but upstream attached
a widget payload, render the payload with the component the widget
registry names for its tag.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from ..models import ComponentConfig, KnownWidget, UnknownWidget, Widget, WidgetType
from ..models.registry import PropsStyle, WidgetRegistry, WidgetTypeEntry
from .transformers import copy_payload, extract_events

logger = logging.getLogger(__name__)


def widget_props(entry: WidgetTypeEntry, data: Any) -> dict[str, Any]:
    """Shape a widget payload into component parameters per the entry's props style."""
    if entry.props_style == PropsStyle.EVENTS:
        return {"events": extract_events(data)}
    if entry.props_style == PropsStyle.SPREAD and isinstance(data, Mapping):
        return copy_payload(dict(data))
    return {"data": copy_payload(data)}


def config_from_widget(widget: Optional[Widget], registry: WidgetRegistry) -> Optional[ComponentConfig]:
    """
    Build a configuration straight from a widget payload.

    Returns None when there is nothing to render: no payload, the "none"
    tag, a payload without data, an unknown tag, or a type the registry
    has no enabled renderer for. Unknown tags are handled by the caller,
    which can name them in a placeholder.
    """
    if widget is None or not widget.has_data:
        return None
    if isinstance(widget, UnknownWidget):
        logger.warning("No registry entry for unknown widget type '%s'", widget.tag,
                       extra={"widget_type": widget.tag})
        return None
    if not isinstance(widget, KnownWidget) or widget.type == WidgetType.NONE:
        return None

    entry = registry.get(widget.type)
    if entry is None or not entry.enabled:
        logger.info("Widget type '%s' has no enabled renderer", widget.tag,
                    extra={"widget_type": widget.tag})
        return None

    return ComponentConfig(
        component=entry.component,
        props=widget_props(entry, widget.data),
        expands_to=entry.expands_to,
        rule_id=f"widget:{widget.tag}",
    )
