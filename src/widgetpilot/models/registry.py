"""
WidgetPilot Widget Registry

Static metadata for every widget type tag: the component that renders a
raw payload of that type, how the payload becomes component parameters,
and the richer component it can expand into.

The registry is the type-keyed lookup used when no selection rule
matches but upstream attached a widget payload.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Optional

from .enums import WidgetType


class PropsStyle(str, Enum):
    """How a widget payload is turned into component parameters."""
    WRAP = "wrap"      # {"data": payload}
    SPREAD = "spread"  # payload keys become parameters
    EVENTS = "events"  # {"events": [...]} extracted from a feed payload


@dataclass(frozen=True)
class WidgetTypeEntry:
    """
    Registry metadata for one widget type.

    Attributes:
        type: Widget type tag
        component: Component identifier rendering this type
        name: Display name
        category: Grouping used in listings
        props_style: How the payload maps onto parameters
        expands_to: Richer component for panel expansion
        enabled: Disabled types have metadata but no renderer
    """
    type: WidgetType
    component: str
    name: str = ""
    category: str = "general"
    props_style: PropsStyle = PropsStyle.WRAP
    expands_to: Optional[str] = None
    enabled: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "component": self.component,
            "name": self.name,
            "category": self.category,
            "props_style": self.props_style.value,
            "expands_to": self.expands_to,
            "enabled": self.enabled,
        }


class WidgetRegistry:
    """
    Read-only, type-keyed collection of widget metadata.

    Usage:
        registry = WidgetRegistry(entries)
        entry = registry.get(WidgetType.PRICE_GAUGE)
    """

    def __init__(self, entries: Iterable[WidgetTypeEntry], version: str = "builtin"):
        by_type: dict[WidgetType, WidgetTypeEntry] = {}
        for entry in entries:
            by_type[entry.type] = entry
        self._entries = MappingProxyType(by_type)
        self.version = version

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[WidgetTypeEntry]:
        return iter(self._entries.values())

    def __contains__(self, widget_type: object) -> bool:
        return widget_type in self._entries

    def get(self, widget_type: WidgetType) -> Optional[WidgetTypeEntry]:
        """Get metadata for a widget type."""
        return self._entries.get(widget_type)

    def component_for_type(self, widget_type: WidgetType) -> Optional[str]:
        """Component rendering a widget type, or None for disabled/unknown types."""
        entry = self._entries.get(widget_type)
        if entry is None or not entry.enabled:
            return None
        return entry.component

    def artifact_for_type(self, widget_type: WidgetType) -> Optional[str]:
        """Richer component a widget type expands into."""
        entry = self._entries.get(widget_type)
        return entry.expands_to if entry else None

    def components(self) -> frozenset[str]:
        """Identifiers of every enabled component and expansion target."""
        names: set[str] = set()
        for entry in self._entries.values():
            if entry.enabled:
                names.add(entry.component)
            if entry.expands_to:
                names.add(entry.expands_to)
        return frozenset(names)

    def by_category(self, category: str) -> list[WidgetTypeEntry]:
        return [e for e in self._entries.values() if e.category == category]
