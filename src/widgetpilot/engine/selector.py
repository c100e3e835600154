"""
WidgetPilot Component Selector

Picks the presentation component for a data context on a surface.

Selection is winner-take-all: every rule whose predicate holds is a
candidate, the highest priority wins, and ties go to the rule that comes
first in the table. No match means None, never an error.

Resolution wraps selection in the caller-side fallback chain:
1. Rule selection
2. Type-keyed widget registry lookup for an attached payload
3. Placeholder naming an unrecognized widget tag

A "none" component resolves to nothing, and a component identifier that
neither the rules nor the registry know is replaced by a placeholder.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Optional, Union

from ..models import ComponentConfig, DataContext, Surface, UnknownWidget
from ..models.component import NO_COMPONENT, PLACEHOLDER_COMPONENT
from ..models.registry import WidgetRegistry
from ..packs import default_widget_registry
from .rules import SELECTION_RULES, RuleSet
from .widget_lookup import config_from_widget

logger = logging.getLogger(__name__)


SurfaceLike = Union[Surface, str]


@dataclass
class ComponentSelector:
    """
    Evaluates the selection table against data contexts.

    Usage:
        selector = ComponentSelector()

        config = selector.select(context, Surface.INLINE)
        config = selector.resolve(context, "panel")

        for row in selector.explain(context, Surface.INLINE):
            print(row["rule_id"], row["matches"])
    """

    rules: RuleSet = SELECTION_RULES
    registry: WidgetRegistry = field(default_factory=default_widget_registry)

    def select(self, context: DataContext, surface: SurfaceLike) -> Optional[ComponentConfig]:
        """
        Select the component for a context on a surface.

        Args:
            context: Data context for the turn
            surface: Surface member or name (aliases such as "chat" accepted)

        Returns:
            Configuration of the winning rule, or None when no rule matches

        Raises:
            InvalidSurfaceError: If the surface name is not recognized
        """
        surface = Surface.parse(surface)
        candidates = self.rules.matching(context, surface)
        if not candidates:
            logger.debug(
                "No rule matched intent '%s' on %s", context.intent_label, surface.value,
                extra={"intent": context.intent_label, "surface": surface.value},
            )
            return None

        winner = candidates[0]
        logger.debug(
            "Rule %s selected %s (%d candidates)", winner.id, winner.component, len(candidates),
            extra={"rule_id": winner.id, "intent": context.intent_label, "surface": surface.value},
        )
        return winner.configure(context, surface)

    def resolve(self, context: DataContext, surface: SurfaceLike) -> Optional[ComponentConfig]:
        """
        Select with the fallback chain applied.

        Returns:
            A renderable configuration, or None when nothing should render
        """
        surface = Surface.parse(surface)
        config = self.select(context, surface)

        if config is None and context.widget is not None:
            config = config_from_widget(context.widget, self.registry)
            if config is not None:
                logger.info(
                    "No rule matched; rendering widget payload '%s' with %s",
                    context.widget_tag, config.component,
                    extra={"widget_type": context.widget_tag, "surface": surface.value},
                )
            elif isinstance(context.widget, UnknownWidget):
                config = ComponentConfig.placeholder(context.widget.tag, rule_id=f"widget:{context.widget.tag}")

        if config is None or config.renders_nothing:
            return None

        if not self.is_known_component(config.component):
            logger.warning(
                "Unknown component '%s' from %s", config.component, config.rule_id,
                extra={"rule_id": config.rule_id, "surface": surface.value},
            )
            return ComponentConfig.placeholder(config.component, rule_id=config.rule_id or "placeholder")
        return config

    def explain(self, context: DataContext, surface: SurfaceLike) -> list[dict[str, Any]]:
        """Every rule in table order with its priority and whether it matches."""
        surface = Surface.parse(surface)
        return [
            {
                "rule_id": rule.id,
                "priority": rule.priority,
                "component": rule.component,
                "matches": rule.matches(context, surface),
            }
            for rule in self.rules
        ]

    def known_components(self) -> frozenset[str]:
        """Component identifiers the rules and the registry can produce."""
        return self.rules.components() | self.registry.components() | {PLACEHOLDER_COMPONENT}

    def is_known_component(self, component: str) -> bool:
        return component == NO_COMPONENT or component in self.known_components()


# =============================================================================
# Module-level Entry Points
# =============================================================================

@lru_cache(maxsize=1)
def get_default_selector() -> ComponentSelector:
    """Process-wide selector over the default rules and registry."""
    return ComponentSelector()


def select_component(context: DataContext, surface: SurfaceLike) -> Optional[ComponentConfig]:
    """Select the component for a context on a surface; None when no rule matches."""
    return get_default_selector().select(context, surface)


def resolve_component(context: DataContext, surface: SurfaceLike) -> Optional[ComponentConfig]:
    """Select with the widget registry and placeholder fallbacks applied."""
    return get_default_selector().resolve(context, surface)


def debug_selection(context: DataContext, surface: SurfaceLike) -> list[dict[str, Any]]:
    return get_default_selector().explain(context, surface)
