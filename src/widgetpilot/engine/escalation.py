"""
WidgetPilot Escalation

Moves a compact inline component to its richer panel counterpart.

A configuration advertises expands_to when a richer view exists. Expanding
re-runs full selection for the same context on the next richer surface,
so the expanded view goes through the same rules as any other selection.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Optional

from ..models import ComponentConfig, DataContext, Surface
from .selector import ComponentSelector, SurfaceLike, get_default_selector
from .transformers import copy_payload


# Next richer surface for each surface
ESCALATION_PATH = MappingProxyType({
    Surface.INLINE: Surface.PANEL,
    Surface.INLINE_COMPACT: Surface.PANEL,
    Surface.STANDALONE: Surface.PANEL,
    Surface.PANEL: Surface.PANEL_EXPANDED,
})


def next_surface(surface: SurfaceLike) -> Optional[Surface]:
    """Next richer surface, or None for the expanded panel."""
    return ESCALATION_PATH.get(Surface.parse(surface))


@dataclass(frozen=True)
class Escalation:
    """
    Result of expanding a component.

    Attributes:
        source: Configuration selected on the original surface
        surface: Surface the expanded configuration was selected for
        config: Expanded configuration
        advertised: The expands_to target the source advertised
    """
    source: ComponentConfig
    surface: Surface
    config: ComponentConfig
    advertised: str

    @property
    def matches_advertised(self) -> bool:
        return self.config.component == self.advertised

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source.to_dict(),
            "surface": self.surface.value,
            "config": self.config.to_dict(),
            "advertised": self.advertised,
            "matches_advertised": self.matches_advertised,
        }


def expand(
    context: DataContext,
    from_surface: SurfaceLike = Surface.INLINE,
    to_surface: Optional[SurfaceLike] = None,
    selector: Optional[ComponentSelector] = None,
) -> Optional[Escalation]:
    """
    Expand the component selected on from_surface.

    Args:
        context: Data context for the turn
        from_surface: Surface the compact component was selected on
        to_surface: Target surface; defaults to the next richer one
        selector: Selector to use; defaults to the process-wide one

    The source is the configuration the turn actually renders on
    from_surface, including the widget registry fallback.

    Returns:
        Escalation, or None when nothing renders, the rendered component
        does not advertise an expansion, or there is no richer surface
    """
    selector = selector or get_default_selector()
    source_surface = Surface.parse(from_surface)

    source = selector.resolve(context, source_surface)
    if source is None or not source.expands_to:
        return None

    target = Surface.parse(to_surface) if to_surface is not None else next_surface(source_surface)
    if target is None:
        return None

    expanded = selector.select(context, target)
    if expanded is None:
        # The richer surface has no rule for this context; render the
        # advertised target with the source's parameters.
        expanded = ComponentConfig(
            component=source.expands_to,
            props=copy_payload(source.props),
            rule_id=f"expand:{source.rule_id}",
        )

    return Escalation(
        source=source,
        surface=target,
        config=expanded,
        advertised=source.expands_to,
    )


def get_artifact_component(
    context: DataContext,
    selector: Optional[ComponentSelector] = None,
) -> Optional[ComponentConfig]:
    """
    Panel configuration for a turn whose inline component can expand.

    Returns None when the inline selection advertises no expansion, even
    if a panel rule would match the context.
    """
    selector = selector or get_default_selector()
    inline = selector.select(context, Surface.INLINE)
    if inline is None or not inline.expands_to:
        return None
    return selector.select(context, Surface.PANEL)
