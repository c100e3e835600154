"""
WidgetPilot Component Configuration

The output of selection: which presentation component to render and
with what parameters. Configurations are created on demand, never
cached and never mutated.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Optional

from .enums import SizeClass


# Component identifier meaning "render nothing"
NO_COMPONENT = "none"

# Component rendered for unrecognized widget tags or component identifiers
PLACEHOLDER_COMPONENT = "PlaceholderWidget"


@dataclass(frozen=True)
class ComponentConfig:
    """
    A selected presentation component.

    Attributes:
        component: Component identifier understood by the renderer
        props: Parameters passed to the component
        variant: Optional visual variant ("compact", "inline", "warning", ...)
        size: Optional size class
        expands_to: Richer component this one can be expanded into
        rule_id: Rule or fallback that produced this configuration
    """
    component: str
    props: dict[str, Any] = field(default_factory=dict)
    variant: Optional[str] = None
    size: Optional[SizeClass] = None
    expands_to: Optional[str] = None
    rule_id: Optional[str] = None

    @property
    def renders_nothing(self) -> bool:
        return self.component == NO_COMPONENT

    @classmethod
    def placeholder(cls, label: str, rule_id: str = "placeholder") -> ComponentConfig:
        """Configuration for a labeled placeholder naming what was not recognized."""
        return cls(component=PLACEHOLDER_COMPONENT, props={"type": label}, rule_id=rule_id)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "component": self.component,
            "props": copy.deepcopy(self.props),
        }
        if self.variant is not None:
            result["variant"] = self.variant
        if self.size is not None:
            result["size"] = self.size.value
        if self.expands_to is not None:
            result["expands_to"] = self.expands_to
        if self.rule_id is not None:
            result["rule_id"] = self.rule_id
        return result
