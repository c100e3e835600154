"""
WidgetPilot Widget Payloads

A widget payload is a pre-shaped data blob the upstream router attached
to a response, tagged with the widget type it was shaped for.

The payload is a tagged union: KnownWidget carries a member of the
closed WidgetType set, UnknownWidget keeps an unrecognized tag so the
fallback path can name it in a placeholder.
"""
from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from ..exceptions import InvalidContextError
from .enums import WidgetType


@dataclass(frozen=True)
class KnownWidget:
    """Payload whose tag is a known widget type."""
    type: WidgetType
    data: Any = None

    @property
    def tag(self) -> str:
        return self.type.value

    @property
    def has_data(self) -> bool:
        return self.data is not None

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.tag, "data": copy.deepcopy(self.data)}


@dataclass(frozen=True)
class UnknownWidget:
    """Payload whose tag is not in the widget type set."""
    tag: str
    data: Any = None

    @property
    def has_data(self) -> bool:
        return self.data is not None

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.tag, "data": copy.deepcopy(self.data)}


Widget = Union[KnownWidget, UnknownWidget]


def parse_widget(raw: Union[Widget, Mapping[str, Any], None]) -> Optional[Widget]:
    """
    Convert an upstream {"type": ..., "data": ...} mapping to a widget payload.

    The data blob is deep-copied so later changes to the upstream object
    cannot leak into a context or a component configuration. A mapping
    with a missing or non-string tag becomes an UnknownWidget ("" or the
    tag's string form), so the placeholder path can still show it.

    Raises:
        InvalidContextError: If the payload is not a mapping at all
    """
    if raw is None:
        return None
    if isinstance(raw, (KnownWidget, UnknownWidget)):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidContextError(
            message="Widget payload must be a mapping",
            details={"widget": repr(raw)[:200]},
        )

    tag = raw.get("type")
    data = copy.deepcopy(raw.get("data"))
    if not isinstance(tag, str):
        return UnknownWidget(tag="" if tag is None else str(tag), data=data)
    try:
        return KnownWidget(type=WidgetType(tag), data=data)
    except ValueError:
        return UnknownWidget(tag=tag, data=data)
