"""
WidgetPilot Confidence Policy

Which internal provider types count as proprietary coverage when
classifying source confidence. Loaded from the confidence policy pack.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .enums import ProviderType
from .sources import InternalSource


@dataclass(frozen=True)
class ConfidencePolicy:
    """
    Attributes:
        counted_provider_types: Provider tags counted as proprietary sources
        version: Pack version the policy was loaded from
    """
    counted_provider_types: frozenset[str] = frozenset({ProviderType.BEROE.value})
    version: str = "builtin"

    def counts(self, source: InternalSource) -> bool:
        """Whether an internal source counts towards proprietary coverage."""
        tag = source.type.value if isinstance(source.type, ProviderType) else source.type
        return tag in self.counted_provider_types

    def to_dict(self) -> dict[str, Any]:
        return {
            "counted_provider_types": sorted(self.counted_provider_types),
            "version": self.version,
        }


# Used when no pack is supplied: proprietary sources only
BUILTIN_CONFIDENCE_POLICY = ConfidencePolicy()
