"""
WidgetPilot Response Sources

The evidence behind an answer: web sources found by external research
and internal sources from licensed providers. The confidence classifier
reduces these to a ConfidenceDescriptor that drives the trust badge.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from .enums import ConfidenceLevel, ProviderType


@dataclass(frozen=True)
class WebSource:
    """A source found by external web research."""
    name: str
    url: str
    domain: Optional[str] = None
    date: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name, "url": self.url}
        if self.domain:
            result["domain"] = self.domain
        if self.date:
            result["date"] = self.date
        return result


@dataclass(frozen=True)
class InternalSource:
    """
    A source from a licensed data provider.

    The type is a ProviderType member for recognized tags; other tags are
    kept as raw strings and never count towards confidence.
    """
    name: str
    type: Union[ProviderType, str]
    report_id: Optional[str] = None
    category: Optional[str] = None
    summary: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "name": self.name,
            "type": self.type.value if isinstance(self.type, ProviderType) else self.type,
        }
        if self.report_id:
            result["reportId"] = self.report_id
        if self.category:
            result["category"] = self.category
        if self.summary:
            result["summary"] = self.summary
        return result


@dataclass(frozen=True)
class ConfidenceDescriptor:
    """
    Trust classification for one response.

    Attributes:
        level: Confidence tier
        reason: Human-readable explanation
        is_managed_category: Whether the detected category is one the
            user manages with full proprietary coverage
        category_name: Detected category as given by the caller
        beroe_source_count: Number of counted proprietary sources
        web_source_count: Number of web sources
        show_expand_to_web: Whether to suggest expanding to web research
    """
    level: ConfidenceLevel
    reason: str
    is_managed_category: bool
    category_name: Optional[str]
    beroe_source_count: int
    web_source_count: int
    show_expand_to_web: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level.value,
            "reason": self.reason,
            "is_managed_category": self.is_managed_category,
            "category_name": self.category_name,
            "beroe_source_count": self.beroe_source_count,
            "web_source_count": self.web_source_count,
            "show_expand_to_web": self.show_expand_to_web,
        }


@dataclass(frozen=True)
class ResponseSources:
    """
    Web and internal sources attached to a response.

    total_web_count / total_internal_count override the list lengths when
    upstream reports more sources than it attached.
    """
    web: tuple[WebSource, ...] = ()
    internal: tuple[InternalSource, ...] = ()
    total_web_count: Optional[int] = None
    total_internal_count: Optional[int] = None
    confidence: Optional[ConfidenceDescriptor] = None

    @property
    def web_count(self) -> int:
        if self.total_web_count is not None:
            return self.total_web_count
        return len(self.web)

    @property
    def internal_count(self) -> int:
        if self.total_internal_count is not None:
            return self.total_internal_count
        return len(self.internal)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "web": [s.to_dict() for s in self.web],
            "internal": [s.to_dict() for s in self.internal],
            "total_web_count": self.web_count,
            "total_internal_count": self.internal_count,
        }
        if self.confidence is not None:
            result["confidence"] = self.confidence.to_dict()
        return result
