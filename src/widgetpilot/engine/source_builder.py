"""
WidgetPilot Response Source Builder

Normalizes the raw source list attached to an AI response into web and
internal sources, and optionally classifies their confidence.

- Sources with a URL are web sources, deduplicated by normalized URL
- Sources without a URL are internal only if their type maps to a
  provider; anything else (news or web items without a URL, unknown
  provider tags) is dropped rather than misclassified
- Internal sources are deduplicated by provider type and name
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union
from urllib.parse import urlsplit

from ..models import InternalSource, ProviderType, ResponseSources, WebSource
from ..models.policy import ConfidencePolicy
from .confidence import calculate_source_confidence


# Legacy type tags emitted by older upstream services
_LEGACY_PROVIDER_TAGS: dict[str, ProviderType] = {
    "dnd": ProviderType.DUN_BRADSTREET,
    "report": ProviderType.INTERNAL_DATA,
    "analysis": ProviderType.INTERNAL_DATA,
    "data": ProviderType.INTERNAL_DATA,
}


def normalize_url(url: str) -> str:
    """
    Normalize a URL for deduplication: origin, path without trailing
    slash, and query. Fragments are dropped. Unparseable input is
    returned trimmed.
    """
    trimmed = url.strip()
    if not trimmed:
        return trimmed
    try:
        parts = urlsplit(trimmed)
    except ValueError:
        return trimmed
    if not parts.scheme or not parts.netloc:
        return trimmed
    path = parts.path[:-1] if parts.path.endswith("/") else parts.path
    query = f"?{parts.query}" if parts.query else ""
    return f"{parts.scheme.lower()}://{parts.netloc.lower()}{path}{query}"


def extract_domain(url: str) -> str:
    """Host name without a leading "www.", or "source" when there is none."""
    try:
        host = urlsplit(url.strip()).hostname
    except ValueError:
        return "source"
    if not host:
        return "source"
    return host[4:] if host.startswith("www.") else host


def map_internal_type(tag: Optional[str]) -> Optional[ProviderType]:
    """Provider type for a raw source tag, or None if it is not an internal provider."""
    if not tag or not isinstance(tag, str):
        return None
    tag = tag.strip().lower()
    try:
        return ProviderType(tag)
    except ValueError:
        return _LEGACY_PROVIDER_TAGS.get(tag)


RawSources = Union[ResponseSources, Iterable[Mapping[str, Any]], None]


def build_response_sources(
    raw: RawSources,
    detected_category: Optional[str] = None,
    managed_categories: Optional[Iterable[str]] = None,
    calculate_confidence: bool = True,
    policy: Optional[ConfidencePolicy] = None,
) -> ResponseSources:
    """
    Split raw sources into web and internal sources.

    Args:
        raw: Raw source mappings ({"name", "url", "type", "date",
            "reportId", "category", "summary"}), an already built
            ResponseSources, or None
        detected_category: Category detected from the query
        managed_categories: The user's managed categories
        calculate_confidence: Attach a confidence descriptor
        policy: Confidence policy; defaults to proprietary only

    Returns:
        ResponseSources. An already built value is returned unchanged
        apart from a confidence descriptor filled in when missing.
    """
    managed = list(managed_categories) if managed_categories is not None else None

    if isinstance(raw, ResponseSources):
        if raw.confidence is None and calculate_confidence:
            confidence = calculate_source_confidence(raw, detected_category, managed, policy)
            return dataclasses.replace(raw, confidence=confidence)
        return raw

    web: list[WebSource] = []
    internal: list[InternalSource] = []
    seen_urls: set[str] = set()
    seen_internal: set[str] = set()

    for source in raw or ():
        if not isinstance(source, Mapping):
            continue

        url = source.get("url")
        if url and not isinstance(url, str):
            continue
        if url:
            normalized = normalize_url(url)
            if normalized in seen_urls:
                continue
            seen_urls.add(normalized)
            domain = extract_domain(url)
            web.append(WebSource(
                name=source.get("name") or domain,
                url=url,
                domain=domain,
                date=source.get("date"),
            ))
            continue

        name = source.get("name")
        provider = map_internal_type(source.get("type"))
        if not name or not isinstance(name, str) or provider is None:
            continue
        key = f"{provider.value}:{name}".lower()
        if key in seen_internal:
            continue
        seen_internal.add(key)
        internal.append(InternalSource(
            name=name,
            type=provider,
            report_id=source.get("reportId") or source.get("report_id"),
            category=source.get("category"),
            summary=source.get("summary"),
        ))

    result = ResponseSources(
        web=tuple(web),
        internal=tuple(internal),
        total_web_count=len(web),
        total_internal_count=len(internal),
    )
    if calculate_confidence:
        confidence = calculate_source_confidence(result, detected_category, managed, policy)
        result = dataclasses.replace(result, confidence=confidence)
    return result
