"""
WidgetPilot Source-Confidence Classifier

Classifies how trustworthy the evidence behind a response is, for the
"Decision Grade" trust badge.

Decision list, first match wins:
1. Managed category with 2+ proprietary sources -> HIGH
2. 3+ proprietary sources                       -> HIGH
3. 1+ proprietary source                        -> MEDIUM (suggest web)
4. Web sources only                             -> WEB_ONLY
5. Nothing                                      -> LOW (suggest web)

Only internal sources whose provider type the policy counts are
proprietary; other licensed providers never raise the tier.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from ..models import ConfidenceDescriptor, ConfidenceLevel, ResponseSources
from ..models.policy import BUILTIN_CONFIDENCE_POLICY, ConfidencePolicy
from .category_matcher import matches_any_category

logger = logging.getLogger(__name__)


# =============================================================================
# Thresholds
# =============================================================================

MANAGED_CATEGORY_MIN_SOURCES = 2
STRONG_COVERAGE_MIN_SOURCES = 3
PARTIAL_COVERAGE_MIN_SOURCES = 1


REASON_MANAGED = "Comprehensive coverage for this category"
REASON_STRONG = "Strong internal data coverage"
REASON_PARTIAL = "Partial internal data available"
REASON_WEB_ONLY = "Based on external research"
REASON_LIMITED = "Limited source data available"


CONFIDENCE_LABELS: dict[ConfidenceLevel, str] = {
    ConfidenceLevel.HIGH: "Decision Grade",
    ConfidenceLevel.MEDIUM: "Partial Coverage",
    ConfidenceLevel.LOW: "Limited Data",
    ConfidenceLevel.WEB_ONLY: "Web Research",
}


# =============================================================================
# Classification
# =============================================================================

def count_proprietary_sources(
    sources: ResponseSources,
    policy: ConfidencePolicy = BUILTIN_CONFIDENCE_POLICY,
) -> int:
    """Number of internal sources the policy counts as proprietary."""
    return sum(1 for s in sources.internal if policy.counts(s))


def calculate_source_confidence(
    sources: ResponseSources,
    detected_category: Optional[str] = None,
    managed_categories: Optional[Iterable[str]] = None,
    policy: Optional[ConfidencePolicy] = None,
) -> ConfidenceDescriptor:
    """
    Calculate the confidence tier for a response's sources.

    Args:
        sources: Web and internal sources of the response
        detected_category: Category detected from the user's query
        managed_categories: The user's managed categories
        policy: Which provider types count; defaults to proprietary only

    Returns:
        ConfidenceDescriptor; every input yields exactly one tier
    """
    policy = policy or BUILTIN_CONFIDENCE_POLICY
    proprietary = count_proprietary_sources(sources, policy)
    web = sources.web_count
    is_managed = matches_any_category(detected_category, managed_categories)

    if is_managed and proprietary >= MANAGED_CATEGORY_MIN_SOURCES:
        descriptor = ConfidenceDescriptor(
            level=ConfidenceLevel.HIGH,
            reason=REASON_MANAGED,
            is_managed_category=True,
            category_name=detected_category,
            beroe_source_count=proprietary,
            web_source_count=web,
            show_expand_to_web=False,
        )
    elif proprietary >= STRONG_COVERAGE_MIN_SOURCES:
        descriptor = ConfidenceDescriptor(
            level=ConfidenceLevel.HIGH,
            reason=REASON_STRONG,
            is_managed_category=is_managed,
            category_name=detected_category,
            beroe_source_count=proprietary,
            web_source_count=web,
            show_expand_to_web=False,
        )
    elif proprietary >= PARTIAL_COVERAGE_MIN_SOURCES:
        descriptor = ConfidenceDescriptor(
            level=ConfidenceLevel.MEDIUM,
            reason=REASON_PARTIAL,
            is_managed_category=is_managed,
            category_name=detected_category,
            beroe_source_count=proprietary,
            web_source_count=web,
            show_expand_to_web=True,
        )
    elif web > 0:
        descriptor = ConfidenceDescriptor(
            level=ConfidenceLevel.WEB_ONLY,
            reason=REASON_WEB_ONLY,
            is_managed_category=False,
            category_name=detected_category,
            beroe_source_count=0,
            web_source_count=web,
            show_expand_to_web=False,
        )
    else:
        descriptor = ConfidenceDescriptor(
            level=ConfidenceLevel.LOW,
            reason=REASON_LIMITED,
            is_managed_category=False,
            category_name=detected_category,
            beroe_source_count=0,
            web_source_count=0,
            show_expand_to_web=True,
        )

    logger.debug(
        "Source confidence %s (proprietary=%d, web=%d, managed=%s)",
        descriptor.level.value, proprietary, web, is_managed,
        extra={"confidence_level": descriptor.level.value, "policy_version": policy.version},
    )
    return descriptor


# =============================================================================
# Badge Helpers
# =============================================================================

def get_confidence_label(level: ConfidenceLevel) -> str:
    """Display label for a confidence level."""
    return CONFIDENCE_LABELS.get(ConfidenceLevel(level), "")


def should_show_decision_grade_badge(confidence: ConfidenceDescriptor) -> bool:
    """Whether the response earns the "Decision Grade" badge."""
    return confidence.level == ConfidenceLevel.HIGH


def should_suggest_web_expansion(confidence: ConfidenceDescriptor) -> bool:
    """Whether to offer expanding the answer with web research."""
    return confidence.show_expand_to_web and confidence.level != ConfidenceLevel.WEB_ONLY
