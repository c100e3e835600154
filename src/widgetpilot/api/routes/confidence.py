"""Source-confidence endpoint."""

from typing import Optional

from fastapi import APIRouter

from widgetpilot.api.schemas.requests import ConfidenceRequest
from widgetpilot.api.schemas.responses import ConfidenceOut, ConfidenceResponse
from widgetpilot.engine import (
    build_response_sources,
    get_confidence_label,
    should_show_decision_grade_badge,
)
from widgetpilot.models.policy import ConfidencePolicy
from widgetpilot.packs import default_confidence_policy

router = APIRouter(tags=["Confidence"])

# Shared policy (set by main.py)
policy: Optional[ConfidencePolicy] = None


def set_policy(p: ConfidencePolicy):
    global policy
    policy = p


def current_policy() -> ConfidencePolicy:
    return policy or default_confidence_policy()


@router.post("/confidence", response_model=ConfidenceResponse)
async def classify_sources(request: ConfidenceRequest):
    """
    Normalize the sources behind a response and classify their confidence.

    Only internal sources whose provider type the confidence policy counts
    raise the tier; web sources alone never do.
    """
    active = current_policy()
    sources = build_response_sources(
        request.raw_sources(),
        detected_category=request.detected_category,
        managed_categories=request.managed_categories,
        policy=active,
    )
    confidence = sources.confidence

    return ConfidenceResponse(
        confidence=ConfidenceOut(
            **confidence.to_dict(),
            label=get_confidence_label(confidence.level),
            decision_grade=should_show_decision_grade_badge(confidence),
        ),
        sources=sources.to_dict(),
        policy_version=active.version,
    )
