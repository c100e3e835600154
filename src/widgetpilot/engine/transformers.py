"""
WidgetPilot Data Transformers

Turn domain data into the parameter shapes the presentation components
expect. Every transformer returns freshly built plain data (dicts,
lists, strings, numbers) that shares nothing with its input.
"""
from __future__ import annotations

import copy
import math
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from ..models import Portfolio, RiskChange, RiskLevel, Supplier, TrendDirection


# =============================================================================
# Formatting Helpers
# =============================================================================

def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def format_spend(amount: float) -> str:
    """Format a USD amount as "$1.2B", "$4.5M", "$120K" or "$500"."""
    if amount >= 1_000_000_000:
        return f"${amount / 1_000_000_000:.1f}B"
    if amount >= 1_000_000:
        return f"${amount / 1_000_000:.1f}M"
    if amount >= 1_000:
        return f"${amount / 1_000:.0f}K"
    return f"${_number(amount)}"


def map_rating_to_impact(rating: Optional[str]) -> str:
    """Map a provider factor rating to positive / negative / neutral."""
    if not rating:
        return "neutral"
    lower = rating.lower()
    if lower in ("high", "critical"):
        return "negative"
    if lower in ("low", "good"):
        return "positive"
    return "neutral"


def map_risk_level_to_market_context(risk_level: str) -> str:
    """Map a risk level onto the market-context scale (elevated / moderate / low)."""
    if risk_level in (RiskLevel.HIGH, RiskLevel.MEDIUM_HIGH):
        return "elevated"
    if risk_level == RiskLevel.MEDIUM:
        return "moderate"
    return "low"


def copy_payload(data: Any) -> Any:
    """Deep copy of a widget or inflation payload; None becomes {}."""
    return copy.deepcopy(data) if data is not None else {}


# =============================================================================
# Supplier Transformers
# =============================================================================

def supplier_spend_label(supplier: Supplier) -> str:
    return supplier.spend_formatted or format_spend(supplier.spend or 0)


def supplier_to_risk_card_data(supplier: Supplier) -> dict[str, Any]:
    """Flat parameters for a supplier risk card."""
    location = supplier.location
    srs = supplier.srs
    data: dict[str, Any] = {
        "supplierId": supplier.id,
        "supplierName": supplier.name,
        "riskScore": supplier.risk_score if supplier.risk_score is not None else 0,
        "riskLevel": supplier.risk_level.value,
        "trend": supplier.trend.value,
        "category": supplier.category,
        "location": {
            "city": location.city if location else "",
            "country": location.country if location else "",
            "region": location.region if location else "",
        },
        "spend": supplier.spend or 0,
        "spendFormatted": supplier_spend_label(supplier),
        "keyFactors": [
            {"name": f.name, "impact": map_rating_to_impact(f.rating)}
            for f in (srs.factors[:4] if srs else ())
        ],
    }
    if srs and srs.last_updated:
        data["lastUpdated"] = srs.last_updated
    return data


def supplier_table_row(supplier: Supplier) -> dict[str, Any]:
    """One row of a supplier table."""
    return {
        "id": supplier.id,
        "name": supplier.name,
        "riskScore": supplier.risk_score if supplier.risk_score is not None else 0,
        "riskLevel": supplier.risk_level.value,
        "trend": supplier.trend.value,
        "category": supplier.category,
        "country": supplier.location.country if supplier.location else "",
        "spend": supplier_spend_label(supplier),
    }


def suppliers_to_table_data(
    suppliers: Sequence[Supplier],
    filters: Optional[Mapping[str, str]] = None,
    limit: Optional[int] = None,
) -> dict[str, Any]:
    """
    Parameters for a supplier table.

    Args:
        suppliers: Suppliers to list
        filters: Active filters to display
        limit: Maximum rows; totalCount always reports the full list length
    """
    rows = suppliers if limit is None else suppliers[:limit]
    return {
        "suppliers": [supplier_table_row(s) for s in rows],
        "totalCount": len(suppliers),
        "filters": dict(filters or {}),
    }


def extract_strengths(supplier: Supplier) -> list[str]:
    """Up to three strengths for a comparison column."""
    strengths: list[str] = []
    if supplier.risk_level == RiskLevel.LOW:
        strengths.append("Low Risk")
    if supplier.trend == TrendDirection.IMPROVING:
        strengths.append("Improving Trend")
    if supplier.srs:
        strengths.extend(f.name for f in supplier.srs.factors if f.rating in ("Low", "Good"))

    if not strengths:
        if supplier.location and supplier.location.region:
            strengths.append(f"{supplier.location.region} based")
        strengths.append("Established supplier")

    return strengths[:3]


def extract_weaknesses(supplier: Supplier) -> list[str]:
    """Up to three weaknesses for a comparison column."""
    weaknesses: list[str] = []
    if supplier.risk_level in (RiskLevel.HIGH, RiskLevel.MEDIUM_HIGH):
        weaknesses.append("Elevated Risk")
    if supplier.trend == TrendDirection.WORSENING:
        weaknesses.append("Worsening Trend")
    if supplier.srs:
        weaknesses.extend(f.name for f in supplier.srs.factors if f.rating in ("High", "Critical"))

    if not weaknesses:
        weaknesses.append("Limited data")

    return weaknesses[:3]


def generate_recommendation(suppliers: Sequence[Supplier]) -> str:
    """One-line recommendation based on the lowest-risk supplier."""
    if not suppliers:
        return ""

    def score(s: Supplier) -> float:
        return s.risk_score if s.risk_score is not None else 100

    best = min(suppliers, key=score)
    if best.risk_level == RiskLevel.LOW:
        return f"{best.name} has the lowest risk profile and is recommended."
    if best.risk_level == RiskLevel.MEDIUM:
        return f"{best.name} shows moderate risk. Consider additional due diligence."
    return "All suppliers show elevated risk. Consider risk mitigation strategies."


# Maximum suppliers side by side in a comparison
MAX_COMPARISON_SUPPLIERS = 4


def suppliers_to_comparison_data(
    suppliers: Sequence[Supplier],
    recommendation: Optional[str] = None,
) -> dict[str, Any]:
    """Parameters for a side-by-side supplier comparison."""
    return {
        "suppliers": [
            {
                "id": s.id,
                "name": s.name,
                "riskScore": s.risk_score if s.risk_score is not None else 0,
                "riskLevel": s.risk_level.value,
                "category": s.category,
                "location": s.location.country if s.location else "",
                "spend": supplier_spend_label(s),
                "trend": s.trend.value,
                "strengths": extract_strengths(s),
                "weaknesses": extract_weaknesses(s),
            }
            for s in suppliers[:MAX_COMPARISON_SUPPLIERS]
        ],
        "comparisonDimensions": ["riskScore", "spend", "location", "category"],
        "recommendation": recommendation if recommendation is not None else generate_recommendation(suppliers),
    }


# =============================================================================
# Alert / Trend Transformers
# =============================================================================

# A worsening by more than this many points is critical
CRITICAL_SCORE_JUMP = 10


def _signed(delta: float) -> str:
    return f"+{_number(delta)}" if delta > 0 else _number(delta)


def risk_changes_to_alert_data(risk_changes: Sequence[RiskChange]) -> dict[str, Any]:
    """
    Parameters for a risk alert card.

    Severity is critical when any supplier worsened by more than
    CRITICAL_SCORE_JUMP points, warning when any worsened, info otherwise.
    """
    worsened = [c for c in risk_changes if c.worsened]
    critical = any(c.delta > CRITICAL_SCORE_JUMP for c in worsened)
    count = len(risk_changes)

    if critical:
        severity = "critical"
    elif worsened:
        severity = "warning"
    else:
        severity = "info"

    data: dict[str, Any] = {
        "alertType": "risk_increase" if worsened else "risk_decrease",
        "severity": severity,
        "title": f"{count} supplier{'' if count == 1 else 's'} with risk changes",
        "description": "Risk scores have changed for these suppliers in your portfolio.",
        "affectedSuppliers": [
            {
                "name": c.supplier_name,
                "previousScore": c.previous_score,
                "currentScore": c.current_score,
                "change": _signed(c.delta),
            }
            for c in risk_changes[:5]
        ],
        "actionRequired": bool(worsened),
        "suggestedAction": (
            "Review affected suppliers and consider risk mitigation strategies."
            if worsened
            else "Risk improvements detected. Consider updating your risk assessment."
        ),
    }
    dates = [c.change_date for c in risk_changes if c.change_date]
    if dates:
        data["timestamp"] = max(dates)
    return data


def risk_changes_to_table_data(risk_changes: Sequence[RiskChange]) -> dict[str, Any]:
    """Supplier table parameters listing the suppliers whose risk moved."""
    return {
        "suppliers": [
            {
                "id": c.supplier_id,
                "name": c.supplier_name,
                "riskScore": c.current_score,
                "riskLevel": c.current_level.value,
                "previousScore": c.previous_score,
                "change": _signed(c.delta),
                "direction": c.direction.value,
            }
            for c in risk_changes
        ],
        "totalCount": len(risk_changes),
        "filters": {},
    }


# =============================================================================
# Portfolio Transformers
# =============================================================================

def _percent(count: int, total: int) -> int:
    if total <= 0:
        return 0
    return math.floor(count * 100 / total + 0.5)


def portfolio_to_distribution_data(portfolio: Portfolio) -> dict[str, Any]:
    """
    Risk distribution parameters with a per-tier count and percentage.

    Percentages are taken against total_suppliers and rounded half up,
    so they sum to 100 within rounding when the tiers cover the portfolio.
    """
    total = portfolio.total_suppliers
    return {
        "totalSuppliers": total,
        "totalSpend": portfolio.total_spend,
        "totalSpendFormatted": portfolio.spend_formatted or format_spend(portfolio.total_spend),
        "distribution": {
            tier: {"count": count, "spend": 0, "percent": _percent(count, total)}
            for tier, count in portfolio.distribution.as_tiers()
        },
    }


# =============================================================================
# Event Transformers
# =============================================================================

def extract_events(data: Any) -> list[Any]:
    """
    Pull the events list out of a feed payload.

    Accepts a bare list, {"events": [...]}, or the double-wrapped
    {"events": {"events": [...]}}. Anything else yields [].
    """
    if isinstance(data, list):
        return copy.deepcopy(data)
    if isinstance(data, Mapping) and "events" in data:
        events = data["events"]
        if isinstance(events, Mapping) and "events" in events:
            events = events["events"]
        if isinstance(events, list):
            return copy.deepcopy(events)
    return []
