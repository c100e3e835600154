"""
WidgetPilot Domain Data

Read-only views of the procurement data supplied by the upstream
retrieval layer: the portfolio summary, suppliers with their risk
scores, and recorded risk changes.

All values are frozen. Collections are tuples so a data context built
from them cannot be changed after selection starts. Serialized forms use
the camelCase keys the rendering components expect.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .enums import ChangeDirection, RiskLevel, TrendDirection


def _drop_none(values: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in values.items() if v is not None}


# =============================================================================
# Supplier
# =============================================================================

@dataclass(frozen=True)
class Location:
    """Where a supplier operates."""
    city: str = ""
    country: str = ""
    region: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"city": self.city, "country": self.country, "region": self.region}


@dataclass(frozen=True)
class RiskFactor:
    """
    One contributor to a supplier risk score.

    Attributes:
        name: Display name of the factor
        rating: Provider rating ("Low", "Good", "High", "Critical", ...)
        id: Provider identifier
        tier: Factor tier (freely-available / conditional / restricted)
        weight: Weight in the overall score
        score: Factor score
    """
    name: str
    rating: Optional[str] = None
    id: Optional[str] = None
    tier: Optional[str] = None
    weight: Optional[float] = None
    score: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "id": self.id,
            "name": self.name,
            "tier": self.tier,
            "weight": self.weight,
            "score": self.score,
            "rating": self.rating,
        })


@dataclass(frozen=True)
class SupplierRiskScore:
    """
    A supplier's risk score. A score of None means the supplier is unrated.
    """
    score: Optional[float] = None
    level: RiskLevel = RiskLevel.UNRATED
    trend: TrendDirection = TrendDirection.STABLE
    last_updated: Optional[str] = None
    factors: tuple[RiskFactor, ...] = ()
    previous_score: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "score": self.score,
            "level": self.level.value,
            "trend": self.trend.value,
            "lastUpdated": self.last_updated,
            "previousScore": self.previous_score,
            "factors": [f.to_dict() for f in self.factors],
        })


@dataclass(frozen=True)
class Supplier:
    """
    A supplier in the user's portfolio.

    Attributes:
        id: Supplier identifier
        name: Display name
        category: Procurement category
        industry: Industry classification
        location: Operating location
        spend: Annual spend in USD
        spend_formatted: Pre-formatted spend ("$4.2M"), if supplied upstream
        criticality: Business criticality label
        is_followed: Whether the user follows this supplier
        srs: Supplier risk score, absent for unrated suppliers
        duns: D-U-N-S number
    """
    id: str
    name: str
    category: str = ""
    industry: str = ""
    location: Optional[Location] = None
    spend: float = 0
    spend_formatted: Optional[str] = None
    criticality: Optional[str] = None
    is_followed: bool = False
    srs: Optional[SupplierRiskScore] = None
    duns: Optional[str] = None

    @property
    def risk_score(self) -> Optional[float]:
        return self.srs.score if self.srs else None

    @property
    def risk_level(self) -> RiskLevel:
        return self.srs.level if self.srs else RiskLevel.UNRATED

    @property
    def trend(self) -> TrendDirection:
        return self.srs.trend if self.srs else TrendDirection.STABLE

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "id": self.id,
            "name": self.name,
            "duns": self.duns,
            "category": self.category,
            "industry": self.industry,
            "location": self.location.to_dict() if self.location else None,
            "spend": self.spend,
            "spendFormatted": self.spend_formatted,
            "criticality": self.criticality,
            "isFollowed": self.is_followed,
            "srs": self.srs.to_dict() if self.srs else None,
        })


# =============================================================================
# Portfolio
# =============================================================================

@dataclass(frozen=True)
class RiskDistribution:
    """Supplier counts per risk tier."""
    high: int = 0
    medium_high: int = 0
    medium: int = 0
    low: int = 0
    unrated: int = 0

    @property
    def total(self) -> int:
        return self.high + self.medium_high + self.medium + self.low + self.unrated

    def as_tiers(self) -> list[tuple[str, int]]:
        """Tier key and count, in display order (camelCase keys)."""
        return [
            ("high", self.high),
            ("mediumHigh", self.medium_high),
            ("medium", self.medium),
            ("low", self.low),
            ("unrated", self.unrated),
        ]

    def to_dict(self) -> dict[str, int]:
        return dict(self.as_tiers())


@dataclass(frozen=True)
class Portfolio:
    """Portfolio-level summary of the user's supplier base."""
    total_suppliers: int
    total_spend: float = 0
    spend_formatted: Optional[str] = None
    avg_risk_score: Optional[float] = None
    distribution: RiskDistribution = field(default_factory=RiskDistribution)
    last_updated: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "totalSuppliers": self.total_suppliers,
            "totalSpend": self.total_spend,
            "spendFormatted": self.spend_formatted,
            "avgRiskScore": self.avg_risk_score,
            "distribution": self.distribution.to_dict(),
            "lastUpdated": self.last_updated,
        })


# =============================================================================
# Risk Changes
# =============================================================================

@dataclass(frozen=True)
class RiskChange:
    """A recorded movement in a supplier's risk score."""
    supplier_id: str
    supplier_name: str
    previous_score: float
    current_score: float
    direction: ChangeDirection
    previous_level: RiskLevel = RiskLevel.UNRATED
    current_level: RiskLevel = RiskLevel.UNRATED
    change_date: Optional[str] = None

    @property
    def delta(self) -> float:
        return self.current_score - self.previous_score

    @property
    def worsened(self) -> bool:
        return self.direction == ChangeDirection.WORSENED

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "supplierId": self.supplier_id,
            "supplierName": self.supplier_name,
            "previousScore": self.previous_score,
            "previousLevel": self.previous_level.value,
            "currentScore": self.current_score,
            "currentLevel": self.current_level.value,
            "changeDate": self.change_date,
            "direction": self.direction.value,
        })
