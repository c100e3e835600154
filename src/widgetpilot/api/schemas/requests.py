"""Request schemas for the API.

Payloads use the camelCase keys of the upstream retrieval layer; snake_case
is accepted too. Each schema converts itself to the frozen domain model.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from widgetpilot.models import (
    ChangeDirection,
    DataContext,
    Location,
    Portfolio,
    RiskChange,
    RiskDistribution,
    RiskFactor,
    RiskLevel,
    Supplier,
    SupplierRiskScore,
    TrendDirection,
    build_data_context,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Domain Data
# =============================================================================

class LocationInput(CamelModel):
    city: str = ""
    country: str = ""
    region: str = ""

    def to_domain(self) -> Location:
        return Location(city=self.city, country=self.country, region=self.region)


class RiskFactorInput(CamelModel):
    name: str
    rating: Optional[str] = None
    id: Optional[str] = None
    tier: Optional[str] = None
    weight: Optional[float] = None
    score: Optional[float] = None

    def to_domain(self) -> RiskFactor:
        return RiskFactor(**self.model_dump())


class RiskScoreInput(CamelModel):
    score: Optional[float] = None
    level: RiskLevel = RiskLevel.UNRATED
    trend: TrendDirection = TrendDirection.STABLE
    last_updated: Optional[str] = None
    factors: list[RiskFactorInput] = Field(default_factory=list)
    previous_score: Optional[float] = None

    def to_domain(self) -> SupplierRiskScore:
        return SupplierRiskScore(
            score=self.score,
            level=self.level,
            trend=self.trend,
            last_updated=self.last_updated,
            factors=tuple(f.to_domain() for f in self.factors),
            previous_score=self.previous_score,
        )


class SupplierInput(CamelModel):
    """A supplier as returned by the retrieval layer."""
    id: str
    name: str
    category: str = ""
    industry: str = ""
    location: Optional[LocationInput] = None
    spend: float = 0
    spend_formatted: Optional[str] = None
    criticality: Optional[str] = None
    is_followed: bool = False
    srs: Optional[RiskScoreInput] = None
    duns: Optional[str] = None

    def to_domain(self) -> Supplier:
        return Supplier(
            id=self.id,
            name=self.name,
            category=self.category,
            industry=self.industry,
            location=self.location.to_domain() if self.location else None,
            spend=self.spend,
            spend_formatted=self.spend_formatted,
            criticality=self.criticality,
            is_followed=self.is_followed,
            srs=self.srs.to_domain() if self.srs else None,
            duns=self.duns,
        )


class DistributionInput(CamelModel):
    high: int = 0
    medium_high: int = 0
    medium: int = 0
    low: int = 0
    unrated: int = 0

    def to_domain(self) -> RiskDistribution:
        return RiskDistribution(**self.model_dump())


class PortfolioInput(CamelModel):
    total_suppliers: int
    total_spend: float = 0
    spend_formatted: Optional[str] = None
    avg_risk_score: Optional[float] = None
    distribution: DistributionInput = Field(default_factory=DistributionInput)
    last_updated: Optional[str] = None

    def to_domain(self) -> Portfolio:
        return Portfolio(
            total_suppliers=self.total_suppliers,
            total_spend=self.total_spend,
            spend_formatted=self.spend_formatted,
            avg_risk_score=self.avg_risk_score,
            distribution=self.distribution.to_domain(),
            last_updated=self.last_updated,
        )


class RiskChangeInput(CamelModel):
    supplier_id: str
    supplier_name: str
    previous_score: float
    current_score: float
    direction: ChangeDirection
    previous_level: RiskLevel = RiskLevel.UNRATED
    current_level: RiskLevel = RiskLevel.UNRATED
    change_date: Optional[str] = None

    def to_domain(self) -> RiskChange:
        return RiskChange(**self.model_dump())


class WidgetInput(CamelModel):
    """Widget payload chosen by the upstream router."""
    type: str = Field(..., description="Widget type tag, e.g. 'price_gauge'")
    data: Any = None


# =============================================================================
# Selection
# =============================================================================

class SelectionData(CamelModel):
    """Everything upstream retrieved for the turn. Every field is optional."""
    portfolio: Optional[PortfolioInput] = None
    suppliers: Optional[list[SupplierInput]] = None
    supplier: Optional[SupplierInput] = None
    risk_changes: Optional[list[RiskChangeInput]] = None
    widget: Optional[WidgetInput] = None
    result_count: Optional[int] = None
    has_handoff: Optional[bool] = None
    commodity_data: Any = None
    commodity_drivers: Any = None

    def to_context(self, intent: str, sub_intent: Optional[str] = None) -> DataContext:
        return build_data_context(
            intent,
            sub_intent=sub_intent,
            portfolio=self.portfolio.to_domain() if self.portfolio else None,
            suppliers=[s.to_domain() for s in self.suppliers] if self.suppliers is not None else None,
            supplier=self.supplier.to_domain() if self.supplier else None,
            risk_changes=[c.to_domain() for c in self.risk_changes] if self.risk_changes is not None else None,
            widget=self.widget.model_dump() if self.widget else None,
            result_count=self.result_count,
            has_handoff=self.has_handoff,
            commodity_data=self.commodity_data,
            commodity_drivers=self.commodity_drivers,
        )


class SelectRequest(CamelModel):
    """Request to select a component for one turn."""
    intent: str = Field(..., description="Classified intent, e.g. 'portfolio_overview'")
    sub_intent: Optional[str] = None
    surface: Optional[str] = Field(None, description="inline|inline_compact|panel|panel_expanded|standalone")
    data: SelectionData = Field(default_factory=SelectionData)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "intent": "portfolio_overview",
                    "surface": "inline",
                    "data": {
                        "portfolio": {
                            "totalSuppliers": 20,
                            "totalSpend": 12500000,
                            "distribution": {"high": 2, "mediumHigh": 1, "medium": 3, "low": 4, "unrated": 10},
                        }
                    },
                }
            ]
        },
    )

    def to_context(self) -> DataContext:
        return self.data.to_context(self.intent, self.sub_intent)


class ExpandRequest(SelectRequest):
    """Request to expand the component selected on a surface."""
    to_surface: Optional[str] = Field(None, description="Target surface; defaults to the next richer one")


# =============================================================================
# Sources
# =============================================================================

class SourceInput(CamelModel):
    """A raw source attached to a response."""
    name: Optional[str] = None
    url: Optional[str] = None
    type: Optional[str] = Field(None, description="beroe|dun_bradstreet|ecovadis|internal_data|supplier_data|web|news")
    date: Optional[str] = None
    report_id: Optional[str] = None
    category: Optional[str] = None
    summary: Optional[str] = None


class ConfidenceRequest(CamelModel):
    """Request to classify the sources behind a response."""
    sources: list[SourceInput] = Field(default_factory=list)
    detected_category: Optional[str] = None
    managed_categories: list[str] = Field(default_factory=list)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "sources": [
                        {"name": "Steel Market Report", "type": "beroe"},
                        {"name": "Reuters", "url": "https://www.reuters.com/markets/steel"},
                    ],
                    "detectedCategory": "Steel",
                    "managedCategories": ["Steel (Hot Rolled Coil)"],
                }
            ]
        },
    )

    def raw_sources(self) -> list[dict[str, Any]]:
        return [s.model_dump(by_alias=True, exclude_none=True) for s in self.sources]
