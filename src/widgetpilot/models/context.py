"""
WidgetPilot Data Context

The normalized snapshot of everything the selection engine may look at
for one conversational turn: the classified intent, whatever domain
data upstream retrieved, and the optional widget payload.

Contexts are frozen. A rule that declares a required DataKind never
sees a context where available_data() lacks it.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from .domain import Portfolio, RiskChange, Supplier
from .enums import DataKind, Intent, SubIntent, WidgetType
from .widget import KnownWidget, Widget, parse_widget


@dataclass(frozen=True)
class DataContext:
    """
    Immutable input to component selection.

    Attributes:
        intent: Classified intent (an Intent member, or the raw label
            when upstream produced one outside the known set)
        sub_intent: Optional refinement of the intent
        portfolio: Portfolio summary
        suppliers: Suppliers returned for this turn
        supplier: Focus supplier (defaults to the first supplier)
        risk_changes: Recorded risk changes
        widget: Widget payload chosen upstream
        inflation_summary: Inflation summary payload
        commodity_data: Commodity price payload
        commodity_drivers: Price driver payload
        portfolio_exposure: Spend exposure payload
        justification_data: Price justification payload
        scenario_data: Scenario planning payload
        result_count: Number of results (defaults to the supplier count)
        has_handoff: Whether the response hands off to the full dashboard
    """
    intent: Union[Intent, str]
    sub_intent: Optional[Union[SubIntent, str]] = None

    portfolio: Optional[Portfolio] = None
    suppliers: Optional[tuple[Supplier, ...]] = None
    supplier: Optional[Supplier] = None
    risk_changes: Optional[tuple[RiskChange, ...]] = None
    widget: Optional[Widget] = None

    # Inflation watch payloads
    inflation_summary: Any = None
    commodity_data: Any = None
    commodity_drivers: Any = None
    portfolio_exposure: Any = None
    justification_data: Any = None
    scenario_data: Any = None

    result_count: Optional[int] = None
    has_handoff: bool = False

    @property
    def intent_label(self) -> str:
        return self.intent.value if isinstance(self.intent, Intent) else str(self.intent)

    @property
    def widget_tag(self) -> Optional[str]:
        return self.widget.tag if self.widget is not None else None

    @property
    def supplier_count(self) -> int:
        return len(self.suppliers) if self.suppliers else 0

    def available_data(self) -> frozenset[DataKind]:
        """Kinds of data present on this context."""
        present: set[DataKind] = set()
        if self.portfolio is not None:
            present.add(DataKind.PORTFOLIO)
        if self.suppliers:
            present.add(DataKind.SUPPLIERS)
        if self.supplier is not None:
            present.add(DataKind.SUPPLIER)
        if self.risk_changes:
            present.add(DataKind.RISK_CHANGES)
        if self.widget is not None and self.widget.has_data:
            present.add(DataKind.WIDGET)
        for kind, value in (
            (DataKind.INFLATION_SUMMARY, self.inflation_summary),
            (DataKind.COMMODITY_DATA, self.commodity_data),
            (DataKind.COMMODITY_DRIVERS, self.commodity_drivers),
            (DataKind.PORTFOLIO_EXPOSURE, self.portfolio_exposure),
            (DataKind.JUSTIFICATION_DATA, self.justification_data),
            (DataKind.SCENARIO_DATA, self.scenario_data),
        ):
            if value is not None:
                present.add(kind)
        return frozenset(present)

    def has(self, kind: DataKind) -> bool:
        return kind in self.available_data()


# Widget tags whose data also fills an inflation payload slot
_WIDGET_PAYLOAD_SLOTS: dict[WidgetType, str] = {
    WidgetType.INFLATION_SUMMARY_CARD: "inflation_summary",
    WidgetType.DRIVER_BREAKDOWN_CARD: "commodity_drivers",
    WidgetType.SPEND_IMPACT_CARD: "portfolio_exposure",
    WidgetType.JUSTIFICATION_CARD: "justification_data",
    WidgetType.SCENARIO_CARD: "scenario_data",
    WidgetType.PRICE_GAUGE: "commodity_data",
    WidgetType.COMMODITY_GAUGE: "commodity_data",
}


def build_data_context(
    intent: Union[Intent, str],
    *,
    portfolio: Optional[Portfolio] = None,
    suppliers: Optional[Iterable[Supplier]] = None,
    supplier: Optional[Supplier] = None,
    risk_changes: Optional[Iterable[RiskChange]] = None,
    widget: Union[Widget, Mapping[str, Any], None] = None,
    sub_intent: Optional[Union[SubIntent, str]] = None,
    result_count: Optional[int] = None,
    has_handoff: Optional[bool] = None,
    commodity_data: Any = None,
    commodity_drivers: Any = None,
) -> DataContext:
    """
    Assemble a data context from whatever upstream supplied.

    - The focus supplier defaults to the first supplier in the list.
    - result_count defaults to the supplier list length.
    - A widget payload with data, tagged with an inflation or commodity
      type, also fills the matching inflation payload slot.

    Args:
        intent: Classified intent
        portfolio, suppliers, supplier, risk_changes: Domain data
        widget: Widget payload or raw {"type", "data"} mapping
        sub_intent: Optional refinement
        result_count: Explicit result count
        has_handoff: Whether the response hands off to the dashboard
        commodity_data, commodity_drivers: Explicit inflation payloads

    Returns:
        Frozen DataContext
    """
    supplier_list = tuple(suppliers) if suppliers is not None else None
    change_list = tuple(risk_changes) if risk_changes is not None else None
    parsed_widget = parse_widget(widget)

    slots: dict[str, Any] = {
        "inflation_summary": None,
        "commodity_data": commodity_data,
        "commodity_drivers": commodity_drivers,
        "portfolio_exposure": None,
        "justification_data": None,
        "scenario_data": None,
    }
    if isinstance(parsed_widget, KnownWidget) and parsed_widget.has_data:
        slot = _WIDGET_PAYLOAD_SLOTS.get(parsed_widget.type)
        if slot is not None:
            slots[slot] = parsed_widget.data

    if supplier is None and supplier_list:
        supplier = supplier_list[0]
    if result_count is None and supplier_list is not None:
        result_count = len(supplier_list)

    return DataContext(
        intent=Intent.coerce(intent),
        sub_intent=sub_intent,
        portfolio=portfolio,
        suppliers=supplier_list,
        supplier=supplier,
        risk_changes=change_list,
        widget=parsed_widget,
        result_count=result_count,
        has_handoff=bool(has_handoff),
        **slots,
    )
