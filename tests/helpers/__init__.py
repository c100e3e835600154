"""
Test helpers for WidgetPilot tests.

Modules:
- factories: Domain data and raw source builders
"""
from .factories import (
    make_factor,
    make_portfolio,
    make_risk_change,
    make_sources,
    make_supplier,
)

__all__ = [
    "make_factor",
    "make_portfolio",
    "make_risk_change",
    "make_sources",
    "make_supplier",
]
