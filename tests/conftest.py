"""
Pytest configuration and fixtures for WidgetPilot tests.
"""
import logging

import pytest

from widgetpilot.engine import ComponentSelector
from widgetpilot.models import RiskLevel, TrendDirection
from widgetpilot.packs import load_confidence_policy, load_widget_registry

from tests.helpers import make_factor, make_portfolio, make_risk_change, make_supplier


# =============================================================================
# Packs
# =============================================================================

@pytest.fixture(scope="session")
def registry():
    """The packaged widget registry."""
    return load_widget_registry()


@pytest.fixture(scope="session")
def policy():
    """The packaged confidence policy."""
    return load_confidence_policy()


@pytest.fixture
def selector(registry):
    return ComponentSelector(registry=registry)


# =============================================================================
# Domain Data
# =============================================================================

@pytest.fixture
def portfolio():
    """20 suppliers: 2 high, 1 medium-high, 3 medium, 4 low, 10 unrated."""
    return make_portfolio()


@pytest.fixture
def suppliers():
    return [
        make_supplier(
            id="SUP-001", name="Acme Steel", score=28, level=RiskLevel.LOW,
            trend=TrendDirection.IMPROVING, factors=(make_factor("Financial Health", "Good"),),
        ),
        make_supplier(
            id="SUP-002", name="Borealis Metals", score=71, level=RiskLevel.HIGH,
            trend=TrendDirection.WORSENING, factors=(make_factor("Cyber Exposure", "Critical"),),
        ),
        make_supplier(
            id="SUP-003", name="Cobalt Forge", score=50, level=RiskLevel.MEDIUM,
            category="Aluminum", country="Germany", region="Europe",
        ),
    ]


@pytest.fixture
def risk_changes():
    return [
        make_risk_change("SUP-002", "Borealis Metals", 55, 71, "2024-11-03"),
        make_risk_change("SUP-001", "Acme Steel", 35, 28, "2024-10-28"),
    ]


# =============================================================================
# Logging
# =============================================================================

@pytest.fixture
def package_logger():
    """The "widgetpilot" logger, restored after the test."""
    logger = logging.getLogger("widgetpilot")
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
