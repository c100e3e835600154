"""
Tests for the HTTP API via TestClient.

Covers:
- Health and catalog listings
- Component selection and expansion
- Source confidence classification
- Error mapping for invalid input
"""
import pytest
from fastapi.testclient import TestClient

from widgetpilot.api.main import app


PORTFOLIO = {
    "totalSuppliers": 20,
    "totalSpend": 12500000,
    "distribution": {"high": 2, "mediumHigh": 1, "medium": 3, "low": 4, "unrated": 10},
}

SUPPLIERS = [
    {
        "id": "SUP-001",
        "name": "Acme Steel",
        "category": "Steel",
        "location": {"city": "Pittsburgh", "country": "United States", "region": "North America"},
        "spend": 4200000,
        "srs": {"score": 28, "level": "low", "trend": "improving"},
    },
    {
        "id": "SUP-002",
        "name": "Borealis Metals",
        "category": "Steel",
        "spend": 1800000,
        "srs": {"score": 71, "level": "high", "trend": "worsening"},
    },
]


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as test_client:
        yield test_client


class TestHealthAndCatalog:
    """Tests for health and listing endpoints."""

    def test_health(self, client):
        resp = client.get("/health")

        assert resp.status_code == 200
        body = resp.json()
        assert body["healthy"] is True
        assert body["widget_types_loaded"] == 56
        assert body["policy_version"] == "2024.1"

    def test_rules_filtered_by_surface(self, client):
        resp = client.get("/rules", params={"surface": "inline_compact"})

        assert resp.status_code == 200
        assert all("inline_compact" in r["surfaces"] for r in resp.json())

    def test_rules_filtered_by_intent_include_intent_free_rules(self, client):
        ids = [r["id"] for r in client.get("/rules", params={"intent": "comparison"}).json()]

        assert "comparison_table_chat" in ids
        assert "spend_exposure_by_widget_type" in ids
        assert "portfolio_artifact" not in ids

    def test_rules_invalid_surface(self, client):
        resp = client.get("/rules", params={"surface": "billboard"})

        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "WP_INVALID_SURFACE"

    def test_widgets_by_category(self, client):
        resp = client.get("/widgets", params={"category": "inflation"})

        assert resp.status_code == 200
        assert {w["category"] for w in resp.json()} == {"inflation"}


class TestSelectEndpoint:
    """Tests for POST /select."""

    def test_portfolio_inline(self, client):
        resp = client.post("/select", json={
            "intent": "portfolio_overview",
            "surface": "inline",
            "data": {"portfolio": PORTFOLIO},
        })

        assert resp.status_code == 200
        body = resp.json()
        assert body["component"]["component"] == "RiskDistributionWidget"
        assert body["component"]["size"] == "md"
        assert body["component"]["props"]["data"]["distribution"]["high"]["percent"] == 10
        assert body["selected"] == body["component"]

    def test_default_surface_is_inline(self, client):
        resp = client.post("/select", json={"intent": "comparison", "data": {"suppliers": SUPPLIERS}})

        body = resp.json()
        assert body["surface"] == "inline"
        assert body["component"]["component"] == "ComparisonTableWidget"

    def test_text_only_intent(self, client):
        body = client.post("/select", json={"intent": "setup_config"}).json()

        assert body["component"] is None
        assert body["selected"]["component"] == "none"

    def test_unknown_widget_placeholder(self, client):
        body = client.post("/select", json={
            "intent": "general",
            "data": {"widget": {"type": "hologram", "data": {"x": 1}}},
        }).json()

        assert body["selected"] is None
        assert body["component"]["component"] == "PlaceholderWidget"
        assert body["component"]["props"] == {"type": "hologram"}

    def test_invalid_surface(self, client):
        resp = client.post("/select", json={"intent": "general", "surface": "billboard"})

        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert detail["code"] == "WP_INVALID_SURFACE"
        assert "panel" in detail["details"]["valid"]

    def test_widget_without_type_rejected(self, client):
        resp = client.post("/select", json={"intent": "general", "data": {"widget": {"data": {"x": 1}}}})

        assert resp.status_code == 422

    def test_missing_intent(self, client):
        resp = client.post("/select", json={"surface": "inline"})

        assert resp.status_code == 422


class TestExpandEndpoint:
    """Tests for POST /expand."""

    def test_expand_portfolio(self, client):
        resp = client.post("/expand", json={
            "intent": "portfolio_overview",
            "surface": "inline",
            "data": {"portfolio": PORTFOLIO},
        })

        body = resp.json()
        assert body["expanded"] is True
        assert body["surface"] == "panel"
        assert body["source"]["component"] == "RiskDistributionWidget"
        assert body["component"]["component"] == "PortfolioDashboardArtifact"
        assert body["matches_advertised"] is True

    def test_nothing_to_expand(self, client):
        body = client.post("/expand", json={"intent": "restricted_query"}).json()

        assert body["expanded"] is False
        assert body["component"] is None


class TestConfidenceEndpoint:
    """Tests for POST /confidence."""

    def test_managed_category(self, client):
        resp = client.post("/confidence", json={
            "sources": [
                {"name": "Steel Market Report", "type": "beroe", "reportId": "RPT-1"},
                {"name": "Steel Cost Model", "type": "beroe"},
                {"name": "Reuters", "url": "https://www.reuters.com/markets/steel"},
            ],
            "detectedCategory": "Steel",
            "managedCategories": ["Steel (Hot Rolled Coil)"],
        })

        assert resp.status_code == 200
        body = resp.json()
        assert body["confidence"]["level"] == "high"
        assert body["confidence"]["label"] == "Decision Grade"
        assert body["confidence"]["decision_grade"] is True
        assert body["sources"]["internal"][0]["reportId"] == "RPT-1"
        assert body["sources"]["web"][0]["domain"] == "reuters.com"
        assert body["policy_version"] == "2024.1"

    def test_no_sources(self, client):
        body = client.post("/confidence", json={}).json()

        assert body["confidence"]["level"] == "low"
        assert body["confidence"]["show_expand_to_web"] is True
        assert body["confidence"]["decision_grade"] is False
