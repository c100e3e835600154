"""
Tests for the command line interface.
"""
import json

import pytest
import yaml

from widgetpilot.cli import ExitCode, main

from tests.helpers import make_sources


pytestmark = pytest.mark.usefixtures("package_logger")


@pytest.fixture
def turn_file(tmp_path):
    path = tmp_path / "turn.yaml"
    path.write_text(yaml.dump({
        "portfolio": {
            "totalSuppliers": 20,
            "totalSpend": 12500000,
            "distribution": {"high": 2, "mediumHigh": 1, "medium": 3, "low": 4, "unrated": 10},
        },
    }))
    return path


def run(capsys, *argv):
    code = main(["--log-level", "WARNING", *argv])
    out = capsys.readouterr().out
    return code, json.loads(out) if out.strip() else None


class TestSelectCommand:
    """Tests for `widgetpilot select`."""

    def test_select(self, capsys, turn_file):
        code, result = run(capsys, "select", "-i", "portfolio_overview", "-d", str(turn_file))

        assert code == ExitCode.OK
        assert result["surface"] == "inline"
        assert result["component"]["component"] == "RiskDistributionWidget"

    def test_select_panel(self, capsys, turn_file):
        code, result = run(capsys, "select", "-i", "portfolio_overview", "-s", "side-panel", "-d", str(turn_file))

        assert result["surface"] == "panel"
        assert result["component"]["component"] == "PortfolioDashboardArtifact"

    def test_no_fallback(self, capsys, tmp_path):
        path = tmp_path / "turn.json"
        path.write_text(json.dumps({"widget": {"type": "stat_card", "data": {"value": 3}}}))

        _, resolved = run(capsys, "select", "-i", "general", "-d", str(path))
        _, selected = run(capsys, "select", "-i", "general", "-d", str(path), "--no-fallback")

        assert resolved["component"]["component"] == "StatCard"
        assert selected["component"] is None

    def test_invalid_surface(self, capsys):
        code = main(["select", "-i", "general", "-s", "billboard"])

        assert code == ExitCode.INPUT_INVALID
        assert "WP_INVALID_SURFACE" in capsys.readouterr().err

    def test_missing_file(self, capsys, tmp_path):
        code = main(["select", "-i", "general", "-d", str(tmp_path / "missing.json")])

        assert code == ExitCode.INPUT_INVALID
        assert "Could not read input" in capsys.readouterr().err

    def test_invalid_data(self, capsys, tmp_path):
        path = tmp_path / "turn.json"
        path.write_text(json.dumps({"portfolio": {"totalSpend": "lots"}}))

        code = main(["select", "-i", "portfolio_overview", "-d", str(path)])

        assert code == ExitCode.INPUT_INVALID
        assert "Invalid input" in capsys.readouterr().err


class TestExpandCommand:
    """Tests for `widgetpilot expand`."""

    def test_expand(self, capsys, turn_file):
        code, result = run(capsys, "expand", "-i", "portfolio_overview", "-d", str(turn_file))

        assert code == ExitCode.OK
        assert result["escalation"]["config"]["component"] == "PortfolioDashboardArtifact"
        assert result["escalation"]["matches_advertised"] is True

    def test_nothing_to_expand(self, capsys):
        _, result = run(capsys, "expand", "-i", "restricted_query")

        assert result["escalation"] is None


class TestConfidenceCommand:
    """Tests for `widgetpilot confidence`."""

    def test_list_document(self, capsys, tmp_path):
        path = tmp_path / "sources.json"
        path.write_text(json.dumps(make_sources(beroe=3, web=1)))

        code, result = run(
            capsys, "confidence", "--sources", str(path), "-c", "Steel", "-m", "Steel (Hot Rolled Coil)",
        )

        assert code == ExitCode.OK
        assert result["confidence"]["level"] == "high"
        assert result["confidence"]["is_managed_category"] is True
        assert result["label"] == "Decision Grade"
        assert result["total_web_count"] == 1

    def test_wrapped_document(self, capsys, tmp_path):
        path = tmp_path / "sources.yaml"
        path.write_text(yaml.dump({"sources": make_sources(web=2)}))

        _, result = run(capsys, "confidence", "--sources", str(path))

        assert result["confidence"]["level"] == "web_only"

    def test_invalid_document(self, capsys, tmp_path):
        path = tmp_path / "sources.json"
        path.write_text(json.dumps("beroe"))

        assert main(["confidence", "--sources", str(path)]) == ExitCode.INPUT_INVALID


class TestRulesCommand:
    """Tests for `widgetpilot rules`."""

    def test_rules_by_surface(self, capsys):
        code, rules = run(capsys, "rules", "-s", "panel_expanded")

        assert code == ExitCode.OK
        assert rules
        assert all("panel_expanded" in r["surfaces"] for r in rules)

    def test_no_command(self, capsys):
        assert main([]) == ExitCode.NO_COMMAND
