#!/usr/bin/env python3
"""
WidgetPilot CLI

Run component selection and source-confidence classification from the
shell. Results are printed to stdout as JSON.

Usage:
    widgetpilot select --intent portfolio_overview --data turn.json
    widgetpilot select --intent supplier_deep_dive --surface panel --data turn.yaml
    widgetpilot expand --intent filtered_discovery --data turn.json
    widgetpilot confidence --sources sources.json --category Steel --managed "Steel (HRC)"
    widgetpilot rules --surface inline

Exit Codes:
    0  OK              Command completed
    1  NO_COMMAND      No command given
    2  INPUT_INVALID   Unreadable or invalid input
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from .api.schemas.requests import SelectionData, SourceInput
from .config import get_settings
from .engine import (
    build_response_sources,
    expand,
    get_confidence_label,
    get_default_selector,
)
from .exceptions import WidgetPilotError
from .log import configure_logging
from .models import Surface
from .packs import default_confidence_policy


class ExitCode:
    """Exit codes for shell integration."""
    OK = 0
    NO_COMMAND = 1
    INPUT_INVALID = 2


def print_error(text: str):
    print(f"[ERROR] {text}", file=sys.stderr)


def print_json(value: Any):
    print(json.dumps(value, indent=2, sort_keys=True))


def load_document(path: Path) -> Any:
    """Load a JSON or YAML file (by extension)."""
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() in (".yaml", ".yml"):
            return yaml.safe_load(f)
        return json.load(f)


def _load_data(path: Optional[str]) -> SelectionData:
    if not path:
        return SelectionData()
    return SelectionData.model_validate(load_document(Path(path)) or {})


def _surface(value: Optional[str]) -> Surface:
    return Surface.parse(value) if value else get_settings().default_surface


# =============================================================================
# Commands
# =============================================================================

def cmd_select(args: argparse.Namespace) -> int:
    """Select and resolve the component for a turn."""
    context = _load_data(args.data).to_context(args.intent, args.sub_intent)
    surface = _surface(args.surface)
    selector = get_default_selector()

    config = selector.select(context, surface) if args.no_fallback else selector.resolve(context, surface)
    print_json({
        "intent": context.intent_label,
        "surface": surface.value,
        "component": config.to_dict() if config is not None else None,
    })
    return ExitCode.OK


def cmd_expand(args: argparse.Namespace) -> int:
    """Expand the component selected on a surface."""
    context = _load_data(args.data).to_context(args.intent, args.sub_intent)
    from_surface = _surface(args.surface)
    to_surface = Surface.parse(args.to_surface) if args.to_surface else None

    escalation = expand(context, from_surface, to_surface)
    print_json({
        "intent": context.intent_label,
        "from_surface": from_surface.value,
        "escalation": escalation.to_dict() if escalation is not None else None,
    })
    return ExitCode.OK


def cmd_confidence(args: argparse.Namespace) -> int:
    """Classify the confidence of a response's sources."""
    document = load_document(Path(args.sources))
    if isinstance(document, dict):
        document = document.get("sources", [])
    if not isinstance(document, list):
        print_error("Sources file must hold a list of sources or {\"sources\": [...]}")
        return ExitCode.INPUT_INVALID

    raw = [SourceInput.model_validate(s).model_dump(by_alias=True, exclude_none=True) for s in document]
    policy = default_confidence_policy()
    sources = build_response_sources(
        raw,
        detected_category=args.category,
        managed_categories=args.managed,
        policy=policy,
    )
    result = sources.to_dict()
    result["label"] = get_confidence_label(sources.confidence.level)
    result["policy_version"] = policy.version
    print_json(result)
    return ExitCode.OK


def cmd_rules(args: argparse.Namespace) -> int:
    """List the selection rules in evaluation order."""
    rules = [r.to_dict() for r in get_default_selector().rules]
    if args.surface:
        wanted = Surface.parse(args.surface).value
        rules = [r for r in rules if wanted in r["surfaces"]]
    if args.intent:
        rules = [r for r in rules if not r["intents"] or args.intent in r["intents"]]
    print_json(rules)
    return ExitCode.OK


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="widgetpilot",
        description="Component selection and source confidence for the procurement assistant",
    )
    parser.add_argument("--log-level", default=None, help="Override WP_LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # select
    select_parser = subparsers.add_parser("select", help="Select the component for a turn")
    select_parser.add_argument("--intent", "-i", required=True, help="Classified intent")
    select_parser.add_argument("--sub-intent", help="Optional sub-intent")
    select_parser.add_argument("--surface", "-s", help="Surface (default: WP_DEFAULT_SURFACE)")
    select_parser.add_argument("--data", "-d", help="JSON or YAML file with the turn's data")
    select_parser.add_argument("--no-fallback", action="store_true",
                               help="Rule selection only, without registry and placeholder fallbacks")
    select_parser.set_defaults(func=cmd_select)

    # expand
    expand_parser = subparsers.add_parser("expand", help="Expand a component to a richer surface")
    expand_parser.add_argument("--intent", "-i", required=True, help="Classified intent")
    expand_parser.add_argument("--sub-intent", help="Optional sub-intent")
    expand_parser.add_argument("--surface", "-s", help="Surface the component was selected on")
    expand_parser.add_argument("--to-surface", help="Target surface (default: next richer surface)")
    expand_parser.add_argument("--data", "-d", help="JSON or YAML file with the turn's data")
    expand_parser.set_defaults(func=cmd_expand)

    # confidence
    conf_parser = subparsers.add_parser("confidence", help="Classify response source confidence")
    conf_parser.add_argument("--sources", required=True, help="JSON or YAML file with the raw sources")
    conf_parser.add_argument("--category", "-c", help="Category detected from the query")
    conf_parser.add_argument("--managed", "-m", nargs="*", default=[], help="Managed categories")
    conf_parser.set_defaults(func=cmd_confidence)

    # rules
    rules_parser = subparsers.add_parser("rules", help="List the selection rules")
    rules_parser.add_argument("--surface", "-s", help="Only rules eligible for this surface")
    rules_parser.add_argument("--intent", "-i", help="Only rules applying to this intent")
    rules_parser.set_defaults(func=cmd_rules)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return ExitCode.NO_COMMAND

    settings = get_settings()
    configure_logging(args.log_level or settings.log_level, settings.log_format)

    try:
        return args.func(args)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        print_error(f"Could not read input: {e}")
        return ExitCode.INPUT_INVALID
    except ValidationError as e:
        print_error(f"Invalid input: {e.error_count()} error(s)")
        for error in e.errors(include_url=False):
            location = ".".join(str(p) for p in error["loc"])
            print(f"  [X] {location}: {error['msg']}", file=sys.stderr)
        return ExitCode.INPUT_INVALID
    except WidgetPilotError as e:
        print_error(str(e))
        return ExitCode.INPUT_INVALID


if __name__ == "__main__":
    sys.exit(main())
