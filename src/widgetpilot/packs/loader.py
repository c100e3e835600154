"""
WidgetPilot Pack Loader

Loads and validates configuration packs from YAML or JSON files.

Converts Pydantic schema models to the immutable WidgetRegistry and
ConfidencePolicy objects the engine consumes.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, TypeVar, Union

import yaml
from pydantic import BaseModel, ValidationError

from ..config import get_settings
from ..exceptions import PackLoadError, PackValidationError, PackVersionMismatch
from ..models import WidgetType
from ..models.policy import ConfidencePolicy
from ..models.registry import PropsStyle, WidgetRegistry, WidgetTypeEntry
from .schema import (
    SCHEMA_VERSION,
    ConfidencePolicySchema,
    WidgetRegistrySchema,
    WidgetTypeSchema,
    check_schema_version,
    validate_confidence_policy,
    validate_widget_registry,
)

logger = logging.getLogger(__name__)

PACKS_DIR = Path(__file__).parent / "data"
DEFAULT_WIDGET_REGISTRY_PATH = PACKS_DIR / "widget_registry.yaml"
DEFAULT_CONFIDENCE_POLICY_PATH = PACKS_DIR / "confidence_policy.yaml"

SchemaT = TypeVar("SchemaT", bound=BaseModel)


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_widget_type(schema: WidgetTypeSchema) -> WidgetTypeEntry:
    """Convert WidgetTypeSchema to WidgetTypeEntry."""
    return WidgetTypeEntry(
        type=WidgetType(schema.type),
        component=schema.component,
        name=schema.name,
        category=schema.category,
        props_style=PropsStyle(schema.props_style),
        expands_to=schema.expands_to,
        enabled=schema.enabled,
    )


def _convert_widget_registry(schema: WidgetRegistrySchema) -> WidgetRegistry:
    """Convert WidgetRegistrySchema to WidgetRegistry."""
    return WidgetRegistry(
        (_convert_widget_type(w) for w in schema.widgets),
        version=schema.version,
    )


def _convert_confidence_policy(schema: ConfidencePolicySchema) -> ConfidencePolicy:
    """Convert ConfidencePolicySchema to ConfidencePolicy."""
    return ConfidencePolicy(
        counted_provider_types=frozenset(schema.counted_provider_types),
        version=schema.version,
    )


# =============================================================================
# Loader
# =============================================================================

class PackLoader:
    """
    Loads configuration packs from YAML or JSON files.

    Usage:
        loader = PackLoader()
        registry = loader.load_widget_registry("path/to/widgets.yaml")
        policy = loader.load_confidence_policy("path/to/policy.yaml")
    """

    def __init__(self, strict_version: bool = True):
        """
        Initialize the loader.

        Args:
            strict_version: If True, reject packs with incompatible schema versions
        """
        self.strict_version = strict_version

    def load_widget_registry(self, path: Union[str, Path]) -> WidgetRegistry:
        """
        Load a widget registry pack.

        Raises:
            PackLoadError: If file cannot be read
            PackValidationError: If validation fails
            PackVersionMismatch: If schema version incompatible
        """
        schema = self._load(Path(path), validate_widget_registry)
        registry = _convert_widget_registry(schema)
        logger.info("Loaded widget registry %s (%d types) from %s", registry.version, len(registry), path)
        return registry

    def load_confidence_policy(self, path: Union[str, Path]) -> ConfidencePolicy:
        """
        Load a confidence policy pack.

        Raises:
            PackLoadError: If file cannot be read
            PackValidationError: If validation fails
            PackVersionMismatch: If schema version incompatible
        """
        schema = self._load(Path(path), validate_confidence_policy)
        policy = _convert_confidence_policy(schema)
        logger.info(
            "Loaded confidence policy %s counting %s from %s",
            policy.version, ", ".join(sorted(policy.counted_provider_types)), path,
        )
        return policy

    def load_widget_registry_from_string(self, content: str, format: str = "yaml") -> WidgetRegistry:
        """Load a widget registry pack from a YAML or JSON string."""
        data = self._parse_string(content, format)
        return _convert_widget_registry(self._validate(data, validate_widget_registry, "<string>"))

    def load_confidence_policy_from_string(self, content: str, format: str = "yaml") -> ConfidencePolicy:
        """Load a confidence policy pack from a YAML or JSON string."""
        data = self._parse_string(content, format)
        return _convert_confidence_policy(self._validate(data, validate_confidence_policy, "<string>"))

    def _load(self, path: Path, validator: Callable[[dict[str, Any]], SchemaT]) -> SchemaT:
        try:
            data = self._load_file(path)
        except Exception as e:
            raise PackLoadError(
                message=f"Failed to load pack: {e}",
                details={"path": str(path), "error": str(e)},
            )
        return self._validate(data, validator, str(path))

    def _validate(
        self,
        data: Any,
        validator: Callable[[dict[str, Any]], SchemaT],
        source: str,
    ) -> SchemaT:
        if not isinstance(data, dict):
            raise PackValidationError(
                message="Pack must be a mapping at the top level",
                details={"path": source},
            )

        if self.strict_version and not check_schema_version(data):
            pack_version = data.get("schema_version", "unknown")
            raise PackVersionMismatch(
                message=f"Schema version mismatch: pack has {pack_version}, expected {SCHEMA_VERSION}",
                details={
                    "pack_version": pack_version,
                    "expected_version": SCHEMA_VERSION,
                    "path": source,
                },
            )

        try:
            return validator(data)
        except ValidationError as e:
            raise PackValidationError(
                message=f"Pack validation failed: {e.error_count()} errors",
                details={"errors": e.errors(include_url=False, include_context=False), "path": source},
            )

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)

    def _parse_string(self, content: str, format: str) -> Any:
        try:
            if format.lower() == "json":
                return json.loads(content)
            return yaml.safe_load(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise PackLoadError(
                message=f"Failed to parse pack: {e}",
                details={"format": format, "error": str(e)},
            )


# =============================================================================
# Convenience Functions
# =============================================================================

def load_widget_registry(path: Optional[Union[str, Path]] = None) -> WidgetRegistry:
    """Load a widget registry pack; the packaged one when no path is given."""
    return PackLoader().load_widget_registry(path or DEFAULT_WIDGET_REGISTRY_PATH)


def load_confidence_policy(path: Optional[Union[str, Path]] = None) -> ConfidencePolicy:
    """Load a confidence policy pack; the packaged one when no path is given."""
    return PackLoader().load_confidence_policy(path or DEFAULT_CONFIDENCE_POLICY_PATH)


@lru_cache(maxsize=1)
def default_widget_registry() -> WidgetRegistry:
    """Process-wide widget registry, honoring WP_WIDGET_REGISTRY. Loaded once."""
    return load_widget_registry(get_settings().widget_registry_path)


@lru_cache(maxsize=1)
def default_confidence_policy() -> ConfidencePolicy:
    """Process-wide confidence policy, honoring WP_CONFIDENCE_POLICY. Loaded once."""
    return load_confidence_policy(get_settings().confidence_policy_path)
