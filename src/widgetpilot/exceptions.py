"""
WidgetPilot Exception Hierarchy

Exceptions raised by the configuration and rule-definition layers.
Selection and confidence classification never raise: "no match" is
reported as None, and every source collection has a confidence tier.

Exception codes follow the pattern: WP_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class WidgetPilotError(Exception):
    """
    Base exception for all WidgetPilot errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (WP_*)
        details: Additional context about the error
    """
    message: str
    code: str = "WP_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Pack Errors
# =============================================================================

@dataclass
class PackLoadError(WidgetPilotError):
    """Failed to read a configuration pack from file."""
    code: str = "WP_PACK_LOAD_ERROR"


@dataclass
class PackValidationError(WidgetPilotError):
    """Configuration pack schema validation failed."""
    code: str = "WP_PACK_VALIDATION_ERROR"


@dataclass
class PackVersionMismatch(WidgetPilotError):
    """Pack schema version doesn't match the supported version."""
    code: str = "WP_PACK_VERSION_MISMATCH"


# =============================================================================
# Rule Definition Errors
# =============================================================================

@dataclass
class RuleDefinitionError(WidgetPilotError):
    """A selection rule is malformed."""
    code: str = "WP_RULE_DEFINITION_ERROR"


@dataclass
class DuplicateRuleError(RuleDefinitionError):
    """Two selection rules share an identifier."""
    code: str = "WP_DUPLICATE_RULE"


# =============================================================================
# Input Errors
# =============================================================================

@dataclass
class InvalidSurfaceError(WidgetPilotError):
    """Surface label is not one of the known rendering surfaces."""
    code: str = "WP_INVALID_SURFACE"


@dataclass
class InvalidContextError(WidgetPilotError):
    """Upstream data could not be turned into a data context."""
    code: str = "WP_INVALID_CONTEXT"
