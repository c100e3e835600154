"""
WidgetPilot Settings

Runtime configuration read from WP_* environment variables.

    WP_LOG_LEVEL          Logging level (default: INFO)
    WP_LOG_FORMAT         "json" or "text" (default: json)
    WP_WIDGET_REGISTRY    Path to a widget registry pack overriding the packaged one
    WP_CONFIDENCE_POLICY  Path to a confidence policy pack overriding the packaged one
    WP_DEFAULT_SURFACE    Surface used when a caller does not name one (default: inline)
    WP_CORS_ORIGINS       Comma-separated origins allowed by the HTTP API
"""
from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .models import Surface


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_format: str = "json"
    widget_registry_path: Optional[Path] = None
    confidence_policy_path: Optional[Path] = None
    default_surface: Surface = Surface.INLINE
    cors_origins: tuple[str, ...] = field(default_factory=lambda: ("*",))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """
        Build settings from environment variables.

        Raises:
            InvalidSurfaceError: If WP_DEFAULT_SURFACE is not a known surface
        """
        env = os.environ if environ is None else environ

        registry = env.get("WP_WIDGET_REGISTRY")
        policy = env.get("WP_CONFIDENCE_POLICY")
        origins = env.get("WP_CORS_ORIGINS", "*")

        return cls(
            log_level=env.get("WP_LOG_LEVEL", "INFO").upper(),
            log_format=env.get("WP_LOG_FORMAT", "json").lower(),
            widget_registry_path=Path(registry) if registry else None,
            confidence_policy_path=Path(policy) if policy else None,
            default_surface=Surface.parse(env.get("WP_DEFAULT_SURFACE", Surface.INLINE.value)),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        )


def get_settings() -> Settings:
    """Current settings from the process environment."""
    return Settings.from_env()
