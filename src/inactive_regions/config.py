"""Settings for inactive-region rendering.

Values are layered: built-in defaults, then the workspace settings file, then
environment variables.  Bad values are reported and skipped, never raised.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .tokens import INACTIVE_TOKEN_TYPE

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = ".inactive_regions.json"
WORKSPACE_ENV_VAR = "INACTIVE_REGIONS_WORKSPACE"
OPACITY_ENV_VAR = "INACTIVE_REGIONS_OPACITY"
TOKEN_TYPE_ENV_VAR = "INACTIVE_REGIONS_TOKEN_TYPE"

_DEFAULT_OPACITY = 0.55


@dataclass(frozen=True)
class Settings:
    """User-facing configuration for the inactive regions feature."""

    inactive_region_opacity: float = _DEFAULT_OPACITY
    inactive_token_type: str = INACTIVE_TOKEN_TYPE


def _parse_opacity(raw: Any, source: str) -> float | None:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric inactive region opacity %r from %s", raw, source)
        return None
    if not 0.0 <= value <= 1.0:
        logger.warning(
            "Ignoring inactive region opacity %s from %s: must be within [0, 1]", value, source
        )
        return None
    return value


def _parse_token_type(raw: Any, source: str) -> str | None:
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    logger.warning("Ignoring inactive token type %r from %s", raw, source)
    return None


def resolve_workspace(workspace: str | Path | None = None) -> Path:
    """Normalize workspace root from explicit value or runtime environment."""
    if workspace is not None:
        return Path(workspace)
    env_workspace = os.getenv(WORKSPACE_ENV_VAR)
    if env_workspace:
        return Path(env_workspace)
    return Path.cwd()


def _read_settings_file(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Failed reading %s: %s", path, exc)
        return {}
    if not isinstance(payload, dict):
        logger.warning("Ignoring %s: expected a JSON object", path)
        return {}
    return payload


def _apply_layer(settings: Settings, opacity: Any, token_type: Any, source: str) -> Settings:
    if opacity is not None:
        parsed_opacity = _parse_opacity(opacity, source)
        if parsed_opacity is not None:
            settings = replace(settings, inactive_region_opacity=parsed_opacity)
    if token_type is not None:
        parsed_type = _parse_token_type(token_type, source)
        if parsed_type is not None:
            settings = replace(settings, inactive_token_type=parsed_type)
    return settings


def load_settings(workspace: str | Path | None = None) -> Settings:
    """Load settings for *workspace* (see module docstring for precedence)."""
    settings = Settings()

    settings_path = resolve_workspace(workspace) / SETTINGS_FILENAME
    file_values = _read_settings_file(settings_path)
    settings = _apply_layer(
        settings,
        file_values.get("inactiveRegionOpacity"),
        file_values.get("inactiveTokenType"),
        str(settings_path),
    )

    env_opacity = os.getenv(OPACITY_ENV_VAR, "")
    env_type = os.getenv(TOKEN_TYPE_ENV_VAR, "")
    settings = _apply_layer(
        settings,
        env_opacity if env_opacity.strip() else None,
        env_type if env_type.strip() else None,
        "environment",
    )
    return settings
