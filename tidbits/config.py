#!/usr/bin/env python3
# ======================================================================
#  tidbits - Config (module-level access)
#  - Thin wrapper around a shared ConfigService instance
#  - Tests and embedding applications can build their own ConfigService
# ======================================================================

from __future__ import annotations

from typing import Any

from tidbits.services.config_svc import ConfigService

# Global service instance
_config_service = ConfigService()


def compose(overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """
    Load final configuration from:
      1) Built-in defaults
      2) ./config/tidbits.yaml (if present)
      3) $TIDBITS_CONFIG_PATH (if set)
      4) overrides dict passed in
      5) Environment variables (TIDBITS_*)

    Returns merged config as dict.
    """
    if overrides:
        # If overrides provided, bypass cache and compose fresh
        return _config_service._compose(overrides)
    return _config_service.get_config()


def get(key_path: str, default: Any = None) -> Any:
    """
    Convenience getter using dotted path, e.g. get("log_level")
    """
    return _config_service.get(key_path, default)


def reload() -> dict[str, Any]:
    """Recompose the shared configuration, picking up file and env changes."""
    return _config_service.reload()
