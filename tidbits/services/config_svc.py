#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from built-in defaults, YAML files and env vars
#  - Caches composed config for repeated lookups
#  - Provides reload() for runtime changes
# ======================================================================

from __future__ import annotations

import logging
import os
from typing import Any

import yaml

from tidbits.__version__ import __version__

ENV_PREFIX = "TIDBITS_"
CONFIG_PATH_ENV = "TIDBITS_CONFIG_PATH"


class ConfigService:
    """
    Service for loading and caching tidbits configuration.

    Loads config from multiple sources (defaults → YAML → overrides → env),
    caches the result, and provides reload capability.

    Only logging settings live here. Helper results never depend on it.
    """

    def __init__(self, search_dir: str | None = None) -> None:
        """
        Initialize ConfigService with empty cache.

        Args:
            search_dir: Directory holding ``config/tidbits.yaml``; defaults to
                the current working directory at compose time.
        """
        self._config: dict[str, Any] | None = None
        self._search_dir = search_dir
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Args:
            key_path: Dotted path like "log_level"
            default: Default value if key not found

        Returns:
            Config value or default

        Example:
            >>> service.get("log_level")
            'WARNING'
            >>> service.get("missing.key", 2)
            2
        """
        cfg = self.get_config()
        node: Any = cfg
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        """
        Force reload configuration from all sources.

        Returns:
            Newly composed config
        """
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) ./config/tidbits.yaml (if present)
          3) $TIDBITS_CONFIG_PATH (if set)
          4) overrides dict passed in
          5) Environment variables (TIDBITS_*)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        # 1) Repo-local config
        base_dir = self._search_dir or os.getcwd()
        self._deep_merge(cfg, self._load_yaml(os.path.join(base_dir, "config", "tidbits.yaml")))

        # 2) Optional path via env
        env_path = os.getenv(CONFIG_PATH_ENV)
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        # 3) Direct overrides
        if overrides:
            self._deep_merge(cfg, overrides)

        # 4) Environment variable overrides
        self._apply_env_overrides(cfg)

        self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))
        return cfg

    def _default_config(self) -> dict[str, Any]:
        """
        Base defaults; all fields present so no KeyErrors downstream.
        """
        return {
            "version": __version__,
            # Level used by configure_logging() when called without one
            "log_level": "WARNING",
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML mapping; returns {} if not found or invalid.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"Ignoring unreadable config file {path}: {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"Ignoring config file {path}: top level is not a mapping")
            return {}
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides of the form:
          TIDBITS_LOG_LEVEL=DEBUG
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX) or k == CONFIG_PATH_ENV:
                continue

            key = k[len(ENV_PREFIX) :].lower()
            if not key:
                continue

            if v.lower() in ("true", "false"):
                val: Any = v.lower() == "true"
            elif v.isdigit():
                val = int(v)
            else:
                val = v
            cfg[key] = val
