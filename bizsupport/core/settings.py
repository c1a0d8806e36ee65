# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""Centralized configuration loader for BizSupport.

Loads config.yaml from the repository root and provides typed access to settings.
Falls back to sensible defaults if config.yaml is missing or incomplete.
Environment variables override config.yaml values.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_CONFIG_CACHE: Optional["BizSupportConfig"] = None

# Hard ceiling on the recommendation shortlist; config may only lower it.
MAX_RECOMMENDATIONS = 10


def _repo_root() -> Path:
    """Return the repository root."""
    # bizsupport/core/settings.py -> repo root
    return Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class MatchingConfig:
    """Matching engine configuration."""
    scoring_config_path: Path
    max_recommendations: int


@dataclass(frozen=True)
class BizSupportConfig:
    """Root configuration object."""
    matching: MatchingConfig


def _load_yaml_config() -> dict:
    """Load config.yaml from repo root. Returns empty dict if not found."""
    config_path = _repo_root() / "config.yaml"
    if not config_path.exists():
        return {}
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load %s: %s", config_path, e)
        return {}
    return data if isinstance(data, dict) else {}


def _section(raw: dict, name: str) -> dict:
    """Named mapping section of config.yaml; anything else is logged and ignored."""
    value = raw.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        logger.warning("config.yaml section %r is not a mapping; using defaults", name)
        return {}
    return value


def load_config(*, reload: bool = False) -> BizSupportConfig:
    """Load and return the BizSupport configuration.

    Priority order (highest to lowest):
    1. Environment variables (BIZSUPPORT_SCORING_CONFIG, BIZSUPPORT_MAX_RECOMMENDATIONS)
    2. config.yaml values
    3. Built-in defaults

    Parameters
    ----------
    reload : bool
        If True, force reload from disk. Otherwise use cached config.

    Returns
    -------
    BizSupportConfig
        The loaded configuration.
    """
    global _CONFIG_CACHE

    if _CONFIG_CACHE is not None and not reload:
        return _CONFIG_CACHE

    load_dotenv()
    raw = _load_yaml_config()

    matching_raw = _section(raw, "matching")
    scoring_path_str = os.getenv(
        "BIZSUPPORT_SCORING_CONFIG",
        str(matching_raw.get("scoring_config", "config/scoring.yaml")),
    )
    scoring_path = Path(scoring_path_str)
    if not scoring_path.is_absolute():
        scoring_path = _repo_root() / scoring_path

    max_raw = os.getenv(
        "BIZSUPPORT_MAX_RECOMMENDATIONS",
        str(matching_raw.get("max_recommendations", MAX_RECOMMENDATIONS)),
    )
    try:
        max_recommendations = int(max_raw)
    except ValueError:
        logger.warning("Invalid max_recommendations %r; using %d", max_raw, MAX_RECOMMENDATIONS)
        max_recommendations = MAX_RECOMMENDATIONS
    max_recommendations = max(1, min(MAX_RECOMMENDATIONS, max_recommendations))

    config = BizSupportConfig(
        matching=MatchingConfig(
            scoring_config_path=scoring_path,
            max_recommendations=max_recommendations,
        ),
    )

    _CONFIG_CACHE = config
    return config


def reset_config_cache() -> None:
    """Clear cached config (tests)."""
    global _CONFIG_CACHE
    _CONFIG_CACHE = None
