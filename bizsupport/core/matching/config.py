# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""Matching config: point values per scoring dimension and rule thresholds.

Point values can be overridden from the ``weights:`` section of config/scoring.yaml;
thresholds are fixed.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Dict, Optional, Tuple

import yaml

from bizsupport.core.settings import load_config

logger = logging.getLogger(__name__)

# Experience rule thresholds (years)
BEGINNER_MAX_YEARS = 2
GROWTH_MIN_YEARS = 5

# funding_amount / annual_revenue at or above this -> revenue_scale
REVENUE_RATIO_MIN = 0.10

# funding_amount / desired_loan_amount within [min, max] -> loan_funding_fit (no loan bounds on program)
FUNDING_FIT_RATIO_MIN = 0.8
FUNDING_FIT_RATIO_MAX = 1.5


@dataclass(frozen=True)
class ScoreWeights:
    """Points awarded (or deducted) by each scoring rule."""

    # business type / size
    business_type: int = 30
    general_business: int = 15
    business_size: int = 20
    # industry categories
    industry_tech: int = 35
    industry_manufacturing: int = 35
    industry_agriculture: int = 35
    industry_services: int = 30
    industry_tourism: int = 30
    industry_trade: int = 30
    industry_construction: int = 30
    industry_mismatch_penalty: int = -40
    # classification code
    classification_exact: int = 35
    classification_hierarchy: int = 20
    # region
    region_exact: int = 25
    region_all: int = 15
    region_unrestricted: int = 15
    # loan amount
    loan_in_range: int = 30
    loan_below_min: int = 15
    loan_above_max: int = 5
    loan_funding_fit: int = 20
    # experience
    experience_beginner: int = 20
    experience_growth: int = 15
    # revenue
    revenue_scale: int = 15
    revenue_starter: int = 10

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)

    def industry_points(self, category: str) -> int:
        return getattr(self, f"industry_{category}")


DEFAULT_WEIGHTS = ScoreWeights()

_WEIGHT_FIELDS = frozenset(f.name for f in fields(ScoreWeights))

_WEIGHTS_CACHE: Dict[Path, ScoreWeights] = {}


def weights_from_mapping(raw: Optional[dict]) -> ScoreWeights:
    """Apply overrides from a mapping onto the defaults.

    Unknown keys and non-integer values are logged and ignored.
    """
    if not raw:
        return DEFAULT_WEIGHTS
    overrides: Dict[str, int] = {}
    for key, value in raw.items():
        if key not in _WEIGHT_FIELDS:
            logger.warning("Unknown scoring weight %r ignored", key)
            continue
        if isinstance(value, bool):
            logger.warning("Scoring weight %s=%r is not a number; using default", key, value)
            continue
        try:
            as_float = float(value)
        except (TypeError, ValueError):
            logger.warning("Scoring weight %s=%r is not a number; using default", key, value)
            continue
        if not as_float.is_integer():
            logger.warning("Scoring weight %s=%r is not a whole number; using default", key, value)
            continue
        overrides[key] = int(as_float)
    return replace(DEFAULT_WEIGHTS, **overrides)


def _read_scoring_yaml(path: Path) -> dict:
    """Load scoring yaml. Returns empty dict if not found or unreadable."""
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load scoring config %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Scoring config %s is not a mapping; using defaults", path)
        return {}
    return data


def load_score_weights(path: Optional[Path] = None, *, reload: bool = False) -> ScoreWeights:
    """Weights from config/scoring.yaml (or ``path``), cached per path. Defaults when absent."""
    if path is None:
        path = load_config().matching.scoring_config_path
    path = Path(path)
    if not reload and path in _WEIGHTS_CACHE:
        return _WEIGHTS_CACHE[path]
    cfg = _read_scoring_yaml(path)
    weights_raw = cfg.get("weights")
    if weights_raw is not None and not isinstance(weights_raw, dict):
        logger.warning("'weights' in %s is not a mapping; using defaults", path)
        weights_raw = None
    weights = weights_from_mapping(weights_raw)
    _WEIGHTS_CACHE[path] = weights
    return weights


def clear_weights_cache() -> None:
    _WEIGHTS_CACHE.clear()


def weight_names() -> Tuple[str, ...]:
    return tuple(f.name for f in fields(ScoreWeights))
