# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""Scoring weights: defaults, yaml overrides, tolerant parsing, settings env overrides."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from bizsupport.core.matching.config import (
    DEFAULT_WEIGHTS,
    ScoreWeights,
    load_score_weights,
    weight_names,
    weights_from_mapping,
)
from bizsupport.core import settings
from bizsupport.core.settings import MAX_RECOMMENDATIONS, load_config

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_default_point_values():
    w = DEFAULT_WEIGHTS
    assert (w.business_type, w.general_business, w.business_size) == (30, 15, 20)
    assert w.industry_points("tech") == 35
    assert w.industry_points("services") == 30
    assert w.industry_mismatch_penalty == -40
    assert (w.classification_exact, w.classification_hierarchy) == (35, 20)
    assert (w.region_exact, w.region_all, w.region_unrestricted) == (25, 15, 15)
    assert (w.loan_in_range, w.loan_below_min, w.loan_above_max, w.loan_funding_fit) == (30, 15, 5, 20)
    assert (w.experience_beginner, w.experience_growth) == (20, 15)
    assert (w.revenue_scale, w.revenue_starter) == (15, 10)


def test_shipped_scoring_yaml_matches_defaults():
    weights = load_score_weights(REPO_ROOT / "config" / "scoring.yaml")
    assert weights == DEFAULT_WEIGHTS
    assert set(weights.as_dict()) == set(weight_names())


def test_yaml_overrides_selected_weights(tmp_path):
    cfg = tmp_path / "scoring.yaml"
    cfg.write_text("weights:\n  business_type: 50\n  industry_mismatch_penalty: -60\n", encoding="utf-8")
    weights = load_score_weights(cfg)
    assert weights.business_type == 50
    assert weights.industry_mismatch_penalty == -60
    assert weights.region_exact == DEFAULT_WEIGHTS.region_exact


def test_missing_file_gives_defaults(tmp_path):
    assert load_score_weights(tmp_path / "nope.yaml") == DEFAULT_WEIGHTS


def test_broken_yaml_gives_defaults(tmp_path, caplog):
    cfg = tmp_path / "scoring.yaml"
    cfg.write_text("weights: [unclosed\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        assert load_score_weights(cfg) == DEFAULT_WEIGHTS
    assert "Failed to load scoring config" in caplog.text


def test_weights_section_not_a_mapping(tmp_path):
    cfg = tmp_path / "scoring.yaml"
    cfg.write_text("weights: 5\n", encoding="utf-8")
    assert load_score_weights(cfg) == DEFAULT_WEIGHTS


@pytest.mark.parametrize(
    "raw",
    [
        {"business_type": "lots"},
        {"business_type": True},
        {"business_type": 12.5},
        {"business_type": None},
    ],
)
def test_bad_values_fall_back_to_default(raw):
    assert weights_from_mapping(raw).business_type == 30


def test_whole_float_and_numeric_string_accepted():
    assert weights_from_mapping({"business_type": 40.0}).business_type == 40
    assert weights_from_mapping({"business_type": "45"}).business_type == 45


def test_unknown_key_logged_and_ignored(caplog):
    with caplog.at_level(logging.WARNING):
        weights = weights_from_mapping({"not_a_weight": 10, "region_all": 5})
    assert weights.region_all == 5
    assert "not_a_weight" in caplog.text


def test_weights_cached_until_reload(tmp_path):
    cfg = tmp_path / "scoring.yaml"
    cfg.write_text("weights:\n  business_type: 50\n", encoding="utf-8")
    assert load_score_weights(cfg).business_type == 50
    cfg.write_text("weights:\n  business_type: 60\n", encoding="utf-8")
    assert load_score_weights(cfg).business_type == 50
    assert load_score_weights(cfg, reload=True).business_type == 60


def test_score_weights_is_immutable():
    with pytest.raises(Exception):
        DEFAULT_WEIGHTS.business_type = 1  # type: ignore[misc]
    assert ScoreWeights() == DEFAULT_WEIGHTS


# ---------------------------------------------------------------------------
# settings.load_config
# ---------------------------------------------------------------------------


def test_config_defaults():
    cfg = load_config()
    assert cfg.matching.max_recommendations == MAX_RECOMMENDATIONS
    assert cfg.matching.scoring_config_path == REPO_ROOT / "config" / "scoring.yaml"


@pytest.mark.parametrize("raw,expected", [("3", 3), ("25", 10), ("0", 1), ("many", 10)])
def test_max_recommendations_env_override_is_clamped(monkeypatch, raw, expected):
    monkeypatch.setenv("BIZSUPPORT_MAX_RECOMMENDATIONS", raw)
    assert load_config(reload=True).matching.max_recommendations == expected


def test_relative_scoring_path_resolved_against_repo_root(monkeypatch):
    monkeypatch.setenv("BIZSUPPORT_SCORING_CONFIG", "custom/weights.yaml")
    cfg = load_config(reload=True)
    assert cfg.matching.scoring_config_path == REPO_ROOT / "custom" / "weights.yaml"


def test_config_yaml_values_used(tmp_path, monkeypatch):
    (tmp_path / "config.yaml").write_text(
        "matching:\n  scoring_config: weights.yaml\n  max_recommendations: 5\n", encoding="utf-8"
    )
    monkeypatch.setattr(settings, "_repo_root", lambda: tmp_path)
    cfg = load_config(reload=True)
    assert cfg.matching.max_recommendations == 5
    assert cfg.matching.scoring_config_path == tmp_path / "weights.yaml"


@pytest.mark.parametrize("body", ["matching: [1, 2]\n", "matching: just text\n", "- a\n- b\n"])
def test_config_yaml_non_mapping_sections_fall_back(tmp_path, monkeypatch, body):
    (tmp_path / "config.yaml").write_text(body, encoding="utf-8")
    monkeypatch.setattr(settings, "_repo_root", lambda: tmp_path)
    cfg = load_config(reload=True)
    assert cfg.matching.max_recommendations == MAX_RECOMMENDATIONS
    assert cfg.matching.scoring_config_path == tmp_path / "config" / "scoring.yaml"


def test_config_is_cached(monkeypatch):
    first = load_config()
    monkeypatch.setenv("BIZSUPPORT_MAX_RECOMMENDATIONS", "4")
    assert load_config() is first
    assert load_config(reload=True).matching.max_recommendations == 4
