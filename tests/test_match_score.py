# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""Match score: sum of factor deltas, reasons order, realistic profile/program pairs."""

from __future__ import annotations

import copy

from bizsupport.core.matching.config import DEFAULT_WEIGHTS, ScoreWeights
from bizsupport.core.matching.factors import FACTOR_SCORERS
from bizsupport.core.matching.match_score import compute_match_score
from bizsupport.models.profile import BusinessProfile, BusinessSize, BusinessType, profile_from_dict
from bizsupport.models.program import ProgramRecord, program_from_dict


def _startup_profile() -> BusinessProfile:
    return profile_from_dict({
        "business_type": "startup",
        "business_size": "small",
        "industry": "IT",
        "region": "Алматы",
        "experience_years": 1,
        "annual_revenue": 5_000_000,
        "oked_code": "62.01",
        "desired_loan_amount": 5_000_000,
    })


def _startup_program() -> ProgramRecord:
    return program_from_dict({
        "id": 1,
        "title": "Поддержка стартапов",
        "description": "Финансирование инновационных проектов",
        "target_audience": "Стартапы, малый бизнес",
        "supported_regions": ["Алматы", "Астана"],
        "oked_filters": ["62.01", "62.02"],
        "min_loan_amount": 1_000_000,
        "max_loan_amount": 10_000_000,
    })


def test_good_match_scores_high():
    """Startup IT profile vs startup program in the same region scores well above 80."""
    ms = compute_match_score(_startup_profile(), _startup_program(), DEFAULT_WEIGHTS)
    assert ms.score > 80
    assert ms.breakdown["business_type"] == 45
    assert ms.breakdown["business_size"] == 20
    assert ms.breakdown["classification_code"] == 35
    assert ms.breakdown["region"] == 25
    assert ms.breakdown["loan_amount"] == 30
    assert "Программа специально для стартапов" in ms.reasons
    assert "Код ОКЭД 62.01 входит в перечень программы" in ms.reasons
    assert "Программа действует в вашем регионе" in ms.reasons


def test_poor_match_scores_low():
    profile = profile_from_dict({
        "business_type": "sme",
        "business_size": "large",
        "industry": "Manufacturing",
        "region": "Шымкент",
        "experience_years": 3,
        "oked_code": "25.11",
        "desired_loan_amount": 50_000_000,
    })
    program = program_from_dict({
        "title": "Программа поддержки",
        "target_audience": "Малый бизнес",
        "supported_regions": ["Алматы"],
        "oked_filters": ["62.01"],
        "min_loan_amount": 1_000_000,
        "max_loan_amount": 10_000_000,
    })
    ms = compute_match_score(profile, program, DEFAULT_WEIGHTS)
    assert ms.score < 50
    assert ms.breakdown["region"] == 0
    assert ms.breakdown["classification_code"] == 0
    assert ms.breakdown["loan_amount"] == 5


def test_score_equals_sum_of_breakdown_and_factor_deltas():
    profile = _startup_profile()
    programs = [
        _startup_program(),
        program_from_dict({"title": "Грант", "supported_regions": "ALL", "funding_amount": 3_000_000}),
        program_from_dict({"title": "IT-стартап", "target_audience": "предприниматели"}),
        program_from_dict({}),
    ]
    for program in programs:
        ms = compute_match_score(profile, program, DEFAULT_WEIGHTS)
        assert ms.score == sum(ms.breakdown.values())
        assert ms.score == sum(scorer(profile, program, DEFAULT_WEIGHTS).delta for _, scorer in FACTOR_SCORERS)
        assert list(ms.breakdown) == [name for name, _ in FACTOR_SCORERS]


def test_reasons_follow_scorer_order():
    ms = compute_match_score(_startup_profile(), _startup_program(), DEFAULT_WEIGHTS)
    expected = []
    for _, scorer in FACTOR_SCORERS:
        expected.extend(scorer(_startup_profile(), _startup_program(), DEFAULT_WEIGHTS).reasons)
    assert list(ms.reasons) == expected


def test_industry_mismatch_lowers_score_by_penalty():
    """Same program with and without "IT-стартап" in the title: exactly the penalty apart."""
    profile = BusinessProfile(
        business_type=BusinessType.SME,
        business_size=BusinessSize.SMALL,
        industry="производство",
        region="Алматы",
        experience_years=3,
    )
    base = {"description": "Льготное финансирование", "target_audience": "малый бизнес"}
    with_it = program_from_dict(dict(base, title="IT-стартап: грант на развитие"))
    without_it = program_from_dict(dict(base, title="Грант на развитие"))
    a = compute_match_score(profile, with_it, DEFAULT_WEIGHTS)
    b = compute_match_score(profile, without_it, DEFAULT_WEIGHTS)
    assert a.score == b.score - 40
    assert a.breakdown["industry"] == -40


def test_incomplete_profile_does_not_raise():
    profile = profile_from_dict({"business_type": "ТОО", "business_size": "Малый"})
    ms = compute_match_score(profile, _startup_program(), DEFAULT_WEIGHTS)
    assert isinstance(ms.score, int)
    assert ms.breakdown["classification_code"] == 0
    assert ms.breakdown["loan_amount"] == 0
    assert ms.breakdown["experience"] == 0


def test_custom_weights_are_applied():
    weights = ScoreWeights(business_type=100, general_business=0)
    program = ProgramRecord(target_audience="стартапы", supported_regions=("Астана",))
    profile = BusinessProfile(business_type=BusinessType.STARTUP, business_size=BusinessSize.MEDIUM, region="Алматы",
                              experience_years=3, annual_revenue=1.0)
    assert compute_match_score(profile, program, weights).score == 100


def test_scoring_does_not_mutate_source_dicts():
    raw = {
        "title": "Поддержка стартапов",
        "target_audience": "Стартапы",
        "supported_regions": ["Алматы"],
        "oked_filters": ["62.01"],
        "custom_field": {"nested": [1, 2]},
    }
    snapshot = copy.deepcopy(raw)
    program = program_from_dict(raw)
    compute_match_score(_startup_profile(), program, DEFAULT_WEIGHTS)
    assert raw == snapshot


def test_weights_default_to_configured_file(tmp_path, monkeypatch):
    cfg = tmp_path / "scoring.yaml"
    cfg.write_text("weights:\n  region_exact: 99\n", encoding="utf-8")
    monkeypatch.setenv("BIZSUPPORT_SCORING_CONFIG", str(cfg))
    ms = compute_match_score(_startup_profile(), _startup_program())
    assert ms.breakdown["region"] == 99
