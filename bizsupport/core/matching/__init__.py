# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""Program matching: factor scorers, match score, ranking (pure, no I/O)."""

from bizsupport.core.matching.config import (
    DEFAULT_WEIGHTS,
    ScoreWeights,
    load_score_weights,
)
from bizsupport.core.matching.factors import (
    FACTOR_SCORERS,
    FactorScore,
    check_region_overlap,
    is_hierarchical_code_match,
    is_loan_amount_in_range,
    match_classification_code,
    score_business_size,
    score_business_type,
    score_classification_code,
    score_experience,
    score_industry,
    score_loan_amount,
    score_region,
    score_revenue,
)
from bizsupport.core.matching.match_score import MatchScore, compute_match_score
from bizsupport.core.matching.ranking import rank_programs, recommend_programs, score_programs

__all__ = [
    "DEFAULT_WEIGHTS",
    "FACTOR_SCORERS",
    "FactorScore",
    "MatchScore",
    "ScoreWeights",
    "check_region_overlap",
    "compute_match_score",
    "is_hierarchical_code_match",
    "is_loan_amount_in_range",
    "load_score_weights",
    "match_classification_code",
    "rank_programs",
    "recommend_programs",
    "score_business_size",
    "score_business_type",
    "score_classification_code",
    "score_experience",
    "score_industry",
    "score_loan_amount",
    "score_programs",
    "score_region",
    "score_revenue",
]
