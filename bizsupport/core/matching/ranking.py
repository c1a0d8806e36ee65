# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""Program ranking: score every candidate, keep positives, stable sort by score, cap the shortlist.

The candidate list is bounded by the caller (the platform passes at most 100
programs). Does not mutate inputs.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from bizsupport.core.matching.config import ScoreWeights, load_score_weights
from bizsupport.core.matching.match_score import compute_match_score
from bizsupport.core.settings import MAX_RECOMMENDATIONS, load_config
from bizsupport.models.match_result import MatchResult
from bizsupport.models.profile import BusinessProfile
from bizsupport.models.program import ProgramRecord

logger = logging.getLogger(__name__)


def score_programs(
    profile: BusinessProfile,
    programs: Iterable[ProgramRecord],
    weights: Optional[ScoreWeights] = None,
) -> List[MatchResult]:
    """Score every program (non-positive scores included), in input order."""
    w = weights if weights is not None else load_score_weights()
    results: List[MatchResult] = []
    for program in programs:
        ms = compute_match_score(profile, program, w)
        results.append(
            MatchResult(program=program, score=ms.score, match_reasons=ms.reasons, breakdown=ms.breakdown)
        )
    return results


def rank_programs(
    profile: BusinessProfile,
    programs: Iterable[ProgramRecord],
    limit: int = MAX_RECOMMENDATIONS,
    weights: Optional[ScoreWeights] = None,
) -> List[MatchResult]:
    """
    Ranked shortlist: score > 0 only, score desc, ties keep input order, at most
    min(limit, 10) results.
    """
    cap = max(0, min(int(limit), MAX_RECOMMENDATIONS))
    scored = score_programs(profile, programs, weights)
    positive = [r for r in scored if r.score > 0]
    # sorted() is stable: equal scores keep caller order
    ranked = sorted(positive, key=lambda r: -r.score)[:cap]
    logger.debug(
        "Ranked programs: candidates=%d positive=%d returned=%d",
        len(scored),
        len(positive),
        len(ranked),
    )
    return ranked


def recommend_programs(profile: BusinessProfile, programs: Iterable[ProgramRecord]) -> List[MatchResult]:
    """rank_programs with the configured shortlist size and weights."""
    cfg = load_config()
    return rank_programs(
        profile,
        programs,
        limit=cfg.matching.max_recommendations,
        weights=load_score_weights(cfg.matching.scoring_config_path),
    )
