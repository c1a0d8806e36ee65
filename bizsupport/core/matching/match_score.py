# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""Match score for one (profile, program) pair: sum of the eight factor deltas."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from bizsupport.core.matching.config import ScoreWeights, load_score_weights
from bizsupport.core.matching.factors import FACTOR_SCORERS
from bizsupport.models.profile import BusinessProfile
from bizsupport.models.program import ProgramRecord


@dataclass(frozen=True)
class MatchScore:
    score: int
    reasons: Tuple[str, ...] = ()
    breakdown: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}), compare=False)


def compute_match_score(
    profile: BusinessProfile,
    program: ProgramRecord,
    weights: Optional[ScoreWeights] = None,
) -> MatchScore:
    """
    Score a program for a profile. Never raises for missing optional data.
    Reasons keep scorer evaluation order; breakdown maps factor name -> delta.
    """
    w = weights if weights is not None else load_score_weights()
    total = 0.0
    reasons: List[str] = []
    breakdown: Dict[str, int] = {}
    for name, scorer in FACTOR_SCORERS:
        factor = scorer(profile, program, w)
        total += factor.delta
        breakdown[name] = factor.delta
        reasons.extend(r for r in factor.reasons if r)
    # half-up, like Math.round
    score = int(math.floor(total + 0.5))
    return MatchScore(score=score, reasons=tuple(reasons), breakdown=MappingProxyType(breakdown))
