# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""The eight factor scorers.

Each scorer is a pure function (profile, program, weights) -> FactorScore and never
raises: a missing optional field yields delta 0 and no reasons. Scorers are
independent; the match score is the plain sum of their deltas.
"""

from __future__ import annotations

from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

from bizsupport.core.matching.config import (
    BEGINNER_MAX_YEARS,
    DEFAULT_WEIGHTS,
    FUNDING_FIT_RATIO_MAX,
    FUNDING_FIT_RATIO_MIN,
    GROWTH_MIN_YEARS,
    REVENUE_RATIO_MIN,
    ScoreWeights,
)
from bizsupport.core.matching.keywords import (
    BEGINNER_KEYWORDS,
    BEGINNER_REASON,
    BUSINESS_SIZE_KEYWORDS,
    BUSINESS_SIZE_REASONS,
    BUSINESS_TYPE_KEYWORDS,
    BUSINESS_TYPE_REASONS,
    GENERAL_BUSINESS_KEYWORDS,
    GENERAL_BUSINESS_REASON,
    GROWTH_KEYWORDS,
    GROWTH_REASON,
    INDUSTRY_CATEGORIES,
    INDUSTRY_MISMATCH_REASON,
    REVENUE_SCALE_REASON,
    REVENUE_STARTER_REASON,
    STARTER_FUNDING_KEYWORDS,
    STARTUP_KEYWORDS,
    TECH_PROFILE_KEYWORDS,
    TECH_PROGRAM_KEYWORDS,
    contains_any,
)
from bizsupport.models.profile import BusinessProfile
from bizsupport.models.program import ALL_REGIONS, ProgramRecord


class FactorScore(NamedTuple):
    delta: int
    reasons: Tuple[str, ...] = ()


ZERO = FactorScore(0, ())

FactorScorer = Callable[[BusinessProfile, ProgramRecord, ScoreWeights], FactorScore]


def _result(delta: int, reasons: List[str]) -> FactorScore:
    if not delta and not reasons:
        return ZERO
    return FactorScore(delta, tuple(reasons))


def _positive(x: Optional[float]) -> Optional[float]:
    """Loan bounds / amounts of 0 or less mean "not set"."""
    if x is None or x <= 0:
        return None
    return x


def _program_text(program: ProgramRecord) -> str:
    return " ".join((program.title, program.description, program.target_audience))


# ---------------------------------------------------------------------------
# Named helpers (independently testable)
# ---------------------------------------------------------------------------


def is_tech_industry(industry: str) -> bool:
    return contains_any(industry, TECH_PROFILE_KEYWORDS)


def is_tech_startup_program(text: str) -> bool:
    """Program text names both a tech topic and startups (e.g. "IT-стартап")."""
    return contains_any(text, TECH_PROGRAM_KEYWORDS) and contains_any(text, STARTUP_KEYWORDS)


def is_hierarchical_code_match(user_code: str, filter_code: str) -> bool:
    """Hierarchy fallback for classification codes.

    True when the user code is nested under the filter ("62.01.1" under "62.01"),
    or when both codes share the first character. The first-character rule is
    broad (any "6x" filter matches any "6y" code) and is kept as-is.
    """
    if not user_code or not filter_code:
        return False
    return user_code.startswith(filter_code) or filter_code[0] == user_code[0]


def match_classification_code(
    user_code: Optional[str], filters: Optional[Sequence[str]]
) -> Tuple[Optional[str], Optional[str]]:
    """Return ("exact" | "hierarchy" | None, matched filter). Exact wins; else first hierarchy match."""
    if not user_code or not filters:
        return None, None
    code = user_code.strip()
    if not code:
        return None, None
    cleaned = [f.strip() for f in filters if f and f.strip()]
    if code in cleaned:
        return "exact", code
    for f in cleaned:
        if is_hierarchical_code_match(code, f):
            return "hierarchy", f
    return None, None


def check_region_overlap(region: Optional[str], regions: Optional[Sequence[str]]) -> bool:
    """Case-insensitive exact membership. The "ALL" sentinel is not an overlap."""
    if not region or not regions:
        return False
    wanted = region.strip().casefold()
    if not wanted:
        return False
    return any(r.strip().casefold() == wanted for r in regions if r)


def is_loan_amount_in_range(
    amount: Optional[float], min_amount: Optional[float], max_amount: Optional[float]
) -> bool:
    """Closed interval [min, max]; an unknown amount or missing bound does not exclude."""
    if amount is None:
        return True
    if min_amount is not None and amount < min_amount:
        return False
    if max_amount is not None and amount > max_amount:
        return False
    return True


# ---------------------------------------------------------------------------
# Scorers, in evaluation order
# ---------------------------------------------------------------------------


def score_business_type(
    profile: BusinessProfile, program: ProgramRecord, weights: ScoreWeights = DEFAULT_WEIGHTS
) -> FactorScore:
    audience = program.target_audience
    btype = str(profile.business_type or "")
    delta = 0
    reasons: List[str] = []
    keywords = BUSINESS_TYPE_KEYWORDS.get(btype)
    if keywords and contains_any(audience, keywords):
        delta += weights.business_type
        reasons.append(BUSINESS_TYPE_REASONS[btype])
    if contains_any(audience, GENERAL_BUSINESS_KEYWORDS):
        delta += weights.general_business
        reasons.append(GENERAL_BUSINESS_REASON)
    return _result(delta, reasons)


def score_business_size(
    profile: BusinessProfile, program: ProgramRecord, weights: ScoreWeights = DEFAULT_WEIGHTS
) -> FactorScore:
    size = str(profile.business_size or "")
    keywords = BUSINESS_SIZE_KEYWORDS.get(size)
    if keywords and contains_any(program.target_audience, keywords):
        return FactorScore(weights.business_size, (BUSINESS_SIZE_REASONS[size],))
    return ZERO


def score_industry(
    profile: BusinessProfile, program: ProgramRecord, weights: ScoreWeights = DEFAULT_WEIGHTS
) -> FactorScore:
    industry = (profile.industry or "").strip()
    if not industry:
        return ZERO
    text = _program_text(program)
    delta = 0
    reasons: List[str] = []
    for category, profile_keywords, program_keywords, reason in INDUSTRY_CATEGORIES:
        if contains_any(industry, profile_keywords) and contains_any(text, program_keywords):
            delta += weights.industry_points(category)
            reasons.append(reason)
    if not is_tech_industry(industry) and is_tech_startup_program(text):
        delta += weights.industry_mismatch_penalty
        reasons.append(INDUSTRY_MISMATCH_REASON)
    return _result(delta, reasons)


def score_classification_code(
    profile: BusinessProfile, program: ProgramRecord, weights: ScoreWeights = DEFAULT_WEIGHTS
) -> FactorScore:
    kind, matched = match_classification_code(profile.classification_code, program.classification_filters)
    if kind == "exact":
        return FactorScore(
            weights.classification_exact,
            (f"Код ОКЭД {matched} входит в перечень программы",),
        )
    if kind == "hierarchy":
        return FactorScore(
            weights.classification_hierarchy,
            (f"Код ОКЭД относится к отрасли программы ({matched})",),
        )
    return ZERO


def score_region(
    profile: BusinessProfile, program: ProgramRecord, weights: ScoreWeights = DEFAULT_WEIGHTS
) -> FactorScore:
    regions = program.supported_regions
    if not regions:
        return FactorScore(weights.region_unrestricted, ("Программа без региональных ограничений",))
    if check_region_overlap(profile.region, regions):
        return FactorScore(weights.region_exact, ("Программа действует в вашем регионе",))
    if any(r.strip().upper() == ALL_REGIONS for r in regions):
        return FactorScore(weights.region_all, ("Программа действует во всех регионах",))
    return ZERO


def score_loan_amount(
    profile: BusinessProfile, program: ProgramRecord, weights: ScoreWeights = DEFAULT_WEIGHTS
) -> FactorScore:
    desired = _positive(profile.desired_loan_amount)
    if desired is None:
        return ZERO
    lo = _positive(program.min_loan_amount)
    hi = _positive(program.max_loan_amount)
    if lo is not None or hi is not None:
        if is_loan_amount_in_range(desired, lo, hi):
            return FactorScore(weights.loan_in_range, ("Запрашиваемая сумма входит в лимиты программы",))
        if lo is not None and desired < lo:
            return FactorScore(weights.loan_below_min, ("Запрашиваемая сумма ниже минимальной по программе",))
        return FactorScore(weights.loan_above_max, ("Запрашиваемая сумма превышает максимум программы",))
    funding = _positive(program.funding_amount)
    if funding is not None:
        ratio = funding / desired
        if FUNDING_FIT_RATIO_MIN <= ratio <= FUNDING_FIT_RATIO_MAX:
            return FactorScore(
                weights.loan_funding_fit,
                ("Объем финансирования соответствует запрашиваемой сумме",),
            )
    return ZERO


def score_experience(
    profile: BusinessProfile, program: ProgramRecord, weights: ScoreWeights = DEFAULT_WEIGHTS
) -> FactorScore:
    years = profile.experience_years
    if years is None:
        return ZERO
    text = f"{program.title} {program.description}"
    delta = 0
    reasons: List[str] = []
    if years <= BEGINNER_MAX_YEARS and contains_any(text, BEGINNER_KEYWORDS):
        delta += weights.experience_beginner
        reasons.append(BEGINNER_REASON)
    if years >= GROWTH_MIN_YEARS and contains_any(text, GROWTH_KEYWORDS):
        delta += weights.experience_growth
        reasons.append(GROWTH_REASON)
    return _result(delta, reasons)


def score_revenue(
    profile: BusinessProfile, program: ProgramRecord, weights: ScoreWeights = DEFAULT_WEIGHTS
) -> FactorScore:
    funding = _positive(program.funding_amount)
    revenue = _positive(profile.annual_revenue)
    delta = 0
    reasons: List[str] = []
    if funding is not None and revenue is not None and funding / revenue >= REVENUE_RATIO_MIN:
        delta += weights.revenue_scale
        reasons.append(REVENUE_SCALE_REASON)
    if revenue is None and contains_any(program.title, STARTER_FUNDING_KEYWORDS):
        delta += weights.revenue_starter
        reasons.append(REVENUE_STARTER_REASON)
    return _result(delta, reasons)


FACTOR_SCORERS: Tuple[Tuple[str, FactorScorer], ...] = (
    ("business_type", score_business_type),
    ("business_size", score_business_size),
    ("industry", score_industry),
    ("classification_code", score_classification_code),
    ("region", score_region),
    ("loan_amount", score_loan_amount),
    ("experience", score_experience),
    ("revenue", score_revenue),
)
