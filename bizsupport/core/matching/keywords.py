# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""Keyword tables for text matching against the (Russian-language) program catalog.

Entries are lowercase stems matched as substrings, except WORD_TOKENS which must
match as whole words ("it" would otherwise hit "credit", "ritual", ...).
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, Tuple

WORD_TOKENS = frozenset({"it", "ит"})

# business_type -> keywords in target_audience
BUSINESS_TYPE_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "startup": ("стартап", "startup", "start-up"),
    "sme": ("мсб", "малый и средний бизнес", "малого и среднего", "sme", "small and medium"),
    "individual": ("индивидуальн", "individual entrepreneur", "sole proprietor"),
    "ngo": ("нко", "некоммерческ", "ngo", "non-profit", "nonprofit"),
}

BUSINESS_TYPE_REASONS: Dict[str, str] = {
    "startup": "Программа специально для стартапов",
    "sme": "Программа для малого и среднего бизнеса",
    "individual": "Программа для индивидуальных предпринимателей",
    "ngo": "Программа для некоммерческих организаций",
}

GENERAL_BUSINESS_KEYWORDS = ("предпринимател", "бизнес", "entrepreneur", "business")
GENERAL_BUSINESS_REASON = "Общая поддержка предпринимательства"

# business_size -> keywords in target_audience
BUSINESS_SIZE_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "micro": ("микро", "micro"),
    "small": ("малый", "малого", "малых", "small"),
    "medium": ("средний", "среднего", "средних", "medium"),
    "large": ("крупный", "крупного", "крупных", "large"),
}

BUSINESS_SIZE_REASONS: Dict[str, str] = {
    "micro": "Подходит для микробизнеса",
    "small": "Подходит для малого бизнеса",
    "medium": "Подходит для среднего бизнеса",
    "large": "Подходит для крупного бизнеса",
}

# Industry categories, in evaluation order: (profile keywords, program keywords, reason)
INDUSTRY_CATEGORIES: Tuple[Tuple[str, Tuple[str, ...], Tuple[str, ...], str], ...] = (
    (
        "tech",
        ("it", "ит", "технолог", "цифров", "программ", "tech", "software", "digital"),
        ("it", "ит", "технолог", "цифров", "инновац", "tech", "software", "digital"),
        "Специально для IT-сферы",
    ),
    (
        "manufacturing",
        ("производств", "промышлен", "manufactur", "industrial"),
        ("производств", "промышлен", "manufactur", "industrial"),
        "Поддержка производственного сектора",
    ),
    (
        "agriculture",
        ("сельск", "агро", "фермер", "agri", "farm"),
        ("сельск", "агро", "фермер", "agri", "farm"),
        "Поддержка сельского хозяйства",
    ),
    (
        "services",
        ("услуг", "сервис", "service"),
        ("услуг", "сервис", "service"),
        "Поддержка сферы услуг",
    ),
    (
        "tourism",
        ("туризм", "турист", "гостиниц", "touris", "hospitality"),
        ("туризм", "турист", "гостиниц", "touris", "hospitality"),
        "Поддержка туристической отрасли",
    ),
    (
        "trade",
        ("торгов", "ритейл", "trade", "retail", "commerce"),
        ("торгов", "ритейл", "trade", "retail", "commerce"),
        "Поддержка торговли",
    ),
    (
        "construction",
        ("строительств", "строител", "construction"),
        ("строительств", "строител", "construction"),
        "Поддержка строительной отрасли",
    ),
)

TECH_PROFILE_KEYWORDS = INDUSTRY_CATEGORIES[0][1]
TECH_PROGRAM_KEYWORDS = INDUSTRY_CATEGORIES[0][2]
STARTUP_KEYWORDS = ("стартап", "startup", "start-up")
INDUSTRY_MISMATCH_REASON = "Программа ориентирована на IT-стартапы и не соответствует отрасли"

BEGINNER_KEYWORDS = ("начинающ", "стартап", "новый бизнес", "beginner", "startup", "new business")
BEGINNER_REASON = "Подходит для начинающих предпринимателей"
GROWTH_KEYWORDS = ("опытн", "развит", "расширен", "growth", "expansion", "scale-up")
GROWTH_REASON = "Программа для развития существующего бизнеса"

STARTER_FUNDING_KEYWORDS = ("грант", "микрокредит", "grant", "microcredit", "micro-credit")
REVENUE_SCALE_REASON = "Размер финансирования соответствует масштабу бизнеса"
REVENUE_STARTER_REASON = "Подходит для стартового финансирования"

_word_patterns = {tok: re.compile(rf"(?<!\w){re.escape(tok)}(?!\w)") for tok in WORD_TOKENS}


def contains_keyword(text: str, keyword: str) -> bool:
    """Case-insensitive keyword test; whole-word for WORD_TOKENS, substring otherwise."""
    if not text:
        return False
    lowered = text.lower()
    pattern = _word_patterns.get(keyword)
    if pattern is not None:
        return pattern.search(lowered) is not None
    return keyword in lowered


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(contains_keyword(text, kw) for kw in keywords)
