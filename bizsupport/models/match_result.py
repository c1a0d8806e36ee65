# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""MatchResult: a scored program with its explanation (derived, not persisted)."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from bizsupport.models.program import ProgramRecord


@dataclass(frozen=True)
class MatchResult:
    """Program + integer score + reasons in scorer evaluation order (do not re-sort reasons)."""

    program: ProgramRecord
    score: int
    match_reasons: Tuple[str, ...] = ()
    breakdown: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}), compare=False)

    def to_dict(self) -> Dict[str, Any]:
        d = self.program.to_dict()
        d["score"] = self.score
        d["match_reasons"] = list(self.match_reasons)
        return d


__all__ = ["MatchResult"]
