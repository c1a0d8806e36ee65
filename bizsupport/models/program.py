# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""ProgramRecord: read-only support program from the catalog, plus its calculator projection."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from bizsupport.models.fields import optional_float, optional_int, string_tuple, text

ALL_REGIONS = "ALL"

_KNOWN_FIELDS = (
    "id",
    "title",
    "description",
    "target_audience",
    "funding_amount",
    "supported_regions",
    "classification_filters",
    "oked_filters",
    "min_loan_amount",
    "max_loan_amount",
    "bank_rate",
    "subsidy_rate",
    "max_loan_term_months",
    "calculator_enabled",
)


@dataclass(frozen=True)
class ProgramCalculatorData:
    """Calculator metadata of one program (rates, bounds, availability)."""

    program_id: Optional[Union[int, str]]
    program_title: str
    bank_rate: Optional[float] = None
    subsidy_rate: Optional[float] = None
    max_loan_term_months: Optional[int] = None
    min_loan_amount: Optional[float] = None
    max_loan_amount: Optional[float] = None
    calculator_enabled: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.program_id,
            "title": self.program_title,
            "default_bank_rate": self.bank_rate,
            "default_subsidy_rate": self.subsidy_rate,
            "max_loan_term_months": self.max_loan_term_months,
            "min_loan_amount": self.min_loan_amount,
            "max_loan_amount": self.max_loan_amount,
            "calculator_enabled": self.calculator_enabled,
        }


@dataclass(frozen=True)
class ProgramRecord:
    """One support program. Text fields are never None; optional numerics may be."""

    title: str = ""
    description: str = ""
    target_audience: str = ""
    id: Optional[Union[int, str]] = None
    funding_amount: Optional[float] = None
    supported_regions: Optional[Tuple[str, ...]] = None  # ("ALL",) for no restriction by sentinel
    classification_filters: Optional[Tuple[str, ...]] = None
    min_loan_amount: Optional[float] = None
    max_loan_amount: Optional[float] = None
    bank_rate: Optional[float] = None
    subsidy_rate: Optional[float] = None
    max_loan_term_months: Optional[int] = None
    calculator_enabled: bool = False
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}), compare=False)

    def calculator_data(self) -> ProgramCalculatorData:
        return ProgramCalculatorData(
            program_id=self.id,
            program_title=self.title,
            bank_rate=self.bank_rate,
            subsidy_rate=self.subsidy_rate,
            max_loan_term_months=self.max_loan_term_months,
            min_loan_amount=self.min_loan_amount,
            max_loan_amount=self.max_loan_amount,
            calculator_enabled=self.calculator_enabled,
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable dict; caller-supplied extra fields come first, known fields win."""
        d: Dict[str, Any] = dict(self.extra)
        d.update({
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "target_audience": self.target_audience,
            "funding_amount": self.funding_amount,
            "supported_regions": list(self.supported_regions) if self.supported_regions is not None else None,
            "classification_filters": (
                list(self.classification_filters) if self.classification_filters is not None else None
            ),
            "min_loan_amount": self.min_loan_amount,
            "max_loan_amount": self.max_loan_amount,
            "bank_rate": self.bank_rate,
            "subsidy_rate": self.subsidy_rate,
            "max_loan_term_months": self.max_loan_term_months,
            "calculator_enabled": self.calculator_enabled,
        })
        return d


def program_from_dict(data: Optional[Dict[str, Any]]) -> ProgramRecord:
    """Build a ProgramRecord from a dict (DB row or JSON).

    ``oked_filters`` is accepted as an alias of ``classification_filters``; a bare
    "ALL" string in ``supported_regions`` becomes ("ALL",). Unknown keys are kept
    in ``extra`` so they are echoed back in match results.
    """
    d = data or {}
    filters = d.get("classification_filters")
    if filters is None:
        filters = d.get("oked_filters")
    regions = string_tuple(d.get("supported_regions"))
    if regions is not None:
        regions = tuple(ALL_REGIONS if r.upper() == ALL_REGIONS else r for r in regions)
    extra = {k: v for k, v in d.items() if k not in _KNOWN_FIELDS}
    return ProgramRecord(
        id=d.get("id"),
        title=text(d.get("title")),
        description=text(d.get("description")),
        target_audience=text(d.get("target_audience")),
        funding_amount=optional_float(d.get("funding_amount")),
        supported_regions=regions,
        classification_filters=string_tuple(filters),
        min_loan_amount=optional_float(d.get("min_loan_amount")),
        max_loan_amount=optional_float(d.get("max_loan_amount")),
        bank_rate=optional_float(d.get("bank_rate")),
        subsidy_rate=optional_float(d.get("subsidy_rate")),
        max_loan_term_months=optional_int(d.get("max_loan_term_months")),
        calculator_enabled=bool(d.get("calculator_enabled", False)),
        extra=MappingProxyType(extra),
    )


__all__ = ["ALL_REGIONS", "ProgramCalculatorData", "ProgramRecord", "program_from_dict"]
