# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""Subsidy calculator inputs and outputs.

All monetary and percentage outputs are rounded to 2 decimals (half-up) by the
calculator; these types only carry values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from bizsupport.models.fields import optional_float
from bizsupport.models.program import ProgramCalculatorData

_NAN = float("nan")

# snake_case key -> camelCase alias accepted from JSON payloads
_INPUT_ALIASES = {
    "loan_amount": "loanAmount",
    "loan_term_months": "loanTermMonths",
    "bank_rate": "bankRate",
    "subsidy_rate": "subsidyRate",
}


@dataclass(frozen=True)
class CalculatorInput:
    loan_amount: float
    loan_term_months: int
    bank_rate: float
    subsidy_rate: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "loan_amount": self.loan_amount,
            "loan_term_months": self.loan_term_months,
            "bank_rate": self.bank_rate,
            "subsidy_rate": self.subsidy_rate,
        }


def calculator_input_from_dict(data: Optional[Dict[str, Any]]) -> CalculatorInput:
    """Build CalculatorInput from snake_case or camelCase keys.

    Missing or unparsable values become NaN (term: 0) so that the calculator's
    ordered validation reports them instead of this constructor.
    """
    d = data or {}

    def _get(key: str) -> Optional[float]:
        raw = d.get(key)
        if raw is None:
            raw = d.get(_INPUT_ALIASES[key])
        return optional_float(raw, allow_negative=True)

    amount = _get("loan_amount")
    term = _get("loan_term_months")
    bank = _get("bank_rate")
    subsidy = _get("subsidy_rate")
    return CalculatorInput(
        loan_amount=amount if amount is not None else _NAN,
        loan_term_months=int(term) if term is not None and float(term).is_integer() else 0,
        bank_rate=bank if bank is not None else _NAN,
        subsidy_rate=subsidy if subsidy is not None else _NAN,
    )


@dataclass(frozen=True)
class CalculatorResult:
    input: CalculatorInput
    effective_rate: float
    monthly_payment_before: float
    monthly_payment_after: float
    monthly_savings: float
    total_savings: float
    total_payment_before: float
    total_payment_after: float
    total_interest_before: float
    total_interest_after: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "input": self.input.to_dict(),
            "effective_rate": self.effective_rate,
            "monthly_payment_before": self.monthly_payment_before,
            "monthly_payment_after": self.monthly_payment_after,
            "monthly_savings": self.monthly_savings,
            "total_savings": self.total_savings,
            "total_payment_before": self.total_payment_before,
            "total_payment_after": self.total_payment_after,
            "total_interest_before": self.total_interest_before,
            "total_interest_after": self.total_interest_after,
        }


@dataclass(frozen=True)
class AmortizationRow:
    month: int
    payment_before: float
    payment_after: float
    principal_before: float
    principal_after: float
    interest_before: float
    interest_after: float
    balance_before: float
    balance_after: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "month": self.month,
            "payment_before": self.payment_before,
            "payment_after": self.payment_after,
            "principal_before": self.principal_before,
            "principal_after": self.principal_after,
            "interest_before": self.interest_before,
            "interest_after": self.interest_after,
            "balance_before": self.balance_before,
            "balance_after": self.balance_after,
        }


@dataclass(frozen=True)
class AmortizationSchedule:
    """Month-by-month rows plus the summary calculation for the same input."""

    rows: Tuple[AmortizationRow, ...]
    summary: CalculatorResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schedule": [r.to_dict() for r in self.rows],
            "summary": self.summary.to_dict(),
        }


@dataclass(frozen=True)
class ProgramCalculation:
    """Program-bound calculation: resolved program metadata echoed with the result."""

    program: ProgramCalculatorData
    calculation: CalculatorResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            "program": self.program.to_dict(),
            "calculation": self.calculation.to_dict(),
        }


__all__ = [
    "AmortizationRow",
    "AmortizationSchedule",
    "CalculatorInput",
    "CalculatorResult",
    "ProgramCalculation",
    "calculator_input_from_dict",
]
