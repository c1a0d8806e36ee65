# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""Subsidized loan calculation: annuity payment before and after the rate subsidy."""

from __future__ import annotations

import math

from bizsupport.core.calculator.annuity import annuity_payment, round_money
from bizsupport.core.calculator.config import MAX_BANK_RATE, MAX_TERM_MONTHS, MIN_BANK_RATE, MIN_TERM_MONTHS
from bizsupport.core.calculator.errors import CalculatorErrorKind, CalculatorValidationError
from bizsupport.models.calculator import CalculatorInput, CalculatorResult


def _is_whole_number(x) -> bool:
    if isinstance(x, bool):
        return False
    try:
        f = float(x)
    except (TypeError, ValueError):
        return False
    return not math.isnan(f) and not math.isinf(f) and f.is_integer()


def validate_input(inp: CalculatorInput) -> None:
    """
    Raise CalculatorValidationError for the first violated rule, in fixed order:
    finite amount > 0, 1 <= term <= 360, 0 <= bank_rate <= 100, subsidy_rate >= 0,
    subsidy_rate <= bank_rate. NaN fails its rule.
    """
    if not (inp.loan_amount > 0 and math.isfinite(inp.loan_amount)):
        raise CalculatorValidationError(CalculatorErrorKind.INVALID_LOAN_AMOUNT, bound=0)
    term = inp.loan_term_months
    if not _is_whole_number(term) or not MIN_TERM_MONTHS <= term <= MAX_TERM_MONTHS:
        raise CalculatorValidationError(CalculatorErrorKind.INVALID_TERM, bound=MAX_TERM_MONTHS)
    if not MIN_BANK_RATE <= inp.bank_rate <= MAX_BANK_RATE:
        raise CalculatorValidationError(CalculatorErrorKind.INVALID_BANK_RATE, bound=MAX_BANK_RATE)
    if not inp.subsidy_rate >= 0:
        raise CalculatorValidationError(CalculatorErrorKind.INVALID_SUBSIDY_RATE, bound=0)
    if inp.subsidy_rate > inp.bank_rate:
        raise CalculatorValidationError(CalculatorErrorKind.SUBSIDY_EXCEEDS_BANK_RATE, bound=inp.bank_rate)


def calculate_subsidy(inp: CalculatorInput) -> CalculatorResult:
    """Validate, then compute payments at bank_rate and at bank_rate - subsidy_rate.

    Savings and totals are derived from the unrounded payments; every output is
    rounded to 2 decimals at the end.
    """
    validate_input(inp)
    amount = inp.loan_amount
    term = int(inp.loan_term_months)
    effective_rate = inp.bank_rate - inp.subsidy_rate

    before = annuity_payment(amount, inp.bank_rate, term)
    after = annuity_payment(amount, effective_rate, term)

    monthly_savings = before - after
    total_before = before * term
    total_after = after * term

    return CalculatorResult(
        input=inp,
        effective_rate=round_money(effective_rate),
        monthly_payment_before=round_money(before),
        monthly_payment_after=round_money(after),
        monthly_savings=round_money(monthly_savings),
        total_savings=round_money(monthly_savings * term),
        total_payment_before=round_money(total_before),
        total_payment_after=round_money(total_after),
        total_interest_before=round_money(total_before - amount),
        total_interest_after=round_money(total_after - amount),
    )
