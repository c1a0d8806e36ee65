# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""Month-by-month amortization for the before- and after-subsidy tracks."""

from __future__ import annotations

from typing import List

from bizsupport.core.calculator.annuity import annuity_payment, monthly_rate, round_money
from bizsupport.core.calculator.subsidy import calculate_subsidy, validate_input
from bizsupport.models.calculator import AmortizationRow, AmortizationSchedule, CalculatorInput


def build_amortization_schedule(inp: CalculatorInput) -> List[AmortizationRow]:
    """
    One row per month 1..term. Fixed payments are computed once; each month
    interest = balance * r, principal = payment - interest, balance floored at 0.
    """
    validate_input(inp)
    term = int(inp.loan_term_months)
    effective_rate = inp.bank_rate - inp.subsidy_rate

    payment_before = annuity_payment(inp.loan_amount, inp.bank_rate, term)
    payment_after = annuity_payment(inp.loan_amount, effective_rate, term)
    rate_before = monthly_rate(inp.bank_rate)
    rate_after = monthly_rate(effective_rate)

    balance_before = float(inp.loan_amount)
    balance_after = float(inp.loan_amount)
    rows: List[AmortizationRow] = []
    for month in range(1, term + 1):
        interest_before = balance_before * rate_before
        interest_after = balance_after * rate_after
        principal_before = payment_before - interest_before
        principal_after = payment_after - interest_after
        balance_before = max(0.0, balance_before - principal_before)
        balance_after = max(0.0, balance_after - principal_after)
        rows.append(
            AmortizationRow(
                month=month,
                payment_before=round_money(payment_before),
                payment_after=round_money(payment_after),
                principal_before=round_money(principal_before),
                principal_after=round_money(principal_after),
                interest_before=round_money(interest_before),
                interest_after=round_money(interest_after),
                balance_before=round_money(balance_before),
                balance_after=round_money(balance_after),
            )
        )
    return rows


def generate_schedule(inp: CalculatorInput) -> AmortizationSchedule:
    """Schedule rows plus the summary calculation for the same input."""
    summary = calculate_subsidy(inp)
    return AmortizationSchedule(rows=tuple(build_amortization_schedule(inp)), summary=summary)
