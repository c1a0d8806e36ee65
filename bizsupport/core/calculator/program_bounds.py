# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""Program-bound calculation: apply a program's rates and loan limits, then calculate."""

from __future__ import annotations

from typing import Optional, Union

from bizsupport.core.calculator.errors import CalculatorErrorKind, ProgramBoundError
from bizsupport.core.calculator.subsidy import calculate_subsidy
from bizsupport.models.calculator import CalculatorInput, ProgramCalculation
from bizsupport.models.program import ProgramCalculatorData, ProgramRecord


def _defined(x: Optional[float]) -> bool:
    """Bounds of 0 mean "not set" (as stored in the catalog)."""
    return x is not None and x > 0


def calculate_with_program(
    program: Union[ProgramCalculatorData, ProgramRecord],
    loan_amount: float,
    loan_term_months: int,
    bank_rate: Optional[float] = None,
    subsidy_rate: Optional[float] = None,
) -> ProgramCalculation:
    """
    Calculate with a program's defaults. Explicit rates override program rates.

    Checks, in order: calculator enabled, rates resolvable, amount >= min,
    amount <= max, term <= max term. Only then delegates to calculate_subsidy
    (which applies the generic input validation).
    """
    data = program.calculator_data() if isinstance(program, ProgramRecord) else program

    if not data.calculator_enabled:
        raise ProgramBoundError(CalculatorErrorKind.CALCULATOR_DISABLED, program_id=data.program_id)

    resolved_bank = bank_rate if bank_rate is not None else data.bank_rate
    resolved_subsidy = subsidy_rate if subsidy_rate is not None else data.subsidy_rate
    if resolved_bank is None or resolved_subsidy is None:
        raise ProgramBoundError(CalculatorErrorKind.MISSING_PROGRAM_RATES, program_id=data.program_id)

    if _defined(data.min_loan_amount) and loan_amount < data.min_loan_amount:
        raise ProgramBoundError(
            CalculatorErrorKind.BELOW_MINIMUM_LOAN_AMOUNT, bound=data.min_loan_amount, program_id=data.program_id
        )
    if _defined(data.max_loan_amount) and loan_amount > data.max_loan_amount:
        raise ProgramBoundError(
            CalculatorErrorKind.ABOVE_MAXIMUM_LOAN_AMOUNT, bound=data.max_loan_amount, program_id=data.program_id
        )
    if _defined(data.max_loan_term_months) and loan_term_months > data.max_loan_term_months:
        raise ProgramBoundError(
            CalculatorErrorKind.TERM_EXCEEDS_MAXIMUM, bound=data.max_loan_term_months, program_id=data.program_id
        )

    result = calculate_subsidy(
        CalculatorInput(
            loan_amount=loan_amount,
            loan_term_months=loan_term_months,
            bank_rate=resolved_bank,
            subsidy_rate=resolved_subsidy,
        )
    )
    return ProgramCalculation(program=data, calculation=result)
