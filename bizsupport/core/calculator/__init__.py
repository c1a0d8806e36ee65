# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""Subsidized loan calculator: annuity math, subsidy effect, program bounds, amortization."""

from bizsupport.core.calculator.amortization import build_amortization_schedule, generate_schedule
from bizsupport.core.calculator.annuity import annuity_payment, monthly_rate, round_money
from bizsupport.core.calculator.config import MAX_BANK_RATE, MAX_TERM_MONTHS
from bizsupport.core.calculator.errors import (
    CalculatorError,
    CalculatorErrorKind,
    CalculatorValidationError,
    ProgramBoundError,
)
from bizsupport.core.calculator.program_bounds import calculate_with_program
from bizsupport.core.calculator.subsidy import calculate_subsidy, validate_input

__all__ = [
    "MAX_BANK_RATE",
    "MAX_TERM_MONTHS",
    "CalculatorError",
    "CalculatorErrorKind",
    "CalculatorValidationError",
    "ProgramBoundError",
    "annuity_payment",
    "build_amortization_schedule",
    "calculate_subsidy",
    "calculate_with_program",
    "generate_schedule",
    "monthly_rate",
    "round_money",
    "validate_input",
]
