# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""Value types for the matching and calculator engines."""

from bizsupport.models.calculator import (
    AmortizationRow,
    AmortizationSchedule,
    CalculatorInput,
    CalculatorResult,
    ProgramCalculation,
    calculator_input_from_dict,
)
from bizsupport.models.match_result import MatchResult
from bizsupport.models.profile import BusinessProfile, BusinessSize, BusinessType, profile_from_dict, validate_bin
from bizsupport.models.program import ALL_REGIONS, ProgramCalculatorData, ProgramRecord, program_from_dict

__all__ = [
    "ALL_REGIONS",
    "AmortizationRow",
    "AmortizationSchedule",
    "BusinessProfile",
    "BusinessSize",
    "BusinessType",
    "CalculatorInput",
    "CalculatorResult",
    "MatchResult",
    "ProgramCalculation",
    "ProgramCalculatorData",
    "ProgramRecord",
    "calculator_input_from_dict",
    "profile_from_dict",
    "program_from_dict",
    "validate_bin",
]
