# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""Calculator error kinds.

Callers branch on ``kind`` (closed enum) instead of parsing messages. Messages are
user-facing (Russian, as the product UI) and name the violated bound where there is one.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Union


class CalculatorErrorKind(str, Enum):
    # input validation, checked in this order
    INVALID_LOAN_AMOUNT = "INVALID_LOAN_AMOUNT"
    INVALID_TERM = "INVALID_TERM"
    INVALID_BANK_RATE = "INVALID_BANK_RATE"
    INVALID_SUBSIDY_RATE = "INVALID_SUBSIDY_RATE"
    SUBSIDY_EXCEEDS_BANK_RATE = "SUBSIDY_EXCEEDS_BANK_RATE"
    # program-bound
    CALCULATOR_DISABLED = "CALCULATOR_DISABLED"
    MISSING_PROGRAM_RATES = "MISSING_PROGRAM_RATES"
    BELOW_MINIMUM_LOAN_AMOUNT = "BELOW_MINIMUM_LOAN_AMOUNT"
    ABOVE_MAXIMUM_LOAN_AMOUNT = "ABOVE_MAXIMUM_LOAN_AMOUNT"
    TERM_EXCEEDS_MAXIMUM = "TERM_EXCEEDS_MAXIMUM"

    def __str__(self) -> str:
        return self.value


Bound = Optional[Union[int, float]]


def format_bound(value: Union[int, float]) -> str:
    """Plain number for messages: 1000000 -> "1000000", 20.5 -> "20.50"."""
    if float(value).is_integer():
        return str(int(value))
    return f"{float(value):.2f}"


class CalculatorError(Exception):
    """Base for calculator errors. No partial result accompanies it."""

    def __init__(self, kind: CalculatorErrorKind, message: str, bound: Bound = None) -> None:
        self.kind = kind
        self.message = message
        self.bound = bound
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message, "bound": self.bound}


class CalculatorValidationError(CalculatorError):
    """Invalid calculator input (amount, term, rates)."""

    _MESSAGES = {
        CalculatorErrorKind.INVALID_LOAN_AMOUNT: "Сумма кредита должна быть положительной",
        CalculatorErrorKind.INVALID_TERM: "Срок кредита должен быть от 1 до {bound} месяцев",
        CalculatorErrorKind.INVALID_BANK_RATE: "Ставка банка должна быть от 0 до {bound}%",
        CalculatorErrorKind.INVALID_SUBSIDY_RATE: "Ставка субсидии не может быть отрицательной",
        CalculatorErrorKind.SUBSIDY_EXCEEDS_BANK_RATE: "Ставка субсидии не может превышать ставку банка ({bound}%)",
    }

    def __init__(self, kind: CalculatorErrorKind, bound: Bound = None) -> None:
        shown = format_bound(bound) if bound is not None else ""
        super().__init__(kind, self._MESSAGES[kind].format(bound=shown), bound)


class ProgramBoundError(CalculatorError):
    """Request falls outside the program's calculator metadata."""

    def __init__(self, kind: CalculatorErrorKind, bound: Bound = None, program_id: Any = None) -> None:
        self.program_id = program_id
        if kind == CalculatorErrorKind.CALCULATOR_DISABLED:
            message = "Калькулятор не доступен для данной программы"
        elif kind == CalculatorErrorKind.MISSING_PROGRAM_RATES:
            message = "Для данной программы не указаны ставки кредитования"
        elif kind == CalculatorErrorKind.BELOW_MINIMUM_LOAN_AMOUNT:
            message = f"Минимальная сумма кредита: {format_bound(bound)}"
        elif kind == CalculatorErrorKind.ABOVE_MAXIMUM_LOAN_AMOUNT:
            message = f"Максимальная сумма кредита: {format_bound(bound)}"
        elif kind == CalculatorErrorKind.TERM_EXCEEDS_MAXIMUM:
            message = f"Максимальный срок кредита: {format_bound(bound)} месяцев"
        else:
            raise ValueError(f"Not a program-bound error kind: {kind}")
        super().__init__(kind, message, bound)
