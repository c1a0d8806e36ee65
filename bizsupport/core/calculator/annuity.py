# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""Annuity payment math.

PMT = P * r * (1 + r)^n / ((1 + r)^n - 1), r = annual_rate / 12 / 100.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

_CENT = Decimal("0.01")

# Enough significant digits to quantize any finite float (max ~1.8e308) to cents.
_MONEY_PRECISION = 400


def monthly_rate(annual_rate: float) -> float:
    return annual_rate / 12 / 100


def annuity_payment(principal: float, annual_rate: float, term_months: int) -> float:
    """Fixed monthly payment. A 0% rate degenerates to principal / term."""
    if annual_rate == 0:
        return principal / term_months
    r = monthly_rate(annual_rate)
    compound = (1 + r) ** term_months
    return principal * r * compound / (compound - 1)


def round_money(x: float) -> float:
    """Round to 2 decimals, half-up (2.345 -> 2.35, -2.345 -> -2.35). Non-finite values pass through."""
    if not math.isfinite(x):
        return x
    with localcontext() as ctx:
        ctx.prec = _MONEY_PRECISION
        return float(Decimal(repr(x)).quantize(_CENT, rounding=ROUND_HALF_UP))
