# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""Calculator limits."""

from __future__ import annotations

MIN_TERM_MONTHS = 1
MAX_TERM_MONTHS = 360  # 30 years
MIN_BANK_RATE = 0.0
MAX_BANK_RATE = 100.0  # percent, annual
