# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""Shared fixtures: isolate config/weights caches between tests."""

from __future__ import annotations

import pytest

from bizsupport.core.matching.config import clear_weights_cache
from bizsupport.core.settings import reset_config_cache


@pytest.fixture(autouse=True)
def _fresh_config_caches(monkeypatch):
    for var in ("BIZSUPPORT_SCORING_CONFIG", "BIZSUPPORT_MAX_RECOMMENDATIONS"):
        monkeypatch.delenv(var, raising=False)
    reset_config_cache()
    clear_weights_cache()
    yield
    reset_config_cache()
    clear_weights_cache()
