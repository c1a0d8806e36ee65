# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""BusinessProfile: read-only description of the applicant business.

The matching engine must work on incomplete profiles, so unknown enum values
are kept as raw strings and optional numerics degrade to None instead of
raising.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from bizsupport.models.fields import optional_float, optional_int, text


class BusinessType(str, Enum):
    STARTUP = "startup"
    SME = "sme"
    INDIVIDUAL = "individual"
    NGO = "ngo"

    def __str__(self) -> str:
        return self.value


class BusinessSize(str, Enum):
    MICRO = "micro"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    def __str__(self) -> str:
        return self.value


_BIN_RE = re.compile(r"[0-9]{12}")


def validate_bin(value: Optional[str]) -> bool:
    """True for a 12-digit business identification number (BIN)."""
    if not value or not isinstance(value, str):
        return False
    return _BIN_RE.fullmatch(value) is not None


def _coerce_enum(enum_cls, value: Any) -> Union[Enum, str]:
    raw = text(value).strip().lower()
    try:
        return enum_cls(raw)
    except ValueError:
        return raw


@dataclass(frozen=True)
class BusinessProfile:
    """Applicant business profile. Optional fields are None when unknown."""

    business_type: Union[BusinessType, str]
    business_size: Union[BusinessSize, str]
    industry: str = ""
    region: str = ""
    experience_years: Optional[int] = None
    annual_revenue: Optional[float] = None
    classification_code: Optional[str] = None
    desired_loan_amount: Optional[float] = None
    bin: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "business_type": str(self.business_type),
            "business_size": str(self.business_size),
            "industry": self.industry,
            "region": self.region,
            "experience_years": self.experience_years,
            "annual_revenue": self.annual_revenue,
            "classification_code": self.classification_code,
            "desired_loan_amount": self.desired_loan_amount,
            "bin": self.bin,
        }


def profile_from_dict(data: Optional[Dict[str, Any]]) -> BusinessProfile:
    """Build a BusinessProfile from a dict (DB row or JSON). Never raises on bad values.

    Accepts ``oked_code`` as an alias of ``classification_code``.
    """
    d = data or {}
    code = d.get("classification_code")
    if code is None:
        code = d.get("oked_code")
    code_str = text(code).strip() or None
    bin_val = text(d.get("bin")).strip() or None
    return BusinessProfile(
        business_type=_coerce_enum(BusinessType, d.get("business_type")),
        business_size=_coerce_enum(BusinessSize, d.get("business_size")),
        industry=text(d.get("industry")).strip(),
        region=text(d.get("region")).strip(),
        experience_years=optional_int(d.get("experience_years")),
        annual_revenue=optional_float(d.get("annual_revenue")),
        classification_code=code_str,
        desired_loan_amount=optional_float(d.get("desired_loan_amount")),
        bin=bin_val,
    )


__all__ = ["BusinessProfile", "BusinessSize", "BusinessType", "profile_from_dict", "validate_bin"]
