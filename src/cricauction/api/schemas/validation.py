from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import Field

from .base import ApiModel


class BidValidationRequest(ApiModel):
    # Raw form input; numeric checks happen in the validator, not here.
    amount: Any = None
    min_bid: float = Field(..., ge=0)
    wallet_balance: float


class ValidationResponse(ApiModel):
    is_valid: bool
    errors: Dict[str, str]
    codes: Dict[str, str]


class CurrencyFormatRequest(ApiModel):
    amount: Optional[float] = None
    currency: str = Field(default="$", max_length=8)
    locale: Optional[str] = None


class CurrencyFormatResponse(ApiModel):
    formatted: str
