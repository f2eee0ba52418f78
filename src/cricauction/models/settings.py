"""Auction-wide settings snapshot."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from .base import SnapshotModel, to_utc_datetime


DEFAULT_MIN_BID_INCREMENT = 100
DEFAULT_UNSOLD_PRICE_REDUCTION = 0.5


class AuctionSettings(SnapshotModel):
    min_bid_increment: float = Field(default=DEFAULT_MIN_BID_INCREMENT, ge=10)
    auction_date: Optional[datetime] = None
    unsold_price_reduction: float = Field(default=DEFAULT_UNSOLD_PRICE_REDUCTION, gt=0.1, lt=1)

    @field_validator("auction_date", mode="before")
    @classmethod
    def _coerce_auction_date(cls, value: Any) -> Optional[datetime]:
        return to_utc_datetime(value)
