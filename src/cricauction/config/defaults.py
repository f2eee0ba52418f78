"""Default auction settings and bid-increment tiers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Tuple

from cricauction.models import (
    DEFAULT_MIN_BID_INCREMENT,
    DEFAULT_UNSOLD_PRICE_REDUCTION,
    DEFAULT_WALLET_AMOUNT,
)


@dataclass(frozen=True)
class AuctionDefaults:
    wallet_amount: float
    min_bid_increment: float
    unsold_price_reduction: float
    notification_timeout: float
    auction_date: datetime


@dataclass(frozen=True)
class IncrementTier:
    """Quick-bid step used while the minimum bid is below ``threshold``."""

    threshold: float
    increment: float


DEFAULT_SETTINGS = AuctionDefaults(
    wallet_amount=DEFAULT_WALLET_AMOUNT,
    min_bid_increment=DEFAULT_MIN_BID_INCREMENT,
    unsold_price_reduction=DEFAULT_UNSOLD_PRICE_REDUCTION,
    notification_timeout=5.0,
    auction_date=datetime(2025, 4, 29, 9, 0, tzinfo=timezone.utc),
)


# Ordered by threshold; lookups walk the tuple front to back.
BID_INCREMENT_TIERS: Tuple[IncrementTier, ...] = (
    IncrementTier(threshold=1_000, increment=100),
    IncrementTier(threshold=5_000, increment=500),
    IncrementTier(threshold=10_000, increment=1_000),
    IncrementTier(threshold=50_000, increment=5_000),
    IncrementTier(threshold=100_000, increment=10_000),
)
