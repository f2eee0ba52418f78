"""Main and unsold auction rounds, and the prices lots open at."""

from __future__ import annotations

import math
from enum import Enum
from typing import Iterable, List, Sequence

from cricauction.config import BID_INCREMENT_TIERS, IncrementTier
from cricauction.models import AuctionSettings, Player, PlayerStatus


class AuctionRound(str, Enum):
    MAIN = "main"
    UNSOLD = "unsold"


def unsold_base_price(player: Player, reduction: float) -> int:
    """Base price for a second pass over an unsold player, rounded down."""

    return math.floor(player.base_price * reduction)


def lot_base_price(player: Player, auction_round: AuctionRound, settings: AuctionSettings) -> float:
    if auction_round is AuctionRound.UNSOLD:
        return unsold_base_price(player, settings.unsold_price_reduction)
    return player.base_price


def players_for_round(
    players: Iterable[Player],
    auction_round: AuctionRound,
    settings: AuctionSettings,
) -> List[Player]:
    """Lots eligible for a round, priced for that round.

    The unsold round returns copies carrying the reduced base price; the
    input snapshots are left untouched.
    """

    if auction_round is AuctionRound.MAIN:
        return [player for player in players if player.status is PlayerStatus.AVAILABLE]
    return [
        player.model_copy(update={"base_price": lot_base_price(player, auction_round, settings)})
        for player in players
        if player.status is PlayerStatus.UNSOLD
    ]


def quick_increment(min_bid: float, tiers: Sequence[IncrementTier] = BID_INCREMENT_TIERS) -> float:
    """Quick-bid step for the current minimum bid."""

    for tier in tiers:
        if min_bid < tier.threshold:
            return tier.increment
    return tiers[-1].increment
