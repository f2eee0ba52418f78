"""Wallet projections and spend summaries for a team."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from cricauction.models import Bid, Team


@dataclass(frozen=True)
class WalletSummary:
    player_count: int
    max_bid: float
    total_spent: float
    remaining_percentage: int


def project_wallet_after_win(team: Team, highest_bid: Optional[Bid]) -> float:
    """Wallet left if the current lead stands; unchanged when the team is not leading.

    The result is not clamped: a negative value means the snapshot already
    holds a bid larger than the wallet.
    """

    if highest_bid is not None and highest_bid.team_id == team.id:
        return team.wallet - highest_bid.amount
    return team.wallet


def summarize_wallet(team: Team) -> WalletSummary:
    if team.initial_wallet:
        ratio = Decimal(str(team.wallet)) / Decimal(str(team.initial_wallet)) * 100
        remaining = int(ratio.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    else:
        remaining = 0
    return WalletSummary(
        player_count=len(team.players),
        max_bid=team.wallet,
        total_spent=team.initial_wallet - team.wallet,
        remaining_percentage=remaining,
    )
