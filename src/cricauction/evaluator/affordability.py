"""Whether a team can place the next valid bid on the open lot."""

from __future__ import annotations

from typing import Optional

from cricauction.models import Bid, Player, Team


def minimum_next_bid(
    highest_bid: Optional[Bid],
    current_player: Optional[Player],
    min_increment: float,
) -> float:
    """Smallest amount a new bid must reach: the base price, or the lead plus the increment."""

    if current_player is None:
        return 0
    if highest_bid is None:
        return current_player.base_price
    return highest_bid.amount + min_increment


def can_afford_next_bid(
    team: Optional[Team],
    highest_bid: Optional[Bid],
    current_player: Optional[Player],
    min_increment: float,
) -> bool:
    if current_player is None or team is None:
        return False
    if highest_bid is None:
        return team.wallet >= current_player.base_price
    # The leader is never asked to outbid itself.
    if highest_bid.team_id == team.id:
        return True
    return team.wallet >= highest_bid.amount + min_increment
