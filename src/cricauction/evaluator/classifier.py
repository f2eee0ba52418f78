"""Map a (team, highest bid, open lot) snapshot to the UI state for that team."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cricauction.models import AuctionSettings, Bid, Player, Team

from .affordability import can_afford_next_bid, minimum_next_bid
from .wallet import WalletSummary, project_wallet_after_win, summarize_wallet


class BidState(str, Enum):
    WINNING = "WINNING"
    OUTBID_AFFORDABLE = "OUTBID_AFFORDABLE"
    OUTBID_UNAFFORDABLE = "OUTBID_UNAFFORDABLE"
    OPEN_AFFORDABLE = "OPEN_AFFORDABLE"
    OPEN_UNAFFORDABLE = "OPEN_UNAFFORDABLE"
    INACTIVE = "INACTIVE"


def classify_bid_state(
    team: Optional[Team],
    highest_bid: Optional[Bid],
    current_player: Optional[Player],
    min_increment: float,
) -> BidState:
    """Classify one snapshot; rules are checked in order and the first match wins.

    Nothing is remembered between calls: each new snapshot is classified
    from scratch.
    """

    if current_player is None or team is None:
        return BidState.INACTIVE
    if highest_bid is not None and highest_bid.team_id == team.id:
        return BidState.WINNING

    affordable = can_afford_next_bid(team, highest_bid, current_player, min_increment)
    if highest_bid is not None:
        return BidState.OUTBID_AFFORDABLE if affordable else BidState.OUTBID_UNAFFORDABLE
    return BidState.OPEN_AFFORDABLE if affordable else BidState.OPEN_UNAFFORDABLE


@dataclass(frozen=True)
class TeamBidView:
    """Everything a team dashboard needs for the current snapshot."""

    team_id: str
    state: BidState
    can_bid: bool
    is_highest_bidder: bool
    minimum_bid: float
    projected_wallet: float
    wallet: WalletSummary


def evaluate_team(
    team: Team,
    highest_bid: Optional[Bid],
    current_player: Optional[Player],
    settings: AuctionSettings,
) -> TeamBidView:
    min_increment = settings.min_bid_increment
    # A bid left over from a closed lot does not count against the team.
    live_bid = highest_bid if current_player is not None else None
    return TeamBidView(
        team_id=team.id,
        state=classify_bid_state(team, live_bid, current_player, min_increment),
        can_bid=can_afford_next_bid(team, live_bid, current_player, min_increment),
        is_highest_bidder=live_bid is not None and live_bid.team_id == team.id,
        minimum_bid=minimum_next_bid(live_bid, current_player, min_increment),
        projected_wallet=project_wallet_after_win(team, live_bid),
        wallet=summarize_wallet(team),
    )
