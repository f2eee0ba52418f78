from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from cricauction.evaluator import BidState
from cricauction.models import AuctionSettings, Bid, Player, Team

from .base import ApiModel


class EvaluateRequest(ApiModel):
    team: Team
    highest_bid: Optional[Bid] = None
    current_player: Optional[Player] = None
    settings: Optional[AuctionSettings] = None
    currency: str = Field(default="$", max_length=8)


class EvaluateTeamsRequest(ApiModel):
    teams: List[Team] = Field(..., min_length=1)
    highest_bid: Optional[Bid] = None
    current_player: Optional[Player] = None
    settings: Optional[AuctionSettings] = None
    currency: str = Field(default="$", max_length=8)


class WalletSummaryResponse(ApiModel):
    player_count: int
    max_bid: float
    total_spent: float
    remaining_percentage: int


class EvaluationResponse(ApiModel):
    team_id: str
    state: BidState
    can_bid: bool
    is_highest_bidder: bool
    minimum_bid: float
    projected_wallet: float
    wallet: WalletSummaryResponse
    minimum_bid_display: str
    projected_wallet_display: str


class EvaluateTeamsResponse(ApiModel):
    min_bid_increment: float
    evaluations: List[EvaluationResponse]
