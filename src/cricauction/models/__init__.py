"""Snapshot models for players, teams, bids and auction settings."""

from .bid import Bid
from .player import Player, PlayerRole, PlayerStatus, StatKey
from .settings import (
    DEFAULT_MIN_BID_INCREMENT,
    DEFAULT_UNSOLD_PRICE_REDUCTION,
    AuctionSettings,
)
from .team import DEFAULT_WALLET_AMOUNT, Team

__all__ = [
    "AuctionSettings",
    "Bid",
    "DEFAULT_MIN_BID_INCREMENT",
    "DEFAULT_UNSOLD_PRICE_REDUCTION",
    "DEFAULT_WALLET_AMOUNT",
    "Player",
    "PlayerRole",
    "PlayerStatus",
    "StatKey",
    "Team",
]
