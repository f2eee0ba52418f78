"""Pure evaluation of bids, affordability and per-team bid state."""

from .affordability import can_afford_next_bid, minimum_next_bid
from .classifier import BidState, TeamBidView, classify_bid_state, evaluate_team
from .validation import (
    ErrorCode,
    ValidationResult,
    is_valid_email,
    is_valid_number,
    validate_bid,
    validate_player_data,
    validate_required,
    validate_team_data,
)
from .wallet import WalletSummary, project_wallet_after_win, summarize_wallet

__all__ = [
    "BidState",
    "ErrorCode",
    "TeamBidView",
    "ValidationResult",
    "WalletSummary",
    "can_afford_next_bid",
    "classify_bid_state",
    "evaluate_team",
    "is_valid_email",
    "is_valid_number",
    "minimum_next_bid",
    "project_wallet_after_win",
    "summarize_wallet",
    "validate_bid",
    "validate_player_data",
    "validate_required",
    "validate_team_data",
]
