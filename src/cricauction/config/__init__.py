"""Configuration helpers for auction defaults and settings resolution."""

from .defaults import BID_INCREMENT_TIERS, DEFAULT_SETTINGS, AuctionDefaults, IncrementTier

__all__ = [
    "AuctionDefaults",
    "BID_INCREMENT_TIERS",
    "DEFAULT_SETTINGS",
    "IncrementTier",
]
