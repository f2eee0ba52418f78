"""Player snapshot model and its closed vocabularies."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import Field, field_validator

from .base import SnapshotModel


class PlayerRole(str, Enum):
    BATSMAN = "Batsman"
    BOWLER = "Bowler"
    ALL_ROUNDER = "All-rounder"
    WICKET_KEEPER = "Wicket-keeper"

    @classmethod
    def parse(cls, value: str) -> "PlayerRole":
        """Resolve a role label ignoring case, spaces, hyphens and underscores."""

        key = _role_token(value)
        for role in cls:
            if _role_token(role.value) == key:
                return role
        raise ValueError(f"Unknown player role {value!r}")


def _role_token(value: str) -> str:
    return re.sub(r"[\s_\-]", "", value).lower()


class PlayerStatus(str, Enum):
    AVAILABLE = "available"
    SOLD = "sold"
    UNSOLD = "unsold"
    PERMANENTLY_UNSOLD = "permanently_unsold"


class StatKey(str, Enum):
    MATCHES = "matches"
    RUNS = "runs"
    AVERAGE = "average"
    STRIKE_RATE = "strikeRate"
    WICKETS = "wickets"
    ECONOMY = "economy"
    CENTURIES = "centuries"
    FIFTIES = "fifties"


_STAT_KEYS = {key.value for key in StatKey}


class Player(SnapshotModel):
    """Player offered in the auction."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    role: Optional[PlayerRole] = None
    base_price: float = Field(..., ge=0)
    status: PlayerStatus = PlayerStatus.AVAILABLE
    stats: Dict[StatKey, float] = Field(default_factory=dict)
    batting_style: Optional[str] = None
    bowling_style: Optional[str] = None
    sold_price: Optional[float] = Field(default=None, ge=0)
    team_id: Optional[str] = None

    @field_validator("role", mode="before")
    @classmethod
    def _normalize_role(cls, value: Any) -> Any:
        if value is None or isinstance(value, PlayerRole):
            return value
        if isinstance(value, str):
            if not value.strip():
                return None
            return PlayerRole.parse(value)
        return value

    @field_validator("stats", mode="before")
    @classmethod
    def _known_stats_only(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            return value
        # Unknown keys and empty values are not displayable; drop them.
        return {
            key: stat
            for key, stat in value.items()
            if (key.value if isinstance(key, StatKey) else key) in _STAT_KEYS and stat is not None
        }
