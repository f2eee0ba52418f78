"""Highest-bid snapshot model."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from .base import SnapshotModel, to_utc_datetime


class Bid(SnapshotModel):
    """Current leading bid on the open lot."""

    id: str = Field(..., min_length=1)
    team_id: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0)
    player_id: Optional[str] = None
    timestamp: Optional[datetime] = None

    @field_validator("timestamp", mode="before")
    @classmethod
    def _coerce_timestamp(cls, value: Any) -> Optional[datetime]:
        return to_utc_datetime(value)
