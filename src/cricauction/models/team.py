"""Team snapshot model."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, model_validator

from .base import SnapshotModel


DEFAULT_WALLET_AMOUNT = 10_000


class Team(SnapshotModel):
    """Bidding team with its remaining and starting budget."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    wallet: float = Field(..., ge=0)
    initial_wallet: float = Field(default=DEFAULT_WALLET_AMOUNT, ge=0)
    players: List[str] = Field(default_factory=list)
    owner: Optional[str] = None
    logo: Optional[str] = None

    @model_validator(mode="after")
    def _wallet_within_initial(self) -> "Team":
        if self.wallet > self.initial_wallet:
            raise ValueError(
                f"wallet {self.wallet} exceeds initial wallet {self.initial_wallet}"
            )
        return self
