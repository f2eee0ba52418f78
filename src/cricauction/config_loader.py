"""Resolve auction settings from defaults, environment and JSON profiles."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from cricauction.config import DEFAULT_SETTINGS
from cricauction.models import AuctionSettings


logger = logging.getLogger(__name__)

_MIN_BID_INCREMENT_ENV = "CRICAUCTION_MIN_BID_INCREMENT"
_UNSOLD_PRICE_REDUCTION_ENV = "CRICAUCTION_UNSOLD_PRICE_REDUCTION"


def _env_float(name: str, default: float, *, clamp_min: float | None = None, clamp_max: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    if clamp_max is not None:
        value = min(clamp_max, value)
    return value


@dataclass
class SettingsProfile:
    """Auction settings persisted as a JSON document with camelCase keys."""

    settings: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> "SettingsProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} must contain a JSON object")
        return cls(settings=data)

    def save(self, path: Path) -> None:
        path.write_text(json.dumps(self.settings, indent=2, default=str), encoding="utf-8")

    @classmethod
    def from_settings(cls, settings: AuctionSettings) -> "SettingsProfile":
        return cls(settings=settings.model_dump(mode="json", by_alias=True, exclude_none=True))

    def to_settings(self) -> AuctionSettings:
        return AuctionSettings.model_validate(self.settings)


def env_settings() -> Dict[str, float]:
    """Settings overrides taken from the environment."""

    overrides: Dict[str, float] = {}
    if os.getenv(_MIN_BID_INCREMENT_ENV) is not None:
        overrides["minBidIncrement"] = _env_float(
            _MIN_BID_INCREMENT_ENV,
            DEFAULT_SETTINGS.min_bid_increment,
            clamp_min=10,
        )
    if os.getenv(_UNSOLD_PRICE_REDUCTION_ENV) is not None:
        reduction = _env_float(_UNSOLD_PRICE_REDUCTION_ENV, DEFAULT_SETTINGS.unsold_price_reduction)
        if 0.1 < reduction < 1:
            overrides["unsoldPriceReduction"] = reduction
        else:
            logger.warning(
                "%s=%s is outside (0.1, 1); using default %.2f",
                _UNSOLD_PRICE_REDUCTION_ENV,
                reduction,
                DEFAULT_SETTINGS.unsold_price_reduction,
            )
    return overrides


def _camel_key(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def resolve_settings(profile_path: Optional[Path] = None) -> AuctionSettings:
    """Layer defaults, environment overrides and an optional JSON profile."""

    payload: Dict[str, Any] = {
        "minBidIncrement": DEFAULT_SETTINGS.min_bid_increment,
        "unsoldPriceReduction": DEFAULT_SETTINGS.unsold_price_reduction,
    }
    payload.update(env_settings())
    if profile_path is not None:
        payload.update(
            {_camel_key(key): value for key, value in SettingsProfile.load(profile_path).settings.items()}
        )
    settings = AuctionSettings.model_validate(payload)
    logger.info(
        "Resolved auction settings: min increment %s, unsold reduction %s",
        settings.min_bid_increment,
        settings.unsold_price_reduction,
    )
    return settings
