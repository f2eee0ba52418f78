"""Shared model configuration and timestamp coercion."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


class SnapshotModel(BaseModel):
    """Frozen snapshot of a backend document.

    Attributes are snake_case; backend documents use camelCase keys, which
    validate through the generated aliases.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )


def _from_epoch(value: float, unit: str = "s") -> datetime:
    try:
        seconds = float(value) / 1000 if unit == "ms" else float(value)
        if not math.isfinite(seconds):
            raise ValueError("timestamp must be finite")
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError) as exc:
        raise ValueError(f"timestamp {value!r} is out of range") from exc


def to_utc_datetime(value: Any, *, epoch_unit: str = "s") -> Optional[datetime]:
    """Normalize a timestamp-like value to an aware UTC datetime.

    Accepts datetimes (naive values are taken as UTC), ISO-8601 strings,
    epoch numbers in ``epoch_unit`` ("s" or "ms"), and backend timestamp
    mappings carrying ``seconds`` (and optionally ``nanoseconds``).
    Returns None for empty input and raises ValueError for anything else.
    """

    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, Mapping):
        if "seconds" not in value:
            raise ValueError("timestamp mapping must carry 'seconds'")
        try:
            seconds = float(value["seconds"]) + float(value.get("nanoseconds") or 0) / 1e9
        except (TypeError, OverflowError) as exc:
            raise ValueError(f"timestamp mapping must hold numbers, got {value!r}") from exc
        return _from_epoch(seconds)
    if isinstance(value, bool):
        raise ValueError("boolean is not a timestamp")
    if isinstance(value, (int, float)):
        return _from_epoch(value, epoch_unit)
    if isinstance(value, str):
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
    raise ValueError(f"unsupported timestamp value {value!r}")
