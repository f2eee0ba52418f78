"""Validators for bids and admin-entered player/team data.

Every validator returns a :class:`ValidationResult`; failures are values for
the caller to render inline, never exceptions.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional
from urllib.parse import urlsplit

from cricauction.formatting import format_currency
from cricauction.models import PlayerRole


GENERAL_FIELD = "_general"

_EMAIL_RE = re.compile(r"^[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}$")


class ErrorCode(str, Enum):
    INVALID_AMOUNT = "InvalidAmount"
    BELOW_MINIMUM = "BelowMinimum"
    INSUFFICIENT_FUNDS = "InsufficientFunds"
    REQUIRED = "Required"
    TOO_SHORT = "TooShort"
    INVALID_NUMBER = "InvalidNumber"
    OUT_OF_RANGE = "OutOfRange"
    INVALID_ROLE = "InvalidRole"
    INVALID_URL = "InvalidUrl"
    MALFORMED = "Malformed"


@dataclass(frozen=True)
class ValidationResult:
    errors: Dict[str, str] = field(default_factory=dict)
    codes: Dict[str, ErrorCode] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @classmethod
    def failure(cls, field_name: str, code: ErrorCode, message: str) -> "ValidationResult":
        return cls(errors={field_name: message}, codes={field_name: code})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "errors": dict(self.errors),
            "codes": {key: code.value for key, code in self.codes.items()},
        }


class _Collector:
    def __init__(self) -> None:
        self.errors: Dict[str, str] = {}
        self.codes: Dict[str, ErrorCode] = {}

    def add(self, field_name: str, code: ErrorCode, message: str) -> None:
        self.errors[field_name] = message
        self.codes[field_name] = code

    def result(self) -> ValidationResult:
        return ValidationResult(errors=self.errors, codes=self.codes)


def to_number(value: Any) -> Optional[float]:
    """Parse a finite number from a numeric or string value, else None."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def is_valid_number(value: Any, minimum: Optional[float] = None, maximum: Optional[float] = None) -> bool:
    number = to_number(value)
    if number is None:
        return False
    if minimum is not None and number < minimum:
        return False
    if maximum is not None and number > maximum:
        return False
    return True


def is_valid_email(email: Any) -> bool:
    if not email or not isinstance(email, str):
        return False
    return bool(_EMAIL_RE.match(email.strip().lower()))


def validate_bid(bid_amount: Any, min_bid: float, wallet_balance: float) -> ValidationResult:
    """Check a proposed bid; the first failing rule is the only one reported."""

    amount = to_number(bid_amount)
    if amount is None or amount < 0:
        return ValidationResult.failure(
            "amount", ErrorCode.INVALID_AMOUNT, "Bid amount must be a positive number"
        )
    if amount < min_bid:
        return ValidationResult.failure(
            "amount", ErrorCode.BELOW_MINIMUM, f"Bid must be at least {format_currency(min_bid)}"
        )
    if amount > wallet_balance:
        return ValidationResult.failure(
            "amount", ErrorCode.INSUFFICIENT_FUNDS, "Insufficient wallet balance"
        )
    return ValidationResult()


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set)):
        return not value
    return False


def _malformed(kind: str) -> ValidationResult:
    return ValidationResult.failure(GENERAL_FIELD, ErrorCode.MALFORMED, f"{kind} data must be an object")


def validate_required(data: Any, required_fields: Iterable[str]) -> ValidationResult:
    if not isinstance(data, Mapping):
        return _malformed("Form")
    collector = _Collector()
    for name in required_fields:
        if _is_blank(data.get(name)):
            collector.add(name, ErrorCode.REQUIRED, "This field is required")
    return collector.result()


def _check_name(collector: _Collector, value: Any, label: str) -> None:
    if not isinstance(value, str) or len(value.strip()) < 2:
        collector.add("name", ErrorCode.TOO_SHORT, f"{label} name must be at least 2 characters long")


def _first_present(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def validate_player_data(data: Any) -> ValidationResult:
    """Validate a player form or import row before it becomes a document."""

    if not isinstance(data, Mapping):
        return _malformed("Player")
    collector = _Collector()
    _check_name(collector, data.get("name"), "Player")

    if not is_valid_number(_first_present(data, "basePrice", "base_price"), minimum=0):
        collector.add("basePrice", ErrorCode.INVALID_NUMBER, "Base price must be a positive number")

    role = _first_present(data, "role", "category")
    if not _is_blank(role):
        try:
            PlayerRole.parse(role.value if isinstance(role, PlayerRole) else str(role))
        except ValueError:
            collector.add("role", ErrorCode.INVALID_ROLE, "Invalid player role")

    stats = data.get("stats")
    if isinstance(stats, Mapping):
        matches = to_number(stats.get("matches"))
        runs = to_number(stats.get("runs"))
        average = to_number(stats.get("average"))
        if matches is not None and matches < 0:
            collector.add("stats.matches", ErrorCode.OUT_OF_RANGE, "Matches cannot be negative")
        if runs is not None and runs < 0:
            collector.add("stats.runs", ErrorCode.OUT_OF_RANGE, "Runs cannot be negative")
        if average is not None and not 0 <= average <= 100:
            collector.add("stats.average", ErrorCode.OUT_OF_RANGE, "Average must be between 0 and 100")

    return collector.result()


def _is_web_url(value: str) -> bool:
    parts = urlsplit(value.strip())
    return parts.scheme in ("http", "https") and bool(parts.netloc)


def validate_team_data(data: Any) -> ValidationResult:
    if not isinstance(data, Mapping):
        return _malformed("Team")
    collector = _Collector()
    _check_name(collector, data.get("name"), "Team")

    wallet = to_number(data.get("wallet"))
    if wallet is None or wallet < 0:
        collector.add("wallet", ErrorCode.INVALID_NUMBER, "Wallet amount must be a positive number")

    raw_initial = _first_present(data, "initialWallet", "initial_wallet")
    if raw_initial is not None:
        initial = to_number(raw_initial)
        if initial is None or initial < 0:
            collector.add("initialWallet", ErrorCode.INVALID_NUMBER, "Initial wallet must be a positive number")
        elif wallet is not None and wallet > initial:
            collector.add("initialWallet", ErrorCode.OUT_OF_RANGE, "Initial wallet cannot be less than the wallet")

    logo = data.get("logo")
    if isinstance(logo, str) and logo.strip() and not _is_web_url(logo):
        collector.add("logo", ErrorCode.INVALID_URL, "Logo must be a valid URL")

    return collector.result()
