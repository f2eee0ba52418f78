"""Display formatting for amounts, dates, countdowns and player details."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping, Optional

from cricauction.models import StatKey
from cricauction.models.base import to_utc_datetime


@dataclass(frozen=True)
class CurrencyLocale:
    locale: str
    currency: str
    symbol: str
    grouping: str  # "western" (1,000,000) or "indian" (10,00,000)


_CURRENCY_LOCALES: Dict[str, CurrencyLocale] = {
    "en-IN": CurrencyLocale(locale="en-IN", currency="INR", symbol="₹", grouping="indian"),
    "en-US": CurrencyLocale(locale="en-US", currency="USD", symbol="$", grouping="western"),
    "en-GB": CurrencyLocale(locale="en-GB", currency="GBP", symbol="£", grouping="western"),
}

STAT_LABELS: Dict[StatKey, str] = {
    StatKey.MATCHES: "Matches",
    StatKey.RUNS: "Runs",
    StatKey.WICKETS: "Wickets",
    StatKey.AVERAGE: "Average",
    StatKey.STRIKE_RATE: "Strike Rate",
    StatKey.ECONOMY: "Economy",
    StatKey.CENTURIES: "Centuries",
    StatKey.FIFTIES: "Fifties",
}

_ONE = Decimal(1)
_CENT = Decimal("0.01")


def get_currency_locale(locale: str) -> CurrencyLocale:
    """Fetch currency rules for a locale code, raising KeyError if missing."""

    if locale not in _CURRENCY_LOCALES:
        raise KeyError(f"No currency format configured for locale={locale!r}")
    return _CURRENCY_LOCALES[locale]


def _as_decimal(amount: Any) -> Optional[Decimal]:
    if amount is None or isinstance(amount, bool):
        return None
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, str):
        text = amount.replace(",", "").strip()
        if not text:
            return None
        try:
            value = Decimal(text)
        except InvalidOperation:
            return None
        return value if value.is_finite() else None
    return Decimal(str(amount))


def _group_digits(digits: str, grouping: str) -> str:
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    size = 2 if grouping == "indian" else 3
    groups = []
    while len(head) > size:
        groups.insert(0, head[-size:])
        head = head[:-size]
    groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(amount: Any, currency: str = "$") -> str:
    """Symbol-prefixed whole-currency amount with western digit grouping.

    ``None`` and unparseable strings render as zero.
    """

    value = _as_decimal(amount)
    if value is None:
        return f"{currency}0"
    rounded = value.quantize(_ONE, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{currency}{_group_digits(str(abs(int(rounded))), 'western')}"


def format_currency_locale(amount: Any, locale: str = "en-IN") -> str:
    """ISO-currency styled amount for a locale, always with two decimals."""

    rules = get_currency_locale(locale)
    value = _as_decimal(amount)
    if value is None:
        value = Decimal(0)
    rounded = value.quantize(_CENT, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    whole, _, fraction = f"{abs(rounded):.2f}".partition(".")
    return f"{sign}{rules.symbol}{_group_digits(whole, rules.grouping)}.{fraction}"


def format_indian_rupee(amount: Any, include_symbol: bool = True) -> str:
    """Rupee amount with lakh/crore grouping; paise shown only when non-zero."""

    symbol = "₹" if include_symbol else ""
    value = _as_decimal(amount)
    if value is None:
        return f"{symbol}0"
    magnitude = abs(value)
    whole = magnitude.to_integral_value(rounding=ROUND_FLOOR)
    result = _group_digits(str(int(whole)), "indian")
    sign = "-" if value < 0 else ""
    paise = int(((magnitude - whole) * 100).quantize(_ONE, rounding=ROUND_HALF_UP))
    if 0 < paise < 100:
        result += f".{paise:02d}"
    return f"{sign}{symbol}{result}"


def _coerce_datetime(value: Any) -> Optional[datetime]:
    # Bare numbers are epoch milliseconds, as produced by browser clients.
    if not value:
        return None
    try:
        return to_utc_datetime(value, epoch_unit="ms")
    except (TypeError, ValueError, OverflowError, OSError):
        return None


def format_date(value: Any) -> str:
    moment = _coerce_datetime(value)
    if moment is None:
        return ""
    return f"{moment:%b} {moment.day}, {moment.year}"


def format_datetime(value: Any) -> str:
    moment = _coerce_datetime(value)
    if moment is None:
        return ""
    return f"{moment:%b} {moment.day}, {moment.year}, {moment:%I:%M %p}"


def format_time(value: Any) -> str:
    moment = _coerce_datetime(value)
    if moment is None:
        return ""
    return f"{moment:%I:%M %p}"


@dataclass(frozen=True)
class TimeRemaining:
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @property
    def expired(self) -> bool:
        return not (self.days or self.hours or self.minutes or self.seconds)


def time_remaining(target: Any, now: Optional[datetime] = None) -> TimeRemaining:
    """Whole days/hours/minutes/seconds until ``target``; zeros once it has passed."""

    moment = _coerce_datetime(target)
    if moment is None:
        return TimeRemaining()
    current = _coerce_datetime(now) if now is not None else datetime.now(timezone.utc)
    total = int((moment - current).total_seconds())
    if total <= 0:
        return TimeRemaining()
    return TimeRemaining(
        days=total // 86_400,
        hours=(total // 3_600) % 24,
        minutes=(total // 60) % 60,
        seconds=total % 60,
    )


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_auction_countdown(auction_date: Any, now: Optional[datetime] = None) -> str:
    if not auction_date:
        return "No auction scheduled"
    moment = _coerce_datetime(auction_date)
    if moment is None:
        return "Invalid auction date"
    current = _coerce_datetime(now) if now is not None else datetime.now(timezone.utc)
    if moment < current:
        return "Auction has already taken place"

    remaining = time_remaining(moment, current)
    if remaining.days > 0:
        return f"{_plural(remaining.days, 'day')} until auction"
    if remaining.hours > 0:
        return f"{_plural(remaining.hours, 'hour')} until auction"
    return f"{_plural(remaining.minutes, 'minute')} until auction"


def truncate_text(text: Any, length: int = 100) -> str:
    if not text or not isinstance(text, str):
        return ""
    if len(text) <= length:
        return text
    return f"{text[:length]}..."


def format_player_name(name: Any) -> str:
    if not name or not isinstance(name, str):
        return ""
    return " ".join(part[:1].upper() + part[1:].lower() for part in name.split(" "))


def get_initials(name: Any, limit: int = 2) -> str:
    if not name or not isinstance(name, str):
        return ""
    return "".join([part[:1].upper() for part in name.split(" ")][:limit])


@dataclass(frozen=True)
class StatLine:
    key: StatKey
    label: str
    value: float


def format_player_stats(stats: Optional[Mapping[Any, Any]]) -> List[StatLine]:
    """Labelled stat lines for known statistics, in the order given."""

    if not stats or not isinstance(stats, Mapping):
        return []
    lines: List[StatLine] = []
    for raw_key, value in stats.items():
        try:
            key = StatKey(raw_key)
        except ValueError:
            continue
        if value is None:
            continue
        lines.append(StatLine(key=key, label=STAT_LABELS[key], value=value))
    return lines
