import math

import pytest

from cricauction.evaluator import (
    ErrorCode,
    is_valid_email,
    is_valid_number,
    validate_bid,
    validate_player_data,
    validate_required,
    validate_team_data,
)


@pytest.mark.parametrize("amount", [None, "", "  ", "abc", -1, "-5", True, math.nan, math.inf, [100]])
def test_validate_bid_rejects_non_numeric_and_negative(amount):
    result = validate_bid(amount, 100, 5000)

    assert not result.is_valid
    assert result.codes == {"amount": ErrorCode.INVALID_AMOUNT}
    assert result.errors["amount"] == "Bid amount must be a positive number"


@pytest.mark.parametrize("amount", [0, 50, 99.99, "99"])
def test_validate_bid_below_minimum(amount):
    result = validate_bid(amount, 100, 5000)

    assert not result.is_valid
    assert result.codes["amount"] is ErrorCode.BELOW_MINIMUM
    assert result.errors["amount"] == "Bid must be at least $100"


@pytest.mark.parametrize("amount,min_bid", [(6000, 100), (6000, 7000), (5000.5, 0)])
def test_validate_bid_over_wallet_is_never_valid(amount, min_bid):
    assert not validate_bid(amount, min_bid, 5000).is_valid


def test_validate_bid_below_minimum_takes_precedence_over_funds():
    result = validate_bid(6000, 7000, 5000)
    assert result.codes == {"amount": ErrorCode.BELOW_MINIMUM}


def test_validate_bid_over_wallet_reports_insufficient_funds():
    result = validate_bid("6000", 100, 5000)
    assert result.codes == {"amount": ErrorCode.INSUFFICIENT_FUNDS}
    assert result.errors == {"amount": "Insufficient wallet balance"}


@pytest.mark.parametrize("amount", [100, "100", 5000, 2500.5])
def test_validate_bid_accepts_bids_in_range(amount):
    result = validate_bid(amount, 100, 5000)
    assert result.is_valid
    assert result.errors == {}
    assert result.to_dict() == {"isValid": True, "errors": {}, "codes": {}}


def test_is_valid_number_bounds():
    assert is_valid_number("10", minimum=0, maximum=10)
    assert not is_valid_number(11, maximum=10)
    assert not is_valid_number(-1, minimum=0)
    assert not is_valid_number("ten")


def test_is_valid_email():
    assert is_valid_email("Owner@Example.com")
    assert not is_valid_email("owner@example")
    assert not is_valid_email(None)


def test_validate_required_flags_blank_fields():
    result = validate_required({"name": "  ", "wallet": 0, "logo": None}, ["name", "wallet", "logo", "owner"])

    assert set(result.errors) == {"name", "logo", "owner"}
    assert result.errors["name"] == "This field is required"


@pytest.mark.parametrize("payload", [None, "player", 42, ["name"]])
def test_data_validators_report_malformed_input(payload):
    for validator in (validate_player_data, validate_team_data):
        result = validator(payload)
        assert not result.is_valid
        assert list(result.errors) == ["_general"]
        assert result.codes["_general"] is ErrorCode.MALFORMED
    assert list(validate_required(payload, ["name"]).errors) == ["_general"]


def test_validate_player_data_accepts_role_variants():
    for role in ("All-Rounder", "Wicket-keeper", "batsman"):
        result = validate_player_data({"name": "MS Dhoni", "basePrice": "2000", "role": role})
        assert result.is_valid, role


def test_validate_player_data_collects_every_error():
    result = validate_player_data(
        {
            "name": "A",
            "basePrice": -10,
            "category": "Coach",
            "stats": {"matches": -1, "runs": -5, "average": 120},
        }
    )

    assert result.codes == {
        "name": ErrorCode.TOO_SHORT,
        "basePrice": ErrorCode.INVALID_NUMBER,
        "role": ErrorCode.INVALID_ROLE,
        "stats.matches": ErrorCode.OUT_OF_RANGE,
        "stats.runs": ErrorCode.OUT_OF_RANGE,
        "stats.average": ErrorCode.OUT_OF_RANGE,
    }


def test_validate_player_data_ignores_unparseable_stats():
    result = validate_player_data({"name": "Rohit", "base_price": 100, "stats": {"average": "n/a"}})
    assert result.is_valid


def test_validate_team_data():
    assert validate_team_data({"name": "Mumbai", "wallet": 10000, "logo": "https://cdn.example.com/mi.png"}).is_valid

    result = validate_team_data({"name": "M", "wallet": "lots", "logo": "not a url"})
    assert set(result.errors) == {"name", "wallet", "logo"}


def test_validate_team_data_checks_initial_wallet():
    result = validate_team_data({"name": "Mumbai", "wallet": 12000, "initialWallet": 10000})
    assert result.codes == {"initialWallet": ErrorCode.OUT_OF_RANGE}
