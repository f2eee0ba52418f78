import json
import logging
from pathlib import Path

import pytest

from cricauction.config import BID_INCREMENT_TIERS, DEFAULT_SETTINGS
from cricauction.config_loader import SettingsProfile, env_settings, resolve_settings
from cricauction.models import AuctionSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("CRICAUCTION_MIN_BID_INCREMENT", raising=False)
    monkeypatch.delenv("CRICAUCTION_UNSOLD_PRICE_REDUCTION", raising=False)


def test_defaults_match_model_defaults():
    settings = AuctionSettings()
    assert DEFAULT_SETTINGS.min_bid_increment == settings.min_bid_increment
    assert DEFAULT_SETTINGS.unsold_price_reduction == settings.unsold_price_reduction
    assert DEFAULT_SETTINGS.wallet_amount == 10_000


def test_increment_tiers_are_ordered():
    thresholds = [tier.threshold for tier in BID_INCREMENT_TIERS]
    assert thresholds == sorted(thresholds)


def test_resolve_settings_without_overrides():
    settings = resolve_settings()
    assert settings.min_bid_increment == 100
    assert settings.unsold_price_reduction == pytest.approx(0.5)


def test_resolve_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("CRICAUCTION_MIN_BID_INCREMENT", "250")
    monkeypatch.setenv("CRICAUCTION_UNSOLD_PRICE_REDUCTION", "0.75")

    settings = resolve_settings()
    assert settings.min_bid_increment == 250
    assert settings.unsold_price_reduction == pytest.approx(0.75)


def test_invalid_environment_values_fall_back(monkeypatch, caplog):
    monkeypatch.setenv("CRICAUCTION_MIN_BID_INCREMENT", "lots")
    monkeypatch.setenv("CRICAUCTION_UNSOLD_PRICE_REDUCTION", "3")

    with caplog.at_level(logging.WARNING, logger="cricauction.config_loader"):
        settings = resolve_settings()

    assert settings.min_bid_increment == 100
    assert settings.unsold_price_reduction == pytest.approx(0.5)
    assert "Invalid float" in caplog.text
    assert "outside" in caplog.text


def test_low_environment_increment_is_clamped(monkeypatch):
    monkeypatch.setenv("CRICAUCTION_MIN_BID_INCREMENT", "1")
    assert resolve_settings().min_bid_increment == 10


def test_profile_file_overrides_environment(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("CRICAUCTION_MIN_BID_INCREMENT", "250")
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"min_bid_increment": 500, "auctionDate": "2025-04-29T09:00:00Z"}))

    settings = resolve_settings(path)
    assert settings.min_bid_increment == 500
    assert settings.auction_date is not None
    assert settings.auction_date.year == 2025


def test_settings_profile_round_trip(tmp_path: Path):
    path = tmp_path / "settings.json"
    SettingsProfile.from_settings(AuctionSettings(min_bid_increment=200)).save(path)

    saved = json.loads(path.read_text())
    assert saved["minBidIncrement"] == 200
    assert SettingsProfile.load(path).to_settings().min_bid_increment == 200


def test_settings_profile_rejects_non_object(tmp_path: Path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValueError):
        SettingsProfile.load(path)


def test_env_settings_only_reports_set_variables(monkeypatch):
    assert env_settings() == {}

    monkeypatch.setenv("CRICAUCTION_UNSOLD_PRICE_REDUCTION", "0.6")
    assert env_settings() == {"unsoldPriceReduction": 0.6}
