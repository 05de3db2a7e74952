# tests/test_config.py
"""
Configuration Tests - Unit Tests for Settings and Validators

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- swapwatch.config (Settings)
- swapwatch.shared.validators (validation functions)
- pydantic (ValidationError)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from pydantic import ValidationError  # Raised by Settings on invalid values

from swapwatch.config import Settings
from swapwatch.shared.validators import validate_base_url, validate_color, validate_tx_id


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("THORNODE_URL", raising=False)
        settings = Settings()
        assert settings.thornode_url == "https://thornode.ninerealms.com/thorchain"
        assert settings.http_timeout_seconds == 10
        assert settings.refresh_interval_seconds == 10
        assert settings.block_time_seconds == 6
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("THORNODE_URL", "http://localhost:1317/thorchain/")
        monkeypatch.setenv("BLOCK_TIME_SECONDS", "5")
        settings = Settings()
        assert settings.thornode_url == "http://localhost:1317/thorchain/"
        assert settings.block_time_seconds == 5
        assert settings.POOLS_URL == "http://localhost:1317/thorchain/pools"
        assert settings.STREAMING_SWAPS_URL == "http://localhost:1317/thorchain/swaps/streaming"
        assert settings.TX_STATUS_URL == "http://localhost:1317/thorchain/tx/status/"

    def test_invalid_url(self):
        with pytest.raises(ValidationError):
            Settings(THORNODE_URL="ftp://node")

    def test_invalid_timeout(self):
        with pytest.raises(ValidationError):
            Settings(HTTP_TIMEOUT_SECONDS=0)

    def test_invalid_colour(self):
        with pytest.raises(ValidationError):
            Settings(STYLE_SECONDARY_TEXT="grey-ish")

    def test_log_level_normalized(self):
        assert Settings(LOG_LEVEL="debug").log_level == "DEBUG"
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="loud")


class TestValidators:
    def test_base_url(self):
        assert validate_base_url("https://thornode.ninerealms.com/thorchain")
        assert validate_base_url("http://localhost:1317")
        assert not validate_base_url("")
        assert not validate_base_url("thornode.ninerealms.com")
        assert not validate_base_url("ftp://node")

    def test_tx_id(self):
        assert validate_tx_id("a" * 64)
        assert validate_tx_id("0123456789ABCDEF" * 4)
        assert not validate_tx_id("0" * 64)
        assert not validate_tx_id("g" * 64)
        assert not validate_tx_id("abc")
        assert not validate_tx_id("")

    def test_color(self):
        assert validate_color("#666")
        assert validate_color("#26A17B")
        assert validate_color("inherit")
        assert not validate_color("#12")
        assert not validate_color("red-ish")
        assert not validate_color("")
