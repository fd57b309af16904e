"""Test pricing configuration."""
from decimal import Decimal

import pytest

from pricing.config import PricingConfig


def test_defaults():
    config = PricingConfig.default()
    assert config.max_name_length == 40
    assert config.min_price == Decimal("0.01")
    assert config.max_price == Decimal("999.99")
    assert config.max_quantity == 99


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("PRICING_MAX_QUANTITY", "50")
    monkeypatch.setenv("PRICING_MAX_PRICE", "5000.00")
    config = PricingConfig.from_env()
    assert config.max_quantity == 50
    assert config.max_price == Decimal("5000.00")
    assert config.max_name_length == 40


def test_from_env_custom_prefix(monkeypatch):
    monkeypatch.setenv("SHOP_MAX_NAME_LENGTH", "10")
    assert PricingConfig.from_env(prefix="SHOP_").max_name_length == 10


def test_config_is_frozen():
    config = PricingConfig()
    with pytest.raises(AttributeError):
        config.max_quantity = 5


def test_inconsistent_limits_rejected():
    with pytest.raises(ValueError, match="exceeds"):
        PricingConfig(min_price=Decimal("10"), max_price=Decimal("1"))


def test_name_limit_fits_invoice_column():
    assert PricingConfig(max_name_length=40).max_name_length == 40
    with pytest.raises(ValueError, match="invoice name column"):
        PricingConfig(max_name_length=41)
