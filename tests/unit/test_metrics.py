"""Unit tests for borrow market metrics."""
from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

from lendswap.markets.metrics import (
    borrow_apy,
    borrow_balance_cents,
    has_collateralized_supplied_assets,
    percent_of_limit,
)
from lendswap.models import Asset


class TestBorrowApy:
    def test_xcn_disabled(self, sample_asset: Asset) -> None:
        assert borrow_apy(sample_asset, is_xcn_enabled=False) == Decimal("-3.5")

    def test_xcn_enabled(self, sample_asset: Asset) -> None:
        assert borrow_apy(sample_asset, is_xcn_enabled=True) == Decimal("-2.25")

    def test_pending_distribution(self, sample_asset: Asset) -> None:
        pending = replace(sample_asset, xcn_borrow_apy=Decimal("NaN"))
        assert pending.is_xcn_borrow_apy_pending
        assert borrow_apy(pending, is_xcn_enabled=True).is_nan()


class TestPercentOfLimit:
    def test_basic(self, sample_asset: Asset) -> None:
        # 10 tokens * 100 cents = 1000 cents of a 4000 cent limit
        assert borrow_balance_cents(sample_asset) == Decimal("1000")
        assert percent_of_limit(sample_asset, Decimal("4000")) == Decimal("25")

    def test_zero_limit(self, sample_asset: Asset) -> None:
        assert percent_of_limit(sample_asset, Decimal("0")) == Decimal("0")


class TestHasCollateralizedSuppliedAssets:
    def test_collateral_with_supply(self, sample_asset: Asset) -> None:
        assert has_collateralized_supplied_assets([sample_asset])

    def test_collateral_without_supply(self, sample_asset: Asset) -> None:
        empty = replace(sample_asset, supply_balance=Decimal("0"))
        assert not has_collateralized_supplied_assets([empty])

    def test_supply_not_collateral(self, sample_asset: Asset) -> None:
        plain = replace(sample_asset, collateral=False)
        assert not has_collateralized_supplied_assets([plain])

    def test_empty(self) -> None:
        assert not has_collateralized_supplied_assets([])
