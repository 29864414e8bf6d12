"""Per-asset borrow market metrics."""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from ..amounts.formatting import calculate_percentage
from ..models import Asset


def borrow_apy(asset: Asset, is_xcn_enabled: bool) -> Decimal:
    """Net borrow APY seen by the user.

    With XCN distribution enabled the distribution rate offsets the borrow
    rate; a pending (NaN) distribution rate yields NaN.
    """
    if is_xcn_enabled:
        return asset.xcn_borrow_apy - asset.borrow_apy
    return -asset.borrow_apy


def borrow_balance_cents(asset: Asset) -> Decimal:
    return asset.borrow_balance * asset.token_price


def percent_of_limit(asset: Asset, user_total_borrow_limit_cents: Decimal) -> Decimal:
    """Share of the user's borrow limit taken by this asset, in percent."""
    return calculate_percentage(
        borrow_balance_cents(asset), user_total_borrow_limit_cents
    )


def has_collateralized_supplied_assets(assets: Iterable[Asset]) -> bool:
    return any(asset.collateral and asset.supply_balance > 0 for asset in assets)
