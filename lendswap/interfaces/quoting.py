"""Quoting engine protocol — the trade a route finder hands back."""
from decimal import Decimal
from typing import Protocol, Sequence


class RouteToken(Protocol):
    @property
    def address(self) -> str: ...


class Route(Protocol):
    @property
    def path(self) -> Sequence[RouteToken]: ...


class Trade(Protocol):
    """Candidate trade with amounts expressed in tokens."""

    @property
    def input_amount(self) -> Decimal: ...

    @property
    def output_amount(self) -> Decimal: ...

    @property
    def execution_price(self) -> Decimal: ...

    @property
    def route(self) -> Route: ...

    def minimum_amount_out(self, slippage_tolerance: Decimal) -> Decimal: ...

    def maximum_amount_in(self, slippage_tolerance: Decimal) -> Decimal: ...
