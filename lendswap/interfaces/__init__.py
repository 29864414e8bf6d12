"""Protocol interfaces for contracts and the quoting engine."""
from .contracts import (
    ComptrollerContract,
    ContractMethod,
    Erc20Contract,
    OTokenContract,
    SwapRouterContract,
)
from .quoting import Route, RouteToken, Trade

__all__ = [
    "ContractMethod",
    "ComptrollerContract",
    "Erc20Contract",
    "OTokenContract",
    "SwapRouterContract",
    "Route",
    "RouteToken",
    "Trade",
]
