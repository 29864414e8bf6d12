"""web3.py bindings for EVM chains."""
from .abi import COMPTROLLER_ABI, ERC20_ABI, OTOKEN_ABI, SWAP_ROUTER_ABI
from .client import build_web3
from .contracts import (
    Web3Comptroller,
    Web3ContractMethod,
    Web3Erc20,
    Web3OToken,
    Web3SwapRouter,
    decode_receipt,
)

__all__ = [
    "COMPTROLLER_ABI",
    "ERC20_ABI",
    "OTOKEN_ABI",
    "SWAP_ROUTER_ABI",
    "build_web3",
    "Web3Comptroller",
    "Web3ContractMethod",
    "Web3Erc20",
    "Web3OToken",
    "Web3SwapRouter",
    "decode_receipt",
]
