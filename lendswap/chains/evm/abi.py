"""Minimal ABIs for the contract methods and events the client uses."""
from typing import Any


def _fn(
    name: str,
    inputs: list[tuple[str, str]],
    state: str = "nonpayable",
    outputs: str = "uint256",
) -> dict[str, Any]:
    return {
        "inputs": [{"internalType": t, "name": n, "type": t} for n, t in inputs],
        "name": name,
        "outputs": [{"internalType": outputs, "name": "", "type": outputs}],
        "stateMutability": state,
        "type": "function",
    }


FAILURE_EVENT_ABI = {
    "anonymous": False,
    "inputs": [
        {"indexed": False, "internalType": "uint256", "name": "error", "type": "uint256"},
        {"indexed": False, "internalType": "uint256", "name": "info", "type": "uint256"},
        {"indexed": False, "internalType": "uint256", "name": "detail", "type": "uint256"},
    ],
    "name": "Failure",
    "type": "event",
}

_SWAP_PATH = [("path", "address[]"), ("to", "address"), ("deadline", "uint256")]

COMPTROLLER_ABI = [
    _fn("enterMarkets", [("oTokens", "address[]")], outputs="uint256[]"),
    _fn("exitMarket", [("oTokenAddress", "address")]),
    {
        "anonymous": False,
        "inputs": [
            {"indexed": False, "internalType": "address", "name": "oToken", "type": "address"},
            {"indexed": False, "internalType": "address", "name": "account", "type": "address"},
        ],
        "name": "MarketEntered",
        "type": "event",
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": False, "internalType": "address", "name": "oToken", "type": "address"},
            {"indexed": False, "internalType": "address", "name": "account", "type": "address"},
        ],
        "name": "MarketExited",
        "type": "event",
    },
    FAILURE_EVENT_ABI,
]

OTOKEN_ABI = [
    _fn("mint", [("mintAmount", "uint256")]),
    _fn("redeemUnderlying", [("redeemAmount", "uint256")]),
    _fn("borrow", [("borrowAmount", "uint256")]),
    _fn("repayBorrow", [("repayAmount", "uint256")]),
    FAILURE_EVENT_ABI,
]

SWAP_ROUTER_ABI = [
    _fn(
        "swapExactTokensForTokens",
        [("amountIn", "uint256"), ("amountOutMin", "uint256")] + _SWAP_PATH,
        outputs="uint256[]",
    ),
    _fn(
        "swapExactETHForTokens",
        [("amountOutMin", "uint256")] + _SWAP_PATH,
        state="payable",
        outputs="uint256[]",
    ),
    _fn(
        "swapExactTokensForETH",
        [("amountIn", "uint256"), ("amountOutMin", "uint256")] + _SWAP_PATH,
        outputs="uint256[]",
    ),
    _fn(
        "swapTokensForExactTokens",
        [("amountOut", "uint256"), ("amountInMax", "uint256")] + _SWAP_PATH,
        outputs="uint256[]",
    ),
    _fn(
        "swapETHForExactTokens",
        [("amountOut", "uint256")] + _SWAP_PATH,
        state="payable",
        outputs="uint256[]",
    ),
    _fn(
        "swapTokensForExactETH",
        [("amountOut", "uint256"), ("amountInMax", "uint256")] + _SWAP_PATH,
        outputs="uint256[]",
    ),
]

ERC20_ABI = [
    _fn("approve", [("spender", "address"), ("amount", "uint256")], outputs="bool"),
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "address", "name": "owner", "type": "address"},
            {"indexed": True, "internalType": "address", "name": "spender", "type": "address"},
            {"indexed": False, "internalType": "uint256", "name": "value", "type": "uint256"},
        ],
        "name": "Approval",
        "type": "event",
    },
]
