"""Async web3 client over HTTPS."""
import logging
import ssl

import aiohttp
import certifi
from web3 import AsyncHTTPProvider, AsyncWeb3

from ...config import ChainConfig

logger = logging.getLogger(__name__)


def build_web3(config: ChainConfig) -> AsyncWeb3:
    """Create an ``AsyncWeb3`` bound to the configured RPC endpoint.

    Request timeouts come from ``rpc_timeout``; nothing is retried here.
    """
    if not config.rpc_url:
        raise ValueError("chain.rpc_url is not configured")

    ssl_context = ssl.create_default_context(cafile=certifi.where())
    provider = AsyncHTTPProvider(
        config.rpc_url,
        request_kwargs={
            "ssl": ssl_context,
            "timeout": aiohttp.ClientTimeout(total=config.rpc_timeout),
        },
    )
    logger.info("Using RPC endpoint %s (chain id %d)", config.rpc_url, config.chain_id)
    return AsyncWeb3(provider)
