from web3 import AsyncWeb3

from ...config import ChartingConfig
from .chain import get_decimals


async def resolve_decimals(
    w3: AsyncWeb3, config: ChartingConfig, token_address: str
) -> int:
    "Static table first, then the token's own `decimals()`"
    token_address = token_address.lower()
    if token_address in config.decimals:
        return config.decimals[token_address]
    return await get_decimals(w3, token_address)
