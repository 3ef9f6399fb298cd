import asyncio
from logging import getLogger

from aiohttp import ClientError
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import Web3Exception

from ...config import ALCHEMY_API_KEY, ALCHEMY_URI
from ..exceptions import BlockFetchFailed, MetadataUnavailable, PositionFetchFailed
from ..models import Position
from .abi import ERC20_DECIMALS_ABI, SET_TOKEN_ABI

RPC_ERRORS = (Web3Exception, ClientError, asyncio.TimeoutError, ValueError)


def make_web3(api_key: str = ALCHEMY_API_KEY) -> AsyncWeb3:
    return AsyncWeb3(AsyncHTTPProvider(ALCHEMY_URI + api_key))


async def get_block_timestamp(w3: AsyncWeb3, block: int) -> int:
    try:
        block_data = await w3.eth.get_block(block)
        return int(block_data["timestamp"])
    except (*RPC_ERRORS, KeyError, TypeError) as error:
        getLogger(__name__).error(
            "unable to receive block %s", block, exc_info=error
        )
        raise BlockFetchFailed("unable to receive block", block=block) from error


async def get_positions(
    w3: AsyncWeb3, portfolio_address: str, block: int
) -> list[Position]:
    """Return the SetToken positions held by `portfolio_address` at `block`.

    The call is pinned to `block`, so nodes without archive state for it
    fail the same way a reverted call does.
    """
    try:
        contract = w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(portfolio_address),
            abi=SET_TOKEN_ABI,
        )
        result = await contract.functions.getPositions().call(block_identifier=block)
        return [
            Position(component=item[0].lower(), unit=int(item[2])) for item in result
        ]
    except (*RPC_ERRORS, IndexError, TypeError, AttributeError) as error:
        getLogger(__name__).error(
            "unable to call `getPositions` on %s at block %s",
            portfolio_address,
            block,
            exc_info=error,
        )
        raise PositionFetchFailed(
            "unable to fetch positions", address=portfolio_address, block=block
        ) from error


async def get_decimals(w3: AsyncWeb3, token_address: str) -> int:
    try:
        contract = w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(token_address),
            abi=ERC20_DECIMALS_ABI,
        )
        decimals = await contract.functions.decimals().call()
    except RPC_ERRORS as error:
        getLogger(__name__).error(
            "unable to call `decimals` on %s", token_address, exc_info=error
        )
        raise MetadataUnavailable(
            "unable to fetch decimals", address=token_address
        ) from error

    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise MetadataUnavailable(
            f"unexpected decimals {decimals!r}", address=token_address
        )
    if not 0 <= decimals <= 255:
        raise MetadataUnavailable(
            f"decimals out of range {decimals}", address=token_address
        )
    return decimals
