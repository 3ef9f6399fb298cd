import datetime
import math
from logging import getLogger
from typing import Iterable

from dateutil.tz import UTC
from web3 import AsyncWeb3

from ..config import BASE_URL_0X, ChartingConfig
from .adapters import (
    get_block_timestamp,
    get_positions,
    get_price_history,
    resolve_decimals,
)
from .exceptions import (
    BlockFetchFailed,
    MetadataUnavailable,
    PositionFetchFailed,
    PriceCorrelationError,
    PriceFetchFailed,
    SeriesUnavailable,
)
from .models import Position, TokenMeta, ValuationSeries

SKIPPABLE_BLOCK_ERRORS = (
    BlockFetchFailed,
    PositionFetchFailed,
    PriceFetchFailed,
    PriceCorrelationError,
)


def day_of(timestamp: int) -> datetime.date:
    "UTC calendar day of a unix timestamp"
    return datetime.datetime.fromtimestamp(timestamp, tz=UTC).date()


def scale_amount(unit: int, decimals: int) -> float:
    return unit / 10**decimals


def value_positions(
    positions: list[Position], decimals: dict[str, int], prices: dict[str, float]
) -> float:
    return sum(
        scale_amount(position.unit, decimals[position.component])
        * prices[position.component]
        for position in positions
    )


async def make_tokenset_value_at_block(
    w3: AsyncWeb3,
    config: ChartingConfig,
    tokenset_address: str,
    block: int,
    base_url: str = BASE_URL_0X,
) -> float:
    positions = await get_positions(w3, tokenset_address, block)
    components = list(dict.fromkeys(position.component for position in positions))
    if not components:
        return 0.0

    tokens = [
        TokenMeta(
            address=component,
            decimals=await resolve_decimals(w3, config, component),
            symbol=component,
        )
        for component in components
    ]
    precision = any(config.requires_precision(component) for component in components)
    price_points = await get_price_history(tokens, block, precision, base_url)

    return value_positions(
        positions,
        {token.address: token.decimals for token in tokens},
        {point.token_address: point.price for point in price_points},
    )


async def make_tokenset_value_series(
    w3: AsyncWeb3,
    config: ChartingConfig,
    tokenset_address: str,
    blocks: Iterable[int],
    base_url: str = BASE_URL_0X,
) -> tuple[ValuationSeries, int]:
    "Returns the series and the number of blocks that had to be skipped"
    series = ValuationSeries(tokenset_address)
    skipped = 0
    for block in blocks:
        try:
            date = day_of(await get_block_timestamp(w3, block))
            price = await make_tokenset_value_at_block(
                w3, config, tokenset_address, block, base_url
            )
        except (*SKIPPABLE_BLOCK_ERRORS, MetadataUnavailable) as error:
            getLogger(__name__).info("skipping block %s: %s", block, error)
            skipped += 1
            continue
        if not math.isfinite(price) or price < 0:
            getLogger(__name__).info(
                "skipping block %s: invalid value %s of %s",
                block,
                price,
                tokenset_address,
            )
            skipped += 1
            continue
        series.append(date, price)
    return series, skipped


async def make_token_price_series(
    w3: AsyncWeb3,
    config: ChartingConfig,
    token_address: str,
    blocks: Iterable[int],
    base_url: str = BASE_URL_0X,
) -> tuple[ValuationSeries, int]:
    token = TokenMeta(
        address=token_address,
        decimals=await resolve_decimals(w3, config, token_address),
        symbol="",
    )
    precision = config.requires_precision(token_address)

    series = ValuationSeries(token_address)
    skipped = 0
    for block in blocks:
        try:
            date = day_of(await get_block_timestamp(w3, block))
            (price_point,) = await get_price_history(
                [token], block, precision, base_url
            )
        except SKIPPABLE_BLOCK_ERRORS as error:
            getLogger(__name__).info("skipping block %s: %s", block, error)
            skipped += 1
            continue
        # A zero price means the price source had nothing for that block.
        if price_point.price == 0:
            getLogger(__name__).info(
                "dropping zero price of %s at block %s", token_address, block
            )
            continue
        series.append(date, price_point.price)
    return series, skipped


async def compute_value_series(
    w3: AsyncWeb3,
    config: ChartingConfig,
    address: str,
    blocks: Iterable[int],
    base_url: str = BASE_URL_0X,
) -> ValuationSeries:
    """Value `address` at every block of `blocks`, in the order given.

    TokenSet contracts are valued as the sum of their components' scaled
    holdings times their prices; any other address is priced as a plain
    token. Blocks whose data cannot be fetched are left out of the series.
    Raises `SeriesUnavailable` when every block failed.
    """
    address = address.lower()
    blocks = list(blocks)
    if config.is_tokenset(address):
        series, skipped = await make_tokenset_value_series(
            w3, config, address, blocks, base_url
        )
    else:
        series, skipped = await make_token_price_series(
            w3, config, address, blocks, base_url
        )

    if blocks and skipped == len(blocks):
        raise SeriesUnavailable("no block could be valued", address=address)
    return series
