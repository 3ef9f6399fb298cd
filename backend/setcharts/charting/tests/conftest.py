# pylint: disable=redefined-outer-name
import pytest

from setcharts.config import ChartingConfig
from setcharts.charting.exceptions import (
    BlockFetchFailed,
    PositionFetchFailed,
    PriceFetchFailed,
)
from setcharts.charting.models import Position, PricePoint

TOKENSET = "0x58f7c5707ba8e09b5e61cebe8821f65434372344"
TOKEN_18 = "0x7ceb23fd6bc0add59e62ac25578270cff1b9f619"
TOKEN_6 = "0x2791bca1f2de4661ed88a30c99a7a9449aa84174"
PRECISE_TOKEN = "0x340f412860da7b7823df372a2b59ff78b7ae6abc"

# 2022-04-15T05:20:00Z
TIMESTAMP = 1650000000


class FakeSources:
    """Stands in for the chain and `/history` adapters used by `actions`.

    Blocks missing from `timestamps`, `positions` or `prices` fail the way
    the real adapters do.
    """

    def __init__(self, monkeypatch: pytest.MonkeyPatch):
        self.timestamps: dict[int, int] = {}
        self.positions: dict[int, list[Position]] = {}
        self.prices: dict[int, dict[str, float]] = {}
        self.price_requests: list[tuple[tuple[str, ...], int, bool]] = []

        for name in ("get_block_timestamp", "get_positions", "get_price_history"):
            monkeypatch.setattr(
                f"setcharts.charting.actions.{name}", getattr(self, name)
            )

    async def get_block_timestamp(self, _w3, block: int) -> int:
        if block not in self.timestamps:
            raise BlockFetchFailed("unable to receive block", block=block)
        return self.timestamps[block]

    async def get_positions(self, _w3, address: str, block: int) -> list[Position]:
        if block not in self.positions:
            raise PositionFetchFailed(
                "unable to fetch positions", address=address, block=block
            )
        return self.positions[block]

    async def get_price_history(self, tokens, block, precision=False, _base_url=""):
        self.price_requests.append(
            (tuple(token.address for token in tokens), block, precision)
        )
        if block not in self.prices:
            raise PriceFetchFailed("`/history` request failed", block=block)
        return [
            PricePoint(token_address=token.address, price=self.prices[block][token.address])
            for token in tokens
        ]


@pytest.fixture
def config() -> ChartingConfig:
    return ChartingConfig(
        tokenset_addresses=frozenset({TOKENSET}),
        precision_required=frozenset({PRECISE_TOKEN}),
        decimals={TOKEN_18: 18, TOKEN_6: 6, PRECISE_TOKEN: 18},
    )


@pytest.fixture
def sources(monkeypatch: pytest.MonkeyPatch) -> FakeSources:
    return FakeSources(monkeypatch)
