import math
from logging import getLogger
from typing import Any

from httpx import AsyncClient, HTTPError, Timeout

from ...config import BASE_URL_0X
from ..exceptions import PriceCorrelationError, PriceFetchFailed
from ..models import PricePoint, TokenMeta


async def _get_history_data(
    buy_tokens: list[dict[str, Any]],
    block: int,
    precision: bool,
    base_url: str = BASE_URL_0X,
) -> list[dict[str, Any]]:
    timeout = Timeout(10.0, read=60.0, connect=30.0)
    async with AsyncClient(timeout=timeout) as client:
        resp = await client.post(
            base_url + "/history",
            json={
                "buyTokens": buy_tokens,
                "startBlock": block,
                "precision": precision,
            },
        )
        resp.raise_for_status()
        return resp.json()


def _parse_price(item: dict[str, Any]) -> float:
    price = item["prices"][0]
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise ValueError(f"non numeric price {price!r}")
    price = float(price)
    if not math.isfinite(price) or price < 0:
        raise ValueError(f"invalid price {price}")
    return price


def correlate_prices(
    tokens: list[TokenMeta], history: list[dict[str, Any]], block: int
) -> list[PricePoint]:
    """Match each `/history` entry back to the requested token by address.

    Requests are sent with the token address as `symbol`, so the response
    can be keyed by it instead of trusting its order.
    """
    requested = [token.address.lower() for token in tokens]
    try:
        by_address = {item["symbol"].lower(): item for item in history}
    except (KeyError, AttributeError, TypeError) as error:
        raise PriceFetchFailed(
            "malformed `/history` response", block=block
        ) from error

    if len(history) != len(requested) or set(by_address) != set(requested):
        raise PriceCorrelationError(
            f"`/history` returned {sorted(by_address)} for {sorted(requested)}",
            block=block,
        )

    try:
        return [
            PricePoint(token_address=address, price=_parse_price(by_address[address]))
            for address in requested
        ]
    except (KeyError, IndexError, TypeError, ValueError, OverflowError) as error:
        raise PriceFetchFailed(
            "malformed `/history` prices", block=block
        ) from error


async def get_price_history(
    tokens: list[TokenMeta],
    block: int,
    precision: bool = False,
    base_url: str = BASE_URL_0X,
) -> list[PricePoint]:
    buy_tokens = [
        TokenMeta(token.address.lower(), token.decimals, token.address.lower())
        .as_buy_token()
        for token in tokens
    ]
    try:
        history = await _get_history_data(buy_tokens, block, precision, base_url)
    except (HTTPError, ValueError) as error:
        logger = getLogger(__name__)
        if isinstance(error, HTTPError):
            msg = "unable to receive a `/history` API response at block %s"
        else:
            msg = "error processing `/history` API response at block %s"
        logger.error(msg, block, exc_info=error)
        raise PriceFetchFailed("`/history` request failed", block=block) from error

    if not isinstance(history, list):
        raise PriceFetchFailed("malformed `/history` response", block=block)
    return correlate_prices(tokens, history, block)
