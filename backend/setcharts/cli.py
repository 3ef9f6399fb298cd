import asyncio
import logging
from logging import getLogger
from time import perf_counter
from typing import Iterable, Optional

from clize import run
from clize.errors import UserError
from web3 import AsyncWeb3

from .charting import ChartingError, compute_value_series, write_series_csv
from .charting.adapters import make_web3
from .config import ACTIVE_ADDRESSES, BASE_URL_0X, BLOCKS, CSV_DIR, ChartingConfig


async def export_tracked_addresses(
    w3: AsyncWeb3,
    config: ChartingConfig,
    tracked: dict[str, str],
    blocks: Iterable[int],
    csv_dir: str,
    base_url: str = BASE_URL_0X,
) -> dict[str, Optional[str]]:
    """Chart every tracked address one after the other.

    Returns the CSV path written for each symbol, or None for the ones that
    could not be charted.
    """
    logger = getLogger(__name__)
    blocks = list(blocks)
    written: dict[str, Optional[str]] = {}
    for symbol, address in tracked.items():
        logger.info("Getting %s", symbol)
        start = perf_counter()
        try:
            series = await compute_value_series(w3, config, address, blocks, base_url)
        except ChartingError as error:
            logger.error("unable to chart %s", symbol, exc_info=error)
            written[symbol] = None
            continue
        try:
            written[symbol] = write_series_csv(series, csv_dir, symbol)
        except OSError as error:
            logger.error("unable to write CSV for %s", symbol, exc_info=error)
            written[symbol] = None
            continue
        logger.info("Getting %s took: %.2fs", symbol, perf_counter() - start)
    return written


def chart_csv(*symbols: str, csv_dir: str = CSV_DIR):
    """Export the historical value of tracked TokenSets and tokens as CSV

    :param symbols: tracked symbols to export, all of them when omitted
    :param csv_dir: directory the CSV files are written to
    """
    symbols = tuple(symbol.upper() for symbol in symbols)
    unknown = sorted(set(symbols) - set(ACTIVE_ADDRESSES))
    if unknown:
        raise UserError(f"unknown symbols: {', '.join(unknown)}")
    tracked = {
        symbol: address
        for symbol, address in ACTIVE_ADDRESSES.items()
        if not symbols or symbol in symbols
    }

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    asyncio.run(
        export_tracked_addresses(
            make_web3(), ChartingConfig.default(), tracked, BLOCKS, csv_dir
        )
    )


def main():
    run(chart_csv)
