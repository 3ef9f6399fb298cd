import os
from logging import getLogger

from .models import ValuationSeries


def write_series_csv(series: ValuationSeries, csv_dir: str, symbol: str) -> str:
    """Write `series` to `{csv_dir}/{symbol}.csv` with a `date,price` header.

    Series come out of the pipeline in block-list order, newest block
    first; rows are written reversed so the file reads oldest first.
    """
    os.makedirs(csv_dir, exist_ok=True)
    path = os.path.join(csv_dir, f"{symbol}.csv")
    series.to_frame(reverse=True).to_csv(path)
    getLogger(__name__).info("CSV written for %s (%d rows)", symbol, len(series))
    return path
