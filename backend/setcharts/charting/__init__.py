from .actions import (
    compute_value_series,
    day_of,
    make_token_price_series,
    make_tokenset_value_at_block,
    make_tokenset_value_series,
    scale_amount,
    value_positions,
)
from .exceptions import (
    BlockFetchFailed,
    ChartingError,
    MetadataUnavailable,
    PositionFetchFailed,
    PriceCorrelationError,
    PriceFetchFailed,
    SeriesUnavailable,
)
from .export import write_series_csv
from .models import Position, PricePoint, TokenMeta, ValuationSample, ValuationSeries
