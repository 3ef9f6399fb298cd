from typing import Optional


class ChartingError(Exception):
    def __init__(
        self, msg: str, address: Optional[str] = None, block: Optional[int] = None
    ):
        self.address = address
        self.block = block
        if address is not None:
            msg += f" for {address}"
        if block is not None:
            msg += f" at block {block}"
        super().__init__(msg)


class MetadataUnavailable(ChartingError):
    pass


class BlockFetchFailed(ChartingError):
    pass


class PositionFetchFailed(ChartingError):
    pass


class PriceFetchFailed(ChartingError):
    pass


class PriceCorrelationError(ChartingError):
    pass


class SeriesUnavailable(ChartingError):
    pass
