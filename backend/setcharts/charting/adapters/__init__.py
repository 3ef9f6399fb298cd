from .chain import get_block_timestamp, get_decimals, get_positions, make_web3
from .metadata import resolve_decimals
from .pricefeed import get_price_history
