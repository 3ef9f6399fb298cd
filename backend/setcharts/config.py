# pylint: disable=invalid-name
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

import dotenv

dotenv.load_dotenv()

ALCHEMY_API_KEY = os.getenv("ALCHEMY_API_KEY", "")
ALCHEMY_URI = "https://polygon-mainnet.g.alchemy.com/v2/"
BASE_URL_0X = os.getenv("BASE_URL_0X", "http://localhost:3002/swap/v1")
CSV_DIR = os.getenv("CSV_DIR", "./csv")

# Polygon produces roughly this many blocks a day.
BLOCKS_PER_DAY = 37565
STEP_COUNT = 365
LATEST_BLOCK = 30915738

TOKENSET_ADDRESSES = (
    "0x25ad32265c9354c29e145c902ae876f6b69806f2",  # alpha portfolio
    "0x71b41b3b19aac53ca4063aec2d17fc3caeb38026",  # macro trend btc
    "0x72ca52512b93e8d67309af0c14c1a225bcbd3548",  # macro trend eth
    "0xabcc2102065ba01c6df1a5a5a57158f452403b70",  # quantum momentum btc
    "0x9984d846a3dc77aa0488f3758976b149e8475995",  # quantum momentum eth
    "0x20ab4cb8f8da39582bc92da954ab1bb128f4e244",  # quantum momentum matic
    "0x58f7c5707ba8e09b5e61cebe8821f65434372344",  # buy the dip btc
    "0x07a79127182a1c303d11ecda951310ec1c2e1444",  # buy the dip eth
    "0xb87352b4c3eb9daed09cd4996dff85c122394912",  # buy the dip matic
    "0xf2aa5ccea80c246a71e97b418173fcc956408d3f",  # discretionary btc
    "0x72b467cacbdbec5918d8eec0371ca33e6fd42421",  # discretionary eth
    "0xab80a6e2909c8089ebd84f331c05bbefa3276cd2",  # discretionary matic
    "0x62135f85899d97aed95f4405d710208e68b99f39",  # defi value index
    "0xb4f78a05ab16cd3e6d0100112d0cc431942859bb",  # btc momentum index
    "0xd3ef811331a98d24a2b2fb64cebeea5af31b2568",  # eth momentum index
    "0xdfddd9811796f72ba32a031724f5b1403cd48b91",  # matic momentum index
    "0xb5253c58b8a361d9901922b23ec9fb9e7d38c98a",  # dpi momentum index
    "0xad2b726fd2bd3a7f8f4b3929152438eba637ef19",  # swd momentum index
    "0x55a40b33cff2eb062e7aa76506b7de711f2b2aff",  # polygon ecosystem index
)

ACTIVE_ADDRESSES = {
    "BTBTC": "0x58f7C5707Ba8E09B5e61ceBe8821f65434372344",
    "BTETH": "0x07A79127182a1c303d11eCDa951310EC1C2E1444",
    "BTMAT": "0xb87352B4C3EB9daEd09cD4996dFf85c122394912",
    "MTBTC": "0x71b41b3b19aac53ca4063aec2d17fc3caeb38026",
    "MTETH": "0x72Ca52512b93E8D67309aF0C14C1A225bcbd3548",
    "QMB": "0xabcc2102065ba01c6df1a5a5a57158f452403b70",
    "QME": "0x9984d846a3dc77aa0488f3758976b149e8475995",
    "QMM": "0x20ab4cb8f8da39582bc92da954ab1bb128f4e244",
    "SWAP": "0x25ad32265c9354c29e145c902ae876f6b69806f2",
    "SWBYF": "0xE525deeC6eB2566c29C272BB69eEd2E8A46389dc",
    "SWD": "0xaee24d5296444c007a532696aada9de5ce6cafd0",
    "SWEYF": "0x8fcdd8372b5bcd27524546ad02b198c899d8ab2a",
    "SWMYF": "0x2C9227bf5FC806f94601eCAf5BC027CAd801b3B6",
    "SWYF": "0xdc8d88d9e57cc7be548f76e5e413c4838f953018",
    "WETH": "0x7ceb23fd6bc0add59e62ac25578270cff1b9f619",
    "WBTC": "0x1bfd67037b42cf73acf2047067bd4f2c47d9bfd6",
}

PRECISION_REQUIRED = (
    "0x340f412860da7b7823df372a2b59ff78b7ae6abc",
    "0x130ce4e4f76c2265f94a961d70618562de0bb8d2",
    "0x4f025829c4b13df652f38abd2ab901185ff1e609",
)

COMMON_DECIMALS = {
    "0x7ceb23fd6bc0add59e62ac25578270cff1b9f619": 18,  # WETH
    "0x1bfd67037b42cf73acf2047067bd4f2c47d9bfd6": 8,  # WBTC
    "0x0d500b1d8e8ef31e21c99d1db9a6444d3adf1270": 18,  # WMATIC
    "0x2791bca1f2de4661ed88a30c99a7a9449aa84174": 6,  # USDC
    "0xc2132d05d31c914a87c6611c10748aeb04b58e8f": 6,  # USDT
    "0x8f3cf7ad23cd3cadbd9735aff958023239c6a063": 18,  # DAI
}

# Newest first, one block per day.
BLOCKS = tuple(LATEST_BLOCK - BLOCKS_PER_DAY * step for step in range(STEP_COUNT))


def _lower_keys(table: Mapping[str, int]) -> Mapping[str, int]:
    return MappingProxyType({addr.lower(): value for addr, value in table.items()})


@dataclass(frozen=True)
class ChartingConfig:
    """Immutable lookup tables the valuation pipeline runs against.

    Every address is lower-cased on construction so that lookups and
    comparisons never depend on the checksum casing of the source table.
    """

    tokenset_addresses: frozenset[str] = frozenset()
    precision_required: frozenset[str] = frozenset()
    decimals: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(
            self,
            "tokenset_addresses",
            frozenset(addr.lower() for addr in self.tokenset_addresses),
        )
        object.__setattr__(
            self,
            "precision_required",
            frozenset(addr.lower() for addr in self.precision_required),
        )
        object.__setattr__(self, "decimals", _lower_keys(self.decimals))

    @classmethod
    def default(cls) -> "ChartingConfig":
        return cls(
            tokenset_addresses=frozenset(TOKENSET_ADDRESSES),
            precision_required=frozenset(PRECISION_REQUIRED),
            decimals=COMMON_DECIMALS,
        )

    def is_tokenset(self, address: str) -> bool:
        return address.lower() in self.tokenset_addresses

    def requires_precision(self, address: str) -> bool:
        return address.lower() in self.precision_required
