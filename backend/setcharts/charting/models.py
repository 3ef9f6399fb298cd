import datetime
from dataclasses import dataclass, field

import pandas as pd


@dataclass
class Position:
    component: str
    unit: int  # raw amount, not scaled by the component's decimals


@dataclass
class TokenMeta:
    address: str
    decimals: int
    symbol: str

    def as_buy_token(self) -> dict:
        return {
            "tokenAddress": self.address,
            "decimals": self.decimals,
            "symbol": self.symbol,
        }


@dataclass
class PricePoint:
    token_address: str
    price: float


@dataclass
class ValuationSample:
    date: datetime.date
    price: float


@dataclass
class ValuationSeries:
    address: str
    samples: list[ValuationSample] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.samples)

    def append(self, date: datetime.date, price: float):
        self.samples.append(ValuationSample(date=date, price=price))

    def to_frame(self, reverse: bool = False) -> pd.DataFrame:
        samples = self.samples[::-1] if reverse else self.samples
        return pd.DataFrame(
            {"price": [sample.price for sample in samples]},
            index=pd.Index([sample.date for sample in samples], name="date"),
            dtype="float64",
        )
