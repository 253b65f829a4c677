"""Drunk Robots collection constants and the deploy-time configuration record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

# ---------------------------------------------------------------------------
# Collection constants
# ---------------------------------------------------------------------------

DRUNK_ROBOTS_NAME = "Drunk Robots"
DRUNK_ROBOTS_SYMBOL = "DR"
DRUNK_ROBOTS_BASE_URI = "https://drunkrobots.net/nft/metadata/"
DRUNK_ROBOTS_TOKEN_URI_SUFFIX = ".json"

DRUNK_ROBOTS_MAX_SUPPLY = 10000
DRUNK_ROBOTS_RESERVE = 350
DRUNK_ROBOTS_MINT_LIMIT = 20
DRUNK_ROBOTS_MINT_PRICE_WEI = 50000000000000000  # 0.05 ether

DRUNK_ROBOTS_ROYALTY_PERCENT = 10
DRUNK_ROBOTS_ROYALTY_MAX_PERCENT = 90
BPS_PER_PERCENT = 100
BPS_DENOM = 10000

# Address the controller itself answers to; royalties default to it.
DRUNK_ROBOTS_CONTRACT_ADDRESS = "0x5c1e3a7b9d0f2b4d6e8a0c2e4b6d8f0a2c4e6b8d"


@dataclass(frozen=True)
class CollectionConfig:
    """Values fixed at deployment. Mutable parameters start from here."""

    name: str = DRUNK_ROBOTS_NAME
    symbol: str = DRUNK_ROBOTS_SYMBOL
    base_uri: str = DRUNK_ROBOTS_BASE_URI
    max_supply: int = DRUNK_ROBOTS_MAX_SUPPLY
    reserve_cap: int = DRUNK_ROBOTS_RESERVE
    mint_limit: int = DRUNK_ROBOTS_MINT_LIMIT
    mint_price: int = DRUNK_ROBOTS_MINT_PRICE_WEI
    royalty_percent: int = DRUNK_ROBOTS_ROYALTY_PERCENT
    contract_address: str = DRUNK_ROBOTS_CONTRACT_ADDRESS

    def validate(self) -> "CollectionConfig":
        if self.max_supply <= 0:
            raise ValueError(f"max_supply must be positive, got {self.max_supply}")
        if not 0 <= self.reserve_cap <= self.max_supply:
            raise ValueError(
                f"reserve_cap must be within [0, max_supply] (reserve_cap={self.reserve_cap}, max_supply={self.max_supply})"
            )
        if self.mint_limit < 0:
            raise ValueError(f"mint_limit must not be negative, got {self.mint_limit}")
        if self.mint_price < 0:
            raise ValueError(f"mint_price must not be negative, got {self.mint_price}")
        if not 0 < self.royalty_percent <= DRUNK_ROBOTS_ROYALTY_MAX_PERCENT:
            raise ValueError(f"royalty_percent out of range: {self.royalty_percent}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "symbol": self.symbol,
            "base_uri": self.base_uri,
            "max_supply": self.max_supply,
            "reserve_cap": self.reserve_cap,
            "mint_limit": self.mint_limit,
            "mint_price": self.mint_price,
            "royalty_percent": self.royalty_percent,
            "contract_address": self.contract_address,
        }
