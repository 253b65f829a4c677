"""
Royalty configuration (EIP-2981 style).

The percentage is set in whole percent and kept as basis points; queries
return ``sale_price * basis_points // 10000``. The query never looks at the
token id, so it answers the same for minted and unminted ids.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from .addresses import AddressLike, require_nonzero
from .constants import BPS_DENOM, BPS_PER_PERCENT, DRUNK_ROBOTS_ROYALTY_MAX_PERCENT
from .errors import RoyaltyOutOfRangeError
from .events import DrunkRobotsEvent, EventLog
from .pricing import require_uint

logger = logging.getLogger(__name__)


@dataclass
class RoyaltyConfig:
    basis_points: int
    receiver: str

    @property
    def percent(self) -> int:
        return self.basis_points // BPS_PER_PERCENT


class RoyaltyRegistry:
    def __init__(self, config: RoyaltyConfig, events: EventLog) -> None:
        self.config = config
        self.events = events

    @classmethod
    def with_percent(cls, percent: int, receiver: AddressLike, events: EventLog) -> "RoyaltyRegistry":
        _check_percent(percent)
        return cls(RoyaltyConfig(percent * BPS_PER_PERCENT, require_nonzero(receiver)), events)

    def set_royalties(self, percent: int) -> int:
        _check_percent(percent)
        self.config = RoyaltyConfig(percent * BPS_PER_PERCENT, self.config.receiver)
        self.events.emit(DrunkRobotsEvent.ROYALTIES_UPDATED, basis_points=self.config.basis_points)
        logger.info("royalties set to %d bps", self.config.basis_points)
        return self.config.basis_points

    def set_royalties_receiver(self, receiver: AddressLike) -> str:
        address = require_nonzero(receiver, "royalty receiver is the zero address")
        self.config = RoyaltyConfig(self.config.basis_points, address)
        logger.info("royalty receiver set to %s", address)
        return address

    def royalty_info(self, token_id: int, sale_price: int) -> Tuple[str, int]:
        require_uint("sale_price", sale_price)
        amount = sale_price * self.config.basis_points // BPS_DENOM
        return self.config.receiver, amount


def _check_percent(percent: int) -> None:
    if isinstance(percent, bool) or not isinstance(percent, int) or not 0 < percent <= DRUNK_ROBOTS_ROYALTY_MAX_PERCENT:
        raise RoyaltyOutOfRangeError(percent, DRUNK_ROBOTS_ROYALTY_MAX_PERCENT)
