from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .errors import ReserveExhaustedError, SupplyExhaustedError

logger = logging.getLogger(__name__)


class Pool(Enum):
    GENERAL = "general"
    RESERVE = "reserve"


@dataclass
class SupplyCounters:
    max_supply: int
    reserve_cap: int
    total_issued: int = 0
    reserve_issued: int = 0

    @property
    def reserve_remaining(self) -> int:
        return self.reserve_cap - self.reserve_issued

    @property
    def remaining(self) -> int:
        return self.max_supply - self.total_issued


class SupplyLedger:
    """Single authority on whether ``n`` more tokens may be issued.

    Reserve issuance counts toward the total, so a reserve request must clear
    both caps.
    """

    def __init__(self, counters: SupplyCounters) -> None:
        self.counters = counters

    def check(self, n: int, pool: Pool) -> None:
        c = self.counters
        if pool is Pool.RESERVE and c.reserve_issued + n > c.reserve_cap:
            raise ReserveExhaustedError(n, c.reserve_issued, c.reserve_cap)
        if c.total_issued + n > c.max_supply:
            raise SupplyExhaustedError(n, c.total_issued, c.max_supply)

    def reserve(self, n: int, pool: Pool) -> int:
        """Check, then take ``n`` slots. Returns the first slot index taken."""
        self.check(n, pool)
        first = self.counters.total_issued
        self.counters.total_issued += n
        if pool is Pool.RESERVE:
            self.counters.reserve_issued += n
        logger.debug("reserved %d %s slots from %d", n, pool.value, first)
        return first

    def release(self, n: int, pool: Pool) -> None:
        """Give back slots taken by ``reserve`` in a call that is being aborted."""
        self.counters.total_issued -= n
        if pool is Pool.RESERVE:
            self.counters.reserve_issued -= n
