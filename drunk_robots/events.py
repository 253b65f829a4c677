from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)


class DrunkRobotsEvent(Enum):
    TRANSFER = "Transfer"
    WITHDRAWAL = "Withdrawal"
    ROYALTIES_UPDATED = "RoyaltiesUpdated"
    OWNERSHIP_TRANSFERRED = "OwnershipTransferred"


@dataclass(frozen=True)
class EventRecord:
    event: DrunkRobotsEvent
    args: Dict[str, Any] = field(default_factory=dict)
    index: int = 0

    @property
    def name(self) -> str:
        return self.event.value


class EventLog:
    """Append-only, ordered notification log shared by the engine components."""

    def __init__(self) -> None:
        self._records: List[EventRecord] = []

    def emit(self, event: DrunkRobotsEvent, **args: Any) -> EventRecord:
        record = EventRecord(event=event, args=args, index=len(self._records))
        self._records.append(record)
        logger.debug("event %s %s", event.value, args)
        return record

    def filter(self, event: Optional[DrunkRobotsEvent] = None, **match: Any) -> List[EventRecord]:
        out = []
        for record in self._records:
            if event is not None and record.event is not event:
                continue
            if any(record.args.get(k) != v for k, v in match.items()):
                continue
            out.append(record)
        return out

    def discard_from(self, index: int) -> None:
        """Drop records emitted by an aborted call; nothing before ``index`` is touched."""
        del self._records[index:]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[EventRecord]:
        return iter(list(self._records))
