from __future__ import annotations

from typing import Dict, List, Protocol

from web3.constants import ADDRESS_ZERO

from .addresses import AddressLike, normalize_address, require_nonzero
from .errors import InvalidParameterError, NonexistentTokenError
from .events import DrunkRobotsEvent, EventLog


class TokenLedger(Protocol):
    """Ownership bookkeeping the minting engine calls into."""

    def allocate(self, owner: str) -> int: ...

    def balance_of(self, owner: str) -> int: ...

    def owner_of(self, token_id: int) -> str: ...

    def exists(self, token_id: int) -> bool: ...

    def tokens_of_owner(self, owner: str) -> List[int]: ...

    def release(self, token_id: int) -> None:
        """Undo the most recent ``allocate`` of an aborted mint."""
        ...


class InMemoryTokenLedger:
    """Sequential, zero-based ids; each allocation is a Transfer from the zero address."""

    def __init__(self, events: EventLog) -> None:
        self.events = events
        self._owners: Dict[int, str] = {}
        self._owned: Dict[str, List[int]] = {}
        self._next_id = 0

    def allocate(self, owner: AddressLike) -> int:
        to = require_nonzero(owner, "ERC721: mint to the zero address")
        token_id = self._next_id
        self._next_id += 1
        self._owners[token_id] = to
        self._owned.setdefault(to, []).append(token_id)
        self.events.emit(DrunkRobotsEvent.TRANSFER, **{"from": ADDRESS_ZERO, "to": to, "token_id": token_id})
        return token_id

    def balance_of(self, owner: AddressLike) -> int:
        return len(self._owned.get(normalize_address(owner), []))

    def owner_of(self, token_id: int) -> str:
        if token_id not in self._owners:
            raise NonexistentTokenError(token_id, "ERC721: owner query")
        return self._owners[token_id]

    def exists(self, token_id: int) -> bool:
        return token_id in self._owners

    def tokens_of_owner(self, owner: AddressLike) -> List[int]:
        return list(self._owned.get(normalize_address(owner), []))

    def release(self, token_id: int) -> None:
        if token_id != self._next_id - 1:
            raise InvalidParameterError("released token id", token_id)
        owner = self._owners.pop(token_id)
        self._owned[owner].pop()
        if not self._owned[owner]:
            del self._owned[owner]
        self._next_id -= 1

    @property
    def total_supply(self) -> int:
        return len(self._owners)
