from __future__ import annotations

import logging
from typing import Dict, Set

from .addresses import AddressLike, normalize_address
from .errors import InsufficientBalanceError, PaymentRejectedError, TransferFailedError
from .events import DrunkRobotsEvent, EventLog
from .pricing import require_uint

logger = logging.getLogger(__name__)


class NativeBalances:
    """Native-currency account book. Accounts marked with ``refuse_payments``
    reject every incoming credit, like a contract without a receive hook."""

    def __init__(self) -> None:
        self._balances: Dict[str, int] = {}
        self._refusing: Set[str] = set()

    def balance_of(self, account: AddressLike) -> int:
        return self._balances.get(normalize_address(account), 0)

    def credit(self, account: AddressLike, amount: int) -> None:
        address = normalize_address(account)
        if address in self._refusing:
            raise PaymentRejectedError(address)
        self._balances[address] = self._balances.get(address, 0) + require_uint("amount", amount)

    def debit(self, account: AddressLike, amount: int) -> None:
        address = normalize_address(account)
        balance = self._balances.get(address, 0)
        if require_uint("amount", amount) > balance:
            raise InsufficientBalanceError(address, balance, amount)
        self._balances[address] = balance - amount

    def accepts_payments(self, account: AddressLike) -> bool:
        return normalize_address(account) not in self._refusing

    def refuse_payments(self, account: AddressLike, refuse: bool = True) -> None:
        address = normalize_address(account)
        if refuse:
            self._refusing.add(address)
        else:
            self._refusing.discard(address)


class Treasury:
    """Custody of mint proceeds, held under the controller's own address."""

    def __init__(self, custody: AddressLike, balances: NativeBalances, events: EventLog) -> None:
        self.custody = normalize_address(custody)
        self.balances = balances
        self.events = events

    @property
    def balance(self) -> int:
        return self.balances.balance_of(self.custody)

    def check_receive(self, value: int) -> None:
        if value and not self.balances.accepts_payments(self.custody):
            raise TransferFailedError(self.custody, value)

    def receive(self, value: int) -> None:
        if value:
            self.balances.credit(self.custody, value)

    def unreceive(self, value: int) -> None:
        """Take back a payment credited by ``receive`` in a call that is being aborted."""
        if value:
            self.balances.debit(self.custody, value)

    def withdraw(self, owner: AddressLike) -> int:
        """Send the whole custody balance to ``owner``. A zero balance is a zero transfer."""
        to = normalize_address(owner)
        amount = self.balance
        self.balances.debit(self.custody, amount)
        try:
            self.balances.credit(to, amount)
        except PaymentRejectedError as exc:
            self.balances.credit(self.custody, amount)
            logger.warning("withdrawal of %d to %s rejected", amount, to)
            raise TransferFailedError(to, amount) from exc
        self.events.emit(DrunkRobotsEvent.WITHDRAWAL, owner=to, amount=amount)
        logger.info("withdrew %d wei to %s", amount, to)
        return amount
