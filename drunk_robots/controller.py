"""
Drunk Robots minting controller.

Every public method is one atomic call: the caller is passed as ``sender`` and
any attached native payment as ``value``. All checks run before the first
mutation, and a collaborator failing during the commit step is rolled back,
so a call that raises leaves counters, balances, ownership and the event log
exactly as they were.

Check order for the paid paths: phase flag, quantity, mint limit, payment,
allowlist proof, supply. Owner-only operations check the owner first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from hexbytes import HexBytes

from . import whitelist
from .addresses import AddressLike, normalize_address, require_nonzero
from .constants import DRUNK_ROBOTS_TOKEN_URI_SUFFIX, CollectionConfig
from .errors import (
    InvalidProofError,
    InvalidQuantityError,
    MintingDisabledError,
    NonexistentTokenError,
    NotOwnerError,
)
from .events import DrunkRobotsEvent, EventLog
from .ledger import InMemoryTokenLedger, TokenLedger
from .pricing import PricingConfig, PricingGuard, require_uint
from .royalty import RoyaltyRegistry
from .supply import Pool, SupplyCounters, SupplyLedger
from .treasury import NativeBalances, Treasury
from .whitelist import HashLike

logger = logging.getLogger(__name__)


@dataclass
class MintingFlags:
    public_enabled: bool = False
    whitelist_enabled: bool = False


class MintController:
    def __init__(
        self,
        owner: AddressLike,
        config: Optional[CollectionConfig] = None,
        ledger: Optional[TokenLedger] = None,
        balances: Optional[NativeBalances] = None,
        events: Optional[EventLog] = None,
    ) -> None:
        self.config = (config or CollectionConfig()).validate()
        self.address = normalize_address(self.config.contract_address)
        self._owner = require_nonzero(owner, "owner is the zero address")
        self.events = events if events is not None else EventLog()
        self.ledger = ledger if ledger is not None else InMemoryTokenLedger(self.events)
        self.flags = MintingFlags()
        self.pricing = PricingGuard(PricingConfig(self.config.mint_price, self.config.mint_limit))
        self.supply = SupplyLedger(SupplyCounters(self.config.max_supply, self.config.reserve_cap))
        self.royalties = RoyaltyRegistry.with_percent(self.config.royalty_percent, self.address, self.events)
        self.treasury = Treasury(self.address, balances if balances is not None else NativeBalances(), self.events)
        self.base_uri = self.config.base_uri
        self._merkle_root = whitelist.EMPTY_ROOT

    # ------------------------------------------------------------------
    # Authorization
    # ------------------------------------------------------------------

    @property
    def owner(self) -> str:
        return self._owner

    def _only_owner(self, sender: AddressLike) -> None:
        caller = normalize_address(sender)
        if caller != self._owner:
            logger.debug("owner-only call rejected for %s", caller)
            raise NotOwnerError(caller)

    def transfer_ownership(self, new_owner: AddressLike, *, sender: AddressLike) -> str:
        self._only_owner(sender)
        to = require_nonzero(new_owner, "Ownable: new owner is the zero address")
        previous, self._owner = self._owner, to
        self.events.emit(DrunkRobotsEvent.OWNERSHIP_TRANSFERRED, previous_owner=previous, new_owner=to)
        logger.info("ownership transferred from %s to %s", previous, to)
        return to

    # ------------------------------------------------------------------
    # Phase flags
    # ------------------------------------------------------------------

    def toggle_public_minting_status(self, *, sender: AddressLike) -> bool:
        self._only_owner(sender)
        self.flags.public_enabled = not self.flags.public_enabled
        logger.info("public minting %s", "enabled" if self.flags.public_enabled else "disabled")
        return self.flags.public_enabled

    def toggle_whitelist_minting_status(self, *, sender: AddressLike) -> bool:
        self._only_owner(sender)
        self.flags.whitelist_enabled = not self.flags.whitelist_enabled
        logger.info("whitelist minting %s", "enabled" if self.flags.whitelist_enabled else "disabled")
        return self.flags.whitelist_enabled

    # ------------------------------------------------------------------
    # Mint entry points
    # ------------------------------------------------------------------

    def public_mint(self, quantity: int, *, sender: AddressLike, value: int = 0) -> List[int]:
        if not self.flags.public_enabled:
            raise MintingDisabledError("public")
        to = require_nonzero(sender, "ERC721: mint to the zero address")
        self._check_paid_mint(quantity, value)
        self.supply.check(quantity, Pool.GENERAL)
        return self._commit(to, quantity, Pool.GENERAL, value)

    def whitelist_mint(
        self, quantity: int, proof: Sequence[HashLike], *, sender: AddressLike, value: int = 0
    ) -> List[int]:
        if not self.flags.whitelist_enabled:
            raise MintingDisabledError("whitelist")
        to = require_nonzero(sender, "ERC721: mint to the zero address")
        self._check_paid_mint(quantity, value)
        if not whitelist.verify(self._merkle_root, to, proof):
            logger.debug("rejected allowlist proof for %s", to)
            raise InvalidProofError(to)
        self.supply.check(quantity, Pool.GENERAL)
        return self._commit(to, quantity, Pool.GENERAL, value)

    def mint_from_reserve(self, to: AddressLike, quantity: int, *, sender: AddressLike) -> List[int]:
        self._only_owner(sender)
        recipient = require_nonzero(to, "ERC721: mint to the zero address")
        _check_quantity(quantity)
        self.supply.check(quantity, Pool.RESERVE)
        return self._commit(recipient, quantity, Pool.RESERVE, 0)

    def _check_paid_mint(self, quantity: int, value: int) -> None:
        _check_quantity(quantity)
        require_uint("value", value)
        self.pricing.check(quantity, value)

    def _commit(self, to: str, quantity: int, pool: Pool, value: int) -> List[int]:
        self.treasury.check_receive(value)
        mark = len(self.events)
        first = self.supply.reserve(quantity, pool)
        token_ids: List[int] = []
        received = False
        try:
            self.treasury.receive(value)
            received = True
            for _ in range(quantity):
                token_ids.append(self.ledger.allocate(to))
        except Exception:
            logger.warning("mint of %d token(s) to %s aborted after %d allocation(s)", quantity, to, len(token_ids))
            # the ledger only releases its latest id, so undo in reverse
            for token_id in reversed(token_ids):
                self.ledger.release(token_id)
            if received:
                self.treasury.unreceive(value)
            self.supply.release(quantity, pool)
            self.events.discard_from(mark)
            raise
        logger.info("minted %d %s token(s) to %s: ids %d..%d", quantity, pool.value, to, first, first + quantity - 1)
        return token_ids

    # ------------------------------------------------------------------
    # Owner parameters
    # ------------------------------------------------------------------

    def set_mint_price(self, price: int, *, sender: AddressLike) -> None:
        self._only_owner(sender)
        self.pricing.config.unit_price = require_uint("mint price", price)
        logger.info("mint price set to %d wei", price)

    def set_mint_limit(self, limit: int, *, sender: AddressLike) -> None:
        self._only_owner(sender)
        self.pricing.config.mint_limit = require_uint("mint limit", limit)
        logger.info("mint limit set to %d", limit)

    def set_merkle_root(self, root: HashLike, *, sender: AddressLike) -> None:
        self._only_owner(sender)
        self._merkle_root = whitelist.to_hash32(root, "merkle root")
        logger.info("merkle root set to 0x%s", bytes(self._merkle_root).hex())

    def set_base_uri(self, base_uri: str, *, sender: AddressLike) -> None:
        self._only_owner(sender)
        self.base_uri = base_uri
        logger.info("base uri set to %s", base_uri)

    def set_royalties(self, percent: int, *, sender: AddressLike) -> int:
        self._only_owner(sender)
        return self.royalties.set_royalties(percent)

    def set_royalties_receiver(self, receiver: AddressLike, *, sender: AddressLike) -> str:
        self._only_owner(sender)
        return self.royalties.set_royalties_receiver(receiver)

    def withdraw(self, *, sender: AddressLike) -> int:
        self._only_owner(sender)
        return self.treasury.withdraw(self._owner)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def symbol(self) -> str:
        return self.config.symbol

    @property
    def max_supply(self) -> int:
        return self.supply.counters.max_supply

    @property
    def reserve(self) -> int:
        return self.supply.counters.reserve_remaining

    @property
    def reserve_cap(self) -> int:
        return self.supply.counters.reserve_cap

    @property
    def reserve_issued(self) -> int:
        return self.supply.counters.reserve_issued

    @property
    def total_supply(self) -> int:
        return self.supply.counters.total_issued

    @property
    def mint_limit(self) -> int:
        return self.pricing.config.mint_limit

    @property
    def mint_price(self) -> int:
        return self.pricing.config.unit_price

    @property
    def merkle_root(self) -> HexBytes:
        return self._merkle_root

    @property
    def public_minting_enabled(self) -> bool:
        return self.flags.public_enabled

    @property
    def whitelist_minting_enabled(self) -> bool:
        return self.flags.whitelist_enabled

    @property
    def balance(self) -> int:
        return self.treasury.balance

    def balance_of(self, owner: AddressLike) -> int:
        return self.ledger.balance_of(normalize_address(owner))

    def owner_of(self, token_id: int) -> str:
        return self.ledger.owner_of(token_id)

    def tokens_of_owner(self, owner: AddressLike) -> List[int]:
        return self.ledger.tokens_of_owner(normalize_address(owner))

    def token_uri(self, token_id: int) -> str:
        if isinstance(token_id, bool) or not isinstance(token_id, int) or not self.ledger.exists(token_id):
            raise NonexistentTokenError(token_id)
        return f"{self.base_uri}{token_id}{DRUNK_ROBOTS_TOKEN_URI_SUFFIX}"

    def royalty_info(self, token_id: int, sale_price: int) -> Tuple[str, int]:
        return self.royalties.royalty_info(token_id, sale_price)


def _check_quantity(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise InvalidQuantityError(quantity)
