"""Drunk Robots: capped-supply minting engine with allowlist, reserve and royalties."""

from .constants import CollectionConfig
from .controller import MintController, MintingFlags
from .errors import (
    AuthorizationError,
    DrunkRobotsError,
    InsufficientBalanceError,
    InvalidAddressError,
    InvalidParameterError,
    InvalidProofError,
    InvalidQuantityError,
    MintingDisabledError,
    MintLimitExceededError,
    NonexistentTokenError,
    NotOwnerError,
    PaymentRejectedError,
    ReserveExhaustedError,
    RoyaltyOutOfRangeError,
    SupplyExhaustedError,
    TransferFailedError,
    UnderpaymentError,
    ValidationError,
)
from .events import DrunkRobotsEvent, EventLog, EventRecord
from .ledger import InMemoryTokenLedger, TokenLedger
from .pricing import PricingConfig, PricingGuard
from .royalty import RoyaltyConfig, RoyaltyRegistry
from .supply import Pool, SupplyCounters, SupplyLedger
from .treasury import NativeBalances, Treasury
from .whitelist import MerkleTree, leaf_hash, verify

__version__ = "1.0.0"

__all__ = [
    "CollectionConfig",
    "MintController",
    "MintingFlags",
    "AuthorizationError",
    "DrunkRobotsError",
    "InsufficientBalanceError",
    "InvalidAddressError",
    "InvalidParameterError",
    "InvalidProofError",
    "InvalidQuantityError",
    "MintingDisabledError",
    "MintLimitExceededError",
    "NonexistentTokenError",
    "NotOwnerError",
    "PaymentRejectedError",
    "ReserveExhaustedError",
    "RoyaltyOutOfRangeError",
    "SupplyExhaustedError",
    "TransferFailedError",
    "UnderpaymentError",
    "ValidationError",
    "DrunkRobotsEvent",
    "EventLog",
    "EventRecord",
    "InMemoryTokenLedger",
    "TokenLedger",
    "PricingConfig",
    "PricingGuard",
    "RoyaltyConfig",
    "RoyaltyRegistry",
    "Pool",
    "SupplyCounters",
    "SupplyLedger",
    "NativeBalances",
    "Treasury",
    "MerkleTree",
    "leaf_hash",
    "verify",
]
