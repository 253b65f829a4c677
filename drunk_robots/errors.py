"""
Exceptions raised by the minting engine. Messages keep the collection
contract's revert wording as a prefix so callers can match on it.
"""

from __future__ import annotations


class DrunkRobotsError(Exception):
    pass


# ---------------------------------------------------------------------------
# Authorization
# ---------------------------------------------------------------------------

class AuthorizationError(DrunkRobotsError):
    """Caller lacks the privilege or phase required for the call."""


class NotOwnerError(AuthorizationError):
    def __init__(self, caller: str) -> None:
        self.caller = caller
        super().__init__(f"Ownable: caller is not the owner (caller={caller})")


class MintingDisabledError(AuthorizationError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"{path} minting is disabled")


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class ValidationError(DrunkRobotsError):
    """Business rule violated by the call's arguments or payment."""


class InvalidQuantityError(ValidationError):
    def __init__(self, quantity: int) -> None:
        self.quantity = quantity
        super().__init__(f"mint at least one token (quantity={quantity})")


class MintLimitExceededError(ValidationError):
    def __init__(self, quantity: int, limit: int) -> None:
        self.quantity = quantity
        self.limit = limit
        super().__init__(f"no more tokens than mint limit (quantity={quantity}, limit={limit})")


class UnderpaymentError(ValidationError):
    def __init__(self, sent: int, required: int) -> None:
        self.sent = sent
        self.required = required
        super().__init__(f"low price! (sent={sent}, required={required})")


class SupplyExhaustedError(ValidationError):
    def __init__(self, requested: int, issued: int, cap: int) -> None:
        self.requested = requested
        self.issued = issued
        self.cap = cap
        super().__init__(f"max supply exceeded (requested={requested}, issued={issued}, cap={cap})")


class ReserveExhaustedError(ValidationError):
    def __init__(self, requested: int, issued: int, cap: int) -> None:
        self.requested = requested
        self.issued = issued
        self.cap = cap
        super().__init__(f"no more in reserve (requested={requested}, issued={issued}, cap={cap})")


class InvalidProofError(ValidationError):
    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"Invalid proof (address={address})")


class RoyaltyOutOfRangeError(ValidationError):
    def __init__(self, value: int, maximum: int) -> None:
        self.value = value
        self.maximum = maximum
        super().__init__(f"royalties should be between 0 and {maximum} (got {value})")


class InvalidAddressError(ValidationError):
    def __init__(self, value: object, reason: str = "invalid address") -> None:
        self.value = value
        super().__init__(f"{reason}: {value!r}")


class NonexistentTokenError(ValidationError):
    def __init__(self, token_id: int, query: str = "ERC721Metadata: URI query") -> None:
        self.token_id = token_id
        super().__init__(f"{query} for nonexistent token (token_id={token_id})")


class InvalidParameterError(ValidationError):
    def __init__(self, name: str, value: object) -> None:
        self.name = name
        self.value = value
        super().__init__(f"invalid {name}: {value!r}")


# ---------------------------------------------------------------------------
# Funds
# ---------------------------------------------------------------------------

class InsufficientBalanceError(ValidationError):
    def __init__(self, account: str, balance: int, amount: int) -> None:
        self.account = account
        self.balance = balance
        self.amount = amount
        super().__init__(f"insufficient balance for {account} (balance={balance}, amount={amount})")


class PaymentRejectedError(DrunkRobotsError):
    def __init__(self, to: str) -> None:
        self.to = to
        super().__init__(f"account refuses native payments: {to}")


class TransferFailedError(DrunkRobotsError):
    def __init__(self, to: str, amount: int) -> None:
        self.to = to
        self.amount = amount
        super().__init__(f"Transfer failed. (to={to}, amount={amount})")
