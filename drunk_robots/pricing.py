from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidParameterError, MintLimitExceededError, UnderpaymentError


@dataclass
class PricingConfig:
    unit_price: int
    mint_limit: int


def require_uint(name: str, value: object) -> int:
    # bool is an int subclass; a flag is never a valid amount
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidParameterError(name, value)
    return value


class PricingGuard:
    """Quantity and payment checks for the paid mint paths. Amounts are wei."""

    def __init__(self, config: PricingConfig) -> None:
        self.config = config

    def required_payment(self, quantity: int) -> int:
        return self.config.unit_price * quantity

    def within_limit(self, quantity: int) -> bool:
        return quantity <= self.config.mint_limit

    def check(self, quantity: int, value: int) -> int:
        """Raise on an over-limit quantity, then on underpayment. Returns the price due."""
        if not self.within_limit(quantity):
            raise MintLimitExceededError(quantity, self.config.mint_limit)
        required = self.required_payment(quantity)
        if value < required:
            raise UnderpaymentError(value, required)
        return required
