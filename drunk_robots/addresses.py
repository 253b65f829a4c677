from __future__ import annotations

from typing import Union

from web3 import Web3
from web3.constants import ADDRESS_ZERO

from .errors import InvalidAddressError

AddressLike = Union[str, bytes]


def normalize_address(value: AddressLike) -> str:
    """Return the EIP-55 checksummed form of ``value`` or raise InvalidAddressError."""
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 20:
            raise InvalidAddressError(value)
        return Web3.to_checksum_address(bytes(value))
    if not isinstance(value, str) or not Web3.is_address(value):
        raise InvalidAddressError(value)
    return Web3.to_checksum_address(value)


def require_nonzero(value: AddressLike, reason: str = "zero address") -> str:
    address = normalize_address(value)
    if address == ADDRESS_ZERO:
        raise InvalidAddressError(value, reason)
    return address
