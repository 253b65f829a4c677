"""
Merkle allowlist: proof verification and tree construction.

Leaves are ``keccak256(abi.encodePacked(address))``. Internal nodes hash the
two children with the numerically smaller one first, so a proof carries no
left/right flags and any tree built from the same leaves yields the same root.
An odd node at the end of a level is carried up to the next level unchanged.

``verify`` is pure and takes the root explicitly; the controller passes in the
root it currently has configured.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Union

from hexbytes import HexBytes
from web3 import Web3
from web3.constants import HASH_ZERO

from .addresses import AddressLike, normalize_address
from .errors import InvalidAddressError, InvalidParameterError

HashLike = Union[str, bytes]

EMPTY_ROOT = HexBytes(HASH_ZERO)


def to_hash32(value: HashLike, name: str = "hash") -> HexBytes:
    try:
        out = HexBytes(value)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(name, value) from exc
    if len(out) != 32:
        raise InvalidParameterError(name, value)
    return out


def leaf_hash(address: AddressLike) -> HexBytes:
    return HexBytes(Web3.keccak(hexstr=normalize_address(address)))


def hash_pair(a: bytes, b: bytes) -> HexBytes:
    # big-endian bytes of equal length compare the same as their integer values
    if bytes(b) < bytes(a):
        a, b = b, a
    return HexBytes(Web3.keccak(bytes(a) + bytes(b)))


def process_proof(leaf: bytes, proof: Sequence[HashLike]) -> HexBytes:
    computed = HexBytes(leaf)
    for element in proof:
        computed = hash_pair(computed, to_hash32(element, "proof element"))
    return computed


def verify(root: HashLike, address: AddressLike, proof: Sequence[HashLike]) -> bool:
    """True when ``proof`` shows ``address`` is a member of the set committed by ``root``."""
    try:
        return process_proof(leaf_hash(address), proof) == to_hash32(root, "root")
    except (InvalidAddressError, InvalidParameterError):
        return False


class MerkleTree:
    """Sorted-pair keccak tree over a list of addresses.

    Used off the mint path by whoever maintains the allowlist, to publish a
    root with ``set_merkle_root`` and hand each member their proof.
    """

    def __init__(self, addresses: Iterable[AddressLike]) -> None:
        self.addresses: List[str] = [normalize_address(a) for a in addresses]
        self.leaves: List[HexBytes] = [leaf_hash(a) for a in self.addresses]
        self.levels: List[List[HexBytes]] = self._build(self.leaves)
        self._index: Dict[bytes, int] = {}
        for i, leaf in enumerate(self.leaves):
            self._index.setdefault(bytes(leaf), i)

    @staticmethod
    def _build(leaves: List[HexBytes]) -> List[List[HexBytes]]:
        levels = [list(leaves)]
        while len(levels[-1]) > 1:
            current = levels[-1]
            nxt = []
            for i in range(0, len(current), 2):
                if i + 1 < len(current):
                    nxt.append(hash_pair(current[i], current[i + 1]))
                else:
                    nxt.append(current[i])
            levels.append(nxt)
        return levels

    @property
    def root(self) -> HexBytes:
        if not self.leaves:
            return EMPTY_ROOT
        return self.levels[-1][0]

    @property
    def hex_root(self) -> str:
        return "0x" + bytes(self.root).hex()

    def proof(self, address: AddressLike) -> List[HexBytes]:
        idx = self._index.get(bytes(leaf_hash(address)))
        if idx is None:
            return []
        out = []
        for level in self.levels[:-1]:
            sibling = idx ^ 1
            if sibling < len(level):
                out.append(level[sibling])
            idx //= 2
        return out

    def hex_proof(self, address: AddressLike) -> List[str]:
        return ["0x" + bytes(p).hex() for p in self.proof(address)]

    def __contains__(self, address: object) -> bool:
        try:
            return bytes(leaf_hash(address)) in self._index  # type: ignore[arg-type]
        except (InvalidAddressError, InvalidParameterError):
            return False

    def __len__(self) -> int:
        return len(self.leaves)
