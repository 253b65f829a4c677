import random

import pytest
from hexbytes import HexBytes
from web3 import Web3

from drunk_robots.whitelist import EMPTY_ROOT, MerkleTree, hash_pair, leaf_hash, to_hash32, verify
from drunk_robots.errors import InvalidParameterError

from .conftest import OUTSIDERS, WHITELIST


def _random_addresses(rng, n):
    return ["0x" + bytes(rng.getrandbits(8) for _ in range(20)).hex() for _ in range(n)]


class TestLeafAndPair:
    def test_leaf_is_keccak_of_raw_address_bytes(self):
        address = WHITELIST[0]
        assert leaf_hash(address) == Web3.keccak(bytes.fromhex(address[2:]))

    def test_leaf_ignores_address_case(self):
        assert leaf_hash(WHITELIST[1]) == leaf_hash(Web3.to_checksum_address(WHITELIST[1]))

    def test_pair_is_order_independent(self):
        a, b = leaf_hash(WHITELIST[0]), leaf_hash(WHITELIST[1])
        assert hash_pair(a, b) == hash_pair(b, a)

    def test_pair_hashes_smaller_operand_first(self):
        a, b = sorted([bytes(leaf_hash(WHITELIST[2])), bytes(leaf_hash(WHITELIST[3]))])
        assert hash_pair(b, a) == Web3.keccak(a + b)


class TestMerkleTree:
    def test_every_member_verifies(self):
        tree = MerkleTree(WHITELIST)
        for address in WHITELIST:
            assert verify(tree.root, address, tree.proof(address))

    def test_hex_forms_verify_too(self):
        tree = MerkleTree(WHITELIST)
        assert verify(tree.hex_root, WHITELIST[4], tree.hex_proof(WHITELIST[4]))
        assert tree.hex_root == "0x" + bytes(tree.root).hex()

    def test_outsider_gets_empty_proof_and_fails(self):
        tree = MerkleTree(WHITELIST)
        assert tree.proof(OUTSIDERS[0]) == []
        assert not verify(tree.root, OUTSIDERS[0], [])

    def test_borrowed_proof_fails_for_another_address(self):
        tree = MerkleTree(WHITELIST)
        assert not verify(tree.root, OUTSIDERS[0], tree.proof(WHITELIST[0]))

    def test_root_independent_of_insertion_order_for_two_leaves(self):
        assert MerkleTree(WHITELIST[:2]).root == MerkleTree(list(reversed(WHITELIST[:2]))).root

    def test_single_leaf_root_is_leaf(self):
        tree = MerkleTree([WHITELIST[0]])
        assert tree.root == leaf_hash(WHITELIST[0])
        assert tree.proof(WHITELIST[0]) == []
        assert verify(tree.root, WHITELIST[0], [])

    def test_empty_tree_has_zero_root(self):
        tree = MerkleTree([])
        assert tree.root == EMPTY_ROOT
        assert len(tree) == 0

    def test_odd_node_is_promoted(self):
        tree = MerkleTree(WHITELIST[:3])
        l0, l1, l2 = tree.leaves
        assert tree.root == hash_pair(hash_pair(l0, l1), l2)
        assert tree.proof(WHITELIST[2]) == [hash_pair(l0, l1)]

    def test_membership(self):
        tree = MerkleTree(WHITELIST)
        assert WHITELIST[3] in tree
        assert OUTSIDERS[1] not in tree
        assert "not an address" not in tree

    def test_stale_proof_rejected_after_membership_change(self):
        old = MerkleTree(WHITELIST)
        new = MerkleTree(WHITELIST + OUTSIDERS)
        assert old.root != new.root
        assert not verify(new.root, WHITELIST[0], old.proof(WHITELIST[0]))
        assert not verify(old.root, WHITELIST[0], new.proof(WHITELIST[0]))

    @pytest.mark.parametrize("seed", range(8))
    def test_random_sets(self, seed):
        rng = random.Random(seed)
        members = _random_addresses(rng, rng.randint(1, 40))
        tree = MerkleTree(members)
        for address in members:
            assert verify(tree.root, address, tree.proof(address))
        for address in _random_addresses(rng, 5):
            assert not verify(tree.root, address, tree.proof(members[0]))

    @pytest.mark.parametrize("seed", range(4))
    def test_tampered_leaf_changes_root(self, seed):
        rng = random.Random(100 + seed)
        members = _random_addresses(rng, rng.randint(2, 30))
        tree = MerkleTree(members)
        victim = rng.randrange(len(members))
        tampered = list(members)
        tampered[victim] = _random_addresses(rng, 1)[0]
        assert MerkleTree(tampered).root != tree.root
        assert not verify(tree.root, tampered[victim], MerkleTree(tampered).proof(tampered[victim]))

    def test_flipped_proof_byte_fails(self):
        tree = MerkleTree(WHITELIST)
        proof = [bytearray(p) for p in tree.proof(WHITELIST[1])]
        proof[0][0] ^= 0x01
        assert not verify(tree.root, WHITELIST[1], [bytes(p) for p in proof])


class TestMalformedInput:
    def test_bad_address_does_not_verify(self):
        tree = MerkleTree(WHITELIST)
        assert not verify(tree.root, "0x1234", tree.proof(WHITELIST[0]))

    def test_short_proof_element_does_not_verify(self):
        tree = MerkleTree(WHITELIST)
        assert not verify(tree.root, WHITELIST[0], ["0xdead"])

    def test_to_hash32_rejects_wrong_length(self):
        with pytest.raises(InvalidParameterError):
            to_hash32(b"\x00" * 31)
        assert to_hash32("0x" + "ab" * 32) == HexBytes("0x" + "ab" * 32)
