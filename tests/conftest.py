import pytest
from web3 import Web3

from drunk_robots import CollectionConfig, MintController

DEPLOYER = "0x627306090abab3a6e1400e9345bc60c78a8bef57"
MINTER = "0xf17f52151ebef6c7334fad080c5704d77216b732"
ARTIST = "0xc5fdf4076b8f3a5357c5e395ab970b5b54098fef"
FEE_ACCOUNT = "0x821aea9a577a9b44299b9c15c88cf3087f3b5544"

WHITELIST = [
    DEPLOYER,
    MINTER,
    ARTIST,
    FEE_ACCOUNT,
    "0x0d1d4e623d10f9fba5db95830f7d3839406c6af2",
]

OUTSIDERS = [
    "0x2932b7a2355d6fecc4b5c0b6bd44cc31df247a2e",
    "0x2191ef87e392377ec08e7c08eb105ef5448eced5",
]


def checksum(address):
    return Web3.to_checksum_address(address)


@pytest.fixture
def nft():
    return MintController(DEPLOYER)


@pytest.fixture
def live_nft(nft):
    nft.toggle_public_minting_status(sender=DEPLOYER)
    return nft


@pytest.fixture
def small_nft():
    config = CollectionConfig(max_supply=10000, reserve_cap=400, mint_limit=5, mint_price=1000)
    controller = MintController(DEPLOYER, config=config)
    controller.toggle_public_minting_status(sender=DEPLOYER)
    return controller
