import pytest
from web3.constants import ADDRESS_ZERO

from drunk_robots.errors import InvalidAddressError, RoyaltyOutOfRangeError
from drunk_robots.events import DrunkRobotsEvent, EventLog
from drunk_robots.royalty import RoyaltyRegistry

from .conftest import ARTIST, FEE_ACCOUNT, checksum


@pytest.fixture
def events():
    return EventLog()


@pytest.fixture
def registry(events):
    return RoyaltyRegistry.with_percent(10, FEE_ACCOUNT, events)


def test_default_split(registry):
    assert registry.royalty_info(0, 10**18) == (checksum(FEE_ACCOUNT), 10**17)
    assert registry.config.basis_points == 1000
    assert registry.config.percent == 10


def test_amount_truncates(registry):
    assert registry.royalty_info(0, 19) == (checksum(FEE_ACCOUNT), 1)
    assert registry.royalty_info(0, 9) == (checksum(FEE_ACCOUNT), 0)


def test_query_ignores_token_id(registry):
    assert registry.royalty_info(0, 1000) == registry.royalty_info(123456, 1000)


@pytest.mark.parametrize("percent", [0, 91, -5, 9000])
def test_out_of_range(registry, events, percent):
    with pytest.raises(RoyaltyOutOfRangeError, match="royalties should be between 0 and 90"):
        registry.set_royalties(percent)
    assert registry.config.basis_points == 1000
    assert len(events) == 0


@pytest.mark.parametrize("percent", [1, 45, 90])
def test_in_range(registry, percent):
    assert registry.set_royalties(percent) == percent * 100
    assert registry.royalty_info(0, 10000)[1] == percent * 100


def test_set_emits_update(registry, events):
    registry.set_royalties(25)
    (record,) = events.filter(DrunkRobotsEvent.ROYALTIES_UPDATED)
    assert record.args == {"basis_points": 2500}


def test_receiver_replaced(registry):
    registry.set_royalties_receiver(ARTIST)
    assert registry.royalty_info(7, 100)[0] == checksum(ARTIST)


def test_receiver_cannot_be_zero(registry):
    with pytest.raises(InvalidAddressError):
        registry.set_royalties_receiver(ADDRESS_ZERO)
    assert registry.config.receiver == checksum(FEE_ACCOUNT)
