import pytest

from src.domain.entities.channel import Channel
from src.domain.exceptions import AccessDeniedError, LoginRequiredError
from src.domain.services.access_policy import AccessPolicy, Operation
from src.domain.value_objects import GUEST, ChannelName, DmThread, Identity, Username

policy = AccessPolicy()
alice = Identity(Username("alice"))
open_channel = Channel.create(ChannelName("general"))
locked_channel = Channel.create(ChannelName("secret"), locked=True)


def test_guest_listing_drops_locked_channels():
    visible = policy.filter_visible(GUEST, [open_channel, locked_channel])
    assert visible == [open_channel]


def test_identity_listing_is_unchanged():
    channels = [open_channel, locked_channel]
    assert policy.filter_visible(alice, channels) == channels


@pytest.mark.parametrize("operation", [Operation.READ, Operation.WRITE])
def test_guest_is_refused_locked_channel(operation):
    with pytest.raises(LoginRequiredError):
        policy.ensure_channel_access(GUEST, locked_channel, operation)


def test_login_required_messages_differ_for_read_and_write():
    with pytest.raises(LoginRequiredError, match="Login required for locked channels"):
        policy.ensure_channel_access(GUEST, locked_channel, Operation.READ)
    with pytest.raises(LoginRequiredError, match="Login required to post in locked channels"):
        policy.ensure_channel_access(GUEST, locked_channel, Operation.WRITE)


@pytest.mark.parametrize("caller", [GUEST, alice])
@pytest.mark.parametrize("operation", [Operation.READ, Operation.WRITE])
def test_open_channel_allows_everyone(caller, operation):
    policy.ensure_channel_access(caller, open_channel, operation)


def test_identity_may_use_locked_channel():
    policy.ensure_channel_access(alice, locked_channel, Operation.WRITE)
    assert policy.can_access_channel(alice, locked_channel)


def test_dm_requires_identity():
    with pytest.raises(AccessDeniedError):
        policy.ensure_dm_access(GUEST, DmThread.between("alice", "bob"))


def test_dm_requires_participant():
    with pytest.raises(AccessDeniedError):
        policy.ensure_dm_access(alice, DmThread.between("bob", "carol"))


def test_dm_participant_is_case_insensitive():
    caller = Identity(Username("Alice"))
    assert policy.ensure_dm_access(caller, DmThread.between("bob", "alice")) is caller
