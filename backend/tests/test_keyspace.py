import pytest

from src.infrastructure.persistence import keyspace


def test_user_key_keeps_registered_case():
    assert keyspace.user_key("Alice") == ("user", "user#Alice")


def test_channel_key_and_message_partition():
    assert keyspace.channel_key("general") == ("channel", "channel#general")
    assert keyspace.channel_message_key("general", "2025-01-27T12:00:00.000Z") == (
        "channel#general",
        "message#2025-01-27T12:00:00.000Z",
    )


def test_channel_record_partition_is_not_a_message_partition():
    # "channel" must not match the "channel#" prefix used to list every channel's messages
    pk, _ = keyspace.channel_key("general")
    assert not pk.startswith(keyspace.CHANNEL_PREFIX)


@pytest.mark.parametrize(
    "user_a, user_b",
    [("alice", "bob"), ("bob", "alice"), ("Alice", "BOB"), ("BOB", "alice")],
)
def test_dm_pair_key_is_symmetric_and_case_insensitive(user_a, user_b):
    assert keyspace.dm_pair_key(user_a, user_b) == "dm#alice#bob"


def test_dm_message_key_uses_canonical_pair():
    created = "2025-01-27T12:00:00.000Z"
    assert keyspace.dm_message_key("bob", "alice", created) == keyspace.dm_message_key(
        "alice", "bob", created
    )


def test_dm_pair_key_rejects_same_user_twice():
    with pytest.raises(ValueError):
        keyspace.dm_pair_key("alice", "ALICE")


def test_message_sort_keys_order_by_time():
    earlier = keyspace.message_sort_key("2025-01-27T09:59:59.999Z")
    later = keyspace.message_sort_key("2025-01-27T10:00:00.000Z")
    assert earlier < later


def test_channel_name_from_partition():
    assert keyspace.channel_name_from_partition("channel#random") == "random"
    with pytest.raises(ValueError):
        keyspace.channel_name_from_partition("dm#alice#bob")
