"""
Keyspace Scheme - Maps chat entities onto one shared (pk, sk) keyspace.

    entity            pk                    sk
    ----------------  --------------------  ------------------------
    user              user                  user#<username>
    channel           channel               channel#<name>
    channel message   channel#<name>        message#<ISO timestamp>
    direct message    dm#<a>#<b>            message#<ISO timestamp>

Usernames keep the case they were registered with. DM pair keys lower-case
and sort both participants so either direction lands in the same partition.

Message sort keys are timestamps, so a partition query returns messages
oldest first. Two messages written in the same millisecond share a sort key
and the later write replaces the earlier one.

All functions here are pure.
"""

from src.domain.value_objects.dm_thread import DmThread

KEY_DELIMITER = "#"

USER_PARTITION = "user"
CHANNEL_PARTITION = "channel"

USER_PREFIX = f"user{KEY_DELIMITER}"
CHANNEL_PREFIX = f"channel{KEY_DELIMITER}"
MESSAGE_PREFIX = f"message{KEY_DELIMITER}"
DM_PREFIX = f"dm{KEY_DELIMITER}"

Key = tuple[str, str]


def user_key(username: str) -> Key:
    return USER_PARTITION, f"{USER_PREFIX}{username}"


def channel_key(channel_name: str) -> Key:
    return CHANNEL_PARTITION, f"{CHANNEL_PREFIX}{channel_name}"


def channel_partition(channel_name: str) -> str:
    return f"{CHANNEL_PREFIX}{channel_name}"


def message_sort_key(created_at: str) -> str:
    return f"{MESSAGE_PREFIX}{created_at}"


def channel_message_key(channel_name: str, created_at: str) -> Key:
    return channel_partition(channel_name), message_sort_key(created_at)


def dm_pair_key(user_a: str, user_b: str) -> str:
    """Canonical partition id for the DM thread between two users."""
    return dm_thread_partition(DmThread.between(user_a, user_b))


def dm_thread_partition(thread: DmThread) -> str:
    return f"{DM_PREFIX}{thread.first}{KEY_DELIMITER}{thread.second}"


def dm_message_key(sender: str, recipient: str, created_at: str) -> Key:
    return dm_pair_key(sender, recipient), message_sort_key(created_at)


def channel_name_from_partition(pk: str) -> str:
    if not pk.startswith(CHANNEL_PREFIX):
        raise ValueError(f"Not a channel message partition: {pk}")
    return pk[len(CHANNEL_PREFIX):]
