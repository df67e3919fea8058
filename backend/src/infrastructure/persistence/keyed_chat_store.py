"""
Keyed Chat Store - ChatStore implementation on top of a KeyValueStore.

Guidelines:
- Implements the ChatStore port from the domain layer
- Every key comes from keyspace.py; nothing else builds pk/sk strings
- Maps between stored items (flat dicts) and domain entities
- Any failure of the underlying store is logged and re-raised as StorageError

Item layout:
- user:            pk, sk, id, username, password_hash, online, last_active
- channel:         pk, sk, id, name, locked
- channel message: pk, sk, id, channel, sender, content, created_at
- direct message:  pk, sk, id, sender, recipient, text, created_at

No operation writes more than one item. "Name unused, then create" in the
application layer is a read followed by a separate write.
"""

import logging
from contextlib import contextmanager
from typing import Optional

from src.domain.entities.channel import Channel
from src.domain.entities.channel_message import ChannelMessage
from src.domain.entities.direct_message import DirectMessage
from src.domain.entities.user import User
from src.domain.exceptions import StorageError
from src.domain.ports.key_value_store import Item, KeyValueStore
from src.domain.ports.repositories import ChatStore
from src.domain.value_objects.channel_name import ChannelName
from src.domain.value_objects.message_id import MessageId
from src.domain.value_objects.username import Username
from src.infrastructure.persistence import keyspace
from src.utils.time_utils import utc_now_iso

logger = logging.getLogger(__name__)


@contextmanager
def _store_call(action: str):
    """Translate any store failure into StorageError; the cause stays in the log."""
    try:
        yield
    except StorageError:
        raise
    except Exception as e:
        logger.exception(f"[ChatStore] {action} failed: {type(e).__name__}")
        raise StorageError(f"Server error while {action}") from e


class KeyedChatStore(ChatStore):
    _store: KeyValueStore

    def __init__(self, store: KeyValueStore):
        self._store = store

    # ==================== MAPPING ====================

    @staticmethod
    def _user_to_entity(item: Item) -> User:
        return User(
            id=item["id"],
            username=Username(item["username"]),
            password_hash=item["password_hash"],
            online=bool(item.get("online", False)),
            last_active=item.get("last_active", ""),
        )

    @staticmethod
    def _channel_to_entity(item: Item) -> Channel:
        return Channel(
            id=item["id"],
            name=ChannelName(item["name"]),
            locked=item.get("locked") is True,
        )

    @staticmethod
    def _channel_message_to_entity(item: Item) -> ChannelMessage:
        channel = item.get("channel") or keyspace.channel_name_from_partition(item["pk"])
        return ChannelMessage(
            id=MessageId(item["id"]),
            channel=ChannelName(channel),
            sender=item["sender"],
            content=item["content"],
            created_at=item["created_at"],
        )

    @staticmethod
    def _dm_to_entity(item: Item) -> DirectMessage:
        return DirectMessage(
            id=MessageId(item["id"]),
            sender=item["sender"],
            recipient=item["recipient"],
            text=item["text"],
            created_at=item["created_at"],
        )

    # ==================== USERS ====================

    async def create_user(self, user: User) -> None:
        pk, sk = keyspace.user_key(user.username.value)
        item = {
            "pk": pk,
            "sk": sk,
            "id": user.id,
            "username": user.username.value,
            "password_hash": user.password_hash,
            "online": user.online,
            "last_active": user.last_active,
        }
        with _store_call("registering user"):
            await self._store.put_item(item)

    async def find_user_by_name(self, username: Username) -> Optional[User]:
        with _store_call("looking up user"):
            item = await self._store.get_item(*keyspace.user_key(username.value))
        return self._user_to_entity(item) if item else None

    async def list_users(self) -> list[User]:
        with _store_call("loading users"):
            items = await self._store.query(keyspace.USER_PARTITION)
        return [self._user_to_entity(item) for item in items]

    async def is_username_taken(self, username: Username) -> bool:
        # User keys keep the case as entered, so a case-insensitive match scans the partition
        with _store_call("looking up user"):
            items = await self._store.query(keyspace.USER_PARTITION)
        return any(item["username"].lower() == username.canonical for item in items)

    async def set_user_online(self, username: Username, online: bool) -> bool:
        pk, sk = keyspace.user_key(username.value)
        with _store_call("updating status"):
            updated = await self._store.update_item(
                pk, sk, {"online": online, "last_active": utc_now_iso()}
            )
        return updated is not None

    # ==================== CHANNELS ====================

    async def create_channel(self, channel: Channel) -> None:
        pk, sk = keyspace.channel_key(channel.name.value)
        item = {
            "pk": pk,
            "sk": sk,
            "id": channel.id,
            "name": channel.name.value,
            "locked": channel.locked,
        }
        with _store_call("creating channel"):
            await self._store.put_item(item)

    async def find_channel_by_name(self, name: ChannelName) -> Optional[Channel]:
        with _store_call("looking up channel"):
            item = await self._store.get_item(*keyspace.channel_key(name.value))
        return self._channel_to_entity(item) if item else None

    async def list_all_channels(self) -> list[Channel]:
        with _store_call("fetching channels"):
            items = await self._store.query(keyspace.CHANNEL_PARTITION)
        return [self._channel_to_entity(item) for item in items]

    # ==================== CHANNEL MESSAGES ====================

    async def append_channel_message(self, message: ChannelMessage) -> None:
        pk, sk = keyspace.channel_message_key(message.channel.value, message.created_at)
        item = {
            "pk": pk,
            "sk": sk,
            "id": message.id.value,
            "channel": message.channel.value,
            "sender": message.sender,
            "content": message.content,
            "created_at": message.created_at,
        }
        with _store_call("sending message"):
            await self._store.put_item(item)

    async def list_channel_messages(self, name: ChannelName) -> list[ChannelMessage]:
        with _store_call("loading messages"):
            items = await self._store.query(keyspace.channel_partition(name.value))
        return [self._channel_message_to_entity(item) for item in items]

    async def list_all_channel_messages(self) -> list[ChannelMessage]:
        with _store_call("fetching all messages"):
            items = await self._store.query_prefix(keyspace.CHANNEL_PREFIX)
        return [self._channel_message_to_entity(item) for item in items]

    # ==================== DIRECT MESSAGES ====================

    async def append_dm_message(self, message: DirectMessage) -> None:
        pk, sk = keyspace.dm_message_key(message.sender, message.recipient, message.created_at)
        item = {
            "pk": pk,
            "sk": sk,
            "id": message.id.value,
            "sender": message.sender,
            "recipient": message.recipient,
            "text": message.text,
            "created_at": message.created_at,
        }
        with _store_call("sending DM"):
            await self._store.put_item(item)

    async def list_dm_thread(self, user_a: str, user_b: str) -> list[DirectMessage]:
        with _store_call("fetching DMs"):
            items = await self._store.query(keyspace.dm_pair_key(user_a, user_b))
        return [self._dm_to_entity(item) for item in items]
