"""
Chat Store Port - Entity-shaped persistence for users, channels and messages.
Implementation: src/infrastructure/persistence/keyed_chat_store.py

Any failure of the underlying store surfaces as StorageError.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.channel import Channel
from src.domain.entities.channel_message import ChannelMessage
from src.domain.entities.direct_message import DirectMessage
from src.domain.entities.user import User
from src.domain.value_objects.channel_name import ChannelName
from src.domain.value_objects.username import Username


class ChatStore(ABC):
    # ==================== USERS ====================
    @abstractmethod
    async def create_user(self, user: User) -> None: ...

    @abstractmethod
    async def find_user_by_name(self, username: Username) -> Optional[User]: ...

    @abstractmethod
    async def list_users(self) -> list[User]: ...

    @abstractmethod
    async def is_username_taken(self, username: Username) -> bool:
        """True if any stored user has the same name ignoring case."""
        ...

    @abstractmethod
    async def set_user_online(self, username: Username, online: bool) -> bool:
        """Set the online flag and stamp last-active. Returns False when no such user exists."""
        ...

    # ==================== CHANNELS ====================
    @abstractmethod
    async def create_channel(self, channel: Channel) -> None: ...

    @abstractmethod
    async def find_channel_by_name(self, name: ChannelName) -> Optional[Channel]: ...

    @abstractmethod
    async def list_all_channels(self) -> list[Channel]: ...

    # ==================== CHANNEL MESSAGES ====================
    @abstractmethod
    async def append_channel_message(self, message: ChannelMessage) -> None: ...

    @abstractmethod
    async def list_channel_messages(self, name: ChannelName) -> list[ChannelMessage]: ...

    @abstractmethod
    async def list_all_channel_messages(self) -> list[ChannelMessage]: ...

    # ==================== DIRECT MESSAGES ====================
    @abstractmethod
    async def append_dm_message(self, message: DirectMessage) -> None: ...

    @abstractmethod
    async def list_dm_thread(self, user_a: str, user_b: str) -> list[DirectMessage]:
        """Messages between two users in either direction, oldest first."""
        ...
