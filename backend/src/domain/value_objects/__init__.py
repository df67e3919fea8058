"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from src.domain.value_objects.username import Username
from src.domain.value_objects.channel_name import ChannelName
from src.domain.value_objects.message_id import MessageId
from src.domain.value_objects.dm_thread import DmThread
from src.domain.value_objects.caller import Identity, Guest, GUEST, Caller

__all__ = [
    "Username",
    "ChannelName",
    "MessageId",
    "DmThread",
    "Identity",
    "Guest",
    "GUEST",
    "Caller",
]
