"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Pure Python dataclasses (no ORM, no Pydantic)
- Messages are immutable once created
"""

from src.domain.entities.user import User
from src.domain.entities.channel import Channel
from src.domain.entities.channel_message import ChannelMessage
from src.domain.entities.direct_message import DirectMessage

__all__ = [
    "User",
    "Channel",
    "ChannelMessage",
    "DirectMessage",
]
