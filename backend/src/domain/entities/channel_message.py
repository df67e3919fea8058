"""
ChannelMessage Entity - A post in a channel.

Immutable once created. created_at is both the ordering key and the
discriminator inside the channel's partition.
"""

from __future__ import annotations
from dataclasses import dataclass

from src.domain.value_objects.channel_name import ChannelName
from src.domain.value_objects.message_id import MessageId
from src.utils.time_utils import utc_now_iso


@dataclass(frozen=True)
class ChannelMessage:
    id: MessageId
    channel: ChannelName
    sender: str
    content: str
    created_at: str

    @classmethod
    def create(cls, channel: ChannelName, sender: str, content: str) -> ChannelMessage:
        """Factory method to create a new message with a generated ID and timestamp."""
        return cls(
            id=MessageId.generate(),
            channel=channel,
            sender=sender,
            content=content,
            created_at=utc_now_iso(),
        )
