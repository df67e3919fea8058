"""Chat DTOs for API responses.

Field names follow what the browser client reads (camelCase). Storage keys
(pk/sk) and password digests never leave the server.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities.channel import Channel
from src.domain.entities.channel_message import ChannelMessage
from src.domain.entities.direct_message import DirectMessage
from src.domain.entities.user import User


class ChannelDTO(BaseModel):
    id: str
    name: str
    locked: bool = False

    @classmethod
    def from_entity(cls, channel: Channel) -> ChannelDTO:
        return cls(id=channel.id, name=channel.name.value, locked=channel.locked)


class ChannelMessageDTO(BaseModel):
    """DTO for a channel post returned to frontend."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    channel_name: str = Field(alias="channelName")
    content: str
    sender: str
    # Same value as sender; older clients read "from"
    from_user: str = Field(alias="from")
    created_at: str = Field(alias="createdAt")

    @classmethod
    def from_entity(cls, message: ChannelMessage) -> ChannelMessageDTO:
        return cls(
            id=message.id.value,
            channel_name=message.channel.value,
            content=message.content,
            sender=message.sender,
            from_user=message.sender,
            created_at=message.created_at,
        )


class DirectMessageDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    from_user: str = Field(alias="from")
    to_user: str = Field(alias="to")
    text: str
    created_at: str = Field(alias="createdAt")

    @classmethod
    def from_entity(cls, message: DirectMessage) -> DirectMessageDTO:
        return cls(
            id=message.id.value,
            from_user=message.sender,
            to_user=message.recipient,
            text=message.text,
            created_at=message.created_at,
        )


class UserSummaryDTO(BaseModel):
    username: str

    @classmethod
    def from_entity(cls, user: User) -> UserSummaryDTO:
        return cls(username=user.username.value)
