"""Channel message commands."""

from .post_channel_message import PostChannelMessageCommand, PostChannelMessageHandler

__all__ = [
    "PostChannelMessageCommand",
    "PostChannelMessageHandler",
]
