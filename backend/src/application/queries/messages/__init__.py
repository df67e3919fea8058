"""Channel message queries."""

from .list_channel_messages import ListChannelMessagesQuery, ListChannelMessagesHandler
from .list_all_messages import ListAllMessagesQuery, ListAllMessagesHandler

__all__ = [
    "ListChannelMessagesQuery",
    "ListChannelMessagesHandler",
    "ListAllMessagesQuery",
    "ListAllMessagesHandler",
]
