"""List All Messages Query - Every channel message. The route requires a login."""

from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.domain.entities.channel_message import ChannelMessage
from src.domain.ports.repositories import ChatStore


@dataclass(frozen=True)
class ListAllMessagesQuery(Query[list[ChannelMessage]]):
    pass


class ListAllMessagesHandler(QueryHandler[list[ChannelMessage]]):
    def __init__(self, chat_store: ChatStore):
        self._chat_store = chat_store

    async def execute(self, query: ListAllMessagesQuery) -> list[ChannelMessage]:
        return await self._chat_store.list_all_channel_messages()
