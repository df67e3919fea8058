"""
List Channel Messages Query.

Steps:
1. Verify the channel exists (EntityNotFoundError)
2. Access policy: guests cannot read locked channels (LoginRequiredError)
3. Load the channel partition, oldest first
"""

from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.domain.entities.channel_message import ChannelMessage
from src.domain.exceptions import EntityNotFoundError
from src.domain.ports.repositories import ChatStore
from src.domain.services.access_policy import AccessPolicy, Operation
from src.domain.value_objects.caller import Caller
from src.domain.value_objects.channel_name import ChannelName


@dataclass(frozen=True)
class ListChannelMessagesQuery(Query[list[ChannelMessage]]):
    channel_name: ChannelName
    caller: Caller


class ListChannelMessagesHandler(QueryHandler[list[ChannelMessage]]):
    def __init__(self, chat_store: ChatStore, access_policy: AccessPolicy):
        self._chat_store = chat_store
        self._policy = access_policy

    async def execute(self, query: ListChannelMessagesQuery) -> list[ChannelMessage]:
        channel = await self._chat_store.find_channel_by_name(query.channel_name)
        if not channel:
            raise EntityNotFoundError("Channel not found")

        self._policy.ensure_channel_access(query.caller, channel, Operation.READ)

        return await self._chat_store.list_channel_messages(channel.name)
