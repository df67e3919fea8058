"""List Channels Query - Guests only see open channels."""

from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.domain.entities.channel import Channel
from src.domain.ports.repositories import ChatStore
from src.domain.services.access_policy import AccessPolicy
from src.domain.value_objects.caller import Caller


@dataclass(frozen=True)
class ListChannelsQuery(Query[list[Channel]]):
    caller: Caller


class ListChannelsHandler(QueryHandler[list[Channel]]):
    def __init__(self, chat_store: ChatStore, access_policy: AccessPolicy):
        self._chat_store = chat_store
        self._policy = access_policy

    async def execute(self, query: ListChannelsQuery) -> list[Channel]:
        channels = await self._chat_store.list_all_channels()
        return self._policy.filter_visible(query.caller, channels)
