"""
Get DM Thread Query - Messages between the caller and one other user.

The caller is always one side of the pair, so a user can only ever read
their own threads. Results come back oldest first.
"""

from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.domain.entities.direct_message import DirectMessage
from src.domain.exceptions import ValidationFailedError
from src.domain.ports.repositories import ChatStore
from src.domain.services.access_policy import AccessPolicy
from src.domain.value_objects.caller import Identity
from src.domain.value_objects.dm_thread import DmThread


@dataclass(frozen=True)
class GetDmThreadQuery(Query[list[DirectMessage]]):
    identity: Identity
    other_user: str


class GetDmThreadHandler(QueryHandler[list[DirectMessage]]):
    def __init__(self, chat_store: ChatStore, access_policy: AccessPolicy):
        self._chat_store = chat_store
        self._policy = access_policy

    async def execute(self, query: GetDmThreadQuery) -> list[DirectMessage]:
        me = query.identity.username.canonical
        other = query.other_user.strip().lower()
        if not other or other == me:
            raise ValidationFailedError("Cannot open a direct message thread with yourself")

        self._policy.ensure_dm_access(query.identity, DmThread.between(me, other))

        return await self._chat_store.list_dm_thread(me, other)
