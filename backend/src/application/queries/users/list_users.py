"""List Users Query - Everyone registered, for the DM list."""

from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.domain.entities.user import User
from src.domain.ports.repositories import ChatStore


@dataclass(frozen=True)
class ListUsersQuery(Query[list[User]]):
    pass


class ListUsersHandler(QueryHandler[list[User]]):
    def __init__(self, chat_store: ChatStore):
        self._chat_store = chat_store

    async def execute(self, query: ListUsersQuery) -> list[User]:
        return await self._chat_store.list_users()
