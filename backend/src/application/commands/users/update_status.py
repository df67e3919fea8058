"""Update Status Command - A user flips their own online flag."""

from dataclasses import dataclass

from src.application.common.interfaces import Command, CommandHandler
from src.domain.exceptions import EntityNotFoundError
from src.domain.ports.repositories import ChatStore
from src.domain.value_objects.caller import Identity


@dataclass(frozen=True)
class UpdateStatusCommand(Command[None]):
    identity: Identity
    online: bool


class UpdateStatusHandler(CommandHandler[None]):
    def __init__(self, chat_store: ChatStore):
        self._chat_store = chat_store

    async def execute(self, command: UpdateStatusCommand) -> None:
        found = await self._chat_store.set_user_online(
            command.identity.username, command.online
        )
        if not found:
            raise EntityNotFoundError("User not found")
