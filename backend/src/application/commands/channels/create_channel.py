"""
Create Channel Command.

The locked flag is fixed at creation. Channel names are unique; the check
and the write are separate store calls.
"""

from dataclasses import dataclass
from logging import getLogger

from src.application.common.interfaces import Command, CommandHandler
from src.domain.entities.channel import Channel
from src.domain.exceptions import ConflictError
from src.domain.ports.repositories import ChatStore
from src.domain.value_objects.caller import Identity
from src.domain.value_objects.channel_name import ChannelName

logger = getLogger(__name__)


@dataclass(frozen=True)
class CreateChannelCommand(Command[Channel]):
    name: ChannelName
    created_by: Identity
    locked: bool = False


class CreateChannelHandler(CommandHandler[Channel]):
    def __init__(self, chat_store: ChatStore):
        self._chat_store = chat_store

    async def execute(self, command: CreateChannelCommand) -> Channel:
        if await self._chat_store.find_channel_by_name(command.name):
            raise ConflictError("Channel already exists")

        channel = Channel.create(command.name, locked=command.locked)
        await self._chat_store.create_channel(channel)
        logger.info(
            f"[Channels] {command.created_by.display_name} created "
            f"{'locked' if channel.locked else 'open'} channel {channel.name}"
        )
        return channel
