"""
Post Channel Message Command.

Order of checks:
1. Body already validated (non-blank) at the HTTP boundary
2. Channel must exist (EntityNotFoundError)
3. Access policy: guests cannot post to locked channels (LoginRequiredError)

The author is the caller's display name: the username for a logged-in
caller, "Guest" otherwise.
"""

from dataclasses import dataclass

from src.application.common.interfaces import Command, CommandHandler
from src.domain.entities.channel_message import ChannelMessage
from src.domain.exceptions import EntityNotFoundError, ValidationFailedError
from src.domain.ports.repositories import ChatStore
from src.domain.services.access_policy import AccessPolicy, Operation
from src.domain.value_objects.caller import Caller
from src.domain.value_objects.channel_name import ChannelName


@dataclass(frozen=True)
class PostChannelMessageCommand(Command[ChannelMessage]):
    channel_name: ChannelName
    caller: Caller
    content: str


class PostChannelMessageHandler(CommandHandler[ChannelMessage]):
    def __init__(self, chat_store: ChatStore, access_policy: AccessPolicy):
        self._chat_store = chat_store
        self._policy = access_policy

    async def execute(self, command: PostChannelMessageCommand) -> ChannelMessage:
        if not command.content.strip():
            raise ValidationFailedError("Message content is required")

        channel = await self._chat_store.find_channel_by_name(command.channel_name)
        if not channel:
            raise EntityNotFoundError("Channel not found")

        self._policy.ensure_channel_access(command.caller, channel, Operation.WRITE)

        message = ChannelMessage.create(
            channel=channel.name,
            sender=command.caller.display_name,
            content=command.content,
        )
        await self._chat_store.append_channel_message(message)
        return message
