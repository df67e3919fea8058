"""
Send Direct Message Command.

The sender always comes from the verified token, never from the request
body. Both names are lower-cased; the message lands in the canonical
thread partition shared by both directions.
"""

from dataclasses import dataclass

from src.application.common.interfaces import Command, CommandHandler
from src.domain.entities.direct_message import DirectMessage
from src.domain.exceptions import ValidationFailedError
from src.domain.ports.repositories import ChatStore
from src.domain.services.access_policy import AccessPolicy
from src.domain.value_objects.caller import Identity
from src.domain.value_objects.dm_thread import DmThread


@dataclass(frozen=True)
class SendDirectMessageCommand(Command[DirectMessage]):
    sender: Identity
    to_user: str
    text: str


class SendDirectMessageHandler(CommandHandler[DirectMessage]):
    def __init__(self, chat_store: ChatStore, access_policy: AccessPolicy):
        self._chat_store = chat_store
        self._policy = access_policy

    async def execute(self, command: SendDirectMessageCommand) -> DirectMessage:
        if not command.text.strip():
            raise ValidationFailedError("Message text cannot be empty")

        sender = command.sender.username.canonical
        recipient = command.to_user.strip().lower()
        if not recipient:
            raise ValidationFailedError("Recipient username is required")
        if sender == recipient:
            raise ValidationFailedError("Cannot send a direct message to yourself")

        self._policy.ensure_dm_access(command.sender, DmThread.between(sender, recipient))

        message = DirectMessage.create(sender=sender, recipient=recipient, text=command.text)
        await self._chat_store.append_dm_message(message)
        return message
