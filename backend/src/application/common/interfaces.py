"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class CreateChannelCommand(Command[Channel]):
        name: ChannelName
        locked: bool

    class CreateChannelHandler(CommandHandler[Channel]):
        def __init__(self, chat_store: ChatStore):
            self._chat_store = chat_store

        async def execute(self, command: CreateChannelCommand) -> Channel:
            channel = Channel.create(command.name, command.locked)
            await self._chat_store.create_channel(channel)
            return channel
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")


class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass


class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...


class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
