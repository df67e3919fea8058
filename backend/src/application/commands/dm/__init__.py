"""Direct message commands."""

from .send_direct_message import SendDirectMessageCommand, SendDirectMessageHandler

__all__ = [
    "SendDirectMessageCommand",
    "SendDirectMessageHandler",
]
