"""Channel commands."""

from .create_channel import CreateChannelCommand, CreateChannelHandler

__all__ = [
    "CreateChannelCommand",
    "CreateChannelHandler",
]
