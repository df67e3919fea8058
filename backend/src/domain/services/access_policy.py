"""
Access Policy - Decides whether a caller may read or write a channel or DM thread.

Rules:
- Guests see and use open channels only. A locked channel is invisible to a
  guest in listings, and reading or posting to it raises LoginRequiredError.
- Any authenticated user sees every channel; there is no owner/admin tier.
- DM threads have no guest path. The caller must be one of the two participants.

Callers resolve "does the channel exist" (EntityNotFoundError) before asking
the policy, and validate input before that.
"""

from enum import Enum
from typing import Iterable

from src.domain.entities.channel import Channel
from src.domain.exceptions import AccessDeniedError, LoginRequiredError
from src.domain.value_objects.caller import Caller, Identity
from src.domain.value_objects.dm_thread import DmThread


class Operation(str, Enum):
    READ = "read"
    WRITE = "write"


_LOGIN_REQUIRED = {
    Operation.READ: "Login required for locked channels",
    Operation.WRITE: "Login required to post in locked channels",
}


class AccessPolicy:
    def filter_visible(self, caller: Caller, channels: Iterable[Channel]) -> list[Channel]:
        if isinstance(caller, Identity):
            return list(channels)
        return [channel for channel in channels if not channel.locked]

    def can_access_channel(self, caller: Caller, channel: Channel) -> bool:
        return not (channel.locked and not isinstance(caller, Identity))

    def ensure_channel_access(
        self, caller: Caller, channel: Channel, operation: Operation
    ) -> None:
        if not self.can_access_channel(caller, channel):
            raise LoginRequiredError(_LOGIN_REQUIRED[operation])

    def ensure_dm_access(self, caller: Caller, thread: DmThread) -> Identity:
        if not isinstance(caller, Identity):
            raise AccessDeniedError("Login required for direct messages")
        if not thread.includes(caller.username.value):
            raise AccessDeniedError("You are not a participant in this conversation")
        return caller
