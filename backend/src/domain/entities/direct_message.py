"""
DirectMessage Entity - A private message between two users.
"""

from __future__ import annotations
from dataclasses import dataclass

from src.domain.value_objects.message_id import MessageId
from src.utils.time_utils import utc_now_iso


@dataclass(frozen=True)
class DirectMessage:
    id: MessageId
    sender: str
    recipient: str
    text: str
    created_at: str

    def __post_init__(self):
        if self.sender != self.sender.lower() or self.recipient != self.recipient.lower():
            raise ValueError("DM participants are stored lower-cased")

    @classmethod
    def create(cls, sender: str, recipient: str, text: str) -> DirectMessage:
        return cls(
            id=MessageId.generate(),
            sender=sender.lower(),
            recipient=recipient.lower(),
            text=text,
            created_at=utc_now_iso(),
        )
