"""
Channel Entity - A named room. Locked channels require login to read or post.
"""

from __future__ import annotations
from dataclasses import dataclass
from uuid import uuid4

from src.domain.value_objects.channel_name import ChannelName


@dataclass(frozen=True)
class Channel:
    id: str
    name: ChannelName
    locked: bool = False

    @classmethod
    def create(cls, name: ChannelName, locked: bool = False) -> Channel:
        return cls(id=str(uuid4()), name=name, locked=locked)
