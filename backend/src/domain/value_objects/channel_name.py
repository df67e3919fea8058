"""
ChannelName Value Object.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChannelName:
    value: str

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValueError("Channel name cannot be empty")

    def __str__(self) -> str:
        return self.value
