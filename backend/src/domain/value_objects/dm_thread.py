"""
DmThread Value Object - The unordered pair of usernames a direct message belongs to.

There is no stored thread record. A thread is just the set of DM messages
sharing the same canonical pair, so (alice, bob) and (Bob, ALICE) are equal.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class DmThread:
    first: str
    second: str

    def __post_init__(self):
        if not self.first or not self.second:
            raise ValueError("A DM thread needs two usernames")
        if self.first == self.second:
            raise ValueError("A DM thread needs two distinct usernames")
        if self.first > self.second:
            raise ValueError("DmThread participants must be in canonical order")

    @classmethod
    def between(cls, user_a: str, user_b: str) -> DmThread:
        """Canonicalize a pair: lower-case both names, then sort them."""
        low, high = sorted((user_a.lower(), user_b.lower()))
        return cls(low, high)

    @property
    def participants(self) -> tuple[str, str]:
        return (self.first, self.second)

    def includes(self, username: str) -> bool:
        return username.lower() in self.participants
