"""
Caller - Who is making the current request.

A tagged variant: either a verified Identity (a token resolved to a username)
or a Guest (no credential, or one that failed verification on an endpoint
where login is optional).
"""

from dataclasses import dataclass
from typing import Union

from src.domain.value_objects.username import Username

GUEST_DISPLAY_NAME = "Guest"


@dataclass(frozen=True)
class Identity:
    username: Username

    @property
    def display_name(self) -> str:
        return self.username.value


@dataclass(frozen=True)
class Guest:
    @property
    def display_name(self) -> str:
        return GUEST_DISPLAY_NAME


GUEST = Guest()

Caller = Union[Identity, Guest]
