"""
User Entity - A registered chat account.
"""

from __future__ import annotations
from dataclasses import dataclass
from uuid import uuid4

from src.domain.value_objects.username import Username
from src.utils.time_utils import utc_now_iso


@dataclass
class User:
    id: str
    username: Username
    password_hash: str
    online: bool = False
    last_active: str = ""

    @classmethod
    def register(cls, username: Username, password_hash: str) -> User:
        """Factory for a freshly registered, offline user."""
        return cls(
            id=str(uuid4()),
            username=username,
            password_hash=password_hash,
            online=False,
            last_active=utc_now_iso(),
        )
