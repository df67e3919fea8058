"""
Password hashing with passlib's CryptContext (bcrypt scheme).

bcrypt is CPU-bound, so hashing and verification run in a worker thread
to keep the event loop free.
"""

import asyncio
import logging

from passlib.context import CryptContext

from src.config.settings import Config
from src.domain.ports.security import PasswordHasher

logger = logging.getLogger(__name__)


class PasslibPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = Config.BCRYPT_ROUNDS):
        self._context = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds
        )

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(self._context.hash, password)

    async def verify(self, password: str, digest: str) -> bool:
        try:
            return await asyncio.to_thread(self._context.verify, password, digest)
        except ValueError:
            # Malformed or unknown digest format
            logger.warning("[Auth] Stored password digest could not be parsed")
            return False
