"""
Register User Command.

Steps:
1. Reject the name if a user with it already exists, ignoring case (ConflictError).
   Direct messages address users case-insensitively, so "ALICE" and "alice"
   must not be two accounts.
2. Hash the password
3. Store the new user (offline, last-active = now)
4. Issue a token so the client is logged in right away (optional)

The existence check and the write are two separate store calls. Two
concurrent registrations of the same name can both pass step 1; the later
write wins.
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from src.application.common.interfaces import Command, CommandHandler
from src.domain.entities.user import User
from src.domain.exceptions import ConflictError
from src.domain.ports.repositories import ChatStore
from src.domain.ports.security import PasswordHasher, TokenService
from src.domain.value_objects.username import Username

logger = getLogger(__name__)


@dataclass(frozen=True)
class RegisterUserResult:
    username: str
    token: Optional[str]


@dataclass(frozen=True)
class RegisterUserCommand(Command[RegisterUserResult]):
    username: Username
    password: str
    issue_token: bool = True


class RegisterUserHandler(CommandHandler[RegisterUserResult]):
    def __init__(
        self,
        chat_store: ChatStore,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self._chat_store = chat_store
        self._hasher = password_hasher
        self._tokens = token_service

    async def execute(self, command: RegisterUserCommand) -> RegisterUserResult:
        if await self._chat_store.is_username_taken(command.username):
            raise ConflictError("Username already exists")

        digest = await self._hasher.hash(command.password)
        user = User.register(command.username, digest)
        await self._chat_store.create_user(user)
        logger.info(f"[Auth] Registered user {user.username}")

        token = self._tokens.issue(user.username.value) if command.issue_token else None
        return RegisterUserResult(username=user.username.value, token=token)
