"""Login User Command - Check the password and issue a token."""

from dataclasses import dataclass
from logging import getLogger

from src.application.common.interfaces import Command, CommandHandler
from src.domain.exceptions import UnauthenticatedError
from src.domain.ports.repositories import ChatStore
from src.domain.ports.security import PasswordHasher, TokenService
from src.domain.value_objects.username import Username

logger = getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    username: str
    token: str


@dataclass(frozen=True)
class LoginUserCommand(Command[LoginResult]):
    username: Username
    password: str


class LoginUserHandler(CommandHandler[LoginResult]):
    def __init__(
        self,
        chat_store: ChatStore,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self._chat_store = chat_store
        self._hasher = password_hasher
        self._tokens = token_service

    async def execute(self, command: LoginUserCommand) -> LoginResult:
        user = await self._chat_store.find_user_by_name(command.username)
        if not user:
            raise UnauthenticatedError("User not found")

        if not await self._hasher.verify(command.password, user.password_hash):
            logger.info(f"[Auth] Wrong password for {command.username}")
            raise UnauthenticatedError("Invalid password")

        return LoginResult(
            username=user.username.value,
            token=self._tokens.issue(user.username.value),
        )
