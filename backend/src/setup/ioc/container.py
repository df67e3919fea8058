"""
Dishka DI Container Setup.

- Registers all dependencies (store, security adapters, handlers)
- Maps abstract ports to concrete implementations
- Manages lifecycle: Scope.APP = one per container, Scope.REQUEST = per HTTP request

Flow:
  Container → provides → KeyedChatStore(KeyValueStore) → to → CreateChannelHandler
                                    ↓
                            uses ChatStore interface
"""

from typing import AsyncIterable, Optional

from dishka import Provider, Scope, make_async_container, provide, AsyncContainer

from src.application.commands.auth import LoginUserHandler, RegisterUserHandler
from src.application.commands.channels import CreateChannelHandler
from src.application.commands.dm import SendDirectMessageHandler
from src.application.commands.messages import PostChannelMessageHandler
from src.application.commands.users import UpdateStatusHandler
from src.application.queries.channels import ListChannelsHandler
from src.application.queries.dm import GetDmThreadHandler
from src.application.queries.messages import (
    ListAllMessagesHandler,
    ListChannelMessagesHandler,
)
from src.application.queries.users import ListUsersHandler
from src.config.settings import Config, get_config
from src.domain.ports.key_value_store import KeyValueStore
from src.domain.ports.repositories import ChatStore
from src.domain.ports.security import PasswordHasher, TokenService
from src.domain.services.access_policy import AccessPolicy
from src.domain.services.identity_resolver import IdentityResolver
from src.infrastructure.persistence import KeyedChatStore
from src.infrastructure.security import JwtTokenService, PasslibPasswordHasher
from src.infrastructure.storage import (
    MemoryKeyValueStore,
    RedisKeyValueStore,
    create_redis_client,
)


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers all dependencies and their implementations.
    """

    def __init__(self, config: type[Config] = Config):
        super().__init__()
        self._config = config

    # ==================== KEY-VALUE STORE ====================

    @provide(scope=Scope.APP)
    async def get_key_value_store(self) -> AsyncIterable[KeyValueStore]:
        """
        Provide the keyed store (singleton, app-scoped).

        - "memory": process-local, used by tests and local runs
        - "redis": one hash per partition; connection closed when the container closes
        """
        if self._config.STORE_BACKEND == "memory":
            yield MemoryKeyValueStore()
            return
        if self._config.STORE_BACKEND != "redis":
            raise ValueError(f"Unknown STORE_BACKEND: {self._config.STORE_BACKEND}")

        client = await create_redis_client(self._config.REDIS_URL)
        store = RedisKeyValueStore(client, key_prefix=self._config.REDIS_KEY_PREFIX)
        yield store
        await store.close()

    # ==================== SECURITY ====================

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        return PasslibPasswordHasher(rounds=self._config.BCRYPT_ROUNDS)

    @provide(scope=Scope.APP)
    def get_token_service(self) -> TokenService:
        return JwtTokenService(
            secret=self._config.JWT_SECRET,
            algorithm=self._config.JWT_ALGORITHM,
            ttl_seconds=self._config.TOKEN_TTL_SECONDS,
        )

    @provide(scope=Scope.APP)
    def get_identity_resolver(self, token_service: TokenService) -> IdentityResolver:
        return IdentityResolver(token_service)

    @provide(scope=Scope.APP)
    def get_access_policy(self) -> AccessPolicy:
        return AccessPolicy()

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_chat_store(self, store: KeyValueStore) -> ChatStore:
        """
        - Return type is ABSTRACT (ChatStore)
        - Implementation is CONCRETE (KeyedChatStore)
        """
        return KeyedChatStore(store)

    # ==================== AUTH HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_register_user_handler(
        self,
        chat_store: ChatStore,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> RegisterUserHandler:
        return RegisterUserHandler(chat_store, password_hasher, token_service)

    @provide(scope=Scope.REQUEST)
    def get_login_user_handler(
        self,
        chat_store: ChatStore,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> LoginUserHandler:
        return LoginUserHandler(chat_store, password_hasher, token_service)

    # ==================== CHANNEL HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_channel_handler(self, chat_store: ChatStore) -> CreateChannelHandler:
        return CreateChannelHandler(chat_store)

    @provide(scope=Scope.REQUEST)
    def get_list_channels_handler(
        self, chat_store: ChatStore, access_policy: AccessPolicy
    ) -> ListChannelsHandler:
        return ListChannelsHandler(chat_store, access_policy)

    # ==================== MESSAGE HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_post_channel_message_handler(
        self, chat_store: ChatStore, access_policy: AccessPolicy
    ) -> PostChannelMessageHandler:
        return PostChannelMessageHandler(chat_store, access_policy)

    @provide(scope=Scope.REQUEST)
    def get_list_channel_messages_handler(
        self, chat_store: ChatStore, access_policy: AccessPolicy
    ) -> ListChannelMessagesHandler:
        return ListChannelMessagesHandler(chat_store, access_policy)

    @provide(scope=Scope.REQUEST)
    def get_list_all_messages_handler(self, chat_store: ChatStore) -> ListAllMessagesHandler:
        return ListAllMessagesHandler(chat_store)

    # ==================== DM HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_send_direct_message_handler(
        self, chat_store: ChatStore, access_policy: AccessPolicy
    ) -> SendDirectMessageHandler:
        return SendDirectMessageHandler(chat_store, access_policy)

    @provide(scope=Scope.REQUEST)
    def get_dm_thread_handler(
        self, chat_store: ChatStore, access_policy: AccessPolicy
    ) -> GetDmThreadHandler:
        return GetDmThreadHandler(chat_store, access_policy)

    # ==================== USER HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_list_users_handler(self, chat_store: ChatStore) -> ListUsersHandler:
        return ListUsersHandler(chat_store)

    @provide(scope=Scope.REQUEST)
    def get_update_status_handler(self, chat_store: ChatStore) -> UpdateStatusHandler:
        return UpdateStatusHandler(chat_store)


def create_container(config: Optional[type[Config]] = None) -> AsyncContainer:
    """
    Create and configure the DI container.

    - config defaults to the settings class selected by APP_ENV
    - make_async_container() creates the container with all providers
    - Call this ONCE per application instance
    """
    return make_async_container(AppProvider(config or get_config()))
