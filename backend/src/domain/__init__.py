"""
DOMAIN LAYER

This layer contains:
- Entities: User, Channel, ChannelMessage, DirectMessage
- Value Objects: Username, ChannelName, MessageId, DmThread, Identity/Guest
- Ports: KeyValueStore, ChatStore, PasswordHasher, TokenService
- Services: IdentityResolver and AccessPolicy (pure decisions, no I/O)
- Exceptions: one DomainError subclass per kind of failure

RULES:
1. NO framework imports (no FastAPI, Redis, Pydantic, etc.)
2. NO I/O operations (ports are implemented in the infrastructure layer)
3. Only depends on Python stdlib
"""
