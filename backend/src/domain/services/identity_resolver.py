"""
Identity Resolver - Turns a bearer credential into a Caller.

Two modes:
- resolve_mandatory: endpoints that act as a named user (create channel, send DM,
  update own status). Missing credential -> UnauthenticatedError (401),
  bad/expired credential -> InvalidCredentialError (403).
- resolve_optional: endpoints open to guests (channel listing, open-channel
  messages). Missing or bad credential both degrade to GUEST; never raises.

No side effects: the result depends only on the credential and the token service.
"""

from typing import Optional

from src.domain.exceptions import InvalidCredentialError, UnauthenticatedError
from src.domain.ports.security import TokenService
from src.domain.value_objects.caller import GUEST, Caller, Identity
from src.domain.value_objects.username import Username


class IdentityResolver:
    def __init__(self, token_service: TokenService):
        self._tokens = token_service

    def _verify(self, credential: str) -> Optional[Identity]:
        subject = self._tokens.validate(credential)
        if not subject:
            return None
        return Identity(username=Username(subject))

    def resolve(self, credential: Optional[str]) -> Caller:
        """Tagged result: Identity when the credential verifies, GUEST otherwise."""
        if not credential:
            return GUEST
        return self._verify(credential) or GUEST

    def resolve_optional(self, credential: Optional[str]) -> Caller:
        return self.resolve(credential)

    def resolve_mandatory(self, credential: Optional[str]) -> Identity:
        if not credential:
            raise UnauthenticatedError()
        caller = self.resolve(credential)
        if not isinstance(caller, Identity):
            raise InvalidCredentialError()
        return caller
