"""
Authentication Dependencies for FastAPI.

- Reads the bearer token from the Authorization header
- Resolves it through the IdentityResolver held by the Dishka container
- get_current_identity: login required (401 missing token, 403 bad/expired token)
- get_optional_caller: login optional, anything short of a valid token is a Guest
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.domain.services.identity_resolver import IdentityResolver
from src.domain.value_objects.caller import Caller, Identity

# auto_error=False: a missing header must reach the resolver, which decides
# between 401 (login required) and Guest (login optional)
security = HTTPBearer(auto_error=False)


def _credential(credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    if credentials is None:
        return None
    return credentials.credentials.strip() or None


async def _resolver(request: Request) -> IdentityResolver:
    # Request-scoped container opened by the Dishka middleware
    return await request.state.dishka_container.get(IdentityResolver)


async def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Identity:
    """
    Raises:
        UnauthenticatedError (401) if no token is sent
        InvalidCredentialError (403) if the token is invalid or expired
    """
    resolver = await _resolver(request)
    return resolver.resolve_mandatory(_credential(credentials))


async def get_optional_caller(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Caller:
    resolver = await _resolver(request)
    return resolver.resolve_optional(_credential(credentials))
