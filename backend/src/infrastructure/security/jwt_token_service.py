"""
Bearer tokens as HS256 JWTs (PyJWT).

Claims:
- username / sub: the account the token was issued to
- iat, exp: issue time and expiry (Config.TOKEN_TTL_SECONDS, one hour by default)
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from src.config.settings import Config
from src.domain.ports.security import TokenService

logger = logging.getLogger(__name__)


class JwtTokenService(TokenService):
    def __init__(
        self,
        secret: str = Config.JWT_SECRET,
        algorithm: str = Config.JWT_ALGORITHM,
        ttl_seconds: int = Config.TOKEN_TTL_SECONDS,
    ):
        if not secret:
            raise ValueError("JWT_SECRET must be configured to sign tokens")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = timedelta(seconds=ttl_seconds)

    def issue(self, subject: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": subject,
            "username": subject,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def validate(self, token: str) -> Optional[str]:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("[Auth] Rejected expired token")
            return None
        except jwt.InvalidTokenError as e:
            logger.info(f"[Auth] Rejected invalid token: {e}")
            return None

        username = claims.get("username") or claims.get("sub")
        if not username or not isinstance(username, str):
            logger.info("[Auth] Token is missing the username claim")
            return None
        return username
