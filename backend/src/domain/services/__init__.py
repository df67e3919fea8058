"""
DOMAIN SERVICES - Pure rules with no I/O.

- identity_resolver.py → bearer credential → Identity or Guest
- access_policy.py     → who may read/write which channel or DM thread
"""

from src.domain.services.identity_resolver import IdentityResolver
from src.domain.services.access_policy import AccessPolicy, Operation

__all__ = [
    "IdentityResolver",
    "AccessPolicy",
    "Operation",
]
