"""
API Routers - FastAPI endpoint definitions.
"""

from src.presentation.api.auth import router as auth_router
from src.presentation.api.channels import router as channels_router
from src.presentation.api.messages import router as messages_router
from src.presentation.api.dm import router as dm_router
from src.presentation.api.users import router as users_router
from src.presentation.api.metrics import router as metrics_router

__all__ = [
    "auth_router",
    "channels_router",
    "messages_router",
    "dm_router",
    "users_router",
    "metrics_router",
]
