"""
Auth API Router - Registration, login and logout.

Flow:
  HTTP Request → Router → Command → Handler → ChatStore / PasswordHasher / TokenService
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from src.application.commands.auth import (
    LoginUserCommand,
    LoginUserHandler,
    RegisterUserCommand,
    RegisterUserHandler,
)
from src.domain.value_objects.username import Username
from src.presentation.api.schemas import CredentialsRequest, LogoutRequest

logger = getLogger(__name__)


# ==================== RESPONSE MODELS ====================


class TokenResponse(BaseModel):
    message: str
    token: str
    username: str


class MessageResponse(BaseModel):
    message: str


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/auth", tags=["auth"])


# ==================== ENDPOINTS ====================


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def register(
    request: CredentialsRequest,
    handler: FromDishka[RegisterUserHandler],
):
    """Create a new user and log them in right away."""
    result = await handler.execute(
        RegisterUserCommand(username=Username(request.username), password=request.password)
    )
    return TokenResponse(
        message="User registered successfully",
        token=result.token,
        username=result.username,
    )


@router.post("/login", response_model=TokenResponse, status_code=status.HTTP_200_OK)
@inject
async def login(
    request: CredentialsRequest,
    handler: FromDishka[LoginUserHandler],
):
    result = await handler.execute(
        LoginUserCommand(username=Username(request.username), password=request.password)
    )
    return TokenResponse(message="Login successful", token=result.token, username=result.username)


@router.post("/logout", response_model=MessageResponse, status_code=status.HTTP_200_OK)
async def logout(request: Optional[LogoutRequest] = None):
    """
    Tokens are stateless, so logging out is the client discarding its token.
    The endpoint only acknowledges it.
    """
    if request is None or not request.username:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username required")

    logger.info(f"[Auth] {request.username} logged out")
    return MessageResponse(message="Logged out")
