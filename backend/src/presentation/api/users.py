"""
Users API Router.

GET  /api/users           public: usernames only, never password digests
POST /api/users/status    login required: set the caller's own online flag
POST /api/users/register  public: create an account without issuing a token
"""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.application.commands.auth import RegisterUserCommand, RegisterUserHandler
from src.application.commands.users import UpdateStatusCommand, UpdateStatusHandler
from src.application.dto import UserSummaryDTO
from src.application.queries.users import ListUsersHandler, ListUsersQuery
from src.domain.value_objects.caller import Identity
from src.domain.value_objects.username import Username
from src.presentation.api.schemas import CredentialsRequest, UpdateStatusRequest
from src.presentation.dependencies.auth import get_current_identity


class StatusResponse(BaseModel):
    message: str


class RegisteredUserResponse(BaseModel):
    message: str
    username: str


router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserSummaryDTO])
@inject
async def list_users(handler: FromDishka[ListUsersHandler]):
    users = await handler.execute(ListUsersQuery())
    return [UserSummaryDTO.from_entity(user) for user in users]


@router.post("/status", response_model=StatusResponse)
@inject
async def update_status(
    request: UpdateStatusRequest,
    handler: FromDishka[UpdateStatusHandler],
    identity: Identity = Depends(get_current_identity),
):
    await handler.execute(UpdateStatusCommand(identity=identity, online=request.online))
    return StatusResponse(message="Status updated")


@router.post(
    "/register",
    response_model=RegisteredUserResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def register_without_login(
    request: CredentialsRequest,
    handler: FromDishka[RegisterUserHandler],
):
    """Older registration endpoint: same rules as /api/auth/register, no token."""
    result = await handler.execute(
        RegisterUserCommand(
            username=Username(request.username),
            password=request.password,
            issue_token=False,
        )
    )
    return RegisteredUserResponse(message="User registered successfully", username=result.username)
