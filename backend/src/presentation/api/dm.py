"""
Direct Messages API Router. Login is always required.

GET  /api/dm/{username}  the thread between the caller and username, oldest first
POST /api/dm             send {toUser, text}; the sender is taken from the token
"""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status

from src.application.commands.dm import SendDirectMessageCommand, SendDirectMessageHandler
from src.application.dto import DirectMessageDTO
from src.application.queries.dm import GetDmThreadHandler, GetDmThreadQuery
from src.domain.value_objects.caller import Identity
from src.presentation.api.schemas import SendDirectMessageRequest
from src.presentation.dependencies.auth import get_current_identity

router = APIRouter(prefix="/api/dm", tags=["dm"])


@router.get("/{username}", response_model=list[DirectMessageDTO])
@inject
async def get_dm_thread(
    username: str,
    handler: FromDishka[GetDmThreadHandler],
    identity: Identity = Depends(get_current_identity),
):
    messages = await handler.execute(GetDmThreadQuery(identity=identity, other_user=username))
    return [DirectMessageDTO.from_entity(message) for message in messages]


@router.post("", response_model=DirectMessageDTO, status_code=status.HTTP_201_CREATED)
@inject
async def send_direct_message(
    request: SendDirectMessageRequest,
    handler: FromDishka[SendDirectMessageHandler],
    identity: Identity = Depends(get_current_identity),
):
    message = await handler.execute(
        SendDirectMessageCommand(sender=identity, to_user=request.toUser, text=request.text)
    )
    return DirectMessageDTO.from_entity(message)
