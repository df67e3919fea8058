"""
Channels API Router.

GET  /api/channels      login optional: guests get open channels only
GET  /api/channels/all  login required: every channel
POST /api/channels      login required: create a channel (open unless locked=true)
"""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.application.commands.channels import CreateChannelCommand, CreateChannelHandler
from src.application.dto import ChannelDTO
from src.application.queries.channels import ListChannelsHandler, ListChannelsQuery
from src.domain.value_objects.caller import Caller, Identity
from src.domain.value_objects.channel_name import ChannelName
from src.presentation.api.schemas import CreateChannelRequest
from src.presentation.dependencies.auth import get_current_identity, get_optional_caller


class CreateChannelResponse(BaseModel):
    message: str
    channel: ChannelDTO


router = APIRouter(prefix="/api/channels", tags=["channels"])


@router.get("", response_model=list[ChannelDTO])
@inject
async def list_channels(
    handler: FromDishka[ListChannelsHandler],
    caller: Caller = Depends(get_optional_caller),
):
    channels = await handler.execute(ListChannelsQuery(caller=caller))
    return [ChannelDTO.from_entity(channel) for channel in channels]


@router.get("/all", response_model=list[ChannelDTO])
@inject
async def list_all_channels(
    handler: FromDishka[ListChannelsHandler],
    identity: Identity = Depends(get_current_identity),
):
    channels = await handler.execute(ListChannelsQuery(caller=identity))
    return [ChannelDTO.from_entity(channel) for channel in channels]


@router.post(
    "",
    response_model=CreateChannelResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_channel(
    request: CreateChannelRequest,
    handler: FromDishka[CreateChannelHandler],
    identity: Identity = Depends(get_current_identity),
):
    channel = await handler.execute(
        CreateChannelCommand(
            name=ChannelName(request.name),
            created_by=identity,
            locked=request.locked is True,
        )
    )
    return CreateChannelResponse(
        message="Channel created successfully",
        channel=ChannelDTO.from_entity(channel),
    )
