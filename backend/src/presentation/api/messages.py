"""
Channel Messages API Router.

GET  /api/messages/{channel_name}  login optional: locked channels need a login
POST /api/messages/{channel_name}  login optional: guests post as "Guest", open channels only
GET  /api/messages                 login required: every channel message
"""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from src.application.commands.messages import (
    PostChannelMessageCommand,
    PostChannelMessageHandler,
)
from src.application.dto import ChannelMessageDTO
from src.application.queries.messages import (
    ListAllMessagesHandler,
    ListAllMessagesQuery,
    ListChannelMessagesHandler,
    ListChannelMessagesQuery,
)
from src.domain.exceptions import EntityNotFoundError
from src.domain.value_objects.caller import Caller
from src.domain.value_objects.channel_name import ChannelName
from src.presentation.api.schemas import PostMessageRequest
from src.presentation.dependencies.auth import get_current_identity, get_optional_caller


class PostMessageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    message_item: ChannelMessageDTO = Field(alias="messageItem")


router = APIRouter(prefix="/api/messages", tags=["messages"])


def _channel_name(raw: str) -> ChannelName:
    # A blank path segment cannot name any channel
    try:
        return ChannelName(raw)
    except ValueError as e:
        raise EntityNotFoundError("Channel not found") from e


@router.get(
    "",
    response_model=list[ChannelMessageDTO],
    dependencies=[Depends(get_current_identity)],
)
@inject
async def list_all_messages(handler: FromDishka[ListAllMessagesHandler]):
    messages = await handler.execute(ListAllMessagesQuery())
    return [ChannelMessageDTO.from_entity(message) for message in messages]


@router.get("/{channel_name}", response_model=list[ChannelMessageDTO])
@inject
async def list_channel_messages(
    channel_name: str,
    handler: FromDishka[ListChannelMessagesHandler],
    caller: Caller = Depends(get_optional_caller),
):
    messages = await handler.execute(
        ListChannelMessagesQuery(channel_name=_channel_name(channel_name), caller=caller)
    )
    return [ChannelMessageDTO.from_entity(message) for message in messages]


@router.post(
    "/{channel_name}",
    response_model=PostMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def post_channel_message(
    channel_name: str,
    request: PostMessageRequest,
    handler: FromDishka[PostChannelMessageHandler],
    caller: Caller = Depends(get_optional_caller),
):
    message = await handler.execute(
        PostChannelMessageCommand(
            channel_name=_channel_name(channel_name),
            caller=caller,
            content=request.body,
        )
    )
    return PostMessageResponse(
        message="Message sent successfully",
        message_item=ChannelMessageDTO.from_entity(message),
    )
