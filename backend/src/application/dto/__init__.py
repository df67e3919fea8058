"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- chat.py → ChannelDTO, ChannelMessageDTO, DirectMessageDTO, UserSummaryDTO

Note: These are different from domain entities.
DTOs are for API output, entities are for business logic.
"""

from src.application.dto.chat import (
    ChannelDTO,
    ChannelMessageDTO,
    DirectMessageDTO,
    UserSummaryDTO,
)

__all__ = [
    "ChannelDTO",
    "ChannelMessageDTO",
    "DirectMessageDTO",
    "UserSummaryDTO",
]
