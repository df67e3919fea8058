"""
Request body models shared by the API routers.

Each rule raises its own human-readable reason (missing fields are validated
against their defaults too). The validation handler in fastapi_app.py returns
the collected reasons as a list with HTTP 400.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


def _min_length(value: str, length: int, reason: str) -> str:
    if len(value) < length:
        raise ValueError(reason)
    return value


class CredentialsRequest(BaseModel):
    """Body for register and login."""

    model_config = ConfigDict(validate_default=True)

    username: str = ""
    password: str = ""

    @field_validator("username")
    @classmethod
    def username_length(cls, value: str) -> str:
        return _min_length(value.strip(), 2, "Username must be at least 2 characters")

    @field_validator("password")
    @classmethod
    def password_length(cls, value: str) -> str:
        return _min_length(value, 4, "Password must be at least 4 characters")


class LogoutRequest(BaseModel):
    username: Optional[str] = None


class CreateChannelRequest(BaseModel):
    model_config = ConfigDict(validate_default=True)

    name: str = ""
    locked: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def name_length(cls, value: str) -> str:
        return _min_length(value.strip(), 2, "Channel name must be at least 2 characters")


class PostMessageRequest(BaseModel):
    """Channel post. Older clients send the body as "text" instead of "content"."""

    content: Optional[str] = None
    text: Optional[str] = None

    @model_validator(mode="after")
    def require_body(self):
        if not (self.content or self.text or "").strip():
            raise ValueError("Message content is required")
        return self

    @property
    def body(self) -> str:
        return self.content or self.text or ""


class SendDirectMessageRequest(BaseModel):
    model_config = ConfigDict(validate_default=True)

    toUser: str = ""
    text: str = ""

    @field_validator("toUser")
    @classmethod
    def recipient_required(cls, value: str) -> str:
        return _min_length(value.strip(), 1, "Recipient username is required")

    @field_validator("text")
    @classmethod
    def text_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Message text cannot be empty")
        return value


class UpdateStatusRequest(BaseModel):
    online: bool
