"""Request bodies of the Discord proxy endpoints."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SendNotificationRequest(BaseModel):
    """Body of POST /discord/send-notification.

    ``type`` is informational; the delivery mode is chosen by the targets:
    a non-empty ``userIds`` sends DMs, otherwise ``channelId`` broadcasts.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    type: Optional[str] = None
    channel_id: Optional[str] = Field(default=None, alias="channelId")
    message: Optional[str] = None
    embed: Optional[Dict[str, Any]] = None
    bot_token: Optional[str] = Field(default=None, alias="botToken")
    user_ids: Optional[List[str]] = Field(default=None, alias="userIds")


class TokenExchangeRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    code: Optional[str] = None
    redirect_uri: Optional[str] = None


class UserLookupRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    access_token: Optional[str] = None
