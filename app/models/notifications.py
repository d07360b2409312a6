"""Request bodies of the bot notification REST surface.

Fields are optional at the model level: the routes report missing fields
with a 400 and their own error message instead of a validation error.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BroadcastRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_ids: Any = Field(default=None, alias="userIds")

    def recipients(self) -> Optional[List[str]]:
        """Recipient IDs as strings, or None when userIds is not a list."""
        if not isinstance(self.user_ids, list):
            return None
        return [str(user_id) for user_id in self.user_ids]


class TournamentNotificationRequest(BroadcastRequest):
    tournament_name: Optional[str] = Field(default=None, alias="tournamentName")
    start_time: Optional[str] = Field(default=None, alias="startTime")
    message: Optional[str] = None


class MatchNotificationRequest(BroadcastRequest):
    team1_name: Optional[str] = Field(default=None, alias="team1Name")
    team2_name: Optional[str] = Field(default=None, alias="team2Name")
    match_time: Optional[str] = Field(default=None, alias="matchTime")
    map: Optional[str] = None


class AdminNotificationRequest(BroadcastRequest):
    title: Optional[str] = None
    message: Optional[str] = None
    type: Optional[str] = None


class TeamInvitationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    user_id: Optional[str] = Field(default=None, alias="userId")
    team_name: Optional[str] = Field(default=None, alias="teamName")
    inviter_name: Optional[str] = Field(default=None, alias="inviterName")
