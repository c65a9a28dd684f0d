"""
Group Invitation Use Case DTOs (Data Transfer Objects)

Command and Response classes for the group invitation workflows.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel


# ============================================================================
# Commands
# ============================================================================


class ActingUser(BaseModel):
    """Authenticated user on whose behalf a use case runs"""

    id: UUID
    email: str


# ============================================================================
# Response DTOs
# ============================================================================


class GroupInvitationResponse(BaseModel):
    """Response for create group invitation use case; carries the secret code"""

    invitation_id: str
    group_id: str
    email: str
    code: str
    sent_at: Optional[str] = None
    created_at: str


class GroupInvitationInfo(BaseModel):
    """Outstanding invitation as shown to the group owner"""

    invitation_id: str
    email: str
    sent_at: Optional[str] = None
    created_at: str


class ListGroupInvitationsResponse(BaseModel):
    """Response for list group invitations use case"""

    invitations: list[GroupInvitationInfo]
    total: int


class OwnerInfo(BaseModel):
    """Group owner information in join response"""

    id: str
    email: str
    nickname: str


class JoinedGroupResponse(BaseModel):
    """Response for join group by invitation use case"""

    group_id: str
    name: str
    users_count: int
    role: str
    owner: Optional[OwnerInfo] = None


class MarkGroupInvitationSentResponse(BaseModel):
    """Response for mark group invitation sent use case"""

    invitation_id: str
    sent_at: str
