"""
Group Invitation Use Cases

Issuing, redeeming and tracking group invitations.
"""

from .create_group_invitation_use_case import CreateGroupInvitationUseCase
from .deliver_group_invitation_use_case import DeliverGroupInvitationUseCase
from .dtos import (
    ActingUser,
    GroupInvitationInfo,
    GroupInvitationResponse,
    JoinedGroupResponse,
    ListGroupInvitationsResponse,
    MarkGroupInvitationSentResponse,
    OwnerInfo,
)
from .join_group_by_invitation_use_case import JoinGroupByInvitationUseCase
from .list_group_invitations_use_case import ListGroupInvitationsUseCase
from .mark_group_invitation_sent_use_case import MarkGroupInvitationSentUseCase

__all__ = [
    "CreateGroupInvitationUseCase",
    "DeliverGroupInvitationUseCase",
    "JoinGroupByInvitationUseCase",
    "ListGroupInvitationsUseCase",
    "MarkGroupInvitationSentUseCase",
    "ActingUser",
    "GroupInvitationResponse",
    "GroupInvitationInfo",
    "ListGroupInvitationsResponse",
    "JoinedGroupResponse",
    "OwnerInfo",
    "MarkGroupInvitationSentResponse",
]
