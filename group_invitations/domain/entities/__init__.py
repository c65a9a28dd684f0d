"""
Group Domain Entities

All domain entities organized by model.
"""

from .enums import ParticipantRole, ParticipantSource

from .user import User
from .group import Group
from .participant import Participant
from .group_invitation import GroupInvitation, MAX_GROUP_INVITATIONS

__all__ = [
    # Enums
    "ParticipantRole",
    "ParticipantSource",
    # Entities
    "User",
    "Group",
    "Participant",
    "GroupInvitation",
    "MAX_GROUP_INVITATIONS",
]
