"""
Group Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class ParticipantRole(str, Enum):
    """Role of a participant within a group"""

    ADMIN = "ADMIN"
    VIP = "VIP"
    MEMBER = "MEMBER"


class ParticipantSource(str, Enum):
    """How a participant joined the group"""

    admin = "admin"
    invitation = "invitation"
    payment = "payment"
    member = "member"
