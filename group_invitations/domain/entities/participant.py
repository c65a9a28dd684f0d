"""
Participant Entity

Links a User to a Group with a role and the source of the membership.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlmodel import Column, Field, Index, SQLModel

from .types import UTCDateTime

from .enums import ParticipantRole, ParticipantSource


class Participant(SQLModel, table=True):
    """
    Participant entity - membership of a user in a group.

    Business Rules:
    - (group_id, user_id) must be unique
    - Removed together with the group
    - Participants created by invitation get the VIP role
    """

    __tablename__ = "participants"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    group_id: UUID = Field(
        foreign_key="groups.id", ondelete="CASCADE", nullable=False, index=True
    )
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    role: ParticipantRole = Field(nullable=False)
    source: ParticipantSource = Field(nullable=False)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(UTCDateTime(), nullable=False),
    )

    __table_args__ = (
        Index("participants_group_userx", "group_id", "user_id", unique=True),
    )
