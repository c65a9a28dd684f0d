"""
Group Invitation Entity

Outstanding offer to join a group, redeemed with a numeric code.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, Field, Index, SQLModel

from .types import UTCDateTime

MAX_GROUP_INVITATIONS = 7


class GroupInvitation(SQLModel, table=True):
    """
    Group invitation entity - single-use, never expires.

    Business Rules:
    - Created only by the group owner
    - At most MAX_GROUP_INVITATIONS rows per group
    - At most one row per (group_id, email)
    - Deleted on redemption or together with the group
    - sent_at is written by the notifier, never required for redemption
    """

    __tablename__ = "group_invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    group_id: UUID = Field(foreign_key="groups.id", ondelete="CASCADE", nullable=False)
    email: str = Field(max_length=512, nullable=False)
    code: str = Field(max_length=128, nullable=False)

    sent_at: Optional[datetime] = Field(
        default=None, sa_column=Column(UTCDateTime(), nullable=True)
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(UTCDateTime(), nullable=False),
    )

    __table_args__ = (
        Index("group_invitations_group_emailx", "group_id", "email", unique=True),
    )
