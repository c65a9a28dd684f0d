"""
Group Entity

A group owned by a single user.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlmodel import Column, Field, SQLModel

from .types import UTCDateTime


class Group(SQLModel, table=True):
    """
    Group entity - owned by user_id, joined by participants.

    Business Rules:
    - Only the owner may issue invitations
    - users_count always equals the number of participant rows
    """

    __tablename__ = "groups"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    name: str = Field(max_length=256)

    users_count: int = Field(default=0, nullable=False)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(UTCDateTime(), nullable=False),
    )
