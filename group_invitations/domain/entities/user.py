"""
User Entity

Read model of a person; owned by the membership subsystem.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlmodel import Column, Field, SQLModel

from .types import UTCDateTime


class User(SQLModel, table=True):
    """
    User entity - a person who can own or join groups.

    Business Rules:
    - Email must be unique across all users
    - Invitations are matched against the user's email
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=512)
    nickname: str = Field(default="", max_length=64)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(UTCDateTime(), nullable=False),
    )
