from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from group_invitations.app.repositories.group_invitation_repository import (
    IGroupInvitationRepository,
)
from group_invitations.domain.entities import GroupInvitation


class GroupInvitationRepository(IGroupInvitationRepository):
    """Group invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: UUID) -> Optional[GroupInvitation]:
        stmt = select(GroupInvitation).where(GroupInvitation.id == invitation_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_group_and_email(
        self, group_id: UUID, email: str
    ) -> Optional[GroupInvitation]:
        stmt = (
            select(GroupInvitation)
            .where(GroupInvitation.group_id == group_id, GroupInvitation.email == email)
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_group_id(self, group_id: UUID) -> List[GroupInvitation]:
        stmt = (
            select(GroupInvitation)
            .where(GroupInvitation.group_id == group_id)
            .order_by(GroupInvitation.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_by_group_id(self, group_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(GroupInvitation)
            .where(GroupInvitation.group_id == group_id)
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, invitation: GroupInvitation) -> GroupInvitation:
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def mark_sent(
        self, invitation: GroupInvitation, sent_at: datetime
    ) -> GroupInvitation:
        invitation.sent_at = sent_at
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def delete_by_id(self, invitation_id: UUID) -> None:
        stmt = delete(GroupInvitation).where(GroupInvitation.id == invitation_id)
        await self.session.execute(stmt)
