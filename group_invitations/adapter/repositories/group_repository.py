from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from group_invitations.app.repositories.group_repository import IGroupRepository
from group_invitations.domain.entities import Group


class GroupRepository(IGroupRepository):
    """Group repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, group_id: UUID, for_update: bool = False) -> Optional[Group]:
        """Get group by ID; for_update renders SELECT ... FOR UPDATE where supported"""
        stmt = select(Group).where(Group.id == group_id)
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update(self, group: Group) -> Group:
        self.session.add(group)
        await self.session.flush()
        await self.session.refresh(group)
        return group
