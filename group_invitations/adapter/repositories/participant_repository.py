from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from group_invitations.app.repositories.participant_repository import (
    IParticipantRepository,
)
from group_invitations.domain.entities import Participant


class ParticipantRepository(IParticipantRepository):
    """Participant repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def count_by_group_id(self, group_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(Participant)
            .where(Participant.group_id == group_id)
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, participant: Participant) -> Participant:
        self.session.add(participant)
        await self.session.flush()
        await self.session.refresh(participant)
        return participant
