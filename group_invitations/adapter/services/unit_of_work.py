from sqlmodel.ext.asyncio.session import AsyncSession

from group_invitations.adapter.repositories.group_invitation_repository import (
    GroupInvitationRepository,
)
from group_invitations.adapter.repositories.group_repository import GroupRepository
from group_invitations.adapter.repositories.participant_repository import (
    ParticipantRepository,
)
from group_invitations.adapter.repositories.user_repository import UserRepository
from group_invitations.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        self.users = UserRepository(self.session)
        self.groups = GroupRepository(self.session)
        self.participants = ParticipantRepository(self.session)
        self.group_invitations = GroupInvitationRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # no-op after a successful commit
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
