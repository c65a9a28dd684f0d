from abc import ABC, abstractmethod
from uuid import UUID

from group_invitations.domain.entities import Participant


class IParticipantRepository(ABC):
    """Participant repository interface - application layer"""

    @abstractmethod
    async def count_by_group_id(self, group_id: UUID) -> int:
        """Count participants of a group"""
        pass

    @abstractmethod
    async def create(self, participant: Participant) -> Participant:
        """Create a new participant"""
        pass
