from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from group_invitations.domain.entities import Group


class IGroupRepository(ABC):
    """Group repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, group_id: UUID, for_update: bool = False) -> Optional[Group]:
        """Get group by ID, optionally locking the row until the transaction ends"""
        pass

    @abstractmethod
    async def update(self, group: Group) -> Group:
        """Update existing group"""
        pass
