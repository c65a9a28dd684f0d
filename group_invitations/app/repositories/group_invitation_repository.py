from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from group_invitations.domain.entities import GroupInvitation


class IGroupInvitationRepository(ABC):
    """Group invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[GroupInvitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_group_and_email(
        self, group_id: UUID, email: str
    ) -> Optional[GroupInvitation]:
        """Get the invitation of a group for an email"""
        pass

    @abstractmethod
    async def get_by_group_id(self, group_id: UUID) -> List[GroupInvitation]:
        """Get all invitations for a group, oldest first"""
        pass

    @abstractmethod
    async def count_by_group_id(self, group_id: UUID) -> int:
        """Count invitations for a group"""
        pass

    @abstractmethod
    async def create(self, invitation: GroupInvitation) -> GroupInvitation:
        """Create a new invitation; constraint violations propagate"""
        pass

    @abstractmethod
    async def mark_sent(
        self, invitation: GroupInvitation, sent_at: datetime
    ) -> GroupInvitation:
        """Record when the invitation email was dispatched"""
        pass

    @abstractmethod
    async def delete_by_id(self, invitation_id: UUID) -> None:
        """Delete invitation by ID, no-op if already gone"""
        pass
